"""
commentstrip.utils – Small shared utilities (suffix filters, path helpers).
"""
from .suffixes import normalize_suffixes, compute_suffix_filters, is_suffix_allowed
from .paths import display_path, is_hidden_path, is_stdin_token, is_within_dir

__all__ = [
    "normalize_suffixes",
    "compute_suffix_filters",
    "is_suffix_allowed",
    "display_path",
    "is_hidden_path",
    "is_stdin_token",
    "is_within_dir",
]
