# src/commentstrip/utils/paths.py
"""
paths – Small path helpers shared by the walker and the runner.
"""

from __future__ import annotations

from pathlib import Path

STDIN_TOKEN = "-"


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component)."""
    return any(part.startswith(".") and part not in (".", "..") for part in p.parts)


def is_within_dir(path: Path, parent: Path) -> bool:
    """Return True if *path* is contained inside *parent*."""
    try:
        path.resolve().relative_to(Path(parent).resolve())
        return True
    except ValueError:
        return False


def is_stdin_token(token: str | None) -> bool:
    return (token or "").strip() == STDIN_TOKEN


def display_path(path: Path | None, *, root: Path | None = None) -> str:
    """Return *path* relative to *root* when possible, '<stdin>' for None."""
    if path is None:
        return "<stdin>"
    if root is not None:
        try:
            return str(path.resolve().relative_to(root.resolve()))
        except ValueError:
            pass
    return str(path)
