from __future__ import annotations
"""Suffix utilities for the directory walker.

Tokens from `-s/--suffix` and `-S/--exclude-suffix` are normalized here:

    * Tokens WITHOUT a dot are bare extensions and get a leading dot:
      "c" -> ".c".
    * Tokens WITH a dot are filename tails and are kept as given:
      ".h" -> ".h", "config.js" -> "config.js".

Matching uses `str.endswith(...)` over the basename, so both forms work.
"""

from typing import Iterable, Sequence, Set, Tuple


def normalize_suffixes(suffixes: Sequence[str] | None) -> list[str]:
    """Normalize raw suffix tokens, dropping blanks."""
    if not suffixes:
        return []
    out: list[str] = []
    for raw in suffixes:
        s = (raw or "").strip()
        if not s:
            continue
        out.append(s if "." in s else f".{s}")
    return out


def compute_suffix_filters(
    include: Sequence[str] | None,
    exclude: Sequence[str] | None,
    *,
    default_include: Iterable[str] = (),
) -> Tuple[Set[str], Set[str]]:
    """Return (include, exclude) sets.

    `default_include` applies when the user gave no include token, so a
    directory walk only picks files some cleaner understands. A suffix the
    user both includes and excludes stays included; defaults never mask an
    exclusion.
    """
    user_inc = set(normalize_suffixes(include))
    exc = set(normalize_suffixes(exclude)) - user_inc
    inc = user_inc or set(normalize_suffixes(list(default_include)))
    return (inc, exc)


def is_suffix_allowed(filename: str, include: Set[str], exclude: Set[str]) -> bool:
    """Return True if *filename* passes the include/exclude filters.

    An empty include set allows everything; any exclude match rejects.
    """
    lowered = filename.lower()
    if include and (not any((lowered.endswith(s.lower()) for s in include))):
        return False
    if any((lowered.endswith(s.lower()) for s in exclude)):
        return False
    return True
