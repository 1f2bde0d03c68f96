from __future__ import annotations
"""
LanguageCleanerRegistry

Map filename suffixes to comment cleaners so the runner and the walker do
not carry per-language conditionals.

Suffixes may be registered eagerly or lazily (a builder invoked on first
access). The default registry binds the C-like family to the comment
scanner; `cleaner_for` falls back to that scanner for files the user named
explicitly even when their suffix is unknown.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Tuple

from commentstrip.core.interfaces.text import ScannerProtocol
from commentstrip.processing.scanner import Obfuscator, ScanResult

C_LIKE_SUFFIXES: Tuple[str, ...] = (
    '.c', '.h', '.cc', '.cpp', '.cxx', '.hpp',
    '.java', '.cs', '.go', '.rs',
    '.js', '.jsx', '.ts', '.tsx',
    '.swift', '.kt', '.kts', '.scala',
    '.php', '.css', '.scss', '.dart',
)


class CleanerProtocol(Protocol):
    def strip(self, source: str, *, filename: Optional[str] = None) -> ScanResult:
        ...


@dataclass(frozen=True)
class _CleanerRegItem:
    cleaner: CleanerProtocol
    priority: int = 0


class CLikeCleaner(CleanerProtocol):
    def __init__(self, scanner: Optional[ScannerProtocol] = None) -> None:
        self._scanner: ScannerProtocol = scanner or Obfuscator()

    def strip(self, source: str, *, filename: Optional[str] = None) -> ScanResult:
        return self._scanner.scan(source)


def _normalize(suffix: str) -> str:
    sufx = suffix if suffix.startswith('.') else f'.{suffix}'
    return sufx.lower()


class LanguageCleanerRegistry:
    def __init__(self, *, fallback: Optional[CleanerProtocol] = None) -> None:
        self._by_suffix: Dict[str, _CleanerRegItem] = {}
        self._lazy_builders: Dict[str, tuple[Callable[[], CleanerProtocol], int]] = {}
        self._fallback: CleanerProtocol = fallback or CLikeCleaner()

    @classmethod
    def default(cls) -> 'LanguageCleanerRegistry':
        """Build a registry with lazy C-like cleaners for the usual suffixes."""
        reg = cls()
        for suf in C_LIKE_SUFFIXES:
            reg.register_lazy(suf, builder=CLikeCleaner, priority=0)
        return reg

    def _priority_of(self, key: str) -> Optional[int]:
        item = self._by_suffix.get(key)
        if item is not None:
            return item.priority
        lazy = self._lazy_builders.get(key)
        return lazy[1] if lazy is not None else None

    def _wins(self, key: str, priority: int) -> bool:
        current = self._priority_of(key)
        return current is None or priority >= current

    def register(self, suffix: str, cleaner: CleanerProtocol, *, priority: int = 0) -> None:
        """Bind *cleaner* to *suffix* unless a higher-priority entry holds it."""
        key = _normalize(suffix)
        if not self._wins(key, priority):
            return
        self._by_suffix[key] = _CleanerRegItem(cleaner=cleaner, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(self, suffix: str, *, builder: Callable[[], CleanerProtocol], priority: int = 0) -> None:
        """Like `register`, but *builder* runs on the first lookup."""
        key = _normalize(suffix)
        if not self._wins(key, priority):
            return
        self._lazy_builders[key] = (builder, priority)
        self._by_suffix.pop(key, None)

    def for_suffix(self, suffix: str) -> Optional[CleanerProtocol]:
        key = (suffix or '').lower()
        item = self._by_suffix.get(key)
        if item:
            return item.cleaner
        lazy = self._lazy_builders.pop(key, None)
        if lazy:
            builder, prio = lazy
            cleaner = builder()
            self._by_suffix[key] = _CleanerRegItem(cleaner=cleaner, priority=prio)
            return cleaner
        return None

    def cleaner_for(self, suffix: str) -> CleanerProtocol:
        return self.for_suffix(suffix) or self._fallback

    def suffixes(self) -> list[str]:
        """Return every registered suffix, built or still lazy."""
        return sorted(set(self._by_suffix) | set(self._lazy_builders))
