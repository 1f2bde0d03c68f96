from __future__ import annotations
"""C-like comment scanner.

Single pass, one character of lookahead. Line ('// ...') and block
('/* ... */') comments are dropped while everything else, including
comment-like sequences inside single or double quoted literals, is copied
through unchanged.

Notes:
    - The newline that ends a line comment is kept, so line numbers of the
      surrounding code do not move.
    - A quote preceded by a backslash does not close a literal. Only the
      previous character is inspected, so a literal ending in an escaped
      backslash (``"a\\\\"``) is not closed where a compiler would close it.
    - Unterminated comments and literals are not errors: the scan stops at
      end of input and `ScanResult.final_state` tells where it stopped.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional

QUOTES = ('"', "'")


class ScanMode(Enum):
    CODE = auto()  # Normal code
    SINGLE_LINE_COMMENT = auto()  # Inside // comment
    MULTI_LINE_COMMENT = auto()  # Inside /* */ comment
    STRING = auto()  # Inside a quoted literal


@dataclass(frozen=True)
class ScanState:
    """Scanner state; `quote` is only set for `ScanMode.STRING`."""

    mode: ScanMode
    quote: Optional[str] = None

    CODE: ClassVar['ScanState']
    SINGLE_LINE_COMMENT: ClassVar['ScanState']
    MULTI_LINE_COMMENT: ClassVar['ScanState']

    @classmethod
    def string(cls, quote: str) -> 'ScanState':
        return cls(ScanMode.STRING, quote)

    def __str__(self) -> str:
        if self.mode is ScanMode.STRING:
            return f'string({self.quote})'
        return self.mode.name.lower()


ScanState.CODE = ScanState(ScanMode.CODE)
ScanState.SINGLE_LINE_COMMENT = ScanState(ScanMode.SINGLE_LINE_COMMENT)
ScanState.MULTI_LINE_COMMENT = ScanState(ScanMode.MULTI_LINE_COMMENT)


@dataclass(frozen=True)
class ScanResult:
    text: str
    final_state: ScanState
    consumed: int

    @property
    def terminated(self) -> bool:
        """False when the input ended inside a comment or a literal."""
        return self.final_state.mode is ScanMode.CODE

    @property
    def removed(self) -> int:
        return self.consumed - len(self.text)


class Obfuscator:
    """Remove comments from C-like source code.

    Instances hold no scan state; every call starts in `ScanState.CODE`
    with an empty output buffer, so one instance can be shared freely.
    """

    def scan(self, text: str) -> ScanResult:
        out: list[str] = []
        state = ScanState.CODE
        prev: Optional[str] = None
        i = 0
        n = len(text)

        while i < n:
            ch = text[i]
            nxt = text[i + 1] if i + 1 < n else None
            i += 1
            mode = state.mode

            if mode is ScanMode.CODE:
                if ch == '/' and nxt == '/':
                    state = ScanState.SINGLE_LINE_COMMENT
                    ch = nxt
                    i += 1
                elif ch == '/' and nxt == '*':
                    state = ScanState.MULTI_LINE_COMMENT
                    ch = nxt
                    i += 1
                elif ch in QUOTES:
                    out.append(ch)
                    state = ScanState.string(ch)
                else:
                    out.append(ch)

            elif mode is ScanMode.SINGLE_LINE_COMMENT:
                if ch == '\n':
                    out.append(ch)
                    state = ScanState.CODE

            elif mode is ScanMode.MULTI_LINE_COMMENT:
                if ch == '*' and nxt == '/':
                    state = ScanState.CODE
                    ch = nxt
                    i += 1

            else:
                out.append(ch)
                if ch == state.quote and prev != '\\':
                    state = ScanState.CODE

            prev = ch

        return ScanResult(text=''.join(out), final_state=state, consumed=n)

    def obfuscate(self, text: str) -> str:
        """Return *text* with // and /* */ comments removed."""
        return self.scan(text).text


_DEFAULT = Obfuscator()


def obfuscate(text: str) -> str:
    """Module-level shortcut for `Obfuscator().obfuscate(text)`."""
    return _DEFAULT.obfuscate(text)
