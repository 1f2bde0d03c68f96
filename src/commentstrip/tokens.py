from __future__ import annotations
"""
Token accounting for `--stats` and `--report`.

Counts use the tiktoken encoding of the requested model, `cl100k_base` for
models tiktoken does not know, and a ~4 chars per token estimate when no
encoding can be loaded at all (tiktoken fetches its BPE files on first use).
"""

from dataclasses import dataclass
from typing import Dict, Optional

import tiktoken

from commentstrip.core.interfaces.logging import LoggerLikeProtocol
from commentstrip.logging.helpers import get_logger

DEFAULT_TOKEN_MODEL = 'gpt-4o'
FALLBACK_ENCODING = 'cl100k_base'


@dataclass(frozen=True)
class TokenDelta:
    tokens_in: int
    tokens_out: int

    @property
    def saved(self) -> int:
        return self.tokens_in - self.tokens_out


class TokenBudgetEstimator:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log: LoggerLikeProtocol = logger or get_logger('tokens')
        self._encodings: Dict[str, Optional[tiktoken.Encoding]] = {}

    def _encoding(self, model: str) -> Optional[tiktoken.Encoding]:
        if model in self._encodings:
            return self._encodings[model]
        enc: Optional[tiktoken.Encoding]
        try:
            enc = tiktoken.encoding_for_model(model)
        except KeyError:
            enc = self._load_fallback()
        except Exception as exc:
            self._log.warning('⚠  could not load tokenizer for %r: %s; estimating', model, exc)
            enc = None
        self._encodings[model] = enc
        return enc

    def _load_fallback(self) -> Optional[tiktoken.Encoding]:
        try:
            return tiktoken.get_encoding(FALLBACK_ENCODING)
        except Exception as exc:
            self._log.warning('⚠  could not load %s: %s; estimating', FALLBACK_ENCODING, exc)
            return None

    @staticmethod
    def estimate(text: str) -> int:
        if not text:
            return 0
        return max(1, (len(text) + 3) // 4)

    def count(self, text: str, *, model: str = DEFAULT_TOKEN_MODEL) -> int:
        """Return the token count of *text* for *model*."""
        enc = self._encoding(model)
        if enc is None:
            return self.estimate(text)
        return len(enc.encode(text, disallowed_special=()))

    def delta(self, before: str, after: str, *, model: str = DEFAULT_TOKEN_MODEL) -> TokenDelta:
        return TokenDelta(tokens_in=self.count(before, model=model), tokens_out=self.count(after, model=model))
