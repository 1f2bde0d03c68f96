from __future__ import annotations

from commentstrip.constants import HEADER_DELIM
from commentstrip.processing.scanner import (
    Obfuscator,
    ScanMode,
    ScanResult,
    ScanState,
    obfuscate,
)

__version__ = '0.1.0'

from commentstrip.cli import CommentStrip, UnterminatedInputError  # noqa: E402
from commentstrip.processing.cleaner_registry import LanguageCleanerRegistry  # noqa: E402
from commentstrip.runtime.runner import StripRunner  # noqa: E402
from commentstrip.core.models import StripOptions  # noqa: E402

__all__ = [
    'CommentStrip',
    'HEADER_DELIM',
    'LanguageCleanerRegistry',
    'Obfuscator',
    'ScanMode',
    'ScanResult',
    'ScanState',
    'StripOptions',
    'StripRunner',
    'UnterminatedInputError',
    'obfuscate',
]
