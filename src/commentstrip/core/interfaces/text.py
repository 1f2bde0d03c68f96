from __future__ import annotations
"""Scanner protocol definitions."""

from typing import Protocol, runtime_checkable

from commentstrip.processing.scanner import ScanResult


@runtime_checkable
class ScannerProtocol(Protocol):
    """Protocol for comment scanners.

    Implementations must be total over `str`: they never raise on malformed
    input and report where they stopped through `ScanResult.final_state`.
    """

    def scan(self, text: str) -> ScanResult:
        ...

    def obfuscate(self, text: str) -> str:
        ...
