from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class ReaderProtocol(Protocol):
    """Source provider: return the full text of a file, or None when unusable."""

    def read(self, path: Path) -> Optional[str]:
        ...

    def read_stream(self, stream: TextIO) -> str:
        ...


@runtime_checkable
class SinkProtocol(Protocol):
    """Sink: accept the stripped text for a file path, or stdout when None."""

    def write(self, path: Optional[Path], text: str) -> None:
        ...
