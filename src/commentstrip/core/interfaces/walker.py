from __future__ import annotations
from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """File discovery for the stripping run."""

    def gather_files(
        self,
        add_path: List[Path],
        exclude_dirs: List[Path],
        suffixes: List[str],
        exclude_suf: List[str],
    ) -> List[Path]:
        """Collect candidate files honoring include/exclude suffix rules."""
        ...
