from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class StripOptions:
    """Everything one stripping run needs, already resolved from CLI/env."""
    paths: Sequence[str] = ()
    suffixes: Sequence[str] = ()
    exclude_suffixes: Sequence[str] = ()
    exclude_dirs: Sequence[str] = ()
    output: Optional[Path] = None
    in_place: bool = False
    header: bool = False
    count_tokens: bool = False
    token_model: Optional[str] = None
    header_root: Optional[Path] = None
