from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

from commentstrip.core.interfaces import WalkerProtocol
from commentstrip.logging.helpers import get_logger, trace_io
from commentstrip.utils.suffixes import compute_suffix_filters, is_suffix_allowed
from commentstrip.utils.paths import is_hidden_path, is_within_dir


class FileWalker(WalkerProtocol):
    """Expand CLI paths into the list of files to strip.

    Files named explicitly are always kept. Directories are walked and their
    files filtered by suffix; `default_suffixes` applies when no include
    suffix was requested.
    """

    def __init__(self, *, default_suffixes: Iterable[str] = (), logger: Optional[logging.Logger] = None) -> None:
        self._default_suffixes = tuple(default_suffixes)
        self._log = logger or get_logger('io.walker')

    def gather_files(self, add_path: List[Path], exclude_dirs: List[Path], suffixes: List[str], exclude_suf: List[str]) -> List[Path]:
        collected: Set[Path] = set()
        inc_set, exc_set = compute_suffix_filters(suffixes, exclude_suf, default_include=self._default_suffixes)
        ex_dirs = {d.resolve() for d in exclude_dirs}

        def _dir_excluded(path: Path) -> bool:
            return any((is_within_dir(path, ex) for ex in ex_dirs))

        for root in add_path:
            if root.is_file():
                collected.add(root.resolve())
                continue
            if not root.exists():
                self._log.error('⚠  %s does not exist – skipped', root)
                continue
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = [d for d in dirnames if not d.startswith('.') and (not _dir_excluded(Path(dirpath, d)))]
                for fn in filenames:
                    fp = Path(dirpath, fn)
                    if is_hidden_path(fp.relative_to(root)) or _dir_excluded(fp):
                        continue
                    if not is_suffix_allowed(fp.name, inc_set, exc_set):
                        continue
                    collected.add(fp.resolve())

        files = sorted(collected, key=str)
        trace_io(self._log, 'gathered files', count=len(files))
        return files
