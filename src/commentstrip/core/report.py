from __future__ import annotations

"""
Per-run stripping report.

Token fields are filled only when `--stats` or `--report` asked for token
accounting; otherwise they stay None.
"""

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from commentstrip.processing.scanner import ScanResult


@dataclass
class FileStats:
    path: str
    chars_in: int
    chars_out: int
    lines_in: int
    lines_out: int
    final_state: str = "code"
    tokens_in: Optional[int] = None
    tokens_out: Optional[int] = None

    @classmethod
    def from_scan(cls, path: str, source: str, result: ScanResult) -> 'FileStats':
        return cls(
            path=path,
            chars_in=len(source),
            chars_out=len(result.text),
            lines_in=source.count("\n"),
            lines_out=result.text.count("\n"),
            final_state=str(result.final_state),
        )

    @property
    def chars_removed(self) -> int:
        return self.chars_in - self.chars_out

    @property
    def terminated(self) -> bool:
        return self.final_state == "code"


@dataclass
class StripReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files: List[FileStats] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {"discovery": 0.0, "strip": 0.0, "write": 0.0, "tokens": 0.0}
    )
    token_model: Optional[str] = None

    def add_file(self, stats: FileStats) -> None:
        self.files.append(stats)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    @property
    def unterminated(self) -> List[FileStats]:
        return [f for f in self.files if not f.terminated]

    @property
    def chars_in(self) -> int:
        return sum(f.chars_in for f in self.files)

    @property
    def chars_out(self) -> int:
        return sum(f.chars_out for f in self.files)

    def _sum_tokens(self, attr: str) -> Optional[int]:
        values = [getattr(f, attr) for f in self.files]
        if not values or any(v is None for v in values):
            return None
        return sum(values)

    @property
    def tokens_in(self) -> Optional[int]:
        return self._sum_tokens("tokens_in")

    @property
    def tokens_out(self) -> Optional[int]:
        return self._sum_tokens("tokens_out")

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary_lines(self) -> List[str]:
        """Human-readable totals, one entry per line."""
        lines = [
            f"files: {len(self.files)}",
            f"chars: {self.chars_in} -> {self.chars_out} (-{self.chars_in - self.chars_out})",
        ]
        t_in, t_out = self.tokens_in, self.tokens_out
        if t_in is not None and t_out is not None:
            lines.append(f"tokens ({self.token_model}): {t_in} -> {t_out} (-{t_in - t_out})")
        for f in self.unterminated:
            lines.append(f"unterminated: {f.path} ended in {f.final_state}")
        for err in self.errors:
            lines.append(f"error: {err}")
        return lines

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "files_total": len(self.files),
                "chars_in": self.chars_in,
                "chars_out": self.chars_out,
                "tokens_in": self.tokens_in,
                "tokens_out": self.tokens_out,
                "token_model": self.token_model,
                "time_by_stage": self.time_by_stage,
                "unterminated": [f.path for f in self.unterminated],
                "errors": self.errors,
                "files": [asdict(f) for f in self.files],
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: StripReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
