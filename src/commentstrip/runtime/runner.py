from __future__ import annotations
"""
StripRunner – drive one stripping run end to end.

Discovery (FileWalker) → read (SourceReader) → strip (cleaner registry) →
write (TextSink), recording a StripReport along the way. Standard input,
when requested, is processed before any file.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from commentstrip.constants import HEADER_DELIM
from commentstrip.core.interfaces import ReaderProtocol, SinkProtocol, WalkerProtocol
from commentstrip.core.models import StripOptions
from commentstrip.core.report import FileStats, StageTimer, StripReport
from commentstrip.io.readers import SourceReader, TextSink
from commentstrip.io.walker import FileWalker
from commentstrip.logging.helpers import get_logger
from commentstrip.processing.cleaner_registry import LanguageCleanerRegistry
from commentstrip.processing.scanner import ScanResult
from commentstrip.tokens import DEFAULT_TOKEN_MODEL, TokenBudgetEstimator
from commentstrip.utils.paths import display_path, is_stdin_token


class StripRunner:
    def __init__(
        self,
        *,
        registry: Optional[LanguageCleanerRegistry] = None,
        walker: Optional[WalkerProtocol] = None,
        reader: Optional[ReaderProtocol] = None,
        sink: Optional[SinkProtocol] = None,
        estimator: Optional[TokenBudgetEstimator] = None,
        stdin: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('runner')
        self._registry = registry or LanguageCleanerRegistry.default()
        self._walker = walker or FileWalker(default_suffixes=self._registry.suffixes(), logger=self._log)
        self._reader = reader or SourceReader(logger=self._log)
        self._sink = sink or TextSink(logger=self._log)
        self._estimator = estimator
        self._stdin = stdin

    @property
    def estimator(self) -> TokenBudgetEstimator:
        if self._estimator is None:
            self._estimator = TokenBudgetEstimator(logger=self._log)
        return self._estimator

    def _strip(self, path: Optional[Path], source: str, opts: StripOptions, report: StripReport) -> ScanResult:
        suffix = path.suffix if path is not None else ''
        label = display_path(path, root=opts.header_root)
        with StageTimer(report, 'strip'):
            result = self._registry.cleaner_for(suffix).strip(source, filename=label)

        stats = FileStats.from_scan(label, source, result)
        if opts.count_tokens:
            with StageTimer(report, 'tokens'):
                delta = self.estimator.delta(source, result.text, model=report.token_model or DEFAULT_TOKEN_MODEL)
            stats.tokens_in, stats.tokens_out = delta.tokens_in, delta.tokens_out
        report.add_file(stats)

        if not result.terminated:
            self._log.warning('⚠  %s: input ends inside %s', label, result.final_state)
        self._log.debug('stripped %s: %d → %d chars (-%d)', label, stats.chars_in, stats.chars_out, stats.chars_removed)
        return result

    def _render(self, path: Optional[Path], body: str, opts: StripOptions) -> str:
        if not opts.header:
            return body
        label = display_path(path, root=opts.header_root)
        if body and not body.endswith('\n'):
            body += '\n'
        return f'{HEADER_DELIM}{label} {HEADER_DELIM}\n{body}'

    def run(self, opts: StripOptions) -> Tuple[str, StripReport]:
        """Strip every input of *opts*; return (combined output, report).

        With `in_place` each file is rewritten and the combined output is
        empty; otherwise the combined output goes to `opts.output` or stdout.
        """
        report = StripReport(token_model=(opts.token_model or DEFAULT_TOKEN_MODEL) if opts.count_tokens else None)
        use_stdin = not opts.paths or any(is_stdin_token(p) for p in opts.paths)
        file_args = [Path(p) for p in opts.paths if not is_stdin_token(p)]

        with StageTimer(report, 'discovery'):
            files = self._walker.gather_files(
                file_args,
                [Path(d) for d in opts.exclude_dirs],
                list(opts.suffixes),
                list(opts.exclude_suffixes),
            )

        parts: List[str] = []
        if use_stdin:
            source = self._reader.read_stream(self._stdin or sys.stdin)
            parts.append(self._render(None, self._strip(None, source, opts, report).text, opts))

        for fp in files:
            source = self._reader.read(fp)
            if source is None:
                report.add_error(f'unreadable: {fp}')
                continue
            result = self._strip(fp, source, opts, report)
            if opts.in_place:
                if result.text != source:
                    with StageTimer(report, 'write'):
                        self._sink.write(fp, result.text)
                continue
            parts.append(self._render(fp, result.text, opts))

        output = ''.join(parts)
        if not opts.in_place:
            with StageTimer(report, 'write'):
                self._sink.write(opts.output, output)

        report.finish()
        return (output, report)
