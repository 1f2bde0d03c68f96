from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from commentstrip.constants import (
    ENV_DEBUG,
    ENV_JSON_LOGS,
    ENV_TOKEN_MODEL,
    EXIT_FATAL,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_UNTERMINATED,
)
from commentstrip.core.interfaces.logging import LoggerFactoryProtocol
from commentstrip.core.models import StripOptions
from commentstrip.core.report import StripReport
from commentstrip.io.readers import TextSink
from commentstrip.logging.factory import DefaultLoggerFactory
from commentstrip.logging.helpers import get_logger
from commentstrip.parsing.parser import _build_parser
from commentstrip.runtime.runner import StripRunner
from commentstrip.utils.paths import is_stdin_token


logger = get_logger('commentstrip')


class UnterminatedInputError(SystemExit):
    """Raised by `--strict` runs when an input ended inside a comment or literal."""

    def __init__(self, report: StripReport) -> None:
        super().__init__(EXIT_UNTERMINATED)
        self.report = report


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('commentstrip')


def _fatal(msg: str, code: int = EXIT_FATAL) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _log_level(ns: argparse.Namespace) -> int:
    if ns.quiet:
        return logging.ERROR
    if ns.verbose:
        return logging.DEBUG
    return logging.INFO


def _options_from_ns(ns: argparse.Namespace) -> StripOptions:
    """Validate the parsed flags and turn them into StripOptions."""
    paths = list(ns.paths or [])
    reads_stdin = not paths or any(is_stdin_token(p) for p in paths)
    if ns.in_place and reads_stdin:
        _fatal('--in-place needs file or directory paths, not standard input')
    if ns.in_place and ns.output:
        _fatal('--in-place and --output are mutually exclusive')
    for raw in paths:
        if not is_stdin_token(raw) and not Path(raw).exists():
            _fatal(f'input {raw} not found')

    count_tokens = bool(ns.stats or ns.report_path)
    return StripOptions(
        paths=paths,
        suffixes=ns.suffixes or [],
        exclude_suffixes=ns.exclude_suf or [],
        exclude_dirs=ns.exclude_dirs or [],
        output=Path(ns.output) if ns.output else None,
        in_place=bool(ns.in_place),
        header=bool(ns.header),
        count_tokens=count_tokens,
        token_model=ns.token_model or os.getenv(ENV_TOKEN_MODEL) or None,
        header_root=Path.cwd(),
    )


class CommentStrip:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, runner: Optional[StripRunner] = None) -> str:
        """Run the tool with an argv-like sequence and return the stripped text.

        Raises:
            UnterminatedInputError: with --strict when an input ended inside
                a comment or literal; output has already been written.
        """
        ns = _build_parser().parse_intermixed_args(list(argv))
        json_logs = bool(ns.json_logs) or os.getenv(ENV_JSON_LOGS) == '1'
        _configure_logging(json_logs, _log_level(ns))

        opts = _options_from_ns(ns)
        runner = runner or StripRunner(logger=get_logger('runner'))
        output, report = runner.run(opts)

        if ns.stats:
            for line in report.summary_lines():
                logger.info('✔ %s', line, extra={'context': {'stats': line}})
        if ns.report_path:
            TextSink(logger=logger).write(Path(ns.report_path), report.to_json())
            logger.info('✔ report written to %s', ns.report_path)

        if ns.strict and report.unterminated:
            logger.error('✘ %d input(s) end inside a comment or literal', len(report.unterminated))
            raise UnterminatedInputError(report)
        return output


def main() -> NoReturn:
    """Entry point for the `commentstrip` console script."""
    try:
        CommentStrip.run(sys.argv[1:])
        raise SystemExit(EXIT_OK)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        # Silence the flush-on-exit failure of a closed stdout.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(EXIT_OK)
    except SystemExit:
        raise
    except Exception as exc:
        if os.getenv(ENV_DEBUG) == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(EXIT_FATAL)


if __name__ == '__main__':
    main()
