from __future__ import annotations

"""
Source provider and sink for the stripping run.

Both sides open files with ``newline=''`` so CRLF and lone CR line endings
reach the scanner and the output exactly as they were on disk.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from commentstrip.core.interfaces import ReaderProtocol, SinkProtocol
from commentstrip.logging.helpers import get_logger, trace_io


class SourceReader(ReaderProtocol):
    def __init__(self, *, encoding: str = 'utf-8', logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.reader')

    def read(self, path: Path) -> Optional[str]:
        try:
            with path.open('r', encoding=self._encoding, newline='') as fh:
                text = fh.read()
        except UnicodeDecodeError:
            self._log.warning('✘ %s: binary or non-%s file skipped.', path, self._encoding)
            return None
        except OSError as exc:
            self._log.error('⚠  could not read %s (%s)', path, exc)
            return None
        trace_io(self._log, 'read', path=str(path), chars=len(text))
        return text

    def read_stream(self, stream: TextIO) -> str:
        text = stream.read()
        trace_io(self._log, 'read stdin', chars=len(text))
        return text


class TextSink(SinkProtocol):
    def __init__(self, *, encoding: str = 'utf-8', stream: Optional[TextIO] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._stream = stream
        self._log = logger or get_logger('io.sink')

    def write(self, path: Optional[Path], text: str) -> None:
        if path is None:
            out = self._stream or sys.stdout
            out.write(text)
            out.flush()
            trace_io(self._log, 'wrote stdout', chars=len(text))
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding=self._encoding, newline='') as fh:
            fh.write(text)
        trace_io(self._log, 'wrote', path=str(path), chars=len(text))
