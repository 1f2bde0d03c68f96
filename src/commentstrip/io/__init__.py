"""File discovery, source reading and output sinks."""
from .readers import SourceReader, TextSink
from .walker import FileWalker

__all__ = ['FileWalker', 'SourceReader', 'TextSink']
