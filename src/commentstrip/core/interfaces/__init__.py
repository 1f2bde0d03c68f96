from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import ReaderProtocol, SinkProtocol
from .text import ScannerProtocol
from .walker import WalkerProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ReaderProtocol',
    'SinkProtocol',
    'ScannerProtocol',
    'WalkerProtocol',
]
