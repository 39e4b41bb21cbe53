from .document import DocumentProtocol
from .filter import PathFilterProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import ReaderProtocol
from .walker import WalkerProtocol

__all__ = [
    'DocumentProtocol',
    'PathFilterProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ReaderProtocol',
    'WalkerProtocol',
]
