from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .sniffer import BinarySnifferProtocol
from .walker import ConcatenatorProtocol, IgnoreMatcherProtocol, WalkerProtocol

__all__ = [
    'BinarySnifferProtocol',
    'ConcatenatorProtocol',
    'IgnoreMatcherProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'WalkerProtocol',
]
