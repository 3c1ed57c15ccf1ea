from .concat import ConcatenatorProtocol
from .logging import DebugSinkProtocol, LoggerFactoryProtocol
from .walker import WalkerProtocol

__all__ = [
    'ConcatenatorProtocol',
    'DebugSinkProtocol',
    'LoggerFactoryProtocol',
    'WalkerProtocol',
]
