from .fs import PathResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import AssetReaderProtocol

__all__ = [
    'AssetReaderProtocol',
    'PathResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
