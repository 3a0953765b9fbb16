from .compiler import ShaderCompilerProtocol
from .loading import ProtocolLoader, ProtocolRegistryProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'ShaderCompilerProtocol',
    'ProtocolLoader',
    'ProtocolRegistryProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
