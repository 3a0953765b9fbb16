from __future__ import annotations

from shaderprep.core.models import CompileResult, ResolverConfig, Segment
from shaderprep.core.interfaces.logging import LoggerFactoryProtocol
from shaderprep.core.paths import IncludePath
from shaderprep.diagnostics import DiagnosticRemapper, compile_with_provenance, remap_diagnostics
from shaderprep.errors import (
    CompileError,
    EmptyFileError,
    IncludeDepthError,
    PathResolutionError,
    ProtocolAlreadyRegisteredError,
    ReadError,
    ShaderPrepError,
    UnsupportedProtocolError,
)
from shaderprep.loading import IncludeResolver, LocalFileLoader, MemoryLoader, UrlLoader
from shaderprep.logging.helpers import get_logger, setup_base_logger
from shaderprep.processing.provenance import TextWithProvenance

__version__ = '0.1.0'


def resolve_file(
        path: str,
        *,
        config: ResolverConfig | None = None,
        logger_factory: LoggerFactoryProtocol | None = None,
) -> TextWithProvenance:
    """Resolve *path* with a default resolver configured from the environment."""
    resolver = IncludeResolver(config=config or ResolverConfig.from_env(), logger_factory=logger_factory)
    return resolver.resolve(path)


__all__ = [
    'CompileError',
    'CompileResult',
    'DiagnosticRemapper',
    'EmptyFileError',
    'IncludeDepthError',
    'IncludePath',
    'IncludeResolver',
    'LocalFileLoader',
    'MemoryLoader',
    'PathResolutionError',
    'ProtocolAlreadyRegisteredError',
    'ReadError',
    'ResolverConfig',
    'Segment',
    'ShaderPrepError',
    'TextWithProvenance',
    'UnsupportedProtocolError',
    'UrlLoader',
    'compile_with_provenance',
    'get_logger',
    'remap_diagnostics',
    'resolve_file',
    'setup_base_logger',
]
