from __future__ import annotations

"""Public surface for shaderprep.core.

Value types and protocol contracts shared by the loading, processing and
diagnostics layers:

    from shaderprep.core import IncludePath, Segment, ResolverConfig
"""

from shaderprep.core.models import CompileResult, ResolverConfig, Segment
from shaderprep.core.paths import IncludePath, split_protocol
from shaderprep.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    ProtocolLoader,
    ProtocolRegistryProtocol,
    ShaderCompilerProtocol,
)

__all__ = [
    # Value types
    "CompileResult",
    "IncludePath",
    "ResolverConfig",
    "Segment",
    "split_protocol",
    # Protocols
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "ProtocolLoader",
    "ProtocolRegistryProtocol",
    "ShaderCompilerProtocol",
]
