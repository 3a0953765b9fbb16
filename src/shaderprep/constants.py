from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Scheme used when an include path carries no `scheme://` prefix.
DEFAULT_PROTOCOL: str = 'file'

# Nesting limit for include resolution (top-level file is depth 0).
DEFAULT_MAX_DEPTH: int = 64

DEFAULT_ENCODING: str = 'utf-8'

ENV_MAX_DEPTH: str = 'SHADERPREP_MAX_DEPTH'
ENV_ENCODING: str = 'SHADERPREP_ENCODING'
ENV_TRACE_IO: str = 'SHADERPREP_TRACE_IO'
ENV_VERSION: str = 'SHADERPREP_VERSION'
ENV_LOG_JSON: str = 'SHADERPREP_LOG_JSON'
ENV_LOG_LEVEL: str = 'SHADERPREP_LOG_LEVEL'
