from __future__ import annotations

"""Exception hierarchy for include resolution and compilation.

Every error raised while resolving a file is terminal for the enclosing
`IncludeResolver.resolve` call. Messages always embed the offending path so
a failure deep inside an include tree can be traced back.
"""

from typing import Optional, Sequence


class ShaderPrepError(Exception):
    """Base class for all shaderprep errors."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class PathResolutionError(ShaderPrepError):
    """Raised when a local path cannot be canonicalized."""


class ReadError(ShaderPrepError):
    """Raised when a protocol backend fails to produce content."""


class UnsupportedProtocolError(ShaderPrepError):
    """Raised when no backend is registered for a scheme."""

    def __init__(self, protocol: str, *, path: Optional[str] = None) -> None:
        super().__init__(f"Unsupported protocol: {protocol} ({path})", path=path)
        self.protocol = protocol


class EmptyFileError(ShaderPrepError):
    """Raised when a loaded file has no content.

    An empty file would produce a zero-span segment, which breaks the range
    invariants of `TextWithProvenance`.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Empty files are not supported: {path}", path=path)


class ProtocolAlreadyRegisteredError(ShaderPrepError):
    """Raised when registering a scheme twice."""

    def __init__(self, protocol: str) -> None:
        super().__init__(f"Protocol is already registered: {protocol}")
        self.protocol = protocol


class IncludeDepthError(ShaderPrepError):
    """Raised when include nesting exceeds the configured maximum."""

    def __init__(self, chain: Sequence[str], max_depth: int) -> None:
        trail = " -> ".join(chain)
        super().__init__(
            f"Include depth limit ({max_depth}) exceeded: {trail}",
            path=chain[-1] if chain else None,
        )
        self.chain = tuple(chain)
        self.max_depth = max_depth


class CompileError(ShaderPrepError):
    """Raised when the external compiler rejects the merged source.

    Attributes:
        raw_log: Diagnostic text exactly as returned by the compiler.
        log: Diagnostic text with line markers mapped back to original files.
    """

    def __init__(self, log: str, *, raw_log: str = "") -> None:
        super().__init__(log)
        self.log = log
        self.raw_log = raw_log or log
