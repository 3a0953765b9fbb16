from __future__ import annotations

from typing import Protocol, runtime_checkable

from shaderprep.core.models import CompileResult


@runtime_checkable
class ShaderCompilerProtocol(Protocol):
    """Native compiler collaborator.

    Receives the merged source text and reports either success with an
    opaque handle, or failure with the raw multi-line info log.
    """

    def compile(self, source: str) -> CompileResult:
        ...
