from __future__ import annotations

from typing import Any, Optional

from shaderprep.core.interfaces.compiler import ShaderCompilerProtocol
from shaderprep.core.interfaces.logging import LoggerLikeProtocol
from shaderprep.diagnostics.remapper import DiagnosticRemapper
from shaderprep.errors import CompileError
from shaderprep.logging.helpers import get_logger
from shaderprep.processing.provenance import TextWithProvenance


def compile_with_provenance(
        compiler: ShaderCompilerProtocol,
        includes: TextWithProvenance,
        *,
        line_base: int = 0,
        logger: Optional[LoggerLikeProtocol] = None,
) -> Any:
    """Compile the merged text and return the compiler's handle.

    Raises:
        CompileError: If the compiler rejects the source. `log` holds the
            diagnostics mapped back to the original files, `raw_log` the
            compiler output as received.
    """
    log = logger or get_logger('compile')
    result = compiler.compile(includes.text())
    if result.ok:
        return result.handle

    mapped = DiagnosticRemapper(includes, line_base=line_base).remap(result.log)
    log.debug('compilation failed for %s', ', '.join(sorted(includes.all_used_files())))
    raise CompileError(mapped, raw_log=result.log)
