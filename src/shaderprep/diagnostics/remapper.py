from __future__ import annotations

"""Map compiler diagnostics on merged text back to the original files.

Compilers report positions as ``<source>(<line>) :`` markers into the text
they were given. `DiagnosticRemapper` prefixes every such line with the
include chain and the line number local to the file that produced it:

    File `util.glsl` included from File `main.frag` | Line 1 | 0(2) : error: foo

Lines without a marker, or with a line number outside the merged text, are
passed through untouched.
"""

import re
from typing import List

from shaderprep.processing.provenance import TextWithProvenance

_MARKER_RE = re.compile(r"^\s*(\d+)\((\d+)\)\s*:")


class DiagnosticRemapper:
    """Rewrite ``N(line) :`` diagnostics against a `TextWithProvenance`.

    Args:
        includes: Buffer whose `text()` was handed to the compiler.
        line_base: Number of the first line in the compiler's convention
            (0 or 1). Output line numbers use the same convention.
    """

    def __init__(self, includes: TextWithProvenance, *, line_base: int = 0) -> None:
        self._includes = includes
        self._base = int(line_base)

    def chain_at(self, line: int) -> str:
        """Render the include trail for merged *line*, innermost file first."""
        files = [s.original_file for s in reversed(self._includes.all_segments_at(line))]
        parts = [f"File `{f}` included from" for f in files[:-1]]
        parts.append(f"File `{files[-1]}`")
        return " ".join(parts)

    def remap_line(self, line: str) -> str:
        m = _MARKER_RE.match(line)
        if m is None:
            return line
        merged_line = int(m.group(2)) - self._base
        located = self._includes.file_and_line_at(merged_line)
        if located is None:
            return line
        _file, local_line = located
        return f"{self.chain_at(merged_line)} | Line {local_line + self._base} | {line}"

    def remap(self, log: str) -> str:
        out: List[str] = []
        for line in log.splitlines():
            out.append(self.remap_line(line) + "\n")
        return "".join(out)


def remap_diagnostics(log: str, includes: TextWithProvenance, *, line_base: int = 0) -> str:
    """Convenience wrapper around `DiagnosticRemapper.remap`."""
    return DiagnosticRemapper(includes, line_base=line_base).remap(log)

