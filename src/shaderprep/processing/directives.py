from __future__ import annotations

"""Recognition of `include_once` directives.

Accepted forms, one per line, with optional leading whitespace:

    #include_once "lib/noise.glsl"
    #include_once <lib/noise.glsl>
    #pragma include_once "lib/noise.glsl"
    #include_once lib/noise.glsl

Nothing else is interpreted; other preprocessor lines are left for the
compiler.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_INCLUDE_RE = re.compile(
    r'^\s*#\s*(?:pragma\s+)?include_once *[ <"](?P<filename>[^\n\r"<>]+)[>"]?'
)


@dataclass(frozen=True)
class IncludeDirective:
    line: int
    target: str


def match_include(line: str) -> Optional[str]:
    """Return the include target named on *line*, or None."""
    m = _INCLUDE_RE.match(line)
    if m is None:
        return None
    target = m.group("filename").strip()
    return target or None


def scan_includes(lines: Iterable[str]) -> Iterator[IncludeDirective]:
    """Yield every include directive in *lines*, in line order."""
    for idx, line in enumerate(lines):
        target = match_include(line)
        if target is not None:
            yield IncludeDirective(line=idx, target=target)
