from __future__ import annotations

"""Protocol-aware include path normalization.

Include paths use the grammar ``[scheme://]segment(/segment)*``. Segments
are separated by ``/`` or ``\\``; ``.`` segments are dropped and ``..`` pops
the previous segment as soon as it is read, so a normalized path never holds
either of them.
"""

import re
from typing import List, Optional, Tuple, Union

_PROTOCOL_RE = re.compile(r"^(\w+)://")
_SEPARATORS_RE = re.compile(r"[\\/]")


def split_protocol(raw: str) -> Tuple[Optional[str], str]:
    """Split ``scheme://rest`` into ``(scheme, rest)``; ``(None, raw)`` otherwise."""
    m = _PROTOCOL_RE.match(raw)
    if m is None:
        return None, raw
    return m.group(1), raw[m.end():]


class IncludePath:
    """Normalized, protocol-qualified path used to resolve includes.

    Attributes:
        protocol: Scheme name without the ``://`` suffix, or None.
        components: Ordered path segments, never empty strings, ``.`` or ``..``.
        rooted: True when the path body started with a separator.
    """

    __slots__ = ("protocol", "components", "rooted")

    def __init__(self, raw: str = "") -> None:
        protocol, body = split_protocol(raw)
        self.protocol: Optional[str] = protocol
        self.rooted: bool = body[:1] in ("/", "\\")
        self.components: List[str] = []
        for component in _SEPARATORS_RE.split(body):
            self._push(component)

    def _push(self, component: str) -> None:
        if not component or component == ".":
            return
        if component == "..":
            self.pop()
        else:
            self.components.append(component)

    @classmethod
    def coerce(cls, value: Union[str, "IncludePath"]) -> "IncludePath":
        return value if isinstance(value, IncludePath) else cls(value)

    def copy(self) -> "IncludePath":
        clone = IncludePath.__new__(IncludePath)
        clone.protocol = self.protocol
        clone.rooted = self.rooted
        clone.components = list(self.components)
        return clone

    def join(self, other: Union[str, "IncludePath"]) -> "IncludePath":
        """Return a clone of this path with the relative path *other* appended.

        Raises:
            ValueError: If *other* carries its own protocol.
        """
        if isinstance(other, IncludePath):
            if other.protocol is not None:
                raise ValueError(f"cannot join a protocol-qualified path: {other}")
            parts = other.components
        else:
            protocol, body = split_protocol(other)
            if protocol is not None:
                raise ValueError(f"cannot join a protocol-qualified path: {other}")
            parts = _SEPARATORS_RE.split(body)

        result = self.copy()
        for component in parts:
            result._push(component)
        return result

    def pop(self) -> Optional[str]:
        """Remove and return the last component (None when there is none)."""
        if not self.components:
            return None
        return self.components.pop()

    def dirname(self) -> "IncludePath":
        result = self.copy()
        result.pop()
        return result

    @property
    def name(self) -> str:
        return self.components[-1] if self.components else ""

    def __str__(self) -> str:
        body = "/".join(self.components)
        if self.rooted:
            body = "/" + body
        if self.protocol is None:
            return body
        return f"{self.protocol}://{body}"

    def __repr__(self) -> str:
        return f"IncludePath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncludePath):
            return NotImplemented
        return (self.protocol, self.rooted, self.components) == (other.protocol, other.rooted, other.components)

    def __hash__(self) -> int:
        return hash((self.protocol, self.rooted, tuple(self.components)))
