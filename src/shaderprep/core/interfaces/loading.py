from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol, runtime_checkable

# A backend receives the path with its `scheme://` prefix stripped and
# returns the raw text, raising on failure.
ProtocolLoader = Callable[[str], str]


@runtime_checkable
class ProtocolRegistryProtocol(Protocol):
    def register(self, scheme: str, loader: ProtocolLoader) -> None:
        ...

    def get(self, scheme: str) -> Optional[ProtocolLoader]:
        ...

    def __contains__(self, scheme: object) -> bool:
        ...

    def __iter__(self) -> Iterator[str]:
        ...
