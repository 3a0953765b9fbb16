from __future__ import annotations

"""Scheme -> loader registry used by the include resolver."""

import re
from typing import Dict, Iterator, Optional

from shaderprep.core.interfaces.loading import ProtocolLoader
from shaderprep.core.interfaces.logging import LoggerLikeProtocol
from shaderprep.errors import ProtocolAlreadyRegisteredError
from shaderprep.logging.helpers import get_logger

# Must agree with the scheme group of `split_protocol`.
_SCHEME_RE = re.compile(r"\w+")


class ProtocolRegistry:
    """Ordered mapping from scheme name to a content loader.

    Schemes are registered once; re-registering a name is an error so that a
    backend can never be replaced silently while a resolver is in use.
    """

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._loaders: Dict[str, ProtocolLoader] = {}
        self._log = logger or get_logger('protocols')

    def register(self, scheme: str, loader: ProtocolLoader) -> None:
        key = (scheme or '').strip()
        if not _SCHEME_RE.fullmatch(key):
            raise ValueError(f'invalid protocol name {scheme!r}: expected letters, digits or underscores')
        if key in self._loaders:
            raise ProtocolAlreadyRegisteredError(key)
        self._loaders[key] = loader
        self._log.debug('registered protocol %r', key)

    def get(self, scheme: str) -> Optional[ProtocolLoader]:
        return self._loaders.get(scheme)

    def __contains__(self, scheme: object) -> bool:
        return scheme in self._loaders

    def __iter__(self) -> Iterator[str]:
        return iter(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)
