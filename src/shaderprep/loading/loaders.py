from __future__ import annotations

"""
Built-in protocol backends.

This module exposes:
  * `LocalFileLoader` / `load_local_file`: the default `file` scheme.
  * `MemoryLoader`: serves sources from an in-memory mapping.
  * `UrlLoader`: opt-in `http` / `https` backend based on urllib.

A backend receives the path with its `scheme://` prefix already removed and
returns the raw text. Failures are raised as `ShaderPrepError` subclasses
with the offending path embedded.
"""

import logging
import ssl
import urllib.error
import urllib.request
from pathlib import Path
from typing import Callable, Mapping, Optional

from shaderprep.constants import DEFAULT_ENCODING
from shaderprep.core.interfaces.logging import LoggerLikeProtocol
from shaderprep.core.paths import IncludePath
from shaderprep.errors import PathResolutionError, ReadError
from shaderprep.logging.helpers import trace_io


class LocalFileLoader:
    """Read files from the local filesystem after canonicalizing the path."""

    def __init__(self, *, encoding: str = DEFAULT_ENCODING, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._encoding = encoding
        self._log = logger or logging.getLogger('shaderprep.loaders.file')

    def __call__(self, path: str) -> str:
        try:
            resolved = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise PathResolutionError(f"Path error {path}: {exc}", path=path) from exc

        trace_io(self._log, 'reading local file', path=str(resolved))
        try:
            return resolved.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"File loading error (file {path}): {exc}", path=path) from exc


def load_local_file(path: str) -> str:
    """Default `file` backend with UTF-8 decoding."""
    return LocalFileLoader()(path)


def _normalize(path: str) -> str:
    return str(IncludePath(path))


class MemoryLoader:
    """Serve sources from a mapping of path -> text.

    Keys are compared after the same normalization include paths receive,
    so ``"lib/./a.glsl"`` and ``"lib/a.glsl"`` name the same entry.
    """

    def __init__(self, sources: Optional[Mapping[str, str]] = None) -> None:
        self._sources = {_normalize(k): v for k, v in (sources or {}).items()}

    def add(self, path: str, text: str) -> None:
        self._sources[_normalize(path)] = text

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and _normalize(path) in self._sources

    def __call__(self, path: str) -> str:
        try:
            return self._sources[_normalize(path)]
        except KeyError:
            raise ReadError(f"No in-memory source named {path}", path=path) from None


class UrlLoader:
    """Fetch sources over HTTP(S) with urllib.

    Register one instance per scheme:

        resolver.register('https', UrlLoader('https'))
    """

    def __init__(
            self,
            scheme: str = 'https',
            *,
            timeout: float = 30.0,
            user_agent: Optional[str] = None,
            ssl_ctx_provider: Optional[Callable[[str], Optional[ssl.SSLContext]]] = None,
            logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._scheme = scheme
        self._timeout = float(timeout)
        self._ua = user_agent
        self._ssl_ctx_for = ssl_ctx_provider or (lambda _url: None)
        self._log = logger or logging.getLogger('shaderprep.loaders.url')

    def __call__(self, path: str) -> str:
        url = f"{self._scheme}://{path}"
        headers = {"User-Agent": self._ua} if self._ua else {}
        req = urllib.request.Request(url, headers=headers, method="GET")
        trace_io(self._log, 'fetching url', url=url)
        try:
            with urllib.request.urlopen(req, timeout=self._timeout, context=self._ssl_ctx_for(url)) as resp:  # nosec B310
                body = resp.read()
                charset = resp.headers.get_content_charset() or DEFAULT_ENCODING
        except (urllib.error.URLError, OSError) as exc:
            raise ReadError(f"Fetch error ({url}): {exc}", path=url) from exc
        try:
            return body.decode(charset)
        except (LookupError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot decode {url} as {charset}: {exc}", path=url) from exc
