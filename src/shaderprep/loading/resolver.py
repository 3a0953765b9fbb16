"""Recursive `include_once` expansion with provenance.

`IncludeResolver` loads a file through the backend registered for its
scheme, then splices every file it includes in place of the directive line.
A file is expanded at most once per top-level `resolve` call; later
directives naming it anywhere in the tree are replaced by an empty line.

Custom schemes are added with `register`:

    resolver = IncludeResolver()
    resolver.register('res', MemoryLoader({'noise.glsl': NOISE_SRC}))
    merged = resolver.resolve('shaders/main.frag')
    source = merged.text()
"""

from __future__ import annotations

import os
from typing import List, Optional, Set, Tuple

from shaderprep.constants import DEFAULT_PROTOCOL
from shaderprep.core.interfaces.loading import ProtocolLoader, ProtocolRegistryProtocol
from shaderprep.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from shaderprep.core.models import ResolverConfig
from shaderprep.core.paths import IncludePath, split_protocol
from shaderprep.errors import (
    EmptyFileError,
    IncludeDepthError,
    ReadError,
    ShaderPrepError,
    UnsupportedProtocolError,
)
from shaderprep.loading.loaders import LocalFileLoader
from shaderprep.loading.registry import ProtocolRegistry
from shaderprep.logging.helpers import get_logger
from shaderprep.processing.directives import scan_includes
from shaderprep.processing.provenance import TextWithProvenance


class IncludeResolver:
    """Load files and unfold `include_once` directives."""

    def __init__(
            self,
            *,
            config: Optional[ResolverConfig] = None,
            registry: Optional[ProtocolRegistryProtocol] = None,
            logger: Optional[LoggerLikeProtocol] = None,
            logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._cfg = config or ResolverConfig()
        self._loggers = logger_factory
        self._log = logger or self._component_logger('resolver')
        self._registry = registry or ProtocolRegistry(logger=self._component_logger('protocols'))
        if DEFAULT_PROTOCOL not in self._registry:
            self._registry.register(
                DEFAULT_PROTOCOL,
                LocalFileLoader(encoding=self._cfg.encoding, logger=self._component_logger('loaders.file')),
            )

    def _component_logger(self, name: str) -> LoggerLikeProtocol:
        if self._loggers is not None:
            return self._loggers.get_logger(name)
        return get_logger(name)

    @property
    def config(self) -> ResolverConfig:
        return self._cfg

    @property
    def registry(self) -> ProtocolRegistryProtocol:
        return self._registry

    def register(self, scheme: str, loader: ProtocolLoader) -> None:
        """Add a backend for *scheme*; raises ProtocolAlreadyRegisteredError on duplicates."""
        self._registry.register(scheme, loader)

    add_protocol = register

    def get_protocol(self, scheme: str) -> Optional[ProtocolLoader]:
        return self._registry.get(scheme)

    # Loading ---------------------------------------------------------------

    def basic_load(self, path: str) -> str:
        """Load *path* as-is through its backend, without any processing."""
        scheme, body = split_protocol(path)
        scheme = scheme or self._cfg.default_protocol
        loader = self._registry.get(scheme)
        if loader is None:
            raise UnsupportedProtocolError(scheme, path=path)

        try:
            text = loader(body)
        except ShaderPrepError:
            raise
        except Exception as exc:
            raise ReadError(f"File loading error (file {path}): {exc}", path=path) from exc

        if not text:
            raise EmptyFileError(path)
        return text

    def resolve(self, path: str) -> TextWithProvenance:
        """Load *path* and expand its includes into one merged buffer."""
        used_files: Set[str] = set()
        root = self._root_path(path)
        merged = self._resolve_inner(root, used_files, (root,))
        self._log.debug('resolved %s: %d lines from %d files', root, len(merged), len(used_files))
        return merged

    load_file = resolve

    def _root_path(self, path: str) -> str:
        """Normalize the top-level path; local paths are made absolute first.

        Normalizing drops a leading `..`, so a relative local path must be
        anchored to the current directory before it becomes an IncludePath.
        """
        scheme, body = split_protocol(path)
        if (scheme or self._cfg.default_protocol) != DEFAULT_PROTOCOL:
            return str(IncludePath(path))
        body = os.path.abspath(body)
        return str(IncludePath(f"{scheme}://{body}" if scheme else body))

    def _resolve_inner(self, path: str, used_files: Set[str], chain: Tuple[str, ...]) -> TextWithProvenance:
        if len(chain) - 1 > self._cfg.max_depth:
            raise IncludeDepthError(chain, self._cfg.max_depth)

        used_files.add(path)
        includes = TextWithProvenance(self.basic_load(path), path)
        dirname = IncludePath(path).dirname()

        jobs: List[Tuple[int, str]] = []
        for directive in scan_includes(includes.lines):
            if split_protocol(directive.target)[0] is None:
                target = str(dirname.join(directive.target))
            else:
                target = str(IncludePath(directive.target))
            jobs.append((directive.line, target))

        offset = 0
        for line, target in jobs:
            if target in used_files:
                self._log.debug('%s:%d: %s already included, skipping', path, line, target)
                includes.blank_line(line + offset)
                continue
            used_files.add(target)
            nested = self._resolve_inner(target, used_files, chain + (target,))
            includes.splice_includes(line + offset, nested)
            offset += len(nested) - 1

        return includes
