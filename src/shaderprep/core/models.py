from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

from shaderprep.constants import (
    DEFAULT_ENCODING,
    DEFAULT_MAX_DEPTH,
    DEFAULT_PROTOCOL,
    ENV_ENCODING,
    ENV_MAX_DEPTH,
)
from shaderprep.logging.helpers import get_logger


@dataclass(frozen=True)
class Segment:
    """Half-open line range ``[start_line, end_line)`` produced by one file."""
    start_line: int
    end_line: int
    original_file: str

    def __post_init__(self) -> None:
        if self.start_line > self.end_line:
            raise ValueError(f"segment starts after it ends: {self.start_line} > {self.end_line}")

    @property
    def length(self) -> int:
        return self.end_line - self.start_line

    def contains(self, line: int) -> bool:
        return self.start_line <= line < self.end_line

    def is_inside(self, of: Segment) -> bool:
        """Return True if this range is fully enclosed by *of*."""
        return self.start_line >= of.start_line and self.end_line <= of.end_line

    def shifted(self, by: int) -> Segment:
        return replace(self, start_line=self.start_line + by, end_line=self.end_line + by)


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable settings for an IncludeResolver."""
    default_protocol: str = DEFAULT_PROTOCOL
    max_depth: int = DEFAULT_MAX_DEPTH
    encoding: str = DEFAULT_ENCODING

    @classmethod
    def from_env(cls, *, logger: Optional[logging.Logger] = None) -> ResolverConfig:
        """Build a config from SHADERPREP_* environment variables.

        Invalid values are logged and replaced by the defaults.
        """
        log = logger or get_logger('config')
        max_depth = DEFAULT_MAX_DEPTH
        raw_depth = os.getenv(ENV_MAX_DEPTH)
        if raw_depth:
            try:
                max_depth = int(raw_depth)
                if max_depth < 0:
                    raise ValueError(raw_depth)
            except ValueError:
                log.warning('invalid %s=%r, using %d', ENV_MAX_DEPTH, raw_depth, DEFAULT_MAX_DEPTH)
                max_depth = DEFAULT_MAX_DEPTH
        encoding = os.getenv(ENV_ENCODING) or DEFAULT_ENCODING
        return cls(max_depth=max_depth, encoding=encoding)


@dataclass(frozen=True)
class CompileResult:
    """Outcome of submitting merged source to an external compiler."""
    ok: bool
    handle: Any = None
    log: str = ''
