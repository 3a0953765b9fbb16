from __future__ import annotations

"""Logger factory handed to `IncludeResolver(logger_factory=...)`.

Passing a factory lets an application decide formatting once, while every
component still logs under its own ``shaderprep.<component>`` name.
"""

import logging
import os
from typing import Optional, TextIO

from shaderprep.constants import ENV_LOG_JSON, ENV_LOG_LEVEL
from shaderprep.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Configure the base 'shaderprep' logger lazily and hand out component loggers."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._configured = False

    @classmethod
    def from_env(cls, *, stream: Optional[TextIO] = None) -> DefaultLoggerFactory:
        """Read SHADERPREP_LOG_JSON=1 and SHADERPREP_LOG_LEVEL=<name>."""
        level_name = (os.getenv(ENV_LOG_LEVEL) or 'INFO').strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO
        return cls(json_logs=os.getenv(ENV_LOG_JSON) == '1', level=level, stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
            self._configured = True
        return get_logger(name)
