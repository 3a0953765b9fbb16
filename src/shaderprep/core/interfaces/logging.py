from __future__ import annotations

"""Logging contracts accepted by resolvers, loaders and the compile seam.

Any `logging.Logger` satisfies `LoggerLikeProtocol`. A `LoggerFactoryProtocol`
hands out one logger per component name (``'resolver'``, ``'loaders.file'``),
which lets an application route every component through its own setup.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging calls the library actually makes."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for component *name* (relative to 'shaderprep')."""
        ...
