from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the walker, readers and pool rely on."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Builds loggers under the 'owo' namespace for the CLI."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for *name* (e.g. 'io.walker' -> 'owo.io.walker')."""
        ...
