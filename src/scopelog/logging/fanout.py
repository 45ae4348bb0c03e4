"""scopelog.logging – FanoutLogger, forwards every call to several loggers."""
from __future__ import annotations

from typing import Any

from scopelog.kernel.types import IdSource
from scopelog.logging.protocol import LogContext, Logger, Severity


class FanoutLogger(Logger):
    """Forward each :meth:`log` call, unchanged, to every member in order.

    There is no isolation between members: an exception raised by one member
    propagates and the remaining members are not called.  Members invoked
    before the failure have already emitted.
    """

    def __init__(self, loggers: tuple[Logger, ...], *, id_source: IdSource | None = None) -> None:
        super().__init__(id_source=id_source)
        self._loggers = tuple(loggers)

    @property
    def loggers(self) -> tuple[Logger, ...]:
        return self._loggers

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        for logger in self._loggers:
            logger.log(severity, area, message, payload, context)


def combine_loggers(*loggers: Logger, id_source: IdSource | None = None) -> FanoutLogger:
    """Return a :class:`FanoutLogger` over *loggers*."""
    return FanoutLogger(loggers, id_source=id_source)


__all__ = ["FanoutLogger", "combine_loggers"]
