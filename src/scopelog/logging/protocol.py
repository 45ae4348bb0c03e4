"""scopelog.logging – Logger contract, Severity, LogContext and LogEvent.

Every logger variant (formatting backend, scope decorator, fan-out
combinator) implements :class:`Logger`.  Only :meth:`Logger.log` is
abstract; scope derivation and the severity shortcuts are shared.
"""
from __future__ import annotations

import abc
import dataclasses
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from scopelog.kernel.time import to_epoch_millis
from scopelog.kernel.types import IdSource, uuid4_id

if TYPE_CHECKING:
    from scopelog.logging.scope import ScopedLogger

Sink = Callable[[str], None]
"""Receives one fully rendered log line per call."""


class Severity(str, Enum):
    """Log severities.  No ordering is implied."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    def __str__(self) -> str:
        return self.value


def severity_name(severity: Severity | str) -> str:
    """Return the wire name of *severity* (members and plain strings alike)."""
    if isinstance(severity, Severity):
        return severity.value
    return str(severity)


@dataclasses.dataclass(frozen=True)
class LogContext:
    """Partial overlay of per-call metadata.

    ``None`` means "not supplied": a scope fills the gap with its own value,
    and a backend treats what is still missing as absent (or, for the
    timestamp, as "now").
    """

    timestamp: datetime | None = None
    scope_id: str | None = None
    parent_scope_id: str | None = None

    def with_defaults(
        self,
        *,
        scope_id: str | None = None,
        parent_scope_id: str | None = None,
    ) -> "LogContext":
        """Fill unset identity fields from the given defaults, field by field."""
        return LogContext(
            timestamp=self.timestamp,
            scope_id=self.scope_id if self.scope_id is not None else scope_id,
            parent_scope_id=(
                self.parent_scope_id if self.parent_scope_id is not None else parent_scope_id
            ),
        )


EMPTY_CONTEXT = LogContext()


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One rendered-to-be log entry, built by a backend at emission time."""

    severity: str
    area: str
    message: str
    timestamp: datetime
    payload: Any = None
    scope_id: str | None = None
    parent_scope_id: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON wire mapping; absent values are left out."""
        wire: dict[str, Any] = {
            "timestamp": to_epoch_millis(self.timestamp),
            "severity": self.severity,
            "area": self.area,
            "message": self.message,
            "obj": self.payload,
            "scopeId": self.scope_id,
            "parentScopeId": self.parent_scope_id,
        }
        return {k: v for k, v in wire.items() if v is not None}


class Logger(abc.ABC):
    """Abstract logging contract.

    Parameters
    ----------
    id_source:
        Callable producing fresh scope ids for :meth:`create_scope` when the
        caller does not pass one.  Defaults to random UUID4 strings, also for
        subclasses that do not call ``super().__init__()``.
    """

    _id_source: IdSource = staticmethod(uuid4_id)

    def __init__(self, *, id_source: IdSource | None = None) -> None:
        if id_source is not None:
            self._id_source = id_source

    @property
    def id_source(self) -> IdSource:
        return self._id_source

    @abc.abstractmethod
    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        """Emit one log event."""

    def create_scope(
        self,
        area: str,
        scope_id: str | None = None,
        parent_scope_id: str | None = None,
    ) -> "ScopedLogger":
        """Return a child logger that prefixes *area* and tags scope ids.

        A root logger has no ambient scope, so *parent_scope_id* stays absent
        unless given.  :class:`~scopelog.logging.scope.ScopedLogger` overrides
        this to chain its own id as the default parent.
        """
        from scopelog.logging.scope import ScopedLogger

        return ScopedLogger(
            self,
            area,
            scope_id if scope_id is not None else self._id_source(),
            parent_scope_id,
        )

    # ------------------------------------------------------------------
    # Severity shortcuts
    # ------------------------------------------------------------------

    def debug(self, area: str, message: str, payload: Any = None, context: LogContext | None = None) -> None:
        self.log(Severity.DEBUG, area, message, payload, context)

    def info(self, area: str, message: str, payload: Any = None, context: LogContext | None = None) -> None:
        self.log(Severity.INFO, area, message, payload, context)

    def warn(self, area: str, message: str, payload: Any = None, context: LogContext | None = None) -> None:
        self.log(Severity.WARN, area, message, payload, context)

    # common alias
    warning = warn

    def error(self, area: str, message: str, payload: Any = None, context: LogContext | None = None) -> None:
        self.log(Severity.ERROR, area, message, payload, context)

    def fatal(self, area: str, message: str, payload: Any = None, context: LogContext | None = None) -> None:
        self.log(Severity.FATAL, area, message, payload, context)

    def log_exception(
        self,
        area: str,
        message: str,
        exc: object,
        context: LogContext | None = None,
    ) -> None:
        """Log *exc* at ``error`` severity as a plain-data payload."""
        from scopelog.logging.errors import create_error_object

        self.log(Severity.ERROR, area, message, create_error_object(exc), context)


__all__ = [
    "EMPTY_CONTEXT",
    "LogContext",
    "LogEvent",
    "Logger",
    "Severity",
    "Sink",
    "severity_name",
]
