"""scopelog.logging – terminal formatting backends.

Both backends render an event to a single string and hand it to an injected
sink.  They never delegate further.  :class:`TextLogger` is lossy on
purpose: it keeps only severity, area and message.
"""
from __future__ import annotations

import json
from typing import Any

from scopelog.kernel.errors import SerializationError
from scopelog.kernel.time import Clock, SystemClock
from scopelog.kernel.types import IdSource
from scopelog.logging.protocol import EMPTY_CONTEXT, LogContext, LogEvent, Logger, Severity, Sink, severity_name


class JsonLogger(Logger):
    """Render each call as one compact JSON document.

    Parameters
    ----------
    sink:
        Called once per :meth:`log` with the complete document.
    clock:
        Supplies the timestamp when the context carries none.
    ensure_ascii:
        Forwarded to :func:`json.dumps`.
    """

    def __init__(
        self,
        sink: Sink,
        *,
        clock: Clock | None = None,
        id_source: IdSource | None = None,
        ensure_ascii: bool = False,
    ) -> None:
        super().__init__(id_source=id_source)
        self._sink = sink
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._ensure_ascii = ensure_ascii

    def build_event(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> LogEvent:
        ctx = context or EMPTY_CONTEXT
        return LogEvent(
            severity=severity_name(severity),
            area=area,
            message=message,
            timestamp=ctx.timestamp if ctx.timestamp is not None else self._clock.now(),
            payload=payload,
            scope_id=ctx.scope_id,
            parent_scope_id=ctx.parent_scope_id,
        )

    def render(self, event: LogEvent) -> str:
        """Serialise *event*; raises :class:`SerializationError` on failure."""
        try:
            return json.dumps(
                event.to_wire(),
                separators=(",", ":"),
                ensure_ascii=self._ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(
                f"Cannot serialize log event for area {event.area!r}: {exc}",
                payload_type=type(event.payload).__name__,
                cause=exc,
            ) from exc

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        text = self.render(self.build_event(severity, area, message, payload, context))
        self._sink(text)


class TextLogger(Logger):
    """Render ``[<severity>] <area>: <message>``; payload and context are dropped."""

    def __init__(self, sink: Sink, *, id_source: IdSource | None = None) -> None:
        super().__init__(id_source=id_source)
        self._sink = sink

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        self._sink(f"[{severity_name(severity)}] {area}: {message}")


def create_json_logger(sink: Sink, **kwargs: Any) -> JsonLogger:
    """Return a :class:`JsonLogger` writing to *sink*."""
    return JsonLogger(sink, **kwargs)


def create_text_logger(sink: Sink, **kwargs: Any) -> TextLogger:
    """Return a :class:`TextLogger` writing to *sink*."""
    return TextLogger(sink, **kwargs)


__all__ = ["JsonLogger", "TextLogger", "create_json_logger", "create_text_logger"]
