"""Testing fakes – RecordingSink and RecordingLogger."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from scopelog.logging.protocol import LogContext, Logger, Severity


class RecordingSink:
    """Sink that keeps every rendered line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str) -> None:
        self.lines.append(text)

    def documents(self) -> list[dict[str, Any]]:
        """Parse every recorded line as JSON."""
        return [json.loads(line) for line in self.lines]

    def last(self) -> dict[str, Any]:
        return json.loads(self.lines[-1])

    def clear(self) -> None:
        self.lines.clear()


@dataclasses.dataclass(frozen=True)
class LogCall:
    severity: Severity | str
    area: str
    message: str
    payload: Any = None
    context: LogContext | None = None


class RecordingLogger(Logger):
    """Logger that records the raw arguments of each :meth:`log` call."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.calls: list[LogCall] = []

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        self.calls.append(LogCall(severity, area, message, payload, context))


__all__ = ["LogCall", "RecordingLogger", "RecordingSink"]
