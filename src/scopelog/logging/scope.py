"""scopelog.logging – ScopedLogger, the scope decorator.

A scope qualifies area names with its own segment and tags every event with
its scope id / parent scope id, then delegates to the logger it wraps::

    root = create_json_logger(print)
    svc = root.create_scope("svc")
    db = svc.create_scope("db")          # parent_scope_id == svc.scope_id
    db.error("query", "timeout", {"retries": 3})
    # area "svc::db::query", scopeId == db.scope_id
"""
from __future__ import annotations

from typing import Any

from scopelog.logging.protocol import EMPTY_CONTEXT, LogContext, Logger, Severity

AREA_SEPARATOR = "::"


class ScopedLogger(Logger):
    """Decorates *base* with a named, identified scope.

    All four fields are fixed at construction.  The decorator keeps no other
    state, so concurrent calls through the same scope are independent.
    """

    def __init__(
        self,
        base: Logger,
        scope_area: str,
        scope_id: str,
        parent_scope_id: str | None = None,
    ) -> None:
        super().__init__(id_source=base.id_source)
        self._base = base
        self._scope_area = scope_area
        self._scope_id = scope_id
        self._parent_scope_id = parent_scope_id

    @property
    def base(self) -> Logger:
        return self._base

    @property
    def scope_area(self) -> str:
        return self._scope_area

    @property
    def scope_id(self) -> str:
        return self._scope_id

    @property
    def parent_scope_id(self) -> str | None:
        return self._parent_scope_id

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        # timestamp is passed through as given; the backend stamps "now"
        outgoing = (context or EMPTY_CONTEXT).with_defaults(
            scope_id=self._scope_id,
            parent_scope_id=self._parent_scope_id,
        )
        self._base.log(
            severity,
            f"{self._scope_area}{AREA_SEPARATOR}{area}",
            message,
            payload,
            outgoing,
        )

    def create_scope(
        self,
        area: str,
        scope_id: str | None = None,
        parent_scope_id: str | None = None,
    ) -> "ScopedLogger":
        return super().create_scope(
            area,
            scope_id,
            parent_scope_id if parent_scope_id is not None else self._scope_id,
        )

    def __repr__(self) -> str:
        return (
            f"ScopedLogger(scope_area={self._scope_area!r}, scope_id={self._scope_id!r}, "
            f"parent_scope_id={self._parent_scope_id!r})"
        )


__all__ = ["AREA_SEPARATOR", "ScopedLogger"]
