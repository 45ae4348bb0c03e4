"""Unit tests for scope chaining and context propagation."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Callable

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scopelog.logging import (
    LogContext,
    Logger,
    ScopedLogger,
    Severity,
    create_json_logger,
)
from scopelog.testing import RecordingLogger, RecordingSink, sequential_ids


# ---------------------------------------------------------------------------
# Area composition
# ---------------------------------------------------------------------------


class TestAreaComposition:
    def test_single_scope_prefixes_area(self) -> None:
        root = RecordingLogger()
        root.create_scope("svc").log("info", "start", "hello")
        assert root.calls[0].area == "svc::start"

    def test_three_nested_scopes(self) -> None:
        root = RecordingLogger()
        root.create_scope("a").create_scope("b").create_scope("c").log("info", "x", "m")
        assert root.calls[0].area == "a::b::c::x"

    def test_message_severity_and_payload_pass_through(self) -> None:
        root = RecordingLogger()
        payload = {"k": [1, 2]}
        root.create_scope("svc").log(Severity.WARN, "area", "msg", payload)
        call = root.calls[0]
        assert call.severity == Severity.WARN
        assert call.message == "msg"
        assert call.payload is payload

    @given(
        areas=st.lists(st.text(max_size=8), min_size=1, max_size=6),
        area=st.text(max_size=8),
    )
    def test_nested_areas_join_with_double_colon(self, areas: list[str], area: str) -> None:
        root = RecordingLogger()
        logger = root
        for a in areas:
            logger = logger.create_scope(a)
        logger.log("debug", area, "m")
        assert root.calls[0].area == "::".join([*areas, area])


# ---------------------------------------------------------------------------
# Scope identity
# ---------------------------------------------------------------------------


class TestScopeIdentity:
    def test_scope_id_generated_from_id_source(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        scope = root.create_scope("svc")
        assert scope.scope_id == "s-1"

    def test_explicit_scope_id_is_used(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        scope = root.create_scope("svc", scope_id="fixed")
        assert scope.scope_id == "fixed"

    def test_default_id_source_produces_uuid_strings(self) -> None:
        scope = RecordingLogger().create_scope("svc")
        assert len(scope.scope_id) == 36

    def test_root_scope_has_no_parent(self) -> None:
        root = RecordingLogger()
        scope = root.create_scope("svc")
        scope.log("info", "a", "m")
        assert scope.parent_scope_id is None
        assert root.calls[0].context == LogContext(scope_id=scope.scope_id)

    def test_child_parent_defaults_to_enclosing_scope_id(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        outer = root.create_scope("outer")
        inner = outer.create_scope("inner")
        assert inner.parent_scope_id == outer.scope_id

    def test_explicit_parent_overrides_implicit_chain(self) -> None:
        root = RecordingLogger()
        inner = root.create_scope("outer").create_scope("inner", parent_scope_id="other")
        assert inner.parent_scope_id == "other"

    def test_root_scope_accepts_explicit_parent(self) -> None:
        scope = RecordingLogger().create_scope("svc", parent_scope_id="upstream")
        assert scope.parent_scope_id == "upstream"

    def test_innermost_identity_reaches_root(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        outer = root.create_scope("outer")
        inner = outer.create_scope("inner")
        inner.log("info", "a", "m")
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.scope_id == inner.scope_id
        assert ctx.parent_scope_id == outer.scope_id

    def test_scopes_inherit_id_source(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        inner = root.create_scope("a").create_scope("b")
        assert inner.scope_id == "s-2"

    def test_create_scope_returns_scoped_logger(self) -> None:
        root = RecordingLogger()
        scope = root.create_scope("svc")
        assert isinstance(scope, ScopedLogger)
        assert scope.base is root
        assert scope.scope_area == "svc"


# ---------------------------------------------------------------------------
# Context overrides
# ---------------------------------------------------------------------------


class TestContextOverrides:
    def test_explicit_scope_id_wins_at_any_depth(self) -> None:
        root = RecordingLogger()
        deep = root.create_scope("a").create_scope("b").create_scope("c")
        deep.log("info", "x", "m", None, LogContext(scope_id="X"))
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.scope_id == "X"

    def test_partial_context_keeps_other_defaults(self) -> None:
        root = RecordingLogger(id_source=sequential_ids("s"))
        outer = root.create_scope("outer")
        inner = outer.create_scope("inner")
        inner.log("info", "x", "m", None, LogContext(scope_id="X"))
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.scope_id == "X"
        assert ctx.parent_scope_id == outer.scope_id

    def test_explicit_parent_scope_id_wins(self) -> None:
        root = RecordingLogger()
        scope = root.create_scope("a").create_scope("b")
        scope.log("info", "x", "m", None, LogContext(parent_scope_id="P"))
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.parent_scope_id == "P"
        assert ctx.scope_id == scope.scope_id

    def test_timestamp_passes_through(self) -> None:
        ts = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
        root = RecordingLogger()
        root.create_scope("a").log("info", "x", "m", None, LogContext(timestamp=ts))
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.timestamp == ts

    def test_timestamp_not_fixed_by_scope(self) -> None:
        root = RecordingLogger()
        root.create_scope("a").log("info", "x", "m")
        ctx = root.calls[0].context
        assert ctx is not None
        assert ctx.timestamp is None

    def test_caller_context_is_not_mutated(self) -> None:
        ctx = LogContext(scope_id="X")
        RecordingLogger().create_scope("a").log("info", "x", "m", None, ctx)
        assert ctx == LogContext(scope_id="X")


# ---------------------------------------------------------------------------
# Severity shortcuts
# ---------------------------------------------------------------------------


class TestSeverityShortcuts:
    @pytest.mark.parametrize(
        ("method", "severity"),
        [
            ("debug", Severity.DEBUG),
            ("info", Severity.INFO),
            ("warn", Severity.WARN),
            ("warning", Severity.WARN),
            ("error", Severity.ERROR),
            ("fatal", Severity.FATAL),
        ],
    )
    def test_shortcut_delegates_to_log(self, method: str, severity: Severity) -> None:
        root = RecordingLogger()
        getattr(root.create_scope("svc"), method)("area", "msg", {"a": 1})
        call = root.calls[0]
        assert call.severity == severity
        assert call.area == "svc::area"
        assert call.payload == {"a": 1}

    def test_log_exception_converts_payload(self) -> None:
        root = RecordingLogger()
        root.log_exception("worker", "failed", ValueError("bad"))
        call = root.calls[0]
        assert call.severity == Severity.ERROR
        assert call.payload["name"] == "ValueError"
        assert call.payload["message"] == "bad"


# ---------------------------------------------------------------------------
# End-to-end scenario
# ---------------------------------------------------------------------------


class TestNestedJsonScenario:
    def test_svc_db_query_timeout(self) -> None:
        sink = RecordingSink()
        root = create_json_logger(sink)
        scope1 = root.create_scope("svc")
        scope2 = scope1.create_scope("db")
        scope2.log("error", "query", "timeout", {"retries": 3})

        assert len(sink.lines) == 1
        doc = sink.last()
        assert doc["area"] == "svc::db::query"
        assert doc["severity"] == "error"
        assert doc["message"] == "timeout"
        assert doc["obj"] == {"retries": 3}
        assert doc["scopeId"] == scope2.scope_id
        assert doc["parentScopeId"] == scope1.scope_id


# ---------------------------------------------------------------------------
# Third-party backends
# ---------------------------------------------------------------------------


class _ListBackend(Logger):
    """Backend that never calls ``Logger.__init__``."""

    def __init__(self, sink: Callable[[str], None]) -> None:
        self._sink = sink

    def log(
        self,
        severity: Severity | str,
        area: str,
        message: str,
        payload: Any = None,
        context: LogContext | None = None,
    ) -> None:
        self._sink(f"{severity}|{area}|{message}")


class TestCustomBackend:
    def test_create_scope_without_base_init(self) -> None:
        lines: list[str] = []
        scope = _ListBackend(lines.append).create_scope("svc")
        scope.info("start", "up")
        assert len(scope.scope_id) == 36
        assert lines == ["info|svc::start|up"]

    def test_nested_scope_without_base_init(self) -> None:
        backend = _ListBackend([].append)
        outer = backend.create_scope("a")
        inner = outer.create_scope("b")
        assert inner.parent_scope_id == outer.scope_id
