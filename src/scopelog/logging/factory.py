"""scopelog.logging – LoggingSettings and build_logger.

Builds a root logger from 12-factor settings::

    SCOPELOG_FORMAT=both SCOPELOG_ROOT_SCOPE=billing python app.py

    settings = EnvSettingsLoader().load(LoggingSettings)
    logger = build_logger(settings)
"""
from __future__ import annotations

import dataclasses
import sys

from scopelog.config.settings import Settings
from scopelog.config.validation import InvalidSettingValueError
from scopelog.kernel.time import Clock
from scopelog.kernel.types import IdSource
from scopelog.logging.backends import JsonLogger, TextLogger
from scopelog.logging.fanout import FanoutLogger
from scopelog.logging.protocol import Logger, Sink
from scopelog.logging.sinks import get_logger, stream_sink

_log = get_logger(__name__)

FORMATS = frozenset({"json", "text", "both"})
STREAMS = frozenset({"stdout", "stderr"})


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Settings read from ``SCOPELOG_*`` environment variables."""

    _prefix = "SCOPELOG"

    format: str = "json"
    stream: str = "stdout"
    root_scope: str | None = None
    ensure_ascii: bool = False

    def _validate(self) -> None:
        if self.format not in FORMATS:
            raise InvalidSettingValueError("format", self.format, f"expected one of {sorted(FORMATS)}")
        if self.stream not in STREAMS:
            raise InvalidSettingValueError("stream", self.stream, f"expected one of {sorted(STREAMS)}")
        if self.root_scope == "":
            raise InvalidSettingValueError("root_scope", self.root_scope, "must not be empty")


def build_logger(
    settings: LoggingSettings | None = None,
    *,
    sink: Sink | None = None,
    clock: Clock | None = None,
    id_source: IdSource | None = None,
) -> Logger:
    """Assemble the root logger described by *settings*.

    Parameters
    ----------
    settings:
        Defaults to ``LoggingSettings()`` (JSON to stdout).
    sink:
        Overrides the stream chosen by ``settings.stream``.
    clock, id_source:
        Forwarded to the backends.
    """
    cfg = settings if settings is not None else LoggingSettings()
    out = sink if sink is not None else stream_sink(sys.stdout if cfg.stream == "stdout" else sys.stderr)

    backends: list[Logger] = []
    if cfg.format in ("json", "both"):
        backends.append(JsonLogger(out, clock=clock, id_source=id_source, ensure_ascii=cfg.ensure_ascii))
    if cfg.format in ("text", "both"):
        backends.append(TextLogger(out, id_source=id_source))

    root: Logger = backends[0] if len(backends) == 1 else FanoutLogger(tuple(backends), id_source=id_source)
    _log.debug(
        "scopelog.logger_built",
        format=cfg.format,
        stream=cfg.stream if sink is None else "custom",
        root_scope=cfg.root_scope,
    )
    if cfg.root_scope is not None:
        return root.create_scope(cfg.root_scope)
    return root


__all__ = ["FORMATS", "LoggingSettings", "STREAMS", "build_logger"]
