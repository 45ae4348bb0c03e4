"""scopelog.logging – ready-made sinks and the library's own structlog logger.

A sink is any ``Callable[[str], None]``.  These helpers cover the usual
destinations; the caller owns thread-safety of the underlying stream.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from scopelog.logging.protocol import Sink


def stream_sink(stream: TextIO | None = None) -> Sink:
    """Write each line to *stream* (default ``sys.stdout``) and flush."""

    def _sink(text: str) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(text + "\n")
        target.flush()

    return _sink


def stdlib_sink(name: str = "scopelog", level: int = logging.INFO) -> Sink:
    """Forward each line to the stdlib :mod:`logging` logger *name* at *level*."""
    target = logging.getLogger(name)

    def _sink(text: str) -> None:
        target.log(level, text)

    return _sink


def structlog_sink(name: str | None = None, method: str = "info") -> Sink:
    """Forward each line as the event of a structlog bound logger.

    Parameters
    ----------
    name:
        Logger name passed to :func:`structlog.get_logger`.
    method:
        Bound-logger method to call (``"info"``, ``"warning"``, ...).
    """
    target = structlog.get_logger(name)

    def _sink(text: str) -> None:
        getattr(target, method)(text)

    return _sink


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for the library's own diagnostics.

    Events are rendered as ``key=value`` text and handed to the stdlib
    :mod:`logging` logger *name*, so they follow the host application's
    logging configuration (silent at ``DEBUG`` unless enabled).

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name or "scopelog"),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "stdlib_sink", "stream_sink", "structlog_sink"]
