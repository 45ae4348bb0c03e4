"""scopelog.logging – scoped structured logging."""
from scopelog.logging.backends import JsonLogger, TextLogger, create_json_logger, create_text_logger
from scopelog.logging.errors import UNDEFINED, create_error_object, stringify_unknown
from scopelog.logging.factory import LoggingSettings, build_logger
from scopelog.logging.fanout import FanoutLogger, combine_loggers
from scopelog.logging.protocol import EMPTY_CONTEXT, LogContext, LogEvent, Logger, Severity, Sink
from scopelog.logging.scope import AREA_SEPARATOR, ScopedLogger
from scopelog.logging.sinks import get_logger, stdlib_sink, stream_sink, structlog_sink

__all__ = [
    "AREA_SEPARATOR",
    "EMPTY_CONTEXT",
    "FanoutLogger",
    "JsonLogger",
    "LogContext",
    "LogEvent",
    "LoggingSettings",
    "Logger",
    "ScopedLogger",
    "Severity",
    "Sink",
    "TextLogger",
    "UNDEFINED",
    "build_logger",
    "combine_loggers",
    "create_error_object",
    "create_json_logger",
    "create_text_logger",
    "get_logger",
    "stdlib_sink",
    "stream_sink",
    "stringify_unknown",
    "structlog_sink",
]
