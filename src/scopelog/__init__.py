"""
scopelog – scoped structured logging.

Import path convention::

    from scopelog.logging import create_json_logger, combine_loggers
    from scopelog.kernel.errors import SerializationError
    from scopelog.config import EnvSettingsLoader
"""

from scopelog.logging import (
    LogContext,
    Logger,
    Severity,
    build_logger,
    combine_loggers,
    create_error_object,
    create_json_logger,
    create_text_logger,
)

__version__ = "0.1.0"
__all__ = [
    "LogContext",
    "Logger",
    "Severity",
    "__version__",
    "build_logger",
    "combine_loggers",
    "create_error_object",
    "create_json_logger",
    "create_text_logger",
]
