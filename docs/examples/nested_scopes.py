"""Emit JSON to stdout and plain text to stderr through nested scopes."""
import sys

from scopelog.logging import combine_loggers, create_json_logger, create_text_logger, stream_sink


def main() -> None:
    logger = combine_loggers(
        create_json_logger(stream_sink(sys.stdout)),
        create_text_logger(stream_sink(sys.stderr)),
    )
    example = logger.create_scope("example")
    example.info("example area", "This is an example message", {"key": "value"})

    db = example.create_scope("db")
    try:
        raise TimeoutError("query exceeded 5s")
    except TimeoutError as exc:
        db.log_exception("query", "timeout", exc)


if __name__ == "__main__":
    main()
