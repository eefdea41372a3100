"""structlog configuration."""

import logging
import sys

import structlog

from mirrorconf.core.exceptions import ConfigurationError


class StderrLoggerFactory:
    """Create print loggers bound to the current ``sys.stderr``.

    Looking the stream up per logger keeps redirected stderr working.
    """

    def __call__(self, *args) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog to write diagnostics to stderr."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {log_level}", details={"log_level": log_level}
        )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=StderrLoggerFactory(),
        cache_logger_on_first_use=False,
    )
