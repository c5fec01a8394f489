import os
import logging
import structlog

LOG_LEVEL_ENV = "PRECISETIME_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()

def configure_logging(log_level: str = "INFO", json_output: bool = True):
    """
    Configures structlog to output logs to stdout.
    JSON lines by default; a console renderer for interactive use.
    """
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer
        ],
        logger_factory=structlog.PrintLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=True,
    )

def get_logger(name: str):
    return structlog.get_logger(name)
