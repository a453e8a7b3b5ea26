"""Logging utilities for Minecraft Data Extractor."""
import logging
from pathlib import Path
from typing import List, Optional
import structlog


VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_installed_handlers: List[logging.Handler] = []


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True
) -> structlog.BoundLogger:
    """Setup structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to mirror log output into
        console_output: Render human-readable console lines instead of JSON

    Returns:
        Configured structured logger

    Raises:
        ValueError: If log level is invalid
    """
    if level.upper() not in VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {VALID_LEVELS}")

    numeric_level = getattr(logging, level.upper())

    # Configure Python logging first, replacing handlers from a previous call
    root = logging.getLogger()
    root.setLevel(numeric_level)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)
        _installed_handlers.append(handler)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.dev.ConsoleRenderer() if console_output else structlog.processors.JSONRenderer()
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger()
    logger.debug("Logging initialized", level=level, log_file=str(log_file) if log_file else None)

    return logger
