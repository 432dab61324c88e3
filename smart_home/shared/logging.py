"""
Logging Configuration - Shared Layer

Wires structlog on top of the standard logging module so that domain
entities, use cases and the command line runner all emit the same
structured events.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from smart_home.shared.consts import EnumEnvironment, EnumLogFormat

DEFAULT_LOG_LEVEL = "INFO"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def _build_renderer(log_format: Optional[str], environment: str) -> Processor:
    log_format = (log_format or os.environ.get("LOG_FORMAT") or "").lower()
    if not log_format:
        is_production = environment.lower() == EnumEnvironment.PRODUCTION
        log_format = EnumLogFormat.JSON if is_production else EnumLogFormat.CONSOLE
    if log_format == EnumLogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure standard logging and structlog for the simulator.

    Safe to call more than once: existing root handlers are replaced.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        log_format: "json" or "console"; falls back to LOG_FORMAT, then
            to the environment default.
        file_path: Optional file that receives a copy of every record.
        environment: Without an explicit format, selects the JSON renderer
            in production and the console renderer everywhere else.
    """
    numeric_level = _resolve_level(level)
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(log_format, environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from a loaded AppSettings instance.

    A settings object that cannot be applied, such as an unwritable log
    file, leaves the bootstrap configuration in place and logs an error.

    Args:
        settings: Application settings exposing ``logging`` and ``environment``.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        log_format = getattr(settings.logging, "format", None)
        log_format = getattr(log_format, "value", log_format)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            log_format=log_format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError) as e:
        get_logger(__name__).error("logging.update_failed", error=str(e))
        return

    get_logger(__name__).debug(
        "logging.configured",
        level=log_level,
        format=log_format,
        environment=environment,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
