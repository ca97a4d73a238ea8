"""Structured logging configuration for tenant capability probes"""
import logging
import os
import sys
from typing import Any, Dict
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from config import Config


def setup_structured_logging(config: Config) -> None:
    """Setup structured logging with JSON format for production and console for development"""

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Use JSON renderer for production, console for development
    is_development = os.getenv("ENVIRONMENT", "production").lower() == "development"
    if is_development:
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())
    handlers = []

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_probe_failure(logger: structlog.stdlib.BoundLogger, probe: str, error: Exception,
                      context: Dict[str, Any] = None) -> None:
    """Log a probe that resolved to its safe default because of an error"""
    logger.warning(
        "Probe failed, using safe default",
        probe=probe,
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="probe_failure"
    )


def log_capability_report(logger: structlog.stdlib.BoundLogger, report: Dict[str, Any]) -> None:
    """Log the capability report of a context"""
    logger.info(
        "Capability report",
        event_type="capability_report",
        **report
    )
