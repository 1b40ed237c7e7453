"""
Logging configuration for the sources extractor.

Rich console output for interactive use, JSON lines when the output is
consumed by other tools.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "text",
    log_output: str = "stdout",
    log_dir: str = "logs",
) -> logging.Logger:
    """
    Configure logging for a service.

    Args:
        service_name: Logger name, also used for the log file name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: 'json' for JSON lines, 'text' for rich console output
        log_output: 'stdout', 'file', or 'both'
        log_dir: Directory for the log file when writing to a file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.handlers.clear()

    if log_output in ["stdout", "both"]:
        if log_format == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(JSONFormatter(service_name=service_name))
        else:
            # stderr keeps log lines out of the rewritten text on stdout
            handler = RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                show_path=False,
            )
            handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if log_output in ["file", "both"]:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path / f"{service_name}.log", encoding="utf-8")
        file_handler.setFormatter(JSONFormatter(service_name=service_name))
        logger.addHandler(file_handler)

    return logger


class JSONFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service_name,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Context injected by LoggerAdapter
        context = getattr(record, "context", None)
        if context:
            log_data.update(context)

        return json.dumps(log_data)


class LoggerAdapter(logging.LoggerAdapter):
    """
    Adapter to inject contextual information into all log messages.

    Usage:
        logger = setup_logging("extract_sources")
        file_logger = LoggerAdapter(logger, {"input_file": "notes.txt"})
        file_logger.info("Parsed file")
    """

    def process(self, msg: str, kwargs: Any) -> tuple:
        """Inject context into log message."""
        extra = kwargs.setdefault("extra", {})
        context = dict(self.extra)
        context.update(extra.get("context", {}))
        extra["context"] = context
        return msg, kwargs
