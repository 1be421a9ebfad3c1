"""
Centralized logging for the Product Catalog Service.

Wraps the standard library logger with:
- Structured entries carrying service name and correlation ID
- Console (coloured) or JSON output
- Error metadata extraction from exceptions
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from app.middleware.correlation_id import get_correlation_id

LOGGER_NAME = "product-catalog"


class StructuredLogger:
    """
    Logger with structured metadata and correlation IDs.
    Handlers are installed by configure(), normally from create_app().
    """

    def __init__(self, name: str = LOGGER_NAME):
        self.service_name = name
        self.log_format = "console"
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self.configure()

    def configure(self, level: str = "INFO", log_format: str = "console", service_name: Optional[str] = None):
        """(Re)install the console handler with the given level and format"""
        self.log_format = log_format
        if service_name:
            self.service_name = service_name

        self._logger.handlers.clear()
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        handler = logging.StreamHandler(sys.stdout)
        if log_format == "json":
            handler.setFormatter(JSONFormatter(self.service_name))
        else:
            handler.setFormatter(ConsoleFormatter())
        self._logger.addHandler(handler)

    def _build_log_entry(
        self,
        level: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "service": self.service_name,
            "level": level,
            "correlationId": get_correlation_id(),
        }
        if user_id:
            entry["userId"] = user_id
        if metadata:
            entry["metadata"] = metadata
        return entry

    def _log(
        self,
        level: str,
        message: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        entry = self._build_log_entry(level, user_id, metadata)
        self._logger.log(getattr(logging, level), message, extra={"structured": entry})

    def debug(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Debug level logging"""
        self._log("DEBUG", message, user_id, metadata)

    def info(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Info level logging"""
        self._log("INFO", message, user_id, metadata)

    def warning(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Warning level logging"""
        self._log("WARNING", message, user_id, metadata)

    def error(
        self,
        message: str,
        user_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Error level logging"""
        if metadata is None:
            metadata = {}

        if error:
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        self._log("ERROR", message, user_id, metadata)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, service_name: str = LOGGER_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "message": record.getMessage(),
        }
        structured = getattr(record, "structured", None)
        if structured:
            for key, value in structured.items():
                if value is not None and key not in log_data:
                    log_data[key] = value

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"

        structured = getattr(record, "structured", None) or {}
        if structured.get("correlationId"):
            line += f" [{structured['correlationId']}]"
        if structured.get("metadata"):
            line += f" {json.dumps(structured['metadata'], default=str)}"
        return line


# Create and export the logger instance
logger = StructuredLogger()
