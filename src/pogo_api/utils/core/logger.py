"""
Logging utilities for the game master parser and API generator.

Provides structured logging with:
- Per-module loggers using standard Python logging
- Colored console output
- Rotating file handlers to prevent unbounded growth
- JSON structured logging support
- Configuration via ApiConfig
- Context managers for operation tracking
"""

import json
import logging
import shutil
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Global configuration (with defaults, can be overridden via configure_logging_system)
LOG_DIR = Path("logs")
LOG_LEVEL = "INFO"
LOG_FORMAT_JSON = False
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB in bytes
BACKUP_COUNT = 5
CONSOLE_COLORS = True
CLEAR_ON_RUN = False

# Only loggers of this package get handlers attached
PACKAGE_LOGGER_PREFIX = "pogo_api"


def configure_logging_system(config) -> None:
    """Configure logging system with ApiConfig settings.

    This should be called early in your application, before running the parser.
    Loggers created before this call get their handlers rebuilt.

    Args:
        config: ApiConfig instance with logging settings
    """
    global LOG_DIR, LOG_LEVEL, LOG_FORMAT_JSON, MAX_LOG_SIZE, BACKUP_COUNT, CONSOLE_COLORS, CLEAR_ON_RUN

    LOG_DIR = Path(config.logging_log_dir)
    LOG_LEVEL = config.logging_level.upper()
    LOG_FORMAT_JSON = config.logging_format == "json"
    MAX_LOG_SIZE = config.logging_max_log_size_mb * 1024 * 1024
    BACKUP_COUNT = config.logging_backup_count
    CONSOLE_COLORS = config.logging_console_colors
    CLEAR_ON_RUN = config.logging_clear_on_run

    existing = [
        logging.getLogger(name)
        for name in list(logging.Logger.manager.loggerDict.keys())
        if name.startswith(PACKAGE_LOGGER_PREFIX)
    ]

    # File handlers point at the old directory; close them before re-setup
    for logger_obj in existing:
        for handler in list(logger_obj.handlers):
            handler.close()
            logger_obj.removeHandler(handler)

    if CLEAR_ON_RUN and LOG_DIR.exists():
        try:
            shutil.rmtree(LOG_DIR)
        except OSError as e:
            print(f"[Logger] Warning: Could not clear logs directory: {e}", file=sys.stderr)

    for logger_obj in existing:
        setup_logger(logger_obj.name)


# Standard fields that are part of every LogRecord instance
# These fields are excluded when adding extra fields to JSON logs
_STANDARD_LOG_RECORD_FIELDS = frozenset(
    [
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "taskName",
    ]
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string.

        Args:
            record (logging.LogRecord): The log record to format.

        Returns:
            str: The formatted log record as a JSON string.
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via logger.xxx(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOG_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors for console output.

        Args:
            record (logging.LogRecord): The log record to format.

        Returns:
            str: The formatted log record with colors.
        """
        # Work on a copy so file handlers see the plain level name
        record_copy = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record_copy.levelname, self.RESET)
        record_copy.levelname = f"{log_color}{record_copy.levelname}{self.RESET}"
        return super().format(record_copy)


def _module_log_file(name: str) -> Path:
    """Map a dotted logger name to a nested log file path below LOG_DIR."""
    parts = name.split(".")
    if len(parts) > 1:
        return Path(*parts[:-1]) / f"{parts[-1]}.log"
    return Path(f"{name}.log")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Set up a logger with both console and file handlers.

    Args:
        name (str): Logger name (typically __name__ from calling module)
        level (Optional[str], optional): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to None.
        log_file (Optional[str], optional): Optional specific log file name relative to LOG_DIR. Defaults to None.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    if has_console and has_file:
        return logger

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    if not has_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        if LOG_FORMAT_JSON:
            console_formatter: logging.Formatter = JSONFormatter()
        elif CONSOLE_COLORS:
            console_formatter = ColoredConsoleFormatter(fmt="%(levelname)s - %(name)s - %(message)s")
        else:
            console_formatter = logging.Formatter(fmt="%(levelname)s - %(name)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if not has_file:
        file_path = LOG_DIR / (log_file or _module_log_file(name))
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
            delay=True,
        )
        file_handler.setLevel(log_level)

        if LOG_FORMAT_JSON:
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the specified module.

    Args:
        name (str): The name of the logger (typically __name__ from the calling module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return setup_logger(name)


class LogContext:
    """Context manager for tracking operations with automatic success/failure logging."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
    ):
        """Initialize log context.

        Args:
            logger (logging.Logger): Logger instance to use
            operation (str): Description of the operation
            level (int, optional): Log level for success messages. Defaults to logging.INFO.
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        """Enter the context."""
        self.start_time = datetime.now()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context and log completion or failure."""
        duration_ms = None
        if self.start_time is not None:
            duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation}",
                extra={"duration_ms": duration_ms},
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
                extra={"duration_ms": duration_ms},
            )

        # Don't suppress exceptions
        return False
