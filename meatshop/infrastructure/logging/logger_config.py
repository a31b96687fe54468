"""
Logging Configuration

Console output for development, rotating JSON files for later analysis, and
structlog wired on top of the standard library loggers.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog
from pythonjsonlogger import jsonlogger

from meatshop.infrastructure.utilities.constants import FileSettings, LoggingSettings


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output"""

    colors = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy so file handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.colors.get(record.levelname, self.colors['RESET'])
        record.levelname = f"{log_color}{record.levelname}{self.colors['RESET']}"
        return super().format(record)


@dataclass
class LoggingConfigOptions:
    """Dataclass for logging configuration options"""
    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_console: bool = True
    enable_file: bool = True
    max_file_size: int = LoggingSettings.MAX_LOG_FILE_SIZE
    backup_count: int = LoggingSettings.MAIN_LOG_BACKUP_COUNT


def _json_formatter() -> logging.Formatter:
    return jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(lineno)d %(message)s"
    )


def _configure_structlog():
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(options: LoggingConfigOptions | None = None) -> logging.Logger:
    """
    Setup logging for the application

    Features:
    - Colored console output
    - Rotating JSON application log
    - Separate error-only log
    - structlog loggers routed through the same handlers
    """
    options = options or LoggingConfigOptions()
    level = getattr(logging, options.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if options.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            ColoredFormatter(
                fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        root_logger.addHandler(console_handler)

    if options.enable_file:
        logs_dir = Path(options.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        app_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.MAIN_LOG_FILE,
            maxBytes=options.max_file_size,
            backupCount=options.backup_count,
            encoding="utf-8",
        )
        app_handler.setLevel(level)
        app_handler.setFormatter(_json_formatter())
        root_logger.addHandler(app_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            logs_dir / FileSettings.ERROR_LOG_FILE,
            maxBytes=options.max_file_size,
            backupCount=LoggingSettings.ERROR_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(_json_formatter())
        root_logger.addHandler(error_handler)

    _configure_structlog()

    logger = logging.getLogger(__name__)
    logger.info("Logging configured (level=%s)", options.log_level.upper())
    return logger


def get_structured_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
