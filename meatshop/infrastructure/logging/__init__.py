"""
Logging Infrastructure
"""

from .logger_config import (
    LoggingConfigOptions,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "LoggingConfigOptions",
    "get_structured_logger",
    "setup_logging",
]
