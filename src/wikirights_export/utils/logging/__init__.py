# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Provides loguru sinks and structlog loggers for the export pipeline

from .config import LoggingMode, configure_logging, get_logging_status
from .utils import get_logger, log_api_call, with_export_context, with_page_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Utilities
    "get_logger",
    "log_api_call",
    "with_export_context",
    "with_page_context",
]
