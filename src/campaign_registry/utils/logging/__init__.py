# ABOUTME: Logging configuration and logger helpers
# ABOUTME: Dual-mode (interactive/production) sinks and structured context binding

from .config import LoggingMode, configure_logging, get_logging_status
from .utils import (
    LogContext,
    get_logger,
    with_async_operation_context,
    with_campaign_type_context,
)

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "with_async_operation_context",
    "with_campaign_type_context",
]
