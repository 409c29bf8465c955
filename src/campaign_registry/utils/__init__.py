# ABOUTME: Shared utilities for the campaign registry
# ABOUTME: Currently hosts the logging helpers

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
