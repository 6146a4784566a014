"""Utility modules for Texbox.

Provides:
- logger: get_logger for logging
"""

from texbox.utils.logger import get_logger

__all__ = ["get_logger"]
