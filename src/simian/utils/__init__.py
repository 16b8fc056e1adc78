"""Utility modules for Simian.

Provides:
- logger: get_logger for logging
"""

from simian.utils.logger import get_logger

__all__ = ["get_logger"]
