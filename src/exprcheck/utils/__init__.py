"""Utility modules for exprcheck.

Provides:
- logger: get_logger for logging
"""

from exprcheck.utils.logger import get_logger

__all__ = ["get_logger"]
