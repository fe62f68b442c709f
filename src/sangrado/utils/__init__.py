"""Utility modules for Sangrado.

Provides:
- logger: get_logger for logging
"""

from sangrado.utils.logger import get_logger

__all__ = ["get_logger"]
