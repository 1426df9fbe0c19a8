"""Utility modules for snippetlex.

Provides:
- logger: get_logger for logging
"""

from snippetlex.utils.logger import get_logger

__all__ = ["get_logger"]
