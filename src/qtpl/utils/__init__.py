"""Utility modules for qtpl.

Provides:
- text: escape, collapse_whitespace for text processing
- logger: get_logger for logging
"""

from qtpl.utils.logger import get_logger
from qtpl.utils.text import collapse_whitespace, escape

__all__ = [
    "collapse_whitespace",
    "escape",
    "get_logger",
]
