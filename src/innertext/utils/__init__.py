"""Utility modules for innertext.

Provides:
- siblings: find_after for sibling lookahead
- logger: get_logger for logging
"""

from innertext.utils.logger import get_logger
from innertext.utils.siblings import find_after

__all__ = [
    "find_after",
    "get_logger",
]
