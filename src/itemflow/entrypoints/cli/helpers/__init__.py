"""CLI helpers for ITEMFLOW.

Logger-level option parsing and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["error", "parse_log_level", "success"]
