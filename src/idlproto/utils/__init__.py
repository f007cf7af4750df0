"""Utility functions for idlproto.

This module provides naming and comment formatting helpers and the default
handler-inclusion policy.
"""

from __future__ import annotations

from .handlers import NOCODE, HandlerFilter, IncludePredicate
from .naming import format_comment, pascal_case, snake_case

__all__ = [
    # Naming
    "pascal_case",
    "snake_case",
    "format_comment",
    # Handler filtering
    "HandlerFilter",
    "IncludePredicate",
    "NOCODE",
]
