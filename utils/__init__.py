# -*- coding: utf-8 -*-
"""
Financial Protection Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_amount, format_date, format_datetime, truncate_text

__all__ = [
    "get_logger",
    "setup_logger",
    "format_amount",
    "format_date",
    "format_datetime",
    "truncate_text",
]
