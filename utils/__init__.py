# -*- coding: utf-8 -*-
"""
Surveyor Console Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import from_isoformat, parse_date, to_date_isoformat

__all__ = [
    "get_logger",
    "setup_logger",
    "from_isoformat",
    "parse_date",
    "to_date_isoformat",
]
