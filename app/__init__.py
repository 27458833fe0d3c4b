# -*- coding: utf-8 -*-
"""
Surveyor Console Application Core Module
"""

from .config import Config

__all__ = ["Config"]
