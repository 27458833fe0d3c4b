# -*- coding: utf-8 -*-
"""
Surveyor Console Data Models
"""

from .surveyor import City, Surveyor, SurveyorCreateRequest, SurveyorUpdateRequest
from .pagination import PageWindow, SearchFilters

__all__ = [
    "City",
    "Surveyor",
    "SurveyorCreateRequest",
    "SurveyorUpdateRequest",
    "PageWindow",
    "SearchFilters",
]
