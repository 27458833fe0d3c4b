# -*- coding: utf-8 -*-
"""
Surveyor Console Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "SessionContext",
    "SurveyorApiClient",
    "ValidationService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "SessionContext":
        from .session import SessionContext
        return SessionContext
    elif name == "SurveyorApiClient":
        from .api_client import SurveyorApiClient
        return SurveyorApiClient
    elif name == "ValidationService":
        from .validation_service import ValidationService
        return ValidationService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
