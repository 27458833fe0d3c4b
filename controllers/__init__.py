# -*- coding: utf-8 -*-
"""
Surveyor Console Controllers
============================
Controller layer between the admin screens and the surveyor API.

Controllers provide:
- Observable operation state (idle / loading / succeeded / failed)
- Standardized results via OperationResult
- Qt signals for UI updates
- Display-ready error messages

Usage:
    from controllers import SurveyorListController
    from services.session import SessionContext

    session = SessionContext(token=access_token)
    controller = SurveyorListController(session)
    result = controller.apply_filters({"city_name": "Rabat"})
    if result.success:
        print(f"Loaded: {len(result.data.surveyors)} surveyors")
    else:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
    OperationState,
    OperationStatus,
)

# Domain controllers
from controllers.surveyor_list_controller import (
    ListRequest,
    SurveyorListController,
    SurveyorPage,
)

from controllers.surveyor_detail_controller import SurveyorDetailController

from controllers.surveyor_actions_controller import SurveyorActionsController

from controllers.surveyor_form_controller import SurveyorFormController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",
    "OperationState",
    "OperationStatus",

    # Listing
    "ListRequest",
    "SurveyorListController",
    "SurveyorPage",

    # Detail
    "SurveyorDetailController",

    # Mutations
    "SurveyorActionsController",
    "SurveyorFormController",
]
