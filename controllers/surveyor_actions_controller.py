# -*- coding: utf-8 -*-
"""
Surveyor Actions Controller
===========================
Create, update, activate, deactivate and delete surveyors.

All five operations share one {loading, error, success} state: starting an
operation clears whatever the previous one left behind.
"""

from dataclasses import asdict
from typing import Any, Callable, Dict, Optional, Tuple, Union

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationState
from models.surveyor import Surveyor, SurveyorCreateRequest, SurveyorUpdateRequest
from services.api_client import SurveyorApiClient
from services.error_mapper import map_write_error
from services.exceptions import BusinessRuleException
from services.session import SessionContext
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

CreatePayload = Union[SurveyorCreateRequest, Dict[str, Any]]
UpdatePayload = Union[SurveyorUpdateRequest, Dict[str, Any]]


class SurveyorActionsController(BaseController):
    """
    Controller for surveyor mutations.

    Every operation returns True on success and False otherwise; the reason
    for a failure is available through `error`.
    """

    # Signals
    surveyor_created = pyqtSignal(object)  # Surveyor, or None if the server returned no body
    surveyor_updated = pyqtSignal(object)  # Surveyor, or None
    surveyor_deleted = pyqtSignal(int)  # surveyor id
    status_changed = pyqtSignal(int, bool)  # surveyor id, is_active

    def __init__(self, session: SessionContext, api: Optional[SurveyorApiClient] = None, parent=None):
        super().__init__(session, api, parent)
        self._last_operation: Optional[str] = None
        self._last_saved: Optional[Surveyor] = None

    # ==================== Properties ====================

    @property
    def loading(self) -> bool:
        return self.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.last_error

    @property
    def success(self) -> bool:
        return self.state.is_success

    @property
    def last_operation(self) -> Optional[str]:
        """Name of the operation that owns the current state."""
        return self._last_operation

    @property
    def last_saved(self) -> Optional[Surveyor]:
        """Record returned by the last successful create/update, if any."""
        return self._last_saved

    @staticmethod
    def can_delete(surveyor: Surveyor) -> bool:
        return surveyor.can_delete

    def reset_state(self):
        self._last_operation = None
        self._set_state(OperationState.idle())

    # ==================== Operations ====================

    def create(self, payload: CreatePayload) -> bool:
        ok, data = self._execute("create", self.api.create_surveyor,
                                 body=lambda: self._as_create_request(payload).to_api_dict())
        if not ok:
            return False

        self._last_saved = self._decode(data)
        self.surveyor_created.emit(self._last_saved)
        self._succeed("create", tr("surveyor.created"))
        return True

    def update(self, surveyor_id: int, payload: UpdatePayload) -> bool:
        ok, data = self._execute("update", self.api.update_surveyor, surveyor_id,
                                 body=lambda: self._as_update_request(payload).to_api_dict())
        if not ok:
            return False

        self._last_saved = self._decode(data)
        self.surveyor_updated.emit(self._last_saved)
        self._succeed("update", tr("surveyor.updated"))
        return True

    def activate(self, surveyor_id: int) -> bool:
        """Activate; an already active surveyor is still sent to the server."""
        return self._set_status("activate", surveyor_id, self.api.activate_surveyor, True)

    def deactivate(self, surveyor_id: int) -> bool:
        return self._set_status("deactivate", surveyor_id, self.api.deactivate_surveyor, False)

    def delete(self, surveyor: Surveyor) -> bool:
        """
        Delete a surveyor.

        Refused locally, without calling the server, while clients or
        technicians are still assigned to it.
        """
        if not surveyor.can_delete:
            self._last_operation = "delete"
            error = BusinessRuleException(
                tr("error.surveyor.delete_blocked",
                   clients=surveyor.total_clients, staff=surveyor.total_techniciens),
                rule="delete_requires_no_dependents"
            )
            logger.warning(f"Delete of surveyor {surveyor.id} refused: "
                           f"{surveyor.total_clients} clients, {surveyor.total_techniciens} techniciens")
            self._fail("delete", map_write_error(error))
            return False

        ok, _ = self._execute("delete", self.api.delete_surveyor, surveyor.id)
        if not ok:
            return False

        self.surveyor_deleted.emit(surveyor.id)
        self._succeed("delete", tr("surveyor.deleted"))
        return True

    # ==================== Internals ====================

    def _execute(self, operation: str, func: Callable, *args,
                 body: Optional[Callable[[], Dict[str, Any]]] = None) -> Tuple[bool, Any]:
        """
        Run one gateway call under the shared state; never raises.

        body builds the request body, appended after args. It runs only once
        the session is checked, and a payload it cannot convert fails the
        operation without calling the server.
        """
        self._last_operation = operation
        self._log_operation(operation, args=args[:1])
        if not self._require_session(operation):
            return False, None

        if body is not None:
            try:
                args += (body(),)
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Invalid {operation} payload: {e}")
                self._fail(operation, tr("error.form.invalid_payload"))
                return False, None

        self._begin(operation)
        try:
            return True, func(*args)
        except Exception as e:
            self._fail(operation, map_write_error(e))
            return False, None

    def _set_status(self, operation: str, surveyor_id: int, func: Callable, requested: bool) -> bool:
        ok, data = self._execute(operation, func, surveyor_id)
        if not ok:
            return False

        # The server's answer is authoritative when it reports the status
        is_active = requested
        if isinstance(data, dict) and "isActive" in data:
            is_active = bool(data["isActive"])
        self.status_changed.emit(surveyor_id, is_active)
        self._succeed(operation, tr(f"surveyor.{operation}d"))
        return True

    @staticmethod
    def _as_create_request(payload: Any) -> SurveyorCreateRequest:
        if isinstance(payload, SurveyorCreateRequest):
            return payload
        return SurveyorCreateRequest.from_form(payload)

    @staticmethod
    def _as_update_request(payload: Any) -> SurveyorUpdateRequest:
        if type(payload) is SurveyorUpdateRequest:
            return payload
        values = asdict(payload) if isinstance(payload, SurveyorUpdateRequest) else payload
        return SurveyorUpdateRequest.from_form(values)

    @staticmethod
    def _decode(data: Any) -> Optional[Surveyor]:
        if not isinstance(data, dict):
            return None
        try:
            return Surveyor.from_api(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Could not decode saved surveyor: {e}")
            return None
