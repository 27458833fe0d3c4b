# -*- coding: utf-8 -*-
"""
Surveyor Detail Controller
==========================
Fetches and holds a single surveyor record.
"""

from typing import Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult, OperationState
from models.surveyor import Surveyor
from services.api_client import SurveyorApiClient
from services.error_mapper import map_read_error
from services.exceptions import EnvelopeException
from services.session import SessionContext
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class SurveyorDetailController(BaseController):
    """
    Controller for one surveyor's details.

    State: idle -> loading -> succeeded | failed, and back to loading on the
    next fetch. refresh() only re-issues an id that was fetched successfully.
    """

    surveyor_loaded = pyqtSignal(object)  # Surveyor

    def __init__(self, session: SessionContext, api: Optional[SurveyorApiClient] = None, parent=None):
        super().__init__(session, api, parent)
        self._surveyor: Optional[Surveyor] = None
        self._last_loaded_id: Optional[int] = None

    @property
    def surveyor(self) -> Optional[Surveyor]:
        return self._surveyor

    @property
    def last_loaded_id(self) -> Optional[int]:
        return self._last_loaded_id

    def fetch_one(self, surveyor_id: int) -> OperationResult[Surveyor]:
        """Load a surveyor by id; failures clear the held record."""
        self._log_operation("fetch_one", surveyor_id=surveyor_id)
        if not self._require_session("fetch_one"):
            return OperationResult.fail(self.last_error)

        self._begin("fetch_one")
        try:
            data = self.api.get_surveyor(surveyor_id)
            if not data:
                raise EnvelopeException(tr("error.surveyor.data_missing"))
            try:
                surveyor = Surveyor.from_api(data)
            except (KeyError, TypeError, ValueError) as e:
                logger.error(f"Unreadable surveyor payload: {e}")
                raise EnvelopeException(tr("error.api.invalid_format"))
        except Exception as e:
            message = map_read_error(e, not_found_key="error.surveyor.not_found")
            self._surveyor = None
            self._fail("fetch_one", message)
            return OperationResult.fail(message)

        self._surveyor = surveyor
        self._last_loaded_id = surveyor_id
        logger.info(f"Surveyor details loaded: {surveyor_id}")
        self.surveyor_loaded.emit(surveyor)
        self._succeed("fetch_one")
        return OperationResult.ok(data=surveyor)

    def refresh(self) -> Optional[OperationResult[Surveyor]]:
        """Reload the last successfully fetched surveyor; no-op if none."""
        if self._last_loaded_id is None:
            return None
        logger.info(f"Refreshing surveyor {self._last_loaded_id}")
        return self.fetch_one(self._last_loaded_id)

    def reset(self):
        self._surveyor = None
        self._last_loaded_id = None
        self._set_state(OperationState.idle())
