# -*- coding: utf-8 -*-
"""
Surveyor Form Controller
========================
Input buffers, validation and submission for the create and edit forms,
plus the city reference list the forms pick from.
"""

from typing import Any, Dict, List, Optional, Tuple

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from controllers.surveyor_actions_controller import SurveyorActionsController
from models.surveyor import City, Surveyor, SurveyorCreateRequest, SurveyorUpdateRequest
from services.api_client import SurveyorApiClient
from services.session import SessionContext
from services.translation_manager import tr
from services.validation_service import ValidationService
from utils.logger import get_logger

logger = get_logger(__name__)


class SurveyorFormController(BaseController):
    """
    Controller behind the surveyor create/edit forms.

    The edit form is seeded once from a fetched Surveyor; after the user
    starts typing, later seeds are ignored until reset(). Validation runs on
    the whole form at submit time and a field's error disappears as soon as
    that field changes.
    """

    MODE_CREATE = "create"
    MODE_UPDATE = "update"

    CREATE_FIELDS: Tuple[str, ...] = (
        "username", "email", "password", "phone_number", "first_name", "last_name",
        "birthday", "cin", "city_id", "license_number", "specialization",
    )
    UPDATE_FIELDS: Tuple[str, ...] = (
        "email", "phone_number", "first_name", "last_name", "birthday", "city_id", "specialization",
    )

    # Signals
    values_changed = pyqtSignal(dict)
    errors_changed = pyqtSignal(dict)
    cities_loaded = pyqtSignal(list)  # list of City

    def __init__(
        self,
        session: SessionContext,
        actions: SurveyorActionsController,
        mode: str = MODE_CREATE,
        api: Optional[SurveyorApiClient] = None,
        validator: Optional[ValidationService] = None,
        parent=None
    ):
        if mode not in (self.MODE_CREATE, self.MODE_UPDATE):
            raise ValueError(f"Unknown form mode: {mode}")
        super().__init__(session, api if api is not None else actions.api, parent)
        self.actions = actions
        self.mode = mode
        self.validator = validator or ValidationService()

        self._values: Dict[str, Any] = self._blank_values()
        self._errors: Dict[str, str] = {}
        self._cities: List[City] = []
        self._seeded_from: Optional[Surveyor] = None
        self._dirty = False

    # ==================== Properties ====================

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.CREATE_FIELDS if self.mode == self.MODE_CREATE else self.UPDATE_FIELDS

    @property
    def read_only_fields(self) -> Tuple[str, ...]:
        """Fields displayed but not editable (edit form only)."""
        return Surveyor.READ_ONLY_FIELDS if self.mode == self.MODE_UPDATE else ()

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def cities(self) -> List[City]:
        return self._cities

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def seeded_from(self) -> Optional[Surveyor]:
        return self._seeded_from

    # ==================== Buffers ====================

    def _blank_values(self) -> Dict[str, Any]:
        return {name: 0 if name == "city_id" else "" for name in self.fields}

    def city_id_for(self, city_name: str) -> int:
        """Id of the city with that name in the loaded list, 0 if unknown."""
        return next((city.id for city in self._cities if city.name == city_name), 0)

    def _values_from(self, surveyor: Surveyor) -> Dict[str, Any]:
        return {
            "email": surveyor.email,
            "phone_number": surveyor.phone_number,
            "first_name": surveyor.first_name,
            "last_name": surveyor.last_name,
            "birthday": surveyor.birthday or "",
            "city_id": self.city_id_for(surveyor.city_name),
            "specialization": surveyor.specialization,
        }

    def seed_from(self, surveyor: Surveyor) -> bool:
        """Fill the edit form from a record. Returns False if the buffers were kept."""
        if self.mode != self.MODE_UPDATE:
            logger.warning("seed_from called on a create form; ignored")
            return False
        if self._seeded_from is not None or self._dirty:
            return False

        self._seeded_from = surveyor
        self._values = self._values_from(surveyor)
        self.values_changed.emit(self.values)
        return True

    def set_field(self, name: str, value: Any):
        if name not in self.fields:
            raise KeyError(f"Unknown field for {self.mode} form: {name}")
        if self._values.get(name) == value:
            return

        self._values[name] = value
        self._dirty = True
        if name in self._errors:
            del self._errors[name]
            self.errors_changed.emit(self.errors)
        self.values_changed.emit(self.values)

    def revert(self):
        """Drop user edits: back to the seeded record (or blank) with no errors."""
        if self._seeded_from is not None:
            self._values = self._values_from(self._seeded_from)
        else:
            self._values = self._blank_values()
        self._dirty = False
        self._errors = {}
        self.errors_changed.emit(self.errors)
        self.values_changed.emit(self.values)
        self.actions.reset_state()

    def reset(self):
        """Forget everything, including the seeded record."""
        self._seeded_from = None
        self.revert()

    # ==================== Validation / submit ====================

    def validate(self) -> Dict[str, str]:
        if self.mode == self.MODE_CREATE:
            errors = self.validator.validate_create(self._values)
        else:
            errors = self.validator.validate_update(self._values)
        self._errors = errors
        self.errors_changed.emit(self.errors)
        return self.errors

    def submit(self, surveyor_id: Optional[int] = None) -> bool:
        """Validate everything, then hand the payload to the actions controller."""
        errors = self.validate()
        if errors:
            logger.info(f"{self.mode} form rejected: {tr('error.form.invalid')} {sorted(errors)}")
            return False

        if self.mode == self.MODE_CREATE:
            return self.actions.create(SurveyorCreateRequest.from_form(self._values))

        if surveyor_id is None and self._seeded_from is not None:
            surveyor_id = self._seeded_from.id
        if surveyor_id is None:
            raise ValueError("Submitting an edit form requires a surveyor id")
        return self.actions.update(surveyor_id, SurveyorUpdateRequest.from_form(self._values))

    # ==================== Cities ====================

    def load_cities(self) -> OperationResult[List[City]]:
        self._log_operation("load_cities")
        if not self._require_session("load_cities"):
            return OperationResult.fail(self.last_error)

        self._begin("load_cities")
        try:
            cities = [City.from_api(item) for item in self.api.get_cities()]
        except Exception as e:
            logger.error(f"load_cities failed: {e}")
            message = tr("error.cities.load_failed")
            self._fail("load_cities", message)
            return OperationResult.fail(message)

        self._cities = cities
        # A record seeded before the list arrived still needs its city id
        if self._seeded_from is not None and not self._dirty and not self._values.get("city_id"):
            self._values["city_id"] = self.city_id_for(self._seeded_from.city_name)
            self.values_changed.emit(self.values)

        self.cities_loaded.emit(cities)
        self._succeed("load_cities")
        return OperationResult.ok(data=cities)
