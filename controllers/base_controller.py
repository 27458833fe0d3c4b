# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for all surveyor controllers.

Provides the OperationState machine (idle -> loading -> succeeded | failed),
the OperationResult return type and the Qt signals the UI listens to.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.api_client import SurveyorApiClient
from services.session import SessionContext
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [])


class OperationStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationState:
    """Status of the last operation a controller ran, with its message."""
    status: OperationStatus = OperationStatus.IDLE
    message: str = ""

    @classmethod
    def idle(cls) -> "OperationState":
        return cls()

    @classmethod
    def loading(cls) -> "OperationState":
        return cls(OperationStatus.LOADING)

    @classmethod
    def succeeded(cls, message: str = "") -> "OperationState":
        return cls(OperationStatus.SUCCEEDED, message)

    @classmethod
    def failed(cls, message: str) -> "OperationState":
        return cls(OperationStatus.FAILED, message)

    @property
    def is_loading(self) -> bool:
        return self.status is OperationStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status is OperationStatus.SUCCEEDED

    @property
    def error(self) -> Optional[str]:
        return self.message if self.status is OperationStatus.FAILED else None


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - OperationState tracking
    - Session precondition check
    - Logging
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    state_changed = pyqtSignal(object)  # OperationState
    loading_changed = pyqtSignal(bool)

    def __init__(self, session: SessionContext, api: Optional[SurveyorApiClient] = None, parent=None):
        super().__init__(parent)
        self.session = session
        self.api = api if api is not None else SurveyorApiClient(session)
        self._state = OperationState.idle()

    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._state.is_loading

    @property
    def last_error(self) -> Optional[str]:
        """Error message of the last operation, None if it did not fail."""
        return self._state.error

    def _set_state(self, state: OperationState):
        was_loading = self._state.is_loading
        self._state = state
        self.state_changed.emit(state)
        if was_loading != state.is_loading:
            self.loading_changed.emit(state.is_loading)

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _begin(self, operation: str):
        """Enter the loading state."""
        self.operation_started.emit(operation)
        self._set_state(OperationState.loading())

    def _succeed(self, operation: str, message: str = ""):
        self._set_state(OperationState.succeeded(message))
        self.operation_completed.emit(operation, True)

    def _fail(self, operation: str, message: str):
        logger.error(f"{self.__class__.__name__}.{operation}: {message}")
        self._set_state(OperationState.failed(message))
        self.operation_error.emit(operation, message)
        self.operation_completed.emit(operation, False)

    def _require_session(self, operation: str) -> bool:
        """Fail fast, without any remote call, when no bearer token is available."""
        if self.session.is_authenticated:
            return True
        self._fail(operation, tr("error.session.missing"))
        return False
