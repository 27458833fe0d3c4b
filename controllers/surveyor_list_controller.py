# -*- coding: utf-8 -*-
"""
Surveyor List Controller
========================
Paginated, filterable surveyor listing.

Handles:
- Page loading with a fixed sort order
- Routing between the plain listing and the search endpoint
- Page navigation, page size, filters, refresh and retry
- Last-request-wins ordering for overlapping requests
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Union

from PyQt5.QtCore import pyqtSignal, pyqtSlot

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from controllers.workers import ApiWorker
from models.pagination import PageWindow, SearchFilters
from models.surveyor import Surveyor
from services.api_client import SurveyorApiClient
from services.error_mapper import map_read_error
from services.exceptions import EnvelopeException
from services.session import SessionContext
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

FiltersInput = Union[SearchFilters, Dict[str, Any], None]


@dataclass
class SurveyorPage:
    """One loaded page: the rows and the window they belong to."""
    surveyors: List[Surveyor]
    page_window: PageWindow


@dataclass(frozen=True)
class ListRequest:
    page_number: int
    page_size: int
    filters: SearchFilters


class SurveyorListController(BaseController):
    """
    Controller for the surveyor listing.

    Every request gets a generation number; a response is only applied if its
    generation is still the latest one issued, whatever order responses
    arrive in.
    """

    # Signals
    surveyors_loaded = pyqtSignal(list)  # list of Surveyor
    page_changed = pyqtSignal(object)  # PageWindow
    filters_changed = pyqtSignal(object)  # SearchFilters

    def __init__(
        self,
        session: SessionContext,
        api: Optional[SurveyorApiClient] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
        parent=None
    ):
        super().__init__(session, api, parent)
        self.sort_by = sort_by or Config.DEFAULT_SORT_BY
        self.sort_dir = sort_dir or Config.DEFAULT_SORT_DIR

        self._surveyors: List[Surveyor] = []
        self._page_window = PageWindow(page_size=page_size or Config.DEFAULT_PAGE_SIZE)
        self._filters = SearchFilters()
        self._generation = 0
        self._last_request: Optional[ListRequest] = None
        self._workers: Set[ApiWorker] = set()

    # ==================== Properties ====================

    @property
    def surveyors(self) -> List[Surveyor]:
        return self._surveyors

    @property
    def page_window(self) -> PageWindow:
        return self._page_window

    @property
    def filters(self) -> SearchFilters:
        return self._filters

    @property
    def last_request(self) -> Optional[ListRequest]:
        return self._last_request

    @property
    def pending_requests(self) -> int:
        """Number of background requests whose worker has not been released yet."""
        return len(self._workers)

    # ==================== Loading ====================

    def list_page(
        self,
        page_number: int = 0,
        page_size: Optional[int] = None,
        filters: FiltersInput = None
    ) -> OperationResult[SurveyorPage]:
        """
        Load one page of surveyors.

        An empty filter set goes to the plain listing endpoint; otherwise the
        search endpoint is called with only the non-empty filters.
        """
        request = self._build_request(page_number, page_size, filters)
        generation = self._start(request)
        if generation is None:
            return OperationResult.fail(self.last_error)

        try:
            page = self._load(request)
        except Exception as e:
            return self._apply_failure(generation, e)
        return self._apply_success(generation, page)

    def list_page_async(
        self,
        page_number: int = 0,
        page_size: Optional[int] = None,
        filters: FiltersInput = None
    ) -> Optional[int]:
        """
        Same as list_page but runs the request on a worker thread.

        Returns the request generation, or None if the request was refused.
        """
        request = self._build_request(page_number, page_size, filters)
        generation = self._start(request)
        if generation is None:
            return None

        worker = ApiWorker(generation, self._load, request)
        worker.completed.connect(self._apply_success)
        worker.failed.connect(self._apply_failure)
        worker.finished.connect(self._release_worker)
        self._workers.add(worker)
        worker.start()
        return generation

    # ==================== Navigation ====================

    def change_page(self, page_number: int) -> Optional[OperationResult[SurveyorPage]]:
        """Go to another page with the current size and filters. Out-of-range pages are ignored."""
        if not self._page_window.is_valid_page(page_number):
            logger.warning(f"Invalid page requested: {page_number} (total pages: {self._page_window.total_pages})")
            return None
        return self.list_page(page_number, self._page_window.page_size, self._filters)

    def next_page(self) -> Optional[OperationResult[SurveyorPage]]:
        if not self._page_window.has_next:
            return None
        return self.change_page(self._page_window.page_number + 1)

    def previous_page(self) -> Optional[OperationResult[SurveyorPage]]:
        if not self._page_window.has_previous:
            return None
        return self.change_page(self._page_window.page_number - 1)

    def apply_filters(self, filters: FiltersInput) -> OperationResult[SurveyorPage]:
        """New filters invalidate the current window: reload from page 0."""
        logger.info(f"Searching with filters: {filters}")
        return self.list_page(0, self._page_window.page_size, filters)

    def clear_filters(self) -> OperationResult[SurveyorPage]:
        logger.info("Clearing search filters")
        return self.list_page(0, self._page_window.page_size, SearchFilters())

    def refresh(self) -> OperationResult[SurveyorPage]:
        return self.list_page(self._page_window.page_number, self._page_window.page_size, self._filters)

    def set_page_size(self, page_size: int) -> Optional[OperationResult[SurveyorPage]]:
        if page_size < 1 or page_size > Config.MAX_PAGE_SIZE:
            logger.warning(f"Invalid page size: {page_size}")
            return None
        return self.list_page(0, page_size, self._filters)

    def retry_last_request(self) -> OperationResult[SurveyorPage]:
        """Re-issue the last request, whether it succeeded or not."""
        request = self._last_request
        if request is None:
            return self.list_page(0, self._page_window.page_size, self._filters)
        logger.info(f"Retrying last request: {request}")
        return self.list_page(request.page_number, request.page_size, request.filters)

    # ==================== Internals ====================

    def _build_request(self, page_number: int, page_size: Optional[int],
                       filters: FiltersInput) -> ListRequest:
        if not isinstance(filters, SearchFilters):
            filters = SearchFilters.from_dict(filters)
        return ListRequest(
            page_number=max(page_number, 0),
            page_size=page_size or self._page_window.page_size,
            filters=filters.normalized(),
        )

    def _start(self, request: ListRequest) -> Optional[int]:
        """Register a new request; anything issued before it becomes stale."""
        self._generation += 1
        self._last_request = request
        if request.filters != self._filters:
            self._filters = request.filters
            self.filters_changed.emit(request.filters)

        self._log_operation("list_page", page=request.page_number, size=request.page_size,
                            filters=request.filters.to_query_params(), generation=self._generation)
        if not self._require_session("list_page"):
            return None
        self._begin("list_page")
        return self._generation

    def _load(self, request: ListRequest) -> SurveyorPage:
        if request.filters.is_empty:
            payload = self.api.list_surveyors(
                request.page_number, request.page_size, self.sort_by, self.sort_dir)
        else:
            payload = self.api.search_surveyors(
                request.page_number, request.page_size, request.filters, self.sort_by, self.sort_dir)
        return self._parse_page(payload, request.page_size)

    @staticmethod
    def _parse_page(payload: Any, page_size: int) -> SurveyorPage:
        if not isinstance(payload, dict) or not isinstance(payload.get("content"), list):
            raise EnvelopeException(tr("error.api.invalid_format"))
        try:
            surveyors = [Surveyor.from_api(item) for item in payload["content"]]
            window = PageWindow.from_api(payload, fallback_size=page_size)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Unreadable page payload: {e}")
            raise EnvelopeException(tr("error.api.invalid_format"))
        return SurveyorPage(surveyors=surveyors, page_window=window)

    @pyqtSlot()
    def _release_worker(self):
        worker = self.sender()
        if worker is not None:
            worker.wait()
            self._workers.discard(worker)

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(f"Discarding stale list response (generation {generation}, latest {self._generation})")
            return True
        return False

    def _apply_success(self, generation: int, page: SurveyorPage) -> OperationResult[SurveyorPage]:
        if self._is_stale(generation):
            return OperationResult.fail(tr("error.list.superseded"))

        self._surveyors = page.surveyors
        self._page_window = page.page_window
        logger.info(f"Loaded {len(page.surveyors)} surveyors (page {page.page_window.page_number + 1}"
                    f"/{page.page_window.total_pages})")
        self.surveyors_loaded.emit(self._surveyors)
        self.page_changed.emit(self._page_window)
        self._succeed("list_page")
        return OperationResult.ok(data=page)

    def _apply_failure(self, generation: int, error: Exception) -> OperationResult[SurveyorPage]:
        if self._is_stale(generation):
            return OperationResult.fail(tr("error.list.superseded"))

        message = map_read_error(error)
        # Keep the page window so pagination stays usable for a retry
        self._surveyors = []
        self.surveyors_loaded.emit(self._surveyors)
        self._fail("list_page", message)
        return OperationResult.fail(message)
