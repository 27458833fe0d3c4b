# -*- coding: utf-8 -*-
"""
Surveyor API Client
===================

Thin gateway to the surveyor (topographe) backend.

Every response is wrapped in a {status, message, data} envelope; the client
unwraps it and raises typed exceptions from services.exceptions so that
controllers can map failures to user-facing messages.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from app.config import Config
from models.pagination import SearchFilters
from services.exceptions import ApiException, EnvelopeException, NetworkException
from services.session import SessionContext
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Connection settings, loaded from Config (which reads .env) when not given.

    Example .env:
        API_BASE_URL=http://192.168.1.20:8080
        API_TIMEOUT=15
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None
    surveyor_endpoint: str = None
    cities_endpoint: str = None

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.surveyor_endpoint is None:
            self.surveyor_endpoint = Config.SURVEYOR_ENDPOINT
        if self.cities_endpoint is None:
            self.cities_endpoint = Config.CITIES_ENDPOINT


@dataclass
class ApiEnvelope:
    """The {status, message, data} wrapper returned by every endpoint."""
    status: int
    message: str = ""
    data: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def from_response(cls, payload: Any) -> "ApiEnvelope":
        if not isinstance(payload, dict) or "status" not in payload:
            raise EnvelopeException("Response is not an API envelope", malformed=True)
        try:
            status = int(payload["status"])
        except (TypeError, ValueError):
            raise EnvelopeException(f"Invalid envelope status: {payload['status']!r}",
                                    response_data=payload, malformed=True)
        return cls(status=status, message=payload.get("message") or "", data=payload.get("data"))


class SurveyorApiClient:
    """
    Client for the surveyor backend.

    Features:
    - Bearer token from an injected SessionContext (checked before any request)
    - Envelope unwrapping
    - Typed errors: ApiException (non-2xx), EnvelopeException (failed envelope),
      NetworkException (transport), SessionRequiredException (no token)

    Usage:
        client = SurveyorApiClient(SessionContext(token="..."))
        page = client.list_surveyors(page=0, size=10)
    """

    def __init__(self, session: SessionContext, config: Optional[ApiConfig] = None):
        self.session = session
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.surveyors_path = self.config.surveyor_endpoint.rstrip('/')

        if not self.config.verify_ssl:
            # Self-signed certificates on development servers
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _headers(self) -> Dict[str, str]:
        """Headers with Authorization; raises SessionRequiredException without a token."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(self.session.auth_headers())
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request and return the decoded JSON body (None if empty).

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            endpoint: API endpoint (e.g., "/api/topographe/12")
            json_data: JSON payload
            params: Query parameters
        """
        headers = self._headers()
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            safe_body = {k: ("***" if k == "password" else v) for k, v in json_data.items()}
            logger.debug(f"[API REQ] Body: {json.dumps(safe_body, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            if not isinstance(response_data, dict):
                response_data = {}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context=f"{method} {endpoint}"
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=f"{method} {endpoint}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=f"{method} {endpoint}")

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        if not response.text:
            return None
        try:
            return response.json()
        except ValueError:
            logger.error(f"[API ERR] Invalid JSON from {method} {endpoint}: {response.text[:200]}")
            raise EnvelopeException(
                "Invalid JSON response",
                status_code=response.status_code,
                context=f"{method} {endpoint}",
                malformed=True
            )

    def _call(self, method: str, endpoint: str, json_data: Optional[Dict] = None,
              params: Optional[Dict] = None, allow_empty: bool = False) -> Any:
        """Request + envelope unwrapping. Returns the envelope's data."""
        payload = self._request(method, endpoint, json_data=json_data, params=params)
        if payload is None and allow_empty:
            return None

        envelope = ApiEnvelope.from_response(payload)
        if not envelope.is_success:
            logger.warning(f"[API ENV] {envelope.status} {method} {endpoint}: {envelope.message}")
            raise EnvelopeException(
                envelope.message,
                status_code=envelope.status,
                response_data=payload,
                context=f"{method} {endpoint}"
            )
        return envelope.data

    # ==================== Surveyors - Listing ====================

    def list_surveyors(self, page: int, size: int, sort_by: str = None,
                       sort_dir: str = None) -> Dict[str, Any]:
        """Unfiltered page of surveyors. Returns the page payload ({content, page, ...})."""
        return self._call("GET", self.surveyors_path,
                          params=self._page_params(page, size, sort_by, sort_dir))

    def search_surveyors(self, page: int, size: int, filters: SearchFilters,
                         sort_by: str = None, sort_dir: str = None) -> Dict[str, Any]:
        """Filtered page of surveyors; only non-empty filter keys are sent."""
        params = self._page_params(page, size, sort_by, sort_dir)
        params.update(filters.to_query_params())
        return self._call("GET", f"{self.surveyors_path}/search", params=params)

    @staticmethod
    def _page_params(page: int, size: int, sort_by: Optional[str],
                     sort_dir: Optional[str]) -> Dict[str, Any]:
        return {
            "page": page,
            "size": size,
            "sortBy": sort_by or Config.DEFAULT_SORT_BY,
            "sortDir": sort_dir or Config.DEFAULT_SORT_DIR,
        }

    # ==================== Surveyors - Detail / CRUD ====================

    def get_surveyor(self, surveyor_id: int) -> Dict[str, Any]:
        return self._call("GET", f"{self.surveyors_path}/{surveyor_id}")

    def create_surveyor(self, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._call("POST", self.surveyors_path, json_data=body, allow_empty=True)

    def update_surveyor(self, surveyor_id: int, body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """PUT editable fields. username, cin and licenseNumber are never sent."""
        for key in ("username", "cin", "licenseNumber", "password"):
            if key in body:
                logger.warning(f"update_surveyor: dropping immutable field '{key}'")
        body = {k: v for k, v in body.items() if k not in ("username", "cin", "licenseNumber", "password")}
        return self._call("PUT", f"{self.surveyors_path}/{surveyor_id}", json_data=body, allow_empty=True)

    def activate_surveyor(self, surveyor_id: int) -> Any:
        return self._call("PATCH", f"{self.surveyors_path}/{surveyor_id}/activate", allow_empty=True)

    def deactivate_surveyor(self, surveyor_id: int) -> Any:
        return self._call("PATCH", f"{self.surveyors_path}/{surveyor_id}/deactivate", allow_empty=True)

    def delete_surveyor(self, surveyor_id: int) -> Any:
        return self._call("DELETE", f"{self.surveyors_path}/{surveyor_id}", allow_empty=True)

    # ==================== Reference data ====================

    def get_cities(self) -> List[Dict[str, Any]]:
        data = self._call("GET", self.config.cities_endpoint)
        if not isinstance(data, list):
            raise EnvelopeException("City list is not an array", response_data={"data": data},
                                    malformed=True)
        return data
