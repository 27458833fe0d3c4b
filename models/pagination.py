# -*- coding: utf-8 -*-
"""
Pagination and search filter models for the surveyor listing.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PageWindow:
    """
    Position of the currently displayed page.

    page_number is 0-based. total_pages == ceil(total_elements / page_size).
    """
    page_number: int = 0
    page_size: int = 10
    total_elements: int = 0
    total_pages: int = 0

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.page_number < 0:
            raise ValueError(f"page_number must not be negative, got {self.page_number}")

    @staticmethod
    def pages_for(total_elements: int, page_size: int) -> int:
        if total_elements <= 0:
            return 0
        return math.ceil(total_elements / page_size)

    @classmethod
    def compute(cls, page_number: int, page_size: int, total_elements: int) -> "PageWindow":
        """Build a window, deriving total_pages and clamping page_number into range."""
        total_pages = cls.pages_for(total_elements, page_size)
        if total_pages:
            page_number = min(max(page_number, 0), total_pages - 1)
        else:
            page_number = 0
        return cls(page_number, page_size, max(total_elements, 0), total_pages)

    @classmethod
    def from_api(cls, data: Dict[str, Any], fallback_size: int) -> "PageWindow":
        """
        Build from the backend page payload.

        {content, page, size, totalElements, totalPages, first, last, hasNext, hasPrevious}
        """
        size = int(data.get("size") or fallback_size)
        return cls.compute(
            page_number=int(data.get("page") or 0),
            page_size=size,
            total_elements=int(data.get("totalElements") or 0),
        )

    @property
    def has_previous(self) -> bool:
        return self.page_number > 0

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    @property
    def first_item_index(self) -> int:
        """1-based index of the first row on this page (0 when empty)."""
        if self.total_elements == 0:
            return 0
        return self.page_number * self.page_size + 1

    @property
    def last_item_index(self) -> int:
        return min((self.page_number + 1) * self.page_size, self.total_elements)

    def is_valid_page(self, page_number: int) -> bool:
        if page_number < 0:
            return False
        if self.total_pages > 0 and page_number >= self.total_pages:
            return False
        return True


@dataclass(frozen=True)
class SearchFilters:
    """
    Optional search criteria.

    None means "no constraint". Blank strings are dropped by normalized(),
    so {"specialization": "", "city_name": "SIG"} only filters on the city.
    Other values (a numeric combo entry, say) are filtered on as text.
    """
    specialization: Optional[str] = None
    city_name: Optional[str] = None
    is_active: Optional[bool] = None

    # python attribute -> query parameter
    QUERY_KEYS = {
        "specialization": "specialization",
        "city_name": "cityName",
        "is_active": "isActive",
    }

    @staticmethod
    def _clean(value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    def normalized(self) -> "SearchFilters":
        return SearchFilters(
            specialization=self._clean(self.specialization),
            city_name=self._clean(self.city_name),
            is_active=self.is_active,
        )

    @property
    def is_empty(self) -> bool:
        normalized = self.normalized()
        return (
            normalized.specialization is None
            and normalized.city_name is None
            and normalized.is_active is None
        )

    def to_query_params(self) -> Dict[str, str]:
        """Only the keys that carry a value, using backend parameter names."""
        normalized = self.normalized()
        params = {}
        for attr, key in self.QUERY_KEYS.items():
            value = getattr(normalized, attr)
            if value is None:
                continue
            params[key] = str(value).lower() if isinstance(value, bool) else value
        return params

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SearchFilters":
        """Accepts snake_case or backend (camelCase) keys."""
        if not data:
            return cls()
        return cls(
            specialization=data.get("specialization"),
            city_name=data.get("city_name", data.get("cityName")),
            is_active=data.get("is_active", data.get("isActive")),
        )
