# -*- coding: utf-8 -*-
"""
Surveyor entity model.

The backend resource is `topographe`; its payloads are camelCase and are
converted here to the snake_case attributes used across the application.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from utils.datetime_utils import from_isoformat, to_date_isoformat


def _counter(value: Any) -> int:
    """Dependent counters are non-negative integers."""
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


@dataclass
class City:
    """City reference entry used by the surveyor forms."""
    id: int
    name: str
    region_name: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "City":
        region = data.get("region") or {}
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            region_name=region.get("name") if isinstance(region, dict) else None,
        )


@dataclass
class Surveyor:
    """
    Surveyor (topographe) personnel record.

    Identity and role fields are immutable after creation; they are listed in
    READ_ONLY_FIELDS so forms can show them without allowing edits.
    """

    READ_ONLY_FIELDS = ("id", "username", "cin", "license_number", "role", "created_at")

    # Identity
    id: int
    username: str = ""
    email: str = ""
    phone_number: str = ""

    # Personal
    first_name: str = ""
    last_name: str = ""
    birthday: Optional[str] = None  # YYYY-MM-DD
    cin: str = ""

    # Professional
    license_number: str = ""
    specialization: str = ""
    role: str = ""

    # Location / status
    city_name: str = ""
    is_active: bool = True

    # Audit
    created_at: Optional[datetime] = None

    # Dependent resources
    total_clients: int = 0
    total_techniciens: int = 0
    total_projects: int = 0

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def can_delete(self) -> bool:
        """Deletion is blocked while clients or staff are still assigned."""
        return self.total_clients == 0 and self.total_techniciens == 0

    @property
    def dependents_summary(self) -> Dict[str, int]:
        return {
            "clients": self.total_clients,
            "techniciens": self.total_techniciens,
            "projects": self.total_projects,
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Surveyor":
        """Create Surveyor from an API (camelCase) dictionary."""
        return cls(
            id=int(data["id"]),
            username=data.get("username") or "",
            email=data.get("email") or "",
            phone_number=data.get("phoneNumber") or "",
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            birthday=to_date_isoformat(data.get("birthday")),
            cin=data.get("cin") or "",
            license_number=data.get("licenseNumber") or "",
            specialization=data.get("specialization") or "",
            role=data.get("role") or "",
            city_name=data.get("cityName") or "",
            is_active=bool(data.get("isActive", False)),
            created_at=from_isoformat(data.get("createdAt")),
            total_clients=_counter(data.get("totalClients")),
            total_techniciens=_counter(data.get("totalTechniciens")),
            total_projects=_counter(data.get("totalProjects")),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "phone_number": self.phone_number,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "birthday": self.birthday,
            "cin": self.cin,
            "license_number": self.license_number,
            "specialization": self.specialization,
            "role": self.role,
            "city_name": self.city_name,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "total_clients": self.total_clients,
            "total_techniciens": self.total_techniciens,
            "total_projects": self.total_projects,
        }


@dataclass
class SurveyorUpdateRequest:
    """Editable fields of a surveyor (PUT body)."""
    email: str
    phone_number: str
    first_name: str
    last_name: str
    birthday: Union[str, date, None]
    city_id: int
    specialization: str

    @classmethod
    def from_form(cls, values: Dict[str, Any]) -> "SurveyorUpdateRequest":
        return cls(**{k: values.get(k) for k in cls.__dataclass_fields__})

    def to_api_dict(self) -> Dict[str, Any]:
        return {
            "email": (self.email or "").strip(),
            "phoneNumber": "".join((self.phone_number or "").split()),
            "firstName": (self.first_name or "").strip(),
            "lastName": (self.last_name or "").strip(),
            "birthday": to_date_isoformat(self.birthday),
            "cityId": int(self.city_id or 0),
            "specialization": (self.specialization or "").strip(),
        }


@dataclass
class SurveyorCreateRequest(SurveyorUpdateRequest):
    """All fields needed to create a surveyor (POST body)."""
    username: str = ""
    password: str = ""
    cin: str = ""
    license_number: str = ""

    def to_api_dict(self) -> Dict[str, Any]:
        body = super().to_api_dict()
        body.update({
            "username": (self.username or "").strip(),
            "password": self.password or "",
            "cin": (self.cin or "").strip(),
            "licenseNumber": (self.license_number or "").strip(),
        })
        return body


__all__ = ["City", "Surveyor", "SurveyorCreateRequest", "SurveyorUpdateRequest"]
