# -*- coding: utf-8 -*-
"""
Tests for the surveyor, pagination and filter models.
"""
from datetime import date, datetime, timezone

import pytest

from models.pagination import PageWindow, SearchFilters
from models.surveyor import City, Surveyor, SurveyorCreateRequest, SurveyorUpdateRequest
from fakes import make_record


class TestPageWindow:
    """Test page window arithmetic."""

    @pytest.mark.parametrize("total, size, pages", [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (95, 25, 4),
    ])
    def test_total_pages_is_ceiling(self, total, size, pages):
        window = PageWindow.compute(0, size, total)
        assert window.total_pages == pages

    def test_has_next_on_last_page(self):
        window = PageWindow.compute(1, 10, 11)
        assert window.has_next is False
        assert window.has_previous is True

    def test_has_next_on_first_page(self):
        window = PageWindow.compute(0, 10, 11)
        assert window.has_next is True
        assert window.has_previous is False

    def test_compute_clamps_page_number(self):
        assert PageWindow.compute(7, 10, 25).page_number == 2
        assert PageWindow.compute(3, 10, 0).page_number == 0

    def test_item_indexes(self):
        window = PageWindow.compute(1, 10, 15)
        assert window.first_item_index == 11
        assert window.last_item_index == 15

        assert PageWindow().first_item_index == 0

    def test_is_valid_page(self):
        window = PageWindow.compute(0, 10, 25)
        assert window.is_valid_page(2)
        assert not window.is_valid_page(3)
        assert not window.is_valid_page(-1)

    def test_rejects_bad_values(self):
        with pytest.raises(ValueError):
            PageWindow(page_size=0)
        with pytest.raises(ValueError):
            PageWindow(page_number=-1)

    def test_from_api_recomputes_total_pages(self):
        window = PageWindow.from_api({"page": 1, "size": 5, "totalElements": 11, "totalPages": 99}, 10)
        assert window == PageWindow(1, 5, 11, 3)

    def test_from_api_uses_fallback_size(self):
        window = PageWindow.from_api({"totalElements": 3}, fallback_size=25)
        assert window.page_size == 25
        assert window.total_pages == 1


class TestSearchFilters:
    """Test filter normalization and query parameters."""

    def test_blank_values_are_dropped(self):
        filters = SearchFilters(specialization="", city_name="SIG")
        assert filters.to_query_params() == {"cityName": "SIG"}

    def test_whitespace_is_trimmed(self):
        filters = SearchFilters(specialization="  Cadastre ", city_name="   ")
        assert filters.normalized() == SearchFilters(specialization="Cadastre")

    def test_boolean_is_serialized_lowercase(self):
        assert SearchFilters(is_active=False).to_query_params() == {"isActive": "false"}
        assert SearchFilters(is_active=True).to_query_params() == {"isActive": "true"}

    def test_is_empty(self):
        assert SearchFilters().is_empty
        assert SearchFilters(specialization=" ", city_name="").is_empty
        assert not SearchFilters(is_active=False).is_empty

    def test_from_dict_accepts_both_key_styles(self):
        assert SearchFilters.from_dict({"city_name": "Rabat"}) == SearchFilters(city_name="Rabat")
        assert SearchFilters.from_dict({"cityName": "Rabat", "isActive": True}) == \
            SearchFilters(city_name="Rabat", is_active=True)
        assert SearchFilters.from_dict(None) == SearchFilters()

    def test_non_string_values_are_used_as_text(self):
        filters = SearchFilters(specialization=None, city_name=5)
        assert filters.normalized() == SearchFilters(city_name="5")
        assert filters.to_query_params() == {"cityName": "5"}


class TestSurveyor:
    """Test surveyor decoding."""

    def test_from_api_maps_camel_case(self):
        surveyor = Surveyor.from_api(make_record(7, totalClients=3, cityName="Fès"))

        assert surveyor.id == 7
        assert surveyor.phone_number == "+212612345678"
        assert surveyor.license_number == "LIC-0007"
        assert surveyor.city_name == "Fès"
        assert surveyor.birthday == "1985-04-12"
        assert surveyor.total_clients == 3
        assert surveyor.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize("created_at, microsecond", [
        ("2024-01-15T10:30:00.123456789", 123456),
        ("2024-01-15T10:30:00.1234567Z", 123456),
        ("2024-01-15T10:30:00.5", 500000),
    ])
    def test_created_at_fraction_lengths(self, created_at, microsecond):
        surveyor = Surveyor.from_api({"id": 1, "createdAt": created_at})
        assert surveyor.created_at.replace(tzinfo=None) == datetime(2024, 1, 15, 10, 30, 0, microsecond)

    def test_negative_or_missing_counters_become_zero(self):
        surveyor = Surveyor.from_api({"id": 1, "totalClients": -4, "totalTechniciens": None})
        assert surveyor.total_clients == 0
        assert surveyor.total_techniciens == 0
        assert surveyor.total_projects == 0

    @pytest.mark.parametrize("clients, staff, deletable", [
        (0, 0, True),
        (1, 0, False),
        (0, 2, False),
    ])
    def test_can_delete(self, clients, staff, deletable):
        surveyor = Surveyor(id=1, total_clients=clients, total_techniciens=staff)
        assert surveyor.can_delete is deletable

    def test_projects_do_not_block_delete(self):
        assert Surveyor(id=1, total_projects=12).can_delete

    def test_full_name(self):
        assert Surveyor(id=1, first_name="Amina", last_name="Bennani").full_name == "Amina Bennani"
        assert Surveyor(id=1, last_name="Bennani").full_name == "Bennani"

    def test_to_dict(self):
        data = Surveyor.from_api(make_record(2)).to_dict()
        assert data["username"] == "topo2"
        assert data["created_at"].startswith("2024-01-15T10:30:00")

    def test_city_from_api(self):
        city = City.from_api({"id": "4", "name": "Tanger", "region": {"name": "Tanger-Tétouan"}})
        assert city == City(id=4, name="Tanger", region_name="Tanger-Tétouan")


class TestRequests:
    """Test request bodies sent to the backend."""

    def test_update_body_contains_only_editable_fields(self):
        request = SurveyorUpdateRequest(
            email=" a@b.com ", phone_number="+212 612 345 678", first_name="Amina",
            last_name="Bennani", birthday=date(1990, 5, 17), city_id="2", specialization="Cadastre",
        )
        assert request.to_api_dict() == {
            "email": "a@b.com",
            "phoneNumber": "+212612345678",
            "firstName": "Amina",
            "lastName": "Bennani",
            "birthday": "1990-05-17",
            "cityId": 2,
            "specialization": "Cadastre",
        }

    def test_create_body_adds_identity_fields(self):
        request = SurveyorCreateRequest.from_form({
            "username": "amina", "password": "secret123", "email": "a@b.com",
            "phone_number": "0612345678", "first_name": "Amina", "last_name": "Bennani",
            "birthday": "1990-05-17", "cin": "AB123", "city_id": 1,
            "license_number": "LIC-1", "specialization": "Cadastre",
        })
        body = request.to_api_dict()
        assert body["username"] == "amina"
        assert body["password"] == "secret123"
        assert body["licenseNumber"] == "LIC-1"
        assert body["cityId"] == 1
