# -*- coding: utf-8 -*-
"""
Tests for SurveyorDetailController.
"""
import pytest

from controllers.base_controller import OperationStatus
from controllers.surveyor_detail_controller import SurveyorDetailController
from services.exceptions import ApiException, EnvelopeException, NetworkException
from services.translation_manager import tr


@pytest.fixture
def controller(qapp, session, fake_api):
    return SurveyorDetailController(session, api=fake_api)


def test_fetch_one(controller, fake_api):
    """Test loading a surveyor with its dependents."""
    result = controller.fetch_one(3)

    assert result.success
    assert controller.state.status is OperationStatus.SUCCEEDED
    assert controller.surveyor.id == 3
    assert controller.surveyor.dependents_summary == {"clients": 2, "techniciens": 1, "projects": 4}
    assert controller.surveyor.can_delete is False
    assert controller.last_loaded_id == 3
    assert fake_api.called("get_surveyor") == [("get_surveyor", 3)]


def test_fetch_one_emits_surveyor(controller, qtbot):
    with qtbot.waitSignal(controller.surveyor_loaded) as blocker:
        controller.fetch_one(1)
    assert blocker.args[0].username == "topo1"


def test_unknown_id_reports_not_found(controller):
    controller.fetch_one(1)
    result = controller.fetch_one(999)

    assert not result.success
    assert result.message == "Topographe non trouvé"
    assert controller.surveyor is None
    assert controller.last_loaded_id == 1


@pytest.mark.parametrize("error, expected", [
    (ApiException("401", status_code=401), "error.api.unauthorized"),
    (ApiException("403", status_code=403), "error.api.forbidden"),
    (ApiException("500", status_code=500), "error.api.server"),
    (ApiException("409", status_code=409, response_data={"message": "Conflit"}), "Conflit"),
    (ApiException("418", status_code=418), "Erreur HTTP: 418"),
    (NetworkException("Read timed out"), "error.api.timeout"),
    (NetworkException("Connection refused"), "error.api.connection"),
    (EnvelopeException("Topographe archivé", status_code=410), "Topographe archivé"),
    (EnvelopeException("not json", malformed=True), "error.api.invalid_response"),
])
def test_error_taxonomy(controller, fake_api, error, expected):
    """Test each failure kind maps to its message."""
    fake_api.errors["get_surveyor"] = error
    result = controller.fetch_one(1)

    assert result.message == tr(expected)
    assert controller.last_error == tr(expected)
    assert controller.state.status is OperationStatus.FAILED


def test_empty_payload_is_an_error(controller, fake_api):
    fake_api.responses["get_surveyor"] = None
    controller.fetch_one(1)
    assert controller.last_error == tr("error.surveyor.data_missing")


def test_unreadable_payload_is_an_error(controller, fake_api):
    fake_api.responses["get_surveyor"] = {"username": "no-id"}
    controller.fetch_one(1)
    assert controller.last_error == tr("error.api.invalid_format")


def test_missing_session_makes_no_call(qapp, anonymous_session, fake_api):
    controller = SurveyorDetailController(anonymous_session, api=fake_api)
    result = controller.fetch_one(1)

    assert result.message == tr("error.session.missing")
    assert fake_api.calls == []


def test_refresh_without_successful_fetch_is_noop(controller, fake_api):
    assert controller.refresh() is None

    controller.fetch_one(999)
    assert controller.refresh() is None
    assert len(fake_api.calls) == 1


def test_refresh_reuses_last_successful_id(controller, fake_api):
    controller.fetch_one(2)
    fake_api.records[2]["firstName"] = "Youssef"
    controller.fetch_one(999)

    result = controller.refresh()

    assert result.success
    assert fake_api.calls[-1] == ("get_surveyor", 2)
    assert controller.surveyor.first_name == "Youssef"


def test_reset(controller):
    controller.fetch_one(1)
    controller.reset()

    assert controller.surveyor is None
    assert controller.state.status is OperationStatus.IDLE
    assert controller.refresh() is None
