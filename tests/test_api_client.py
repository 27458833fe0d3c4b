# -*- coding: utf-8 -*-
"""
Tests for SurveyorApiClient.

requests.request is replaced by a recorder returning real Response objects,
so envelope handling and error translation run unchanged.
"""
import json

import pytest
import requests

from models.pagination import SearchFilters
from services.api_client import ApiConfig, ApiEnvelope, SurveyorApiClient
from services.exceptions import (
    ApiException,
    EnvelopeException,
    NetworkException,
    SessionRequiredException,
)


def make_response(status_code, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test"
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw.encode("utf-8")
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


def envelope(data=None, status=200, message="OK"):
    return {"status": status, "message": message, "data": data}


class RecordingTransport:
    """Stands in for requests.request."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def reply(self, *replies):
        self.replies.extend(replies)

    def __call__(self, method, url, **kwargs):
        self.calls.append(dict(kwargs, method=method, url=url))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def transport(monkeypatch):
    recorder = RecordingTransport()
    monkeypatch.setattr("services.api_client.requests.request", recorder)
    return recorder


@pytest.fixture
def config():
    return ApiConfig(
        base_url="http://api.test/",
        timeout=7,
        verify_ssl=True,
        surveyor_endpoint="/api/topographe",
        cities_endpoint="/cities",
    )


@pytest.fixture
def client(session, config):
    return SurveyorApiClient(session, config)


PAGE = {"content": [], "page": 0, "size": 10, "totalElements": 0, "totalPages": 0}


class TestRequests:
    """Test what goes over the wire."""

    def test_list_surveyors(self, client, transport):
        transport.reply(make_response(200, envelope(PAGE)))

        assert client.list_surveyors(page=2, size=25) == PAGE

        (call,) = transport.calls
        assert call["method"] == "GET"
        assert call["url"] == "http://api.test/api/topographe"
        assert call["params"] == {"page": 2, "size": 25, "sortBy": "firstName", "sortDir": "asc"}
        assert call["headers"]["Authorization"] == "Bearer test-token"
        assert call["timeout"] == 7
        assert call["verify"] is True

    def test_search_sends_only_set_filters(self, client, transport):
        transport.reply(make_response(200, envelope(PAGE)))

        client.search_surveyors(0, 10, SearchFilters(specialization="", city_name="SIG", is_active=True),
                                sort_by="lastName", sort_dir="desc")

        (call,) = transport.calls
        assert call["url"] == "http://api.test/api/topographe/search"
        assert call["params"] == {
            "page": 0, "size": 10, "sortBy": "lastName", "sortDir": "desc",
            "cityName": "SIG", "isActive": "true",
        }

    @pytest.mark.parametrize("name, args, method, path", [
        ("get_surveyor", (4,), "GET", "/api/topographe/4"),
        ("activate_surveyor", (4,), "PATCH", "/api/topographe/4/activate"),
        ("deactivate_surveyor", (4,), "PATCH", "/api/topographe/4/deactivate"),
        ("delete_surveyor", (4,), "DELETE", "/api/topographe/4"),
        ("create_surveyor", ({"username": "amina"},), "POST", "/api/topographe"),
    ])
    def test_endpoints(self, client, transport, name, args, method, path):
        transport.reply(make_response(200, envelope({"id": 4})))

        getattr(client, name)(*args)

        assert transport.calls[0]["method"] == method
        assert transport.calls[0]["url"] == f"http://api.test{path}"

    def test_update_drops_immutable_fields(self, client, transport):
        transport.reply(make_response(200, envelope({"id": 4})))

        client.update_surveyor(4, {"email": "a@b.com", "username": "x", "cin": "y",
                                   "licenseNumber": "z", "password": "secret123"})

        assert transport.calls[0]["method"] == "PUT"
        assert transport.calls[0]["json"] == {"email": "a@b.com"}

    def test_no_token_means_no_request(self, anonymous_session, config, transport):
        client = SurveyorApiClient(anonymous_session, config)

        with pytest.raises(SessionRequiredException):
            client.list_surveyors(0, 10)
        assert transport.calls == []

    def test_get_cities(self, client, transport):
        transport.reply(make_response(200, envelope([{"id": 1, "name": "Rabat"}])))
        assert client.get_cities() == [{"id": 1, "name": "Rabat"}]
        assert transport.calls[0]["url"] == "http://api.test/cities"


class TestResponses:
    """Test envelope unwrapping and error translation."""

    def test_envelope_failure(self, client, transport):
        transport.reply(make_response(200, envelope(None, status=400, message="Email déjà utilisé")))

        with pytest.raises(EnvelopeException) as exc_info:
            client.create_surveyor({"email": "a@b.com"})

        assert exc_info.value.message == "Email déjà utilisé"
        assert exc_info.value.status_code == 400
        assert exc_info.value.malformed is False

    @pytest.mark.parametrize("body", [[1, 2], {"data": {}}, {"status": "ok"}])
    def test_not_an_envelope(self, client, transport, body):
        transport.reply(make_response(200, body))

        with pytest.raises(EnvelopeException) as exc_info:
            client.get_surveyor(1)
        assert exc_info.value.malformed is True

    def test_invalid_json(self, client, transport):
        transport.reply(make_response(200, raw="<html>gateway</html>"))

        with pytest.raises(EnvelopeException) as exc_info:
            client.get_surveyor(1)
        assert exc_info.value.malformed is True

    def test_http_error_keeps_body(self, client, transport):
        transport.reply(make_response(409, {"status": 409, "message": "CIN déjà utilisé"}))

        with pytest.raises(ApiException) as exc_info:
            client.create_surveyor({"cin": "AB1"})

        assert not isinstance(exc_info.value, EnvelopeException)
        assert exc_info.value.status_code == 409
        assert exc_info.value.server_message == "CIN déjà utilisé"

    def test_http_error_without_body(self, client, transport):
        transport.reply(make_response(404))

        with pytest.raises(ApiException) as exc_info:
            client.get_surveyor(99)
        assert exc_info.value.status_code == 404
        assert exc_info.value.server_message == ""

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("Connection refused"),
        requests.exceptions.ReadTimeout("Read timed out"),
        requests.exceptions.TooManyRedirects("Exceeded 30 redirects"),
    ])
    def test_transport_errors(self, client, transport, error):
        transport.reply(error)

        with pytest.raises(NetworkException) as exc_info:
            client.list_surveyors(0, 10)
        assert exc_info.value.original_error is error

    def test_empty_body_on_write(self, client, transport):
        transport.reply(make_response(204))
        assert client.delete_surveyor(4) is None

    def test_empty_body_on_read(self, client, transport):
        transport.reply(make_response(200))
        with pytest.raises(EnvelopeException):
            client.get_surveyor(4)

    def test_cities_must_be_a_list(self, client, transport):
        transport.reply(make_response(200, envelope({"id": 1})))
        with pytest.raises(EnvelopeException):
            client.get_cities()


class TestEnvelope:
    """Test the envelope type."""

    @pytest.mark.parametrize("status, ok", [(200, True), (201, True), (299, True), (300, False), (404, False)])
    def test_is_success(self, status, ok):
        assert ApiEnvelope(status=status).is_success is ok

    def test_from_response(self):
        parsed = ApiEnvelope.from_response({"status": "201", "message": None, "data": {"id": 1}})
        assert parsed == ApiEnvelope(201, "", {"id": 1})
