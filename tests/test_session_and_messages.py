# -*- coding: utf-8 -*-
"""
Tests for the session context, message catalogs and error mapping.
"""
import time

import pytest

from services.error_mapper import map_read_error, map_write_error
from services.exceptions import ApiException, BusinessRuleException, SessionRequiredException
from services.session import SessionContext
from services.translation_manager import get_language, on_language_changed, set_language, tr
from services.translations.en import EN_TRANSLATIONS
from services.translations.fr import FR_TRANSLATIONS


class TestSession:
    """Test bearer credential handling."""

    def test_auth_headers(self, session):
        assert session.auth_headers() == {"Authorization": "Bearer test-token"}

    def test_anonymous(self, anonymous_session):
        assert not anonymous_session.is_authenticated
        with pytest.raises(SessionRequiredException):
            anonymous_session.require_token()

    def test_from_user(self):
        session = SessionContext.from_user({"username": "admin", "role": "ADMIN", "token": "abc"})
        assert session.token == "abc"
        assert session.role == "ADMIN"

    def test_clear(self, session):
        session.clear()
        assert session.token is None

    def test_expired_token(self):
        session = SessionContext(token="abc", expires_in=1)
        assert session.is_authenticated
        time.sleep(1.1)
        assert not session.is_authenticated


class TestMessages:
    """Test message catalogs."""

    def test_catalogs_have_same_keys(self):
        assert set(FR_TRANSLATIONS) == set(EN_TRANSLATIONS)

    def test_french_is_default(self):
        assert tr("error.api.http_status", status=502) == "Erreur HTTP: 502"

    def test_switch_to_english(self):
        set_language("en")
        assert get_language() == "en"
        assert tr("error.session.missing") != FR_TRANSLATIONS["error.session.missing"]

    def test_unsupported_language_falls_back(self):
        set_language("de")
        assert get_language() == "fr"

    def test_unknown_key(self):
        assert tr("no.such.key") == "no.such.key"

    def test_missing_argument_keeps_template(self):
        assert tr("error.api.http_status") == FR_TRANSLATIONS["error.api.http_status"]

    def test_language_listeners(self):
        seen = []
        on_language_changed(seen.append)

        set_language(" EN ")
        set_language("en")
        set_language("fr")

        assert seen == ["en", "fr"]


class TestErrorMapping:
    """Test the read / write mapping differences."""

    def test_not_found_key_is_per_resource(self):
        error = ApiException("404", status_code=404)
        assert map_read_error(error) == tr("error.api.not_found")
        assert map_read_error(error, not_found_key="error.surveyor.not_found") == tr("error.surveyor.not_found")

    def test_write_errors_do_not_use_status_messages(self):
        assert map_write_error(ApiException("404", status_code=404)) == "Erreur HTTP: 404"

    def test_business_rule(self):
        assert map_write_error(BusinessRuleException("Refusé", rule="x")) == "Refusé"

    def test_session(self):
        assert map_read_error(SessionRequiredException()) == tr("error.session.missing")
        assert map_write_error(SessionRequiredException()) == tr("error.session.missing")
