# -*- coding: utf-8 -*-
"""
Shared fixtures for the surveyor console tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# No display on CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from fakes import FakeApiClient, make_record
from services.session import SessionContext
from services.translation_manager import get_language, set_language


@pytest.fixture(autouse=True)
def french_messages():
    """Messages are asserted in French, the console's default language."""
    previous = get_language()
    set_language("fr")
    yield
    set_language(previous)


@pytest.fixture
def session():
    return SessionContext(token="test-token", username="admin", role="ADMIN")


@pytest.fixture
def anonymous_session():
    return SessionContext()


@pytest.fixture
def records():
    """Twelve surveyors, all deletable except #3."""
    rows = [make_record(i) for i in range(1, 13)]
    rows[2].update({"totalClients": 2, "totalTechniciens": 1, "totalProjects": 4})
    rows[4].update({"cityName": "Casablanca", "specialization": "Topographie"})
    rows[5].update({"isActive": False})
    return rows


@pytest.fixture
def fake_api(records):
    return FakeApiClient(records)
