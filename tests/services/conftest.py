# tests/services/conftest.py
from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from musicopedia.services.api.app import create_app
from musicopedia.services.api.deps import transactional_session


@pytest.fixture()
def api_client(db):
    """
    TestClient over a fresh app. Every request in a test runs on the same
    rolled-back `db` session, so a POST is visible to the next GET.
    """
    app = create_app()

    def _test_session():
        yield db

    app.dependency_overrides[transactional_session] = _test_session
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
