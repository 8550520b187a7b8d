import pytest
from fastapi.testclient import TestClient

from otp_validator.main import create_app
from otp_validator.presentation.dependencies import get_clock, get_otp_store
from tests.conftest import INVALIDATED_AT


@pytest.fixture()
def app_and_store(store):
    app = create_app()

    app.dependency_overrides[get_otp_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: (lambda: INVALIDATED_AT)

    try:
        yield app, store
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_store):
    app, _ = app_and_store
    return TestClient(app, raise_server_exceptions=False)
