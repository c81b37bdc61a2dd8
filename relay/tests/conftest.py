import pytest
from fastapi.testclient import TestClient

from relay.main import app
from relay.core.config import get_settings
from relay.tests.fixtures.contact import *


def _client_with_settings(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


@pytest.fixture(scope="function")
def client(mock_settings):
    """Fixture providing a TestClient with a configured Brevo API key."""
    with _client_with_settings(mock_settings) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unconfigured_client(mock_settings_without_key):
    """Fixture providing a TestClient whose settings lack a Brevo API key."""
    with _client_with_settings(mock_settings_without_key) as c:
        yield c

    app.dependency_overrides.clear()
