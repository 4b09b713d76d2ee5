from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from todoapiclient.client import TodoApiClient
from todoapiclient.models.task import Task

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_ENDPOINT = "http://localhost:8080"

TASK_ID = "1"


def read_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


def load_task(name: str) -> Task:
    return Task.model_validate_json(read_fixture(name))


def make_response(status_code: int, fixture: str | None = None, url: str = BASE_ENDPOINT) -> requests.Response:
    """Build a real requests.Response carrying a fixture file as its body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = read_fixture(fixture) if fixture else b""
    resp.url = url
    return resp


@pytest.fixture
def mock_session(mocker):
    """Shared HTTP session replaced by a mock; configure .get / .post return values."""
    session = MagicMock()
    mocker.patch("todoapiclient.client.get_session", return_value=session)
    return session


@pytest.fixture
def api_client():
    return TodoApiClient(BASE_ENDPOINT)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    from todoapiclient.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
