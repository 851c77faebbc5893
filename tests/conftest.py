import httpx
import pytest
from fastapi.testclient import TestClient

from student_api.core.config import Settings
from student_api.main import create_app

REMOTE_FUNCTION_URL = "http://remote.test/api/Function"


def make_settings(tmp_path, **overrides) -> Settings:
    """Settings pointing at a throwaway SQLite file instead of MariaDB."""
    values = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'students.db'}",
        "DB_CREATE_TABLES": True,
        "REMOTE_FUNCTION_URL": REMOTE_FUNCTION_URL,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeRemoteFunction:
    """Stands in for the serverless function behind GET /say.

    Echoes the keyword the same way the deployed function does and records
    every request it receives. Set `status_code` or `error` to simulate a
    failing upstream.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        keyword = request.url.params.get("keyword")
        return httpx.Response(self.status_code, text=f'Shashankh says "{keyword}"')


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture()
def remote_function():
    return FakeRemoteFunction()


@pytest.fixture()
def app(settings, remote_function):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(remote_function))
    return create_app(settings, http_client=http_client)


@pytest.fixture()
def client(app):
    """TestClient running the app lifespan, so tables exist before the first request."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def student_factory(client):
    """Create a student through the API and return its generated id."""

    def _create_student(name="Ann", email="ann@example.com", age=30) -> int:
        response = client.post("/students", json={"name": name, "email": email, "age": age})
        assert response.status_code == 201
        return response.json()["studentId"]

    return _create_student
