"""
Pytest configuration and fixtures

Every test gets a fresh application with its own storage handle, so nothing
leaks between tests. API tests default to the in-memory backend; the
``db_app`` fixture and the parametrized ``storage`` fixture run the same code
against SQLite through DatabaseStorage.
"""
import pytest

from cybele import create_app
from cybele.extensions import db
from cybele.storage import MemoryStorage

ALEX = {
    "username": "alex",
    "password": "x",
    "fullName": "Alex",
    "dateOfBirth": "1990-01-01",
    "targetDistance": 5,
}

BLAKE = {
    "username": "blake",
    "password": "hunter2",
    "fullName": "Blake Rivera",
    "dateOfBirth": "1985-06-30",
    "targetDistance": 20,
}


@pytest.fixture
def app():
    return create_app("testing", storage=MemoryStorage())


@pytest.fixture
def db_app():
    app = create_app("testing", STORAGE_BACKEND="database")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register():
    """Register a user on ``client`` (which keeps the session cookie)."""
    def _register(client, **overrides):
        payload = {**ALEX, **overrides}
        response = client.post("/api/register", json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _register


@pytest.fixture
def auth_client(app, register):
    client = app.test_client()
    register(client)
    return client


@pytest.fixture
def other_client(app, register):
    client = app.test_client()
    register(client, **BLAKE)
    return client


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Each storage contract test runs once per backend."""
    if request.param == "memory":
        yield MemoryStorage()
        return

    app = create_app("testing", STORAGE_BACKEND="database")
    with app.app_context():
        db.create_all()
        yield app.extensions["storage"]
        db.session.remove()
        db.drop_all()
