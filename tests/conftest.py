# tests/conftest.py
import os
import sys
import pytest

# чтобы import create_app работал при запуске из корня
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from config import TestConfig
from extensions import db


@pytest.fixture()
def app():
    # отдельное приложение = отдельная in-memory база на каждый тест.
    # Контекст не держим открытым: иначе g (и current_user) общий для всех запросов клиента
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def register_and_login(client):
    """Register an account over HTTP, log in and return the issued token."""

    def _register_and_login(username: str = "alice", password: str = "pw1") -> str:
        resp = client.post("/register", json={"UserName": username, "Password": password})
        assert resp.get_json()["code"] == 0
        resp = client.post("/login", json={"UserName": username, "Password": password})
        body = resp.get_json()
        assert body["code"] == 0
        return body["Token"]

    return _register_and_login


@pytest.fixture()
def token(register_and_login):
    return register_and_login()


@pytest.fixture()
def fail_commit(monkeypatch):
    """Make every session commit raise a storage error."""
    from sqlalchemy.exc import OperationalError
    from sqlalchemy.orm import Session

    def _fail_commit():
        def _boom(self):
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Session, "commit", _boom)

    return _fail_commit


@pytest.fixture()
def fail_queries_on(monkeypatch):
    """Make session queries that mention the given table raise a storage error."""
    from sqlalchemy.exc import OperationalError
    from sqlalchemy.orm import Session

    original_execute = Session.execute

    def _fail_queries_on(table: str):
        def _execute(self, statement, *args, **kwargs):
            if table in str(statement):
                raise OperationalError(str(statement), {}, Exception("database is locked"))
            return original_execute(self, statement, *args, **kwargs)

        monkeypatch.setattr(Session, "execute", _execute)

    return _fail_queries_on
