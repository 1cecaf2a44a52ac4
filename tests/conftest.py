from __future__ import annotations

import pytest

from clinic_payroll.core.enums import Role
from clinic_payroll.main import create_app
from clinic_payroll.storage.kv_store import InMemoryKeyValueStore


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(role: Role = Role.ADMIN, user_id: str = "u1"):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["role"] = role.value
        return client

    return _login
