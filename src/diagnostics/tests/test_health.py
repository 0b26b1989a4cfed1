import pytest
from django.db import DatabaseError

pytestmark = pytest.mark.django_db


def test_health_ok(client):
    response = client.get("/diagnostics/health")

    assert response.status_code == 200
    assert response.json()["data"] == {"database": "ok"}


def test_health_database_down(client, monkeypatch):
    def _down():
        raise DatabaseError("could not connect to server")

    monkeypatch.setattr("src.diagnostics.controllers.health_controller.database_ping", _down)

    response = client.get("/diagnostics/health")

    assert response.status_code == 503
    assert response.json()["code"] == "DATABASE_UNAVAILABLE"
    assert "connect" not in response.json()["message"]
