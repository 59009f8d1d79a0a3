# tests/test_vehicle_routes.py
"""HTTP tests for the registry page, the JSON API and the health check."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import inspect
import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from app.database import get_db
from app.main import app
from app.routers import vehicle_page
from app.services.errors import StoreError
from app.services.vehicle_service import VehicleRules, VehicleService, get_vehicle_service

FORM = {"plate": "ABC123", "make": "Toyota", "model": "2015", "color": "Red", "owner": "Juan Perez"}


@pytest.fixture
def client(service, session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_vehicle_service] = lambda: service
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """Client whose service fails every database call."""
    broken = MagicMock(spec=VehicleService)
    broken.rules = VehicleRules()
    broken.list.side_effect = StoreError("password authentication failed for user 'registry'")
    broken.add.side_effect = StoreError("password authentication failed for user 'registry'")
    app.dependency_overrides[get_vehicle_service] = lambda: broken
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_add_client():
    """Client whose service lists fine but fails to save."""
    broken = MagicMock(spec=VehicleService)
    broken.rules = VehicleRules()
    broken.list.return_value = []
    broken.add.side_effect = StoreError("duplicate key value violates constraint \"vehicles_pkey\"")
    app.dependency_overrides[get_vehicle_service] = lambda: broken
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRegistryPage:
    def test_get_shows_empty_registry(self, client):
        resp = client.get("/vehicles")
        assert resp.status_code == 200
        assert "Vehicle Registry" in resp.text
        assert "No vehicles registered" in resp.text

    def test_post_valid_vehicle_shows_success_and_row(self, client):
        resp = client.post("/vehicles", data=FORM)

        assert resp.status_code == 200
        assert "Vehicle added successfully." in resp.text
        assert "<td>ABC123</td>" in resp.text

    def test_post_duplicate_plate_shows_rule_message(self, client):
        client.post("/vehicles", data=FORM)
        resp = client.post("/vehicles", data={**FORM, "owner": "Maria Lopez"})

        assert resp.status_code == 200
        assert "Plate is already registered." in resp.text
        assert resp.text.count("<td>ABC123</td>") == 1

    def test_post_missing_field_shows_rule_message(self, client):
        form = {k: v for k, v in FORM.items() if k != "owner"}
        resp = client.post("/vehicles", data=form)
        assert "Owner must be at least 5 characters long." in resp.text

    def test_values_are_html_escaped(self, client):
        client.post("/vehicles", data={**FORM, "owner": "<b>Juan</b>"})
        resp = client.get("/vehicles")
        assert "&lt;b&gt;Juan&lt;/b&gt;" in resp.text
        assert "<b>Juan</b>" not in resp.text

    def test_undecodable_body_still_renders_page(self, client):
        body = b"plate=\xff\xfeABC&make=Toyota&model=2015&color=Red&owner=Juan+Perez"
        resp = client.post("/vehicles", content=body,
                           headers={"Content-Type": "application/x-www-form-urlencoded"})

        assert resp.status_code == 200
        assert "Vehicle Registry" in resp.text

    def test_form_handler_runs_in_threadpool(self):
        assert not inspect.iscoroutinefunction(vehicle_page.submit_vehicle)
        assert inspect.iscoroutinefunction(vehicle_page.read_vehicle_form)

    def test_store_error_shows_generic_message(self, broken_client):
        resp = broken_client.post("/vehicles", data=FORM)

        assert resp.status_code == 200
        assert "password authentication" not in resp.text
        assert "Error listing vehicles." in resp.text

    def test_save_error_shows_technical_message(self, failing_add_client):
        resp = failing_add_client.post("/vehicles", data=FORM)

        assert resp.status_code == 200
        assert "Technical error while saving to the database." in resp.text
        assert "vehicles_pkey" not in resp.text

    def test_get_store_error_shows_generic_message(self, broken_client):
        resp = broken_client.get("/vehicles")
        assert resp.status_code == 200
        assert "Database error." in resp.text
        assert "password authentication" not in resp.text


class TestVehicleApi:
    def test_create_and_list(self, client):
        resp = client.post("/api/v1/vehicles", json=FORM)
        assert resp.status_code == 201
        created = resp.json()
        assert created["id"] is not None
        assert created["plate"] == "ABC123"

        listed = client.get("/api/v1/vehicles").json()
        assert [v["plate"] for v in listed] == ["ABC123"]

    def test_get_one_and_missing(self, client):
        created = client.post("/api/v1/vehicles", json=FORM).json()

        assert client.get(f"/api/v1/vehicles/{created['id']}").json()["owner"] == "Juan Perez"
        assert client.get("/api/v1/vehicles/999").status_code == 404

    def test_rule_violation_returns_400_with_reason(self, client):
        resp = client.post("/api/v1/vehicles", json={**FORM, "color": "red"})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Color not allowed")

    def test_update(self, client):
        created = client.post("/api/v1/vehicles", json=FORM).json()

        resp = client.put(f"/api/v1/vehicles/{created['id']}", json={**FORM, "color": "Black"})

        assert resp.json() == {"status": "updated", "id": created["id"]}
        assert client.get(f"/api/v1/vehicles/{created['id']}").json()["color"] == "Black"

    def test_update_missing_returns_400(self, client):
        resp = client.put("/api/v1/vehicles/77", json=FORM)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "No vehicle exists with the given id."

    def test_delete_protected_owner_returns_400(self, client):
        created = client.post("/api/v1/vehicles", json={**FORM, "owner": "Administrator"}).json()

        resp = client.delete(f"/api/v1/vehicles/{created['id']}")

        assert resp.status_code == 400
        assert client.get(f"/api/v1/vehicles/{created['id']}").status_code == 200

    def test_delete_missing_is_ok(self, client):
        resp = client.delete("/api/v1/vehicles/31337")
        assert resp.status_code == 200
        assert resp.json() == {"status": "removed", "id": 31337}

    def test_store_error_returns_generic_500(self, broken_client):
        resp = broken_client.get("/api/v1/vehicles")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Database error"}


class TestHealth:
    def test_health_ok(self, client):
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
