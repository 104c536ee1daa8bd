"""
Tests for budget endpoints.
"""
from decimal import Decimal
from fastapi.testclient import TestClient
from app.main import create_app


def test_create_budget_item_missing_description(client):
    response = client.post(
        "/api/budget",
        json={"category": "venue", "estimatedAmount": "5000"},
    )
    assert response.status_code == 400
    errors = response.json()["error"]
    assert any("description" in error["loc"] for error in errors)


def test_create_budget_item_defaults(client):
    response = client.post(
        "/api/budget",
        json={"category": "venue", "description": "Hall rental", "estimatedAmount": 5000},
    )
    assert response.status_code == 201
    item = response.json()
    assert item["paid"] is False
    assert item["actualAmount"] is None
    assert Decimal(item["estimatedAmount"]) == Decimal("5000")


def test_mark_paid_keeps_amounts(client):
    item = client.post(
        "/api/budget",
        json={
            "category": "catering",
            "description": "Dinner",
            "estimatedAmount": "3200.50",
            "dueDate": "2025-05-01",
        },
    ).json()

    response = client.patch(f"/api/budget/{item['id']}", json={"paid": True, "actualAmount": "3100"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["paid"] is True
    assert Decimal(updated["actualAmount"]) == Decimal("3100")
    assert Decimal(updated["estimatedAmount"]) == Decimal("3200.50")
    assert updated["dueDate"] == "2025-05-01"


def test_vendor_reference_survives_vendor_delete(client):
    vendor = client.post("/api/vendors", json={"name": "Bloom", "category": "florist"}).json()
    item = client.post(
        "/api/budget",
        json={
            "category": "flowers",
            "description": "Bouquets",
            "estimatedAmount": "800",
            "vendorId": vendor["id"],
        },
    ).json()

    assert client.delete(f"/api/vendors/{vendor['id']}").status_code == 204
    assert client.get(f"/api/budget/{item['id']}").json()["vendorId"] == vendor["id"]


def test_invalid_amount_is_rejected(client):
    response = client.post(
        "/api/budget",
        json={"category": "venue", "description": "Hall", "estimatedAmount": "a lot"},
    )
    assert response.status_code == 400


def test_amounts_serialize_alike_on_both_backends(any_storage):
    with TestClient(create_app(storage=any_storage)) as client:
        created = client.post(
            "/api/budget",
            json={"category": "venue", "description": "Hall", "estimatedAmount": "5000"},
        ).json()
        assert created["estimatedAmount"] == "5000.00"

        updated = client.patch(f"/api/budget/{created['id']}", json={"actualAmount": 4999.5}).json()
        assert updated["actualAmount"] == "4999.50"
        assert client.get(f"/api/budget/{created['id']}").json() == updated


def test_amount_beyond_column_precision_is_rejected(client):
    response = client.post(
        "/api/budget",
        json={"category": "venue", "description": "Hall", "estimatedAmount": "12345678901"},
    )
    assert response.status_code == 400
