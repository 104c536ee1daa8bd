"""
Tests for guest endpoints.
"""


def test_guest_lifecycle(client):
    """Create, confirm, delete, then the guest is gone."""
    response = client.post("/api/guests", json={"name": "Ana", "category": "family"})
    assert response.status_code == 201
    guest = response.json()
    assert guest["rsvpStatus"] == "pending"
    assert guest["plusOne"] is False
    assert isinstance(guest["id"], int)

    response = client.patch(f"/api/guests/{guest['id']}", json={"rsvpStatus": "confirmed"})
    assert response.status_code == 200
    assert response.json()["rsvpStatus"] == "confirmed"
    assert response.json()["name"] == "Ana"

    response = client.delete(f"/api/guests/{guest['id']}")
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/api/guests/{guest['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Guest not found"}


def test_list_guests_in_creation_order(client):
    for name in ("Ana", "Ben", "Cleo"):
        client.post("/api/guests", json={"name": name, "category": "friends"})
    response = client.get("/api/guests")
    assert response.status_code == 200
    assert [g["name"] for g in response.json()] == ["Ana", "Ben", "Cleo"]


def test_patch_with_null_clears_optional_field(client):
    guest = client.post(
        "/api/guests",
        json={"name": "Ana", "category": "family", "email": "ana@example.com", "phone": "555-0101"},
    ).json()

    response = client.patch(f"/api/guests/{guest['id']}", json={"email": None})
    assert response.status_code == 200
    assert response.json()["email"] is None
    assert response.json()["phone"] == "555-0101"


def test_patch_rejects_null_required_field(client):
    guest = client.post("/api/guests", json={"name": "Ana", "category": "family"}).json()
    response = client.patch(f"/api/guests/{guest['id']}", json={"name": None})
    assert response.status_code == 400
    assert client.get(f"/api/guests/{guest['id']}").json()["name"] == "Ana"


def test_create_rejects_unknown_rsvp_status(client):
    response = client.post(
        "/api/guests",
        json={"name": "Ana", "category": "family", "rsvpStatus": "maybe"},
    )
    assert response.status_code == 400


def test_create_rejects_empty_name(client):
    response = client.post("/api/guests", json={"name": "", "category": "family"})
    assert response.status_code == 400


def test_patch_and_delete_unknown_guest(client):
    assert client.patch("/api/guests/999", json={"name": "Nobody"}).status_code == 404
    assert client.delete("/api/guests/999").status_code == 404


def test_non_integer_id_is_rejected(client):
    assert client.delete("/api/guests/abc").status_code == 400
