"""
Tests for per-user settings endpoints.
"""


def test_settings_require_login(client):
    assert client.get("/api/settings").status_code == 401
    assert client.patch("/api/settings/1", json={"theme": "rose"}).status_code == 401


def test_get_settings_after_register(client, register):
    user = register().json()
    response = client.get("/api/settings")
    assert response.status_code == 200
    body = response.json()
    assert body["userId"] == user["id"]
    assert body["isPremium"] is False
    assert body["theme"] == "default"


def test_get_settings_creates_missing_record(client, storage, register):
    user = register().json()
    storage.user_settings.reset()
    body = client.get("/api/settings").json()
    assert body["userId"] == user["id"]
    assert storage.get_user_settings_for_user(user["id"]) is not None


def test_update_own_settings(client, register):
    register()
    current = client.get("/api/settings").json()

    response = client.patch(
        f"/api/settings/{current['id']}",
        json={"coupleNames": "Alice & Sam", "weddingDate": "2025-09-06"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["coupleNames"] == "Alice & Sam"
    assert body["weddingDate"] == "2025-09-06"
    assert body["theme"] == "default"

    cleared = client.patch(f"/api/settings/{current['id']}", json={"weddingDate": None}).json()
    assert cleared["weddingDate"] is None
    assert cleared["coupleNames"] == "Alice & Sam"


def test_cannot_update_other_users_settings(client, register):
    register(username="alice")
    alice_settings = client.get("/api/settings").json()
    client.post("/api/logout")

    register(username="mallory")
    response = client.patch(f"/api/settings/{alice_settings['id']}", json={"theme": "black"})
    assert response.status_code == 404
    assert response.json() == {"error": "Settings not found"}


def test_owner_cannot_be_reassigned(client, register):
    user = register().json()
    current = client.get("/api/settings").json()
    body = client.patch(f"/api/settings/{current['id']}", json={"userId": 999}).json()
    assert body["userId"] == user["id"]
