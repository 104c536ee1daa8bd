"""
Tests for task endpoints.
"""


def test_partial_update_keeps_untouched_fields(client):
    task = client.post(
        "/api/tasks",
        json={"title": "Book venue", "priority": "high", "dueDate": "2025-06-01"},
    ).json()

    response = client.patch(f"/api/tasks/{task['id']}", json={"priority": "low"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["priority"] == "low"
    assert updated["dueDate"] == "2025-06-01"
    assert updated["title"] == "Book venue"


def test_task_defaults(client):
    task = client.post("/api/tasks", json={"title": "Send invitations"}).json()
    assert task["completed"] is False
    assert task["priority"] == "medium"
    assert task["dueDate"] is None


def test_complete_task(client):
    task = client.post("/api/tasks", json={"title": "Order cake", "assignedTo": "Groom"}).json()
    updated = client.patch(f"/api/tasks/{task['id']}", json={"completed": True}).json()
    assert updated["completed"] is True
    assert updated["assignedTo"] == "Groom"


def test_invalid_priority_is_rejected(client):
    response = client.post("/api/tasks", json={"title": "Order cake", "priority": "urgent"})
    assert response.status_code == 400


def test_patch_with_wrong_type_is_rejected(client):
    task = client.post("/api/tasks", json={"title": "Order cake"}).json()
    response = client.patch(f"/api/tasks/{task['id']}", json={"completed": "sometimes"})
    assert response.status_code == 400
