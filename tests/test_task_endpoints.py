"""
Tests for the bearer-protected /tasks endpoint and task ownership.
"""
from datetime import datetime, timedelta, timezone
from taskhub.modules.users.domain.user import User


def test_create_task_without_token_is_unauthorized(client):
    """401 regardless of whether the body is valid."""
    for payload in [{"userId": 1, "title": "Testtitle"}, {"userId": 1, "title": ""}, {}]:
        response = client.post("/tasks", json=payload)
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


def test_create_task_with_garbage_token_is_unauthorized(client):
    response = client.post(
        "/tasks",
        json={"userId": 1, "title": "t"},
        headers={"Authorization": "Bearer not.a.token"},
    )
    assert response.status_code == 401


def test_end_to_end_register_login_create_and_list(client, auth_headers):
    user, headers = auth_headers(username="u1", email="u1@example.com", password="Secret1!")

    response = client.post("/tasks", json={"userId": user["id"], "title": "t"}, headers=headers)
    assert response.status_code == 201
    task = response.json()
    assert task["userId"] == user["id"]
    assert task["title"] == "t"
    assert response.headers["location"] == f"/tasks/{task['id']}"

    listed = client.get(f"/users/{user['id']}/tasks")
    assert listed.status_code == 200
    assert [t["id"] for t in listed.json()] == [task["id"]]


def test_create_task_trims_and_keeps_optional_fields(client, auth_headers):
    user, headers = auth_headers()
    response = client.post(
        "/tasks",
        json={
            "userId": user["id"],
            "title": "  Write report  ",
            "description": "  quarterly numbers ",
            "dueDate": "2030-01-15T12:00:00",
        },
        headers=headers,
    )
    assert response.status_code == 201
    task = response.json()
    assert task["title"] == "Write report"
    assert task["description"] == "quarterly numbers"
    assert task["dueDate"] == "2030-01-15T12:00:00Z"


def test_create_task_blank_title_is_rejected(client, auth_headers):
    user, headers = auth_headers()
    response = client.post("/tasks", json={"userId": user["id"], "title": "   "}, headers=headers)
    assert response.status_code == 400


def test_create_task_for_missing_user_is_not_found(client, auth_headers):
    _, headers = auth_headers()
    response = client.post("/tasks", json={"userId": 9999, "title": "orphan"}, headers=headers)
    assert response.status_code == 404


def test_expired_token_is_rejected(client, register):
    registered = register()
    user = User(
        id=registered["id"],
        username=registered["username"],
        email=registered["email"],
        password_hash="",
        created_at=datetime.now(timezone.utc),
    )
    token_service = client.app.state.token_service

    fresh = token_service.issue(user)
    headers = {"Authorization": f"Bearer {fresh.token}"}
    assert client.post("/tasks", json={"userId": user.id, "title": "ok"}, headers=headers).status_code == 201

    stale = token_service.issue(user, now=datetime.now(timezone.utc) - timedelta(hours=2))
    headers = {"Authorization": f"Bearer {stale.token}"}
    assert client.post("/tasks", json={"userId": user.id, "title": "late"}, headers=headers).status_code == 401


def test_deleting_user_cascades_to_tasks(client, auth_headers):
    user, headers = auth_headers()
    task_ids = []
    for title in ["one", "two"]:
        response = client.post("/tasks", json={"userId": user["id"], "title": title}, headers=headers)
        task_ids.append(response.json()["id"])

    assert client.delete(f"/users/{user['id']}").status_code == 204

    assert client.get(f"/users/{user['id']}/tasks").status_code == 404
    for task_id in task_ids:
        assert client.get(f"/tasks/{task_id}").status_code == 404


def test_create_task_with_malformed_body_and_no_token_is_unauthorized(client):
    response = client.post("/tasks", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_create_task_with_malformed_body_is_rejected(client, auth_headers):
    _, headers = auth_headers()
    response = client.post(
        "/tasks",
        content=b"{not json",
        headers={**headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["detail"][0]["type"] == "json_invalid"


def test_create_task_validates_body_fields(client, auth_headers):
    _, headers = auth_headers()
    missing = client.post("/tasks", json={"title": "no owner"}, headers=headers)
    assert missing.status_code == 400
    assert missing.json()["detail"][0]["loc"] == ["body", "userId"]

    assert client.post("/tasks", json=["not", "an", "object"], headers=headers).status_code == 400
    assert client.post("/tasks", json={"userId": 1, "dueDate": "soon", "title": "t"}, headers=headers).status_code == 400


def test_create_task_out_of_range_user_id_is_rejected(client, auth_headers):
    _, headers = auth_headers()
    response = client.post(
        "/tasks",
        json={"userId": 99999999999999999999999, "title": "t"},
        headers=headers,
    )
    assert response.status_code == 400


def test_get_out_of_range_task_id_is_not_found(client):
    assert client.get("/tasks/99999999999999999999999").status_code == 404
