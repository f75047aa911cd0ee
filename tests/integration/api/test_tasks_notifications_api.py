"""Tasks / Notifications API 集成测试"""

import pytest


@pytest.fixture
def step(client, workflow) -> dict:
    return client.get(f"/api/workflows/{workflow['id']}/steps").json()[0]


def _task(client, step, title, **extra) -> dict:
    response = client.post(
        "/api/tasks",
        json={
            "workflowStepId": step["id"],
            "workflowId": step["workflowId"],
            "title": title,
            **extra,
        },
    )
    assert response.status_code == 201
    return response.json()


class TestTasksApi:
    def test_create_defaults(self, client, step):
        task = _task(client, step, "Ship laptop")

        assert task["status"] == "pending"
        assert task["priority"] == "medium"

    def test_pending_lists_open_tasks_soonest_first(self, client, step):
        _task(client, step, "Later", dueDate="2030-01-10T00:00:00Z", assigneeId="u-1")
        _task(client, step, "Sooner", dueDate="2030-01-02T00:00:00Z", status="in_progress")
        _task(client, step, "Done", status="completed")

        pending = client.get("/api/tasks/pending").json()
        mine = client.get("/api/tasks/pending", params={"userId": "u-1"}).json()

        assert [t["title"] for t in pending] == ["Sooner", "Later"]
        assert [t["title"] for t in mine] == ["Later"]

    def test_list_filters(self, client, step):
        _task(client, step, "A", status="completed")
        _task(client, step, "B")

        rows = client.get(
            "/api/tasks", params={"workflowId": step["workflowId"], "status": "completed"}
        ).json()

        assert [t["title"] for t in rows] == ["A"]

    def test_update_get_delete(self, client, step):
        task = _task(client, step, "Ship laptop")

        updated = client.patch(f"/api/tasks/{task['id']}", json={"status": "completed"})
        assert updated.json()["status"] == "completed"
        assert client.get(f"/api/tasks/{task['id']}").json()["status"] == "completed"

        assert client.delete(f"/api/tasks/{task['id']}").status_code == 204
        assert client.get(f"/api/tasks/{task['id']}").status_code == 404

    def test_tasks_are_not_audited(self, client, step):
        _task(client, step, "Ship laptop")

        assert client.get("/api/audit-logs", params={"entityType": "task"}).json() == []


class TestNotificationsApi:
    def _notify(self, client, user_id, title) -> dict:
        response = client.post(
            "/api/notifications",
            json={"userId": user_id, "title": title, "message": f"{title} message"},
        )
        assert response.status_code == 201
        return response.json()

    def test_list_requires_user_id(self, client):
        response = client.get("/api/notifications")

        assert response.status_code == 400
        assert response.json() == {"message": "userId required"}

    def test_list_is_per_user(self, client):
        self._notify(client, "u-1", "Welcome")
        self._notify(client, "u-2", "Other")

        rows = client.get("/api/notifications", params={"userId": "u-1"}).json()

        assert [n["title"] for n in rows] == ["Welcome"]
        assert rows[0]["isRead"] is False
        assert rows[0]["type"] == "info"

    def test_mark_read(self, client):
        notification = self._notify(client, "u-1", "Welcome")

        response = client.patch(f"/api/notifications/{notification['id']}/read")

        assert response.status_code == 200
        assert response.json()["isRead"] is True
        assert response.json()["readAt"] is not None

    def test_mark_read_missing_is_404(self, client):
        assert client.patch("/api/notifications/missing/read").status_code == 404

    def test_mark_all_read(self, client):
        self._notify(client, "u-1", "A")
        self._notify(client, "u-1", "B")
        self._notify(client, "u-2", "C")

        response = client.post("/api/notifications/mark-all-read", json={"userId": "u-1"})

        assert response.json() == {"success": True}
        mine = client.get("/api/notifications", params={"userId": "u-1"}).json()
        theirs = client.get("/api/notifications", params={"userId": "u-2"}).json()
        assert all(n["isRead"] for n in mine)
        assert theirs[0]["isRead"] is False

    def test_mark_all_read_requires_user_id(self, client):
        assert client.post("/api/notifications/mark-all-read", json={}).status_code == 400
