"""JMLHubClient 对接真实 API 的集成测试（TestClient 作为传输层）"""

import pytest

from src.interfaces.client import ApiError, JMLHubClient


@pytest.fixture
def hub(client) -> JMLHubClient:
    return JMLHubClient(http_client=client)


class TestClientDataLayer:
    def test_seed_then_query(self, hub):
        counts = hub.seed()["data"]

        assert counts["workflows"] == 3
        assert len(hub.list_workflows()) == 3
        assert hub.dashboard_stats()["activeWorkflows"] == 3

    def test_step_update_refreshes_cached_workflow_and_dashboard(self, hub):
        hub.seed()
        joiner = hub.list_workflows(type="joiner")[0]
        steps = hub.list_workflow_steps(joiner["id"])
        assert hub.get_workflow(joiner["id"])["progress"] == 25
        assert hub.workflow_report()["completedWorkflows"] == 0

        for step in steps:
            if step["status"] != "completed":
                hub.update_workflow_step(step["id"], {"status": "completed"})

        assert hub.get_workflow(joiner["id"])["progress"] == 100
        assert hub.workflow_report()["completedWorkflows"] == 1
        assert hub.dashboard_stats()["completedThisWeek"] == 1

    def test_mutation_refreshes_list_and_audit_log(self, hub):
        assert hub.list_departments() == []
        assert hub.list_audit_logs(entity_type="department") == []

        department = hub.create_department({"name": "Legal"})

        assert [d["id"] for d in hub.list_departments()] == [department["id"]]
        assert len(hub.list_audit_logs(entity_type="department")) == 1

    def test_cached_query_is_served_until_invalidated(self, hub, client):
        assert hub.list_departments() == []
        client.post("/api/departments", json={"name": "Bypassed"})

        assert hub.list_departments() == []

        hub.create_department({"name": "Legal"})

        assert sorted(d["name"] for d in hub.list_departments()) == ["Bypassed", "Legal"]

    def test_api_error(self, hub):
        with pytest.raises(ApiError) as exc_info:
            hub.list_notifications(user_id="")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "userId required"

    def test_field_errors(self, hub):
        with pytest.raises(ApiError) as exc_info:
            hub.create_user({"email": "jane@company.com", "username": "jane"})

        assert exc_info.value.status_code == 400
        assert "password" in [error["field"] for error in exc_info.value.errors]
