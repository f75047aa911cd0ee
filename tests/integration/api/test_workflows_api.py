"""Workflows API 集成测试：创建、步骤克隆、进度"""


def _steps(client, workflow_id):
    return client.get(f"/api/workflows/{workflow_id}/steps").json()


def _complete(client, step_id):
    response = client.patch(f"/api/workflow-steps/{step_id}", json={"status": "completed"})
    assert response.status_code == 200
    return response.json()


class TestCreateWorkflow:
    def test_steps_are_cloned_in_order_as_pending(self, client, joiner_template, workflow):
        steps = _steps(client, workflow["id"])

        assert workflow["status"] == "pending"
        assert workflow["progress"] == 0
        assert [s["name"] for s in steps] == ["IT Equipment Setup", "HR Documentation"]
        assert all(s["status"] == "pending" for s in steps)
        template_step_ids = {s["id"] for s in joiner_template["steps"]}
        assert {s["templateStepId"] for s in steps} == template_step_ids

    def test_detail_embeds_steps_and_employee(self, client, workflow, employee):
        detail = client.get(f"/api/workflows/{workflow['id']}").json()

        assert detail["employee"]["id"] == employee["id"]
        assert detail["employee"]["firstName"] == "John"
        assert [s["stepOrder"] for s in detail["steps"]] == [1, 2]

    def test_unknown_template_is_404_and_nothing_is_written(self, client, employee):
        response = client.post(
            "/api/workflows",
            json={
                "templateId": "missing",
                "employeeId": employee["id"],
                "name": "Onboarding",
                "type": "joiner",
                "initiatedBy": "u-1",
            },
        )

        assert response.status_code == 404
        assert client.get("/api/workflows").json() == []

    def test_unknown_employee_is_404(self, client, joiner_template):
        response = client.post(
            "/api/workflows",
            json={
                "templateId": joiner_template["id"],
                "employeeId": "missing",
                "name": "Onboarding",
                "type": "joiner",
                "initiatedBy": "u-1",
            },
        )

        assert response.status_code == 404

    def test_missing_required_fields_is_400(self, client):
        response = client.post("/api/workflows", json={"name": "Onboarding"})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"templateId", "employeeId", "type", "initiatedBy"} <= fields

    def test_workflow_from_template_without_steps(self, client, employee):
        template = client.post("/api/templates", json={"name": "Empty", "type": "mover"}).json()

        created = client.post(
            "/api/workflows",
            json={
                "templateId": template["id"],
                "employeeId": employee["id"],
                "name": "Transfer",
                "type": "mover",
                "initiatedBy": "u-1",
            },
        )

        assert created.status_code == 201
        assert _steps(client, created.json()["id"]) == []


class TestListWorkflows:
    def test_filters(self, client, workflow, employee):
        assert len(client.get("/api/workflows", params={"type": "joiner"}).json()) == 1
        assert client.get("/api/workflows", params={"type": "leaver"}).json() == []
        by_employee = client.get("/api/workflows", params={"employeeId": employee["id"]}).json()
        assert [w["id"] for w in by_employee] == [workflow["id"]]
        assert client.get("/api/workflows", params={"status": "completed"}).json() == []


class TestStepProgress:
    def test_completing_steps_drives_progress_and_status(self, client, workflow):
        first, second = _steps(client, workflow["id"])

        step = _complete(client, first["id"])
        assert step["completedAt"] is not None
        halfway = client.get(f"/api/workflows/{workflow['id']}").json()
        assert (halfway["progress"], halfway["status"]) == (50, "in_progress")
        assert halfway["completedAt"] is None

        _complete(client, second["id"])
        done = client.get(f"/api/workflows/{workflow['id']}").json()
        assert (done["progress"], done["status"]) == (100, "completed")
        assert done["completedAt"] is not None

    def test_non_completing_transitions_do_not_touch_the_workflow(self, client, workflow):
        first, second = _steps(client, workflow["id"])
        _complete(client, first["id"])

        for new_status in ["in_progress", "blocked", "skipped", "pending"]:
            response = client.patch(
                f"/api/workflow-steps/{second['id']}", json={"status": new_status}
            )
            assert response.status_code == 200

        # 把已完成的步骤改回去也不会降低进度
        client.patch(f"/api/workflow-steps/{first['id']}", json={"status": "pending"})
        current = client.get(f"/api/workflows/{workflow['id']}").json()
        assert (current["progress"], current["status"]) == (50, "in_progress")

    def test_in_progress_stamps_started_at(self, client, workflow):
        first, _ = _steps(client, workflow["id"])

        response = client.patch(
            f"/api/workflow-steps/{first['id']}", json={"status": "in_progress", "notes": "on it"}
        )

        assert response.json()["startedAt"] is not None
        assert response.json()["notes"] == "on it"

    def test_invalid_step_status_is_400(self, client, workflow):
        first, _ = _steps(client, workflow["id"])

        response = client.patch(f"/api/workflow-steps/{first['id']}", json={"status": "done"})

        assert response.status_code == 400

    def test_missing_step_is_404(self, client):
        response = client.patch("/api/workflow-steps/missing", json={"status": "completed"})

        assert response.status_code == 404


class TestUpdateAndDeleteWorkflow:
    def test_patch_writes_given_fields(self, client, workflow):
        response = client.patch(
            f"/api/workflows/{workflow['id']}", json={"status": "cancelled", "assignedTo": "u-7"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert response.json()["assignedTo"] == "u-7"

    def test_progress_out_of_range_is_400(self, client, workflow):
        response = client.patch(f"/api/workflows/{workflow['id']}", json={"progress": 120})

        assert response.status_code == 400

    def test_delete_keeps_steps(self, client, workflow):
        assert client.delete(f"/api/workflows/{workflow['id']}").status_code == 204
        assert client.get(f"/api/workflows/{workflow['id']}").status_code == 404
        assert len(_steps(client, workflow["id"])) == 2
