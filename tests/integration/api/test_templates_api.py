"""Templates API 集成测试"""


class TestTemplatesApi:
    def test_create_returns_steps_sorted_by_order(self, joiner_template):
        assert joiner_template["status"] == "active"
        assert [s["name"] for s in joiner_template["steps"]] == [
            "IT Equipment Setup",
            "HR Documentation",
        ]
        assert all(s["templateId"] == joiner_template["id"] for s in joiner_template["steps"])

    def test_get_detail_and_steps(self, client, joiner_template):
        detail = client.get(f"/api/templates/{joiner_template['id']}").json()
        steps = client.get(f"/api/templates/{joiner_template['id']}/steps").json()

        assert [s["stepOrder"] for s in detail["steps"]] == [1, 2]
        assert [s["id"] for s in steps] == [s["id"] for s in detail["steps"]]

    def test_list_filters(self, client, joiner_template):
        client.post("/api/templates", json={"name": "Offboarding", "type": "leaver"})

        joiners = client.get("/api/templates", params={"type": "joiner"}).json()
        drafts = client.get("/api/templates", params={"status": "draft"}).json()

        assert [t["id"] for t in joiners] == [joiner_template["id"]]
        assert [t["name"] for t in drafts] == ["Offboarding"]

    def test_patch_with_steps_replaces_the_step_set(self, client, joiner_template):
        response = client.patch(
            f"/api/templates/{joiner_template['id']}",
            json={"name": "Onboarding v2", "steps": [{"name": "Badge", "stepOrder": 1}]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Onboarding v2"
        assert [s["name"] for s in body["steps"]] == ["Badge"]
        steps = client.get(f"/api/templates/{joiner_template['id']}/steps").json()
        assert [s["name"] for s in steps] == ["Badge"]

    def test_patch_without_steps_keeps_them(self, client, joiner_template):
        response = client.patch(
            f"/api/templates/{joiner_template['id']}", json={"status": "archived"}
        )

        assert response.json()["status"] == "archived"
        assert len(response.json()["steps"]) == 2

    def test_patch_missing_template_is_404(self, client):
        response = client.patch("/api/templates/missing", json={"name": "X"})

        assert response.status_code == 404
        assert "Template not found" in response.json()["message"]

    def test_delete_removes_template_and_steps(self, client, joiner_template):
        response = client.delete(f"/api/templates/{joiner_template['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/templates/{joiner_template['id']}").status_code == 404
        assert client.get(f"/api/templates/{joiner_template['id']}/steps").json() == []

    def test_add_single_step(self, client, joiner_template):
        response = client.post(
            f"/api/templates/{joiner_template['id']}/steps",
            json={"name": "Welcome Lunch", "stepOrder": 3, "assigneeRole": "manager"},
        )

        assert response.status_code == 201
        assert response.json()["isRequired"] is True
        steps = client.get(f"/api/templates/{joiner_template['id']}/steps").json()
        assert [s["name"] for s in steps][-1] == "Welcome Lunch"

    def test_existing_workflow_keeps_cloned_steps(self, client, joiner_template, workflow):
        client.patch(f"/api/templates/{joiner_template['id']}", json={"steps": []})

        steps = client.get(f"/api/workflows/{workflow['id']}/steps").json()

        assert len(steps) == 2
