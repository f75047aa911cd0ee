"""Users API 集成测试"""

from sqlalchemy import create_engine, text

from src.infrastructure.auth.password_hasher import PasswordHasher

USER = {
    "email": "jane@company.com",
    "username": "jane",
    "password": "s3cret",
    "firstName": "Jane",
    "lastName": "Smith",
    "role": "hr_manager",
}


def _stored_password(database_url, user_id) -> str:
    engine = create_engine(database_url.replace("+aiosqlite", ""))
    with engine.connect() as conn:
        stored = conn.execute(
            text("SELECT password FROM users WHERE id = :id"), {"id": user_id}
        ).scalar_one()
    engine.dispose()
    return stored


class TestUsersApi:
    def test_create_and_fetch_without_password(self, client):
        response = client.post("/api/users", json=USER)

        assert response.status_code == 201
        body = response.json()
        assert "password" not in body
        assert body["role"] == "hr_manager"
        assert body["isActive"] is True

        fetched = client.get(f"/api/users/{body['id']}").json()
        listed = client.get("/api/users").json()
        assert "password" not in fetched
        assert all("password" not in user for user in listed)

    def test_missing_password_is_rejected_and_nothing_is_written(self, client):
        payload = {k: v for k, v in USER.items() if k != "password"}

        response = client.post("/api/users", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid request data"
        assert "password" in [error["field"] for error in body["errors"]]
        assert client.get("/api/users").json() == []

    def test_duplicate_email_is_rejected(self, client):
        client.post("/api/users", json=USER)

        response = client.post("/api/users", json={**USER, "username": "jane2"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "email"
        assert len(client.get("/api/users").json()) == 1

    def test_users_are_listed_by_first_name(self, client):
        client.post("/api/users", json=USER)
        client.post(
            "/api/users",
            json={**USER, "email": "adam@company.com", "username": "adam", "firstName": "Adam"},
        )

        assert [u["firstName"] for u in client.get("/api/users").json()] == ["Adam", "Jane"]

    def test_patch_updates_only_sent_fields(self, client):
        user = client.post("/api/users", json=USER).json()

        response = client.patch(
            f"/api/users/{user['id']}", json={"lastName": "Jones", "password": "new-secret"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lastName"] == "Jones"
        assert body["firstName"] == "Jane"
        assert "password" not in body

    def test_patch_null_on_required_field_is_rejected(self, client):
        user = client.post("/api/users", json=USER).json()

        response = client.patch(f"/api/users/{user['id']}", json={"email": None})

        assert response.status_code == 400

    def test_delete_then_get_is_404(self, client):
        user = client.post("/api/users", json=USER).json()

        delete_response = client.delete(f"/api/users/{user['id']}")
        get_response = client.get(f"/api/users/{user['id']}")

        assert delete_response.status_code == 204
        assert get_response.status_code == 404
        assert get_response.json() == {"message": "User not found"}

    def test_patch_missing_user_is_404(self, client):
        assert client.patch("/api/users/missing", json={"lastName": "X"}).status_code == 404

    def test_patched_password_is_stored_hashed(self, client, database_url):
        user = client.post("/api/users", json=USER).json()

        client.patch(f"/api/users/{user['id']}", json={"password": "new-secret"})

        stored = _stored_password(database_url, user["id"])
        assert stored.startswith("$2")
        assert PasswordHasher.verify_password("new-secret", stored)

    def test_patch_empty_password_is_rejected(self, client, database_url):
        user = client.post("/api/users", json=USER).json()

        response = client.patch(f"/api/users/{user['id']}", json={"password": ""})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"
        assert PasswordHasher.verify_password("s3cret", _stored_password(database_url, user["id"]))
