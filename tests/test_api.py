"""
HTTP-level tests: status codes, response shapes and the bearer-token gate.
"""

from auth.jwt import create_token


class TestAuthRoutes:
    def test_register_and_login(self, client):
        resp = client.post(
            "/auth/register",
            json={"username": "alice", "password": "pw123", "email": "a@x.com", "full_name": "Alice A"},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["username"] == "alice"
        assert isinstance(body["userId"], int)
        assert "password" not in resp.text

        resp = client.post("/auth/login", json={"username": "alice", "password": "pw123"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["token"]
        assert body["user"] == {"id": body["user"]["id"], "username": "alice", "email": "a@x.com", "full_name": "Alice A"}
        assert "password_hash" not in resp.text

    def test_duplicate_username_is_conflict(self, client, signup):
        signup("alice")
        resp = client.post(
            "/auth/register",
            json={"username": "alice", "password": "pw", "email": "new@x.com", "full_name": "A"},
        )
        assert resp.status_code == 409
        assert "message" in resp.json()

    def test_duplicate_email_is_conflict(self, client, signup):
        signup("alice", email="a@x.com")
        resp = client.post(
            "/auth/register",
            json={"username": "alice2", "password": "pw", "email": "a@x.com", "full_name": "A"},
        )
        assert resp.status_code == 409

    def test_missing_field_is_bad_request(self, client):
        resp = client.post("/auth/register", json={"username": "alice", "password": "pw123"})
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid request body or parameters"}

    def test_empty_field_is_bad_request(self, client):
        resp = client.post(
            "/auth/register",
            json={"username": "", "password": "pw", "email": "a@x.com", "full_name": "A"},
        )
        assert resp.status_code == 400

    def test_overlong_password_is_bad_request(self, client):
        resp = client.post(
            "/auth/register",
            json={"username": "alice", "password": "p" * 100, "email": "a@x.com", "full_name": "A"},
        )
        assert resp.status_code == 400

        # under the character limit but over bcrypt's 72-byte limit
        resp = client.post(
            "/auth/register",
            json={"username": "alice", "password": "é" * 40, "email": "a@x.com", "full_name": "A"},
        )
        assert resp.status_code == 400
        assert resp.json() == {"message": "Password must be at most 72 bytes long."}

    def test_padded_username_is_the_same_user(self, client, signup):
        signup("alice")
        resp = client.post(
            "/auth/register",
            json={"username": "alice ", "password": "pw", "email": "new@x.com", "full_name": "A"},
        )
        assert resp.status_code == 409

    def test_login_failures_are_indistinguishable(self, client, signup):
        signup("alice")
        wrong_pw = client.post("/auth/login", json={"username": "alice", "password": "wrong"})
        no_user = client.post("/auth/login", json={"username": "nobody", "password": "pw123"})

        assert wrong_pw.status_code == no_user.status_code == 401
        assert wrong_pw.json() == no_user.json() == {"message": "Invalid credentials"}


class TestBearerGate:
    def test_no_header_is_401(self, client):
        resp = client.get("/tasks")
        assert resp.status_code == 401

    def test_wrong_scheme_is_401(self, client, signup):
        token = signup("alice")["Authorization"].split(" ", 1)[1]
        resp = client.get("/tasks", headers={"Authorization": f"Token {token}"})
        assert resp.status_code == 401

    def test_bad_token_is_403(self, client):
        resp = client.get("/tasks", headers={"Authorization": "Bearer not.a.jwt"})
        assert resp.status_code == 403
        assert resp.json() == {"message": "Token is not valid or expired"}

    def test_expired_token_is_403(self, client, settings, signup):
        signup("alice")
        expired = create_token(1, "alice", settings.model_copy(update={"jwt_expiry_seconds": -60}))
        resp = client.get("/tasks", headers={"Authorization": f"Bearer {expired}"})
        assert resp.status_code == 403

    def test_every_task_route_is_protected(self, client):
        assert client.post("/tasks", json={"title": "x"}).status_code == 401
        assert client.put("/tasks/1", json={"completed": True}).status_code == 401
        assert client.delete("/tasks/1").status_code == 401


class TestTaskRoutes:
    def test_buy_milk_scenario(self, client, signup):
        headers = signup("alice")

        resp = client.post("/tasks", json={"title": "Buy milk"}, headers=headers)
        assert resp.status_code == 201
        task = resp.json()
        assert task["title"] == "Buy milk"
        assert task["completed"] is False
        assert "id" in task

        resp = client.get("/tasks", headers=headers)
        assert resp.status_code == 200
        assert [t["id"] for t in resp.json()] == [task["id"]]

        resp = client.delete(f"/tasks/{task['id']}", headers=headers)
        assert resp.status_code == 204
        assert resp.content == b""

        resp = client.get("/tasks", headers=headers)
        assert resp.json() == []

    def test_blank_title_is_bad_request(self, client, signup):
        headers = signup("alice")
        resp = client.post("/tasks", json={"title": "   "}, headers=headers)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Task title is required"}

    def test_partial_update(self, client, signup):
        headers = signup("alice")
        task = client.post(
            "/tasks", json={"title": "Buy milk", "description": "semi-skimmed"}, headers=headers
        ).json()

        resp = client.put(f"/tasks/{task['id']}", json={"completed": True}, headers=headers)
        assert resp.status_code == 200
        updated = resp.json()
        assert updated["completed"] is True
        assert updated["title"] == "Buy milk"
        assert updated["description"] == "semi-skimmed"

    def test_tasks_are_private(self, client, signup):
        alice = signup("alice")
        bob = signup("bob")
        task = client.post("/tasks", json={"title": "Buy milk"}, headers=alice).json()

        assert client.get("/tasks", headers=bob).json() == []
        assert client.put(f"/tasks/{task['id']}", json={"title": "mine now"}, headers=bob).status_code == 404
        assert client.delete(f"/tasks/{task['id']}", headers=bob).status_code == 404

        [still_there] = client.get("/tasks", headers=alice).json()
        assert still_there["title"] == "Buy milk"

    def test_not_found_looks_the_same_as_not_yours(self, client, signup):
        alice = signup("alice")
        bob = signup("bob")
        task = client.post("/tasks", json={"title": "Buy milk"}, headers=alice).json()

        not_yours = client.delete(f"/tasks/{task['id']}", headers=bob)
        missing = client.delete("/tasks/99999", headers=bob)
        assert not_yours.status_code == missing.status_code == 404
        assert not_yours.json() == missing.json()

    def test_non_integer_id_is_bad_request(self, client, signup):
        headers = signup("alice")
        assert client.delete("/tasks/abc", headers=headers).status_code == 400


class TestMisc:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert "X-Process-Time" in resp.headers
