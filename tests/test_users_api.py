"""
HTTP tests for the /users/ routes.
"""

from unittest import mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from user_api.app.core.config import Settings
from user_api.app.core.errors import ConstraintViolation, StorageUnavailable
from user_api.app.main import create_app


class TestListUsers:
    def test_empty_store_returns_empty_array(self, client):
        response = client.get("/users/")

        assert response.status_code == 200
        assert response.json() == []

    def test_missing_trailing_slash_redirects(self, client):
        response = client.get("/users", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"].endswith("/users/")


class TestCreateUser:
    def test_post_then_get(self, client):
        response = client.post("/users/", json={"name": "Bob"})

        assert response.status_code == 200
        assert response.content == b""

        users = client.get("/users/").json()
        assert len(users) == 1
        assert users[0]["name"] == "Bob"
        assert isinstance(users[0]["id"], int)
        assert set(users[0]) == {"id", "name"}

    def test_two_posts_get_distinct_ids_and_stable_order(self, client):
        client.post("/users/", json={"name": "A"})
        client.post("/users/", json={"name": "B"})

        first = client.get("/users/").json()
        second = client.get("/users/").json()

        assert {u["name"] for u in first} == {"A", "B"}
        assert first[0]["id"] != first[1]["id"]
        assert first == second

    def test_post_with_id_overwrites_record(self, client):
        client.post("/users/", json={"name": "Alice"})
        [alice] = client.get("/users/").json()

        response = client.post("/users/", json={"id": alice["id"], "name": "Alicia"})

        assert response.status_code == 200
        assert client.get("/users/").json() == [{"id": alice["id"], "name": "Alicia"}]

    def test_empty_object_creates_user(self, client):
        assert client.post("/users/", json={}).status_code == 200

        [user] = client.get("/users/").json()
        assert user["name"] is None

    def test_long_name_is_stored_unchanged(self, client):
        name = "n" * 5000

        assert client.post("/users/", json={"name": name}).status_code == 200

        [user] = client.get("/users/").json()
        assert user["name"] == name

    def test_unknown_fields_are_ignored(self, client):
        assert client.post("/users/", json={"name": "Eve", "role": "admin"}).status_code == 200

        [user] = client.get("/users/").json()
        assert user == {"id": user["id"], "name": "Eve"}


class TestBadRequest:
    def test_malformed_json_returns_400(self, client):
        response = client.post(
            "/users/", content="not-json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert client.get("/users/").json() == []

    @pytest.mark.parametrize("body", [[1, 2], "Bob", {"name": ["not", "a", "string"]}])
    def test_non_record_body_returns_400(self, client, body):
        response = client.post("/users/", json=body)

        assert response.status_code == 400

    @pytest.mark.parametrize("user_id", [10**30, 2**63, 0, -1])
    def test_out_of_range_id_returns_400(self, client, user_id):
        response = client.post("/users/", json={"id": user_id, "name": "X"})

        assert response.status_code == 400
        assert client.get("/users/").json() == []

    def test_largest_id_is_accepted(self, client):
        response = client.post("/users/", json={"id": 2**63 - 1, "name": "Max"})

        assert response.status_code == 200
        assert client.get("/users/").json() == [{"id": 2**63 - 1, "name": "Max"}]


class TestStorageErrors:
    def test_storage_unavailable_on_list_returns_503(self, app, client):
        with mock.patch.object(
            app.state.user_service.repository, "find_all", side_effect=StorageUnavailable("down")
        ):
            response = client.get("/users/")

        assert response.status_code == 503

    def test_storage_unavailable_on_save_returns_503(self, app, client):
        with mock.patch.object(
            app.state.user_service, "save_user", side_effect=StorageUnavailable("down")
        ):
            response = client.post("/users/", json={"name": "Bob"})

        assert response.status_code == 503

    def test_constraint_violation_returns_409(self, app, client):
        with mock.patch.object(
            app.state.user_service, "save_user", side_effect=ConstraintViolation("duplicate id")
        ):
            response = client.post("/users/", json={"name": "Bob"})

        assert response.status_code == 409
        assert response.json()["detail"] == "duplicate id"


def test_api_prefix_is_applied(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "prefixed.db"), api_prefix="/api/v1"))

    with TestClient(app) as client:
        assert client.post("/api/v1/users/", json={"name": "Bob"}).status_code == 200
        assert [u["name"] for u in client.get("/api/v1/users/").json()] == ["Bob"]
        assert client.get("/users/").status_code == 404


class TestLifespan:
    def test_tables_created_on_startup_and_pool_disposed_on_shutdown(self, app):
        engine = app.state.database.engine
        assert not inspect(engine).has_table("users")

        with mock.patch.object(app.state.database, "dispose", wraps=app.state.database.dispose) as dispose:
            with TestClient(app) as client:
                assert inspect(engine).has_table("users")
                assert client.get("/users/").json() == []
                dispose.assert_not_called()

        dispose.assert_called_once_with()
