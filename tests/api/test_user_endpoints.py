"""HTTP tests for the user routes, with get_db pointed at the test engine."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from profilehub.api.dependencies import get_user_service
from profilehub.core.config import settings
from profilehub.core.exceptions import StoreError
from profilehub.db.session import get_db
from profilehub.main import app

SIGNUP = {"first_name": "Jane", "last_name": "Doe", "username": "jdoe", "userPassword": "secret123"}
LOGIN = {"username": "jdoe", "userPassword": "secret123"}


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_id(client):
    return client.post("/signup", json=SIGNUP).json()["id"]


class TestSignup:
    def test_created(self, client):
        response = client.post("/signup", json=SIGNUP)
        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "jdoe"
        assert body["deleted"] is False
        assert body["userPassword"].startswith("$2b$")
        assert body["userPassword"] != "secret123"
        assert body["profile"] == [] and body["portfolio"] == []

    def test_long_password_signup_then_login(self, client):
        password = "x" * 100
        response = client.post("/signup", json={**SIGNUP, "userPassword": password})
        assert response.status_code == 201
        login = client.post("/login", json={**LOGIN, "userPassword": password})
        assert login.status_code == 200
        assert login.json()["user"]["id"] == response.json()["id"]

    def test_missing_field(self, client):
        response = client.post("/signup", json={**SIGNUP, "last_name": ""})
        assert response.status_code == 400
        assert response.json()["message"] == "All fields are required"
        assert client.get("/").json()["allUsers"] == []

    def test_duplicate_username(self, client, user_id):
        response = client.post("/signup", json=SIGNUP)
        assert response.status_code == 400
        assert response.json()["message"] == "Username already exists"
        assert response.json()["error"]["code"] == "DuplicateUsernameError"

    def test_wrong_type_is_client_error(self, client):
        response = client.post("/signup", json={**SIGNUP, "username": ["jdoe"]})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ValidationError"


class TestLogin:
    def test_success(self, client, user_id):
        response = client.post("/login", json=LOGIN)
        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"
        assert response.json()["user"]["id"] == user_id

    def test_missing_password(self, client, user_id):
        response = client.post("/login", json={"username": "jdoe"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MissingCredentialsError"

    def test_bad_password(self, client, user_id):
        response = client.post("/login", json={**LOGIN, "userPassword": "nope"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid credentials"

    def test_unknown_and_deleted_look_the_same(self, client, user_id):
        unknown = client.post("/login", json={**LOGIN, "username": "ghost"})
        client.delete(f"/delete/{user_id}")
        deleted = client.post("/login", json=LOGIN)
        assert unknown.status_code == deleted.status_code == 404
        assert unknown.json()["message"] == deleted.json()["message"]


class TestUpdates:
    def test_update_profile(self, client, user_id):
        payload = {"profile": [{"telNo": "555-0100", "about_me": "Hello"}]}
        response = client.post(f"/updateProfile/{user_id}", json=payload)
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert len(profile) == 1
        assert profile[0]["telNo"] == "555-0100"
        assert profile[0]["about_me"] == "Hello"

    def test_profile_entry_requires_phone(self, client, user_id):
        response = client.post(f"/updateProfile/{user_id}", json={"profile": [{"about_me": "Hello"}]})
        assert response.status_code == 400

    def test_update_education_then_fetch(self, client, user_id):
        payload = {"education": [{"school_name": "MIT", "course": "CS"}]}
        assert client.post(f"/education/{user_id}", json=payload).status_code == 200
        assert client.get(f"/users/{user_id}").json()["education"] == payload["education"]

    def test_update_portfolio_empty_body_clears(self, client, user_id):
        client.post(f"/portfolio/{user_id}", json={"portfolio": [{"project_title": "Site"}]})
        response = client.post(f"/portfolio/{user_id}", json={})
        assert response.status_code == 200
        assert response.json()["portfolio"] == []

    def test_update_without_body_clears(self, client, user_id):
        client.post(f"/education/{user_id}", json={"education": [{"course": "CS"}]})
        response = client.post(f"/education/{user_id}")
        assert response.status_code == 200
        assert response.json()["education"] == []

    def test_update_work_experience_and_skills(self, client, user_id):
        work = client.post(f"/workExperience/{user_id}", json={"work_experience": [{"company": "Acme"}]})
        skills = client.post(f"/skills/{user_id}", json={"skills": [{"list_skills": "Go", "skills_level": 3}]})
        assert work.status_code == skills.status_code == 200
        assert skills.json()["work_experience"][0]["company"] == "Acme"
        assert skills.json()["skills"][0]["skills_level"] == 3

    @pytest.mark.parametrize("path, body", [
        ("/updateProfile/missing", {"profile": []}),
        ("/education/missing", {"education": []}),
        ("/portfolio/missing", {"portfolio": []}),
        ("/workExperience/missing", {"work_experience": []}),
        ("/skills/missing", {"skills": []}),
    ])
    def test_unknown_id(self, client, path, body):
        response = client.post(path, json=body)
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"


class TestSoftDeleteAndList:
    def test_delete_hides_from_list(self, client, user_id):
        assert [u["id"] for u in client.get("/").json()["allUsers"]] == [user_id]

        response = client.delete(f"/delete/{user_id}")
        assert response.status_code == 200
        assert response.json()["message"] == "User soft deleted"
        assert response.json()["user"]["deleted"] is True

        assert client.get("/").json()["allUsers"] == []
        assert client.get(f"/users/{user_id}").json()["deleted"] is True

    def test_delete_twice(self, client, user_id):
        client.delete(f"/delete/{user_id}")
        assert client.delete(f"/delete/{user_id}").status_code == 200

    def test_delete_unknown(self, client):
        assert client.delete("/delete/missing").status_code == 404

    def test_list_store_error_is_500(self, client):
        class BrokenService:
            def list_active_users(self):
                raise StoreError(details={"reason": "OperationalError"})

        app.dependency_overrides[get_user_service] = lambda: BrokenService()
        response = client.get("/")
        assert response.status_code == 500
        assert response.json()["message"] == "Database query error"
        assert "Traceback" not in response.text


class TestRedaction:
    def test_hash_redacted_when_enabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "REDACT_PASSWORD_HASH", True)
        created = client.post("/signup", json=SIGNUP).json()
        assert created["userPassword"] is None
        assert client.post("/login", json=LOGIN).json()["user"]["userPassword"] is None


class TestCrossCutting:
    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "7f1c2a9e-4b6d-4e0f-8a3b-5c7d9e1f2a3b"})
        assert response.headers["X-Request-ID"] == "7f1c2a9e-4b6d-4e0f-8a3b-5c7d9e1f2a3b"
