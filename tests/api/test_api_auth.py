"""HTTP tests for authentication and error status mapping."""

from datetime import timedelta

from gymapi.core.security import create_access_token
from gymapi.db.repositories.user import UserRepository

API = "/api/v1"
PASSWORD = "Password123"


def _register(client, email="juan@gym.com", role="ATHLETE", password=PASSWORD):
    return client.post(f"{API}/auth/register", json={"email": email, "password": password, "name": "Juan",
                                                    "role": role})


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


# ======================================================================
# Registration and login
# ======================================================================


class TestRegisterAndLogin:
    def test_register(self, client):
        response = _register(client)
        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "juan@gym.com"
        assert body["user"]["role"] == "ATHLETE"
        assert "hashed_password" not in body["user"]
        assert body["token"]

    def test_register_twice_conflicts(self, client):
        assert _register(client).status_code == 201
        response = _register(client)
        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT"

    def test_concurrent_registration_is_409(self, client, monkeypatch):
        assert _register(client).status_code == 201
        monkeypatch.setattr(UserRepository, "exists_by_email", lambda self, email: False)
        response = _register(client)
        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT"

    def test_weak_password_with_taken_email_is_400(self, client):
        _register(client)
        response = _register(client, password="short")
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_weak_password(self, client):
        response = _register(client, password="short")
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"]

    def test_malformed_body_is_400(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "not-an-email", "password": PASSWORD})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert any(d["field"] == "email" for d in body["details"])

    def test_unknown_role(self, client):
        assert _register(client, role="ADMIN").status_code == 400

    def test_login(self, client):
        _register(client)
        response = client.post(f"{API}/auth/login", json={"email": "juan@gym.com", "password": PASSWORD})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "juan@gym.com"

    def test_login_wrong_password(self, client):
        _register(client)
        response = client.post(f"{API}/auth/login", json={"email": "juan@gym.com", "password": "Password999"})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_token_form_login(self, client):
        _register(client)
        response = client.post(f"{API}/auth/token", data={"username": "juan@gym.com", "password": PASSWORD})
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_token_form_with_non_email_username(self, client):
        response = client.post(f"{API}/auth/token", data={"username": "juan", "password": PASSWORD})
        assert response.status_code == 401


# ======================================================================
# Bearer token handling
# ======================================================================


class TestBearerToken:
    def test_missing_token(self, client):
        response = client.get(f"{API}/auth/profile")
        assert response.status_code == 401
        assert response.json()["error"] == "AUTHENTICATION_ERROR"

    def test_expired_token(self, client):
        user_id = _register(client).json()["user"]["id"]
        token = create_access_token({"sub": str(user_id)}, expires_delta=timedelta(minutes=-5))
        response = client.get(f"{API}/auth/profile", headers=_bearer(token))
        assert response.status_code == 401
        assert response.json()["error"] == "TOKEN_EXPIRED"

    def test_invalid_token(self, client):
        response = client.get(f"{API}/auth/profile", headers=_bearer("garbage"))
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_profile(self, client):
        token = _register(client).json()["token"]
        response = client.get(f"{API}/auth/profile", headers=_bearer(token))
        assert response.status_code == 200
        assert response.json()["name"] == "Juan"


# ======================================================================
# Profile changes
# ======================================================================


class TestProfileChanges:
    def test_update_profile(self, client):
        token = _register(client).json()["token"]
        response = client.put(f"{API}/auth/profile", json={"name": "Juan Perez"}, headers=_bearer(token))
        assert response.status_code == 200
        assert response.json()["name"] == "Juan Perez"

    def test_update_to_taken_email(self, client):
        _register(client, email="maria@gym.com")
        token = _register(client).json()["token"]
        response = client.put(f"{API}/auth/profile", json={"email": "maria@gym.com"}, headers=_bearer(token))
        assert response.status_code == 409

    def test_change_password(self, client):
        token = _register(client).json()["token"]
        response = client.put(f"{API}/auth/change-password", headers=_bearer(token),
                              json={"current_password": PASSWORD, "new_password": "NewPass456"})
        assert response.status_code == 200
        login = client.post(f"{API}/auth/login", json={"email": "juan@gym.com", "password": "NewPass456"})
        assert login.status_code == 200

    def test_change_password_wrong_current(self, client):
        token = _register(client).json()["token"]
        response = client.put(f"{API}/auth/change-password", headers=_bearer(token),
                              json={"current_password": "Nope12345", "new_password": "NewPass456"})
        assert response.status_code == 401


class TestServiceEndpoints:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["status"] == "healthy"
