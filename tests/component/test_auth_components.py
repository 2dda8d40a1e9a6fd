"""
Component tests for /api/auth.
"""
from fastapi.testclient import TestClient

REGISTER = {"name": "Ada", "email": "Ada@Example.com", "password": "secret123"}


class TestRegister:
    def test_register_returns_token_and_profile(self, test_client: TestClient):
        response = test_client.post("/api/auth/register", json=REGISTER)

        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "ada@example.com"
        assert data["user"]["name"] == "Ada"
        assert "password_hash" not in data["user"]

    def test_duplicate_email_is_409(self, test_client: TestClient):
        test_client.post("/api/auth/register", json=REGISTER)

        response = test_client.post(
            "/api/auth/register", json={**REGISTER, "email": "ada@example.com"}
        )

        assert response.status_code == 409

    def test_blank_name_is_rejected(self, test_client: TestClient):
        response = test_client.post("/api/auth/register", json={**REGISTER, "name": "   "})

        assert response.status_code == 422

    def test_registration_creates_empty_cart(self, test_client: TestClient):
        token = test_client.post("/api/auth/register", json=REGISTER).json()["token"]

        response = test_client.get("/api/cart", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["item_count"] == 0


class TestLogin:
    def test_login_with_correct_password(self, test_client: TestClient):
        test_client.post("/api/auth/register", json=REGISTER)

        response = test_client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        token = response.json()["token"]
        me = test_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "ada@example.com"

    def test_wrong_password_is_401(self, test_client: TestClient):
        test_client.post("/api/auth/register", json=REGISTER)

        response = test_client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "nope-nope"}
        )

        assert response.status_code == 401

    def test_unknown_email_is_401(self, test_client: TestClient):
        response = test_client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"}
        )

        assert response.status_code == 401
