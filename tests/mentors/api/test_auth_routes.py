"""
Tests for signup, login and the admin gate.
"""
import pytest

SIGNUP = {
    "username": "Ahmed",
    "password": "s3cret",
    "phone": "01012345678",
    "email": "ahmed@example.com",
}

ADMIN_ENDPOINTS = [
    ("get", "/api/users"),
    ("delete", "/api/users/1"),
    ("post", "/api/developers"),
    ("delete", "/api/developers/1"),
    ("post", "/api/availability"),
    ("put", "/api/availability/1"),
    ("delete", "/api/availability/1"),
    ("get", "/api/leads"),
    ("delete", "/api/leads/1"),
]


class TestSignup:
    """Tests for POST /api/signup"""

    def test_signup_success(self, client):
        """Test creating an account returns the user without password"""
        response = client.post("/api/signup", json=SIGNUP)

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["user"]["username"] == "Ahmed"
        assert data["user"]["phone"] == "01012345678"
        assert data["user"]["id"] > 0
        assert "password" not in data["user"]

    def test_signup_missing_field(self, client):
        """Test that every field is required"""
        body = dict(SIGNUP, email="")

        response = client.post("/api/signup", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required."}

    def test_signup_invalid_phone(self, client):
        """Test that a bad phone number is rejected"""
        response = client.post("/api/signup", json=dict(SIGNUP, phone="02012345678"))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid phone number."}

    def test_signup_numeric_phone_is_checked_as_text(self, client):
        """Test that a JSON number phone gets the phone message, not a generic error"""
        response = client.post("/api/signup", json=dict(SIGNUP, phone=1012345678))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid phone number."}

    def test_signup_duplicate_username_ignores_case(self, client):
        """Test that a username differing only in case conflicts"""
        client.post("/api/signup", json=SIGNUP)

        response = client.post("/api/signup", json=dict(SIGNUP, username="aHmEd"))

        assert response.status_code == 409
        assert response.json() == {"error": "Username already exists."}


class TestLogin:
    """Tests for POST /api/login"""

    def test_login_success_any_case(self, client):
        """Test logging in with a differently-cased username"""
        client.post("/api/signup", json=SIGNUP)

        response = client.post("/api/login", json={"username": "ahmed", "password": "s3cret"})

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "user": {"username": "Ahmed", "email": "ahmed@example.com", "phone": "01012345678"},
        }

    def test_login_wrong_password(self, client):
        """Test that a wrong password returns 401"""
        client.post("/api/signup", json=SIGNUP)

        response = client.post("/api/login", json={"username": "Ahmed", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials."}

    def test_login_missing_fields(self, client):
        """Test that username and password are required"""
        response = client.post("/api/login", json={"username": "Ahmed"})

        assert response.status_code == 400
        assert response.json() == {"error": "Username and password are required."}


class TestAdminGate:
    """Tests for the X-Admin-Token check"""

    def test_admin_login(self, client, admin_headers):
        """Test the admin password check"""
        good = client.post("/api/admin/login", json={"password": admin_headers["X-Admin-Token"]})
        bad = client.post("/api/admin/login", json={"password": "guess"})

        assert good.status_code == 200
        assert good.json() == {"ok": True}
        assert bad.status_code == 401
        assert bad.json() == {"error": "Wrong password."}

    @pytest.mark.parametrize("method,path", ADMIN_ENDPOINTS)
    def test_missing_token(self, client, method, path):
        """Test admin endpoints without the header"""
        response = client.request(method.upper(), path, json={})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    @pytest.mark.parametrize("method,path", ADMIN_ENDPOINTS)
    def test_wrong_token(self, client, method, path):
        """Test admin endpoints with a wrong token"""
        response = client.request(method.upper(), path, json={}, headers={"X-Admin-Token": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
