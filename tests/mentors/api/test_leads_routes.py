"""
Tests for lead submission and the admin leads/users lists.
"""
import pytest

REQUEST = {
    "username": "Mona",
    "email": "mona@example.com",
    "phone": "01112345678",
    "password": "optional-pass",
    "destination": "Sheikh Zayed",
    "propertyType": "Villa",
    "developer": "Ora",
    "budget": "1,000,000",
    "delivery": "Ready",
    "lookingFor": "Family home",
}


class TestSubmitRequest:
    """Tests for POST /api/requests"""

    def test_submit_at_budget_floor(self, client):
        """Test that exactly 1,000,000 is accepted"""
        response = client.post("/api/requests", json=REQUEST)

        assert response.status_code == 200
        lead = response.json()["lead"]
        assert lead["budget"] == "1,000,000"
        assert lead["lookingFor"] == "Family home"
        assert lead["propertyType"] == "Villa"
        assert "password" not in lead

    @pytest.mark.parametrize("budget", ["500,000", "1,000,000,001", "abc", ""])
    def test_submit_budget_out_of_range(self, client, budget):
        """Test budgets outside the accepted range"""
        response = client.post("/api/requests", json=dict(REQUEST, budget=budget))

        assert response.status_code == 400
        assert response.json() == {"error": "Budget must be between 1,000,000 and 1,000,000,000."}

    def test_submit_missing_contact(self, client):
        """Test that username, email and phone are required"""
        response = client.post("/api/requests", json=dict(REQUEST, email=None))

        assert response.status_code == 400
        assert response.json() == {"error": "Missing user info."}

    def test_submit_invalid_phone(self, client):
        """Test that the phone format is enforced"""
        response = client.post("/api/requests", json=dict(REQUEST, phone="0111234567"))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid phone number."}

    def test_submit_numeric_phone(self, client):
        """Test that a phone sent as a JSON number is validated as text"""
        response = client.post("/api/requests", json=dict(REQUEST, phone=1112345678))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid phone number."}

    def test_submit_numeric_text_fields_are_stored_as_text(self, client):
        """Test that numeric values in text fields are kept as strings"""
        response = client.post("/api/requests", json=dict(REQUEST, lookingFor=3, budget=2000000))

        assert response.status_code == 200
        lead = response.json()["lead"]
        assert lead["lookingFor"] == "3"
        assert lead["budget"] == "2,000,000"

    def test_submit_without_developer(self, client):
        """Test that a missing developer is stored as empty"""
        body = {k: v for k, v in REQUEST.items() if k != "developer"}

        response = client.post("/api/requests", json=body)

        assert response.status_code == 200
        assert response.json()["lead"]["developer"] == ""


class TestAdminLists:
    """Tests for GET/DELETE /api/leads and /api/users"""

    def test_list_and_delete_leads(self, client, admin_headers):
        """Test the admin leads list"""
        first = client.post("/api/requests", json=REQUEST).json()["lead"]
        client.post("/api/requests", json=dict(REQUEST, username="Karim", budget=25000000))

        leads = client.get("/api/leads", headers=admin_headers).json()["leads"]
        assert [l["username"] for l in leads] == ["Karim", "Mona"]
        assert leads[0]["budget"] == "25,000,000"

        response = client.delete(f"/api/leads/{first['id']}", headers=admin_headers)
        assert response.json() == {"ok": True}

        leads = client.get("/api/leads", headers=admin_headers).json()["leads"]
        assert [l["username"] for l in leads] == ["Karim"]

    def test_list_and_delete_users(self, client, admin_headers):
        """Test the admin users list hides password hashes"""
        signup = {"username": "Ahmed", "password": "pw", "phone": "01012345678", "email": "a@x.com"}
        user = client.post("/api/signup", json=signup).json()["user"]

        users = client.get("/api/users", headers=admin_headers).json()["users"]
        assert len(users) == 1
        assert users[0]["username"] == "Ahmed"
        assert "password" not in users[0]
        assert "createdAt" in users[0]

        client.delete(f"/api/users/{user['id']}", headers=admin_headers)
        assert client.get("/api/users", headers=admin_headers).json()["users"] == []
