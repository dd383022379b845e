"""Tests for destination endpoints."""

VALID_URL = "https://chat.googleapis.com/v1/spaces/NEW/messages?key=k&token=t"


class TestListDestinations:
    """Tests for GET /destinations."""

    def test_admin_sees_all(self, client, admin_headers):
        response = client.get("/destinations", headers=admin_headers)

        assert response.status_code == 200
        assert [d["id"] for d in response.json()] == ["dest-1"]

    def test_member_sees_own(self, client, member_headers, admin_headers):
        client.post("/destinations", headers=admin_headers, json={"name": "Other", "url": VALID_URL})

        response = client.get("/destinations", headers=member_headers)

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Team Chat"]

    def test_requires_token(self, client):
        response = client.get("/destinations")

        assert response.status_code == 401


class TestCreateDestination:
    """Tests for POST /destinations."""

    def test_create(self, client, admin_headers):
        response = client.post(
            "/destinations",
            headers=admin_headers,
            json={"name": "New Space", "url": VALID_URL, "description": "Weekly"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "New Space"
        assert data["url"] == VALID_URL
        assert data["id"]

    def test_member_forbidden(self, client, member_headers):
        response = client.post(
            "/destinations", headers=member_headers, json={"name": "x", "url": VALID_URL}
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied. Admin privileges required."

    def test_missing_fields(self, client, admin_headers):
        response = client.post("/destinations", headers=admin_headers, json={"name": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Name and URL are required"

    def test_invalid_url(self, client, admin_headers):
        response = client.post(
            "/destinations",
            headers=admin_headers,
            json={"name": "x", "url": "https://hooks.example.com/abc"},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid webhook URL format")


class TestUpdateDestination:
    """Tests for PUT /destinations/{id}."""

    def test_update(self, client, admin_headers):
        response = client.put(
            "/destinations/dest-1",
            headers=admin_headers,
            json={"name": "Renamed", "url": VALID_URL},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["description"] == "Main team space"

    def test_update_missing(self, client, admin_headers):
        response = client.put(
            "/destinations/missing",
            headers=admin_headers,
            json={"name": "Renamed", "url": VALID_URL},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Webhook not found"


class TestDeleteDestination:
    """Tests for DELETE /destinations/{id}."""

    def test_delete(self, client, admin_headers):
        response = client.delete("/destinations/dest-1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Webhook deleted successfully"}
        assert client.get("/destinations", headers=admin_headers).json() == []

    def test_delete_missing(self, client, admin_headers):
        response = client.delete("/destinations/missing", headers=admin_headers)

        assert response.status_code == 404

    def test_member_forbidden(self, client, member_headers):
        response = client.delete("/destinations/dest-1", headers=member_headers)

        assert response.status_code == 403
