"""
User Route Tests
"""

from satlogix.models import Booking, Expense


class TestUserCreation:

    def test_create_user_success(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Jane Doe", "email": "jane@satlogix.com", "department": "Finance"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["email"] == "jane@satlogix.com"
        assert body["data"]["role"] == "EMPLOYEE"
        assert body["data"]["id"]

    def test_create_user_with_role(self, client):
        response = client.post(
            "/api/users",
            json={"name": "Boss", "email": "boss@satlogix.com", "department": "Ops", "role": "ADMIN"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["role"] == "ADMIN"

    def test_duplicate_email_returns_error_envelope(self, client, make_user):
        make_user(email="taken@satlogix.com")

        response = client.post(
            "/api/users",
            json={"name": "Copy", "email": "taken@satlogix.com", "department": "Ops"}
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to create user"}

    def test_invalid_payload_returns_validation_envelope(self, client):
        response = client.post("/api/users", json={"name": "No Email", "department": "Ops"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Validation error"
        assert body["details"]

    def test_invalid_role_rejected(self, client):
        response = client.post(
            "/api/users",
            json={"name": "X", "email": "x@satlogix.com", "department": "Ops", "role": "OWNER"}
        )

        assert response.status_code == 422


class TestUserRetrieval:

    def test_list_users(self, client, make_user):
        make_user()
        make_user()

        response = client.get("/api/users")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 2

    def test_filter_users_by_role_and_department(self, client, make_user, manager):
        make_user(department="Engineering")

        by_role = client.get("/api/users", params={"role": "MANAGER"}).json()["data"]
        by_department = client.get("/api/users", params={"department": "Engineering"}).json()["data"]

        assert [u["id"] for u in by_role] == [manager.id]
        assert len(by_department) == 1
        assert by_department[0]["department"] == "Engineering"

    def test_get_user(self, client, make_user):
        user = make_user(name="Found Me")

        response = client.get(f"/api/users/{user.id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Found Me"

    def test_get_missing_user(self, client):
        response = client.get("/api/users/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "User not found"}


class TestUserUpdateAndDelete:

    def test_update_user(self, client, make_user):
        user = make_user()

        response = client.put(f"/api/users/{user.id}", json={"department": "Legal", "role": "MANAGER"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["department"] == "Legal"
        assert data["role"] == "MANAGER"
        assert data["name"] == user.name

    def test_update_missing_user(self, client):
        response = client.put("/api/users/nope", json={"name": "Ghost"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to update user"}

    def test_update_to_taken_email_fails(self, client, make_user):
        make_user(email="first@satlogix.com")
        second = make_user(email="second@satlogix.com")

        response = client.put(f"/api/users/{second.id}", json={"email": "first@satlogix.com"})

        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_delete_user_cascades(self, client, session_factory, make_user, make_booking, make_expense):
        user = make_user()
        booking = make_booking(user)
        make_expense(user, booking)

        response = client.delete(f"/api/users/{user.id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": user.id}}

        check = session_factory()
        try:
            assert check.query(Booking).count() == 0
            assert check.query(Expense).count() == 0
        finally:
            check.close()

    def test_delete_missing_user(self, client):
        response = client.delete("/api/users/nope")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to delete user"}


class TestUserService:

    def test_get_user_by_email(self, db, make_user):
        from satlogix.services.user_service import user_service

        user = make_user(email="lookup@satlogix.com")

        assert user_service.get_user_by_email(db, "lookup@satlogix.com").id == user.id
        assert user_service.get_user_by_email(db, "absent@satlogix.com") is None
