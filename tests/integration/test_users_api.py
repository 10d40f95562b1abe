# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for user management, log and status endpoints."""


class TestUserManagement:
    def test_list_requires_view_users(self, login, basic_user):
        client = login(basic_user)
        assert client.get("/api/v1/users").status_code == 403

    def test_pending_and_approve(self, admin_client, pending_user):
        pending = admin_client.get("/api/v1/users/pending").json()
        assert [u["username"] for u in pending] == ["pending"]

        response = admin_client.post(f"/api/v1/users/{pending_user.id}/approve")
        assert response.status_code == 200
        assert response.json()["approved"] is True

        response = admin_client.post(f"/api/v1/users/{pending_user.id}/approve")
        assert response.status_code == 400

    def test_reject(self, admin_client, pending_user):
        response = admin_client.post(f"/api/v1/users/{pending_user.id}/reject")
        assert response.status_code == 204
        assert admin_client.get("/api/v1/users/pending").json() == []

    def test_assign_role(self, admin_client, basic_user):
        response = admin_client.put(
            f"/api/v1/users/{basic_user.id}/role", json={"role": "technician"}
        )
        assert response.status_code == 200
        assert response.json()["role"] == "technician"

    def test_assign_missing_role(self, admin_client, basic_user):
        response = admin_client.put(
            f"/api/v1/users/{basic_user.id}/role", json={"role": "ghost"}
        )
        assert response.status_code == 404
        assert response.json()["code"] == "role_not_found"

    def test_administrator_cannot_grant_superuser(self, admin_client, basic_user):
        response = admin_client.put(
            f"/api/v1/users/{basic_user.id}/role", json={"role": "sysadmin"}
        )
        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    def test_unknown_user(self, admin_client):
        response = admin_client.delete("/api/v1/users/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404

    def test_delete_user(self, admin_client, basic_user):
        assert admin_client.delete(f"/api/v1/users/{basic_user.id}").status_code == 204

    def test_permission_checked_before_user_lookup(self, login, technician_user, basic_user):
        client = login(technician_user)
        missing = "00000000-0000-0000-0000-000000000000"
        for user_id in (basic_user.id, missing):
            calls = [
                client.post(f"/api/v1/users/{user_id}/approve"),
                client.post(f"/api/v1/users/{user_id}/reject"),
                client.put(f"/api/v1/users/{user_id}/role", json={"role": "user"}),
                client.delete(f"/api/v1/users/{user_id}"),
            ]
            for response in calls:
                assert response.status_code == 403
                assert response.json()["code"] == "permission_denied"


class TestLogs:
    def test_requires_view_logs(self, login, technician_user):
        client = login(technician_user)
        response = client.get("/api/v1/logs")
        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"

    def test_lists_login_events(self, admin_client):
        response = admin_client.get("/api/v1/logs", params={"category": "AUTH"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] >= 1
        assert data["logs"][0]["action"] == "USER_LOGIN"

        assert "AUTH" in admin_client.get("/api/v1/logs/categories").json()


class TestStatus:
    def test_status(self, admin_client, pending_user):
        response = admin_client.get("/api/v1/status")
        assert response.status_code == 200
        data = response.json()
        assert data["database"] == "ok"
        assert data["roles"] == 4
        assert data["custom_roles"] == 0
        assert data["pending_users"] == 1

    def test_status_requires_capability(self, login, basic_user):
        client = login(basic_user)
        assert client.get("/api/v1/status").status_code == 403
