# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for role administration endpoints."""

from dispatchdesk.models import User
from dispatchdesk.rbac.capabilities import CAPABILITY_KEYS


class TestCapabilities:
    def test_requires_authentication(self, client):
        assert client.get("/api/v1/rbac/capabilities").status_code == 401

    def test_lists_vocabulary(self, login, basic_user):
        client = login(basic_user)
        response = client.get("/api/v1/rbac/capabilities")
        assert response.status_code == 200
        assert {c["key"] for c in response.json()} == set(CAPABILITY_KEYS)

    def test_my_capabilities(self, login, basic_user):
        client = login(basic_user)
        data = client.get("/api/v1/rbac/me/capabilities").json()
        assert data["role"] == "user"
        assert data["capabilities"]["viewDashboard"] is True
        assert data["capabilities"]["viewTickets"] is False


class TestRoleList:
    def test_forbidden_without_manage_permissions(self, login, technician_user):
        client = login(technician_user)
        response = client.get("/api/v1/rbac/roles")
        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"

    def test_list_roles(self, admin_client):
        response = admin_client.get("/api/v1/rbac/roles")
        assert response.status_code == 200
        names = [r["name"] for r in response.json()]
        assert names == sorted(names)
        assert set(names) == {"administrator", "sysadmin", "technician", "user"}


class TestRolePermissions:
    def test_get_and_update(self, admin_client):
        response = admin_client.put(
            "/api/v1/rbac/roles/user/permissions",
            json={"capabilities": {"viewTickets": True}},
        )
        assert response.status_code == 200
        assert response.json()["capabilities"]["viewTickets"] is True

        data = admin_client.get("/api/v1/rbac/roles/user/permissions").json()
        assert data["capabilities"]["viewTickets"] is True
        assert data["capabilities"]["viewCalendar"] is True

    def test_superuser_role_is_immutable(self, sysadmin_client):
        response = sysadmin_client.put(
            "/api/v1/rbac/roles/sysadmin/permissions",
            json={"capabilities": {"viewDashboard": False}},
        )
        assert response.status_code == 403
        assert response.json()["code"] == "superuser_immutable"

        data = sysadmin_client.get("/api/v1/rbac/roles/sysadmin/permissions").json()
        assert data["is_superuser"] is True
        assert all(data["capabilities"].values())

    def test_unknown_capability(self, admin_client):
        response = admin_client.put(
            "/api/v1/rbac/roles/user/permissions",
            json={"capabilities": {"teleport": True}},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_capability"

    def test_non_boolean_value(self, admin_client):
        response = admin_client.put(
            "/api/v1/rbac/roles/user/permissions",
            json={"capabilities": {"viewTickets": "true"}},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_capability"

    def test_unknown_role(self, admin_client):
        response = admin_client.get("/api/v1/rbac/roles/ghost/permissions")
        assert response.status_code == 404
        assert response.json()["code"] == "role_not_found"

    def test_reset(self, admin_client):
        admin_client.put(
            "/api/v1/rbac/roles/user/permissions",
            json={"capabilities": {"manageUsers": True}},
        )
        response = admin_client.post("/api/v1/rbac/roles/user/reset")
        assert response.status_code == 200
        assert response.json()["capabilities"]["manageUsers"] is False


class TestRoleLifecycle:
    def test_create_rename_delete(self, admin_client, make_user, db_session):
        response = admin_client.post(
            "/api/v1/rbac/roles", json={"name": "viewer", "based_on": "user"}
        )
        assert response.status_code == 201
        assert response.json()["is_custom"] is True
        assert response.json()["template_role"] == "user"

        make_user("v1", "viewer")
        make_user("v2", "viewer")

        response = admin_client.patch("/api/v1/rbac/roles/viewer", json={"name": "inspector"})
        assert response.status_code == 200
        assert response.json() == {
            "old_name": "viewer",
            "new_name": "inspector",
            "users_updated": 2,
        }

        response = admin_client.delete("/api/v1/rbac/roles/inspector")
        assert response.status_code == 409
        assert response.json()["code"] == "role_in_use"

        response = admin_client.delete("/api/v1/rbac/roles/inspector?reassign_to=user")
        assert response.status_code == 200
        assert response.json()["users_reassigned"] == 2
        assert db_session.query(User).filter(User.role == "inspector").count() == 0

    def test_create_invalid_name(self, admin_client):
        response = admin_client.post(
            "/api/v1/rbac/roles", json={"name": "bad name!", "based_on": "user"}
        )
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_role_name"

    def test_create_duplicate(self, admin_client):
        response = admin_client.post(
            "/api/v1/rbac/roles", json={"name": "user", "based_on": "administrator"}
        )
        assert response.status_code == 409
        assert response.json()["code"] == "duplicate_role"

    def test_rename_built_in(self, admin_client):
        response = admin_client.patch("/api/v1/rbac/roles/technician", json={"name": "tech"})
        assert response.status_code == 403
        assert response.json()["code"] == "built_in_immutable"

    def test_delete_superuser(self, sysadmin_client):
        response = sysadmin_client.delete("/api/v1/rbac/roles/sysadmin")
        assert response.status_code == 403
        assert response.json()["code"] == "superuser_immutable"


def test_permission_change_applies_to_next_request(login, admin_user, technician_user):
    client = login(technician_user)
    assert client.get("/api/v1/users").status_code == 403

    client = login(admin_user)
    client.put(
        "/api/v1/rbac/roles/technician/permissions",
        json={"capabilities": {"viewUsers": True}},
    )

    client = login(technician_user)
    assert client.get("/api/v1/users").status_code == 200
