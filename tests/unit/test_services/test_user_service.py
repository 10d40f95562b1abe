# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for user_service."""

import pytest

from dispatchdesk.exceptions import (
    ConcurrentModificationError,
    ForbiddenError,
    PermissionDeniedError,
    RoleNotFoundError,
)
from dispatchdesk.models import User
from dispatchdesk.services import rbac_service, role_store, user_service


def test_list_users_requires_view_users(seeded, admin_user, technician_user):
    usernames = [u.username for u in user_service.list_users(seeded, admin_user)]
    assert usernames == sorted(usernames)
    assert "tech" in usernames

    with pytest.raises(PermissionDeniedError):
        user_service.list_users(seeded, technician_user)


def test_pending_users_excludes_approved_and_superusers(seeded, admin_user, pending_user, make_user):
    make_user("root", "sysadmin", approved=False)
    pending = user_service.list_pending_users(seeded, admin_user)
    assert [u.username for u in pending] == ["pending"]


def test_approve_user(seeded, admin_user, pending_user):
    user = user_service.approve_user(seeded, admin_user, pending_user)
    assert user.approved is True

    with pytest.raises(ValueError):
        user_service.approve_user(seeded, admin_user, user)


def test_reject_user_removes_registration(seeded, admin_user, pending_user):
    user_id = pending_user.id
    user_service.reject_user(seeded, admin_user, pending_user)
    assert seeded.get(User, user_id) is None


def test_reject_approved_user_fails(seeded, admin_user, basic_user):
    with pytest.raises(ValueError):
        user_service.reject_user(seeded, admin_user, basic_user)


def test_only_superuser_rejects_superuser_registration(seeded, admin_user, sysadmin_user, make_user):
    pending_root = make_user("pending-root", "sysadmin", approved=False)
    with pytest.raises(ForbiddenError):
        user_service.reject_user(seeded, admin_user, pending_root)
    assert user_service.get_user(seeded, pending_root.id) is not None

    user_id = pending_root.id
    user_service.reject_user(seeded, sysadmin_user, pending_root)
    assert user_service.get_user(seeded, user_id) is None


def test_assign_existing_role(seeded, admin_user, basic_user):
    rbac_service.create_role(seeded, admin_user, "viewer", "user")
    user = user_service.assign_role(seeded, admin_user, basic_user, "viewer")
    assert user.role == "viewer"


def test_assign_unknown_role_fails(seeded, admin_user, basic_user):
    with pytest.raises(RoleNotFoundError):
        user_service.assign_role(seeded, admin_user, basic_user, "ghost")
    seeded.refresh(basic_user)
    assert basic_user.role == "user"


def test_only_superuser_grants_superuser_role(seeded, admin_user, sysadmin_user, basic_user):
    with pytest.raises(ForbiddenError):
        user_service.assign_role(seeded, admin_user, basic_user, "sysadmin")

    user = user_service.assign_role(seeded, sysadmin_user, basic_user, "sysadmin")
    assert user.role == "sysadmin"


def test_administrator_cannot_demote_superuser(seeded, admin_user, sysadmin_user):
    with pytest.raises(ForbiddenError):
        user_service.assign_role(seeded, admin_user, sysadmin_user, "user")


def test_assign_role_requires_manage_users(seeded, technician_user, basic_user):
    with pytest.raises(PermissionDeniedError):
        user_service.assign_role(seeded, technician_user, basic_user, "technician")


def test_delete_user_rules(seeded, admin_user, sysadmin_user, basic_user):
    with pytest.raises(ForbiddenError):
        user_service.delete_user(seeded, admin_user, admin_user)
    with pytest.raises(ForbiddenError):
        user_service.delete_user(seeded, admin_user, sysadmin_user)

    user_id = basic_user.id
    user_service.delete_user(seeded, admin_user, basic_user)
    assert user_service.get_user(seeded, user_id) is None


class TestAssignRoleRace:
    """Role changes committed by another session while a role is being assigned."""

    @pytest.fixture
    def target(self, seeded, admin_user, make_user):
        rbac_service.create_role(seeded, admin_user, "viewer", "user")
        return make_user("target", "user")

    @pytest.fixture
    def run_between_lookup_and_write(self, monkeypatch, other_session, admin_user):
        """Run ``change`` in another session right after the role row is read."""

        def install(change):
            original = role_store.require_role
            state = {"done": False}

            def require_role(db, name, for_update=False):
                role = original(db, name, for_update=for_update)
                if for_update and not state["done"]:
                    state["done"] = True
                    change(other_session, other_session.get(User, admin_user.id))
                return role

            monkeypatch.setattr(role_store, "require_role", require_role)

        return install

    def test_concurrent_delete_wins(self, seeded, admin_user, target, run_between_lookup_and_write):
        run_between_lookup_and_write(
            lambda db, actor: rbac_service.delete_role(db, actor, "viewer")
        )

        with pytest.raises(ConcurrentModificationError):
            user_service.assign_role(seeded, admin_user, target, "viewer")

        seeded.refresh(target)
        assert target.role == "user"
        assert role_store.get_role(seeded, "viewer") is None

    def test_concurrent_rename_wins(self, seeded, admin_user, target, run_between_lookup_and_write):
        run_between_lookup_and_write(
            lambda db, actor: rbac_service.rename_role(db, actor, "viewer", "auditor")
        )

        with pytest.raises(ConcurrentModificationError):
            user_service.assign_role(seeded, admin_user, target, "viewer")

        seeded.refresh(target)
        assert target.role == "user"
        assert role_store.count_holders(seeded, "viewer") == 0
        assert role_store.role_exists(seeded, "auditor")

    def test_assignment_bumps_role_version(self, seeded, admin_user, target):
        version = role_store.get_role(seeded, "viewer").version_id
        user_service.assign_role(seeded, admin_user, target, "viewer")
        assert role_store.get_role(seeded, "viewer").version_id == version + 1
