# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for department_service."""

import pytest

from dispatchdesk.exceptions import PermissionDeniedError
from dispatchdesk.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    TechnicianCreate,
    TechnicianUpdate,
)
from dispatchdesk.services import department_service, rbac_service


def test_create_and_update_department(seeded, admin_user):
    department = department_service.create_department(
        seeded, admin_user, DepartmentCreate(name="Plumbing", color="#0088ff")
    )
    assert department.name == "Plumbing"

    updated = department_service.update_department(
        seeded, admin_user, department, DepartmentUpdate(description="Pipes and taps")
    )
    assert updated.description == "Pipes and taps"
    assert updated.color == "#0088ff"


def test_department_names_are_unique(seeded, admin_user):
    department_service.create_department(seeded, admin_user, DepartmentCreate(name="Plumbing"))
    with pytest.raises(ValueError):
        department_service.create_department(seeded, admin_user, DepartmentCreate(name="Plumbing"))


def test_manage_departments_is_required(seeded, technician_user):
    with pytest.raises(PermissionDeniedError):
        department_service.create_department(
            seeded, technician_user, DepartmentCreate(name="Plumbing")
        )


def test_granted_custom_role_may_manage_technicians(seeded, admin_user, make_user):
    rbac_service.update_role_permissions(seeded, admin_user, "technician", {
        key: False for key in rbac_service.get_role_permissions(seeded, admin_user, "technician")
    })
    rbac_service.create_role(seeded, admin_user, "supervisor", "technician")
    rbac_service.update_role_permissions(seeded, admin_user, "supervisor", {"manageTechnicians": True})
    supervisor = make_user("sup", "supervisor")

    technician = department_service.create_technician(
        seeded,
        supervisor,
        TechnicianCreate(first_name="Ada", last_name="Wrench", email="ada@example.com"),
    )
    assert technician.email == "ada@example.com"

    with pytest.raises(PermissionDeniedError):
        department_service.create_department(seeded, supervisor, DepartmentCreate(name="HVAC"))


def test_technician_email_is_lowercased_and_unique(seeded, admin_user):
    department_service.create_technician(
        seeded,
        admin_user,
        TechnicianCreate(first_name="Ada", last_name="Wrench", email="Ada@Example.com"),
    )
    with pytest.raises(ValueError):
        department_service.create_technician(
            seeded,
            admin_user,
            TechnicianCreate(first_name="Other", last_name="Ada", email="ada@example.com"),
        )


def test_delete_department_unassigns_technicians(seeded, admin_user):
    department = department_service.create_department(
        seeded, admin_user, DepartmentCreate(name="Plumbing")
    )
    technician = department_service.create_technician(
        seeded,
        admin_user,
        TechnicianCreate(
            first_name="Ada",
            last_name="Wrench",
            email="ada@example.com",
            department_id=department.id,
        ),
    )

    department_service.delete_department(seeded, admin_user, department)

    seeded.refresh(technician)
    assert technician.department_id is None
    assert department_service.get_departments(seeded) == []


def test_update_technician_department_must_exist(seeded, admin_user):
    import uuid

    technician = department_service.create_technician(
        seeded,
        admin_user,
        TechnicianCreate(first_name="Ada", last_name="Wrench", email="ada@example.com"),
    )
    with pytest.raises(ValueError):
        department_service.update_technician(
            seeded, admin_user, technician, TechnicianUpdate(department_id=uuid.uuid4())
        )


def test_delete_technician(seeded, admin_user):
    technician = department_service.create_technician(
        seeded,
        admin_user,
        TechnicianCreate(first_name="Ada", last_name="Wrench", email="ada@example.com"),
    )
    technician_id = technician.id
    department_service.delete_technician(seeded, admin_user, technician)
    assert department_service.get_technician(seeded, technician_id) is None
