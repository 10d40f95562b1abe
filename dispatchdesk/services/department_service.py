# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department and technician management."""

import uuid

from sqlalchemy.orm import Session

from dispatchdesk.models import (
    ActivityAction,
    ActivityCategory,
    Department,
    Technician,
    Ticket,
    User,
)
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.department import (
    DepartmentCreate,
    DepartmentUpdate,
    TechnicianCreate,
    TechnicianUpdate,
)
from dispatchdesk.services import activity_log_service, permission_service


def get_departments(db: Session) -> list[Department]:
    return db.query(Department).order_by(Department.name).all()


def get_department(db: Session, department_id: uuid.UUID) -> Department | None:
    return db.query(Department).filter(Department.id == department_id).first()


def get_department_by_name(db: Session, name: str) -> Department | None:
    return db.query(Department).filter(Department.name == name).first()


def create_department(db: Session, actor: User, data: DepartmentCreate) -> Department:
    """Create a department."""
    permission_service.require_capability(db, actor, Capability.MANAGE_DEPARTMENTS)
    if get_department_by_name(db, data.name):
        raise ValueError(f"Department '{data.name}' already exists")

    department = Department(**data.model_dump())
    db.add(department)
    db.flush()
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.DEPARTMENT_CREATED,
        ActivityCategory.DEPARTMENT,
        f"Created department '{department.name}'",
        target_id=department.id,
        target_type="department",
    )
    db.commit()
    db.refresh(department)
    return department


def update_department(
    db: Session, actor: User, department: Department, data: DepartmentUpdate
) -> Department:
    """Update a department."""
    permission_service.require_capability(db, actor, Capability.MANAGE_DEPARTMENTS)
    update_data = data.model_dump(exclude_unset=True)
    new_name = update_data.get("name")
    if new_name and new_name != department.name and get_department_by_name(db, new_name):
        raise ValueError(f"Department '{new_name}' already exists")

    for field, value in update_data.items():
        setattr(department, field, value)
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.DEPARTMENT_UPDATED,
        ActivityCategory.DEPARTMENT,
        f"Updated department '{department.name}'",
        target_id=department.id,
        target_type="department",
        changes={k: str(v) for k, v in update_data.items()},
    )
    db.commit()
    db.refresh(department)
    return department


def delete_department(db: Session, actor: User, department: Department) -> None:
    """Delete a department; its technicians and tickets become unassigned."""
    permission_service.require_capability(db, actor, Capability.MANAGE_DEPARTMENTS)
    for technician in department.technicians:
        technician.department_id = None
    db.query(Ticket).filter(Ticket.department_id == department.id).update(
        {Ticket.department_id: None}, synchronize_session="fetch"
    )
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.DEPARTMENT_DELETED,
        ActivityCategory.DEPARTMENT,
        f"Deleted department '{department.name}'",
        target_id=department.id,
        target_type="department",
    )
    db.delete(department)
    db.commit()


def get_technicians(db: Session, department_id: uuid.UUID | None = None) -> list[Technician]:
    query = db.query(Technician)
    if department_id:
        query = query.filter(Technician.department_id == department_id)
    return query.order_by(Technician.last_name, Technician.first_name).all()


def get_technician(db: Session, technician_id: uuid.UUID) -> Technician | None:
    return db.query(Technician).filter(Technician.id == technician_id).first()


def _check_email_free(db: Session, email: str, technician_id: uuid.UUID | None = None) -> None:
    query = db.query(Technician).filter(Technician.email == email)
    if technician_id:
        query = query.filter(Technician.id != technician_id)
    if query.first():
        raise ValueError(f"A technician with email {email} already exists")


def _check_department(db: Session, department_id: uuid.UUID | None) -> None:
    if department_id and not get_department(db, department_id):
        raise ValueError("Department not found")


def create_technician(db: Session, actor: User, data: TechnicianCreate) -> Technician:
    """Create a technician."""
    permission_service.require_capability(db, actor, Capability.MANAGE_TECHNICIANS)
    email = data.email.lower()
    _check_email_free(db, email)
    _check_department(db, data.department_id)

    technician = Technician(**{**data.model_dump(), "email": email})
    db.add(technician)
    db.flush()
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TECHNICIAN_CREATED,
        ActivityCategory.TECHNICIAN,
        f"Created technician {technician.first_name} {technician.last_name}",
        target_id=technician.id,
        target_type="technician",
    )
    db.commit()
    db.refresh(technician)
    return technician


def update_technician(
    db: Session, actor: User, technician: Technician, data: TechnicianUpdate
) -> Technician:
    """Update a technician."""
    permission_service.require_capability(db, actor, Capability.MANAGE_TECHNICIANS)
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("email"):
        update_data["email"] = update_data["email"].lower()
        _check_email_free(db, update_data["email"], technician.id)
    if "department_id" in update_data:
        _check_department(db, update_data["department_id"])

    for field, value in update_data.items():
        setattr(technician, field, value)
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TECHNICIAN_UPDATED,
        ActivityCategory.TECHNICIAN,
        f"Updated technician {technician.first_name} {technician.last_name}",
        target_id=technician.id,
        target_type="technician",
        changes={k: str(v) for k, v in update_data.items()},
    )
    db.commit()
    db.refresh(technician)
    return technician


def delete_technician(db: Session, actor: User, technician: Technician) -> None:
    """Delete a technician; ticket assignments are removed with it."""
    permission_service.require_capability(db, actor, Capability.MANAGE_TECHNICIANS)
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TECHNICIAN_DELETED,
        ActivityCategory.TECHNICIAN,
        f"Deleted technician {technician.first_name} {technician.last_name}",
        target_id=technician.id,
        target_type="technician",
    )
    db.delete(technician)
    db.commit()
