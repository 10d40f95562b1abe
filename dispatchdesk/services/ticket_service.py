# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Ticket service.

Tickets are owned by the technicians assigned to them. A user owns a ticket
when their email matches the email of one of its assignees.
"""

import uuid

from sqlalchemy.orm import Session

from dispatchdesk.exceptions import PermissionDeniedError
from dispatchdesk.models import ActivityAction, ActivityCategory, Technician, Ticket, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.ticket import TicketCreate, TicketUpdate
from dispatchdesk.services import activity_log_service, permission_service


def is_ticket_owner(user: User, ticket: Ticket) -> bool:
    """Check if the user is one of the ticket's assigned technicians."""
    email = (user.email or "").lower()
    if not email:
        return False
    return any(tech.email.lower() == email for tech in ticket.assignees)


def get_tickets(db: Session, actor: User, department_id: uuid.UUID | None = None) -> list[Ticket]:
    """Get tickets ordered by start date."""
    permission_service.require_capability(db, actor, Capability.VIEW_TICKETS)
    query = db.query(Ticket)
    if department_id:
        query = query.filter(Ticket.department_id == department_id)
    return query.order_by(Ticket.start_date).all()


def get_ticket(db: Session, ticket_id: uuid.UUID) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def _load_assignees(db: Session, assignee_ids: list[uuid.UUID]) -> list[Technician]:
    unique_ids = list(dict.fromkeys(assignee_ids))
    if not unique_ids:
        return []
    technicians = db.query(Technician).filter(Technician.id.in_(unique_ids)).all()
    if len(technicians) != len(unique_ids):
        raise ValueError("One or more assigned technicians do not exist")
    return technicians


def _check_number_free(db: Session, ticket_number: str, ticket_id: uuid.UUID | None = None) -> None:
    query = db.query(Ticket).filter(Ticket.ticket_number == ticket_number)
    if ticket_id:
        query = query.filter(Ticket.id != ticket_id)
    if query.first():
        raise ValueError(f"Ticket number {ticket_number} already exists")


def create_ticket(db: Session, actor: User, data: TicketCreate) -> Ticket:
    """Create a ticket. Assigning technicians also needs ``assignTickets``."""
    permission_service.require_capability(db, actor, Capability.CREATE_TICKETS)
    if data.assignee_ids:
        permission_service.require_capability(db, actor, Capability.ASSIGN_TICKETS)
    _check_number_free(db, data.ticket_number)

    ticket = Ticket(
        **data.model_dump(exclude={"assignee_ids"}),
        created_by_id=actor.id,
    )
    ticket.assignees = _load_assignees(db, data.assignee_ids)
    db.add(ticket)
    db.flush()
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TICKET_CREATED,
        ActivityCategory.TICKET,
        f"Created ticket {ticket.ticket_number}",
        target_id=ticket.id,
        target_type="ticket",
    )
    db.commit()
    db.refresh(ticket)
    return ticket


def update_ticket(db: Session, actor: User, ticket: Ticket, data: TicketUpdate) -> Ticket:
    """Update a ticket.

    Holders of ``editAllTickets`` may edit any ticket; holders of
    ``editOwnTickets`` only the tickets they are assigned to. Changing the
    set of assignees needs ``assignTickets`` on top.
    """
    if not permission_service.authorize(db, actor, Capability.EDIT_ALL_TICKETS):
        if not (
            permission_service.authorize(db, actor, Capability.EDIT_OWN_TICKETS)
            and is_ticket_owner(actor, ticket)
        ):
            raise PermissionDeniedError(Capability.EDIT_ALL_TICKETS.value)

    update_data = data.model_dump(exclude_unset=True, exclude={"assignee_ids"})
    assignee_ids = data.assignee_ids if "assignee_ids" in data.model_fields_set else None

    new_assignees = None
    if assignee_ids is not None:
        new_assignees = _load_assignees(db, assignee_ids)
        if {t.id for t in new_assignees} != {t.id for t in ticket.assignees}:
            permission_service.require_capability(db, actor, Capability.ASSIGN_TICKETS)
        else:
            new_assignees = None

    if update_data.get("ticket_number"):
        _check_number_free(db, update_data["ticket_number"], ticket.id)
    start = update_data.get("start_date") or ticket.start_date
    end = update_data.get("end_date") or ticket.end_date
    if end < start:
        raise ValueError("end_date must not be before start_date")

    for field, value in update_data.items():
        setattr(ticket, field, value)
    changes = {k: str(v) for k, v in update_data.items()}
    if new_assignees is not None:
        ticket.assignees = new_assignees
        changes["assignee_ids"] = [str(t.id) for t in new_assignees]

    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TICKET_UPDATED,
        ActivityCategory.TICKET,
        f"Updated ticket {ticket.ticket_number}",
        target_id=ticket.id,
        target_type="ticket",
        changes=changes,
    )
    db.commit()
    db.refresh(ticket)
    return ticket


def delete_ticket(db: Session, actor: User, ticket: Ticket) -> None:
    """Delete a ticket."""
    permission_service.require_capability(db, actor, Capability.DELETE_TICKETS)
    activity_log_service.log_activity(
        db,
        actor,
        ActivityAction.TICKET_DELETED,
        ActivityCategory.TICKET,
        f"Deleted ticket {ticket.ticket_number}",
        target_id=ticket.id,
        target_type="ticket",
    )
    db.delete(ticket)
    db.commit()
