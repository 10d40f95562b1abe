# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Ticket API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_current_user, get_db
from dispatchdesk.models import Ticket, User
from dispatchdesk.rbac.capabilities import Capability
from dispatchdesk.schemas.ticket import TicketCreate, TicketResponse, TicketUpdate
from dispatchdesk.services import permission_service, ticket_service

router = APIRouter()


def _get_ticket_or_404(db: Session, ticket_id: uuid.UUID) -> Ticket:
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Ticket not found",
        )
    return ticket


@router.get("", response_model=list[TicketResponse])
def list_tickets(
    department_id: uuid.UUID | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Ticket]:
    """List tickets. Requires viewTickets."""
    return ticket_service.get_tickets(db, current_user, department_id)


@router.get("/{ticket_id}", response_model=TicketResponse)
def get_ticket(
    ticket_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Ticket:
    """Get a ticket. Requires viewTickets."""
    permission_service.require_capability(db, current_user, Capability.VIEW_TICKETS)
    return _get_ticket_or_404(db, ticket_id)


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(
    data: TicketCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Ticket:
    """Create a ticket. Requires createTickets, and assignTickets for assignees."""
    try:
        return ticket_service.create_ticket(db, current_user, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{ticket_id}", response_model=TicketResponse)
def update_ticket(
    ticket_id: uuid.UUID,
    data: TicketUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Ticket:
    """Update a ticket.

    Requires editAllTickets, or editOwnTickets for tickets the caller is
    assigned to.
    """
    ticket = _get_ticket_or_404(db, ticket_id)
    try:
        return ticket_service.update_ticket(db, current_user, ticket, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(
    ticket_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Delete a ticket. Requires deleteTickets."""
    ticket = _get_ticket_or_404(db, ticket_id)
    ticket_service.delete_ticket(db, current_user, ticket)
