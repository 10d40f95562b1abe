# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Ticket schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field, model_validator

from dispatchdesk.schemas.department import TechnicianResponse


class TicketBase(BaseModel):
    """Base ticket schema."""

    ticket_number: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    start_date: datetime.datetime
    end_date: datetime.datetime
    department_id: uuid.UUID | None = None

    @model_validator(mode="after")
    def validate_dates(self) -> "TicketBase":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TicketCreate(TicketBase):
    """Schema for creating a ticket."""

    assignee_ids: list[uuid.UUID] = []


class TicketUpdate(BaseModel):
    """Schema for updating a ticket.

    ``assignee_ids`` is only considered when it is explicitly sent.
    """

    ticket_number: str | None = Field(None, min_length=1, max_length=50)
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    start_date: datetime.datetime | None = None
    end_date: datetime.datetime | None = None
    department_id: uuid.UUID | None = None
    assignee_ids: list[uuid.UUID] | None = None


class TicketResponse(BaseModel):
    """Schema for ticket response."""

    id: uuid.UUID
    ticket_number: str
    title: str
    description: str | None = None
    start_date: datetime.datetime
    end_date: datetime.datetime
    department_id: uuid.UUID | None = None
    created_by_id: uuid.UUID | None = None
    assignees: list[TechnicianResponse] = []
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
