# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Ticket (work order) model."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dispatchdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from dispatchdesk.models.department import Department, Technician


ticket_assignees = Table(
    "ticket_assignees",
    Base.metadata,
    Column(
        "ticket_id",
        Uuid(as_uuid=True),
        ForeignKey("tickets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "technician_id",
        Uuid(as_uuid=True),
        ForeignKey("technicians.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Ticket(Base, TimestampMixin):
    """Work order assigned to zero or more technicians."""

    __tablename__ = "tickets"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    ticket_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    department_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_by_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    department: Mapped[Department | None] = relationship("Department")
    assignees: Mapped[list[Technician]] = relationship(
        "Technician",
        secondary=ticket_assignees,
        back_populates="tickets",
        lazy="selectin",
    )
