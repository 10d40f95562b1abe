# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department and technician models."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dispatchdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from dispatchdesk.models.ticket import Ticket


class Department(Base, TimestampMixin):
    """Organisational unit that technicians and tickets belong to."""

    __tablename__ = "departments"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(20), nullable=True)

    technicians: Mapped[list[Technician]] = relationship(
        "Technician", back_populates="department"
    )


class Technician(Base, TimestampMixin):
    """Field technician that can be assigned to tickets."""

    __tablename__ = "technicians"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Matched case-insensitively against user emails for ticket ownership
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    department_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
    )

    department: Mapped[Department | None] = relationship(
        "Department", back_populates="technicians"
    )
    tickets: Mapped[list[Ticket]] = relationship(
        "Ticket", secondary="ticket_assignees", back_populates="assignees"
    )
