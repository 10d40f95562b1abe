# dispatchdesk/models/role.py
from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dispatchdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from dispatchdesk.models.permission_set import PermissionSet


class Role(Base, TimestampMixin):
    """A named permission profile that users are assigned to."""

    __tablename__ = "roles"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    is_built_in: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_superuser: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Built-in role a custom role resets to; NULL for built-in roles
    template_role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    permission_set: Mapped[PermissionSet | None] = relationship(
        "PermissionSet",
        back_populates="role",
        cascade="all, delete-orphan",
        uselist=False,
    )

    __mapper_args__ = {"version_id_col": version_id}

    @property
    def is_custom(self) -> bool:
        return not self.is_built_in
