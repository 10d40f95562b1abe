# dispatchdesk/models/permission_set.py
from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dispatchdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from dispatchdesk.models.role import Role


class PermissionSet(Base, TimestampMixin):
    """Capability mapping of a single non-superuser role.

    The whole mapping lives in one JSON column so every write replaces it in a
    single row update.
    """

    __tablename__ = "permission_sets"

    role_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    capabilities: Mapped[dict[str, bool]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    role: Mapped[Role] = relationship("Role", back_populates="permission_set")

    __mapper_args__ = {"version_id_col": version_id}
