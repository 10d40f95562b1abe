# dispatchdesk/schemas/rbac.py
from typing import Any

from pydantic import BaseModel, ConfigDict


class CapabilitySchema(BaseModel):
    """Schema representing one capability of the vocabulary."""

    key: str
    description: str


class RoleSchema(BaseModel):
    """Schema representing a role in the role list."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    is_built_in: bool
    is_custom: bool
    is_superuser: bool
    template_role: str | None = None
    description: str | None = None
    user_count: int = 0


class RolePermissionsSchema(BaseModel):
    """Schema representing a role's resolved capabilities."""

    role: str
    is_superuser: bool
    capabilities: dict[str, bool]


class RoleCreateSchema(BaseModel):
    """Schema for creating a custom role from a template role."""

    name: str
    based_on: str
    description: str | None = None


class RoleRenameSchema(BaseModel):
    """Schema for renaming a custom role."""

    name: str


class RoleRenameResult(BaseModel):
    """Schema for the result of a rename."""

    old_name: str
    new_name: str
    users_updated: int


class RoleDeleteResult(BaseModel):
    """Schema for the result of a delete."""

    role: str
    users_reassigned: int
    reassigned_to: str | None = None


class RolePermissionsUpdateSchema(BaseModel):
    """Schema for a capability patch; keys left out keep their value."""

    capabilities: dict[str, Any]
