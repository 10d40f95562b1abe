# dispatchdesk/api/v1/rbac.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from dispatchdesk.api.deps import get_current_user, get_db
from dispatchdesk.models import User
from dispatchdesk.rbac.capabilities import CAPABILITY_DESCRIPTIONS
from dispatchdesk.rbac.roles import is_superuser_role
from dispatchdesk.schemas.rbac import (
    CapabilitySchema,
    RoleCreateSchema,
    RoleDeleteResult,
    RolePermissionsSchema,
    RolePermissionsUpdateSchema,
    RoleRenameResult,
    RoleRenameSchema,
    RoleSchema,
)
from dispatchdesk.services import permission_service, rbac_service, role_store

router = APIRouter()


def _permissions_response(role_name: str, capabilities: dict[str, bool]) -> RolePermissionsSchema:
    return RolePermissionsSchema(
        role=role_name,
        is_superuser=is_superuser_role(role_name),
        capabilities=capabilities,
    )


@router.get("/rbac/capabilities", response_model=list[CapabilitySchema], summary="List the capability vocabulary")
def list_capabilities(current_user: User = Depends(get_current_user)):
    """Retrieve every capability key with its description."""
    return [
        CapabilitySchema(key=capability.value, description=description)
        for capability, description in CAPABILITY_DESCRIPTIONS.items()
    ]


@router.get("/rbac/me/capabilities", response_model=RolePermissionsSchema, summary="Get the caller's effective capabilities")
def get_my_capabilities(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Retrieve the capabilities the current user may exercise.
    A user whose role no longer exists gets no capabilities.
    """
    return _permissions_response(
        current_user.role, permission_service.effective_capabilities(db, current_user)
    )


@router.get("/rbac/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Retrieve all roles with the number of users holding each.
    Requires managePermissions.
    """
    return rbac_service.list_roles(db, current_user)


@router.post("/rbac/roles", response_model=RoleSchema, status_code=status.HTTP_201_CREATED, summary="Create a custom role")
def create_role(
    role_in: RoleCreateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a custom role whose capabilities are a copy of ``based_on``.
    Requires managePermissions.
    """
    role = rbac_service.create_role(
        db, current_user, role_in.name, role_in.based_on, description=role_in.description
    )
    return RoleSchema(
        name=role.name,
        is_built_in=role.is_built_in,
        is_custom=role.is_custom,
        is_superuser=role.is_superuser,
        template_role=role.template_role,
        description=role.description,
        user_count=role_store.count_holders(db, role.name),
    )


@router.patch("/rbac/roles/{role_name}", response_model=RoleRenameResult, summary="Rename a custom role")
def rename_role(
    role_name: str,
    role_in: RoleRenameSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Rename a custom role; every holder moves to the new name.
    Built-in roles cannot be renamed. Requires managePermissions.
    """
    updated = rbac_service.rename_role(db, current_user, role_name, role_in.name)
    return RoleRenameResult(old_name=role_name, new_name=role_in.name, users_updated=updated)


@router.delete("/rbac/roles/{role_name}", response_model=RoleDeleteResult, summary="Delete a custom role")
def delete_role(
    role_name: str,
    reassign_to: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a custom role.
    Refused while users hold the role unless ``reassign_to`` names the role
    they should be moved to. Requires managePermissions.
    """
    moved = rbac_service.delete_role(db, current_user, role_name, reassign_to=reassign_to)
    return RoleDeleteResult(role=role_name, users_reassigned=moved, reassigned_to=reassign_to)


@router.get("/rbac/roles/{role_name}/permissions", response_model=RolePermissionsSchema, summary="Get a role's capabilities")
def get_role_permissions(
    role_name: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Retrieve the full capability set of a role. Requires managePermissions."""
    capabilities = rbac_service.get_role_permissions(db, current_user, role_name)
    return _permissions_response(role_name, capabilities)


@router.put("/rbac/roles/{role_name}/permissions", response_model=RolePermissionsSchema, summary="Update a role's capabilities")
def update_role_permissions(
    role_name: str,
    permissions_in: RolePermissionsUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Apply a capability patch to a role.
    Capabilities not named in the body keep their value. The superuser role
    cannot be edited. Requires managePermissions.
    """
    capabilities = rbac_service.update_role_permissions(
        db, current_user, role_name, permissions_in.capabilities
    )
    return _permissions_response(role_name, capabilities)


@router.post("/rbac/roles/{role_name}/reset", response_model=RolePermissionsSchema, summary="Reset a role to its defaults")
def reset_role_permissions(
    role_name: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Restore a role's capabilities to its template. Requires managePermissions."""
    capabilities = rbac_service.reset_role_permissions(db, current_user, role_name)
    return _permissions_response(role_name, capabilities)
