# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions raised by the service layer.

Every exception carries a stable ``code`` so API clients can tell the kinds
apart, and the HTTP status the API layer answers with.
"""


class DispatchDeskError(Exception):
    """Base exception for DispatchDesk."""

    code = "error"
    status_code = 400

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class RoleNotFoundError(DispatchDeskError):
    """Raised when a role is not present in the registry."""

    code = "role_not_found"
    status_code = 404

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Role '{role_name}' not found")


class ForbiddenError(DispatchDeskError):
    """Raised when an operation is not permitted."""

    code = "forbidden"
    status_code = 403

    def __init__(self, message: str = "Not permitted"):
        super().__init__(message)


class SuperuserRoleImmutableError(ForbiddenError):
    """Raised on any attempt to modify the superuser role."""

    code = "superuser_immutable"

    def __init__(self, role_name: str):
        super().__init__(f"Cannot modify the '{role_name}' role")


class BuiltInRoleImmutableError(ForbiddenError):
    """Raised when renaming or deleting a built-in role."""

    code = "built_in_immutable"

    def __init__(self, role_name: str):
        super().__init__(f"Built-in role '{role_name}' cannot be renamed or deleted")


class PermissionDeniedError(ForbiddenError):
    """Raised by the authorization gate when a capability is missing."""

    code = "permission_denied"

    def __init__(self, capability: str):
        self.capability = capability
        super().__init__(f"Permission denied: {capability}")


class InvalidRoleNameError(DispatchDeskError):
    """Raised when a role name does not match the naming rules."""

    code = "invalid_role_name"

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(
            f"Invalid role name '{role_name}': only letters, digits, "
            "underscores and hyphens are allowed"
        )


class InvalidCapabilityError(DispatchDeskError):
    """Raised when a permission patch holds unknown keys or non-boolean values."""

    code = "invalid_capability"

    def __init__(self, keys: list[str]):
        self.keys = keys
        super().__init__(f"Invalid capabilities: {', '.join(sorted(keys))}")


class DuplicateRoleError(DispatchDeskError):
    """Raised when a role name is already taken."""

    code = "duplicate_role"
    status_code = 409

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Role '{role_name}' already exists")


class SameNameError(DispatchDeskError):
    """Raised when a rename would not change the role name."""

    code = "same_name"

    def __init__(self, role_name: str):
        super().__init__(f"Role is already named '{role_name}'")


class RoleInUseError(DispatchDeskError):
    """Raised when deleting a role that users still hold."""

    code = "role_in_use"
    status_code = 409

    def __init__(self, role_name: str, user_count: int):
        self.role_name = role_name
        self.user_count = user_count
        super().__init__(
            f"Role '{role_name}' is assigned to {user_count} user(s); "
            "reassign them before deleting"
        )


class ConcurrentModificationError(DispatchDeskError):
    """Raised when a concurrent writer changed a role first."""

    code = "concurrent_modification"
    status_code = 409

    def __init__(self, role_name: str):
        super().__init__(f"Role '{role_name}' was modified concurrently, please retry")


class AccountNotApprovedError(DispatchDeskError):
    """Raised when an account pending approval tries to log in."""

    code = "account_not_approved"
    status_code = 403

    def __init__(self, username: str):
        self.username = username
        super().__init__("Account pending approval from an administrator")
