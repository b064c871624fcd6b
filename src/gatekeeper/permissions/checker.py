"""Permission checking logic.

This module decides whether a set of granted permissions allows an
operation on a resource. Grants are evaluated in a fixed order:

1. ``*`` allows everything
2. ``*.<operation>`` allows that operation on every resource
3. ``<resource>.*`` allows every operation on that resource
4. ``<resource>.<operation>`` allows exactly that pair
5. ``<resource>.manage`` allows every operation on that resource

Role activation is not a concern of ``is_allowed``; callers holding a
role use ``check_permission`` or ``PermissionChecker``, which deny
inactive roles before any grant is consulted.
"""

from collections.abc import Iterable

import structlog

from gatekeeper.core.constants import MANAGE_OPERATION, WILDCARD
from gatekeeper.permissions.grammar import (
    GlobalWildcard,
    OperationWildcard,
    PermissionSet,
    ResourceManage,
    ResourceOperation,
    ResourceWildcard,
    parse_permission,
)
from gatekeeper.schemas import Role, RoleRef


logger = structlog.get_logger()


def _as_permission_set(granted: PermissionSet | Iterable[str]) -> PermissionSet:
    if isinstance(granted, PermissionSet):
        return granted
    return PermissionSet.from_strings(granted)


def is_allowed(
    granted: PermissionSet | Iterable[str],
    resource: str,
    operation: str,
    is_manage_check: bool = False,
) -> bool:
    """Check if granted permissions allow an operation on a resource.

    Args:
        granted: Parsed permission set or raw permission strings
        resource: The resource to check (e.g., "media")
        operation: The operation to check (e.g., "read"); ``*`` asks
            whether the grants amount to full access
        is_manage_check: Check the synthetic ``manage`` operation instead

    Returns:
        True if the operation is allowed, False otherwise
    """
    permissions = _as_permission_set(granted)

    if permissions.has_global:
        return True

    # Full-access sentinel is only satisfied by "*"
    if operation == WILDCARD and not is_manage_check:
        return False

    if is_manage_check:
        operation = MANAGE_OPERATION

    return (
        operation in permissions.operation_wildcards
        or resource in permissions.resource_wildcards
        or (resource, operation) in permissions.resource_operations
        or resource in permissions.managed_resources
    )


def has_permission(granted: PermissionSet | Iterable[str], permission: str) -> bool:
    """Check a full permission string against granted permissions.

    Args:
        granted: Parsed permission set or raw permission strings
        permission: Required permission (e.g., "roles.update", "*")

    Returns:
        True if the requirement is satisfied
    """
    permissions = _as_permission_set(granted)
    required = parse_permission(permission)

    if permissions.has_global:
        return True

    if isinstance(required, GlobalWildcard):
        return False
    if isinstance(required, ResourceOperation):
        return is_allowed(permissions, required.resource, required.operation)
    if isinstance(required, ResourceManage):
        return is_allowed(permissions, required.resource, MANAGE_OPERATION, is_manage_check=True)
    if isinstance(required, ResourceWildcard):
        return (
            required.resource in permissions.resource_wildcards
            or required.resource in permissions.managed_resources
        )
    if isinstance(required, OperationWildcard):
        return required.operation in permissions.operation_wildcards

    # Custom permission outside the resource/operation shape
    return permission in permissions


def _resolve_role(role: Role | RoleRef | None) -> Role | None:
    if isinstance(role, RoleRef):
        return role.resolved
    return role


def check_permission(role: Role | RoleRef | None, permission: str) -> bool:
    """Convenience function to check a role's permission.

    Note:
        A missing, unresolved or inactive role is always denied.
    """
    resolved = _resolve_role(role)
    if resolved is None:
        return False

    if not resolved.active:
        logger.debug("inactive_role_denied", role=resolved.name, permission=permission)
        return False

    return has_permission(resolved.permissions, permission)


def is_super_admin(role: Role | RoleRef | None) -> bool:
    """Check if a role holds the all-access wildcard and is active."""
    return check_permission(role, WILDCARD)


class PermissionChecker:
    """Evaluates permissions for a single role.

    The role's grants are parsed once at construction. Inactive or
    missing roles produce an empty permission set.
    """

    def __init__(self, role: Role | RoleRef | None) -> None:
        self.role = _resolve_role(role)
        grants = self.role.permissions if self.role and self.role.active else ()
        self.permissions = PermissionSet.from_strings(grants)

    def has_permission(self, resource: str, operation: str) -> bool:
        """Check if the role allows an operation on a resource."""
        return is_allowed(self.permissions, resource, operation)

    def can_manage(self, resource: str) -> bool:
        """Check if the role has full control over a resource."""
        return is_allowed(self.permissions, resource, MANAGE_OPERATION, is_manage_check=True)

    def has_any_permission(self, permissions: list[tuple[str, str]]) -> bool:
        """Check if the role has any of the specified permissions.

        Args:
            permissions: List of (resource, operation) tuples to check

        Returns:
            True if the role has at least one permission
        """
        return any(self.has_permission(resource, op) for resource, op in permissions)

    def has_all_permissions(self, permissions: list[tuple[str, str]]) -> bool:
        """Check if the role has all of the specified permissions.

        Args:
            permissions: List of (resource, operation) tuples to check

        Returns:
            True if the role has all permissions
        """
        return all(self.has_permission(resource, op) for resource, op in permissions)

    def get_permissions(self) -> set[str]:
        """Get the raw permission strings in effect for the role."""
        return set(self.permissions.raw)
