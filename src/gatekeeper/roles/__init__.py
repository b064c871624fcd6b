"""Role protection, access rules and built-in roles."""

from gatekeeper.roles.access import RoleAccessPolicy
from gatekeeper.roles.defaults import (
    get_example_roles,
    get_public_role,
    get_super_admin_role,
    get_system_roles,
)
from gatekeeper.roles.guard import RoleProtectionGuard
from gatekeeper.roles.notice import ProtectedRoleNotice, protected_role_notice


__all__ = [
    "ProtectedRoleNotice",
    "RoleAccessPolicy",
    "RoleProtectionGuard",
    "get_example_roles",
    "get_public_role",
    "get_super_admin_role",
    "get_system_roles",
    "protected_role_notice",
]
