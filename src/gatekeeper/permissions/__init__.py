"""Permission grammar, matching and catalog generation."""

from gatekeeper.permissions.catalog import (
    build_catalog,
    build_role_catalog,
    catalog_values,
    unknown_permissions,
)
from gatekeeper.permissions.checker import (
    PermissionChecker,
    check_permission,
    has_permission,
    is_allowed,
    is_super_admin,
)
from gatekeeper.permissions.grammar import PermissionSet, parse_permission


__all__ = [
    "PermissionChecker",
    "PermissionSet",
    "build_catalog",
    "build_role_catalog",
    "catalog_values",
    "check_permission",
    "has_permission",
    "is_allowed",
    "is_super_admin",
    "parse_permission",
    "unknown_permissions",
]
