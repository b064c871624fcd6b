"""Application-wide constants.

This module defines the permission vocabulary and role names used
throughout the package to avoid magic strings and ensure consistency.
"""

# Locales
BASELINE_LOCALE = "en"

# Permission literals
PERMISSION_SEPARATOR = "."
WILDCARD = "*"

PERMISSIONS = {
    "ALL": "*",
    "ALL_READ": "*.read",
    "ALL_CREATE": "*.create",
    "ALL_UPDATE": "*.update",
    "ALL_DELETE": "*.delete",
}

# Operations
CRUD_OPERATIONS = ("create", "read", "update", "delete")
MANAGE_OPERATION = "manage"
PUBLISH_OPERATION = "publish"

# Catalog
SPECIAL_CATEGORY = "Special"

# Roles
DEFAULT_ROLES_SLUG = "roles"
SUPER_ADMIN_ROLE_NAME = "super_admin"
PUBLIC_ROLE_NAME = "public"
DEFAULT_PUBLIC_PERMISSIONS = ("*.read",)

# Fields a non-super-admin may change on a protected role
PROTECTED_ROLE_EDITABLE_FIELDS = frozenset({"description", "permissions"})

# Fields the host may send along with every write; never treated as user edits
ROLE_SYSTEM_FIELDS = frozenset(
    {
        "id",
        "created_at",
        "updated_at",
        "_status",
        "config_hash",
        "config_version",
        "active",
        "name",
    }
)

# Project configuration
DEFAULT_CONFIG_FILE = "gatekeeper.yaml"
