"""Unit tests for the permission matcher.

These tests verify the wildcard precedence rules:
- Global wildcard
- Operation wildcards
- Resource wildcards and manage grants
- The full-access sentinel
"""

import pytest

from gatekeeper.permissions.checker import (
    PermissionChecker,
    check_permission,
    has_permission,
    is_allowed,
    is_super_admin,
)
from gatekeeper.permissions.grammar import PermissionSet
from gatekeeper.schemas import Role, RoleRef


pytestmark = pytest.mark.unit

OPERATIONS = ["create", "read", "update", "delete", "publish"]


class TestIsAllowed:
    """Tests for is_allowed."""

    @pytest.mark.parametrize("resource", ["media", "posts", "not-in-any-catalog"])
    @pytest.mark.parametrize("operation", [*OPERATIONS, "manage", "export", "*"])
    def test_global_wildcard_allows_everything(self, resource: str, operation: str) -> None:
        """'*' allows every pair, including unknown resources."""
        assert is_allowed({"*"}, resource, operation) is True

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_resource_wildcard_is_scoped_to_resource(self, operation: str) -> None:
        """'r.*' allows every operation on r and nothing on r2."""
        assert is_allowed({"media.*"}, "media", operation) is True
        assert is_allowed({"media.*"}, "posts", operation) is False

    @pytest.mark.parametrize("operation", OPERATIONS)
    def test_manage_equals_resource_wildcard(self, operation: str) -> None:
        """'r.manage' behaves like 'r.*' for r."""
        assert is_allowed({"media.manage"}, "media", operation) is is_allowed(
            {"media.*"}, "media", operation
        )
        assert is_allowed({"media.manage"}, "posts", operation) is False

    def test_operation_wildcard_allows_operation_everywhere(self) -> None:
        """'*.read' allows read on any resource but nothing else."""
        assert is_allowed({"*.read"}, "media", "read") is True
        assert is_allowed({"*.read"}, "anything", "read") is True
        assert is_allowed({"*.read"}, "media", "update") is False

    def test_exact_grant(self) -> None:
        """'r.op' allows exactly that pair."""
        granted = {"media.read"}
        assert is_allowed(granted, "media", "read") is True
        assert is_allowed(granted, "media", "delete") is False
        assert is_allowed(granted, "posts", "read") is False

    def test_publish_requires_grant(self) -> None:
        """publish is an operation like any other."""
        assert is_allowed({"posts.publish"}, "posts", "publish") is True
        assert is_allowed({"posts.update"}, "posts", "publish") is False

    def test_empty_grants_deny(self) -> None:
        assert is_allowed(set(), "media", "read") is False

    def test_sentinel_only_satisfied_by_global(self) -> None:
        """Operation '*' asks for full access."""
        assert is_allowed({"media.*"}, "media", "*") is False
        assert is_allowed({"media.manage", "*.read"}, "media", "*") is False
        assert is_allowed({"*"}, "media", "*") is True

    def test_star_dot_star_is_not_full_access(self) -> None:
        """'*.*' is not an alias of '*'."""
        assert is_allowed({"*.*"}, "media", "*") is False
        assert is_allowed({"*.*"}, "media", "read") is False
        assert is_super_admin(Role(name="root", label="Root", permissions=["*.*"])) is False

    def test_manage_check(self) -> None:
        """is_manage_check requires full control of the resource."""
        assert is_allowed({"media.manage"}, "media", "read", is_manage_check=True) is True
        assert is_allowed({"media.*"}, "media", "read", is_manage_check=True) is True
        assert is_allowed({"media.read"}, "media", "read", is_manage_check=True) is False
        assert is_allowed({"*"}, "media", "read", is_manage_check=True) is True

    def test_accepts_permission_set(self) -> None:
        """A pre-parsed set gives the same answers as raw strings."""
        permissions = PermissionSet.from_strings(["media.manage"])
        assert is_allowed(permissions, "media", "delete") is True
        assert is_allowed(permissions, "posts", "delete") is False

    def test_accepts_list_of_strings(self) -> None:
        assert is_allowed(["posts.read"], "posts", "read") is True


class TestHasPermission:
    """Tests for has_permission with full permission strings."""

    def test_super_admin_sentinel(self) -> None:
        assert has_permission(["*"], "*") is True
        assert has_permission(["media.*"], "*") is False

    def test_resource_operation(self) -> None:
        assert has_permission(["roles.manage"], "roles.update") is True
        assert has_permission(["roles.read"], "roles.update") is False

    def test_resource_wildcard_requirement(self) -> None:
        """'r.*' requires full control of r."""
        assert has_permission(["media.manage"], "media.*") is True
        assert has_permission(["media.read"], "media.*") is False

    def test_manage_requirement(self) -> None:
        assert has_permission(["media.*"], "media.manage") is True
        assert has_permission(["media.update"], "media.manage") is False

    def test_operation_wildcard_requirement(self) -> None:
        assert has_permission(["*.read"], "*.read") is True
        assert has_permission(["media.read"], "*.read") is False

    def test_custom_permission_without_separator(self) -> None:
        """Opaque permissions match exactly or through '*'."""
        assert has_permission(["dashboard"], "dashboard") is True
        assert has_permission(["*"], "dashboard") is True
        assert has_permission(["media.*"], "dashboard") is False


class TestCheckPermission:
    """Tests for role-level checks."""

    def test_active_role_is_checked(self, editor_role: Role) -> None:
        assert check_permission(editor_role, "media.delete") is True
        assert check_permission(editor_role, "roles.delete") is False

    def test_inactive_role_is_denied(self) -> None:
        """Inactive roles grant nothing, not even '*'."""
        role = Role(name="root", label="Root", permissions=["*"], active=False)
        assert check_permission(role, "media.read") is False
        assert is_super_admin(role) is False

    def test_missing_role_is_denied(self) -> None:
        assert check_permission(None, "media.read") is False

    def test_unresolved_reference_is_denied(self) -> None:
        assert check_permission(RoleRef(id="role-1"), "media.read") is False

    def test_resolved_reference_is_checked(self, super_admin_role: Role) -> None:
        assert is_super_admin(RoleRef.from_value(super_admin_role)) is True


class TestPermissionChecker:
    """Tests for PermissionChecker."""

    def test_has_permission(self, editor_role: Role) -> None:
        checker = PermissionChecker(editor_role)
        assert checker.has_permission("media", "delete") is True
        assert checker.has_permission("roles", "delete") is False

    def test_can_manage(self, editor_role: Role) -> None:
        checker = PermissionChecker(editor_role)
        assert checker.can_manage("media") is True
        assert checker.can_manage("roles") is False

    def test_has_any_permission(self, editor_role: Role) -> None:
        checker = PermissionChecker(editor_role)
        assert checker.has_any_permission([("roles", "delete"), ("roles", "read")]) is True
        assert checker.has_any_permission([("roles", "delete"), ("posts", "read")]) is False

    def test_has_all_permissions(self, editor_role: Role) -> None:
        checker = PermissionChecker(editor_role)
        assert checker.has_all_permissions([("media", "read"), ("roles", "update")]) is True
        assert checker.has_all_permissions([("media", "read"), ("roles", "create")]) is False

    def test_get_permissions(self, editor_role: Role) -> None:
        checker = PermissionChecker(editor_role)
        assert checker.get_permissions() == {"media.*", "roles.read", "roles.update"}

    def test_inactive_role_has_no_permissions(self, editor_role: Role) -> None:
        inactive = editor_role.model_copy(update={"active": False})
        checker = PermissionChecker(inactive)
        assert checker.get_permissions() == set()
        assert checker.has_permission("media", "read") is False
