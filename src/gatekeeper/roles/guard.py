"""Protection rules for role writes.

Every role write passes through ``RoleProtectionGuard`` before it is
committed by the persistence layer. The guard enforces the invariants
of protected roles:

- the name of a protected role never changes
- an actor cannot remove ``*`` from its own role
- only super admins may touch fields other than ``description`` and
  ``permissions`` of a protected role
- protected roles are always active
- protected roles are never deleted

The first violated rule raises; nothing is written in that case.
"""

from collections.abc import Mapping
from typing import Any, Literal

import structlog

from gatekeeper.config import Settings, get_settings
from gatekeeper.core.constants import (
    DEFAULT_ROLES_SLUG,
    PROTECTED_ROLE_EDITABLE_FIELDS,
    ROLE_SYSTEM_FIELDS,
    SUPER_ADMIN_ROLE_NAME,
    WILDCARD,
)
from gatekeeper.core.errors import ForbiddenError, ValidationError
from gatekeeper.i18n import translate
from gatekeeper.permissions.checker import is_super_admin
from gatekeeper.schemas import Actor, Role


logger = structlog.get_logger()

WriteOperation = Literal["create", "update"]


class RoleProtectionGuard:
    """Validates role writes and deletes against protection rules.

    The guard keeps no state between calls and can be shared by
    concurrent requests.
    """

    def __init__(
        self,
        roles_slug: str = DEFAULT_ROLES_SLUG,
        skip_permission_checks: bool = False,
    ) -> None:
        """Initialize the guard.

        Args:
            roles_slug: Name of the roles resource, reported in errors
            skip_permission_checks: Accept every write unchanged (seeding)
        """
        self.roles_slug = roles_slug
        self.skip_permission_checks = skip_permission_checks

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RoleProtectionGuard":
        settings = settings or get_settings()
        return cls(
            roles_slug=settings.roles_slug,
            skip_permission_checks=settings.skip_permission_checks,
        )

    # ------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------

    def before_change(
        self,
        operation: WriteOperation,
        data: Mapping[str, Any],
        original: Role | None = None,
        actor: Actor | None = None,
        locale: str | None = None,
    ) -> dict[str, Any]:
        """Validate a role write and return the data to commit.

        Args:
            operation: "create" or "update"
            data: Submitted fields (partial on update)
            original: Stored role document for updates
            actor: Requester; None for writes made by the system itself
            locale: Locale for error messages (active locale if omitted)

        Returns:
            A new dict with the data to write

        Raises:
            ValidationError: If a protection rule is violated
        """
        result = dict(data)

        if self.skip_permission_checks:
            return result

        if "protected" in result:
            # Protection is granted by the system at creation only
            if operation == "update" and original is not None:
                if not original.protected:
                    result.pop("protected")
            elif actor is not None:
                result.pop("protected")

        if operation != "update" or original is None:
            return result

        if original.protected:
            self._check_name_unchanged(result, original, actor, locale)

        actor_role = self._resolve_actor_role(actor, original)
        super_admin = is_super_admin(actor_role)

        if super_admin and self._is_own_role(actor, original):
            self._check_keeps_super_admin(result, original, actor, locale)

        if original.protected:
            if not super_admin:
                self._check_editable_fields(result, original, actor, locale)
            result.pop("protected", None)
            result["active"] = True

        return result

    def before_delete(self, target: Role | None, locale: str | None = None) -> None:
        """Reject the deletion of a protected role.

        Raises:
            ForbiddenError: If the role is protected
        """
        if target is None or not target.protected:
            return

        logger.warning("protected_role_delete_rejected", role=target.name)
        raise ForbiddenError(
            translate(
                "collections.roles.errors.protectedCannotDelete",
                {"label": target.label or target.name},
                locale,
            ),
            error_code="protected_role",
            details={"collection": self.roles_slug, "role": target.name},
        )

    def after_change(self, operation: WriteOperation, doc: Role) -> Role:
        """Announce the creation of the super admin role."""
        if operation == "create" and doc.name == SUPER_ADMIN_ROLE_NAME:
            logger.info(
                "super_admin_role_created",
                message=translate("messages.superAdminRoleCreated"),
            )
        return doc

    # ------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------

    def _check_name_unchanged(
        self,
        data: Mapping[str, Any],
        original: Role,
        actor: Actor | None,
        locale: str | None,
    ) -> None:
        if "name" in data and data["name"] != original.name:
            self._reject(
                original,
                actor,
                [("name", translate("collections.roles.errors.nameCannotChange", locale=locale))],
            )

    def _check_keeps_super_admin(
        self,
        data: Mapping[str, Any],
        original: Role,
        actor: Actor | None,
        locale: str | None,
    ) -> None:
        permissions = data.get("permissions")
        if permissions is None or WILDCARD in permissions:
            return
        self._reject(
            original,
            actor,
            [
                (
                    "permissions",
                    translate("collections.roles.errors.cannotRemoveSuperAdmin", locale=locale),
                )
            ],
        )

    def _check_editable_fields(
        self,
        data: Mapping[str, Any],
        original: Role,
        actor: Actor | None,
        locale: str | None,
    ) -> None:
        disallowed = [
            field
            for field in data
            if field not in ROLE_SYSTEM_FIELDS and field not in PROTECTED_ROLE_EDITABLE_FIELDS
        ]
        if disallowed:
            self._reject(
                original,
                actor,
                [
                    (
                        field,
                        translate(
                            "collections.roles.errors.protectedFieldCannotModify",
                            {"field": field},
                            locale,
                        ),
                    )
                    for field in disallowed
                ],
            )

    def _reject(
        self,
        original: Role,
        actor: Actor | None,
        errors: list[tuple[str, str]],
    ) -> None:
        fields = [field for field, _ in errors]
        logger.warning(
            "protected_role_update_rejected",
            role=original.name,
            actor_id=str(actor.id) if actor and actor.id is not None else None,
            fields=fields,
        )
        raise ValidationError(
            errors[0][1],
            errors=[{"field": field, "message": message} for field, message in errors],
            collection=self.roles_slug,
        )

    # ------------------------------------------------------------
    # Actor helpers
    # ------------------------------------------------------------

    @staticmethod
    def _is_own_role(actor: Actor | None, original: Role) -> bool:
        if actor is None or actor.role is None:
            return False
        role_id = actor.role.id
        return role_id is not None and original.id is not None and str(role_id) == str(original.id)

    def _resolve_actor_role(self, actor: Actor | None, original: Role) -> Role | None:
        """Get the actor's role document.

        An unresolved reference to the role being updated resolves to
        the stored document itself.
        """
        if actor is None:
            return None
        if actor.resolved_role is not None:
            return actor.resolved_role
        if self._is_own_role(actor, original):
            return original
        return None
