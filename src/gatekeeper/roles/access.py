"""Access rules for the roles resource itself."""

import structlog

from gatekeeper.config import Settings, get_settings
from gatekeeper.core.constants import DEFAULT_ROLES_SLUG, PERMISSION_SEPARATOR
from gatekeeper.permissions.checker import check_permission
from gatekeeper.schemas import Actor, Role


logger = structlog.get_logger()


class RoleAccessPolicy:
    """Decides which actors may read, create, update and delete roles."""

    def __init__(self, roles_slug: str = DEFAULT_ROLES_SLUG) -> None:
        self.roles_slug = roles_slug

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "RoleAccessPolicy":
        settings = settings or get_settings()
        return cls(roles_slug=settings.roles_slug)

    def _permission(self, operation: str) -> str:
        return f"{self.roles_slug}{PERMISSION_SEPARATOR}{operation}"

    def _check(self, actor: Actor | None, operation: str) -> bool:
        if actor is None or actor.role is None:
            return False
        return check_permission(actor.role, self._permission(operation))

    def can_read(self, actor: Actor | None, admin_user_count: int | None = None) -> bool:
        """Check read access.

        Every authenticated actor may read roles (needed to display
        role relationships). Anonymous actors may only read them during
        first-user setup, when no admin user exists yet.

        Args:
            actor: The requester, or None when anonymous
            admin_user_count: Number of users in the admin collection,
                None if it could not be determined

        Returns:
            True if roles may be read
        """
        if actor is not None:
            return True

        if admin_user_count is None:
            logger.warning("admin_user_count_unavailable", resource=self.roles_slug)
            return False

        return admin_user_count == 0

    def can_create(self, actor: Actor | None) -> bool:
        return self._check(actor, "create")

    def can_update(self, actor: Actor | None) -> bool:
        return self._check(actor, "update")

    def can_delete(self, actor: Actor | None, target: Role | None = None) -> bool:
        """Check delete access.

        Protected roles cannot be deleted by anyone, including super
        admins. An unknown target is left to ``before_delete``.
        """
        if not self._check(actor, "delete"):
            return False
        return not (target is not None and target.protected)
