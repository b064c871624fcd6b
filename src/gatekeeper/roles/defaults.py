"""Built-in system roles and example role configurations.

Labels and descriptions are translated when the role is built, so
call these functions rather than caching their results across locale
changes.
"""

from collections.abc import Sequence

from gatekeeper.core.constants import (
    DEFAULT_PUBLIC_PERMISSIONS,
    PUBLIC_ROLE_NAME,
    SUPER_ADMIN_ROLE_NAME,
    WILDCARD,
)
from gatekeeper.i18n import translate
from gatekeeper.schemas import Role


def get_super_admin_role(locale: str | None = None) -> Role:
    """Get the super admin role, the only role required for the system to work."""
    return Role(
        name=SUPER_ADMIN_ROLE_NAME,
        label=translate("defaultRoles.superAdmin.label", locale=locale),
        permissions=[WILDCARD],
        protected=True,
        active=True,
        description=translate("defaultRoles.superAdmin.description", locale=locale),
    )


def get_public_role(
    permissions: Sequence[str] | None = None, locale: str | None = None
) -> Role:
    """Get the role applied to anonymous actors.

    The role is not visible for assignment to any user collection.
    """
    return Role(
        name=PUBLIC_ROLE_NAME,
        label=translate("defaultRoles.public.label", locale=locale),
        permissions=list(DEFAULT_PUBLIC_PERMISSIONS if permissions is None else permissions),
        protected=True,
        active=True,
        description=translate("defaultRoles.public.description", locale=locale),
        visible_for=[],
    )


def get_system_roles(
    public_permissions: Sequence[str] | None = None, locale: str | None = None
) -> list[Role]:
    """Get every role the system creates on its own."""
    return [
        get_super_admin_role(locale),
        get_public_role(public_permissions, locale),
    ]


def get_example_roles(locale: str | None = None) -> dict[str, Role]:
    """Get example roles that can be used in a project configuration.

    These are not created automatically.
    """
    return {
        "admin": Role(
            name="admin",
            label=translate("defaultRoles.admin.label", locale=locale),
            permissions=[
                # Backend users management (no role management)
                "backend-users.read",
                "backend-users.create",
                "backend-users.update",
                "backend-users.delete",
                "users.read",
                "users.create",
                "users.update",
                "users.delete",
                "media.read",
                "media.create",
                "media.update",
                "media.delete",
            ],
            description=translate("defaultRoles.admin.description", locale=locale),
        ),
        "editor": Role(
            name="editor",
            label=translate("defaultRoles.editor.label", locale=locale),
            permissions=[
                "backend-users.read",
                "users.read",
                "media.read",
                "media.create",
                "media.update",
                "media.delete",
            ],
            description=translate("defaultRoles.editor.description", locale=locale),
        ),
        "user": Role(
            name="user",
            label=translate("defaultRoles.user.label", locale=locale),
            permissions=[
                # Own profile only; row-level filtering is up to the host
                "users.read",
                "users.update",
                "media.create",
                "media.read",
            ],
            description=translate("defaultRoles.user.description", locale=locale),
        ),
    }
