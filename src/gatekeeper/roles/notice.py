"""Notice shown when editing a protected role."""

from pydantic import BaseModel

from gatekeeper.i18n import translate
from gatekeeper.schemas import Role


class ProtectedRoleNotice(BaseModel):
    title: str
    description: str


def protected_role_notice(role: Role, locale: str | None = None) -> ProtectedRoleNotice | None:
    """Get the notice for a protected role, or None for regular roles."""
    if not role.protected:
        return None
    return ProtectedRoleNotice(
        title=translate("components.protectedRoleNotice.title", locale=locale),
        description=translate("components.protectedRoleNotice.description", locale=locale),
    )
