"""Pydantic schemas for roles, resources and catalog entries."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gatekeeper.core.constants import DEFAULT_PUBLIC_PERMISSIONS
from gatekeeper.core.utils.text import format_label


# ============================================================
# Roles
# ============================================================


class Role(BaseModel):
    """A named bundle of permission grants.

    Instances are copies handed over by the persistence layer; nothing
    in this package stores them.
    """

    id: str | int | None = None
    name: str = Field(..., min_length=1, description="Unique role identifier")
    label: str = Field(..., description="Display name")
    permissions: list[str] = Field(default_factory=list)
    active: bool = True
    protected: bool = Field(False, description="Set by the system at creation only")
    description: str | None = None
    visible_for: list[str] | None = Field(
        None, description="Auth collections whose users may be assigned this role"
    )


class RoleRef(BaseModel):
    """Reference to a role, optionally carrying the resolved document."""

    id: str | int | None = None
    resolved: Role | None = None

    @classmethod
    def from_value(cls, value: "RoleRef | Role | Mapping[str, Any] | str | int") -> "RoleRef":
        """Normalize the shapes a host may use for a role reference.

        Accepts a bare id, a mapping with just an ``id``, a full role
        mapping, a ``Role`` or an existing ``RoleRef``.
        """
        if isinstance(value, RoleRef):
            return value
        if isinstance(value, Role):
            return cls(id=value.id, resolved=value)
        if isinstance(value, Mapping):
            if "name" in value:
                role = Role.model_validate(value)
                return cls(id=role.id, resolved=role)
            if "resolved" in value:
                return cls.model_validate(value)
            return cls(id=value.get("id"))
        return cls(id=value)


class Actor(BaseModel):
    """An already-authenticated requester."""

    id: str | int | None = None
    role: RoleRef | None = None

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value: Any) -> RoleRef | None:
        if value is None:
            return None
        return RoleRef.from_value(value)

    @property
    def resolved_role(self) -> Role | None:
        return self.role.resolved if self.role else None


# ============================================================
# Catalog
# ============================================================


class ResourceDescriptor(BaseModel):
    """A manageable resource (collection) that permissions are generated for."""

    slug: str = Field(..., min_length=1, description="Resource identifier (e.g., 'media')")
    versions: bool = Field(False, description="Whether the resource has a publish workflow")
    label: str | None = Field(None, description="Display name; derived from slug if omitted")
    auth: bool = Field(False, description="Whether the resource holds authenticating users")

    @property
    def display_label(self) -> str:
        return self.label or format_label(self.slug)


class CustomPermission(BaseModel):
    """A permission declared by the host in addition to the generated ones."""

    label: str
    value: str
    description: str | None = None


class PermissionCatalogEntry(BaseModel):
    """A single selectable permission with its presentation metadata."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    category: str | None = None
    description: str | None = None


# ============================================================
# Project configuration
# ============================================================


class GatekeeperConfig(BaseModel):
    """Configuration for a project (gatekeeper.yaml)."""

    resources: list[ResourceDescriptor] = Field(
        default_factory=list,
        description="Resources to generate permissions for",
    )
    custom_permissions: list[CustomPermission] = Field(
        default_factory=list,
        description="Extra permissions appended to the catalog",
    )
    roles_slug: str | None = Field(
        None, description="Overrides the roles resource name from settings"
    )
    public_permissions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PUBLIC_PERMISSIONS),
        description="Permissions of the public role for anonymous actors",
    )
