"""Permission catalog generation.

The catalog enumerates every permission a role can be granted for a
given resource configuration. It is recomputed from its inputs and
never stored. Emission order is part of the contract:

1. The five global wildcards (``*``, ``*.read``, ``*.create``,
   ``*.update``, ``*.delete``)
2. Per resource, in input order: ``<r>.*``, ``<r>.create``,
   ``<r>.read``, ``<r>.update``, ``<r>.delete``, ``<r>.manage`` and,
   for versioned resources, ``<r>.publish``
3. Custom permissions, in input order
"""

from collections.abc import Iterable, Sequence

from gatekeeper.core.constants import (
    CRUD_OPERATIONS,
    DEFAULT_ROLES_SLUG,
    MANAGE_OPERATION,
    PERMISSION_SEPARATOR,
    PERMISSIONS,
    PUBLISH_OPERATION,
    SPECIAL_CATEGORY,
    WILDCARD,
)
from gatekeeper.core.utils.text import format_label
from gatekeeper.i18n import translate
from gatekeeper.schemas import CustomPermission, PermissionCatalogEntry, ResourceDescriptor


# (value, translation key of the label; the description key adds "Description")
SPECIAL_PERMISSIONS: list[tuple[str, str]] = [
    (PERMISSIONS["ALL"], "permissions.special.fullAccess"),
    (PERMISSIONS["ALL_READ"], "permissions.special.allRead"),
    (PERMISSIONS["ALL_CREATE"], "permissions.special.allCreate"),
    (PERMISSIONS["ALL_UPDATE"], "permissions.special.allUpdate"),
    (PERMISSIONS["ALL_DELETE"], "permissions.special.allDelete"),
]


def get_operation_label(operation: str, locale: str | None = None) -> str:
    """Get the translated label of an operation, or the operation itself."""
    key = f"permissions.operations.{operation}"
    translated = translate(key, locale=locale)
    return translated if translated != key else operation


def _special_entries(locale: str | None) -> list[PermissionCatalogEntry]:
    return [
        PermissionCatalogEntry(
            label=translate(key, locale=locale),
            value=value,
            category=SPECIAL_CATEGORY,
            description=translate(f"{key}Description", locale=locale),
        )
        for value, key in SPECIAL_PERMISSIONS
    ]


def _resource_entries(
    resource: ResourceDescriptor, locale: str | None
) -> list[PermissionCatalogEntry]:
    label = resource.display_label
    slug = resource.slug

    def entry(
        operation: str,
        key: str,
        label_values: dict[str, str] | None = None,
        description_values: dict[str, str] | None = None,
    ) -> PermissionCatalogEntry:
        return PermissionCatalogEntry(
            label=translate(
                f"permissions.collection.{key}",
                {"collection": label, **(label_values or {})},
                locale,
            ),
            value=f"{slug}{PERMISSION_SEPARATOR}{operation}",
            category=label,
            description=translate(
                f"permissions.collection.{key}Description",
                {"collection": label, **(description_values or {})},
                locale,
            ),
        )

    entries = [entry(WILDCARD, "allOperations")]
    entries.extend(
        entry(
            operation,
            "operation",
            label_values={"operation": get_operation_label(operation, locale)},
            description_values={"operation": operation},
        )
        for operation in CRUD_OPERATIONS
    )
    entries.append(entry(MANAGE_OPERATION, "manage"))

    if resource.versions:
        entries.append(entry(PUBLISH_OPERATION, "publish"))

    return entries


def _custom_entry(permission: CustomPermission) -> PermissionCatalogEntry:
    namespace, separator, _ = permission.value.partition(PERMISSION_SEPARATOR)
    category = format_label(namespace) if separator and namespace else None
    return PermissionCatalogEntry(
        label=permission.label,
        value=permission.value,
        category=category,
        description=permission.description,
    )


def build_catalog(
    resources: Sequence[ResourceDescriptor],
    custom_permissions: Sequence[CustomPermission] | None = None,
    locale: str | None = None,
) -> list[PermissionCatalogEntry]:
    """Generate the permission catalog for a set of resources.

    Args:
        resources: Resources in the order their entries should appear
        custom_permissions: Extra permissions appended after generated ones
        locale: Locale for labels and descriptions (active locale if omitted)

    Returns:
        Ordered list of catalog entries
    """
    catalog = _special_entries(locale)
    for resource in resources:
        catalog.extend(_resource_entries(resource, locale))
    catalog.extend(_custom_entry(permission) for permission in custom_permissions or ())
    return catalog


def build_role_catalog(
    resources: Sequence[ResourceDescriptor],
    custom_permissions: Sequence[CustomPermission] | None = None,
    roles_slug: str = DEFAULT_ROLES_SLUG,
    locale: str | None = None,
) -> list[PermissionCatalogEntry]:
    """Generate the catalog including the roles resource itself.

    The roles resource is appended after the configured resources
    unless it is already part of them.
    """
    if not any(resource.slug == roles_slug for resource in resources):
        resources = [*resources, ResourceDescriptor(slug=roles_slug)]
    return build_catalog(resources, custom_permissions, locale)


def catalog_values(catalog: Iterable[PermissionCatalogEntry]) -> list[str]:
    """Get the permission values of a catalog, in catalog order."""
    return [entry.value for entry in catalog]


def unknown_permissions(
    permissions: Iterable[str], catalog: Iterable[PermissionCatalogEntry]
) -> list[str]:
    """Find permissions that the catalog does not offer.

    Returns:
        Unknown values in input order, without duplicates
    """
    known = set(catalog_values(catalog))
    unknown: list[str] = []
    for permission in permissions:
        if permission not in known and permission not in unknown:
            unknown.append(permission)
    return unknown
