"""Permission string grammar.

Permission strings are parsed once into tagged variants so matching
works on structured data:

    *                 GlobalWildcard
    *.<operation>     OperationWildcard
    <resource>.*      ResourceWildcard
    <resource>.manage ResourceManage
    <resource>.<op>   ResourceOperation
    anything else     OpaqueGrant (including "*.*")
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from gatekeeper.core.constants import MANAGE_OPERATION, PERMISSION_SEPARATOR, WILDCARD


@dataclass(frozen=True)
class GlobalWildcard:
    def __str__(self) -> str:
        return WILDCARD


@dataclass(frozen=True)
class OperationWildcard:
    operation: str

    def __str__(self) -> str:
        return f"{WILDCARD}{PERMISSION_SEPARATOR}{self.operation}"


@dataclass(frozen=True)
class ResourceWildcard:
    resource: str

    def __str__(self) -> str:
        return f"{self.resource}{PERMISSION_SEPARATOR}{WILDCARD}"


@dataclass(frozen=True)
class ResourceManage:
    resource: str

    def __str__(self) -> str:
        return f"{self.resource}{PERMISSION_SEPARATOR}{MANAGE_OPERATION}"


@dataclass(frozen=True)
class ResourceOperation:
    resource: str
    operation: str

    def __str__(self) -> str:
        return f"{self.resource}{PERMISSION_SEPARATOR}{self.operation}"


@dataclass(frozen=True)
class OpaqueGrant:
    """A grant that does not follow the resource/operation shape."""

    value: str

    def __str__(self) -> str:
        return self.value


Grant = (
    GlobalWildcard
    | OperationWildcard
    | ResourceWildcard
    | ResourceManage
    | ResourceOperation
    | OpaqueGrant
)


def parse_permission(value: str) -> Grant:
    """Parse a permission string into its grant variant.

    The string is split on the first separator, so resource names must
    not contain dots. Never raises.

    Examples:
        >>> parse_permission("media.*")
        ResourceWildcard(resource='media')
        >>> parse_permission("*.read")
        OperationWildcard(operation='read')
    """
    if value == WILDCARD:
        return GlobalWildcard()

    resource, separator, operation = value.partition(PERMISSION_SEPARATOR)
    if not separator or not resource or not operation:
        return OpaqueGrant(value)

    if resource == WILDCARD:
        # Only the bare "*" grants full access
        if operation == WILDCARD:
            return OpaqueGrant(value)
        return OperationWildcard(operation)
    if operation == WILDCARD:
        return ResourceWildcard(resource)
    if operation == MANAGE_OPERATION:
        return ResourceManage(resource)
    return ResourceOperation(resource, operation)


@dataclass(frozen=True)
class PermissionSet:
    """Immutable, pre-indexed set of parsed grants.

    Build with ``PermissionSet.from_strings`` and share freely; nothing
    mutates it after construction.
    """

    grants: frozenset[Grant] = frozenset()
    has_global: bool = False
    operation_wildcards: frozenset[str] = frozenset()
    resource_wildcards: frozenset[str] = frozenset()
    managed_resources: frozenset[str] = frozenset()
    resource_operations: frozenset[tuple[str, str]] = frozenset()
    raw: frozenset[str] = field(default=frozenset(), repr=False)

    @classmethod
    def from_strings(cls, permissions: Iterable[str]) -> "PermissionSet":
        raw = frozenset(permissions)
        grants = frozenset(parse_permission(value) for value in raw)

        operation_wildcards: set[str] = set()
        resource_wildcards: set[str] = set()
        managed_resources: set[str] = set()
        resource_operations: set[tuple[str, str]] = set()

        for grant in grants:
            if isinstance(grant, OperationWildcard):
                operation_wildcards.add(grant.operation)
            elif isinstance(grant, ResourceWildcard):
                resource_wildcards.add(grant.resource)
            elif isinstance(grant, ResourceManage):
                managed_resources.add(grant.resource)
            elif isinstance(grant, ResourceOperation):
                resource_operations.add((grant.resource, grant.operation))

        return cls(
            grants=grants,
            has_global=GlobalWildcard() in grants,
            operation_wildcards=frozenset(operation_wildcards),
            resource_wildcards=frozenset(resource_wildcards),
            managed_resources=frozenset(managed_resources),
            resource_operations=frozenset(resource_operations),
            raw=raw,
        )

    def __contains__(self, permission: object) -> bool:
        return permission in self.raw

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.raw))

    def __len__(self) -> int:
        return len(self.raw)
