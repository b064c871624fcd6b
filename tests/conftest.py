"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from gatekeeper.config import get_settings
from gatekeeper.i18n import init_i18n
from gatekeeper.schemas import Actor, Role, RoleRef


@pytest.fixture(autouse=True)
def reset_locale() -> Generator[None, None, None]:
    """Reset the process-wide locale before and after each test."""
    init_i18n("en")
    yield
    init_i18n("en")


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test operations.

    Yields:
        Path to the temporary directory
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def project_config(temp_dir: Path) -> Path:
    """Write a gatekeeper.yaml with two resources and a custom permission."""
    path = temp_dir / "gatekeeper.yaml"
    path.write_text(
        "resources:\n"
        "  - slug: posts\n"
        "    versions: true\n"
        "  - slug: media\n"
        "custom_permissions:\n"
        "  - label: Export reports\n"
        "    value: reports.export\n"
        "public_permissions:\n"
        "  - posts.read\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def super_admin_role() -> Role:
    """Stored protected super admin role."""
    return Role(
        id="role-1",
        name="super_admin",
        label="Super Admin",
        permissions=["*"],
        protected=True,
        active=True,
        description="Full access",
    )


@pytest.fixture
def editor_role() -> Role:
    """Stored regular role with role management rights."""
    return Role(
        id="role-2",
        name="editor",
        label="Editor",
        permissions=["media.*", "roles.read", "roles.update"],
        protected=False,
        active=True,
    )


@pytest.fixture
def public_role() -> Role:
    """Stored protected public role."""
    return Role(
        id="role-3",
        name="public",
        label="Public",
        permissions=["*.read"],
        protected=True,
        active=True,
        visible_for=[],
    )


@pytest.fixture
def super_admin_actor(super_admin_role: Role) -> Actor:
    """Actor whose own role is the super admin role."""
    return Actor(id="user-1", role=super_admin_role)


@pytest.fixture
def other_super_admin_actor() -> Actor:
    """Super admin actor with a separate role document."""
    role = Role(id="role-9", name="root", label="Root", permissions=["*"])
    return Actor(id="user-9", role=RoleRef.from_value(role))


@pytest.fixture
def editor_actor(editor_role: Role) -> Actor:
    """Non-super-admin actor."""
    return Actor(id="user-2", role=editor_role)
