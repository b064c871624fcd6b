"""Tests for gatekeeper.utils module."""

from pathlib import Path

import pytest

from gatekeeper.core.errors import ConfigurationError
from gatekeeper.schemas import GatekeeperConfig
from gatekeeper.utils import load_project_config


class TestLoadProjectConfig:
    """Tests for load_project_config function."""

    def test_loads_resources_and_custom_permissions(self, project_config: Path) -> None:
        config = load_project_config(project_config)

        assert [r.slug for r in config.resources] == ["posts", "media"]
        assert config.resources[0].versions is True
        assert config.custom_permissions[0].value == "reports.export"
        assert config.public_permissions == ["posts.read"]

    def test_missing_file_returns_empty_config(self, temp_dir: Path) -> None:
        assert load_project_config(temp_dir / "missing.yaml") == GatekeeperConfig()

    def test_empty_file_returns_empty_config(self, temp_dir: Path) -> None:
        path = temp_dir / "gatekeeper.yaml"
        path.write_text("", encoding="utf-8")
        assert load_project_config(path) == GatekeeperConfig()

    def test_invalid_yaml_raises(self, temp_dir: Path) -> None:
        path = temp_dir / "gatekeeper.yaml"
        path.write_text("resources: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_project_config(path)

    def test_non_mapping_raises(self, temp_dir: Path) -> None:
        path = temp_dir / "gatekeeper.yaml"
        path.write_text("- posts\n- media\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Expected a mapping"):
            load_project_config(path)

    def test_invalid_schema_raises(self, temp_dir: Path) -> None:
        path = temp_dir / "gatekeeper.yaml"
        path.write_text("resources:\n  - versions: true\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid project configuration") as exc_info:
            load_project_config(path)
        assert exc_info.value.details["path"] == str(path)
