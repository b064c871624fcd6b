"""Utility functions for loading project configuration."""

from pathlib import Path

import pydantic
import yaml

from gatekeeper.core.errors import ConfigurationError
from gatekeeper.schemas import GatekeeperConfig


def load_project_config(path: Path | str) -> GatekeeperConfig:
    """Load and validate a gatekeeper.yaml configuration.

    Args:
        path: Path to the configuration file

    Returns:
        The validated configuration; empty if the file doesn't exist

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation
    """
    config_path = Path(path)
    if not config_path.exists():
        return GatekeeperConfig()

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {config_path}",
            details={"path": str(config_path)},
        )

    try:
        return GatekeeperConfig(**data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            f"Invalid project configuration: {e}",
            details={"path": str(config_path)},
        ) from e
