"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatekeeper.core.constants import (
    BASELINE_LOCALE,
    DEFAULT_CONFIG_FILE,
    DEFAULT_ROLES_SLUG,
)


class Settings(BaseSettings):
    """Settings loaded from ``GATEKEEPER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GATEKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Locale activated by init_i18n at startup
    default_locale: str = BASELINE_LOCALE

    # Resource name of the roles collection itself
    roles_slug: str = DEFAULT_ROLES_SLUG

    # Bypass protected-role update checks (seeding, migrations)
    skip_permission_checks: bool = False

    config_file: str = DEFAULT_CONFIG_FILE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
