"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_engine.domain.guidelines import GuidelineTables

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    salt_cap_mg: int = 2300
    restricted_salt_cap_mg: int = 1500
    water_target_glasses: int = 8
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def guidelines(self) -> GuidelineTables:
        """Return guideline tables with regional salt overrides applied."""
        return GuidelineTables(
            salt_cap_mg=self.salt_cap_mg,
            restricted_salt_cap_mg=self.restricted_salt_cap_mg,
        )
