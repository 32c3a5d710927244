"""Centralized configuration using pydantic-settings.

Defaults match the published boilerplate collection, so nothing needs to be
configured for normal use. Values can be overridden via environment variables
with the MDERIC_ prefix.

Example:
    MDERIC_REPO_URL="https://github.com/acme/boilerplates.git"
    MDERIC_CLEANUP__MAX_ATTEMPTS=8
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REPO_URL = "https://github.com/muhammadderic/mderic-boilerplates.git"


class CleanupSettings(BaseSettings):
    """Retry bounds for removing the staging clone."""

    model_config = SettingsConfigDict(env_prefix="MDERIC_CLEANUP__")

    max_attempts: int = Field(
        default=5,
        gt=0,
        description="Removal attempts before giving up on a busy directory",
    )
    base_delay: float = Field(
        default=0.2,
        ge=0,
        description="Seconds per attempt in the linear backoff",
    )


class ScaffoldSettings(BaseSettings):
    """Root configuration for the scaffolder.

    Nested settings use double underscore: MDERIC_CLEANUP__BASE_DELAY=0.5
    """

    model_config = SettingsConfigDict(
        env_prefix="MDERIC_",
        env_nested_delimiter="__",
    )

    repo_url: str = Field(default=DEFAULT_REPO_URL, description="Boilerplate collection remote")
    branch: str | None = Field(default=None, description="Branch to clone (remote HEAD if unset)")
    clone_depth: int = Field(default=1, gt=0, description="History depth for the shallow clone")
    staging_dir_name: str = Field(
        default="__mderic-boilerplates-tmp__",
        min_length=1,
        description="Temporary clone directory created under the working directory",
    )
    target_dir_name: str = Field(
        default="backend",
        min_length=1,
        description="Directory the boilerplate is copied into",
    )
    cleanup: CleanupSettings = Field(default_factory=CleanupSettings)


# Singleton instance
settings = ScaffoldSettings()
