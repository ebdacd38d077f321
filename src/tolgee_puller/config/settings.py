"""
Environment configuration for tolgee-puller.

Reads ``TOLGEE_*`` variables from the process environment and from a
``.env`` file in the working directory. List values (languages,
namespaces) are given as JSON arrays, e.g. ``TOLGEE_NAMESPACES='["common"]'``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentSettings(BaseSettings):
    """Tolgee settings sourced from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="TOLGEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Personal Access Token or Project API key",
    )
    api_url: str | None = Field(
        default=None,
        description="Base URL of the Tolgee (self-hosted) server",
    )
    languages: list[str] = Field(
        default_factory=list,
        description="Language tags to fetch",
    )
    namespaces: list[str] = Field(
        default_factory=list,
        description="Namespaces to fetch",
    )
    default_namespace: str | None = Field(
        default=None,
        description="Namespace whose keys are merged at the language root",
    )
