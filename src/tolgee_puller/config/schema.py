"""Options schema for tolgee-puller using Pydantic models."""

from enum import Enum
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_API_URL = "https://app.tolgee.io"
DEFAULT_OUTPUT_PATH = Path("node_modules/tolgee-puller/messages.ts")


class OutputMode(str, Enum):
    """How the resource tree is written to disk."""

    SINGLE = "single"
    SPLIT = "split"


class PullerOptions(BaseModel):
    """
    Finished options record for one pull.

    Built once at process entry and passed by value into the pipeline.
    Inner components never read the environment themselves.
    """

    api_key: str = Field(
        ...,
        description="Personal Access Token or Project API key",
        min_length=1,
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the Tolgee (self-hosted) server",
    )
    languages: tuple[str, ...] = Field(
        default=(),
        description="Language tags to fetch, empty for the server default",
    )
    namespaces: tuple[str, ...] = Field(
        ...,
        description="Namespaces to fetch",
        min_length=1,
    )
    default_namespace: str | None = Field(
        default=None,
        description="Namespace whose keys are merged at the language root",
    )
    output_path: Path = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Path of the generated resource module",
    )
    mode: OutputMode = Field(
        default=OutputMode.SINGLE,
        description="Write one module, or one module per language",
    )
    pretty: bool = Field(
        default=False,
        description="Indent the serialized resources",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        frozen=True,
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate and normalize the API URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Tolgee API URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("default_namespace")
    @classmethod
    def normalize_default_namespace(cls, v: str | None) -> str | None:
        """Treat an empty default namespace as unset."""
        return v or None

    @model_validator(mode="after")
    def validate_default_namespace(self) -> "PullerOptions":
        """The default namespace has to be one of the fetched namespaces."""
        if (
            self.default_namespace is not None
            and self.default_namespace not in self.namespaces
        ):
            raise ValueError(
                "The option `default_namespace` should be one of the specified namespaces."
            )
        return self
