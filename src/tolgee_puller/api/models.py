"""
Response models for the Tolgee REST API.

Only the fields the puller relies on are declared; everything else in a
response is ignored.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class LanguageModel(BaseModel):
    """A language configured in the Tolgee project."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    tag: str
    name: str | None = None
    original_name: str | None = Field(default=None, alias="originalName")
    base: bool = False


class EmbeddedLanguages(BaseModel):
    """HAL ``_embedded`` collection of a paged languages response."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    languages: list[LanguageModel]


class LanguageCatalogue(BaseModel):
    """Body of ``GET /v2/projects/languages``."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    embedded: EmbeddedLanguages = Field(alias="_embedded")

    @property
    def tags(self) -> list[str]:
        """Language tags in server order."""
        return [language.tag for language in self.embedded.languages]
