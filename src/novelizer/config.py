# src/novelizer/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from novelizer.errors import ConfigurationError
from novelizer.llms.config import LLMConfig
from novelizer.prompts.builder import NarrativeStyle

logger = logging.getLogger(__name__)


class NovelSettings(BaseModel):
    """User-editable settings for a novel run.

    Immutable. Keys missing from a saved file take the defaults below.
    `api_provider` and `output_format` stay free-form: an unknown provider is
    rejected when the client is built, an unknown format exports as plain text.
    """

    api_provider: str = "openai"
    api_key: str = ""
    api_url: str | None = None
    model: str = "gpt-4"
    max_tokens: int = Field(default=4000, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    narrative_style: NarrativeStyle = "third_person"
    include_actions: bool = True
    include_ooc: bool = False
    chapter_length: int = Field(default=10, gt=0)
    output_format: str = "markdown"
    timeout: float | None = Field(default=None, gt=0)
    chapter_delay: float = Field(default=1.0, ge=0.0)
    pause_after_last: bool = False

    class Config:
        extra = "forbid"
        frozen = True

    def to_llm_config(self) -> LLMConfig:
        return LLMConfig(
            provider=self.api_provider,  # type: ignore[arg-type]
            model=self.model,
            api_key=self.api_key or None,
            base_url=self.api_url or None,
            timeout=self.timeout,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

    def with_overrides(self, **overrides: object) -> "NovelSettings":
        """Return validated settings with the non-None overrides applied."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return NovelSettings(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings: {exc}") from exc


class SettingsStore:
    """Loads and saves NovelSettings as YAML. The pipeline never touches it."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> NovelSettings:
        if not self.path.exists():
            logger.info("No settings file at %s, using defaults", self.path)
            return NovelSettings()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationError(
                f"Cannot read settings file '{self.path}': {exc}"
            ) from exc

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file '{self.path}' must contain a mapping"
            )

        try:
            settings = NovelSettings(**data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings file '{self.path}': {exc}"
            ) from exc

        logger.info("Loaded settings from %s", self.path)
        return settings

    def save(self, settings: NovelSettings) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(settings.model_dump(), f, sort_keys=False)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot write settings file '{self.path}': {exc}"
            ) from exc
        logger.info("Saved settings to %s", self.path)
