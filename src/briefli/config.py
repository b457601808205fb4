from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Description: Runtime configuration for briefli.
    Layer: L0
    Input: .env in the working directory + BRIEFLI_* environment variables
    Output: Strongly typed settings object
    """

    model_config = SettingsConfigDict(
        env_prefix="BRIEFLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Per-directory files
    defaults_file: str = "defaults.toml"
    template_file: str = "ch-letter-template.typ"

    # Letter sources and compiled outputs
    source_suffix: str = ".typ"
    output_suffix: str = ".pdf"
    template_marker: str = "-template"

    # External compiler
    compiler: str = "typst"

    # Fallbacks when defaults.toml is silent
    fallback_location: str = "Zürich"
    default_lang: str = "de"

    # Runtime
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Description: Cached settings accessor for the CLI.
    Layer: L0
    Input: None
    Output: Settings
    """
    return Settings()
