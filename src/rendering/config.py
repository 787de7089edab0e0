"""Configuration settings for the Rendering module.

Provides settings for templates, filenames and preview behaviour.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_TEMPLATE_DIR = Path(__file__).parent / "templates"


class RenderingConfig(BaseSettings):
    """Configuration for the rendering engine.

    Settings can be overridden via environment variables prefixed with RENDERING_.

    Example: RENDERING_FILENAME_BASE=cv
    """

    model_config = SettingsConfigDict(
        env_prefix="RENDERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Template settings
    template_dir: Path = Field(
        default=PACKAGE_TEMPLATE_DIR,
        description="Directory containing the HTML templates",
    )
    print_template: str = Field(
        default="print.html",
        description="HTML template used for the PDF target",
    )
    preview_template: str = Field(
        default="preview.html",
        description="HTML template used for the on-screen preview",
    )
    default_template: str = Field(
        default="classic",
        description="Template identifier used when the caller does not pick one",
    )

    # Output settings
    filename_base: str = Field(
        default="resume",
        min_length=1,
        description="Suggested download filename without extension",
    )

    # Preview settings
    clear_overlay_on_plain_turn: bool = Field(
        default=False,
        description=(
            "Clear the match score and keywords when a turn carries no "
            "tailoring result"
        ),
    )

    @field_validator("template_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v


# Singleton instance
_rendering_config: RenderingConfig | None = None


def get_rendering_config() -> RenderingConfig:
    """Get the rendering configuration singleton."""
    global _rendering_config
    if _rendering_config is None:
        _rendering_config = RenderingConfig()
    return _rendering_config


def reset_rendering_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _rendering_config
    _rendering_config = None
