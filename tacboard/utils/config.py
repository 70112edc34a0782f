"""Application configuration.

Defaults for the pitch and the timeline live here and are turned into
explicit values at the composition root (the CLI). Library functions take
those values as arguments and never read ``settings`` themselves.
"""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tacboard.models.document import PitchConfig, TeamSettings
from tacboard.models.elements import Orientation


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="TACBOARD_")

    pitch_width: float = 1050
    pitch_height: float = 680
    pitch_padding: float = 40
    grid_size: float = 10
    default_step_duration: int = 1000
    default_orientation: Orientation = Orientation.LANDSCAPE
    output_dir: str = Field(
        default="boards",
        validation_alias=AliasChoices("TACBOARD_OUTPUT_DIR", "OUTPUT_DIR"),
    )
    log_level: str = "INFO"

    def pitch_config(self) -> PitchConfig:
        return PitchConfig(
            width=self.pitch_width,
            height=self.pitch_height,
            padding=self.pitch_padding,
            grid_size=self.grid_size,
        )

    def team_settings(self) -> TeamSettings:
        return TeamSettings()


settings = Settings()
