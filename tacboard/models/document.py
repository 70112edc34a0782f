"""Timeline and document models."""
from __future__ import annotations

from typing import Any, Literal, Optional, Tuple

from pydantic import Field, field_validator

from tacboard.models.elements import BoardElement, BoardModel, Orientation

DEFAULT_STEP_DURATION = 1000
MIN_STEP_DURATION = 100


class PitchConfig(BoardModel):
    """Inner surface size plus the padding that surrounds it on every side."""
    width: float = 1050
    height: float = 680
    padding: float = 40
    grid_size: float = 10

    def for_orientation(self, orientation: Orientation) -> "PitchConfig":
        """Landscape is the canonical layout; portrait swaps width and height."""
        if Orientation(orientation) is Orientation.PORTRAIT:
            return self.model_copy(update={"width": self.height, "height": self.width})
        return self


class TeamSetting(BoardModel):
    name: str
    primary_color: str
    secondary_color: str
    goalkeeper_color: Optional[str] = None


def _home() -> TeamSetting:
    return TeamSetting(name="Home", primary_color="#ef4444", secondary_color="#ffffff")


def _away() -> TeamSetting:
    return TeamSetting(name="Away", primary_color="#3b82f6", secondary_color="#ffffff")


class TeamSettings(BoardModel):
    home: TeamSetting = Field(default_factory=_home)
    away: TeamSetting = Field(default_factory=_away)


PitchTheme = Literal["grass", "indoor", "chalk", "futsal", "custom"]
PitchView = Literal[
    "full",
    "half-left",
    "half-right",
    "center",
    "attacking-third",
    "defensive-third",
    "penalty-area",
    "plain",
]


class PitchLineSettings(BoardModel):
    """Which pitch markings are drawn."""
    show_outline: bool = True
    show_center_line: bool = True
    show_center_circle: bool = True
    show_penalty_areas: bool = True
    show_goal_areas: bool = True
    show_corner_arcs: bool = True
    show_penalty_spots: bool = True


class PitchSettings(BoardModel):
    """Surface appearance; defaults are the grass theme."""
    theme: PitchTheme = "grass"
    primary_color: str = "#2d8a3e"
    stripe_color: str = "#268735"
    line_color: str = "rgba(255, 255, 255, 0.85)"
    show_stripes: bool = True
    orientation: Orientation = Orientation.LANDSCAPE
    view: PitchView = "full"
    lines: PitchLineSettings = Field(default_factory=PitchLineSettings)


class Step(BoardModel):
    """One keyframe: a self-contained element snapshot plus playback time (ms)."""
    id: str
    name: str
    elements: Tuple[BoardElement, ...] = ()
    duration: int = DEFAULT_STEP_DURATION

    @field_validator("duration", mode="before")
    @classmethod
    def _round_duration(cls, value: Any) -> Any:
        # fractional milliseconds are kept to the nearest whole one
        if isinstance(value, float):
            return round(value)
        return value

    @field_validator("duration")
    @classmethod
    def _floor_duration(cls, value: int) -> int:
        return max(MIN_STEP_DURATION, value)


class BoardDocument(BoardModel):
    version: str
    name: str = "Untitled Board"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    current_step_index: int = 0
    steps: Tuple[Step, ...]
    pitch_config: PitchConfig
    team_settings: Optional[TeamSettings] = None
    pitch_settings: Optional[PitchSettings] = None


class HistoryEntry(BoardModel):
    """Deep-copied board state handed to an external undo stack."""
    elements: Tuple[BoardElement, ...]
    selected_ids: Tuple[str, ...]
    timestamp: int
