"""Board data models.

Public API: element variants, capability predicates and the timeline/document
values built from them.
"""

from tacboard.models.elements import (
    ArrowElement,
    BallElement,
    BoardElement,
    DrawingElement,
    EquipmentElement,
    Orientation,
    PlayerElement,
    Position,
    TextElement,
    ZoneElement,
    has_orientation,
    has_position,
    has_rotation,
    is_arrow_element,
    is_ball_element,
    is_drawing_element,
    is_equipment_element,
    is_player_element,
    is_text_element,
    is_zone_element,
    normalize_angle,
)
from tacboard.models.document import (
    DEFAULT_STEP_DURATION,
    MIN_STEP_DURATION,
    BoardDocument,
    HistoryEntry,
    PitchConfig,
    PitchLineSettings,
    PitchSettings,
    Step,
    TeamSetting,
    TeamSettings,
)

__all__ = [
    "ArrowElement",
    "BallElement",
    "BoardElement",
    "DrawingElement",
    "EquipmentElement",
    "Orientation",
    "PlayerElement",
    "Position",
    "TextElement",
    "ZoneElement",
    "has_orientation",
    "has_position",
    "has_rotation",
    "is_arrow_element",
    "is_ball_element",
    "is_drawing_element",
    "is_equipment_element",
    "is_player_element",
    "is_text_element",
    "is_zone_element",
    "normalize_angle",
    "DEFAULT_STEP_DURATION",
    "MIN_STEP_DURATION",
    "BoardDocument",
    "HistoryEntry",
    "PitchConfig",
    "PitchLineSettings",
    "PitchSettings",
    "Step",
    "TeamSetting",
    "TeamSettings",
]
