"""Board element models and capability predicates.

Every element is a frozen pydantic model tagged by its ``type`` literal, so a
``BoardElement`` value is always exactly one of the variants below. Geometry
code never probes for fields directly; it asks the predicates at the bottom
of this module.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Orientation(str, Enum):
    """Surface layout mode."""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class BoardModel(BaseModel):
    """Base for every persisted value: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Position(BoardModel):
    x: float
    y: float


Team = Literal["home", "away"]
PlayerShape = Literal["circle", "square", "triangle", "diamond"]
ArrowType = Literal["pass", "run", "shoot"]
ZoneShape = Literal["rect", "ellipse"]
BorderStyle = Literal["solid", "dashed", "none"]
DrawingType = Literal["freehand", "highlighter"]
EquipmentType = Literal["goal", "mannequin", "cone", "ladder", "hoop", "hurdle", "pole"]
EquipmentVariant = Literal["standard", "mini", "tall", "flat"]

# Angles are degrees in [0, 360), kept to ANGLE_PRECISION decimal places so
# that adding and removing a quarter turn lands on the same float.
ANGLE_PRECISION = 6


def normalize_angle(value: float) -> float:
    """Wrap into [0, 360) and round to ANGLE_PRECISION decimals."""
    wrapped = round(value % 360, ANGLE_PRECISION)
    return 0.0 if wrapped >= 360 else wrapped


Angle = Annotated[float, Field(ge=0, lt=360), AfterValidator(normalize_angle)]


class PlayerElement(BoardModel):
    id: str
    type: Literal["player"] = "player"
    position: Position
    team: Team
    number: int
    label: Optional[str] = None
    orientation: Optional[Angle] = None
    show_vision: Optional[bool] = None
    shape: Optional[PlayerShape] = None
    show_label: Optional[bool] = None
    font_size: Optional[float] = None
    text_color: Optional[str] = None
    opacity: Optional[float] = None
    is_goalkeeper: Optional[bool] = None


class BallElement(BoardModel):
    id: str
    type: Literal["ball"] = "ball"
    position: Position


class ArrowElement(BoardModel):
    id: str
    type: Literal["arrow"] = "arrow"
    arrow_type: ArrowType
    start_point: Position
    end_point: Position
    curve_control: Optional[Position] = None
    color: Optional[str] = None
    stroke_width: Optional[float] = None


class ZoneElement(BoardModel):
    """Highlighted area; ``position`` is the top-left corner."""
    id: str
    type: Literal["zone"] = "zone"
    position: Position
    shape: ZoneShape
    width: float
    height: float
    fill_color: str
    border_color: Optional[str] = None
    border_style: BorderStyle = "none"
    opacity: float


class TextElement(BoardModel):
    id: str
    type: Literal["text"] = "text"
    position: Position
    content: str
    font_size: float
    font_family: str
    color: str
    bold: bool = False
    italic: bool = False
    background_color: Optional[str] = None
    rotation: Optional[Angle] = None


class DrawingElement(BoardModel):
    """Freehand stroke; ``points`` is a flat ``(x1, y1, x2, y2, ...)`` run."""
    id: str
    type: Literal["drawing"] = "drawing"
    drawing_type: DrawingType
    points: Tuple[float, ...]
    color: str
    stroke_width: float
    opacity: float

    @field_validator("points")
    @classmethod
    def _even_points(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        if len(value) % 2:
            raise ValueError("points must hold x/y pairs")
        return value


class EquipmentElement(BoardModel):
    id: str
    type: Literal["equipment"] = "equipment"
    position: Position
    equipment_type: EquipmentType
    variant: EquipmentVariant = "standard"
    rotation: Angle = 0
    color: str
    scale: float = 1.0


BoardElement = Annotated[
    Union[
        PlayerElement,
        BallElement,
        ArrowElement,
        ZoneElement,
        TextElement,
        DrawingElement,
        EquipmentElement,
    ],
    Field(discriminator="type"),
]

_POSITIONED = (PlayerElement, BallElement, ZoneElement, TextElement, EquipmentElement)
_ROTATABLE = (TextElement, EquipmentElement)


# ========================================
# Capability predicates
# ========================================

def is_player_element(element) -> bool:
    return isinstance(element, PlayerElement)


def is_ball_element(element) -> bool:
    return isinstance(element, BallElement)


def is_arrow_element(element) -> bool:
    return isinstance(element, ArrowElement)


def is_zone_element(element) -> bool:
    return isinstance(element, ZoneElement)


def is_text_element(element) -> bool:
    return isinstance(element, TextElement)


def is_drawing_element(element) -> bool:
    return isinstance(element, DrawingElement)


def is_equipment_element(element) -> bool:
    return isinstance(element, EquipmentElement)


def has_position(element) -> bool:
    """True for variants placed by a single anchor point."""
    return isinstance(element, _POSITIONED)


def has_rotation(element) -> bool:
    """True when the element carries a numeric visual spin."""
    return isinstance(element, _ROTATABLE) and element.rotation is not None


def has_orientation(element) -> bool:
    """True when the element carries a numeric facing direction."""
    return isinstance(element, PlayerElement) and element.orientation is not None
