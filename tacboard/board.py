"""Element factories and whole-value element edits."""
from __future__ import annotations

import time
import uuid
from typing import Iterable, List, Optional, Sequence

from tacboard.models.document import PitchConfig
from tacboard.models.elements import (
    ArrowElement,
    ArrowType,
    BallElement,
    BoardElement,
    DrawingElement,
    DrawingType,
    EquipmentElement,
    EquipmentType,
    EquipmentVariant,
    PlayerElement,
    Position,
    Team,
    TextElement,
    ZoneElement,
    ZoneShape,
    has_position,
    has_rotation,
    is_arrow_element,
    is_drawing_element,
    is_player_element,
    normalize_angle,
)

DEFAULT_GRID_SIZE = 10
DEFAULT_DUPLICATE_OFFSET = Position(x=20, y=20)

_DRAWING_STYLE = {
    "highlighter": {"color": "#ffff00", "stroke_width": 20, "opacity": 0.4},
    "freehand": {"color": "#ff0000", "stroke_width": 3, "opacity": 1.0},
}


def generate_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}"


def snap_to_grid(position: Position, grid_size: float) -> Position:
    return Position(
        x=round(position.x / grid_size) * grid_size,
        y=round(position.y / grid_size) * grid_size,
    )


def _offset(point: Position, dx: float, dy: float) -> Position:
    return Position(x=point.x + dx, y=point.y + dy)


# ========================================
# Factories
# ========================================

def create_player(position: Position, team: Team, number: int, grid_size: float = DEFAULT_GRID_SIZE) -> PlayerElement:
    """New player facing 0 degrees; vision is left unset (renderer treats it as off)."""
    return PlayerElement(
        id=generate_id(),
        position=snap_to_grid(position, grid_size),
        team=team,
        number=number,
        orientation=0,
    )


def create_ball(position: Position, grid_size: float = DEFAULT_GRID_SIZE) -> BallElement:
    return BallElement(id=generate_id(), position=snap_to_grid(position, grid_size))


def create_arrow(start_point: Position, arrow_type: ArrowType = "pass", grid_size: float = DEFAULT_GRID_SIZE) -> ArrowElement:
    start = snap_to_grid(start_point, grid_size)
    return ArrowElement(
        id=generate_id(),
        arrow_type=arrow_type,
        start_point=start,
        end_point=_offset(start, 80, 0),
        stroke_width=3 if arrow_type == "pass" else 2,
    )


def create_zone(position: Position, shape: ZoneShape = "rect", grid_size: float = DEFAULT_GRID_SIZE) -> ZoneElement:
    return ZoneElement(
        id=generate_id(),
        position=snap_to_grid(position, grid_size),
        shape=shape,
        width=120,
        height=80,
        fill_color="#22c55e",
        opacity=0.25,
        border_style="none",
    )


def create_text(position: Position, content: str = "Text", grid_size: float = DEFAULT_GRID_SIZE) -> TextElement:
    return TextElement(
        id=generate_id(),
        position=snap_to_grid(position, grid_size),
        content=content,
        font_size=18,
        font_family="Inter, sans-serif",
        color="#ffffff",
        bold=False,
        italic=False,
    )


def create_equipment(
    position: Position,
    equipment_type: EquipmentType,
    variant: EquipmentVariant = "standard",
    grid_size: float = DEFAULT_GRID_SIZE,
) -> EquipmentElement:
    return EquipmentElement(
        id=generate_id(),
        position=snap_to_grid(position, grid_size),
        equipment_type=equipment_type,
        variant=variant,
        rotation=0,
        color="#f97316",
        scale=1.0,
    )


def create_drawing(points: Sequence[float], drawing_type: DrawingType = "freehand") -> DrawingElement:
    """Freehand strokes keep their raw points; they are never grid-snapped."""
    return DrawingElement(
        id=generate_id(),
        drawing_type=drawing_type,
        points=tuple(points),
        **_DRAWING_STYLE[drawing_type],
    )


# ========================================
# Element edits
# ========================================

def move_element(element: BoardElement, new_position: Position, grid_size: float = DEFAULT_GRID_SIZE) -> BoardElement:
    """Move an element so its anchor lands on the snapped position.

    Arrows are anchored at their midpoint and move both endpoints by the
    same delta. Drawings have no anchor and are returned unchanged.
    """
    snapped = snap_to_grid(new_position, grid_size)
    if is_arrow_element(element):
        dx = snapped.x - (element.start_point.x + element.end_point.x) / 2
        dy = snapped.y - (element.start_point.y + element.end_point.y) / 2
        update = {
            "start_point": _offset(element.start_point, dx, dy),
            "end_point": _offset(element.end_point, dx, dy),
        }
        if element.curve_control is not None:
            update["curve_control"] = _offset(element.curve_control, dx, dy)
        return element.model_copy(update=update)
    if has_position(element):
        return element.model_copy(update={"position": snapped})
    return element


def duplicate_element(element: BoardElement, offset: Position = DEFAULT_DUPLICATE_OFFSET) -> BoardElement:
    update = {"id": generate_id()}
    if is_arrow_element(element):
        update["start_point"] = _offset(element.start_point, offset.x, offset.y)
        update["end_point"] = _offset(element.end_point, offset.x, offset.y)
        if element.curve_control is not None:
            update["curve_control"] = _offset(element.curve_control, offset.x, offset.y)
    elif is_drawing_element(element):
        shifted = []
        for i in range(0, len(element.points), 2):
            shifted.extend((element.points[i] + offset.x, element.points[i + 1] + offset.y))
        update["points"] = tuple(shifted)
    elif has_position(element):
        update["position"] = _offset(element.position, offset.x, offset.y)
    return element.model_copy(update=update, deep=True)


def duplicate_elements(elements: Iterable[BoardElement], offset: Position = DEFAULT_DUPLICATE_OFFSET) -> List[BoardElement]:
    return [duplicate_element(el, offset) for el in elements]


def find_element_by_id(elements: Iterable[BoardElement], element_id: str) -> Optional[BoardElement]:
    for el in elements:
        if el.id == element_id:
            return el
    return None


def filter_elements_by_ids(elements: Iterable[BoardElement], ids: Iterable[str]) -> List[BoardElement]:
    wanted = set(ids)
    return [el for el in elements if el.id in wanted]


def remove_elements_by_ids(elements: Iterable[BoardElement], ids: Iterable[str]) -> List[BoardElement]:
    dropped = set(ids)
    return [el for el in elements if el.id not in dropped]


def update_elements(elements: Iterable[BoardElement], updates: Iterable[BoardElement]) -> List[BoardElement]:
    """Replace elements whose id appears in ``updates``; order is preserved."""
    by_id = {el.id: el for el in updates}
    return [by_id.get(el.id, el) for el in elements]


def is_within_bounds(position: Position, pitch_config: PitchConfig) -> bool:
    pad = pitch_config.padding
    return (
        pad <= position.x <= pitch_config.width + pad
        and pad <= position.y <= pitch_config.height + pad
    )


def clamp_to_bounds(position: Position, pitch_config: PitchConfig) -> Position:
    pad = pitch_config.padding
    return Position(
        x=max(pad, min(pitch_config.width + pad, position.x)),
        y=max(pad, min(pitch_config.height + pad, position.y)),
    )


def next_player_number(elements: Iterable[BoardElement], team: Team) -> int:
    """Lowest shirt number not yet used by ``team``."""
    taken = {el.number for el in elements if is_player_element(el) and el.team == team}
    number = 1
    while number in taken:
        number += 1
    return number


def rotate_elements(elements: Iterable[BoardElement], ids: Iterable[str], degrees: float) -> List[BoardElement]:
    """Spin targeted elements that carry a rotation; others pass through."""
    targets = set(ids)
    result = []
    for el in elements:
        if el.id in targets and has_rotation(el):
            el = el.model_copy(update={"rotation": normalize_angle(el.rotation + degrees)})
        result.append(el)
    return result


def toggle_vision(elements: Iterable[BoardElement], ids: Iterable[str]) -> List[BoardElement]:
    """Flip the vision cone of every targeted player to one shared value.

    If any target is explicitly off, all targets turn on; otherwise (all on
    or unset) all targets turn off. The result is never a mixed state.
    """
    elements = list(elements)
    targets = set(ids)
    players = [el for el in elements if el.id in targets and is_player_element(el)]
    if not players:
        return elements
    value = any(p.show_vision is False for p in players)
    return [
        el.model_copy(update={"show_vision": value}) if el.id in targets and is_player_element(el) else el
        for el in elements
    ]


# ========================================
# Initial lineup
# ========================================

def formation_442(team: Team, pitch_config: PitchConfig) -> List[Position]:
    """Anchor points of a 4-4-2, mirrored for the away side."""
    width, height, pad = pitch_config.width, pitch_config.height, pitch_config.padding
    half = width / 2
    home = team == "home"
    base_x = pad + half * 0.15 if home else pad + width - half * 0.15
    sign = 1 if home else -1

    positions = [Position(x=base_x, y=pad + height / 2)]
    for depth, rows in ((0.25, (0.2, 0.4, 0.6, 0.8)), (0.55, (0.2, 0.4, 0.6, 0.8)), (0.8, (0.35, 0.65))):
        for row in rows:
            positions.append(Position(x=base_x + sign * half * depth, y=pad + height * row))
    return positions


def create_team_lineup(team: Team, pitch_config: PitchConfig) -> List[PlayerElement]:
    return [
        create_player(pos, team, index + 1, pitch_config.grid_size)
        for index, pos in enumerate(formation_442(team, pitch_config))
    ]


def create_initial_board(pitch_config: PitchConfig) -> List[BoardElement]:
    return create_team_lineup("home", pitch_config) + create_team_lineup("away", pitch_config)
