"""Orientation transform engine.

Flipping the surface between landscape and portrait rotates every element
90 degrees about the centre of the inner (padding-excluded) surface and
re-embeds it with the same padding. ``PitchConfig`` values passed in here are
always the canonical landscape config; the portrait size is derived from it.

Direction convention, relative to the inner-surface centre with offsets
``(dx, dy)``:

- to portrait:  ``(dx, dy) -> (-dy, dx)``, scalar angles change by -90
- to landscape: ``(dx, dy) -> (dy, -dx)``, scalar angles change by +90

The two are exact inverses, so a portrait/landscape round trip restores
positions up to float error and angles exactly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from tacboard.models.document import BoardDocument, PitchConfig, PitchSettings, Step
from tacboard.models.elements import (
    ArrowElement,
    BoardElement,
    DrawingElement,
    Orientation,
    Position,
    ZoneElement,
    has_orientation,
    has_position,
    has_rotation,
    is_arrow_element,
    is_drawing_element,
    is_text_element,
    is_zone_element,
    normalize_angle,
)

logger = logging.getLogger(__name__)

ROTATION_DELTA = {
    Orientation.PORTRAIT: -90,
    Orientation.LANDSCAPE: 90,
}


def rotate_value(value: float, delta: float) -> float:
    """Shift an angle by ``delta`` degrees and wrap it into [0, 360)."""
    return normalize_angle(value + delta)


def opposite(orientation: Orientation) -> Orientation:
    if Orientation(orientation) is Orientation.PORTRAIT:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


@dataclass(frozen=True)
class OrientationTransform:
    """Rigid 90 degree remap of surface coordinates towards ``target``."""

    target: Orientation
    pitch_config: PitchConfig

    def __post_init__(self):
        object.__setattr__(self, "target", Orientation(self.target))

    @property
    def delta(self) -> int:
        return ROTATION_DELTA[self.target]

    @property
    def source_size(self):
        src = self.pitch_config.for_orientation(opposite(self.target))
        return src.width, src.height

    @property
    def target_size(self):
        dst = self.pitch_config.for_orientation(self.target)
        return dst.width, dst.height

    def transform_xy(self, x: float, y: float):
        pad = self.pitch_config.padding
        src_w, src_h = self.source_size
        dst_w, dst_h = self.target_size

        dx = x - pad - src_w / 2
        dy = y - pad - src_h / 2
        if self.target is Orientation.PORTRAIT:
            rx, ry = -dy, dx
        else:
            rx, ry = dy, -dx
        return rx + dst_w / 2 + pad, ry + dst_h / 2 + pad

    def transform_point(self, point: Position) -> Position:
        x, y = self.transform_xy(point.x, point.y)
        return Position(x=x, y=y)

    def transform_element(self, element: BoardElement) -> BoardElement:
        if is_zone_element(element):
            return self._zone(element)
        if is_arrow_element(element):
            return self._arrow(element)
        if is_drawing_element(element):
            return self._drawing(element)
        if has_position(element):
            return self._anchored(element)
        logger.warning("Orientation transform passing through unknown element %r", element)
        return element

    def _anchored(self, element: BoardElement) -> BoardElement:
        # Angles that are unset stay unset.
        update = {"position": self.transform_point(element.position)}
        if has_rotation(element):
            update["rotation"] = rotate_value(element.rotation, self.delta)
        if has_orientation(element):
            update["orientation"] = rotate_value(element.orientation, self.delta)
        if is_text_element(element) and element.rotation is not None:
            # text stays upright
            update["rotation"] = 0
        return element.model_copy(update=update)

    def _arrow(self, element: ArrowElement) -> ArrowElement:
        update = {
            "start_point": self.transform_point(element.start_point),
            "end_point": self.transform_point(element.end_point),
        }
        if element.curve_control is not None:
            update["curve_control"] = self.transform_point(element.curve_control)
        return element.model_copy(update=update)

    def _drawing(self, element: DrawingElement) -> DrawingElement:
        points: List[float] = []
        for i in range(0, len(element.points), 2):
            points.extend(self.transform_xy(element.points[i], element.points[i + 1]))
        return element.model_copy(update={"points": tuple(points)})

    def _zone(self, element: ZoneElement) -> ZoneElement:
        # Both corners of the box are rotated; the result is again axis
        # aligned with width and height swapped.
        x0, y0 = self.transform_xy(element.position.x, element.position.y)
        x1, y1 = self.transform_xy(element.position.x + element.width, element.position.y + element.height)
        return element.model_copy(update={
            "position": Position(x=min(x0, x1), y=min(y0, y1)),
            "width": abs(x1 - x0),
            "height": abs(y1 - y0),
        })


def transform_point(point: Position, target: Orientation, pitch_config: PitchConfig) -> Position:
    return OrientationTransform(target, pitch_config).transform_point(point)


def transform_element(element: BoardElement, target: Orientation, pitch_config: PitchConfig) -> BoardElement:
    """Return ``element`` as it sits after the surface turns to ``target``."""
    return OrientationTransform(target, pitch_config).transform_element(element)


def transform_elements(elements: Iterable[BoardElement], target: Orientation, pitch_config: PitchConfig) -> List[BoardElement]:
    transform = OrientationTransform(target, pitch_config)
    return [transform.transform_element(el) for el in elements]


def transform_steps(steps: Iterable[Step], target: Orientation, pitch_config: PitchConfig) -> List[Step]:
    transform = OrientationTransform(target, pitch_config)
    return [
        step.model_copy(update={"elements": tuple(transform.transform_element(el) for el in step.elements)})
        for step in steps
    ]


def document_orientation(document: BoardDocument) -> Orientation:
    if document.pitch_settings is None:
        return Orientation.LANDSCAPE
    return document.pitch_settings.orientation


def change_orientation(document: BoardDocument, target: Orientation) -> BoardDocument:
    """Turn every step of ``document`` to ``target``; a no-op if already there."""
    target = Orientation(target)
    if document_orientation(document) is target:
        return document
    settings = document.pitch_settings or PitchSettings()
    logger.info("Changing board orientation to %s across %d steps", target.value, len(document.steps))
    return document.model_copy(update={
        "steps": tuple(transform_steps(document.steps, target, document.pitch_config)),
        "pitch_settings": settings.model_copy(update={"orientation": target}),
    })
