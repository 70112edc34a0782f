"""Animation interpolation between consecutive steps.

During playback each element of the current step glides linearly towards the
element with the same id in the next step. Any missing piece (not playing,
zero progress, no next step, no partner element, partner lacking the needed
geometry) returns the caller's geometry object untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from tacboard.models.document import Step
from tacboard.models.elements import (
    BoardElement,
    Position,
    has_position,
    is_arrow_element,
    is_zone_element,
)


class ZoneGeometry(NamedTuple):
    position: Position
    width: float
    height: float


class ArrowEndpoints(NamedTuple):
    start: Position
    end: Position


class PlaybackPosition(NamedTuple):
    step_index: int
    progress01: float
    finished: bool


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_position(a: Position, b: Position, t: float) -> Position:
    return Position(x=lerp(a.x, b.x, t), y=lerp(a.y, b.y, t))


@dataclass(frozen=True)
class AnimationInterpolator:
    """Playback inputs for one animation tick."""

    is_playing: bool
    progress01: float
    current_step_index: int
    steps: Sequence[Step]

    @cached_property
    def next_step_elements(self) -> Optional[Tuple[BoardElement, ...]]:
        next_index = self.current_step_index + 1
        if next_index < 0 or next_index >= len(self.steps):
            return None
        return self.steps[next_index].elements

    @cached_property
    def _next_by_id(self) -> Dict[str, BoardElement]:
        return {el.id: el for el in self.next_step_elements or ()}

    def _partner(self, element_id: str) -> Optional[BoardElement]:
        if not self.is_playing or self.progress01 == 0 or self.next_step_elements is None:
            return None
        return self._next_by_id.get(element_id)

    def interpolated_position(self, element_id: str, current: Position) -> Position:
        partner = self._partner(element_id)
        if partner is None or not has_position(partner):
            return current
        return lerp_position(current, partner.position, self.progress01)

    def interpolated_zone(self, element_id: str, position: Position, width: float, height: float) -> ZoneGeometry:
        partner = self._partner(element_id)
        if partner is None or not is_zone_element(partner):
            return ZoneGeometry(position, width, height)
        t = self.progress01
        return ZoneGeometry(
            lerp_position(position, partner.position, t),
            lerp(width, partner.width, t),
            lerp(height, partner.height, t),
        )

    def interpolated_arrow_endpoints(self, element_id: str, start: Position, end: Position) -> ArrowEndpoints:
        partner = self._partner(element_id)
        if partner is None or not is_arrow_element(partner):
            return ArrowEndpoints(start, end)
        t = self.progress01
        return ArrowEndpoints(
            lerp_position(start, partner.start_point, t),
            lerp_position(end, partner.end_point, t),
        )

    def interpolate_element(self, element: BoardElement) -> BoardElement:
        """Element with its animated geometry; the input itself when nothing moves."""
        if is_zone_element(element):
            zone = self.interpolated_zone(element.id, element.position, element.width, element.height)
            if zone == (element.position, element.width, element.height):
                return element
            return element.model_copy(update=zone._asdict())
        if is_arrow_element(element):
            ends = self.interpolated_arrow_endpoints(element.id, element.start_point, element.end_point)
            if ends.start is element.start_point and ends.end is element.end_point:
                return element
            return element.model_copy(update={"start_point": ends.start, "end_point": ends.end})
        if has_position(element):
            pos = self.interpolated_position(element.id, element.position)
            if pos is element.position:
                return element
            return element.model_copy(update={"position": pos})
        # drawings keep their stroke until the step switches
        return element

    def interpolate_frame(self) -> List[BoardElement]:
        if not 0 <= self.current_step_index < len(self.steps):
            return []
        return [self.interpolate_element(el) for el in self.steps[self.current_step_index].elements]


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def playback_position(steps: Sequence[Step], elapsed_ms: float, looping: bool = False) -> PlaybackPosition:
    """Locate a playback clock on the timeline.

    The transition out of step ``i`` lasts ``steps[i].duration``; the last step
    has no outgoing transition. Progress is eased with a cubic in-out curve.
    Looping wraps back to the first step once the last one is reached.
    """
    if len(steps) <= 1:
        return PlaybackPosition(0, 0.0, True)

    total = sum(step.duration for step in steps[:-1])
    elapsed = max(0.0, float(elapsed_ms))
    if looping:
        elapsed %= total
    elif elapsed >= total:
        return PlaybackPosition(len(steps) - 1, 0.0, True)

    start = 0.0
    for index, step in enumerate(steps[:-1]):
        if elapsed < start + step.duration:
            raw = (elapsed - start) / step.duration
            return PlaybackPosition(index, ease_in_out_cubic(raw), False)
        start += step.duration
    return PlaybackPosition(len(steps) - 1, 0.0, True)


def frame_at(steps: Sequence[Step], elapsed_ms: float, looping: bool = False) -> List[BoardElement]:
    """Elements as displayed ``elapsed_ms`` into playback."""
    position = playback_position(steps, elapsed_ms, looping)
    interpolator = AnimationInterpolator(
        is_playing=not position.finished,
        progress01=position.progress01,
        current_step_index=position.step_index,
        steps=steps,
    )
    return interpolator.interpolate_frame()
