"""Step timeline operations.

Every function returns a new value and leaves its inputs untouched.
Out-of-range indices make removal and reordering a no-op that hands back
the very same list.
"""
from __future__ import annotations

import time
from typing import Iterable, List, Optional, Sequence

from tacboard.board import generate_id
from tacboard.models.document import DEFAULT_STEP_DURATION, MIN_STEP_DURATION, Step
from tacboard.models.elements import BoardElement


def copy_elements(elements: Iterable[BoardElement]) -> tuple:
    return tuple(el.model_copy(deep=True) for el in elements)


def create_step(elements: Iterable[BoardElement], name: Optional[str] = None, duration: int = DEFAULT_STEP_DURATION) -> Step:
    return Step(
        id=generate_id(),
        name=name if name is not None else f"Step {int(time.time() * 1000)}",
        elements=copy_elements(elements),
        duration=duration,
    )


def duplicate_step(step: Step, name_suffix: str = " (copy)") -> Step:
    return step.model_copy(update={
        "id": generate_id(),
        "name": step.name + name_suffix,
        "elements": copy_elements(step.elements),
    })


def update_step_elements(step: Step, elements: Iterable[BoardElement]) -> Step:
    return step.model_copy(update={"elements": copy_elements(elements)})


def update_step_name(step: Step, name: str) -> Step:
    return step.model_copy(update={"name": name})


def update_step_duration(step: Step, duration: int) -> Step:
    """Durations under the minimum are clamped, never rejected."""
    return step.model_copy(update={"duration": max(MIN_STEP_DURATION, int(duration))})


def insert_step_at(steps: Sequence[Step], step: Step, index: int) -> List[Step]:
    new_steps = list(steps)
    new_steps.insert(index, step)
    return new_steps


def remove_step_at(steps: Sequence[Step], index: int) -> Sequence[Step]:
    if index < 0 or index >= len(steps):
        return steps
    new_steps = list(steps)
    del new_steps[index]
    return new_steps


def move_step(steps: Sequence[Step], from_index: int, to_index: int) -> Sequence[Step]:
    count = len(steps)
    if not (0 <= from_index < count and 0 <= to_index < count):
        return steps
    new_steps = list(steps)
    moved = new_steps.pop(from_index)
    new_steps.insert(to_index, moved)
    return new_steps


def get_total_duration(steps: Iterable[Step]) -> int:
    return sum(step.duration for step in steps)


def find_step_by_id(steps: Iterable[Step], step_id: str) -> Optional[Step]:
    for step in steps:
        if step.id == step_id:
            return step
    return None


def find_step_index_by_id(steps: Sequence[Step], step_id: str) -> int:
    for index, step in enumerate(steps):
        if step.id == step_id:
            return index
    return -1
