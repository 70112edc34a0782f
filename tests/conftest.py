"""Shared fixtures for board engine tests."""
import pytest

from tacboard.models import (
    ArrowElement,
    BallElement,
    DrawingElement,
    EquipmentElement,
    PitchConfig,
    PlayerElement,
    Position,
    Step,
    TextElement,
    ZoneElement,
)


@pytest.fixture
def pitch():
    return PitchConfig(width=1050, height=680, padding=40, grid_size=10)


@pytest.fixture
def player():
    return PlayerElement(id="p1", position=Position(x=300, y=200), team="home", number=7, orientation=350)


@pytest.fixture
def mixed_elements():
    """One element of every variant."""
    return [
        PlayerElement(id="p1", position=Position(x=300, y=200), team="home", number=7, orientation=90),
        BallElement(id="b1", position=Position(x=565, y=380)),
        ArrowElement(
            id="a1",
            arrow_type="pass",
            start_point=Position(x=100, y=100),
            end_point=Position(x=400, y=250),
            curve_control=Position(x=250, y=120),
        ),
        ZoneElement(
            id="z1",
            position=Position(x=100, y=100),
            shape="rect",
            width=120,
            height=80,
            fill_color="#22c55e",
            opacity=0.25,
        ),
        TextElement(
            id="t1",
            position=Position(x=700, y=90),
            content="Press high",
            font_size=18,
            font_family="Inter",
            color="#ffffff",
            rotation=45,
        ),
        DrawingElement(
            id="d1",
            drawing_type="freehand",
            points=[100, 100, 200, 200, 300, 150],
            color="#ff0000",
            stroke_width=3,
            opacity=1,
        ),
        EquipmentElement(id="e1", position=Position(x=800, y=500), equipment_type="cone", rotation=270, color="#f97316"),
    ]


@pytest.fixture
def two_steps():
    first = Step(
        id="s1",
        name="Build up",
        duration=1000,
        elements=[
            PlayerElement(id="p1", position=Position(x=0, y=0), team="home", number=7),
            ZoneElement(id="z1", position=Position(x=0, y=0), shape="rect", width=100, height=50, fill_color="#000", opacity=0.3),
            ArrowElement(id="a1", arrow_type="run", start_point=Position(x=0, y=0), end_point=Position(x=10, y=10)),
            BallElement(id="b1", position=Position(x=50, y=50)),
        ],
    )
    second = Step(
        id="s2",
        name="Switch play",
        duration=1000,
        elements=[
            PlayerElement(id="p1", position=Position(x=100, y=200), team="home", number=7),
            ZoneElement(id="z1", position=Position(x=40, y=20), shape="rect", width=200, height=150, fill_color="#000", opacity=0.3),
            ArrowElement(id="a1", arrow_type="run", start_point=Position(x=20, y=40), end_point=Position(x=110, y=210)),
            # same id, but a variant without an anchor point
            DrawingElement(id="b1", drawing_type="freehand", points=[0, 0, 5, 5], color="#f00", stroke_width=3, opacity=1),
        ],
    )
    return [first, second]
