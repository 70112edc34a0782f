import pytest

from tacboard.models import (
    BoardDocument,
    DrawingElement,
    EquipmentElement,
    Orientation,
    PitchSettings,
    PlayerElement,
    Position,
    Step,
    TextElement,
    ZoneElement,
)
from tacboard.orientation import (
    OrientationTransform,
    change_orientation,
    rotate_value,
    transform_element,
    transform_elements,
    transform_point,
    transform_steps,
)

PORTRAIT = Orientation.PORTRAIT
LANDSCAPE = Orientation.LANDSCAPE


def _round_trip(element, pitch):
    return transform_element(transform_element(element, PORTRAIT, pitch), LANDSCAPE, pitch)


def test_point_rotates_about_inner_centre(pitch):
    # landscape inner centre maps to portrait inner centre
    centre = transform_point(Position(x=40 + 525, y=40 + 340), PORTRAIT, pitch)
    assert centre.x == pytest.approx(40 + 340)
    assert centre.y == pytest.approx(40 + 525)

    moved = transform_point(Position(x=100, y=100), PORTRAIT, pitch)
    assert (moved.x, moved.y) == pytest.approx((660, 100))


def test_inner_corners_stay_inside_the_turned_surface(pitch):
    top_left = transform_point(Position(x=40, y=40), PORTRAIT, pitch)
    assert (top_left.x, top_left.y) == pytest.approx((720, 40))
    bottom_right = transform_point(Position(x=1090, y=720), PORTRAIT, pitch)
    assert (bottom_right.x, bottom_right.y) == pytest.approx((40, 1090))


def test_directions_are_inverse(pitch):
    p = Position(x=123.4, y=567.8)
    there = transform_point(p, PORTRAIT, pitch)
    back = transform_point(there, LANDSCAPE, pitch)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_player_orientation_to_portrait(pitch, player):
    result = transform_element(player, PORTRAIT, pitch)
    assert result.orientation == 260
    assert player.orientation == 350


def test_equipment_rotation_to_landscape(pitch):
    cone = EquipmentElement(id="e1", position=Position(x=300, y=300), equipment_type="cone", rotation=270, color="#f97316")
    result = transform_element(cone, LANDSCAPE, pitch)
    assert result.rotation == 0


def test_unset_orientation_stays_unset(pitch):
    player = PlayerElement(id="p1", position=Position(x=100, y=100), team="away", number=4)
    result = transform_element(player, PORTRAIT, pitch)
    assert result.orientation is None
    assert result.position != player.position


def test_text_stays_upright(pitch):
    text = TextElement(
        id="t1", position=Position(x=200, y=200), content="Overload", font_size=16,
        font_family="Inter", color="#fff", rotation=45,
    )
    for target in (PORTRAIT, LANDSCAPE):
        assert transform_element(text, target, pitch).rotation == 0


def test_text_without_rotation_keeps_none(pitch):
    text = TextElement(id="t1", position=Position(x=200, y=200), content="A", font_size=16, font_family="Inter", color="#fff")
    assert transform_element(text, PORTRAIT, pitch).rotation is None


def test_drawing_points_round_trip(pitch):
    drawing = DrawingElement(
        id="d1", drawing_type="freehand", points=[100, 100, 200, 200, 300, 150],
        color="#000000", stroke_width=2, opacity=1,
    )
    turned = transform_element(drawing, PORTRAIT, pitch)
    assert len(turned.points) == 6
    assert list(turned.points) != list(drawing.points)

    back = transform_element(turned, LANDSCAPE, pitch)
    assert len(back.points) == 6
    assert list(back.points) == pytest.approx([100, 100, 200, 200, 300, 150], abs=0.1)


def test_zone_box_turns_with_the_surface(pitch):
    zone = ZoneElement(
        id="z1", position=Position(x=100, y=100), shape="rect", width=120, height=80,
        fill_color="#22c55e", opacity=0.25,
    )
    turned = transform_element(zone, PORTRAIT, pitch)
    assert (turned.position.x, turned.position.y) == pytest.approx((580, 100))
    assert turned.width == pytest.approx(80)
    assert turned.height == pytest.approx(120)

    back = transform_element(turned, LANDSCAPE, pitch)
    assert (back.position.x, back.position.y) == pytest.approx((100, 100))
    assert (back.width, back.height) == pytest.approx((120, 80))


def test_every_variant_round_trips(pitch, mixed_elements):
    for element in mixed_elements:
        back = _round_trip(element, pitch)
        assert type(back) is type(element)
        assert back.id == element.id
        if hasattr(element, "position"):
            assert back.position.x == pytest.approx(element.position.x, abs=0.1)
            assert back.position.y == pytest.approx(element.position.y, abs=0.1)
        if isinstance(element, EquipmentElement):
            assert back.rotation == element.rotation
        if isinstance(element, PlayerElement):
            assert back.orientation == element.orientation


def test_arrow_endpoints_and_curve_round_trip(pitch, mixed_elements):
    arrow = next(el for el in mixed_elements if el.type == "arrow")
    back = _round_trip(arrow, pitch)
    for name in ("start_point", "end_point", "curve_control"):
        original = getattr(arrow, name)
        restored = getattr(back, name)
        assert restored.x == pytest.approx(original.x, abs=0.1)
        assert restored.y == pytest.approx(original.y, abs=0.1)


def test_round_trip_starting_in_portrait(pitch, player):
    back = transform_element(transform_element(player, LANDSCAPE, pitch), PORTRAIT, pitch)
    assert back.orientation == player.orientation
    assert back.position.x == pytest.approx(player.position.x, abs=0.1)
    assert back.position.y == pytest.approx(player.position.y, abs=0.1)


@pytest.mark.parametrize("delta", [-90, 90])
def test_rotate_value_stays_in_range(delta):
    for r in range(0, 360):
        assert 0 <= rotate_value(r, delta) < 360


def test_unknown_element_passes_through(pitch, caplog):
    stranger = {"id": "x", "kind": "hologram"}
    with caplog.at_level("WARNING", logger="tacboard.orientation"):
        result = OrientationTransform(PORTRAIT, pitch).transform_element(stranger)
    assert result is stranger
    assert "unknown element" in caplog.text


def test_transform_elements_leaves_input_untouched(pitch, mixed_elements):
    snapshot = [el.model_copy(deep=True) for el in mixed_elements]
    result = transform_elements(mixed_elements, PORTRAIT, pitch)
    assert len(result) == len(mixed_elements)
    assert mixed_elements == snapshot
    assert all(el.rotation == 0 for el in result if el.type == "text")


def test_transform_steps_turns_every_step(pitch, player):
    steps = [Step(id="s1", name="a", elements=[player]), Step(id="s2", name="b", elements=[player])]
    result = transform_steps(steps, PORTRAIT, pitch)
    assert [s.id for s in result] == ["s1", "s2"]
    assert all(s.elements[0].orientation == 260 for s in result)


def _doc(pitch, player, orientation=None):
    return BoardDocument(
        version="1.0.0",
        name="Flip",
        steps=[Step(id="s1", name="a", elements=[player])],
        pitch_config=pitch,
        pitch_settings=PitchSettings(orientation=orientation) if orientation else None,
    )


def test_change_orientation_updates_settings_and_steps(pitch, player):
    document = _doc(pitch, player)
    turned = change_orientation(document, PORTRAIT)
    assert turned.pitch_settings.orientation is PORTRAIT
    assert turned.steps[0].elements[0].orientation == 260
    assert turned.pitch_config == pitch


def test_change_orientation_same_target_is_noop(pitch, player):
    document = _doc(pitch, player, orientation=PORTRAIT)
    assert change_orientation(document, "portrait") is document


@pytest.mark.parametrize("angle", [10.3, 0.000001, 89.999999, 359.5, 123.456789])
def test_fractional_angles_round_trip_exactly(pitch, angle):
    player = PlayerElement(id="p9", position=Position(x=200, y=300), team="away", number=9, orientation=angle)
    assert _round_trip(player, pitch).orientation == player.orientation

    cone = EquipmentElement(id="e9", position=Position(x=200, y=300), equipment_type="cone", rotation=angle, color="#f97316")
    assert _round_trip(cone, pitch).rotation == cone.rotation


def test_rotate_value_never_reaches_360():
    assert rotate_value(359.9999999, 90) == pytest.approx(89.9999999, abs=1e-6)
    assert rotate_value(269.9999999, 90) == 0.0
