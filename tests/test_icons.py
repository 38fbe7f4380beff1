import math
from types import SimpleNamespace

import pytest

from ispdexa.icons import (
    ARROW_SIZE,
    CHOSEN_LINK_COLOR,
    ICON_HEIGHT,
    ICON_WIDTH,
    LINK_COLOR,
    LinkIcon,
    PixmapIcon,
    PixmapPair,
    Rect,
    machine_icon,
    schema_icon,
    switch_icon,
)


def make_owner():
    calls = []
    owner = SimpleNamespace(connected_links={}, show_configuration=lambda: calls.append(1))
    owner.calls = calls
    return owner


def make_link(a, b):
    link = SimpleNamespace(connections=SimpleNamespace(begin=a, end=b))
    link.icon = LinkIcon(link)
    return link


def connected_pair():
    a, b = make_owner(), make_owner()
    a.icon = machine_icon(a)
    b.icon = switch_icon(b)
    b.icon.set_pos(200, 100)
    link = make_link(a, b)
    a.connected_links[0] = link
    b.connected_links[0] = link
    link.icon.draw()
    return a, b, link


def test_from_corners_is_normalized():
    assert Rect.from_corners(10, 20, 0, 5) == Rect.from_corners(0, 5, 10, 20)
    rect = Rect.from_corners(10, 20, 0, 5)
    assert rect.width >= 0 and rect.height >= 0


def test_contains_point_includes_edges():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains_point(0, 0)
    assert rect.contains_point(10, 10)
    assert not rect.contains_point(10.5, 5)


def test_null_rect_contains_nothing():
    assert not Rect().contains_point(0, 0)
    assert not Rect(0, 0, 10, 10).contains_rect(Rect())


def test_contains_rect():
    outer = Rect(0, 0, 100, 100)
    assert outer.contains_rect(Rect(10, 10, 20, 20))
    assert not outer.contains_rect(Rect(90, 90, 20, 20))


def test_united_holds_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(50, -5, 10, 10)
    union = a.united(b)
    assert union.contains_rect(a)
    assert union.contains_rect(b)
    assert (a | b) == union


def test_united_with_null_returns_other():
    a = Rect(3, 4, 5, 6)
    assert Rect().united(a) == a
    assert a.united(Rect()) == a


@pytest.mark.parametrize(
    "factory, normal, selected",
    [
        (machine_icon, ":icons/pc.png", ":icons/pcSelected.png"),
        (schema_icon, ":icons/cluster.png", ":icons/clusterSelected.png"),
        (switch_icon, ":icons/switch.svg", ":icons/switchSelected.png"),
    ],
)
def test_factories_pick_images(factory, normal, selected):
    owner = make_owner()
    icon = factory(owner)
    assert icon.owner is owner
    assert icon.pixmap == normal
    icon.toggle_chosen()
    assert icon.pixmap == selected
    assert icon.chosen


def test_icon_size_is_fixed():
    icon = machine_icon(make_owner())
    assert icon.size == (ICON_WIDTH, ICON_HEIGHT)
    assert icon.size == (50, 50)


def test_middle_is_centre_of_bounding_rect():
    icon = PixmapIcon(make_owner(), PixmapPair("a.png", "b.png"))
    icon.set_pos(10, 20)
    rect = icon.scene_bounding_rect()
    mx, my = icon.middle()
    assert rect.contains_point(mx, my)
    assert mx - rect.x == rect.right - mx
    assert my - rect.y == rect.bottom - my
    assert (rect.x, rect.y) == icon.pos


def test_click_toggles_selection():
    icon = machine_icon(make_owner())
    icon.press()
    icon.release()
    assert icon.chosen
    icon.press()
    icon.release()
    assert not icon.chosen


def test_drag_does_not_toggle_and_moves():
    icon = machine_icon(make_owner())
    icon.press()
    icon.drag_to(30, 40)
    icon.release()
    assert not icon.chosen
    assert icon.pos == (30.0, 40.0)
    icon.press()
    icon.release()
    assert icon.chosen


def test_double_click_shows_configuration():
    owner = make_owner()
    icon = machine_icon(owner)
    icon.double_click()
    assert owner.calls == [1]


def test_link_draw_spans_icon_middles():
    a, b, link = connected_pair()
    assert link.icon.polygon == (a.icon.middle(), b.icon.middle())
    assert link.icon.pen.color == LINK_COLOR
    assert link.icon.pen.width == 2
    assert link.icon.z_value == -1


def test_dragging_icon_updates_link():
    a, b, link = connected_pair()
    a.icon.press()
    a.icon.drag_to(400, 300)
    a.icon.release()
    assert link.icon.polygon[0] == a.icon.middle()
    assert link.icon.polygon[1] == b.icon.middle()


def test_link_bounding_rect_holds_endpoints():
    a, b, link = connected_pair()
    rect = link.icon.scene_bounding_rect()
    for x, y in link.icon.polygon:
        assert rect.contains_point(x, y)


def test_link_toggle_changes_colour():
    _, _, link = connected_pair()
    link.icon.toggle_chosen()
    assert link.icon.chosen
    assert link.icon.pen.color == CHOSEN_LINK_COLOR
    link.icon.press()
    assert not link.icon.chosen
    assert link.icon.pen.color == LINK_COLOR