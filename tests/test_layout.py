import pytest

from topiman.layout import (
    FinishLayout,
    MenuLayout,
    Rect,
    RuleLayout,
    StoryLayout,
    finish_layout,
    menu_layout,
    rule_layout,
    score_rect,
    story_layout,
    tile_size,
)

SIZES = [(1500, 800), (1200, 750), (640, 480), (1920, 1080)]


def _inside_window(rect, width, height):
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.w <= width
        and rect.y + rect.h <= height
    )


def _overlap(a, b):
    return not (
        a.x + a.w <= b.x or b.x + b.w <= a.x or a.y + a.h <= b.y or b.y + b.h <= a.y
    )


def test_contains_is_strict_on_edges():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains(11, 21)
    assert rect.contains(39, 59)
    assert not rect.contains(10, 30)
    assert not rect.contains(20, 20)
    assert not rect.contains(40, 30)
    assert not rect.contains(20, 60)


def test_contains_rejects_points_outside():
    rect = Rect(0, 0, 5, 5)
    assert not rect.contains(-1, 2)
    assert not rect.contains(2, 100)


def test_scaled_truncates():
    assert Rect.scaled(1.9, 2.2, 3.99, 4.0) == Rect(1, 2, 3, 4)


def test_as_tuple_round_trip():
    rect = Rect(3, 4, 5, 6)
    assert Rect(*rect.as_tuple()) == rect


@pytest.mark.parametrize("width,height", SIZES)
def test_menu_buttons_inside_window_and_disjoint(width, height):
    layout = menu_layout(width, height)
    assert isinstance(layout, MenuLayout)
    buttons = [layout.start, layout.rules, layout.exit]
    assert all(_inside_window(b, width, height) for b in buttons)
    assert not _overlap(layout.start, layout.rules)
    assert not _overlap(layout.rules, layout.exit)
    assert not _overlap(layout.start, layout.exit)
    assert layout.start.y < layout.rules.y < layout.exit.y


def test_menu_layout_scales_with_window():
    small = menu_layout(750, 400)
    large = menu_layout(1500, 800)
    assert abs(large.start.w - 2 * small.start.w) <= 1
    assert abs(large.exit.y - 2 * small.exit.y) <= 1


@pytest.mark.parametrize("width,height", SIZES)
def test_rule_layout_geometry(width, height):
    layout = rule_layout(width, height)
    assert isinstance(layout, RuleLayout)
    assert _inside_window(layout.ok, width, height)
    assert _inside_window(layout.rules, width, height)
    assert abs(2 * layout.rules.x + layout.rules.w - width) <= 2
    assert layout.ok.y > layout.rules.y


@pytest.mark.parametrize("width,height", SIZES)
def test_finish_buttons_side_by_side(width, height):
    layout = finish_layout(width, height)
    assert isinstance(layout, FinishLayout)
    assert (layout.yes.w, layout.yes.h, layout.yes.y) == (
        layout.no.w,
        layout.no.h,
        layout.no.y,
    )
    assert layout.yes.x + layout.yes.w < layout.no.x
    assert not _overlap(layout.yes, layout.no)
    assert _inside_window(layout.yes, width, height)
    assert _inside_window(layout.no, width, height)


@pytest.mark.parametrize("width,height", SIZES)
def test_story_layout(width, height):
    layout = story_layout(width, height)
    assert isinstance(layout, StoryLayout)
    assert _inside_window(layout.go, width, height)
    assert layout.font_size > 0
    assert layout.font_size * 2 <= layout.go.h


def test_tile_size_for_default_window():
    assert tile_size(1500, 800) == (37, 32)


@pytest.mark.parametrize("k", [1, 7, 30])
def test_tile_size_exact_multiples(k):
    assert tile_size(40 * k, 25 * k) == (k, k)


@pytest.mark.parametrize("width,height", SIZES)
def test_score_rect_at_top_and_inside(width, height):
    rect = score_rect(width, height)
    assert rect.y == 0
    assert _inside_window(rect, width, height)
    assert rect.x < width // 2 < rect.x + rect.w