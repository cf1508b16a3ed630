"""Screen geometry: button rectangles, board tiles and the score box."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window pixels."""

    x: int
    y: int
    w: int
    h: int

    @classmethod
    def scaled(cls, x: float, y: float, w: float, h: float) -> "Rect":
        """Build a rectangle from fractional pixels, truncating toward zero."""
        return cls(int(x), int(y), int(w), int(h))

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies strictly inside the rectangle."""
        return self.x < x < self.x + self.w and self.y < y < self.y + self.h

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class MenuLayout:
    """Buttons of the main menu."""

    start: Rect
    rules: Rect
    exit: Rect


@dataclass(frozen=True)
class RuleLayout:
    """The rules picture and the button that leaves the rules page."""

    ok: Rect
    rules: Rect


@dataclass(frozen=True)
class FinishLayout:
    """The play-again buttons shown after a round."""

    yes: Rect
    no: Rect


@dataclass(frozen=True)
class StoryLayout:
    """The story page's GO button and the font size of its label."""

    go: Rect
    font_size: int


def _unit_width(width: int) -> int:
    return int(width / 3.36)


def _unit_height(height: int) -> int:
    return int(height / 13.6)


def menu_layout(width: int, height: int) -> MenuLayout:
    """Main menu buttons for a window of the given size."""
    return MenuLayout(
        start=Rect.scaled(width * 0.34, height * 0.25, width * 0.3, height * 0.2),
        rules=Rect.scaled(width * 0.41, height * 0.5, width * 0.2, height * 0.15),
        exit=Rect.scaled(width * 0.44, height * 0.70, width * 0.14, height * 0.12),
    )


def rule_layout(width: int, height: int) -> RuleLayout:
    """Rules page geometry for a window of the given size."""
    unit_w = _unit_width(width)
    unit_h = _unit_height(height)
    return RuleLayout(
        ok=Rect.scaled(
            width * 0.43, height * 0.9 - unit_h // 2, 0.5 * unit_w, unit_h * 1.2
        ),
        rules=Rect.scaled(width * 0.2, height * 0.15, width * 0.6, height * 0.7),
    )


def finish_layout(width: int, height: int) -> FinishLayout:
    """Yes and no buttons of the end-of-round page."""
    unit_h = _unit_height(height)
    return FinishLayout(
        yes=Rect.scaled(width * 0.30, height * 0.75, 0.1 * width, unit_h * 2.6),
        no=Rect.scaled(width * 0.56, height * 0.75, 0.1 * width, unit_h * 2.6),
    )


def story_layout(width: int, height: int) -> StoryLayout:
    """Story page geometry for a window of the given size."""
    unit_w = _unit_width(width)
    unit_h = _unit_height(height)
    return StoryLayout(
        go=Rect.scaled(width * 0.42, height * 0.85, 0.4 * unit_w, unit_h * 1.2),
        font_size=unit_h // 2,
    )


def tile_size(width: int, height: int) -> tuple[int, int]:
    """Width and height of one board cell."""
    return width // 40, height // 25


def score_rect(width: int, height: int) -> Rect:
    """Where the score text is drawn."""
    return Rect(int(width / 2.5), 0, int(width / 4.8), height // 20)