"""Menu, rules, story and end-of-round screens driven by mouse input."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Iterator

import pygame

from topiman.layout import (
    FinishLayout,
    MenuLayout,
    Rect,
    finish_layout,
    menu_layout,
    rule_layout,
    story_layout,
)

BACKGROUND_COLOR = (0, 0, 0)
GO_COLOR = (0, 0, 0)
GO_ACTIVE_COLOR = (255, 255, 0)
GO_LABEL = "GO"


class Scene(enum.Enum):
    """Where the menu flow goes next."""

    MENU = "menu"
    RULE = "rule"
    GAME = "game"
    EXIT = "exit"


class MenuButton(enum.Enum):
    """A button of the main menu, or none."""

    START = "start"
    RULES = "rules"
    EXIT = "exit"
    NONE = "none"


class FinishButton(enum.Enum):
    """A button of the end-of-round page, or none."""

    YES = "yes"
    NO = "no"
    NONE = "none"


def hovered_menu_button(layout: MenuLayout, x: int, y: int) -> MenuButton:
    """The main menu button under the point, checked start, rules, exit."""
    if layout.start.contains(x, y):
        return MenuButton.START
    if layout.rules.contains(x, y):
        return MenuButton.RULES
    if layout.exit.contains(x, y):
        return MenuButton.EXIT
    return MenuButton.NONE


def hovered_finish_button(layout: FinishLayout, x: int, y: int) -> FinishButton:
    """The end-of-round button under the point, checked yes then no."""
    if layout.yes.contains(x, y):
        return FinishButton.YES
    if layout.no.contains(x, y):
        return FinishButton.NO
    return FinishButton.NONE


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _load_ui(resource_dir: str | Path, names: dict[str, str]) -> dict[str, pygame.Surface | None]:
    base = Path(resource_dir) / "UI"
    return {key: _load_image(base / file) for key, file in names.items()}


def _load_font(resource_dir: str | Path, size: int) -> pygame.font.Font | None:
    size = max(1, size)
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(str(Path(resource_dir) / "font.ttf"), size)
    except (pygame.error, FileNotFoundError, OSError):
        pass
    try:
        return pygame.font.Font(None, size)
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _blit(surface: pygame.Surface, image: pygame.Surface | None, rect: Rect) -> None:
    if image is None or rect.w <= 0 or rect.h <= 0:
        return
    surface.blit(pygame.transform.scale(image, (rect.w, rect.h)), (rect.x, rect.y))


def _draw_background(surface: pygame.Surface, image: pygame.Surface | None) -> None:
    surface.fill(BACKGROUND_COLOR)
    width, height = surface.get_size()
    _blit(surface, image, Rect(0, 0, width, height))


def _surface(screen: pygame.Surface) -> pygame.Surface:
    return pygame.display.get_surface() or screen


def _present() -> None:
    if pygame.display.get_surface() is not None:
        pygame.display.flip()


def _events() -> Iterator[pygame.event.Event]:
    while True:
        yield pygame.event.wait()


_MENU_FILES = {
    "background": "head_menu_background.bmp",
    "start": "start_button.bmp",
    "rules": "rules_button.bmp",
    "exit": "exit_button.bmp",
    "start_active": "start_active_button.bmp",
    "rules_active": "rules_active_button.bmp",
    "exit_active": "exit_active_button.bmp",
}

_RULE_FILES = {
    "background": "head_menu_background.bmp",
    "ok": "exit_button.bmp",
    "ok_active": "exit_active_button.bmp",
    "rules": "rules.bmp",
}

_FINISH_FILES = {
    "yes": "yes_button.bmp",
    "yes_active": "yes_active_button.bmp",
    "no": "no_button.bmp",
    "no_active": "no_active_button.bmp",
}


def _draw_menu(surface, images, layout: MenuLayout, active: MenuButton) -> None:
    _draw_background(surface, images["background"])
    for button, rect in (
        (MenuButton.START, layout.start),
        (MenuButton.RULES, layout.rules),
        (MenuButton.EXIT, layout.exit),
    ):
        key = button.value + ("_active" if button is active else "")
        _blit(surface, images[key], rect)


def _menu_page(screen: pygame.Surface, images) -> Scene:
    layout = menu_layout(*screen.get_size())
    current = MenuButton.NONE
    _draw_menu(screen, images, layout, current)
    _present()
    for event in _events():
        if event.type == pygame.QUIT:
            return Scene.EXIT
        if event.type == pygame.MOUSEMOTION:
            hovered = hovered_menu_button(layout, *event.pos)
            if hovered is not current:
                current = hovered
                _draw_menu(screen, images, layout, current)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if layout.rules.contains(x, y):
                return Scene.RULE
            if layout.exit.contains(x, y):
                return Scene.EXIT
            if layout.start.contains(x, y):
                return Scene.GAME
        elif event.type == pygame.VIDEORESIZE:
            screen = _surface(screen)
            layout = menu_layout(event.w, event.h)
            _draw_menu(screen, images, layout, MenuButton.NONE)
        _present()
    return Scene.EXIT


def run_menu(screen: pygame.Surface, resource_dir: str | Path) -> bool:
    """Show the main menu; True when the player chose to start the game."""
    images = _load_ui(resource_dir, _MENU_FILES)
    while True:
        scene = _menu_page(_surface(screen), images)
        if scene is Scene.RULE:
            if run_rules(_surface(screen), resource_dir):
                continue
            return False
        return scene is Scene.GAME


def run_rules(screen: pygame.Surface, resource_dir: str | Path) -> bool:
    """Show the rules; True to go back to the menu, False when the window closes."""
    images = _load_ui(resource_dir, _RULE_FILES)
    layout = rule_layout(*screen.get_size())
    active = False

    def draw(ok_active: bool) -> None:
        _draw_background(screen, images["background"])
        _blit(screen, images["rules"], layout.rules)
        _blit(screen, images["ok_active" if ok_active else "ok"], layout.ok)

    draw(active)
    _present()
    for event in _events():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEMOTION:
            inside = layout.ok.contains(*event.pos)
            if inside != active:
                active = inside
                draw(active)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if layout.ok.contains(*event.pos):
                return True
        elif event.type == pygame.VIDEORESIZE:
            screen = _surface(screen)
            layout = rule_layout(event.w, event.h)
            draw(False)
        _present()
    return False


def run_story(screen: pygame.Surface, resource_dir: str | Path) -> bool:
    """Show the story page; True once GO is clicked, False when the window closes."""
    background = _load_image(Path(resource_dir) / "UI" / "story.bmp")

    def prepare(width: int, height: int):
        layout = story_layout(width, height)
        font = _load_font(resource_dir, layout.font_size)
        if font is None:
            return layout, None, None
        return (
            layout,
            font.render(GO_LABEL, False, GO_COLOR),
            font.render(GO_LABEL, False, GO_ACTIVE_COLOR),
        )

    layout, go, go_active = prepare(*screen.get_size())

    def draw() -> None:
        _draw_background(screen, background)
        _blit(screen, go, layout.go)

    draw()
    _present()
    for event in _events():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEMOTION:
            inside = layout.go.contains(*event.pos)
            _blit(screen, go_active if inside else go, layout.go)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if layout.go.contains(*event.pos):
                return True
        elif event.type == pygame.VIDEORESIZE:
            screen = _surface(screen)
            layout, go, go_active = prepare(event.w, event.h)
            draw()
        _present()
    return False


def run_finish(screen: pygame.Surface, resource_dir: str | Path, is_winner: bool) -> bool:
    """Ask whether to play again; True when the player clicks yes."""
    names = dict(_FINISH_FILES)
    names["background"] = "win_background_1.bmp" if is_winner else "gameover_background.bmp"
    images = _load_ui(resource_dir, names)
    layout = finish_layout(*screen.get_size())
    current = FinishButton.NONE

    def draw(active: FinishButton) -> None:
        _draw_background(screen, images["background"])
        _blit(screen, images["yes_active" if active is FinishButton.YES else "yes"], layout.yes)
        _blit(screen, images["no_active" if active is FinishButton.NO else "no"], layout.no)

    draw(current)
    _present()
    for event in _events():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEMOTION:
            hovered = hovered_finish_button(layout, *event.pos)
            if hovered is not current:
                current = hovered
                draw(current)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if layout.yes.contains(x, y):
                return True
            if layout.no.contains(x, y):
                return False
        elif event.type == pygame.VIDEORESIZE:
            screen = _surface(screen)
            layout = finish_layout(event.w, event.h)
            draw(FinishButton.NONE)
        _present()
    return False