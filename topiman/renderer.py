"""Drawing the board, its sprites and the score onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import pygame

from topiman.animation import Animation
from topiman.board import Board, Tile
from topiman.game import GameState
from topiman.layout import Rect, score_rect, tile_size

SCORE_COLOR = (255, 0, 0)
POINT_COLOR = (0, 0, 0)

_STATIC_FILES = {
    "antiseptic": "weapon_lavish_sword.png",
    "coin": "money.png",
    "freeze": "freeze.png",
    "wall": "wall_left.png",
    "floor": "floor_1.png",
    "grass": "grass_image.png",
    "doors_open": "doors_leaf_open.png",
    "doors_closed": "doors_leaf_closed.png",
    "wizard": "wizzard_m_hit_anim_f0.png",
    "frozen_enemy": "big_demon_frozen.png",
}

_ANIMATION_FILES = {
    "player_down": ("Topi1.png", "Topi2.png", "Topi3.png"),
    "player_up": ("Topi_S1.png", "Topi_S2.png", "Topi_S3.png"),
    "player_left": ("Topi_L1.png", "Topi_L2.png", "Topi_L3.png"),
    "player_right": ("Topi_P1.png", "Topi_P2.png", "Topi_P3.png"),
    "enemy": (
        "big_demon_idle_anim_f01.png",
        "big_demon_idle_anim_f02.png",
        "big_demon_idle_anim_f03.png",
    ),
}

Image = "pygame.Surface | None"


def _load_image(path: Path) -> pygame.Surface | None:
    """Load an image, or None when it is missing or unreadable."""
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


@dataclass
class SpriteSet:
    """Every picture the board needs; a missing picture is None and not drawn."""

    wall: pygame.Surface | None
    floor: pygame.Surface | None
    grass: pygame.Surface | None
    coin: pygame.Surface | None
    freeze: pygame.Surface | None
    antiseptic: pygame.Surface | None
    doors_open: pygame.Surface | None
    doors_closed: pygame.Surface | None
    wizard: pygame.Surface | None
    frozen_enemy: pygame.Surface | None
    player_down: Animation
    player_up: Animation
    player_left: Animation
    player_right: Animation
    enemy: Animation

    @classmethod
    def load(cls, resource_dir: str | Path) -> "SpriteSet":
        """Load the sprites from the game's resource directory."""
        base = Path(resource_dir)
        statics = {name: _load_image(base / file) for name, file in _STATIC_FILES.items()}
        animations = {
            name: Animation(_load_image(base / file) for file in files)
            for name, files in _ANIMATION_FILES.items()
        }
        return cls(**statics, **animations)

    def player_animation(self, dx: int, dy: int) -> Animation | None:
        """The walking animation for a direction, or None for any other step."""
        return {
            (0, 1): self.player_down,
            (0, -1): self.player_up,
            (1, 0): self.player_right,
            (-1, 0): self.player_left,
        }.get((dx, dy))


def _blit(surface: pygame.Surface, image: pygame.Surface | None, rect: Rect) -> None:
    if image is None or rect.w <= 0 or rect.h <= 0:
        return
    surface.blit(pygame.transform.scale(image, (rect.w, rect.h)), (rect.x, rect.y))


def _point(surface: pygame.Surface, x: int, y: int) -> None:
    if 0 <= x < surface.get_width() and 0 <= y < surface.get_height():
        surface.set_at((x, y), POINT_COLOR)


class _Painter:
    """Draws single cells for a window of a fixed size."""

    def __init__(self, surface: pygame.Surface, sprites: SpriteSet) -> None:
        self.surface = surface
        self.sprites = sprites
        self.width, self.height = surface.get_size()

    def full_cell(self, x: int, y: int) -> Rect:
        return Rect(x, y, self.width // 40, self.height // 25)

    def floor(self, x: int, y: int) -> None:
        _blit(self.surface, self.sprites.floor,
              Rect(x, y, self.width // 41, self.height // 26))

    def wall(self, x: int, y: int) -> None:
        _blit(self.surface, self.sprites.wall,
              Rect(x, y, self.width // 41, self.height // 26))

    def _small_item(self, image: pygame.Surface | None, x: int, y: int) -> None:
        self.floor(x, y)
        w, h = self.width, self.height
        _blit(self.surface, image,
              Rect(x + w // 240, y + h // 150, w // 67, h // 41))
        _point(self.surface, x + w // 80, y + h // 50)
        _point(self.surface, x + w // 80, y + h // 41)

    def coin(self, x: int, y: int) -> None:
        self._small_item(self.sprites.coin, x, y)

    def freeze(self, x: int, y: int) -> None:
        self._small_item(self.sprites.freeze, x, y)

    def freedom(self, x: int, y: int) -> None:
        _blit(self.surface, self.sprites.grass, self.full_cell(x, y))

    def doors_closed(self, x: int, y: int) -> None:
        self.freedom(x, y)
        _blit(self.surface, self.sprites.doors_closed, self.full_cell(x, y))

    def doors_open(self, x: int, y: int) -> None:
        self.freedom(x, y)
        _blit(self.surface, self.sprites.doors_open, self.full_cell(x, y))

    def antiseptic(self, x: int, y: int) -> None:
        self.floor(x, y)
        _blit(self.surface, self.sprites.antiseptic,
              Rect(x + self.width // 240, y, self.width // 60, self.height // 25))

    def _enemy_rect(self, x: int, y: int) -> Rect:
        return Rect(x, y - self.height // 150, self.width // 40, self.height // 25)

    def enemy(self, x: int, y: int) -> None:
        self.floor(x, y)
        _blit(self.surface, self.sprites.enemy.next_frame(), self._enemy_rect(x, y))

    def frozen_enemy(self, x: int, y: int) -> None:
        self.floor(x, y)
        _blit(self.surface, self.sprites.frozen_enemy, self._enemy_rect(x, y))

    def wizard(self, x: int, y: int) -> None:
        _blit(self.surface, self.sprites.wizard, self.full_cell(x, y))

    def player(self, x: int, y: int, direction: tuple[int, int]) -> None:
        animation = self.sprites.player_animation(*direction)
        if animation is not None:
            _blit(self.surface, animation.next_frame(), self.full_cell(x, y))


def score_text(score: int) -> str:
    """The label shown for a score."""
    return f"CASH: {score}"


def draw_score(surface: pygame.Surface, font: pygame.font.Font | None, score: int) -> Rect:
    """Draw the score label at the top of the window; return where it goes."""
    width, height = surface.get_size()
    rect = score_rect(width, height)
    if font is not None:
        text = font.render(score_text(score), False, SCORE_COLOR)
        _blit(surface, text, rect)
    return rect


def draw_board(
    surface: pygame.Surface,
    sprites: SpriteSet,
    state: GameState,
    board: Board,
    font: pygame.font.Font | None,
) -> None:
    """Draw every cell of the board and then the score."""
    state.update_antiseptic(board)
    painter = _Painter(surface, sprites)
    cell_w, cell_h = tile_size(*surface.get_size())

    def draw_player(col: int, row: int, px: int, py: int) -> None:
        if row == 0:
            painter.freedom(px, py)
        elif (col, row) == (2, 1):
            painter.doors_open(px, py)
        else:
            painter.floor(px, py)
        painter.player(px, py, state.direction)

    def draw_virus(col: int, row: int, px: int, py: int) -> None:
        if state.virus_frozen > 0:
            painter.frozen_enemy(px, py)
        else:
            painter.enemy(px, py)

    def draw_freedom(col: int, row: int, px: int, py: int) -> None:
        painter.freedom(px, py)
        if (col, row) == (1, 0):
            painter.wizard(px, py)

    def draw_antiseptic(col: int, row: int, px: int, py: int) -> None:
        painter.floor(px, py)
        if state.score >= 2000:
            state.antiseptic_appeared = True
            painter.antiseptic(px, py)

    def simple(draw: Callable[[int, int], None]) -> Callable[[int, int, int, int], None]:
        return lambda col, row, px, py: draw(px, py)

    handlers: dict[Tile, Callable[[int, int, int, int], None]] = {
        Tile.EMPTY: simple(painter.floor),
        Tile.COIN: simple(painter.coin),
        Tile.WALL: simple(painter.wall),
        Tile.PLAYER: draw_player,
        Tile.ANTISEPTIC: draw_antiseptic,
        Tile.VIRUS: draw_virus,
        Tile.DOORS_OPEN: simple(painter.doors_open),
        Tile.FREEDOM: draw_freedom,
        Tile.DOORS_CLOSED: simple(painter.doors_closed),
        Tile.FREEZE: simple(painter.freeze),
    }

    for row in range(board.height):
        for col in range(board.width):
            handlers[board.get(col, row)](col, row, col * cell_w, row * cell_h)

    draw_score(surface, font, state.score)