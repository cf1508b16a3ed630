"""The game loop and the command that runs the whole game."""

from __future__ import annotations

import argparse
import enum
import random
import sys
from pathlib import Path

import pygame

from topiman.board import Board
from topiman.game import Event, GameState
from topiman.renderer import SpriteSet, draw_board
from topiman.screens import run_finish, run_menu, run_story
from topiman.sound import SoundManager

WINDOW_SIZE = (1500, 800)
WINDOW_TITLE = "Topi"
FONT_SIZE = 12
TICK_MS = 240
CLEAR_COLOR = (0, 0, 0)

_KEY_DIRECTIONS = {
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
}


class Outcome(enum.Enum):
    """How a tick of the game, or a whole round, ended."""

    CONTINUE = "continue"
    CAUGHT = "caught"
    ESCAPED = "escaped"
    QUIT = "quit"


def direction_for_key(key: int) -> tuple[int, int] | None:
    """The step a steering key selects, or None for any other key."""
    return _KEY_DIRECTIONS.get(key)


def step(
    state: GameState, board: Board, rng: random.Random
) -> tuple[Outcome, Event | None]:
    """Advance the round by one tick.

    Returns what the tick led to and the pickup event of the player's move,
    if there was one.
    """
    if state.virus_caught_player() and state.virus_frozen == 0:
        return Outcome.CAUGHT, None

    event = state.move_player(board, rng)
    if state.is_winner:
        return Outcome.ESCAPED, event

    state.move_virus(board)
    return Outcome.CONTINUE, event


def _is_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return (
        event.type in (pygame.KEYDOWN, pygame.KEYUP)
        and getattr(event, "key", None) == pygame.K_ESCAPE
    )


def run_game(
    screen: pygame.Surface,
    sprites: SpriteSet,
    sounds: SoundManager,
    state: GameState,
    board: Board,
    font: pygame.font.Font | None,
    rng: random.Random,
) -> Outcome:
    """Play one round until the player escapes, is caught or quits."""
    while True:
        for event in pygame.event.get():
            if _is_quit(event):
                return Outcome.QUIT
            if event.type == pygame.KEYUP:
                direction = direction_for_key(event.key)
                if direction is not None:
                    state.set_direction(*direction)
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.get_surface() or screen

        outcome, pickup = step(state, board, rng)
        if outcome is Outcome.CAUGHT:
            sounds.play_defeat()
            screen.fill(CLEAR_COLOR)
            return outcome
        sounds.play_event(pickup)
        if outcome is Outcome.ESCAPED:
            screen.fill(CLEAR_COLOR)
            return outcome

        screen.fill(CLEAR_COLOR)
        draw_board(screen, sprites, state, board, font)
        if pygame.display.get_surface() is not None:
            pygame.display.flip()
        pygame.time.delay(TICK_MS)


def _load_font(resource_dir: Path) -> pygame.font.Font | None:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(str(resource_dir / "font.ttf"), FONT_SIZE)
    except (pygame.error, FileNotFoundError, OSError):
        pass
    try:
        return pygame.font.Font(None, FONT_SIZE)
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="topiman", description="Collect the cash, grab the antiseptic, escape."
    )
    parser.add_argument(
        "--resources", default="resources", help="directory holding the game's assets"
    )
    parser.add_argument(
        "--map", dest="map_path", default=None, help="map file (default: RESOURCES/map)"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for freeze spawns")
    parser.add_argument("--mute", action="store_true", help="play without sound")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the menu, the story and rounds of the game until the player stops."""
    args = _parse_args(argv)
    resource_dir = Path(args.resources)
    map_path = Path(args.map_path) if args.map_path else resource_dir / "map"

    try:
        board = Board.load(map_path)
    except (OSError, ValueError) as exc:
        print(f"topiman: cannot load map {map_path}: {exc}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = _load_font(resource_dir)
        sprites = SpriteSet.load(resource_dir)
        state = GameState()

        with SoundManager(resource_dir, enabled=not args.mute) as sounds:
            sounds.play_menu_music()
            if not run_menu(screen, resource_dir):
                return 0
            if not run_story(pygame.display.get_surface() or screen, resource_dir):
                return 0
            sounds.stop_music()

            while True:
                sounds.play_game_music()
                run_game(
                    pygame.display.get_surface() or screen,
                    sprites, sounds, state, board, font, rng,
                )
                sounds.stop_music()

                if state.is_winner:
                    sounds.play_victory_music()
                else:
                    sounds.play_defeat_music()
                again = run_finish(
                    pygame.display.get_surface() or screen, resource_dir, state.is_winner
                )
                sounds.stop_music()
                if not again:
                    return 0

                state.reset()
                board = Board.load(map_path)
    finally:
        pygame.quit()