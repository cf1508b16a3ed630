"""Game rules: player movement, pickups and the chasing virus."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from topiman.board import Board, Position, Tile

START_PLAYER = Position(1, 2)
START_DIRECTION = (1, 0)
START_VIRUS = Position(21, 21)
DOOR_POSITION = Position(2, 1)
ANTISEPTIC_SPOT = Position(14, 11)

COIN_SCORE = 10
ANTISEPTIC_SCORE = 1000
ANTISEPTIC_THRESHOLD = 2000
FREEZE_SPAWN_INTERVAL = 500
FREEZE_TURNS = 15


class Event(enum.Enum):
    """What happened when the player stepped onto a tile."""

    COIN = "coin"
    FREEZE = "freeze"
    ANTISEPTIC = "antiseptic"
    ESCAPE = "escape"


def random_empty_space(board: Board, rng: random.Random) -> Position:
    """Pick one empty cell of the board at random."""
    empties = board.positions_of(Tile.EMPTY)
    if not empties:
        raise ValueError("the board has no empty tile")
    return rng.choice(empties)


def _sign(value: int) -> int:
    return 1 if value > 0 else -1


@dataclass
class GameState:
    """Positions, score and flags of one round."""

    player: Position = START_PLAYER
    direction: tuple[int, int] = START_DIRECTION
    virus: Position = START_VIRUS
    score: int = 0
    virus_frozen: int = 0
    is_winner: bool = False
    antiseptic_appeared: bool = False
    spawn_freeze: bool = False
    tile_under_virus: Tile = Tile.COIN

    def reset(self) -> None:
        """Start a new round; a running freeze carries over."""
        self.score = 0
        self.is_winner = False
        self.antiseptic_appeared = False
        self.spawn_freeze = False
        self.player = START_PLAYER
        self.direction = START_DIRECTION
        self.virus = START_VIRUS
        self.tile_under_virus = Tile.COIN

    def set_direction(self, dx: int, dy: int) -> None:
        self.direction = (dx, dy)

    def move_player(self, board: Board, rng: random.Random) -> Event | None:
        """Step the player one cell in its direction and apply the pickup."""
        dx, dy = self.direction
        target = Position(self.player.x + dx, self.player.y + dy)
        if not board.in_bounds(target.x, target.y) or board.get(
            target.x, target.y
        ) in (Tile.WALL, Tile.DOORS_CLOSED):
            return None

        board.set(self.player.x, self.player.y, Tile.EMPTY)
        self.player = target
        tile = board.get(target.x, target.y)

        event = None
        if tile == Tile.COIN:
            self.score += COIN_SCORE
            event = Event.COIN
        elif tile == Tile.FREEZE:
            self.virus_frozen = FREEZE_TURNS
            event = Event.FREEZE
        elif tile == Tile.ANTISEPTIC and self.antiseptic_appeared:
            board.set(DOOR_POSITION.x, DOOR_POSITION.y, Tile.DOORS_OPEN)
            self.score += ANTISEPTIC_SCORE
            event = Event.ANTISEPTIC
        elif tile == Tile.DOORS_OPEN:
            self.is_winner = True
            event = Event.ESCAPE

        if self.score % FREEZE_SPAWN_INTERVAL == 0:
            if not self.spawn_freeze:
                spot = random_empty_space(board, rng)
                board.set(spot.x, spot.y, Tile.FREEZE)
                self.spawn_freeze = True
        else:
            self.spawn_freeze = False

        board.set(target.x, target.y, Tile.PLAYER)
        return event

    def move_virus(self, board: Board) -> None:
        """Move the virus one cell towards the player unless it is frozen."""
        if self.virus_frozen > 0:
            if not self.virus_caught_player():
                board.set(self.virus.x, self.virus.y, Tile.VIRUS)
            self.virus_frozen -= 1
            return

        dx = self.player.x - self.virus.x
        dy = self.player.y - self.virus.y
        under = self.tile_under_virus
        restored = under if under in (Tile.COIN, Tile.ANTISEPTIC) else Tile.EMPTY
        board.set(self.virus.x, self.virus.y, restored)

        self.virus = self._chase(board, dx, dy)
        self.tile_under_virus = board.get(self.virus.x, self.virus.y)
        board.set(self.virus.x, self.virus.y, Tile.VIRUS)

    def _chase(self, board: Board, dx: int, dy: int) -> Position:
        x, y = self.virus.x, self.virus.y

        def passable(cx: int, cy: int) -> bool:
            return board.in_bounds(cx, cy) and board.get(cx, cy) != Tile.WALL

        if abs(dx) >= abs(dy) and dx != 0:
            candidates = [(x + _sign(dx), y), (x, y + 1), (x, y - 1)]
        elif abs(dx) < abs(dy):
            candidates = [(x, y + _sign(dy)), (x + 1, y), (x - 1, y)]
        else:
            candidates = []
        for cx, cy in candidates:
            if passable(cx, cy):
                return Position(cx, cy)
        return self.virus

    def virus_caught_player(self) -> bool:
        """True when the virus shares the player's cell; that loses the round."""
        if self.player == self.virus:
            self.is_winner = False
            return True
        return False

    def update_antiseptic(self, board: Board) -> None:
        """Keep the antiseptic on its spot and reveal it once the score allows."""
        spot = ANTISEPTIC_SPOT
        if (
            not self.antiseptic_appeared
            and board.in_bounds(spot.x, spot.y)
            and board.get(spot.x, spot.y)
            not in (Tile.ANTISEPTIC, Tile.PLAYER, Tile.VIRUS)
        ):
            board.set(spot.x, spot.y, Tile.ANTISEPTIC)
        if self.score >= ANTISEPTIC_THRESHOLD and board.positions_of(Tile.ANTISEPTIC):
            self.antiseptic_appeared = True