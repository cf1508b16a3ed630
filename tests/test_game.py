import random

import pytest

from topiman.board import Board, Position, Tile
from topiman.game import Event, GameState, random_empty_space


def make_board(*rows):
    return Board.from_text("".join(row + "\n" for row in rows))


def box():
    return make_board("22222", "20002", "20002", "20002", "22222")


def test_default_state():
    state = GameState()
    assert state.player == Position(1, 2)
    assert state.direction == (1, 0)
    assert state.virus == Position(21, 21)
    assert state.score == 0
    assert state.tile_under_virus == Tile.COIN


def test_reset_keeps_freeze():
    state = GameState(score=120, is_winner=True, virus_frozen=5, spawn_freeze=True)
    state.player = Position(3, 3)
    state.reset()
    assert state == GameState(virus_frozen=5)


def test_set_direction():
    state = GameState()
    state.set_direction(0, -1)
    assert state.direction == (0, -1)


def test_random_empty_space_picks_empty_tile():
    board = make_board("20102", "21012")
    for seed in range(10):
        spot = random_empty_space(board, random.Random(seed))
        assert board.get(spot.x, spot.y) == Tile.EMPTY


def test_random_empty_space_without_empty_raises():
    with pytest.raises(ValueError):
        random_empty_space(make_board("222", "212"), random.Random(0))


def test_collect_coin():
    board = make_board("22222", "23102", "22222")
    state = GameState(player=Position(1, 1), spawn_freeze=True)
    event = state.move_player(board, random.Random(0))
    assert event is Event.COIN
    assert state.score == 10
    assert state.player == Position(2, 1)
    assert board.get(2, 1) == Tile.PLAYER
    assert board.get(1, 1) == Tile.EMPTY
    assert state.spawn_freeze is False


def test_wall_blocks_player():
    board = make_board("22222", "23222", "22222")
    before = str(board)
    state = GameState(player=Position(1, 1))
    assert state.move_player(board, random.Random(0)) is None
    assert state.player == Position(1, 1)
    assert str(board) == before


def test_closed_doors_block_player():
    board = make_board("22822", "22322", "22222")
    state = GameState(player=Position(2, 1), direction=(0, -1))
    assert state.move_player(board, random.Random(0)) is None
    assert state.player == Position(2, 1)


def test_edge_of_board_blocks_player():
    board = make_board("030", "000")
    state = GameState(player=Position(1, 0), direction=(0, -1))
    assert state.move_player(board, random.Random(0)) is None
    assert board.get(1, 0) == Tile.PLAYER


def test_freeze_pickup_and_spawn():
    board = make_board("22222", "23922", "22222")
    state = GameState(player=Position(1, 1))
    event = state.move_player(board, random.Random(0))
    assert event is Event.FREEZE
    assert state.virus_frozen == 15
    assert state.spawn_freeze is True
    # The only empty cell left was the player's old one.
    assert board.get(1, 1) == Tile.FREEZE
    assert board.get(2, 1) == Tile.PLAYER


def test_freeze_spawns_only_once_per_threshold():
    board = box()
    board.set(1, 1, Tile.PLAYER)
    state = GameState(player=Position(1, 1))
    rng = random.Random(3)
    state.move_player(board, rng)
    first = len(board.positions_of(Tile.FREEZE))
    state.set_direction(0, 1)
    state.move_player(board, rng)
    assert state.spawn_freeze is True
    assert len(board.positions_of(Tile.FREEZE)) <= first
    assert len(board.positions_of(Tile.PLAYER)) == 1


def test_antiseptic_not_yet_appeared_gives_nothing():
    board = make_board("22222", "22822", "23402", "22222")
    state = GameState(player=Position(1, 2), score=2000, spawn_freeze=True)
    assert state.move_player(board, random.Random(0)) is None
    assert state.score == 2000
    assert board.get(2, 1) == Tile.DOORS_CLOSED


def test_antiseptic_opens_doors():
    board = make_board("22222", "22822", "23402", "22222")
    state = GameState(
        player=Position(1, 2),
        score=2000,
        antiseptic_appeared=True,
        spawn_freeze=True,
    )
    assert state.move_player(board, random.Random(0)) is Event.ANTISEPTIC
    assert state.score == 2000 + 1000
    assert board.get(2, 1) == Tile.DOORS_OPEN


def test_open_doors_win():
    board = make_board("22622", "22322", "22222")
    state = GameState(player=Position(2, 1), direction=(0, -1), spawn_freeze=True)
    assert state.move_player(board, random.Random(0)) is Event.ESCAPE
    assert state.is_winner is True
    assert board.get(2, 0) == Tile.PLAYER


def test_caught_when_sharing_cell():
    state = GameState(player=Position(2, 2), virus=Position(2, 2), is_winner=True)
    assert state.virus_caught_player() is True
    assert state.is_winner is False


def test_not_caught_when_apart():
    state = GameState(player=Position(1, 2), virus=Position(2, 2), is_winner=True)
    assert state.virus_caught_player() is False
    assert state.is_winner is True


def test_frozen_virus_stays():
    board = box()
    state = GameState(player=Position(1, 1), virus=Position(3, 3), virus_frozen=3)
    state.move_virus(board)
    assert state.virus == Position(3, 3)
    assert state.virus_frozen == 2
    assert board.get(3, 3) == Tile.VIRUS


def test_frozen_virus_on_player_leaves_tile():
    board = box()
    board.set(2, 2, Tile.PLAYER)
    state = GameState(player=Position(2, 2), virus=Position(2, 2), virus_frozen=1)
    state.move_virus(board)
    assert board.get(2, 2) == Tile.PLAYER
    assert state.virus_frozen == 0


def test_virus_chases_horizontally_and_restores_coin():
    board = box()
    state = GameState(player=Position(3, 1), virus=Position(1, 1))
    state.move_virus(board)
    assert state.virus == Position(2, 1)
    assert board.get(1, 1) == Tile.COIN
    assert board.get(2, 1) == Tile.VIRUS
    assert state.tile_under_virus == Tile.EMPTY


def test_virus_chases_vertically():
    board = box()
    state = GameState(
        player=Position(1, 3), virus=Position(1, 1), tile_under_virus=Tile.EMPTY
    )
    state.move_virus(board)
    assert state.virus == Position(1, 2)
    assert board.get(1, 1) == Tile.EMPTY


def test_virus_goes_around_wall():
    board = make_board("22222", "20202", "20002", "22222")
    state = GameState(
        player=Position(3, 1), virus=Position(1, 1), tile_under_virus=Tile.EMPTY
    )
    state.move_virus(board)
    assert state.virus == Position(1, 2)
    assert board.get(1, 2) == Tile.VIRUS


def test_virus_restores_antiseptic_underneath():
    board = box()
    board.set(2, 2, Tile.ANTISEPTIC)
    state = GameState(player=Position(3, 2), virus=Position(1, 2))
    state.move_virus(board)
    assert state.tile_under_virus == Tile.ANTISEPTIC
    state.move_virus(board)
    assert board.get(2, 2) == Tile.ANTISEPTIC
    assert state.virus == Position(3, 2)


def test_virus_on_player_does_not_move():
    board = box()
    state = GameState(player=Position(2, 2), virus=Position(2, 2))
    state.move_virus(board)
    assert state.virus == Position(2, 2)
    assert board.get(2, 2) == Tile.VIRUS


def big_board():
    return make_board(*(["0" * 16] * 13))


def test_antiseptic_is_placed_on_its_spot():
    board = big_board()
    state = GameState()
    state.update_antiseptic(board)
    assert board.get(14, 11) == Tile.ANTISEPTIC
    assert state.antiseptic_appeared is False


def test_antiseptic_appears_at_threshold():
    board = big_board()
    state = GameState(score=2000)
    state.update_antiseptic(board)
    assert state.antiseptic_appeared is True


def test_antiseptic_spot_not_overwritten_under_player():
    board = big_board()
    board.set(14, 11, Tile.PLAYER)
    state = GameState()
    state.update_antiseptic(board)
    assert board.get(14, 11) == Tile.PLAYER


def test_antiseptic_not_restored_once_appeared():
    board = big_board()
    state = GameState(antiseptic_appeared=True)
    state.update_antiseptic(board)
    assert board.get(14, 11) == Tile.EMPTY