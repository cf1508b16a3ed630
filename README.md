# topiman

A small maze arcade game built on pygame. You steer Topi through a
dungeon, collecting cash while a virus chases you. Reach 2000 cash and an
antiseptic appears; pick it up to open the exit doors, then walk through
them to win. Freeze crystals that spawn on the map stop the virus for a
while.

## Installing

```
pip install .
```

This installs the game together with `pygame`.

## Playing

```
topiman [--resources DIR] [--map FILE] [--seed N] [--mute]
```

- `--resources` – directory holding the game's assets (default
  `resources`): images, the `UI/` pictures, `sounds_and_music/`, `font.ttf`
  and the `map` file.
- `--map` – map file to play (default `RESOURCES/map`).
- `--seed` – seed for the random placement of freeze crystals.
- `--mute` – play without sound.

If the map cannot be read or parsed, the command prints an error and exits
with status 1. Missing pictures are simply not drawn, a missing font falls
back to pygame's default font, and missing sounds stay silent.

The main menu offers **Start**, **Rules** and **Exit**. After the story
screen, click **GO** to begin.

Controls:

- Arrow keys or `W` `A` `S` `D` change direction; Topi keeps walking in
  the chosen direction, one cell every 240 ms.
- `Esc` or closing the window ends the round.

Rules:

- Each coin is worth 10 cash.
- Whenever the cash total lands on a multiple of 500 (the first move at 0
  cash counts), a freeze crystal spawns on a random empty floor tile;
  stepping on it freezes the virus for 15 moves.
- Once the cash reaches 2000 the antiseptic is revealed. Picking it up is
  worth 1000 cash and opens the doors.
- Stepping onto the open doors wins the round; meeting the unfrozen virus
  loses it.

When a round ends, a win or game-over screen asks whether to play again.
Choosing yes reloads the map and starts a fresh round.

## Map format

The map is a plain text file of digit rows, one row per line, each line
ending with a newline. The number of rows is the number of newlines, the
width is the length of the first line, and anything after the last newline
is ignored. A row shorter than the first, or a non-digit within the width,
raises `ValueError`. Digits stand for tiles (`topiman.board.Tile`):

| Digit | Tile         |
|-------|--------------|
| 0     | empty floor  |
| 1     | coin         |
| 2     | wall         |
| 3     | player       |
| 4     | antiseptic   |
| 5     | virus        |
| 6     | open doors   |
| 7     | freedom      |
| 8     | closed doors |
| 9     | freeze       |

The game expects the player to start at column 1, row 2, the virus at
column 21, row 21, the doors at column 2, row 1 and the antiseptic spot at
column 14, row 11.

## Using the pieces

- `topiman.board.Board.load(path)` and `Board.from_text(text)` read a map;
  `get`, `set`, `in_bounds` and `positions_of` work on the grid.
- `topiman.game.GameState` holds one round: `move_player`, `move_virus`,
  `virus_caught_player`, `update_antiseptic`, `set_direction` and `reset`.
- `topiman.app.step(state, board, rng)` advances a round by one tick
  without drawing anything and returns an `Outcome` with the pickup
  `Event`, if any.
- `topiman.layout` computes button, tile and score rectangles for a
  window size.

## Running the tests

```
pip install .[test]
pytest
```