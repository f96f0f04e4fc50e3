from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from core.board import BoardGeometry, AMPHIPOD_BOARD
from core.configuration import Configuration
from core.errors import InvalidConfiguration
from core.validation import validate_pair


WALL = "#"
# extra rows inserted by the unfolded (depth 4) burrow
UNFOLDED_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


def layout_to_grid(layout: Sequence[str]) -> np.ndarray:
    """
    Convert a burrow text layout into a numpy grid of single characters.

    Rows are right-padded with spaces, blank rows are dropped:

        #############
        #...........#
        ###B#C#B#D###
          #A#D#C#A#
          #########
    """
    rows = [row.rstrip("\r\n") for row in layout if row.strip()]
    if not rows:
        raise InvalidConfiguration("Layout is empty")
    width = max(len(row) for row in rows)
    return np.array([list(row.ljust(width)) for row in rows], dtype="<U1")


def _text_column(board: BoardGeometry, tag: str) -> int:
    # text column = hallway column + left wall
    return board.room_column(tag) + 1


def _is_room_row(row: str, board: BoardGeometry) -> bool:
    """True if every room column holds an amphipod or an empty cell."""
    cells = set(board.room_columns) | {board.empty}
    columns = [_text_column(board, tag) for tag in board.amphipod_types()]
    return all(col < len(row) and row[col] in cells for col in columns)


def parse_burrow(
    layout: Sequence[str],
    board: BoardGeometry = AMPHIPOD_BOARD,
) -> Tuple[Configuration, Configuration]:
    """
    Parse a burrow layout into (start, goal).

    Row 1 holds the hallway between the walls; room rows (an amphipod or an
    empty cell in every room column) start right below it at row 2 and are
    contiguous, top to bottom. The goal has an empty hallway and every room
    sorted.
    """
    grid = layout_to_grid(layout)
    if grid.shape[0] < 3 or grid.shape[1] < board.hallway_length + 2:
        raise InvalidConfiguration(f"Layout too small: {grid.shape[0]}x{grid.shape[1]}")

    hallway = "".join(grid[1, 1:1 + board.hallway_length])
    if grid[1, 0] != WALL or grid[1, board.hallway_length + 1] != WALL:
        raise InvalidConfiguration(f"Hallway row is not walled: {''.join(grid[1])!r}")

    tags = board.amphipod_types()
    columns = [_text_column(board, tag) for tag in tags]
    room_rows = [r for r in range(2, grid.shape[0]) if _is_room_row("".join(grid[r]), board)]
    if not room_rows:
        raise InvalidConfiguration("Layout has no room rows")
    if room_rows != list(range(2, 2 + len(room_rows))):
        raise InvalidConfiguration(f"Room rows must be contiguous from row 2, got {room_rows}")

    rooms = {tag: "".join(grid[room_rows, col]) for tag, col in zip(tags, columns)}
    start = Configuration(hallway, rooms)
    goal = board.goal_for(len(room_rows))
    validate_pair(start, goal, board)
    return start, goal


def load_burrow(path: str | Path, board: BoardGeometry = AMPHIPOD_BOARD, unfold: bool = False) -> Tuple[Configuration, Configuration]:
    """Load a burrow layout from a text file."""
    lines = Path(path).read_text().splitlines()
    if unfold:
        lines = unfold_burrow(lines, board)
    return parse_burrow(lines, board)


def unfold_burrow(layout: Sequence[str], board: BoardGeometry = AMPHIPOD_BOARD) -> List[str]:
    """Insert the two hidden rows after the first room row (depth 2 → 4)."""
    rows = [row for row in layout if row.strip()]
    if len(rows) < 3 or not _is_room_row(rows[2], board):
        raise InvalidConfiguration("Layout has no room rows to unfold")
    return rows[:3] + list(UNFOLDED_ROWS) + rows[3:]


def format_burrow(config: Configuration, board: BoardGeometry = AMPHIPOD_BOARD) -> List[str]:
    """Render a configuration back into the text layout parse_burrow() reads."""
    depth = config.depth()
    width = board.hallway_length + 2
    columns = {tag: _text_column(board, tag) for tag in config.room_tags()}
    left = min(columns.values()) - 1
    right = max(columns.values()) + 1

    grid = np.full((depth + 3, width), " ", dtype="<U1")
    grid[0, :] = WALL
    grid[1, 0] = grid[1, -1] = WALL
    grid[1, 1:-1] = list(config.hallway)
    grid[2, :] = WALL
    grid[3:, left:right + 1] = WALL
    for tag, col in columns.items():
        grid[2:2 + depth, col] = list(config.room(tag))
    return ["".join(row).rstrip() for row in grid]


def random_burrow(depth: int, *, seed: int = 0, board: BoardGeometry = AMPHIPOD_BOARD) -> Configuration:
    """
    Shuffle depth amphipods of every type into the rooms, hallway empty.

    Args:
        depth: room depth
        seed: RNG seed for reproducibility
    """
    if depth <= 0:
        raise ValueError("depth must be > 0")
    tags = board.amphipod_types()
    rng = np.random.default_rng(seed)
    pool = rng.permutation(np.repeat(np.array(tags), depth))
    rooms = {tag: "".join(pool[i * depth:(i + 1) * depth]) for i, tag in enumerate(tags)}
    return Configuration(board.empty_hallway(), rooms)
