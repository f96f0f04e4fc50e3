from __future__ import annotations

from .board import BoardGeometry, AMPHIPOD_BOARD
from .configuration import Configuration
from .errors import InvalidConfiguration


def validate_configuration(config: Configuration, board: BoardGeometry = AMPHIPOD_BOARD) -> None:
    """
    Проверить одну конфигурацию против геометрии доски.

    Бросает InvalidConfiguration, если:
        - длина коридора не совпадает с board.hallway_length
        - набор комнат не совпадает с board.room_columns
        - комнаты разной глубины
        - встречается неизвестный символ
    """
    if len(config.hallway) != board.hallway_length:
        raise InvalidConfiguration(
            f"Hallway must have {board.hallway_length} cells, got {len(config.hallway)}"
        )
    tags = config.room_tags()
    if sorted(tags) != board.amphipod_types():
        raise InvalidConfiguration(f"Rooms {tags} do not match board rooms {board.amphipod_types()}")

    depths = {len(content) for _, content in config.rooms}
    if len(depths) != 1 or 0 in depths:
        raise InvalidConfiguration(f"Rooms have inconsistent depths: {sorted(depths)}")

    allowed = set(board.room_columns) | {board.empty}
    cells = config.hallway + "".join(content for _, content in config.rooms)
    unknown = sorted(set(cells) - allowed)
    if unknown:
        raise InvalidConfiguration(f"Unknown amphipod types: {unknown}")


def validate_pair(start: Configuration, goal: Configuration, board: BoardGeometry = AMPHIPOD_BOARD) -> None:
    """Проверить start и goal по отдельности и сохранение числа амфиподов каждого типа."""
    validate_configuration(start, board)
    validate_configuration(goal, board)
    if start.depth() != goal.depth():
        raise InvalidConfiguration(f"Room depth differs: start {start.depth()}, goal {goal.depth()}")
    if start.occupants() != goal.occupants():
        raise InvalidConfiguration(
            f"Amphipod counts differ: start {dict(start.occupants())}, goal {dict(goal.occupants())}"
        )
