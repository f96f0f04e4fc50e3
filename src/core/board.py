from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from .configuration import Configuration, EMPTY


@dataclass(frozen=True)
class BoardGeometry:
    """
    Статическая топология норы амфиподов.

    Хранит:
        hallway_length  : int            — число клеток коридора
        room_columns    : dict[str, int] — тип амфипода → колонна входа в его комнату
        blocked_columns : frozenset[int] — клетки над входами (только проход, стоять нельзя)
        step_cost       : dict[str, int] — энергия одного шага для каждого типа
        empty           : str            — символ пустой клетки

    Вся геометрия — данные, а не условия в коде генератора ходов.
    """

    hallway_length: int = 11
    room_columns: Dict[str, int] = field(
        default_factory=lambda: {"A": 2, "B": 4, "C": 6, "D": 8}
    )
    blocked_columns: FrozenSet[int] = frozenset({2, 4, 6, 8})
    step_cost: Dict[str, int] = field(
        default_factory=lambda: {"A": 1, "B": 10, "C": 100, "D": 1000}
    )
    empty: str = EMPTY

    def __post_init__(self):
        assert set(self.room_columns) == set(self.step_cost), "room_columns и step_cost должны совпадать по ключам"
        assert all(0 <= c < self.hallway_length for c in self.room_columns.values()), "колонна комнаты вне коридора"

    def room_column(self, tag: str) -> int:
        """Колонна коридора над входом в комнату tag."""
        return self.room_columns[tag]

    def is_blocked(self, column: int) -> bool:
        """True — если в этой клетке коридора нельзя останавливаться."""
        return column in self.blocked_columns

    def cost(self, tag: str) -> int:
        return self.step_cost[tag]

    def amphipod_types(self) -> List[str]:
        return sorted(self.room_columns)

    def empty_hallway(self) -> str:
        return self.empty * self.hallway_length

    def goal_for(self, depth: int, hallway: Optional[str] = None) -> Configuration:
        """
        Целевая конфигурация: каждая комната заполнена своим типом.
        hallway по умолчанию пустой.
        """
        if hallway is None:
            hallway = self.empty_hallway()
        return Configuration(hallway, {tag: tag * depth for tag in self.room_columns})


AMPHIPOD_BOARD = BoardGeometry()
