from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple, Union

EMPTY = "."

Cells = Union[str, Iterable[object]]


def _as_cells(cells: Cells) -> str:
    # None и "." — пустая клетка
    if isinstance(cells, str):
        return cells
    return "".join(EMPTY if c is None else str(c) for c in cells)


def _replace(cells: str, index: int, value: str) -> str:
    return cells[:index] + value + cells[index + 1:]


@dataclass(frozen=True, init=False)
class Configuration:
    """
    Конфигурация норы: расположение всех амфиподов в один момент времени.

    Хранится канонически:
        hallway : str                       — 11 клеток коридора, "." = пусто
        rooms   : tuple[(str, str), ...]    — (тип комнаты, содержимое),
                                              отсортировано по типу;
                                              content[0] — вход, content[-1] — дно

    Конструктор принимает любую последовательность клеток и любой mapping
    комнат, а хранит каноническую форму, поэтому равенство и хеш не зависят
    от порядка ключей. Immutable → можно безопасно класть в dict / set.
    Инварианты не проверяются (см. core.validation).
    """
    hallway: str
    rooms: Tuple[Tuple[str, str], ...]

    def __init__(self, hallway: Cells, rooms: Union[Mapping[str, Cells], Iterable[Tuple[str, Cells]]]):
        items = rooms.items() if isinstance(rooms, Mapping) else rooms
        object.__setattr__(self, "hallway", _as_cells(hallway))
        object.__setattr__(
            self,
            "rooms",
            tuple(sorted((str(tag), _as_cells(content)) for tag, content in items)),
        )

    @classmethod
    def _canonical(cls, hallway: str, rooms: Tuple[Tuple[str, str], ...]) -> Configuration:
        # hallway и rooms уже в канонической форме
        conf = object.__new__(cls)
        object.__setattr__(conf, "hallway", hallway)
        object.__setattr__(conf, "rooms", rooms)
        return conf

    # ------------------------------------------------------------
    # Доступ к данным
    # ------------------------------------------------------------
    def room(self, tag: str) -> str:
        """Содержимое комнаты tag (от входа к дну)."""
        for key, content in self.rooms:
            if key == tag:
                return content
        raise KeyError(tag)

    def room_map(self) -> Dict[str, str]:
        """Получить dict тип → содержимое (копия)."""
        return dict(self.rooms)

    def room_tags(self) -> List[str]:
        return [tag for tag, _ in self.rooms]

    def depth(self) -> int:
        """Глубина комнат (0, если комнат нет)."""
        if not self.rooms:
            return 0
        return len(self.rooms[0][1])

    def occupants(self) -> Counter:
        """Сколько амфиподов каждого типа во всей норе."""
        counts: Counter = Counter(c for c in self.hallway if c != EMPTY)
        for _, content in self.rooms:
            counts.update(c for c in content if c != EMPTY)
        return counts

    def room_settled(self, tag: str) -> bool:
        """True, если в комнате только пустые клетки и амфиподы её типа."""
        return all(c == EMPTY or c == tag for c in self.room(tag))

    # ------------------------------------------------------------
    # Производные конфигурации (ровно две клетки меняются)
    # ------------------------------------------------------------
    def move_to_hallway(self, tag: str, depth: int, pos: int) -> Configuration:
        """
        Амфипод из комнаты tag (слот depth) встаёт в клетку коридора pos.

        Пример:
            nxt = conf.move_to_hallway("A", 0, 3)
        """
        amphipod = self.room(tag)[depth]
        rooms = tuple(
            (key, _replace(content, depth, EMPTY) if key == tag else content)
            for key, content in self.rooms
        )
        return Configuration._canonical(_replace(self.hallway, pos, amphipod), rooms)

    def move_to_room(self, pos: int, tag: str, depth: int) -> Configuration:
        """Амфипод из клетки коридора pos занимает слот depth комнаты tag."""
        amphipod = self.hallway[pos]
        rooms = tuple(
            (key, _replace(content, depth, amphipod) if key == tag else content)
            for key, content in self.rooms
        )
        return Configuration._canonical(_replace(self.hallway, pos, EMPTY), rooms)

    def __repr__(self) -> str:
        rooms = ", ".join(f"{tag}={content!r}" for tag, content in self.rooms)
        return f"Configuration(hallway={self.hallway!r}, {rooms})"
