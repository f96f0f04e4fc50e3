from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from core.board import BoardGeometry, AMPHIPOD_BOARD
from core.configuration import Configuration

from .base import Move, MoveGenerator


class AmphipodMoveGenerator(MoveGenerator):
    """
    Генератор ходов амфиподов.

    Два непересекающихся семейства ходов:
    - комната → коридор: двигается только верхний амфипод комнаты,
      в которой есть чужие; остановиться можно в любой свободной
      клетке коридора, кроме клеток над входами, пока путь не упрётся
      в другого амфипода.
    - коридор → комната: амфипод идёт только в свою комнату, если
      путь по коридору свободен и в комнате нет чужих; занимает самый
      глубокий свободный слот.

    Ходов коридор → коридор и комната → комната нет: переход между
    комнатами всегда идёт через остановку в коридоре.

    Энергия хода = (шаги по коридору + depth + 1) * step_cost[тип].
    """

    def __init__(self, board: BoardGeometry = AMPHIPOD_BOARD):
        self.board = board

    # ------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------
    def generate(self, config: Configuration) -> List[Move]:
        moves = list(self.moves_from_rooms(config))
        moves.extend(self.moves_to_rooms(config))
        return moves

    def moves_from_rooms(self, config: Configuration) -> Iterator[Move]:
        hallway = config.hallway
        for tag, content in config.rooms:
            # устроенная комната: никого не выпускаем
            if config.room_settled(tag):
                continue

            top = self._top_occupant(content)
            if top is None:
                continue
            depth, amphipod = top

            room_x = self.board.room_column(tag)
            steps_out = depth + 1
            for pos in self._reachable_stops(hallway, room_x):
                cost = (abs(pos - room_x) + steps_out) * self.board.cost(amphipod)
                yield config.move_to_hallway(tag, depth, pos), cost

    def moves_to_rooms(self, config: Configuration) -> Iterator[Move]:
        hallway = config.hallway
        empty = self.board.empty
        for pos, ch in enumerate(hallway):
            if ch == empty:
                continue
            target_x = self.board.room_column(ch)
            if not self._path_clear(hallway, pos, target_x):
                continue

            room = config.room(ch)
            if any(c != empty and c != ch for c in room):
                continue

            depth = room.rfind(empty)
            if depth == -1:
                continue

            cost = (abs(pos - target_x) + depth + 1) * self.board.cost(ch)
            yield config.move_to_room(pos, ch, depth), cost

    # ------------------------------------------------------------
    # Вспомогательное
    # ------------------------------------------------------------
    def _top_occupant(self, content: str) -> Optional[Tuple[int, str]]:
        """(depth, тип) верхнего амфипода комнаты или None для пустой."""
        for depth, c in enumerate(content):
            if c != self.board.empty:
                return depth, c
        return None

    def _reachable_stops(self, hallway: str, room_x: int) -> Iterator[int]:
        """Клетки коридора, где можно остановиться, выйдя из колонны room_x."""
        for direction in (range(room_x - 1, -1, -1), range(room_x + 1, len(hallway))):
            for pos in direction:
                if hallway[pos] != self.board.empty:
                    break
                if self.board.is_blocked(pos):
                    continue
                yield pos

    def _path_clear(self, hallway: str, pos: int, target_x: int) -> bool:
        """Свободен ли коридор от pos (не включая) до target_x (включая)."""
        step = 1 if pos < target_x else -1
        for i in range(pos + step, target_x + step, step):
            if hallway[i] != self.board.empty:
                return False
        return True
