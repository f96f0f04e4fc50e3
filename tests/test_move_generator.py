import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from core.board import AMPHIPOD_BOARD
from core.configuration import Configuration
from strategies.generators.amphipod import AmphipodMoveGenerator
from utils.burrow_loader import parse_burrow


HALL = "." * 11

EXAMPLE = [
    "#############",
    "#...........#",
    "###B#C#B#D###",
    "  #A#D#C#A#",
    "  #########",
]


def cells(conf: Configuration) -> str:
    return conf.hallway + "".join(content for _, content in conf.rooms)


def sample_configurations(levels: int = 2):
    """Старт примера и все конфигурации на расстоянии до levels ходов."""
    start, _ = parse_burrow(EXAMPLE)
    generator = AmphipodMoveGenerator()
    frontier = [start]
    seen = [start]
    for _ in range(levels):
        nxt = []
        for conf in frontier:
            nxt.extend(succ for succ, _ in generator.generate(conf))
        seen.extend(nxt)
        frontier = nxt
    return seen


def test_room_to_hallway_moves_and_costs():
    conf = Configuration(HALL, {"A": "BA", "B": "AB", "C": "CC", "D": "DD"})
    moves = dict(
        (succ.hallway, cost) for succ, cost in AmphipodMoveGenerator().moves_from_rooms(conf)
    )
    expected = {
        # B из комнаты A (колонна 2)
        ".B.........": 20,
        "B..........": 30,
        "...B.......": 20,
        ".....B.....": 40,
        ".......B...": 60,
        ".........B.": 80,
        "..........B": 90,
        # A из комнаты B (колонна 4)
        "...A.......": 2,
        ".A.........": 4,
        "A..........": 5,
        ".....A.....": 2,
        ".......A...": 4,
        ".........A.": 6,
        "..........A": 7,
    }
    assert moves == expected
    assert list(AmphipodMoveGenerator().moves_to_rooms(conf)) == []


def test_only_topmost_amphipod_leaves_room():
    conf = Configuration(HALL, {"A": "BA", "B": "BB", "C": "CC", "D": "DD"})
    for succ, _ in AmphipodMoveGenerator().generate(conf):
        assert succ.room("A") == ".A"


def test_settled_room_yields_no_moves():
    conf = Configuration(HALL, {"A": ".A", "B": "BB", "C": "..", "D": "DD"})
    assert AmphipodMoveGenerator().generate(conf) == []


def test_hallway_scan_stops_at_occupied_cell():
    conf = Configuration(".A.....D...", {"A": "B.", "B": "..", "C": "CC", "D": ".D"})
    stops = sorted(
        succ.hallway.index("B") for succ, _ in AmphipodMoveGenerator().moves_from_rooms(conf)
    )
    assert stops == [3, 5]


def test_hallway_to_room_move():
    conf = Configuration("...B.A.....", {"A": ".A", "B": ".B", "C": "CC", "D": "DD"})
    moves = AmphipodMoveGenerator().moves_to_rooms(conf)
    # A на 5 заблокирован B на 3, B идёт домой
    assert list(moves) == [
        (Configuration(".....A.....", {"A": ".A", "B": "BB", "C": "CC", "D": "DD"}), 20),
    ]


def test_hallway_to_room_takes_deepest_empty_slot():
    conf = Configuration("A..........", {"A": "..", "B": "BB", "C": "CC", "D": "DD"})
    assert list(AmphipodMoveGenerator().moves_to_rooms(conf)) == [
        (Configuration(HALL, {"A": ".A", "B": "BB", "C": "CC", "D": "DD"}), 4),
    ]


def test_hallway_to_room_blocked_by_foreign_type():
    conf = Configuration("...B.......", {"A": ".A", "B": "AB", "C": "CC", "D": "DD"})
    assert list(AmphipodMoveGenerator().moves_to_rooms(conf)) == []


def test_hallway_to_full_room_is_guarded():
    conf = Configuration("..........A", {"A": "AA", "B": "BB", "C": "CC", "D": "DD"})
    assert list(AmphipodMoveGenerator().moves_to_rooms(conf)) == []


def test_generation_is_idempotent():
    generator = AmphipodMoveGenerator()
    for conf in sample_configurations():
        assert set(generator.generate(conf)) == set(generator.generate(conf))


def test_moves_conserve_amphipods_and_change_two_cells():
    generator = AmphipodMoveGenerator()
    for conf in sample_configurations():
        for succ, _ in generator.generate(conf):
            assert succ.occupants() == conf.occupants()
            diff = sum(1 for a, b in zip(cells(conf), cells(succ)) if a != b)
            assert diff == 2, f"{conf} -> {succ}"


def test_costs_are_positive_integers():
    generator = AmphipodMoveGenerator()
    for conf in sample_configurations():
        for _, cost in generator.generate(conf):
            assert isinstance(cost, int)
            assert cost > 0


def test_no_amphipod_rests_on_entrance_column():
    generator = AmphipodMoveGenerator()
    for conf in sample_configurations():
        for succ, _ in generator.generate(conf):
            for column in AMPHIPOD_BOARD.blocked_columns:
                assert succ.hallway[column] == ".", f"амфипод над входом {column}: {succ}"


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
