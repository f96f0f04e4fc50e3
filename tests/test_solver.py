import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from core.board import AMPHIPOD_BOARD
from core.configuration import Configuration
from core.errors import InvalidConfiguration, NoSolutionError
from core.search_node import SearchNode
from core.solver import UniformCostSearch, solve, solve_with_path
from strategies.generators.amphipod import AmphipodMoveGenerator
from strategies.open_policy.cost_priority import CostPriorityOpen
from utils.burrow_loader import parse_burrow, unfold_burrow


HALL = "." * 11

EXAMPLE = [
    "#############",
    "#...........#",
    "###B#C#B#D###",
    "  #A#D#C#A#",
    "  #########",
]

SWAPPED = Configuration(HALL, {"A": "BA", "B": "AB", "C": "CC", "D": "DD"})
GOAL_2 = AMPHIPOD_BOARD.goal_for(2)


class RecordingOpen(CostPriorityOpen):
    """Запоминает стоимость каждого извлечённого узла."""

    def __init__(self):
        super().__init__()
        self.popped = []

    def pop(self) -> SearchNode:
        node = super().pop()
        self.popped.append(node.cost)
        return node


def validate_plan(path, costs, energy):
    assert path, "План пуст"
    assert len(costs) == len(path) - 1
    assert sum(costs) == energy, "Сумма ходов не равна энергии"
    generator = AmphipodMoveGenerator()
    for step, (cur, nxt) in enumerate(zip(path, path[1:])):
        assert (nxt, costs[step]) in generator.generate(cur), f"Недопустимый ход на шаге {step + 1}"


def test_single_swapped_pair():
    assert solve(SWAPPED, GOAL_2) == 46


def test_amphipods_waiting_in_hallway():
    start = Configuration("...B.A.....", {"A": ".A", "B": ".B", "C": "CC", "D": "DD"})
    assert solve(start, GOAL_2) == 24


def test_start_equals_goal():
    search = UniformCostSearch(start=GOAL_2, goal=GOAL_2)
    node = search.run()
    assert node is not None
    assert node.cost == 0
    assert node.reconstruct_path() == [GOAL_2]
    assert search.get_statistics()["expanded"] == 0
    assert solve(GOAL_2, GOAL_2) == 0


def test_unreachable_goal_is_explicit():
    goal = Configuration(HALL, {"A": "AA", "B": "BB", "C": "CC", "E": "DD"})
    search = UniformCostSearch(start=SWAPPED, goal=goal)
    assert search.run() is None
    with pytest.raises(NoSolutionError) as exc_info:
        solve(SWAPPED, goal)
    assert exc_info.value.expanded > 0


def test_validate_rejects_before_search():
    goal = Configuration(HALL, {"A": "AA", "B": "BB", "C": "CC", "E": "DD"})
    with pytest.raises(InvalidConfiguration):
        solve(SWAPPED, goal, validate=True)


@pytest.mark.parametrize(
    "unfold, expected",
    [
        (False, 12521),
        (True, 44169),
    ],
)
def test_example_burrow(unfold, expected):
    lines = unfold_burrow(EXAMPLE) if unfold else EXAMPLE
    start, goal = parse_burrow(lines)
    assert solve(start, goal, validate=True) == expected


def test_path_reconstruction_matches_energy():
    start, goal = parse_burrow(EXAMPLE)
    search = UniformCostSearch(start=start, goal=goal)
    node = search.run()
    assert node is not None
    path = node.reconstruct_path()
    assert path[0] == start
    assert path[-1] == goal
    assert node.depth() == len(path) - 1
    validate_plan(path, node.path_costs(), node.cost)
    assert search.best_cost(goal) == node.cost

    energy, plan = solve_with_path(start, goal)
    assert energy == 12521
    assert plan[0] == start and plan[-1] == goal


def test_dequeue_costs_are_monotone():
    start, goal = parse_burrow(EXAMPLE)
    open_policy = RecordingOpen()
    search = UniformCostSearch(
        start=start,
        goal=goal,
        generator=AmphipodMoveGenerator(),
        open_policy=open_policy,
    )
    node = search.run()
    assert node is not None
    assert open_policy.popped == sorted(open_policy.popped)
    assert open_policy.popped[-1] == node.cost


def test_cost_priority_open_pops_cheapest_first():
    open_policy = CostPriorityOpen()
    for cost in (30, 10, 20, 10):
        open_policy.push(SearchNode(config=GOAL_2, cost=cost))
    assert len(open_policy) == 4
    assert [open_policy.pop().cost for _ in range(4)] == [10, 10, 20, 30]
    assert open_policy.empty()


def test_statistics_are_consistent():
    search = UniformCostSearch(start=SWAPPED, goal=GOAL_2)
    search.run()
    stats = search.get_statistics()
    assert stats["expanded"] > 0
    assert stats["generated"] >= stats["pushed"] - 1
    assert stats["best_table_size"] <= stats["pushed"]
    assert stats["runtime_seconds"] >= 0.0


def test_max_expansions_stops_search():
    start, goal = parse_burrow(EXAMPLE)
    search = UniformCostSearch(start=start, goal=goal)
    assert search.run(max_expansions=1) is None
    assert search.get_statistics()["expanded"] == 1


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
