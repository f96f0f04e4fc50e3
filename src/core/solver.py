from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import time

from core.board import BoardGeometry, AMPHIPOD_BOARD
from core.configuration import Configuration
from core.errors import NoSolutionError
from core.search_node import SearchNode
from core.validation import validate_pair

from strategies.generators.base import MoveGenerator
from strategies.generators.amphipod import AmphipodMoveGenerator
from strategies.open_policy.base import OpenPolicy
from strategies.open_policy.cost_priority import CostPriorityOpen


@dataclass
class UniformCostSearch:
    """
    Поиск с равномерной стоимостью (Дейкстра) по неявному графу конфигураций.

    Параметры:
        start         : Configuration   — стартовая конфигурация
        goal          : Configuration   — целевая конфигурация
        generator     : MoveGenerator   — генератор ходов (рёбра графа)
        open_policy   : OpenPolicy      — Open-список (min-куча по стоимости)

    Главный метод:
        run() -> Optional[SearchNode]

    Таблица лучших стоимостей ключуется по Configuration; decrease-key
    заменён ленивым удалением: узел, чья стоимость больше записанной
    лучшей, при извлечении считается устаревшим и пропускается.
    """

    start: Configuration
    goal: Configuration
    generator: MoveGenerator = field(default_factory=AmphipodMoveGenerator)
    open_policy: OpenPolicy = field(default_factory=CostPriorityOpen)

    def __post_init__(self):
        assert self.open_policy.empty(), "open_policy должен быть пустым"

        # лучшая известная стоимость для каждой конфигурации
        self._best: Dict[Configuration, int] = {self.start: 0}
        self._metrics = {
            "expanded": 0,
            "stale_skipped": 0,
            "generated": 0,
            "pushed": 1,  # root
            "max_open": 1,
            "runtime_seconds": 0.0,
        }
        self.open_policy.push(SearchNode(config=self.start, cost=0))

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    def run(self, max_expansions: Optional[int] = None, verbose: bool = False) -> Optional[SearchNode]:
        """
        Запустить поиск.

        Возвращает:
            узел цели (cost = минимальная энергия, путь через parent),
            иначе None — Open исчерпан или превышен max_expansions.
        """
        start_time = time.time()
        try:
            while not self.open_policy.empty():
                node = self.open_policy.pop()

                # Проверка цели: первое извлечение цели — оптимум
                if node.is_goal(self.goal):
                    if verbose:
                        print(f"✓ Цель достигнута: энергия {node.cost}, "
                              f"раскрыто {self._metrics['expanded']} состояний")
                    return node

                # устаревший дубль
                if node.cost > self._best[node.config]:
                    self._metrics["stale_skipped"] += 1
                    continue

                if max_expansions is not None and self._metrics["expanded"] >= max_expansions:
                    break
                self._expand(node)

                if verbose and self._metrics["expanded"] % 10000 == 0:
                    print(f"  Раскрыто {self._metrics['expanded']}: стоимость {node.cost}, "
                          f"Open {len(self.open_policy)}")

            if verbose:
                print(f"⚠️  Поиск остановлен после {self._metrics['expanded']} раскрытий")
            return None
        finally:
            self._metrics["runtime_seconds"] = time.time() - start_time

    def get_statistics(self) -> dict:
        """Получить статистику работы."""
        stats = dict(self._metrics)
        stats["best_table_size"] = len(self._best)
        return stats

    def best_cost(self, config: Configuration) -> Optional[int]:
        """Лучшая известная стоимость конфигурации (None, если не встречалась)."""
        return self._best.get(config)

    # ------------------------------------------------------------
    # Внутреннее
    # ------------------------------------------------------------
    def _expand(self, node: SearchNode) -> None:
        self._metrics["expanded"] += 1
        for nxt, move_cost in self.generator.generate(node.config):
            self._metrics["generated"] += 1
            new_cost = node.cost + move_cost
            old = self._best.get(nxt)
            if old is None or new_cost < old:
                self._best[nxt] = new_cost
                self.open_policy.push(
                    SearchNode(config=nxt, cost=new_cost, parent=node, move_cost=move_cost)
                )
                self._metrics["pushed"] += 1
        self._metrics["max_open"] = max(self._metrics["max_open"], len(self.open_policy))


def _search(start: Configuration, goal: Configuration, board: BoardGeometry, validate: bool) -> SearchNode:
    if validate:
        validate_pair(start, goal, board)
    search = UniformCostSearch(
        start=start,
        goal=goal,
        generator=AmphipodMoveGenerator(board),
        open_policy=CostPriorityOpen(),
    )
    node = search.run()
    if node is None:
        raise NoSolutionError(expanded=search.get_statistics()["expanded"])
    return node


def solve(
    start: Configuration,
    goal: Configuration,
    board: BoardGeometry = AMPHIPOD_BOARD,
    validate: bool = False,
) -> int:
    """
    Минимальная энергия перестановки start → goal.

    Бросает NoSolutionError, если цель недостижима, и
    InvalidConfiguration (при validate=True) на некорректной паре.
    """
    return _search(start, goal, board, validate).cost


def solve_with_path(
    start: Configuration,
    goal: Configuration,
    board: BoardGeometry = AMPHIPOD_BOARD,
    validate: bool = False,
) -> Tuple[int, List[Configuration]]:
    """То же, что solve(), плюс оптимальная последовательность конфигураций."""
    node = _search(start, goal, board, validate)
    return node.cost, node.reconstruct_path()
