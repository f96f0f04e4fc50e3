from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .configuration import Configuration


@dataclass(eq=False)
class SearchNode:
    """
    Узел Open-списка в поиске с равномерной стоимостью.

    Содержит:
        config     : Configuration
            Конфигурация норы в этой точке поиска.

        cost       : int
            Накопленная энергия от старта.

        parent     : SearchNode | None
            Родительский узел (для восстановления пути).

        move_cost  : int
            Энергия последнего хода (parent → этот узел).

    Один и тот же config может лежать в Open несколько раз с разной
    стоимостью; устаревшие узлы отбрасываются при извлечении.
    """

    config: Configuration
    cost: int
    parent: Optional["SearchNode"] = None
    move_cost: int = 0

    def is_goal(self, goal_config: Configuration) -> bool:
        """Проверка: достигли ли мы целевой конфигурации."""
        return self.config == goal_config

    def reconstruct_path(self) -> List[Configuration]:
        """
        Восстановить путь конфигураций от старта до этого узла.
        Используется, когда поиск находит цель.
        """
        path = []
        node = self
        while node is not None:
            path.append(node.config)
            node = node.parent
        return list(reversed(path))

    def path_costs(self) -> List[int]:
        """Энергия каждого хода вдоль пути (len = len(path) - 1)."""
        costs = []
        node = self
        while node.parent is not None:
            costs.append(node.move_cost)
            node = node.parent
        return list(reversed(costs))

    def depth(self) -> int:
        """Число ходов от старта (для статистики/отладки)."""
        d = 0
        node = self.parent
        while node is not None:
            d += 1
            node = node.parent
        return d

    def __repr__(self):
        return f"SearchNode(cost={self.cost}, config={self.config})"
