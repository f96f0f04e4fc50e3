from __future__ import annotations
import heapq
from itertools import count
from typing import List, Tuple

from core.search_node import SearchNode
from .base import OpenPolicy


class CostPriorityOpen(OpenPolicy):
    """
    Open-список как min-куча по накопленной стоимости (node.cost).

    Только вставка, без decrease-key: устаревшие дубли остаются в куче
    и отбрасываются поиском при извлечении.
    При равной стоимости узлы выходят в порядке вставки.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.cost, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)
