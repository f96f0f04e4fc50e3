
from __future__ import annotations
from typing import Protocol

from core.search_node import SearchNode


class OpenPolicy(Protocol):
    """
    Интерфейс управления Open-списком узлов поиска.

    OpenPolicy определяет:
      - как добавлять узлы (push)
      - как извлекать (pop)
      - как проверять пустоту

    Это чистый Strategy Pattern.
    """

    def push(self, node: SearchNode) -> None:
        """Добавить узел в структуру."""
        ...

    def pop(self) -> SearchNode:
        """Удалить и вернуть следующий узел."""
        ...

    def empty(self) -> bool:
        """True если Open-список пуст."""
        ...

    def __len__(self) -> int:
        ...
