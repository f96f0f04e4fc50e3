from __future__ import annotations
from typing import List, Protocol, Tuple

from core.configuration import Configuration


Move = Tuple[Configuration, int]


class MoveGenerator(Protocol):
    """
    Интерфейс генератора ходов для поиска с равномерной стоимостью.

    Генератор отвечает за:
        - перечисление всех допустимых ходов ОДНОГО амфипода
        - построение новой Configuration для каждого хода
        - подсчёт энергии хода

    Важно:
        generate() не хранит состояния между вызовами: на одной и той же
        конфигурации всегда возвращает одно и то же множество ходов.
    """

    def generate(self, config: Configuration) -> List[Move]:
        """
        Вернуть список (следующая конфигурация, энергия хода).
        Пустой список — нормальная ситуация, а не ошибка.
        """
        ...
