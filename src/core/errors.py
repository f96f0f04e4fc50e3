from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Конфигурация или пара (start, goal) не соответствует доске."""


class NoSolutionError(RuntimeError):
    """
    Open-список исчерпан, цель недостижима.

    expanded : int — сколько состояний успели раскрыть до исчерпания.
    """

    def __init__(self, message: str = "goal configuration is unreachable", expanded: int = 0):
        super().__init__(message)
        self.expanded = expanded
