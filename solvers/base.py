"""
solvers/base.py

Базовый класс для поисковых движков.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from core.board import BoardState
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы движка."""
    nodes_visited: int = 0
    memo_hits: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Memo hits: {self.memo_hits}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс движка.

    Наследники реализуют solve(): лучший достижимый результат из позиции.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: BoardState) -> int:
        """
        Args:
            board: позиция

        Returns:
            Минимальное число колышков, которое можно оставить
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог, если verbose=True."""
        if self.verbose:
            get_logger().info(f"[{self.__class__.__name__}] {message}")
