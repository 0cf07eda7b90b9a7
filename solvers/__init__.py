"""
solvers - Поиск для Golf Tee

Экспортирует:
- SearchEngine: ходы, отмена, перебор с мемоизацией, подсказки
- MemoTable: кэш результатов по маске занятости
"""

from .base import BaseSolver, SolverStats
from .memo import MemoTable
from .engine import SearchEngine, legal_jumps

__all__ = [
    'BaseSolver',
    'SolverStats',
    'MemoTable',
    'SearchEngine',
    'legal_jumps',
]
