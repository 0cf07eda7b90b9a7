"""
tee_io/visualizer.py

Визуализация доски и подсказок.
"""

from typing import List

from core.board import BoardState, Jump
from core.utils import render_triangle
from solvers.engine import Analysis


def display_board(state: BoardState, show_numbers: bool = True) -> str:
    """
    Треугольник с подписью.

    Args:
        state: состояние
        show_numbers: печатать номера лунок
    """
    header = f"Ход {state.move_number}, колышков: {state.peg_count()}"
    return header + "\n" + render_triangle(state.to_occupancy(), show_numbers=show_numbers)


def format_jump(jump: Jump) -> str:
    return f"{jump.source:>2} → {jump.destination:<2}"


def format_moves(moves: List[Jump]) -> str:
    if not moves:
        return "Ходов нет — партия окончена"
    lines = [f"Допустимых ходов: {len(moves)}"]
    for i, jump in enumerate(moves):
        lines.append(f"  [{i}] {format_jump(jump)}")
    return "\n".join(lines)


def format_hints(analysis: Analysis) -> str:
    """
    Подсказки: ход и лучший достижимый остаток.

    Лучшие ходы отмечены звёздочкой.
    """
    if not analysis:
        return "Ходов нет — партия окончена"

    best = min(result for _, result in analysis)
    lines = [f"Подсказки (лучший итог: {best}):"]
    for i, (jump, result) in enumerate(analysis):
        mark = '★' if result == best else ' '
        lines.append(f"  [{i}] {format_jump(jump)}  →  {result} {mark}".rstrip())
    return "\n".join(lines)
