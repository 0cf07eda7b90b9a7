"""
core/utils.py

Общие утилиты и константы отображения.
"""

from typing import List, Sequence

from .topology import HOLE_COUNT, ROW_COUNT, coords_to_position

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая лунка


def triangle_rows(occupancy: Sequence[bool]) -> List[List[bool]]:
    """Флаги занятости по рядам треугольника (1, 2, 3, 4, 5 лунок)."""
    padded = list(occupancy[:HOLE_COUNT]) + [False] * (HOLE_COUNT - len(occupancy))
    return [
        [bool(padded[coords_to_position(row, col)]) for col in range(row + 1)]
        for row in range(ROW_COUNT)
    ]


def render_triangle(occupancy: Sequence[bool], show_numbers: bool = False) -> str:
    """
    Текстовый треугольник.

    show_numbers=True добавляет номер лунки перед символом: " 4●".
    """
    lines = []
    # Ширина ячейки вместе с разделителем
    step = 4 if show_numbers else 2
    for row, cells in enumerate(triangle_rows(occupancy)):
        parts = []
        for col, occupied in enumerate(cells):
            symbol = PEG if occupied else HOLE
            if show_numbers:
                symbol = f"{coords_to_position(row, col):>2}{symbol}"
            parts.append(symbol)
        indent = ' ' * ((ROW_COUNT - row - 1) * step // 2)
        lines.append(indent + ' '.join(parts))
    return "\n".join(lines)
