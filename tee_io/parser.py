"""
tee_io/parser.py

Парсинг ходов из текстовой нотации.
"""

import re
from typing import List

from core.board import Jump
from core.topology import HOLE_COUNT

_MOVE_RE = re.compile(r'^\s*(\d+)\s*[:<]\s*(\d+)\s*$')


def parse_move(text: str) -> Jump:
    """
    Парсит один ход "to:from" (или "to<from").

    Пример: "0:3" — прыжок из лунки 3 в лунку 0.

    Raises:
        ValueError: неверный формат или номер лунки
    """
    match = _MOVE_RE.match(text)
    if not match:
        raise ValueError(f"Неверный формат хода '{text}'. Ожидается: to:from, например 0:3")

    to, source = int(match.group(1)), int(match.group(2))
    for pos in (to, source):
        if pos >= HOLE_COUNT:
            raise ValueError(f"Лунка {pos} вне диапазона 0..{HOLE_COUNT - 1}")
    return Jump(to, source)


def parse_moves(text: str) -> List[Jump]:
    """Список ходов через запятую: "0:3, 3:10"."""
    return [parse_move(part) for part in text.split(',') if part.strip()]
