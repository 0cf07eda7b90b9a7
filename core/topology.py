"""
core/topology.py

Топология треугольной доски Golf Tee (15 лунок) и битовые утилиты.

Нумерация лунок:

            0
          1   2
        3   4   5
      6   7   8   9
    10  11  12  13  14

Бит i маски занятости установлен ⇔ в лунке i стоит колышек.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

HOLE_COUNT = 15
FULL_MASK = (1 << HOLE_COUNT) - 1
ROW_COUNT = 5

# Каждый прыжок снимает один колышек: глубина любой ветки ≤ 14
MAX_JUMPS = HOLE_COUNT - 1


def _freeze(table: Dict[int, Dict[int, int]]) -> Mapping[int, Mapping[int, int]]:
    return MappingProxyType({
        to: MappingProxyType(dict(sorted(sources.items())))
        for to, sources in sorted(table.items())
    })


# Куда можно прыгнуть → {откуда: через какую лунку}.
# Прыжок ищется от пустой лунки: «что может её заполнить».
LEGAL_JUMPS_BY_DESTINATION: Mapping[int, Mapping[int, int]] = _freeze({
    0: {3: 1, 5: 2},
    1: {6: 3, 8: 4},
    2: {7: 4, 9: 5},
    3: {0: 1, 5: 4, 10: 6, 12: 7},
    4: {11: 7, 13: 8},
    5: {0: 2, 3: 4, 12: 8, 14: 9},
    6: {1: 3, 8: 7},
    7: {2: 4, 9: 8},
    8: {1: 4, 6: 7},
    9: {2: 5, 7: 8},
    10: {3: 6, 12: 11},
    11: {4: 7, 13: 12},
    12: {3: 7, 5: 8, 10: 11, 14: 13},
    13: {4: 8, 11: 12},
    14: {5: 9, 12: 13},
})

# Плоское представление для горячего цикла поиска:
# (to, from, over) в порядке обхода таблицы.
JUMP_TRIPLES: Tuple[Tuple[int, int, int], ...] = tuple(
    (to, source, over)
    for to, sources in LEGAL_JUMPS_BY_DESTINATION.items()
    for source, over in sources.items()
)

# (to, from) → over, O(1)
OVER_BY_PAIR: Mapping[Tuple[int, int], int] = MappingProxyType({
    (to, source): over for to, source, over in JUMP_TRIPLES
})

# Для каждого прыжка: (to, from, over, маска to, маска from|over)
JUMP_MASKS: Tuple[Tuple[int, int, int, int, int], ...] = tuple(
    (to, source, over,
     1 << to,
     (1 << source) | (1 << over))
    for to, source, over in JUMP_TRIPLES
)


def popcount(mask: int) -> int:
    """Количество установленных бит (колышков)."""
    return mask.bit_count()


def over_position(to: int, source: int) -> Optional[int]:
    """Лунка, через которую прыгают из source в to, или None, если такого прыжка нет."""
    return OVER_BY_PAIR.get((to, source))


def position_to_coords(position: int) -> Tuple[int, int]:
    """Лунка → (ряд, место в ряду)."""
    row = 0
    while position > row:
        position -= row + 1
        row += 1
    return row, position


def coords_to_position(row: int, col: int) -> int:
    """(ряд, место в ряду) → лунка."""
    return row * (row + 1) // 2 + col


def _check_table_symmetry() -> None:
    # Прыжок to←from через over возможен и в обратную сторону
    for (to, source), over in OVER_BY_PAIR.items():
        if OVER_BY_PAIR.get((source, to)) != over:
            raise AssertionError(f"Несимметричная топология: {to}<-{source} через {over}")


_check_table_symmetry()
