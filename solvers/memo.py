"""
solvers/memo.py

Таблица мемоизации: маска занятости → лучший достижимый результат.

Ключ — только маска. Номер хода и история в ключ не входят:
множество финальных позиций зависит лишь от расстановки колышков.
Вариант игры один, поэтому таблицу можно переиспользовать между
партиями в пределах процесса.
"""

import threading
from typing import Dict, Optional


class MemoTable:
    """
    Кэш результатов поиска.

    Потокобезопасен: put_if_absent() и счётчики попаданий под
    блокировкой, первый записавший выигрывает. Значение по ключу всегда одно и то же, так что гонка
    двух писателей безвредна.
    """

    def __init__(self):
        self._table: Dict[int, int] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, occupancy: int) -> Optional[int]:
        with self._lock:
            value = self._table.get(occupancy)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
        return value

    def put_if_absent(self, occupancy: int, value: int) -> int:
        """Сохраняет value, если ключа ещё нет. Возвращает хранимое значение."""
        with self._lock:
            return self._table.setdefault(occupancy, value)

    def clear(self) -> None:
        with self._lock:
            self._table.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, occupancy: int) -> bool:
        return occupancy in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"MemoTable({len(self._table)} entries, hits={self.hits}, misses={self.misses})"
