"""
tests/test_memo.py

Тесты для MemoTable.
"""

import threading

from solvers.memo import MemoTable


def test_put_if_absent_first_writer_wins():
    memo = MemoTable()

    assert memo.put_if_absent(0b101, 2) == 2
    assert memo.put_if_absent(0b101, 7) == 2, "Первое значение не перезаписывается"
    assert memo.get(0b101) == 2
    assert len(memo) == 1


def test_get_counts_hits_and_misses():
    memo = MemoTable()
    memo.put_if_absent(1, 1)

    assert memo.get(1) == 1
    assert memo.get(2) is None
    assert memo.hits == 1
    assert memo.misses == 1


def test_zero_is_a_valid_value():
    memo = MemoTable()
    memo.put_if_absent(0, 0)

    assert 0 in memo
    assert memo.get(0) == 0


def test_clear():
    memo = MemoTable()
    memo.put_if_absent(3, 2)
    memo.get(3)

    memo.clear()

    assert len(memo) == 0
    assert 3 not in memo
    assert memo.hits == 0


def test_concurrent_inserts():
    """Параллельные вставки одинаковых значений не портят таблицу."""
    memo = MemoTable()

    def worker():
        for key in range(1000):
            memo.put_if_absent(key, key % 7)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(memo) == 1000
    assert all(memo.get(key) == key % 7 for key in range(1000))


def test_repr():
    memo = MemoTable()
    memo.put_if_absent(1, 1)

    assert "1 entries" in repr(memo)
