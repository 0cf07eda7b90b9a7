"""
utils/error_handling.py

Исключения и проверки входных данных.

Недопустимый ход и отмена при пустой истории НЕ являются ошибками:
движок возвращает для них (False, None). Исключения здесь — для
некорректных входных данных и нарушений внутренних инвариантов.
"""

from typing import Any


class SolverError(Exception):
    """Базовое исключение движка."""
    pass


class InvalidBoardError(SolverError):
    """Некорректные данные для построения доски."""
    pass


class InvariantViolationError(SolverError):
    """
    Нарушение внутреннего инварианта.

    Например, ход из legal_moves() не применился. Это ошибка
    программы, а не пользователя: её нельзя глушить.
    """
    pass


class ValidationError(InvalidBoardError):
    """История ходов не согласуется с расстановкой колышков."""
    pass


def _is_int(value: Any) -> bool:
    # bool — подкласс int, но как номер лунки не годится
    return isinstance(value, int) and not isinstance(value, bool)


def validate_position(value: Any, hole_count: int = 15) -> int:
    """
    Проверяет номер лунки.

    Raises:
        InvalidBoardError: если это не int в диапазоне 0..hole_count-1
    """
    if not _is_int(value):
        raise InvalidBoardError(f"Номер лунки должен быть целым числом, получено {value!r}")
    if not 0 <= value < hole_count:
        raise InvalidBoardError(f"Номер лунки {value} вне диапазона 0..{hole_count - 1}")
    return value


def validate_empty_hole(value: Any, hole_count: int = 15) -> int:
    """Проверяет пустую лунку новой игры (без «заворачивания» индекса)."""
    return validate_position(value, hole_count)


def validate_move_number(value: Any) -> int:
    """Счётчик ходов — неотрицательное целое."""
    if not _is_int(value) or value < 0:
        raise InvalidBoardError(f"Номер хода должен быть целым >= 0, получено {value!r}")
    return value
