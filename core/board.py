"""
core/board.py

Иммутабельное состояние доски Golf Tee: маска занятости,
номер хода и история прыжков.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from .topology import HOLE_COUNT, FULL_MASK, popcount
from .utils import render_triangle
from utils.error_handling import (
    InvalidBoardError, validate_empty_hole, validate_move_number, validate_position
)


class Jump(NamedTuple):
    """Прыжок: колышек из source попадает в пустую лунку destination."""
    destination: int
    source: int

    def __str__(self) -> str:
        return f"{self.source} → {self.destination}"


JumpLike = Union[Jump, Tuple[int, int], Sequence[int]]


def to_jump(value: JumpLike) -> Jump:
    """Пара (to, from) → Jump."""
    if isinstance(value, Jump):
        return value
    try:
        destination, source = value
    except (TypeError, ValueError):
        raise InvalidBoardError(f"Прыжок должен быть парой (to, from), получено {value!r}")
    return Jump(validate_position(destination), validate_position(source))


class BoardState:
    """
    Снимок доски в момент игры.

    Состояние не меняется после создания. Ход или отмена хода
    возвращают новый объект (см. solvers.engine.SearchEngine).

    Атрибуты:
        occupancy: 15-битная маска колышков
        move_number: число прыжков с начала партии
        history: прыжки, приведшие к этому состоянию (старые первыми).
            У промежуточных узлов поиска история пустая.

    Присваивание атрибутам после создания вызывает AttributeError.
    """
    __slots__ = ('occupancy', 'move_number', 'history', '_count')

    occupancy: int
    move_number: int
    history: Tuple[Jump, ...]

    def __init__(self, occupancy: int, move_number: int = 0,
                 history: Iterable[JumpLike] = ()):
        self._init(occupancy, move_number, tuple(to_jump(j) for j in history))

    def _init(self, occupancy: int, move_number: int, history: Tuple[Jump, ...]) -> None:
        occupancy &= FULL_MASK
        object.__setattr__(self, 'occupancy', occupancy)
        object.__setattr__(self, 'move_number', move_number)
        object.__setattr__(self, 'history', history)
        object.__setattr__(self, '_count', popcount(occupancy))

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"BoardState неизменяем: нельзя присвоить {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"BoardState неизменяем: нельзя удалить {name}")

    @classmethod
    def new_game(cls, empty_hole: int) -> 'BoardState':
        """
        Новая партия: все лунки заняты, кроме empty_hole.

        Raises:
            InvalidBoardError: если empty_hole вне 0..14
        """
        empty_hole = validate_empty_hole(empty_hole, HOLE_COUNT)
        return cls(FULL_MASK ^ (1 << empty_hole))

    @classmethod
    def from_occupancy(cls, occupancy: Sequence[bool],
                       history: Iterable[JumpLike] = (),
                       move_number: int = 0) -> 'BoardState':
        """
        Восстанавливает состояние из данных клиента.

        Берутся только первые 15 элементов; недостающие лунки считаются
        пустыми. Достижимость расстановки не проверяется.
        """
        mask = 0
        for position, occupied in enumerate(occupancy):
            if position >= HOLE_COUNT:
                break
            if occupied:
                mask |= 1 << position
        return cls(mask, validate_move_number(move_number), history)

    def derive(self, occupancy: Optional[int] = None) -> 'BoardState':
        """
        Дочерний снимок для перебора: move_number + 1, без истории
        (копировать её на каждом шаге поиска незачем).

        Args:
            occupancy: маска ребёнка; по умолчанию та же, что у родителя
        """
        state = BoardState.__new__(BoardState)
        state._init(self.occupancy if occupancy is None else occupancy,
                    self.move_number + 1, ())
        return state

    def with_changes(self, occupancy: int, move_number: int,
                     history: Tuple[Jump, ...]) -> 'BoardState':
        """Новый снимок с готовой историей (элементы уже Jump)."""
        state = BoardState.__new__(BoardState)
        state._init(occupancy, move_number, history)
        return state

    def is_occupied(self, position: int) -> bool:
        return bool(self.occupancy >> position & 1) if 0 <= position < HOLE_COUNT else False

    def peg_count(self) -> int:
        return self._count

    def empty_holes(self) -> List[int]:
        return [pos for pos in range(HOLE_COUNT) if not self.occupancy >> pos & 1]

    def to_occupancy(self) -> Tuple[bool, ...]:
        """15 флагов занятости для сериализации."""
        return tuple(bool(self.occupancy >> pos & 1) for pos in range(HOLE_COUNT))

    def last_jump(self) -> Optional[Jump]:
        return self.history[-1] if self.history else None

    def to_string(self) -> str:
        return render_triangle(self.to_occupancy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (self.occupancy == other.occupancy and
                self.move_number == other.move_number and
                self.history == other.history)

    def __hash__(self) -> int:
        return hash((self.occupancy, self.move_number, self.history))

    def __repr__(self) -> str:
        return (f"BoardState({self._count} pegs, move={self.move_number}, "
                f"occupancy={self.occupancy:015b})")
