"""
solvers/engine.py

Поисковый движок Golf Tee: допустимые прыжки, ход и отмена хода,
полный перебор с мемоизацией.
"""

import time
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from .base import BaseSolver, SolverStats
from .memo import MemoTable
from config import SolverConfig
from core.board import BoardState, Jump
from core.topology import HOLE_COUNT, JUMP_MASKS, MAX_JUMPS, OVER_BY_PAIR, popcount
from utils.error_handling import InvariantViolationError
from utils.monitoring import monitor_time

MoveResult = Tuple[bool, Optional[BoardState]]
Analysis = List[Tuple[Jump, int]]


def _jump_mask(occupancy: int, to: int, source: int) -> Optional[int]:
    """
    Маска после прыжка source → to или None, если прыжок невозможен.

    over берётся из таблицы; пара (to, source) вне таблицы — тоже None.
    """
    over = OVER_BY_PAIR.get((to, source))
    if over is None:
        return None
    if (occupancy >> to) & 1 or not (occupancy >> source) & 1 or not (occupancy >> over) & 1:
        return None
    return occupancy ^ ((1 << to) | (1 << source) | (1 << over))


def _unjump_mask(occupancy: int, to: int, source: int) -> Optional[int]:
    """Обратная операция к _jump_mask для той же тройки."""
    over = OVER_BY_PAIR.get((to, source))
    if over is None:
        return None
    if not (occupancy >> to) & 1 or (occupancy >> source) & 1 or (occupancy >> over) & 1:
        return None
    return occupancy ^ ((1 << to) | (1 << source) | (1 << over))


def legal_jumps(occupancy: int) -> List[Jump]:
    """
    Допустимые прыжки для маски в порядке таблицы:
    лунки назначения по возрастанию, внутри — источники по возрастанию.
    """
    moves = []
    for to, source, _, to_mask, source_over_mask in JUMP_MASKS:
        if not (occupancy & to_mask) and (occupancy & source_over_mask) == source_over_mask:
            moves.append(Jump(to, source))
    return moves


class SearchEngine(BaseSolver):
    """
    Движок поиска минимального остатка колышков.

    Особенности:
    - Полный DFS по дереву игры
    - Мемоизация по маске занятости (склейка транспозиций)
    - Таблица принадлежит движку и живёт между партиями
    - Подсказки можно считать в нескольких потоках (config.max_workers)
    """

    def __init__(self, memo: Optional[MemoTable] = None,
                 config: Optional[SolverConfig] = None,
                 verbose: Optional[bool] = None):
        """
        Args:
            memo: таблица мемоизации (по умолчанию — своя)
            config: настройки; None — значения по умолчанию
            verbose: перекрывает config.verbose
        """
        self.config = config or SolverConfig()
        super().__init__(verbose=self.config.verbose if verbose is None else verbose)
        self.memo = memo if memo is not None else MemoTable()
        # Статистику пишут все потоки анализа
        self._stats_lock = threading.Lock()

    # -- Ходы ----------------------------------------------------------

    def legal_moves(self, state: BoardState) -> List[Jump]:
        """Все допустимые прыжки; пустой список — терминальная позиция."""
        return legal_jumps(state.occupancy)

    def is_terminal(self, state: BoardState) -> bool:
        return not self.legal_moves(state)

    def apply_jump(self, state: BoardState, destination: int, source: int) -> MoveResult:
        """
        Прыжок source → destination.

        Returns:
            (True, новое состояние) или (False, None), если прыжок
            недопустим. Исходное состояние не меняется.
        """
        new_occupancy = _jump_mask(state.occupancy, destination, source)
        if new_occupancy is None:
            return False, None
        history = state.history + (Jump(destination, source),)
        return True, state.with_changes(new_occupancy, state.move_number + 1, history)

    def undo_last_jump(self, state: BoardState) -> MoveResult:
        """
        Отменяет последний прыжок из истории.

        Лунка назначения очищается, источник и перепрыгнутая лунка
        заполняются независимо от текущей расстановки: состояние
        клиента не перепроверяется (для этого есть validate_history).

        Returns:
            (True, состояние до прыжка) или (False, None) при пустой
            истории или если последнего прыжка нет в таблице.
        """
        last = state.last_jump()
        if last is None:
            return False, None
        over = OVER_BY_PAIR.get((last.destination, last.source))
        if over is None:
            return False, None
        new_occupancy = (state.occupancy & ~(1 << last.destination)) | (1 << last.source) | (1 << over)
        return True, state.with_changes(new_occupancy, max(state.move_number - 1, 0), state.history[:-1])

    # -- Поиск ---------------------------------------------------------

    def solve(self, board: BoardState) -> int:
        """Лучший результат со статистикой и логом."""
        self.stats = SolverStats()
        start = time.perf_counter()
        self._log(f"Starting search (pegs={board.peg_count()}, memo={len(self.memo)})")

        result = self._best(board, 0)

        self.stats.time_elapsed = time.perf_counter() - start
        self._log(f"Best result: {result} pegs. Stats: {self.stats}")
        return result

    def best_achievable_result(self, state: BoardState) -> int:
        """Минимальное число колышков, достижимое из state."""
        return self._best(state, 0)

    @monitor_time('analyze_legal_moves')
    def analyze_legal_moves(self, state: BoardState) -> Analysis:
        """
        Подсказки: для каждого допустимого прыжка — лучший результат,
        если выбрать его и дальше играть оптимально.

        Порядок совпадает с legal_moves().
        """
        moves = self.legal_moves(state)
        children = [self._child(state, move) for move in moves]

        if self.config.max_workers > 1 and len(children) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(lambda child: self._best(child, 1), children))
        else:
            results = [self._best(child, 1) for child in children]

        self._log(f"Analyzed {len(moves)} moves at move {state.move_number}")
        return list(zip(moves, results))

    def reset_cache(self) -> None:
        self.memo.clear()

    def _child(self, state: BoardState, move: Jump) -> BoardState:
        """Дочерний узел поиска (без истории)."""
        new_occupancy = _jump_mask(state.occupancy, move.destination, move.source)
        if new_occupancy is None:
            raise InvariantViolationError(
                f"Expected jump from {move.source} to {move.destination} "
                f"to be legal on move {state.move_number}"
            )
        return state.derive(new_occupancy)

    def _best(self, state: BoardState, depth: int) -> int:
        """
        Рекурсивный DFS с мемоизацией.

        Args:
            state: текущий узел
            depth: число прыжков от корня поиска
        """
        if depth > MAX_JUMPS:
            raise InvariantViolationError(f"Search depth {depth} exceeds {MAX_JUMPS} jumps")

        cached = self.memo.get(state.occupancy)
        with self._stats_lock:
            self.stats.nodes_visited += 1
            if depth > self.stats.max_depth:
                self.stats.max_depth = depth
            if cached is not None:
                self.stats.memo_hits += 1
        if cached is not None:
            return cached

        # Без ходов это и есть итог; иначе — верхняя граница
        result = state.peg_count()
        for move in self.legal_moves(state):
            pegs_left = self._best(self._child(state, move), depth + 1)
            if pegs_left < result:
                result = pegs_left

        return self.memo.put_if_absent(state.occupancy, result)

    # -- Проверка истории ----------------------------------------------

    def validate_history(self, state: BoardState) -> bool:
        """
        Сверяет историю с расстановкой.

        Отматывает прыжки с конца; каждый должен отменяться, а в итоге
        должна получиться доска новой партии (ровно одна пустая лунка).
        """
        occupancy = state.occupancy
        for jump in reversed(state.history):
            occupancy = _unjump_mask(occupancy, jump.destination, jump.source)
            if occupancy is None:
                return False
        return popcount(occupancy) == HOLE_COUNT - 1
