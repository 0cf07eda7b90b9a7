#!/usr/bin/env python3
"""
main.py

Точка входа для Golf Tee Solver.

Использование:
    python main.py                        # случайная пустая лунка
    python main.py --empty-hole 0 --hints # подсказки для первого хода
    python main.py -e 0 -m "0:3,3:10"     # сыграть ходы и показать итог
    python main.py -e 0 -m "0:3" --undo 1 # сыграть и отменить
"""

import sys
import random
import argparse
from typing import Tuple

from config import SolverConfig
from core.board import BoardState
from core.topology import HOLE_COUNT
from solvers import SearchEngine
from tee_io import parse_moves, display_board, format_moves, format_hints
from utils.error_handling import SolverError
from utils.logging import get_logger
from utils.monitoring import get_monitor


def play(engine: SearchEngine, state: BoardState, moves, undo: int = 0) -> Tuple[BoardState, bool]:
    """
    Играет ходы по очереди, затем отменяет undo последних.

    Недопустимый ход останавливает партию с сообщением; отмена
    тогда не выполняется.

    Returns:
        (итоговое состояние, False если какой-то ход не прошёл)
    """
    logger = get_logger()
    for jump in moves:
        ok, new_state = engine.apply_jump(state, jump.destination, jump.source)
        if not ok:
            logger.warning(f"Недопустимый ход {jump.source} → {jump.destination} на ходу {state.move_number}")
            return state, False
        state = new_state

    for _ in range(undo):
        ok, new_state = engine.undo_last_jump(state)
        if not ok:
            logger.warning("Отменять нечего: история пуста")
            break
        state = new_state
    return state, True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Golf Tee Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Нумерация лунок:
            0
          1   2
        3   4   5
      6   7   8   9
    10  11  12  13  14
        """
    )
    parser.add_argument(
        '--empty-hole', '-e', type=int, default=None,
        help='Пустая лунка новой партии (default: случайная)'
    )
    parser.add_argument(
        '--moves', '-m', default='',
        help='Ходы через запятую в формате to:from, например "0:3,3:10"'
    )
    parser.add_argument(
        '--undo', '-u', type=int, default=0,
        help='Сколько последних ходов отменить'
    )
    parser.add_argument(
        '--hints', action='store_true',
        help='Показать лучший итог для каждого хода'
    )
    parser.add_argument(
        '--workers', '-w', type=int, default=None,
        help='Потоков для подсказок (default: из окружения или 1)'
    )
    parser.add_argument('--verbose', '-v', action='store_true')

    args = parser.parse_args(argv)

    config = SolverConfig.from_env()
    if args.workers is not None:
        config.max_workers = max(1, args.workers)
    if args.verbose:
        config.verbose = True
        config.log_level = 'DEBUG'
    logger = get_logger(level=config.log_level)
    logger.set_level(config.log_level)

    empty_hole = args.empty_hole
    if empty_hole is None:
        empty_hole = random.randrange(HOLE_COUNT)

    try:
        moves = parse_moves(args.moves)
        state = BoardState.new_game(empty_hole)
    except (ValueError, SolverError) as e:
        print(f"❌ Ошибка: {e}")
        return 1

    engine = SearchEngine(config=config)
    state, played = play(engine, state, moves, args.undo)

    print("=" * 40)
    print("⛳ Golf Tee Solver")
    print("=" * 40)
    print(display_board(state))
    print()

    if args.hints:
        print(format_hints(engine.analyze_legal_moves(state)))
    else:
        print(format_moves(engine.legal_moves(state)))

    print(f"\n🎯 Лучший достижимый итог: {engine.solve(state)}")

    if config.verbose:
        logger.info(f"Stats: {engine.stats}, {engine.memo!r}")
        get_monitor().log_stats()

    if not played:
        print("❌ Ошибка: недопустимый ход, партия остановлена")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
