"""
web/app.py

Flask JSON API для Golf Tee.

Сервер не хранит партии: клиент присылает состояние целиком
(см. tee_io.serializer) и получает новое.
"""

import os
import sys
import random

from flask import Flask, jsonify, request

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import SolverConfig
from core.board import BoardState
from core.topology import HOLE_COUNT
from solvers import SearchEngine
from tee_io import state_to_dict, state_from_dict, analysis_to_list, jump_to_dict
from utils.error_handling import InvalidBoardError, InvariantViolationError
from utils.logging import get_logger

config = SolverConfig.from_env()
logger = get_logger(level=config.log_level)

# Один движок на процесс: таблица мемоизации общая для всех партий
engine = SearchEngine(config=config)

app = Flask(__name__)


def game_response(state: BoardState, show_hints: bool = False, success: bool = True, **extra):
    """
    Ответ с полным состоянием партии.

    possible_moves всегда в порядке legal_moves(); hints — в том же
    порядке, если их запросили, иначе пустой список.
    """
    if show_hints:
        analysis = engine.analyze_legal_moves(state)
        moves = [jump for jump, _ in analysis]
        hints = analysis_to_list(analysis)
    else:
        moves = engine.legal_moves(state)
        hints = []

    payload = {
        'success': success,
        'state': state_to_dict(state),
        'peg_count': state.peg_count(),
        'possible_moves': [jump_to_dict(jump) for jump in moves],
        'hints': hints,
        'best_result': engine.best_achievable_result(state),
    }
    payload.update(extra)
    return jsonify(payload)


def _request_data() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidBoardError("Тело запроса должно быть JSON-объектом")
    return data


def _load_state(data: dict) -> BoardState:
    return state_from_dict(data.get('state'), strict=config.strict_history, engine=engine)


def _int_field(data: dict, name: str) -> int:
    """Целое поле запроса; номер лунки вне доски — просто недопустимый ход."""
    value = data.get(name)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidBoardError(f"Поле {name!r} должно быть целым числом, получено {value!r}")
    return value


@app.errorhandler(InvalidBoardError)
def handle_invalid_board(error):
    logger.warning(f"{request.path}: {error}")
    return jsonify({'success': False, 'error': str(error)}), 400


@app.route('/')
def index():
    """Описание API."""
    return jsonify({
        'name': 'Golf Tee Solver',
        'holes': HOLE_COUNT,
        'endpoints': {
            'POST /api/new-game': '{"empty_hole": 0..14 | null, "show_hints": bool}',
            'POST /api/moves': '{"state": ...}',
            'POST /api/hints': '{"state": ...}',
            'POST /api/jump': '{"state": ..., "to": int, "from": int, "show_hints": bool}',
            'POST /api/jump-from-list': '{"state": ..., "index": int, "show_hints": bool}',
            'POST /api/undo': '{"state": ..., "show_hints": bool}',
            'POST /api/best': '{"state": ...}',
        },
    })


@app.route('/api/new-game', methods=['POST'])
def new_game():
    """Новая партия; без empty_hole лунка выбирается случайно."""
    data = _request_data()
    empty_hole = data.get('empty_hole')
    if empty_hole is None:
        empty_hole = random.randrange(HOLE_COUNT)

    state = BoardState.new_game(empty_hole)
    logger.info(f"New game, empty hole {empty_hole}")
    return game_response(state, bool(data.get('show_hints')))


@app.route('/api/moves', methods=['POST'])
def moves():
    """Допустимые ходы в порядке таблицы."""
    state = _load_state(_request_data())
    return jsonify({
        'success': True,
        'moves': [jump_to_dict(jump) for jump in engine.legal_moves(state)],
    })


@app.route('/api/hints', methods=['POST'])
def hints():
    """Для каждого хода — лучший достижимый итог."""
    state = _load_state(_request_data())
    return jsonify({
        'success': True,
        'hints': analysis_to_list(engine.analyze_legal_moves(state)),
    })


@app.route('/api/jump', methods=['POST'])
def jump():
    """
    Прыжок from → to.

    Недопустимый ход не ошибка: success=false и прежнее состояние.
    """
    data = _request_data()
    state = _load_state(data)
    to = _int_field(data, 'to')
    source = _int_field(data, 'from')

    ok, new_state = engine.apply_jump(state, to, source)
    if not ok:
        return game_response(state, bool(data.get('show_hints')), success=False,
                             error=f"Недопустимый ход {source} → {to}")
    return game_response(new_state, bool(data.get('show_hints')))


@app.route('/api/jump-from-list', methods=['POST'])
def jump_from_list():
    """Ход по номеру из списка possible_moves."""
    data = _request_data()
    state = _load_state(data)
    index = data.get('index')
    legal = engine.legal_moves(state)

    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(legal):
        return game_response(state, bool(data.get('show_hints')), success=False,
                             error=f"Нет хода с номером {index!r}")

    selected = legal[index]
    ok, new_state = engine.apply_jump(state, selected.destination, selected.source)
    if not ok:
        raise InvariantViolationError(f"Legal move {selected} failed to apply")
    return game_response(new_state, bool(data.get('show_hints')))


@app.route('/api/undo', methods=['POST'])
def undo():
    """Отмена последнего хода."""
    data = _request_data()
    state = _load_state(data)

    ok, new_state = engine.undo_last_jump(state)
    if not ok:
        return game_response(state, bool(data.get('show_hints')), success=False,
                             error="Отменять нечего")
    return game_response(new_state, bool(data.get('show_hints')))


@app.route('/api/best', methods=['POST'])
def best():
    """Лучший достижимый итог для текущей позиции."""
    state = _load_state(_request_data())
    return jsonify({
        'success': True,
        'best_result': engine.best_achievable_result(state),
        'peg_count': state.peg_count(),
    })


if __name__ == '__main__':
    print("=" * 50)
    print("Golf Tee Solver - Web API")
    print("=" * 50)
    print("\nOpen http://localhost:5000 in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)
