"""
tests/test_tee_io.py

Тесты для:
- state_to_dict / state_from_dict (передача состояния через клиента)
- parse_move / parse_moves
- визуализации доски и подсказок
"""

import json

import pytest

from core.board import BoardState, Jump
from core.utils import PEG
from tee_io import (
    state_to_dict, state_from_dict, analysis_to_list, jump_to_dict,
    parse_move, parse_moves, display_board, format_moves, format_hints
)
from utils.error_handling import InvalidBoardError, ValidationError


def _after_two_jumps(engine, board):
    _, board = engine.apply_jump(board, 0, 3)
    _, board = engine.apply_jump(board, 1, 8)
    return board


def test_state_to_dict(engine, fresh_board):
    _, board = engine.apply_jump(fresh_board, 0, 3)
    data = state_to_dict(board)

    assert len(data['pegs']) == 15
    assert data['pegs'][0] is True
    assert data['pegs'][3] is False
    assert data['history'] == [[0, 3]]
    assert data['move_number'] == 1


def test_state_roundtrip_through_json(engine, fresh_board):
    """Порядок лунок, порядок истории и счётчик ходов сохраняются."""
    board = _after_two_jumps(engine, fresh_board)
    restored = state_from_dict(json.loads(json.dumps(state_to_dict(board))))

    assert restored == board
    assert restored.history == (Jump(0, 3), Jump(1, 8))


def test_state_from_dict_accepts_dict_jumps():
    data = {
        'pegs': [False] + [True] * 14,
        'history': [{'to': 0, 'from': 3}],
        'move_number': 1,
    }

    assert state_from_dict(data).history == (Jump(0, 3),)


def test_state_from_dict_defaults():
    board = state_from_dict({'pegs': [True, True]})

    assert board.peg_count() == 2
    assert board.history == ()
    assert board.move_number == 0


@pytest.mark.parametrize("payload", [
    None,
    'pegs',
    {},
    {'pegs': 'xxx'},
    {'pegs': [True] * 15, 'history': 'nope'},
    {'pegs': [True] * 15, 'history': [[0, 99]]},
    {'pegs': [True] * 15, 'move_number': -2},
])
def test_state_from_dict_rejects_malformed(payload):
    with pytest.raises(InvalidBoardError):
        state_from_dict(payload)


def test_strict_reconstruction(engine, fresh_board):
    board = _after_two_jumps(engine, fresh_board)
    data = state_to_dict(board)

    assert state_from_dict(data, strict=True, engine=engine) == board

    # Подменяем расстановку: история больше не сходится
    data['pegs'][14] = False
    with pytest.raises(ValidationError):
        state_from_dict(data, strict=True, engine=engine)
    # Без strict — доверяем клиенту
    assert state_from_dict(data).peg_count() == board.peg_count() - 1


def test_analysis_to_list(engine, fresh_board):
    hints = analysis_to_list(engine.analyze_legal_moves(fresh_board))

    assert hints == [
        {'to': 0, 'from': 3, 'best_result': 1},
        {'to': 0, 'from': 5, 'best_result': 1},
    ]


def test_jump_to_dict():
    assert jump_to_dict(Jump(12, 3)) == {'to': 12, 'from': 3}


# -- Парсер --------------------------------------------------------------

def test_parse_move():
    assert parse_move("0:3") == Jump(0, 3)
    assert parse_move(" 12 < 14 ") == Jump(12, 14)


@pytest.mark.parametrize("text", ["", "a:b", "0-3", "15:3", "0:42", "1:2:3"])
def test_parse_move_invalid(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_parse_moves():
    assert parse_moves("0:3, 1:8,") == [Jump(0, 3), Jump(1, 8)]
    assert parse_moves("") == []


# -- Визуализация --------------------------------------------------------

def test_display_board(fresh_board):
    text = display_board(fresh_board)

    assert "колышков: 14" in text
    assert "Ход 0" in text
    assert f"14{PEG}" in text


def test_format_moves(engine, fresh_board):
    text = format_moves(engine.legal_moves(fresh_board))

    assert "Допустимых ходов: 2" in text
    assert "[1]" in text
    assert "окончена" in format_moves([])


def test_format_hints_marks_best():
    analysis = [(Jump(3, 0), 4), (Jump(3, 5), 2), (Jump(3, 10), 2)]
    lines = format_hints(analysis).splitlines()

    assert "лучший итог: 2" in lines[0]
    assert not lines[1].endswith('★')
    assert lines[2].endswith('★')
    assert lines[3].endswith('★')
    assert "окончена" in format_hints([])
