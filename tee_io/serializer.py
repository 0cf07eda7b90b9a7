"""
tee_io/serializer.py

Передача состояния через клиента: BoardState ⇄ dict (JSON).

Формат:
    {
        "pegs": [true, false, ...],   // 15 флагов, порядок лунок 0..14
        "history": [[to, from], ...], // старые прыжки первыми
        "move_number": 3
    }
"""

from typing import Any, Dict, List, Optional

from core.board import BoardState, Jump, to_jump
from solvers.engine import Analysis, SearchEngine
from utils.error_handling import InvalidBoardError, ValidationError


def jump_to_dict(jump: Jump) -> Dict[str, int]:
    return {'to': jump.destination, 'from': jump.source}


def state_to_dict(state: BoardState) -> Dict[str, Any]:
    """Состояние → JSON-совместимый dict."""
    return {
        'pegs': list(state.to_occupancy()),
        'history': [[jump.destination, jump.source] for jump in state.history],
        'move_number': state.move_number,
    }


def state_from_dict(data: Any, strict: bool = False,
                    engine: Optional[SearchEngine] = None) -> BoardState:
    """
    Восстанавливает состояние из данных клиента.

    По умолчанию расстановке доверяем. При strict=True история
    отматывается назад и должна привести к доске новой партии.

    Raises:
        InvalidBoardError: некорректная структура
        ValidationError: (strict) история не согласуется с расстановкой
    """
    if not isinstance(data, dict):
        raise InvalidBoardError("Состояние должно быть объектом")

    pegs = data.get('pegs')
    if not isinstance(pegs, list):
        raise InvalidBoardError("Поле 'pegs' должно быть списком")

    history = data.get('history', [])
    if not isinstance(history, list):
        raise InvalidBoardError("Поле 'history' должно быть списком")
    jumps = []
    for item in history:
        # Поддерживаем и [to, from], и {"to": .., "from": ..}
        if isinstance(item, dict):
            item = (item.get('to'), item.get('from'))
        jumps.append(to_jump(item))

    state = BoardState.from_occupancy(pegs, jumps, data.get('move_number', 0))

    if strict and not (engine or SearchEngine()).validate_history(state):
        raise ValidationError("История ходов не согласуется с расстановкой колышков")
    return state


def analysis_to_list(analysis: Analysis) -> List[Dict[str, int]]:
    """Подсказки → список dict в порядке допустимых ходов."""
    return [
        {'to': jump.destination, 'from': jump.source, 'best_result': best}
        for jump, best in analysis
    ]
