"""
tee_io - Ввод/вывод для Golf Tee

Экспортирует:
- Сериализацию состояния для клиента
- Парсинг ходов
- Визуализацию доски и подсказок
"""

from .serializer import state_to_dict, state_from_dict, analysis_to_list, jump_to_dict
from .parser import parse_move, parse_moves
from .visualizer import display_board, format_jump, format_moves, format_hints

__all__ = [
    'state_to_dict',
    'state_from_dict',
    'analysis_to_list',
    'jump_to_dict',
    'parse_move',
    'parse_moves',
    'display_board',
    'format_jump',
    'format_moves',
    'format_hints',
]
