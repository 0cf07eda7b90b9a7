"""
tests/conftest.py

Общие фикстуры.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import BoardState
from solvers import SearchEngine, MemoTable


@pytest.fixture
def engine() -> SearchEngine:
    """Движок со своей (пустой) таблицей мемоизации."""
    return SearchEngine(memo=MemoTable())


@pytest.fixture
def fresh_board() -> BoardState:
    """Новая партия с пустой вершиной треугольника."""
    return BoardState.new_game(0)


@pytest.fixture
def client():
    """Тестовый клиент Flask."""
    from web import app as web_app

    web_app.app.config['TESTING'] = True
    with web_app.app.test_client() as test_client:
        yield test_client
