"""
tests/test_cli_and_config.py

Тесты CLI (main.py), конфигурации и логирования.
"""

import logging

import pytest

import main as cli
from config import SolverConfig
from utils.logging import get_logger, parse_level, setup_file_logging
from utils.monitoring import PerformanceMonitor, monitor_time


# -- CLI -----------------------------------------------------------------

def test_cli_new_game(capsys):
    assert cli.main(['--empty-hole', '0']) == 0
    out = capsys.readouterr().out

    assert "Допустимых ходов: 2" in out
    assert "Лучший достижимый итог: 1" in out


def test_cli_hints(capsys):
    assert cli.main(['-e', '0', '--hints']) == 0
    out = capsys.readouterr().out

    assert "Подсказки" in out
    assert '★' in out


def test_cli_moves_and_undo(capsys):
    assert cli.main(['-e', '0', '-m', '0:3,1:8', '--undo', '1']) == 0
    out = capsys.readouterr().out

    assert "Ход 1, колышков: 13" in out


def test_cli_random_hole(capsys):
    assert cli.main([]) == 0
    assert "колышков: 14" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [['-e', '15'], ['-e', '0', '-m', 'bad']])
def test_cli_bad_input(capsys, argv):
    assert cli.main(argv) == 1
    assert "Ошибка" in capsys.readouterr().out


def test_cli_illegal_move_exits_with_error(capsys):
    assert cli.main(['-e', '0', '-m', '0:3,1:2']) == 1
    out = capsys.readouterr().out

    assert "Ход 1, колышков: 13" in out
    assert "Ошибка" in out


def test_play_stops_on_illegal_move(engine, fresh_board):
    from tee_io import parse_moves

    state, played = cli.play(engine, fresh_board, parse_moves("0:3, 1:2, 1:8"), undo=1)

    assert not played
    assert [tuple(j) for j in state.history] == [(0, 3)]


def test_play_undo_more_than_history(engine, fresh_board):
    from tee_io import parse_moves

    state, played = cli.play(engine, fresh_board, parse_moves("0:3"), undo=5)

    assert played
    assert state == fresh_board


# -- Конфиг --------------------------------------------------------------

def test_config_defaults():
    config = SolverConfig.from_env({})

    assert config.max_workers == 1
    assert config.log_level == "INFO"
    assert config.strict_history is False
    assert config.verbose is False


def test_config_from_env():
    config = SolverConfig.from_env({
        'GOLF_TEE_MAX_WORKERS': '4',
        'GOLF_TEE_LOG_LEVEL': 'debug',
        'GOLF_TEE_STRICT_HISTORY': 'yes',
        'GOLF_TEE_VERBOSE': '0',
    })

    assert config.max_workers == 4
    assert config.log_level == "DEBUG"
    assert config.strict_history is True
    assert config.verbose is False


def test_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv('GOLF_TEE_MAX_WORKERS', '2')

    assert SolverConfig.from_env().max_workers == 2


@pytest.mark.parametrize("workers", ['0', 'many'])
def test_config_bad_workers(workers):
    with pytest.raises(ValueError):
        SolverConfig.from_env({'GOLF_TEE_MAX_WORKERS': workers})


# -- Логирование и мониторинг -------------------------------------------

def test_get_logger_is_singleton():
    assert get_logger() is get_logger()


def test_parse_level():
    assert parse_level('debug') == logging.DEBUG
    assert parse_level(logging.WARNING) == logging.WARNING
    assert parse_level('nonsense') == logging.INFO


def test_file_logging(tmp_path):
    log_file = tmp_path / "golf_tee.log"
    logger = get_logger()
    handler = setup_file_logging(str(log_file))
    try:
        logger.info("hello from test")
        handler.flush()
    finally:
        logger.logger.removeHandler(handler)
        handler.close()

    assert "hello from test" in log_file.read_text(encoding='utf-8')


def test_monitor_time_records_errors(monkeypatch):
    monitor = PerformanceMonitor()
    monkeypatch.setattr('utils.monitoring._monitor', monitor)

    @monitor_time('boom')
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        boom()

    assert monitor.get_stats('boom_error')['count'] == 1
    assert monitor.get_stats('boom') == {}
