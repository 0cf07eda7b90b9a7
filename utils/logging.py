"""
utils/logging.py

Централизованное логирование для движка Golf Tee.
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "golf_tee"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def parse_level(level: Union[int, str]) -> int:
    """
    Приводит уровень логирования к числу.

    Принимает как logging.DEBUG, так и строку "debug" / "DEBUG".
    Неизвестная строка даёт INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


class SolverLogger:
    """Логгер для поискового движка и веб-слоя."""

    def __init__(self, name: str = LOGGER_NAME, level: Union[int, str] = logging.INFO):
        """
        Args:
            name: имя логгера
            level: уровень логирования
        """
        level = parse_level(level)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: Union[int, str]):
        """Меняет уровень логгера и всех его handlers."""
        level = parse_level(level)
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False):
        self.logger.critical(message, exc_info=exc_info)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = LOGGER_NAME, level: Union[int, str] = logging.INFO) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Уровень учитывается только при первом вызове; дальше
    используйте SolverLogger.set_level().
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "golf_tee.log", level: Union[int, str] = logging.INFO):
    """
    Дублирует лог в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования
    """
    logger = get_logger()

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(parse_level(level))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    return file_handler
