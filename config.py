"""
config.py

Настройки движка. Значения по умолчанию переопределяются
переменными окружения GOLF_TEE_*.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "GOLF_TEE_"

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def _env_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class SolverConfig:
    """Настройки поиска и окружения."""
    # Потоков для анализа подсказок (1 = последовательно)
    max_workers: int = 1
    log_level: str = "INFO"
    # Проверять историю ходов при восстановлении состояния клиента
    strict_history: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.max_workers < 1:
            raise ValueError(f"max_workers должен быть >= 1, получено {self.max_workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SolverConfig':
        """
        Собирает конфиг из окружения.

        Переменные:
            GOLF_TEE_MAX_WORKERS, GOLF_TEE_LOG_LEVEL,
            GOLF_TEE_STRICT_HISTORY, GOLF_TEE_VERBOSE
        """
        env = os.environ if environ is None else environ
        config = cls()

        workers = env.get(f"{ENV_PREFIX}MAX_WORKERS")
        if workers:
            config.max_workers = int(workers)
        level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            config.log_level = level.upper()
        strict = env.get(f"{ENV_PREFIX}STRICT_HISTORY")
        if strict is not None:
            config.strict_history = _env_bool(strict)
        verbose = env.get(f"{ENV_PREFIX}VERBOSE")
        if verbose is not None:
            config.verbose = _env_bool(verbose)

        config.__post_init__()
        return config
