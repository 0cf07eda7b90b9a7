"""
utils - Логирование, ошибки, мониторинг.
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidBoardError, InvariantViolationError, ValidationError,
    validate_position, validate_empty_hole, validate_move_number
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidBoardError', 'InvariantViolationError', 'ValidationError',
    'validate_position', 'validate_empty_hole', 'validate_move_number',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]
