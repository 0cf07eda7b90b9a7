"""
utils/monitoring.py

Замер времени анализа ходов и счётчики движка.
"""

import time
from typing import Dict, List, Any, Optional
from collections import defaultdict
from functools import wraps

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None — общая статистика)
        """
        if operation:
            times = self.metrics.get(operation)
            if not times:
                return {}
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1],
            }

        return {
            'operations': {op: self.get_stats(op) for op in self.metrics},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values()),
        }

    def log_stats(self):
        """Пишет сводку в лог."""
        logger = get_logger()
        stats = self.get_stats()
        for op, op_stats in stats['operations'].items():
            logger.info(f"{op}: {op_stats['count']} раз, среднее {op_stats['average'] * 1000:.1f}мс")
        for counter, value in stats['counters'].items():
            logger.info(f"{counter}: {value}")

    def reset(self):
        self.metrics.clear()
        self.counters.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для замера времени выполнения.

    Usage:
        @monitor_time('analyze_legal_moves')
        def analyze_legal_moves(...):
            ...

    Упавшие вызовы пишутся под именем f"{operation}_error".
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.perf_counter() - start)
                raise
            elapsed = time.perf_counter() - start
            monitor.record_time(operation, elapsed)
            get_logger().debug(f"{operation}: {elapsed * 1000:.1f}мс")
            return result
        return wrapper
    return decorator
