"""
core - Ядро Golf Tee

Топология доски и иммутабельное состояние.
"""

from .topology import (
    HOLE_COUNT, FULL_MASK, MAX_JUMPS,
    LEGAL_JUMPS_BY_DESTINATION, JUMP_TRIPLES, OVER_BY_PAIR,
    popcount, over_position, position_to_coords, coords_to_position
)
from .board import BoardState, Jump, to_jump
from .utils import PEG, HOLE, render_triangle

__all__ = [
    'BoardState', 'Jump', 'to_jump',
    'HOLE_COUNT', 'FULL_MASK', 'MAX_JUMPS',
    'LEGAL_JUMPS_BY_DESTINATION', 'JUMP_TRIPLES', 'OVER_BY_PAIR',
    'popcount', 'over_position', 'position_to_coords', 'coords_to_position',
    'PEG', 'HOLE', 'render_triangle',
]
