"""
Rotary — continuous drag and discrete steps → rule position.
"""

from octodial.rotary.angles import (
    N_POSITIONS,
    canonical_angle,
    degrees_per_position,
    is_congruent,
    nearest_position,
    normalize_degrees,
    pointer_angle,
    shortest_delta,
    wrap_delta,
)
from octodial.rotary.machine import RotaryStateMachine

__all__ = [
    'N_POSITIONS',
    'RotaryStateMachine',
    'canonical_angle',
    'degrees_per_position',
    'is_congruent',
    'nearest_position',
    'normalize_degrees',
    'pointer_angle',
    'shortest_delta',
    'wrap_delta',
]
