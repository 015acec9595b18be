"""
Angle arithmetic for the dial. All angles in degrees.

    normalize_degrees(-30)        → 330.0
    wrap_delta(350)               → -10.0      (crossing the ±180 seam)
    shortest_delta(350, 10)       → 20.0
    nearest_position(30.0)        → 1          (30 is nearer 51.43 than 0)
"""

import math

from octodial.config.dial_config import DIAL_CONFIG

N_POSITIONS = DIAL_CONFIG['algebra']['n_generators']
FULL_TURN = 360.0
HALF_TURN = 180.0


def degrees_per_position(n_positions: int = N_POSITIONS) -> float:
    return FULL_TURN / n_positions


def normalize_degrees(angle: float) -> float:
    """Reduce to [0, 360)."""
    normalized = angle % FULL_TURN
    # tiny negative inputs round up to exactly 360.0
    if normalized >= FULL_TURN:
        normalized -= FULL_TURN
    return normalized


def wrap_delta(delta: float) -> float:
    """
    Bring a difference of two angles in (-360, 360) into (-180, 180]
    with a single ±360 adjustment.
    """
    if delta > HALF_TURN:
        delta -= FULL_TURN
    elif delta <= -HALF_TURN:
        delta += FULL_TURN
    return delta


def shortest_delta(current: float, target: float) -> float:
    """Signed shortest rotation from current to target, in (-180, 180]."""
    return wrap_delta(normalize_degrees(target) - normalize_degrees(current))


def canonical_angle(position: int, n_positions: int = N_POSITIONS) -> float:
    return position * degrees_per_position(n_positions)


def nearest_position(angle: float, n_positions: int = N_POSITIONS) -> int:
    """
    Index of the snap target nearest to angle.

    Ties round half-up, then wrap: 6.5 steps → 7 → 0.
    """
    steps = normalize_degrees(angle) / degrees_per_position(n_positions)
    return int(math.floor(steps + 0.5)) % n_positions


def pointer_angle(x: float, y: float, center_x: float, center_y: float) -> float:
    """
    Pointer angle around the dial center, in (-180, 180].

    Screen coordinates: y grows downward, so positive angles run clockwise.
    """
    return math.degrees(math.atan2(y - center_y, x - center_x))


def is_congruent(angle: float, target: float, tolerance: float = 1e-9) -> bool:
    """Whether angle ≡ target (mod 360) within tolerance."""
    return abs(shortest_delta(angle, target)) <= tolerance
