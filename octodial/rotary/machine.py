"""
Rotary dial state machine.

Turns a free pointer drag, or a single step command, into one of seven
rule positions.

    IDLE ──begin_drag──▶ DRAGGING ──continue_drag──▶ DRAGGING
      ▲                     │
      └──────end_drag───────┘   (snap to nearest position)

    step_next / step_previous: move one position from any state.

While dragging the continuous angle follows the pointer exactly and no
position is authoritative. Every completed operation leaves the angle
congruent to position · 360/7 and notifies settle listeners once.
The angle itself is never reduced, so multi-turn offsets survive.
"""

import logging
import math
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from octodial.algebra.table import VISIBLE_TRIPLES
from octodial.config.dial_config import DIAL_CONFIG
from octodial.rotary.angles import (
    N_POSITIONS,
    canonical_angle,
    is_congruent,
    nearest_position,
    normalize_degrees,
    shortest_delta,
    wrap_delta,
)

logger = logging.getLogger(__name__)

RotationStartListener = Callable[[], None]
SettleListener = Callable[[int, int], None]


class RotaryStateMachine:
    """
    Continuous angle + discrete rule position.

    Attributes:
        angle: Continuous dial angle in degrees, unbounded.
        position: Current rule position in [0, 6].
    """

    def __init__(
        self,
        triples: Sequence[Sequence[int]] = VISIBLE_TRIPLES,
        tolerance: Optional[float] = None,
    ):
        self.triples = [tuple(t) for t in triples]
        self.tolerance = tolerance if tolerance is not None else DIAL_CONFIG['rotary']['tolerance']

        self.angle = 0.0
        self.position = 0

        self._dragging = False
        self._drag_start_angle = 0.0
        self._last_pointer_angle = 0.0

        self._rotation_start_listeners: List[RotationStartListener] = []
        self._settle_listeners: List[SettleListener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on_rotation_start(self, callback: RotationStartListener) -> None:
        """Called when a drag begins or a step is taken."""
        self._rotation_start_listeners.append(callback)

    def on_settle(self, callback: SettleListener) -> None:
        """Called once per completed end_drag / step with (previous, current)."""
        self._settle_listeners.append(callback)

    def _emit_rotation_start(self) -> None:
        for callback in self._rotation_start_listeners:
            callback()

    def _emit_settle(self, previous: int) -> None:
        for callback in self._settle_listeners:
            callback(previous, self.position)

    # ------------------------------------------------------------------
    # Drag
    # ------------------------------------------------------------------

    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def drag_start_angle(self) -> float:
        """Continuous angle when the current (or last) drag began."""
        return self._drag_start_angle

    def begin_drag(self, pointer_angle: float) -> None:
        if not math.isfinite(pointer_angle):
            logger.debug(f"begin_drag ignored: non-finite pointer angle {pointer_angle}")
            return

        self._dragging = True
        self._drag_start_angle = self.angle
        self._last_pointer_angle = pointer_angle
        logger.debug(f"begin_drag at pointer={pointer_angle:.2f} angle={self.angle:.2f}")
        self._emit_rotation_start()

    def continue_drag(self, pointer_angle: float) -> None:
        if not self._dragging:
            logger.debug("continue_drag ignored: no active drag")
            return
        if not math.isfinite(pointer_angle):
            logger.debug(f"continue_drag ignored: non-finite pointer angle {pointer_angle}")
            return

        delta = wrap_delta(pointer_angle - self._last_pointer_angle)
        self.angle += delta
        self._last_pointer_angle = pointer_angle

    def end_drag(self) -> float:
        """
        Snap to the nearest position along the shortest path.

        Returns the adjustment applied, in (-180, 180]. 0.0 if no drag
        was active.
        """
        if not self._dragging:
            logger.debug("end_drag ignored: no active drag")
            return 0.0

        self._dragging = False
        previous = self.position
        target = nearest_position(self.angle, N_POSITIONS)
        adjustment = self._rotate_to(target)
        logger.debug(
            f"end_drag snapped {previous} → {target} "
            f"(adjust {adjustment:+.2f}, angle={self.angle:.2f})"
        )
        self._emit_settle(previous)
        return adjustment

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def step_next(self) -> float:
        return self._step(+1)

    def step_previous(self) -> float:
        return self._step(-1)

    def _step(self, direction: int) -> float:
        self._emit_rotation_start()

        previous = self.position
        target = (self.position + direction) % N_POSITIONS
        adjustment = self._rotate_to(target)
        logger.debug(f"step {previous} → {target} (adjust {adjustment:+.2f})")
        self._emit_settle(previous)
        return adjustment

    def _rotate_to(self, target: int) -> float:
        adjustment = shortest_delta(normalize_degrees(self.angle), canonical_angle(target))
        self.angle += adjustment
        self.position = target
        return adjustment

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def visible_triple(self) -> Tuple[int, int, int]:
        return self.triples[self.position]

    def visible_set(self) -> FrozenSet[int]:
        """Units selectable at the current position."""
        return frozenset(self.triples[self.position])

    def is_settled(self) -> bool:
        """Angle congruent to the current position's canonical angle."""
        return is_congruent(self.angle, canonical_angle(self.position), self.tolerance)

    def __repr__(self) -> str:
        state = "DRAGGING" if self._dragging else "IDLE"
        return f"RotaryStateMachine(angle={self.angle:.2f}, position={self.position}, {state})"
