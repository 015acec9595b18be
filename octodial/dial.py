"""
Dial
====

One interactive dial: a rotary state machine, a pair picker and the
shared multiplication table, wired together.

    from octodial import Dial

    dial = Dial()
    dial.visible_set()            # frozenset({0, 1, 3})
    dial.click_unit(0)            # Display(SINGLE_UNIT, 'i_0')
    dial.click_unit(1)            # Display(PRODUCT, 'i_0 i_1 = i_3')
    dial.press_key('ArrowRight')  # rotates, clears the display
    dial.visible_set()            # frozenset({1, 2, 4})

Each Dial owns its own state, so any number can coexist.
"""

import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple

from octodial.algebra.render import rule_formula
from octodial.algebra.table import (
    VISIBLE_TRIPLES,
    AlgebraTable,
    build_table,
    default_table,
    verify_covering,
)
from octodial.config.dial_config import get_setting, merge_config
from octodial.picker.machine import Display, PairPickerStateMachine
from octodial.rotary.angles import pointer_angle
from octodial.rotary.machine import RotaryStateMachine

logger = logging.getLogger(__name__)


class Dial:
    """
    Rotary dial + pair picker.

    Args:
        config: Config dict (see octodial.config). May be partial: missing
            keys fall back to DIAL_CONFIG.
        table: Prebuilt table. Built from the config's triples if omitted.
        center: Dial center in screen coordinates, for pointer input.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        table: Optional[AlgebraTable] = None,
        center: Tuple[float, float] = (0.0, 0.0),
    ):
        self.config = merge_config(config)
        raw_triples = get_setting('algebra.triples', config=self.config)
        verify_covering(raw_triples)
        triples = [tuple(t) for t in raw_triples]

        if table is None:
            table = default_table() if triples == list(VISIBLE_TRIPLES) else build_table(triples)
        self.table = table
        self.style = get_setting('display.style', 'ascii', config=self.config)
        self.center = center

        self.rotary = RotaryStateMachine(
            triples=triples,
            tolerance=get_setting('rotary.tolerance', config=self.config),
        )
        self.picker = PairPickerStateMachine(table=self.table, style=self.style)
        self.rotary.on_rotation_start(self.picker.reset)

        self._next_keys = frozenset(get_setting('keys.next', [], config=self.config))
        self._previous_keys = frozenset(get_setting('keys.previous', [], config=self.config))

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def begin_drag(self, angle: float) -> None:
        self.rotary.begin_drag(angle)

    def continue_drag(self, angle: float) -> None:
        self.rotary.continue_drag(angle)

    def end_drag(self) -> float:
        return self.rotary.end_drag()

    def begin_drag_at(self, x: float, y: float) -> None:
        """Begin a drag from a pointer position in screen coordinates."""
        self.rotary.begin_drag(pointer_angle(x, y, *self.center))

    def drag_to(self, x: float, y: float) -> None:
        self.rotary.continue_drag(pointer_angle(x, y, *self.center))

    def step_next(self) -> float:
        return self.rotary.step_next()

    def step_previous(self) -> float:
        return self.rotary.step_previous()

    def press_key(self, key: str) -> bool:
        """
        Step the dial for a bound key. Returns False for unbound keys.
        """
        if key in self._next_keys:
            self.rotary.step_next()
            return True
        if key in self._previous_keys:
            self.rotary.step_previous()
            return True
        logger.debug(f"key {key!r} not bound")
        return False

    # ------------------------------------------------------------------
    # Picking
    # ------------------------------------------------------------------

    def click_unit(self, unit: int) -> Optional[Display]:
        return self.picker.click_unit(unit, self.visible_set())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        return self.rotary.position

    @property
    def angle(self) -> float:
        return self.rotary.angle

    def visible_set(self) -> FrozenSet[int]:
        return self.rotary.visible_set()

    def current_display(self) -> Display:
        return self.picker.current_display()

    def rule_formula(self) -> str:
        return rule_formula(self.rotary.position, self.style, self.table, self.rotary.triples)

    def snapshot(self) -> Dict[str, Any]:
        display = self.picker.current_display()
        return {
            'angle': self.rotary.angle,
            'position': self.rotary.position,
            'visible': list(self.rotary.visible_triple()),
            'dragging': self.rotary.dragging,
            'picker_mode': str(self.picker.mode),
            'display_kind': str(display.kind),
            'display': display.text,
        }

    def __repr__(self) -> str:
        return f"Dial(position={self.position}, angle={self.angle:.2f}, display={self.current_display().text!r})"
