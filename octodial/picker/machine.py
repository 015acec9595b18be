"""
Pick-a-pair state machine.

    IDLE ──click u──▶ AWAITING_SECOND(u) ──click v──▶ IDLE  (shows i_u · i_v)

Clicks on units outside the visible set are ignored. A product stays on
display after the pair resolves; the next click starts a new pair.
reset() (sent when the dial starts rotating) blanks the display at once.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional, Tuple

from octodial.algebra.render import render_product, unit_label
from octodial.algebra.table import AlgebraTable, default_table
from octodial.config.dial_config import DIAL_CONFIG

logger = logging.getLogger(__name__)


class PickerMode(str, Enum):
    IDLE = "IDLE"
    AWAITING_SECOND = "AWAITING_SECOND"

    def __str__(self) -> str:
        return self.value


class DisplayKind(str, Enum):
    EMPTY = "EMPTY"
    SINGLE_UNIT = "SINGLE_UNIT"
    PRODUCT = "PRODUCT"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Display:
    """What the picker currently shows."""
    kind: DisplayKind = DisplayKind.EMPTY
    text: str = ''
    unit: Optional[int] = None
    pair: Optional[Tuple[int, int]] = None

    @property
    def is_empty(self) -> bool:
        return self.kind == DisplayKind.EMPTY


EMPTY_DISPLAY = Display()


class PairPickerStateMachine:
    """Two clicks on visible units → their rendered product."""

    def __init__(self, table: Optional[AlgebraTable] = None, style: Optional[str] = None):
        self.table = table or default_table()
        self.style = style or DIAL_CONFIG['display']['style']
        # fail on a bad style now rather than on the first click
        unit_label(0, self.style)

        self.mode = PickerMode.IDLE
        self.first: Optional[int] = None
        self._display = EMPTY_DISPLAY

    def current_display(self) -> Display:
        return self._display

    def click_unit(self, unit: int, visible_set: Collection[int]) -> Optional[Display]:
        """
        Handle a click on `unit`.

        Returns the new display, or None if the unit is not visible
        (state and display are left untouched).
        """
        if unit not in visible_set:
            logger.debug(f"click on hidden unit {unit} ignored (visible: {sorted(visible_set)})")
            return None

        if self.mode == PickerMode.IDLE:
            self.mode = PickerMode.AWAITING_SECOND
            self.first = unit
            self._display = Display(
                kind=DisplayKind.SINGLE_UNIT,
                text=unit_label(unit, self.style),
                unit=unit,
            )
            logger.debug(f"first operand {unit}")
            return self._display

        first = self.first
        text = render_product(self.table, first, unit, self.style)
        self.mode = PickerMode.IDLE
        self.first = None
        self._display = Display(kind=DisplayKind.PRODUCT, text=text, pair=(first, unit))
        logger.debug(f"product {first}·{unit}: {text}")
        return self._display

    def reset(self) -> None:
        """Back to IDLE with an empty display."""
        if self.mode != PickerMode.IDLE or not self._display.is_empty:
            logger.debug("picker reset")
        self.mode = PickerMode.IDLE
        self.first = None
        self._display = EMPTY_DISPLAY

    def __repr__(self) -> str:
        return f"PairPickerStateMachine(mode={self.mode}, first={self.first}, display={self._display.text!r})"
