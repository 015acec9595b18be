"""
Picker — choose two visible units, show their signed product.
"""

from octodial.picker.machine import (
    EMPTY_DISPLAY,
    Display,
    DisplayKind,
    PairPickerStateMachine,
    PickerMode,
)

__all__ = [
    'EMPTY_DISPLAY',
    'Display',
    'DisplayKind',
    'PairPickerStateMachine',
    'PickerMode',
]
