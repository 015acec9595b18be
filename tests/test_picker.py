"""Tests for the pick-a-pair state machine."""

import pytest

from octodial.algebra import build_table
from octodial.picker import (
    EMPTY_DISPLAY,
    DisplayKind,
    PairPickerStateMachine,
    PickerMode,
)

VISIBLE = frozenset({0, 1, 3})


@pytest.fixture
def picker():
    return PairPickerStateMachine(table=build_table(), style='ascii')


class TestPickerMode:

    def test_string_conversion(self):
        """Enums convert to readable strings."""
        assert str(PickerMode.IDLE) == "IDLE"
        assert str(PickerMode.AWAITING_SECOND) == "AWAITING_SECOND"
        assert str(DisplayKind.PRODUCT) == "PRODUCT"


class TestClickUnit:

    def test_initial_state(self, picker):
        """A new picker is idle with nothing shown."""
        assert picker.mode == PickerMode.IDLE
        assert picker.first is None
        assert picker.current_display() == EMPTY_DISPLAY
        assert picker.current_display().is_empty

    def test_pair_sequence(self, picker):
        """unit, product, then a fresh unit."""
        d = picker.click_unit(0, VISIBLE)
        assert d.kind == DisplayKind.SINGLE_UNIT
        assert d.unit == 0
        assert d.text == 'i_0'
        assert picker.mode == PickerMode.AWAITING_SECOND

        d = picker.click_unit(1, VISIBLE)
        assert d.kind == DisplayKind.PRODUCT
        assert d.text == 'i_0 i_1 = i_3'
        assert d.pair == (0, 1)
        assert picker.mode == PickerMode.IDLE

        d = picker.click_unit(3, VISIBLE)
        assert d.kind == DisplayKind.SINGLE_UNIT
        assert d.text == 'i_3'
        assert picker.first == 3

    def test_product_persists(self, picker):
        """A product stays on display."""
        picker.click_unit(1, VISIBLE)
        picker.click_unit(0, VISIBLE)
        assert picker.current_display().text == 'i_1 i_0 = -i_3'
        assert picker.current_display().text == 'i_1 i_0 = -i_3'

    def test_same_unit_twice_squares(self, picker):
        """Picking the same unit twice shows its square."""
        picker.click_unit(3, VISIBLE)
        d = picker.click_unit(3, VISIBLE)
        assert d.kind == DisplayKind.PRODUCT
        assert d.text == 'i_3^2 = -1'

    def test_hidden_unit_ignored(self, picker):
        """Hidden units never change state."""
        assert picker.click_unit(2, VISIBLE) is None
        assert picker.mode == PickerMode.IDLE
        assert picker.current_display() == EMPTY_DISPLAY

    def test_hidden_unit_ignored_mid_pick(self, picker):
        """A hidden click keeps the pending first operand."""
        picker.click_unit(0, VISIBLE)
        before = picker.current_display()
        assert picker.click_unit(5, VISIBLE) is None
        assert picker.mode == PickerMode.AWAITING_SECOND
        assert picker.first == 0
        assert picker.current_display() == before

    def test_hidden_unit_keeps_product(self, picker):
        """A hidden click keeps the shown product."""
        picker.click_unit(0, VISIBLE)
        picker.click_unit(3, VISIBLE)
        product = picker.current_display()
        picker.click_unit(6, VISIBLE)
        assert picker.current_display() == product

    def test_unicode_style(self):
        """Subscript style labels."""
        picker = PairPickerStateMachine(style='unicode')
        picker.click_unit(0, VISIBLE)
        assert picker.current_display().text == 'i₀'
        picker.click_unit(1, VISIBLE)
        assert picker.current_display().text == 'i₀i₁ = i₃'

    def test_bad_style(self):
        """Unknown styles fail at construction."""
        with pytest.raises(ValueError):
            PairPickerStateMachine(style='html')


class TestReset:

    def test_reset_mid_pick(self, picker):
        """reset abandons the first operand."""
        picker.click_unit(0, VISIBLE)
        picker.reset()
        assert picker.mode == PickerMode.IDLE
        assert picker.first is None
        assert picker.current_display().is_empty

    def test_reset_clears_product(self, picker):
        """reset blanks a product."""
        picker.click_unit(0, VISIBLE)
        picker.click_unit(1, VISIBLE)
        picker.reset()
        assert picker.current_display() == EMPTY_DISPLAY

    def test_click_after_reset_starts_fresh(self, picker):
        """The click after a reset is a first operand."""
        picker.click_unit(0, VISIBLE)
        picker.reset()
        d = picker.click_unit(1, VISIBLE)
        assert d.kind == DisplayKind.SINGLE_UNIT
        assert d.unit == 1
