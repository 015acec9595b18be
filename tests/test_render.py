"""Tests for product rendering."""

import pytest

from octodial.algebra import (
    build_table,
    format_table,
    render_entry,
    render_product,
    rule_formula,
    unit_label,
)


@pytest.fixture
def table():
    return build_table()


class TestUnitLabel:

    def test_ascii(self):
        """Plain label."""
        assert unit_label(3) == 'i_3'

    def test_unicode(self):
        """Subscript style."""
        assert unit_label(3, 'unicode') == 'i₃'
        assert unit_label(0, 'unicode') == 'i₀'

    def test_unknown_style(self):
        """Unknown styles raise ValueError."""
        with pytest.raises(ValueError, match="Unknown render style"):
            unit_label(1, 'latex')


class TestRenderProduct:

    def test_positive(self, table):
        """Positive product has no sign."""
        assert render_product(table, 0, 1) == 'i_0 i_1 = i_3'

    def test_negative(self, table):
        """Negative product carries a minus."""
        assert render_product(table, 1, 0) == 'i_1 i_0 = -i_3'

    def test_square(self, table):
        """Squares render as -1."""
        assert render_product(table, 3, 3) == 'i_3^2 = -1'

    def test_unicode(self, table):
        """Subscript style."""
        assert render_product(table, 0, 1, 'unicode') == 'i₀i₁ = i₃'
        assert render_product(table, 1, 0, 'unicode') == 'i₁i₀ = -i₃'
        assert render_product(table, 3, 3, 'unicode') == 'i₃² = -1'

    def test_unresolvable_pair(self, table):
        """Out-of-range pairs render as undefined."""
        assert render_product(table, 0, 9) == 'i_0 i_9 = undefined'

    def test_render_entry_matches(self, table):
        """render_entry and render_product agree."""
        assert render_entry(table[2, 3]) == render_product(table, 2, 3)


class TestRuleFormula:

    @pytest.mark.parametrize("position,formula", [
        (0, 'i_0 i_1 = i_3'),
        (1, 'i_1 i_2 = i_4'),
        (4, 'i_4 i_5 = i_0'),
        (5, 'i_5 i_6 = i_1'),
        (6, 'i_6 i_0 = i_2'),
    ])
    def test_positions(self, position, formula):
        """Each position shows its rule."""
        assert rule_formula(position) == formula

    def test_unicode(self):
        """Subscript style."""
        assert rule_formula(3, 'unicode') == 'i₃i₄ = i₆'


class TestFormatTable:

    def test_shape(self, table):
        """Header, rule and seven rows."""
        lines = format_table(table).splitlines()
        # header, rule, 7 rows
        assert len(lines) == 9
        assert lines[2].strip().startswith('i_0')

    def test_diagonal(self, table):
        """Seven -1 entries on the diagonal."""
        assert format_table(table).count('-1') == 7

    def test_signs(self, table):
        """Rows carry explicit signs."""
        row_0 = format_table(table).splitlines()[2]
        assert '+i_3' in row_0
        row_1 = format_table(table).splitlines()[3]
        assert '-i_3' in row_1
