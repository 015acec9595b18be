"""
Text rendering for units, products and the full table.

Two styles:
    ascii    i_0 i_1 = i_3      i_3^2 = -1
    unicode  i₀i₁ = i₃          i₃² = -1
"""

from typing import Optional, Sequence

from octodial.algebra.table import (
    N_GENERATORS,
    VISIBLE_TRIPLES,
    AlgebraTable,
    EntryKind,
    MultiplicationEntry,
    default_table,
)
from octodial.config.dial_config import RENDER_STYLES

SUBSCRIPTS = '₀₁₂₃₄₅₆₇₈₉'
UNDEFINED = 'undefined'


def _check_style(style: str) -> None:
    if style not in RENDER_STYLES:
        raise ValueError(f"Unknown render style {style!r}. Valid: {', '.join(RENDER_STYLES)}")


def unit_label(g: int, style: str = 'ascii') -> str:
    """Label for a single unit: i_3 or i₃."""
    _check_style(style)
    if style == 'unicode':
        return 'i' + ''.join(SUBSCRIPTS[int(d)] if d.isdigit() else d for d in str(g))
    return f"i_{g}"


def _pair_label(a: int, b: int, style: str) -> str:
    if style == 'unicode':
        return f"{unit_label(a, style)}{unit_label(b, style)}"
    return f"{unit_label(a, style)} {unit_label(b, style)}"


def render_entry(entry: MultiplicationEntry, style: str = 'ascii') -> str:
    _check_style(style)
    if entry.kind == EntryKind.SQUARE:
        square = '²' if style == 'unicode' else '^2'
        return f"{unit_label(entry.left, style)}{square} = -1"

    sign = '-' if entry.negative else ''
    return f"{_pair_label(entry.left, entry.right, style)} = {sign}{unit_label(entry.result, style)}"


def render_product(
    table: AlgebraTable,
    a: int,
    b: int,
    style: str = 'ascii',
) -> str:
    """
    Rendered product i_a · i_b.

    A pair the table cannot resolve renders as 'undefined' instead of raising.
    """
    _check_style(style)
    try:
        entry: Optional[MultiplicationEntry] = table.entry(a, b)
    except ValueError:
        entry = None

    if entry is None:
        return f"{_pair_label(a, b, style)} = {UNDEFINED}"
    return render_entry(entry, style)


def rule_formula(
    position: int,
    style: str = 'ascii',
    table: Optional[AlgebraTable] = None,
    triples: Sequence[Sequence[int]] = VISIBLE_TRIPLES,
) -> str:
    """Formula shown for a dial position: product of the first two units of its triple."""
    table = table or default_table()
    left, right, _ = triples[position % N_GENERATORS]
    return render_product(table, left, right, style)


def format_table(table: AlgebraTable, style: str = 'ascii') -> str:
    """
    7×7 grid of signed products. Rows are the left operand, columns the right.
    """
    _check_style(style)
    headers = [unit_label(g, style) for g in range(N_GENERATORS)]
    cells = []
    for a in range(N_GENERATORS):
        row = []
        for b in range(N_GENERATORS):
            entry = table.entry(a, b)
            if entry.kind == EntryKind.SQUARE:
                row.append('-1')
            else:
                row.append(('-' if entry.negative else '+') + unit_label(entry.result, style))
        cells.append(row)

    width = max(len(c) for c in headers + [c for row in cells for c in row]) + 1
    lines = [' ' * width + ' |' + ''.join(h.rjust(width) for h in headers)]
    lines.append('-' * len(lines[0]))
    for label, row in zip(headers, cells):
        lines.append(label.rjust(width) + ' |' + ''.join(c.rjust(width) for c in row))
    return '\n'.join(lines)
