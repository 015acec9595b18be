"""
Algebra — multiplication table for the seven imaginary units i0..i6.

    from octodial.algebra import build_table, render_product

    table = build_table()
    table[0, 1]                   # MultiplicationEntry(0, 1, CROSS, 3, negative=False)
    render_product(table, 1, 0)   # 'i_1 i_0 = -i_3'
"""

from octodial.algebra.table import (
    N_GENERATORS,
    VISIBLE_TRIPLES,
    AlgebraTable,
    EntryKind,
    MultiplicationEntry,
    TripleConfigurationError,
    build_table,
    check_anticommutativity,
    default_table,
    find_triple,
    is_clockwise,
    verify_covering,
)
from octodial.algebra.render import (
    format_table,
    render_entry,
    render_product,
    rule_formula,
    unit_label,
)

__all__ = [
    'N_GENERATORS',
    'VISIBLE_TRIPLES',
    'AlgebraTable',
    'EntryKind',
    'MultiplicationEntry',
    'TripleConfigurationError',
    'build_table',
    'check_anticommutativity',
    'default_table',
    'find_triple',
    'is_clockwise',
    'verify_covering',
    'format_table',
    'render_entry',
    'render_product',
    'rule_formula',
    'unit_label',
]
