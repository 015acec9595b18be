"""
octodial — interactive dial over the seven imaginary units of the octonions.

Rotate the dial to bring one of seven visible triples into view, then pick
two visible units to see their signed product.

    from octodial import Dial

    dial = Dial()
    dial.click_unit(0)
    dial.click_unit(1).text       # 'i_0 i_1 = i_3'

Components:
    octodial.algebra   multiplication table from the visible triples
    octodial.rotary    drag / step → rule position
    octodial.picker    two clicks → product
    octodial.config    settings, YAML overrides
"""

__version__ = "0.1.0"

from octodial.dial import Dial

__all__ = [
    '__version__',
    'Dial',
]
