"""
Conversions between unit channels and their external forms.

>>> from tinct.conversions import hex_to_unit, unit_to_hex
>>> hex_to_unit("#FF000080")
(1.0, 0.0, 0.0, 0.5019607843137255)
>>> unit_to_hex((1.0, 0.0, 0.0, 0.5), opacity=True)
'#FF000080'
"""
from .hex import hex_to_ints, hex_to_unit, unit_to_hex, split_hex_groups, parse_hex_byte
from .numbers import scale, bound_channels, resolve_bound, unit_to_bytes, DEFAULT_BOUND

__all__ = [
    "hex_to_ints",
    "hex_to_unit",
    "unit_to_hex",
    "split_hex_groups",
    "parse_hex_byte",
    "scale",
    "bound_channels",
    "resolve_bound",
    "unit_to_bytes",
    "DEFAULT_BOUND",
]
