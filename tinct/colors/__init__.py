"""
tinct color classes
===================

Immutable RGBA colors with unit float channels, plus ordered sets of them.

Usage
-----
>>> from tinct.colors import ColorValue, color_set
>>> ColorValue("red").to_hex()
'#FF4136'
>>> ColorValue([0.2]).to_tuple()
(0.2, 0.2, 0.2, 1.0)
>>> len(color_set(["#FF0000", "#00FF00"]))
2

Notes
-----
- Channels are not clamped at construction unless a ``bound`` is given
- ``to_hex`` always clamps to 0-255
- A list of numbers handed to ``color_set`` is a set of gray shades
"""

from .color_value import ColorValue
from .color_set import ColorSet, color_set
from .inputs import classify, is_valid, is_hex
from .named import NAMED_COLORS, RANDOM

__all__ = [
    "ColorValue",
    "ColorSet",
    "color_set",
    "classify",
    "is_valid",
    "is_hex",
    "NAMED_COLORS",
    "RANDOM",
]
