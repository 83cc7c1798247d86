"""tinct: color values and color sets for 2D multimedia code."""

from .colors.color_value import ColorValue
from .colors.color_set import ColorSet, color_set
from .colors.inputs import (
    ColorInput,
    FlagInput,
    CopyInput,
    ScalarInput,
    KeywordInput,
    HexInput,
    ChannelsInput,
    classify,
    is_valid,
    is_hex,
)
from .colors.named import NAMED_COLORS, RANDOM
from .conversions import hex_to_unit, unit_to_hex
from .errors import InvalidColorInput
from .types.format_type import FormatType, HexCase

# Friendly aliases
Color = ColorValue
valid = is_valid

__all__ = [
    # values
    "ColorValue",
    "ColorSet",
    "Color",
    "color_set",
    # input classification
    "ColorInput",
    "FlagInput",
    "CopyInput",
    "ScalarInput",
    "KeywordInput",
    "HexInput",
    "ChannelsInput",
    "classify",
    "is_valid",
    "valid",
    "is_hex",
    # data
    "NAMED_COLORS",
    "RANDOM",
    # conversions
    "hex_to_unit",
    "unit_to_hex",
    "FormatType",
    "HexCase",
    # errors
    "InvalidColorInput",
]
