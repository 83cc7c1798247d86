"""
Raw color input classification.

Every accepted input shape maps to exactly one variant of the closed
``ColorInput`` union. ``classify`` is the only place that inspects raw
values; ``is_valid`` is defined in terms of it, so single-color construction
and the per-element check of a color set always agree.

Accepted shapes
---------------
- ``None`` / ``False`` / ``True``              -> FlagInput
- an existing ColorValue                      -> CopyInput
- a number (int, float, numpy scalar)         -> ScalarInput
- a key of the named color table              -> KeywordInput
- ``#RRGGBB`` / ``#RRGGBBAA`` (by length)      -> HexInput
- non-empty list/tuple/1-D array of numbers   -> ChannelsInput
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union, TYPE_CHECKING

import numpy as np
from numpy import ndarray

from ..conversions.hex import HEX_PREFIX, SHORT_LENGTH, LONG_LENGTH
from ..types.color_types import is_number
from ..utils import get_dimension
from .named import is_keyword

if TYPE_CHECKING:
    from .color_value import ColorValue


@dataclass(frozen=True)
class FlagInput:
    on: bool


@dataclass(frozen=True)
class CopyInput:
    source: "ColorValue"


@dataclass(frozen=True)
class ScalarInput:
    value: float


@dataclass(frozen=True)
class KeywordInput:
    name: str


@dataclass(frozen=True)
class HexInput:
    text: str


@dataclass(frozen=True)
class ChannelsInput:
    values: Tuple[float, ...]


ColorInput = Union[FlagInput, CopyInput, ScalarInput, KeywordInput, HexInput, ChannelsInput]


def is_hex(value: Any) -> bool:
    """Shape check only: a string of length 7 or 9 starting with ``#``."""
    return (
        isinstance(value, str)
        and value[:1] == HEX_PREFIX
        and len(value) in (SHORT_LENGTH, LONG_LENGTH)
    )


def is_channel_array(value: Any) -> bool:
    if isinstance(value, ndarray):
        if value.ndim != 1:
            return False
    elif not isinstance(value, (list, tuple)):
        return False
    return get_dimension(value) > 0 and all(is_number(el) for el in value)


def classify(raw: Any) -> Optional[ColorInput]:
    """Return the input variant for ``raw``, or None when it is not a color."""
    from .color_value import ColorValue  # local import to avoid cycles

    if raw is None or isinstance(raw, (bool, np.bool_)):
        return FlagInput(bool(raw))
    if isinstance(raw, ColorValue):
        return CopyInput(raw)
    if is_number(raw):
        try:
            return ScalarInput(float(raw))
        except OverflowError:
            # ints past the float range cannot be a channel
            return None
    if isinstance(raw, str):
        if is_keyword(raw):
            return KeywordInput(raw)
        if is_hex(raw):
            return HexInput(raw)
        return None
    if is_channel_array(raw):
        try:
            return ChannelsInput(tuple(float(el) for el in raw))
        except OverflowError:
            return None
    return None


def is_valid(raw: Any) -> bool:
    return classify(raw) is not None


__all__ = [
    "FlagInput",
    "CopyInput",
    "ScalarInput",
    "KeywordInput",
    "HexInput",
    "ChannelsInput",
    "ColorInput",
    "classify",
    "is_valid",
    "is_hex",
    "is_channel_array",
]
