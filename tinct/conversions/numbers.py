from __future__ import annotations
from typing import Iterable, Tuple
import warnings
import numpy as np
from boundednumbers import BoundType, bounce, clamp

from ..types.format_type import FormatType, max_non_hue, format_classes
from ..types.color_types import Channels

DEFAULT_BOUND = BoundType.IGNORE

# CYCLIC/MODULO are left out: wrapping a [0, 1] channel turns 1.0 into 0.0
BOUND_FUNCTIONS = {
    BoundType.CLAMP: clamp,
    BoundType.BOUNCE: bounce,
}
SUPPORTED_BOUNDS = (BoundType.IGNORE, *BOUND_FUNCTIONS)


def resolve_bound(bound: BoundType | None) -> BoundType:
    if bound is None:
        return DEFAULT_BOUND
    if bound in SUPPORTED_BOUNDS:
        return bound
    warnings.warn(f"Unsupported channel bound: {bound}, defaulting to {DEFAULT_BOUND}")
    return DEFAULT_BOUND


def bound_channels(channels: Iterable[float], bound: BoundType | None = None) -> Channels:
    """
    Apply a boundednumbers policy to each channel.

    ``IGNORE`` leaves out-of-range channels untouched (the permissive default),
    ``CLAMP`` pins them to [0, 1] and ``BOUNCE`` reflects them back inside.
    """
    bound = resolve_bound(bound)
    values = tuple(float(c) for c in channels)
    if bound == BoundType.IGNORE:
        return values  # type: ignore[return-value]
    fn = BOUND_FUNCTIONS[bound]
    return tuple(float(fn(c, 0.0, 1.0)) for c in values)  # type: ignore[return-value]


def unit_to_bytes(channels: Iterable[float]) -> np.ndarray:
    """
    Quantize unit channels to 0..255 integers, rounding then clamping.

    NaN maps to 0; infinities saturate to 0 or 255.
    """
    arr = np.asarray(tuple(channels), dtype=np.float64) * 255
    arr = np.nan_to_num(arr, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.round(arr), 0, 255).astype(np.uint8)


def scale(channels: Channels, fmt: FormatType) -> Tuple:
    """
    Scale unit channels to the range of a FormatType.

    Args:
        channels: (r, g, b, a) in unit range
        fmt: Target format (INT 0-255, FLOAT 0-1, PERCENTAGE 0-100)

    Returns:
        Tuple of scaled channels, typed per ``format_classes``
    """
    fmt = FormatType(fmt)
    if fmt == FormatType.FLOAT:
        return tuple(float(c) for c in channels)
    if fmt == FormatType.INT:
        return tuple(int(v) for v in unit_to_bytes(channels))
    maxval = max_non_hue[fmt]
    cast_to = format_classes[fmt]
    return tuple(cast_to(c * maxval) for c in channels)
