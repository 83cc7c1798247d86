from __future__ import annotations
import numbers
from typing import Any, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Channels = Tuple[float, float, float, float]
# Anything a caller may hand to ColorValue; validity is decided by colors.inputs
RawColor = Union[None, bool, Scalar, str, Sequence[Scalar], ndarray, Any]


def is_number(value: Any) -> bool:
    """
    Check whether a value is a plain number.

    ``bool`` is a subclass of ``int`` in Python but is a flag here, never a shade.
    Any real number counts: ints, floats, ``Fraction`` and numpy scalars
    (``np.float32(0.5)``, ``np.uint8(3)``).
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


