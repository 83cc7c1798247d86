from __future__ import annotations
from typing import Any, Iterator, Optional, Tuple, assert_never, TYPE_CHECKING

import numpy as np
from numpy import ndarray
from boundednumbers import BoundType

from ..conversions import hex_to_unit, unit_to_hex, scale, bound_channels
from ..errors import InvalidColorInput
from ..types.color_types import Channels, RawColor, Scalar
from ..types.format_type import FormatType, HexCase, DEFAULT_HEX_CASE, default_format_dtypes
from ..utils import value_or_default
from .inputs import (
    ChannelsInput, CopyInput, FlagInput, HexInput, KeywordInput, ScalarInput,
    classify, is_hex, is_valid,
)
from .named import RANDOM, keyword_to_hex

if TYPE_CHECKING:
    from .color_set import ColorSet

_default_rng = np.random.default_rng()

OPAQUE_ALPHA = 1.0


def random_channels(rng: Optional[np.random.Generator] = None) -> Channels:
    """Independent uniform draws in [0, 1) for r, g, b; always opaque."""
    generator = value_or_default(rng, _default_rng)
    r, g, b = generator.random(3)
    return (float(r), float(g), float(b), OPAQUE_ALPHA)


def broadcast_channels(values: Tuple[float, ...]) -> Channels:
    """
    Spread a channel list over r, g, b, a.

    One value is a gray shade, three values are opaque RGB, four are RGBA.
    Entries past the fourth are ignored.
    """
    first = values[0]
    g = values[1] if len(values) > 1 else first
    b = values[2] if len(values) > 2 else first
    a = values[3] if len(values) > 3 else OPAQUE_ALPHA
    return (first, g, b, a)


class ColorValue:
    """
    An immutable RGBA color with unit float channels.

    Accepts a keyword (``"navy"``, ``"random"``), a hex string
    (``"#FF4136"``, ``"#FF413680"``), a list of channels (``[0.2]``,
    ``[0.1, 0.2, 0.3]``, ``[0.1, 0.2, 0.3, 0.4]``), another ColorValue,
    a number (every channel set to it), or a flag (``True`` is opaque white,
    ``False``/``None`` transparent black).

    Channels outside [0, 1] are kept as given unless ``bound`` asks for
    ``BoundType.CLAMP`` or ``BoundType.BOUNCE``.
    """
    __slots__ = ('_r', '_g', '_b', '_a', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        color: RawColor,
        *,
        bound: Optional[BoundType] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        parsed = classify(color)
        if parsed is None:
            raise InvalidColorInput(color)

        match parsed:
            case FlagInput(on=on):
                channels = (1.0,) * 4 if on else (0.0,) * 4
            case CopyInput(source=source):
                channels = source.to_tuple()
            case ScalarInput(value=value):
                channels = (value,) * 4
            case KeywordInput(name=name) if name == RANDOM:
                channels = random_channels(rng)
            case KeywordInput(name=name):
                channels = hex_to_unit(keyword_to_hex(name))
            case HexInput(text=text):
                channels = hex_to_unit(text)
            case ChannelsInput(values=values):
                channels = broadcast_channels(values)
            case _:
                assert_never(parsed)

        self._r, self._g, self._b, self._a = bound_channels(channels, bound)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    @property
    def opacity(self) -> float:
        """Alias of ``a`` for call sites that talk about transparency."""
        return self._a

    alpha = opacity

    # ------------------ PREDICATES ------------------
    @staticmethod
    def valid(color: Any) -> bool:
        return is_valid(color)

    @staticmethod
    def is_hex(color: Any) -> bool:
        return is_hex(color)

    @staticmethod
    def set(colors: Any) -> ColorValue | ColorSet:
        """A ColorSet when every element is a color, else a single ColorValue."""
        from .color_set import color_set  # local import to avoid cycles
        return color_set(colors)

    # ------------------ EXPORT ------------------
    def to_tuple(self, format_type: FormatType = FormatType.FLOAT) -> Tuple[Scalar, ...]:
        """
        Return the channels as ``(r, g, b, a)``.

        Args:
            format_type: FLOAT keeps unit floats, INT gives 0-255 ints,
                PERCENTAGE gives 0-100 floats.
        """
        channels = (self._r, self._g, self._b, self._a)
        if format_type == FormatType.FLOAT:
            return channels
        return scale(channels, format_type)

    def to_array(self, format_type: FormatType = FormatType.FLOAT) -> ndarray:
        fmt = FormatType(format_type)
        return np.array(self.to_tuple(fmt), dtype=default_format_dtypes[fmt])

    def to_hex(self, opacity: bool = False, case: Optional[HexCase] = None) -> str:
        """``#RRGGBB``, or ``#RRGGBBAA`` when ``opacity`` is true."""
        return unit_to_hex(self.to_tuple(), opacity=opacity,
                           case=value_or_default(case, DEFAULT_HEX_CASE))

    def with_alpha(self, alpha: Scalar, *, bound: Optional[BoundType] = None) -> ColorValue:
        """
        Return a new color with the alpha channel replaced.

        The bound policy used to build this color is not remembered; pass
        ``bound`` again to clamp or bounce the new channels.
        """
        return self.__class__([self._r, self._g, self._b, alpha], bound=bound)

    with_opacity = with_alpha

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __reduce__(self):
        return (self.__class__, (self.to_tuple(),))

    def __copy__(self) -> ColorValue:
        return self

    def __deepcopy__(self, memo) -> ColorValue:
        return self

    def __str__(self) -> str:
        return self.to_hex(opacity=True)

    def __repr__(self) -> str:
        return f"ColorValue(r={self._r!r}, g={self._g!r}, b={self._b!r}, a={self._a!r})"
