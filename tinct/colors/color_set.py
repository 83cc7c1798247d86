from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union, overload

import numpy as np
from numpy import ndarray
from boundednumbers import BoundType

from ..errors import InvalidColorInput
from ..types.color_types import Scalar
from ..types.format_type import FormatType, default_format_dtypes
from .color_value import ColorValue
from .inputs import is_valid


class ColorSet:
    """
    An ordered, immutable group of colors, one per input element.

    Built by :func:`color_set` when every element of a list is a color on its
    own. Elements are validated before any of them is constructed.
    """
    __slots__ = ('_colors', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, colors: Iterable[Any]) -> None:
        colors = list(colors)
        invalid = [el for el in colors if not is_valid(el)]
        if invalid:
            raise InvalidColorInput(invalid[0])
        self._colors: Tuple[ColorValue, ...] = tuple(ColorValue(el) for el in colors)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_raw(cls, colors: Any) -> Union[ColorSet, ColorValue]:
        return color_set(colors)

    @property
    def colors(self) -> Tuple[ColorValue, ...]:
        return self._colors

    @property
    def opacity(self) -> Optional[float]:
        """Opacity of the first color, None for an empty set."""
        if not self._colors:
            return None
        return self._colors[0].opacity

    def with_opacity(self, opacity: Scalar, *, bound: Optional[BoundType] = None) -> ColorSet:
        """Return a new set with every color's alpha replaced."""
        return self.__class__([c.with_opacity(opacity, bound=bound) for c in self._colors])

    def to_array(self, format_type: FormatType = FormatType.FLOAT) -> ndarray:
        """Stack the colors into an ``(N, 4)`` array."""
        fmt = FormatType(format_type)
        dtype = default_format_dtypes[fmt]
        if not self._colors:
            return np.empty((0, 4), dtype=dtype)
        return np.stack([c.to_array(fmt) for c in self._colors]).astype(dtype)

    def to_hex_list(self, opacity: bool = False) -> List[str]:
        return [c.to_hex(opacity=opacity) for c in self._colors]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[ColorValue]:
        return iter(self._colors)

    @overload
    def __getitem__(self, index: int) -> ColorValue: ...
    @overload
    def __getitem__(self, index: slice) -> ColorSet: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._colors[index])
        return self._colors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSet):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __reduce__(self):
        return (self.__class__, (self._colors,))

    def __repr__(self) -> str:
        return f"ColorSet({list(self._colors)!r})"


def color_set(colors: Any) -> Union[ColorSet, ColorValue]:
    """
    Build a ColorSet or a single ColorValue from raw input.

    A list or tuple whose every element is itself a color becomes a ColorSet,
    in input order. Anything else, including a list that fails that test,
    is read as one color. Since a number is a color on its own,
    ``[0.1, 0.2, 0.3, 0.4]`` yields a set of four gray shades, not one RGBA
    color; pass it to ``ColorValue`` directly for the latter.

    Raises:
        InvalidColorInput: if the input is neither a set of colors nor a color.
    """
    if isinstance(colors, (list, tuple)) and all(is_valid(el) for el in colors):
        return ColorSet(colors)
    return ColorValue(colors)
