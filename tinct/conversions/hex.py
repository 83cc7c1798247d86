"""
Hexadecimal color strings.

Decoding reads fixed-width two-character groups with explicit bounds checks
and rejects anything that is not a hex digit; ``int(x, 16)`` on its own would
accept signs, whitespace and underscores.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple

from ..errors import InvalidColorInput
from ..types.color_types import Channels
from ..types.format_type import HexCase, DEFAULT_HEX_CASE
from .numbers import unit_to_bytes

HEX_PREFIX = "#"
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
GROUP_WIDTH = 2
SHORT_LENGTH = 7   # #RRGGBB
LONG_LENGTH = 9    # #RRGGBBAA
OPAQUE = 255


def split_hex_groups(hex_color: str) -> List[str]:
    """Split ``#RRGGBB[AA]`` into its two-character groups."""
    if not hex_color.startswith(HEX_PREFIX) or len(hex_color) not in (SHORT_LENGTH, LONG_LENGTH):
        raise InvalidColorInput(hex_color, "expected #RRGGBB or #RRGGBBAA")
    body = hex_color[len(HEX_PREFIX):]
    return [body[i:i + GROUP_WIDTH] for i in range(0, len(body), GROUP_WIDTH)]


def parse_hex_byte(group: str, source: str | None = None) -> int:
    if len(group) != GROUP_WIDTH or any(ch not in HEX_DIGITS for ch in group):
        raise InvalidColorInput(source if source is not None else group,
                                f"malformed hex digits {group!r}")
    return int(group, 16)


def hex_to_ints(hex_color: str) -> Tuple[int, int, int, int]:
    """Decode to 0..255 integers; a missing alpha group reads as opaque."""
    values = [parse_hex_byte(group, hex_color) for group in split_hex_groups(hex_color)]
    if len(values) == 3:
        values.append(OPAQUE)
    return tuple(values)  # type: ignore[return-value]


def hex_to_unit(hex_color: str) -> Channels:
    return tuple(v / 255.0 for v in hex_to_ints(hex_color))  # type: ignore[return-value]


def unit_to_hex(channels: Iterable[float], opacity: bool = False,
                case: HexCase = DEFAULT_HEX_CASE) -> str:
    """
    Encode unit channels as ``#RRGGBB`` or, with ``opacity``, ``#RRGGBBAA``.

    Each channel maps to ``round(c * 255)`` clamped to [0, 255].
    """
    values = unit_to_bytes(channels)
    if not opacity:
        values = values[:3]
    digits = "".join(f"{int(v):02X}" for v in values)
    if HexCase(case) == HexCase.LOWER:
        digits = digits.lower()
    return HEX_PREFIX + digits
