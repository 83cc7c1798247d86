from types import MappingProxyType
from typing import Mapping

RANDOM = "random"

# Based on clrs.cc
NAMED_COLORS: Mapping[str, str] = MappingProxyType({
    "navy": "#001F3F",
    "blue": "#0074D9",
    "aqua": "#7FDBFF",
    "teal": "#39CCCC",
    "olive": "#3D9970",
    "green": "#2ECC40",
    "lime": "#01FF70",
    "yellow": "#FFDC00",
    "orange": "#FF851B",
    "red": "#FF4136",
    "brown": "#663300",
    "fuchsia": "#F012BE",
    "purple": "#B10DC9",
    "maroon": "#85144B",
    "white": "#FFFFFF",
    "silver": "#DDDDDD",
    "gray": "#AAAAAA",
    "black": "#111111",
    RANDOM: "",
})


def is_keyword(value: object) -> bool:
    return isinstance(value, str) and value in NAMED_COLORS


def keyword_to_hex(name: str) -> str:
    """Look up a keyword; the ``random`` sentinel has no fixed hex value."""
    if name == RANDOM:
        raise ValueError("'random' has no fixed hex value")
    return NAMED_COLORS[name]


__all__ = ["NAMED_COLORS", "RANDOM", "is_keyword", "keyword_to_hex"]
