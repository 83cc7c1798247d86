"""Basic tinct usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from boundednumbers import BoundType

from tinct import ColorValue, ColorSet, FormatType, HexCase, color_set


def demonstrate_colors() -> None:
    # Every accepted input shape ends up as four unit channels.
    for raw in ("navy", "#FF413680", [0.2], [0.1, 0.2, 0.3], 0.5, True, None):
        color = ColorValue(raw)
        print(f"{raw!r:>16} -> {color.to_tuple()} {color.to_hex(opacity=True)}")

    accent = ColorValue("orange")
    print("orange as ints:", accent.to_tuple(FormatType.INT))
    print("orange, lower case hex:", accent.to_hex(case=HexCase.LOWER))
    print("orange at half opacity:", accent.with_opacity(0.5))

    print("random:", ColorValue("random"))
    print("clamped:", ColorValue([1.4, -0.2, 0.5], bound=BoundType.CLAMP).to_tuple())


def demonstrate_sets() -> None:
    corners = color_set(["red", "green", "blue", "#FFFFFF80"])
    assert isinstance(corners, ColorSet)
    print("corner colors:", corners.to_hex_list(opacity=True))
    print("as array:\n", corners.to_array())

    # Numbers are colors too, so this is four gray shades, not one RGBA color.
    shades = color_set([0.1, 0.2, 0.3, 0.4])
    print("shades:", shades)
    print("one RGBA color:", ColorValue([0.1, 0.2, 0.3, 0.4]))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_sets()
