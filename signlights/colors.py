"""Packed 24-bit RGB color helpers."""

__all__ = ["color", "split_color", "gamma8", "color_hsv"]

# 2.6 gamma curve, rounded to the nearest byte.
_GAMMA_TABLE = tuple(int((index / 255) ** 2.6 * 255 + 0.5) for index in range(256))


def color(red: float, green: float, blue: float) -> int:
    """Pack red, green and blue bytes into a 0xRRGGBB value.

    Each component is truncated to an integer and kept to its low byte.
    """
    return ((int(red) & 0xFF) << 16) | ((int(green) & 0xFF) << 8) | (int(blue) & 0xFF)


def split_color(value: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) bytes of a packed color."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def gamma8(value: int) -> int:
    """Gamma-correct a byte brightness value."""
    return _GAMMA_TABLE[int(value) & 0xFF]


def color_hsv(hue: int, saturation: int = 255, value: int = 255) -> int:
    """Convert a 16-bit hue with byte saturation and value to a packed color."""
    hue = ((int(hue) & 0xFFFF) * 1530 + 32768) // 65536
    if hue < 510:
        blue = 0
        if hue < 255:
            red, green = 255, hue
        else:
            red, green = 510 - hue, 255
    elif hue < 1020:
        red = 0
        if hue < 765:
            green, blue = 255, hue - 510
        else:
            green, blue = 1020 - hue, 255
    elif hue < 1530:
        green = 0
        if hue < 1275:
            red, blue = hue - 1020, 255
        else:
            red, blue = 255, 1530 - hue
    else:
        red, green, blue = 255, 0, 0

    saturation &= 0xFF
    v1 = 1 + (value & 0xFF)
    s1 = 1 + saturation
    s2 = 255 - saturation
    return (
        (((((red * s1) >> 8) + s2) * v1) & 0xFF00) << 8
        | (((((green * s1) >> 8) + s2) * v1) & 0xFF00)
        | (((((blue * s1) >> 8) + s2) * v1) >> 8)
    )