"""Small numeric helpers shared by the pattern classes."""

__all__ = ["rescale_input"]


def rescale_input(output_min: int, output_max: int, input_value: int) -> int:
    """Map a byte value (0-255) linearly onto the range output_min..output_max.

    The input is treated as an unsigned byte, so values outside 0-255 wrap.
    The result is truncated toward zero.
    """
    byte_value = int(input_value) & 0xFF
    slope = (output_max - output_min) / 255
    return int(byte_value * slope + output_min)