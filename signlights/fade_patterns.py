"""Color patterns that fade their colors in and out through black."""

from collections.abc import Iterable, Iterator

from .color_patterns import ColorPattern
from .colors import color, gamma8, split_color
from .mathutils import rescale_input

__all__ = ["ColorFadePattern", "TwoColorFadePattern", "apply_brightness_gamma"]

_UINT32 = 0xFFFFFFFF

_PARAMETER_NAMES = (
    "Color duration",
    "Fade in duration",
    "Fade out duration",
    "Faded duration",
)


def apply_brightness_gamma(brightness: float) -> float:
    """Map a 0-1 brightness onto a gamma-corrected 0-1 brightness."""
    scale = int(255 * brightness) & 0xFF
    return gamma8(scale) / 255.0


def _scaled(value: int, scaling: float) -> int:
    red, green, blue = split_color(value)
    return color(red * scaling, green * scaling, blue * scaling)


def _fade_in(value: int, steps: int) -> Iterator[int]:
    """Colors rising from dark towards ``value`` (excluding it)."""
    for step in range(steps):
        yield _scaled(value, apply_brightness_gamma((step + 1) / (steps + 1)))


def _fade_out(value: int, steps: int) -> Iterator[int]:
    """Colors falling from just below ``value`` towards dark."""
    for step in reversed(range(steps)):
        yield _scaled(value, apply_brightness_gamma((step + 1) / (steps + 1)))


def _steps(duration: int, low: int, minimum: int) -> int:
    """Convert a 0-255 duration byte to low-50 steps, never below minimum."""
    return max(minimum, rescale_input(low, 50, duration))


class _ColorCycle:
    """A fixed color sequence read round and round."""

    def __init__(self, colors: Iterable[int] = ()) -> None:
        self._colors = list(colors)
        self._position = 0

    def next(self) -> int:
        if not self._colors:
            return 0
        self._position %= len(self._colors)
        value = self._colors[self._position]
        self._position += 1
        return value

    def seek(self, position: int) -> None:
        self._position = int(position) & _UINT32


class ColorFadePattern(ColorPattern):
    """Fades each of two to four colors in, holds it, fades it out, then rests on black.

    Durations are assigned as 0-255 bytes and read back as steps; they take
    effect on the next reset.
    """

    def __init__(self, *args: int) -> None:
        if not 2 <= len(args) <= 4:
            raise TypeError(f"ColorFadePattern takes 2 to 4 colors, got {len(args)}")
        self.colors = tuple(args)
        self.color_count = len(args)
        self._color_duration = 1
        self._fade_in_duration = 0
        self._fade_out_duration = 0
        self._faded_duration = 1
        self._cycle = _ColorCycle()

    @property
    def color_duration(self) -> int:
        return self._color_duration

    @color_duration.setter
    def color_duration(self, duration: int) -> None:
        # Each color is shown for at least one step.
        self._color_duration = _steps(duration, 0, 1)

    @property
    def fade_in_duration(self) -> int:
        return self._fade_in_duration

    @fade_in_duration.setter
    def fade_in_duration(self, duration: int) -> None:
        self._fade_in_duration = _steps(duration, 0, 0)

    @property
    def fade_out_duration(self) -> int:
        return self._fade_out_duration

    @fade_out_duration.setter
    def fade_out_duration(self, duration: int) -> None:
        self._fade_out_duration = _steps(duration, 0, 0)

    @property
    def faded_duration(self) -> int:
        return self._faded_duration

    @faded_duration.setter
    def faded_duration(self, duration: int) -> None:
        self._faded_duration = _steps(duration, 0, 0)

    def _build_sequence(self) -> Iterator[int]:
        for target in self.colors:
            yield from _fade_in(target, self._fade_in_duration)
            yield from [target] * self._color_duration
            yield from _fade_out(target, self._fade_out_duration)
            yield from [0] * self._faded_duration

    def reset(self) -> None:
        self._cycle = _ColorCycle(self._build_sequence())

    def next_color(self) -> int:
        return self._cycle.next()

    def increment_only(self, amount: int) -> None:
        # The position is set, not added to.
        self._cycle.seek(amount)

    @staticmethod
    def parameter_names() -> list[str]:
        return list(_PARAMETER_NAMES)


class TwoColorFadePattern(ColorPattern):
    """Shows one color, fades to black, fades up into the other, and back again.

    Durations are assigned as 0-255 bytes and read back as steps; they take
    effect on the next reset.
    """

    def __init__(self, color1: int, color2: int) -> None:
        self.color1 = color1
        self.color2 = color2
        self.color_count = 2
        self._color_duration = 1
        self._fade_in_duration = 0
        self._fade_out_duration = 0
        self._faded_duration = 1
        self._cycle = _ColorCycle()

    @property
    def color_duration(self) -> int:
        return self._color_duration

    @color_duration.setter
    def color_duration(self, duration: int) -> None:
        self._color_duration = _steps(duration, 1, 1)

    @property
    def fade_in_duration(self) -> int:
        return self._fade_in_duration

    @fade_in_duration.setter
    def fade_in_duration(self, duration: int) -> None:
        self._fade_in_duration = _steps(duration, 0, 0)

    @property
    def fade_out_duration(self) -> int:
        return self._fade_out_duration

    @fade_out_duration.setter
    def fade_out_duration(self, duration: int) -> None:
        self._fade_out_duration = _steps(duration, 0, 0)

    @property
    def faded_duration(self) -> int:
        return self._faded_duration

    @faded_duration.setter
    def faded_duration(self, duration: int) -> None:
        self._faded_duration = _steps(duration, 1, 1)

    def _build_sequence(self) -> Iterator[int]:
        yield from [self.color1] * self._color_duration
        yield from _fade_out(self.color1, self._fade_out_duration)
        yield from [0] * self._faded_duration
        yield from _fade_in(self.color2, self._fade_in_duration)
        yield from [self.color2] * self._color_duration
        yield from _fade_out(self.color2, self._fade_out_duration)
        yield from [0] * self._faded_duration
        yield from _fade_in(self.color1, self._fade_in_duration)

    def reset(self) -> None:
        self._cycle = _ColorCycle(self._build_sequence())

    def next_color(self) -> int:
        return self._cycle.next()

    def increment_only(self, amount: int) -> None:
        # The position is set, not added to.
        self._cycle.seek(amount)

    @staticmethod
    def parameter_names() -> list[str]:
        return list(_PARAMETER_NAMES)