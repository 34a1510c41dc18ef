"""Color patterns: sources of the next color a display pattern should show."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .colors import color_hsv
from .mathutils import rescale_input

__all__ = [
    "ColorPattern",
    "SingleColorPattern",
    "TwoColorPattern",
    "BackgroundPlusThree",
    "RainbowColorPattern",
]

_UINT32 = 0xFFFFFFFF


class ColorPattern(ABC):
    """A source of colors that advances each time a color is taken."""

    color_count = 0

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial state."""

    @abstractmethod
    def next_color(self) -> int:
        """Return the next color and advance."""

    @abstractmethod
    def increment_only(self, amount: int) -> None:
        """Move the pattern's position without producing colors."""

    @staticmethod
    def parameter_names() -> list[str]:
        """Names of the parameters the pattern takes."""
        return []

    def number_of_parameters(self) -> int:
        return len(self.parameter_names())


class _SequencePattern(ColorPattern):
    """A pattern that cycles through a color sequence built on reset."""

    def __init__(self) -> None:
        self._sequence: list[int] = []
        self._iteration = 0

    @abstractmethod
    def _build_sequence(self) -> Iterable[int]:
        """Yield the colors of one full cycle."""

    def reset(self) -> None:
        self._iteration = 0
        self._sequence = list(self._build_sequence())

    def next_color(self) -> int:
        if not self._sequence:
            return 0
        self._iteration %= len(self._sequence)
        value = self._sequence[self._iteration]
        self._iteration += 1
        return value

    def increment_only(self, amount: int) -> None:
        # The position is set, not added to.
        self._iteration = int(amount) & _UINT32


def _duration_steps(duration: int) -> int:
    """Convert a 0-255 duration byte to 1-50 steps."""
    return max(1, rescale_input(1, 50, duration))


class SingleColorPattern(ColorPattern):
    """Always the same color."""

    def __init__(self, color: int) -> None:
        self.color = color
        self.color_count = 1

    def reset(self) -> None:
        pass

    def next_color(self) -> int:
        return self.color

    def increment_only(self, amount: int) -> None:
        pass


class TwoColorPattern(_SequencePattern):
    """Alternates between two colors, each held for its own duration.

    Durations are assigned as 0-255 bytes and read back as 1-50 steps;
    they take effect on the next reset.
    """

    def __init__(self, color1: int, color2: int) -> None:
        super().__init__()
        self.color1 = color1
        self.color2 = color2
        self.color_count = 2
        self._color1_duration = 1
        self._color2_duration = 1

    @property
    def color1_duration(self) -> int:
        return self._color1_duration

    @color1_duration.setter
    def color1_duration(self, duration: int) -> None:
        self._color1_duration = _duration_steps(duration)

    @property
    def color2_duration(self) -> int:
        return self._color2_duration

    @color2_duration.setter
    def color2_duration(self, duration: int) -> None:
        self._color2_duration = _duration_steps(duration)

    def _build_sequence(self) -> Iterable[int]:
        yield from [self.color1] * self._color1_duration
        yield from [self.color2] * self._color2_duration

    @staticmethod
    def parameter_names() -> list[str]:
        return ["Color 1 duration", "Color 2 duration"]


class BackgroundPlusThree(_SequencePattern):
    """Shows three colors in turn, with the background color between each.

    Durations are assigned as 0-255 bytes and read back as 1-50 steps;
    they take effect on the next reset.
    """

    def __init__(self, background: int, color1: int, color2: int, color3: int) -> None:
        super().__init__()
        self.background = background
        self.color1 = color1
        self.color2 = color2
        self.color3 = color3
        self.color_count = 4
        self._background_duration = 1
        self._color1_duration = 1
        self._color2_duration = 1
        self._color3_duration = 1

    @property
    def background_duration(self) -> int:
        return self._background_duration

    @background_duration.setter
    def background_duration(self, duration: int) -> None:
        self._background_duration = _duration_steps(duration)

    @property
    def color1_duration(self) -> int:
        return self._color1_duration

    @color1_duration.setter
    def color1_duration(self, duration: int) -> None:
        self._color1_duration = _duration_steps(duration)

    @property
    def color2_duration(self) -> int:
        return self._color2_duration

    @color2_duration.setter
    def color2_duration(self, duration: int) -> None:
        self._color2_duration = _duration_steps(duration)

    @property
    def color3_duration(self) -> int:
        return self._color3_duration

    @color3_duration.setter
    def color3_duration(self, duration: int) -> None:
        self._color3_duration = _duration_steps(duration)

    def _build_sequence(self) -> Iterable[int]:
        for value, duration in (
            (self.color1, self._color1_duration),
            (self.color2, self._color2_duration),
            (self.color3, self._color3_duration),
        ):
            yield from [self.background] * self._background_duration
            yield from [value] * duration

    @staticmethod
    def parameter_names() -> list[str]:
        return [
            "Background duration",
            "Color 1 duration",
            "Color 2 duration",
            "Color 3 duration",
        ]


class RainbowColorPattern(ColorPattern):
    """Steps around the color wheel.

    The hue increment is assigned as a 0-255 byte and read back as the
    5-1000 hue step it maps to.
    """

    def __init__(self) -> None:
        self._hue = 0
        self._hue_increment = 1

    @property
    def hue_increment(self) -> int:
        return self._hue_increment

    @hue_increment.setter
    def hue_increment(self, increment: int) -> None:
        self._hue_increment = rescale_input(5, 1000, increment)

    def reset(self) -> None:
        self._hue = 0

    def next_color(self) -> int:
        value = color_hsv(self._hue)
        self._hue = (self._hue + self._hue_increment) & _UINT32
        return value

    def increment_only(self, amount: int) -> None:
        self._hue = (self._hue + int(amount) * self._hue_increment) & _UINT32

    @staticmethod
    def parameter_names() -> list[str]:
        return ["Hue increment"]