import pytest

from signlights.colors import split_color
from signlights.fade_patterns import (
    ColorFadePattern,
    TwoColorFadePattern,
    apply_brightness_gamma,
)

RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


def take(pattern, count):
    return [pattern.next_color() for _ in range(count)]


def test_gamma_endpoints():
    assert apply_brightness_gamma(0.0) == 0.0
    assert apply_brightness_gamma(1.0) == 1.0


def test_gamma_is_monotonic_and_bounded():
    values = [apply_brightness_gamma(step / 20) for step in range(21)]
    assert values == sorted(values)
    assert all(0.0 <= value <= 1.0 for value in values)


def test_color_fade_default_sequence():
    pattern = ColorFadePattern(RED, BLUE)
    pattern.reset()
    assert take(pattern, 8) == [RED, 0, BLUE, 0] * 2


@pytest.mark.parametrize("colors", [(RED, BLUE), (RED, GREEN, BLUE), (RED, GREEN, BLUE, RED)])
def test_color_fade_color_count(colors):
    pattern = ColorFadePattern(*colors)
    assert pattern.color_count == len(colors)
    pattern.reset()
    assert [c for c in take(pattern, 2 * len(colors)) if c] == list(colors)


@pytest.mark.parametrize("colors", [(RED,), (RED, GREEN, BLUE, RED, GREEN)])
def test_color_fade_rejects_wrong_color_count(colors):
    with pytest.raises(TypeError):
        ColorFadePattern(*colors)


def test_color_fade_duration_mapping():
    pattern = ColorFadePattern(RED, BLUE)
    pattern.color_duration = 0
    assert pattern.color_duration == 1
    pattern.color_duration = 255
    assert pattern.color_duration == 50
    pattern.faded_duration = 0
    assert pattern.faded_duration == 0
    pattern.fade_in_duration = 255
    assert pattern.fade_in_duration == 50
    pattern.fade_out_duration = 0
    assert pattern.fade_out_duration == 0


def test_color_fade_in_rises_to_target():
    pattern = ColorFadePattern(RED, BLUE)
    pattern.fade_in_duration = 255
    pattern.reset()
    steps = pattern.fade_in_duration
    sequence = take(pattern, steps + 2)
    fades = [split_color(c) for c in sequence[:steps]]
    reds = [red for red, _, _ in fades]
    assert reds == sorted(reds)
    assert all(green == 0 and blue == 0 for _, green, blue in fades)
    assert all(red < 255 for red in reds)
    assert sequence[steps] == RED
    assert sequence[steps + 1] == 0


def test_color_fade_out_falls_from_target():
    pattern = ColorFadePattern(RED, BLUE)
    pattern.fade_out_duration = 255
    pattern.reset()
    steps = pattern.fade_out_duration
    sequence = take(pattern, steps + 2)
    assert sequence[0] == RED
    reds = [split_color(c)[0] for c in sequence[1 : steps + 1]]
    assert reds == sorted(reds, reverse=True)
    assert sequence[-1] == 0


def test_color_fade_reset_is_repeatable():
    pattern = ColorFadePattern(RED, GREEN, BLUE)
    pattern.fade_in_duration = 40
    pattern.fade_out_duration = 40
    pattern.reset()
    first = take(pattern, 30)
    pattern.reset()
    assert take(pattern, 30) == first


def test_color_fade_increment_only_sets_position():
    pattern = ColorFadePattern(RED, BLUE)
    pattern.reset()
    full = take(pattern, 4)
    pattern.reset()
    pattern.increment_only(2)
    assert pattern.next_color() == full[2]


def test_color_fade_before_reset_is_black():
    assert ColorFadePattern(RED, BLUE).next_color() == 0


def test_fade_parameter_names():
    names = ["Color duration", "Fade in duration", "Fade out duration", "Faded duration"]
    assert ColorFadePattern.parameter_names() == names
    assert TwoColorFadePattern.parameter_names() == names
    assert ColorFadePattern(RED, BLUE).number_of_parameters() == len(names)
    assert TwoColorFadePattern(RED, BLUE).number_of_parameters() == len(names)


def test_two_color_fade_default_sequence():
    pattern = TwoColorFadePattern(RED, BLUE)
    assert pattern.color_count == 2
    pattern.reset()
    assert take(pattern, 8) == [RED, 0, BLUE, 0] * 2


def test_two_color_fade_duration_mapping():
    pattern = TwoColorFadePattern(RED, BLUE)
    pattern.color_duration = 0
    assert pattern.color_duration == 1
    pattern.faded_duration = 0
    assert pattern.faded_duration == 1
    pattern.fade_in_duration = 255
    assert pattern.fade_in_duration == 50
    pattern.fade_out_duration = 0
    assert pattern.fade_out_duration == 0


def test_two_color_fade_crosses_through_black():
    pattern = TwoColorFadePattern(RED, BLUE)
    pattern.fade_in_duration = 255
    pattern.fade_out_duration = 255
    pattern.reset()
    steps = pattern.fade_out_duration
    sequence = take(pattern, 1 + steps + 1 + steps + 1)
    assert sequence[0] == RED
    reds = [split_color(c)[0] for c in sequence[1 : 1 + steps]]
    assert reds == sorted(reds, reverse=True)
    assert sequence[1 + steps] == 0
    blues = [split_color(c)[2] for c in sequence[2 + steps : 2 + 2 * steps]]
    assert blues == sorted(blues)
    assert sequence[-1] == BLUE


def test_two_color_fade_increment_only_and_empty():
    pattern = TwoColorFadePattern(RED, BLUE)
    assert pattern.next_color() == 0
    pattern.reset()
    full = take(pattern, 4)
    pattern.reset()
    pattern.increment_only(3)
    assert pattern.next_color() == full[3]