import pytest

from signlights.mathutils import rescale_input


@pytest.mark.parametrize(
    "low, high",
    [(500, 5), (1, 50), (0, 50), (5, 1000), (1, 15), (1, 5)],
)
def test_zero_input_gives_output_min(low, high):
    assert rescale_input(low, high, 0) == low


@pytest.mark.parametrize("value", range(256))
def test_identity_range_keeps_value(value):
    assert rescale_input(0, 255, value) == value


def test_results_stay_within_bounds():
    results = [rescale_input(1, 50, value) for value in range(256)]
    assert min(results) >= 1
    assert max(results) <= 50


def test_increasing_range_is_monotonic():
    results = [rescale_input(5, 1000, value) for value in range(256)]
    assert results == sorted(results)


def test_decreasing_range_is_monotonic():
    results = [rescale_input(500, 5, value) for value in range(256)]
    assert results == sorted(results, reverse=True)


def test_input_wraps_like_a_byte():
    assert rescale_input(0, 255, 256) == rescale_input(0, 255, 0)
    assert rescale_input(1, 50, 300) == rescale_input(1, 50, 44)