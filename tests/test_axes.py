"""Tests for tick generation."""

import pytest

from stackplot.axes import pretty_ticks


@pytest.mark.parametrize(
    ("extent", "clip_range", "expected"),
    [
        ([0, 10], "neither", [0, 2, 4, 6, 8, 10]),
        ([14, 67], "neither", [10, 20, 30, 40, 50, 60, 70]),
        ([0.01, 0.23], "neither", [0, 0.05, 0.1, 0.15, 0.2, 0.25]),
        ([1, 9], "neither", [0, 2, 4, 6, 8, 10]),
        ([1, 9], "low", [2, 4, 6, 8, 10]),
        ([1, 9], "high", [0, 2, 4, 6, 8]),
        ([1, 9], "both", [2, 4, 6, 8]),
        ([-18, 76], "neither", [-20, 0, 20, 40, 60, 80]),
        ([-187, 762], "neither", [-200, 0, 200, 400, 600, 800]),
    ],
)
def test_pretty_ticks(extent, clip_range, expected):
    """Ticks land on round numbers covering the extent."""
    assert pretty_ticks(extent, clip_range) == pytest.approx(expected)


def test_pretty_ticks_zero_span():
    """A degenerate extent yields its single value."""
    assert pretty_ticks([5, 5]) == [5]


def test_pretty_ticks_unknown_clip_range():
    """Unrecognised clip ranges behave like neither."""
    assert pretty_ticks([1, 9], "sideways") == pytest.approx([0, 2, 4, 6, 8, 10])


def test_pretty_ticks_target_count():
    """Fewer target ticks give a coarser unit."""
    assert pretty_ticks([0, 10], target_tick_count=2) == pytest.approx([0, 5, 10])


def test_pretty_ticks_low_clip_with_target():
    """Clipping and a custom target count combine."""
    assert pretty_ticks([1, 21], "low", 10) == pytest.approx([2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22])
