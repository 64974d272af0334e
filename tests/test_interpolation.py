import pytest

from ustx_pitch.interpolation import interpolate, sample_ticks
from ustx_pitch.types import Shape

ALL_SHAPES = [Shape.LINEAR, Shape.EASE_IN, Shape.EASE_OUT, Shape.EASE_IN_OUT]


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_endpoints_and_grid(shape: Shape) -> None:
    pts = interpolate((0, 0.0), (100, 3.0), shape, 5)
    assert pts[0] == (0, 0.0)
    assert pts[-1] == (100, 3.0)
    inner = [t for t, _ in pts[1:-1]]
    assert inner == list(range(5, 100, 5))


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_monotone_without_overshoot(shape: Shape) -> None:
    pts = interpolate((7, -1.0), (133, 2.5), shape, 5)
    vals = [v for _, v in pts]
    assert all(-1.0 <= v <= 2.5 for v in vals)
    assert all(a <= b for a, b in zip(vals, vals[1:]))
    ticks = [t for t, _ in pts]
    assert all(a < b for a, b in zip(ticks, ticks[1:]))


@pytest.mark.parametrize("shape", ALL_SHAPES)
def test_monotone_decreasing(shape: Shape) -> None:
    vals = [v for _, v in interpolate((0, 4.0), (60, 1.0), shape, 5)]
    assert all(a >= b for a, b in zip(vals, vals[1:]))
    assert min(vals) >= 1.0 and max(vals) <= 4.0


def test_midpoint_values() -> None:
    def mid(shape: Shape) -> float:
        return dict(interpolate((0, 0.0), (100, 1.0), shape, 5))[50]

    assert mid(Shape.LINEAR) == pytest.approx(0.5)
    assert mid(Shape.EASE_IN) == pytest.approx(0.2928932, rel=1e-6)
    assert mid(Shape.EASE_OUT) == pytest.approx(0.7071068, rel=1e-6)
    assert mid(Shape.EASE_IN_OUT) == pytest.approx(0.5)


def test_ease_slopes() -> None:
    ease_in = [v for _, v in interpolate((0, 0.0), (100, 1.0), Shape.EASE_IN, 10)]
    steps = [b - a for a, b in zip(ease_in, ease_in[1:])]
    assert steps[0] < steps[-1]
    ease_out = [v for _, v in interpolate((0, 0.0), (100, 1.0), Shape.EASE_OUT, 10)]
    steps = [b - a for a, b in zip(ease_out, ease_out[1:])]
    assert steps[0] > steps[-1]


def test_short_segment_keeps_endpoints_only() -> None:
    assert interpolate((1, 0.0), (4, 1.0), Shape.LINEAR, 5) == [(1, 0.0), (4, 1.0)]


def test_non_increasing_ticks_rejected() -> None:
    with pytest.raises(ValueError):
        interpolate((10, 0.0), (10, 1.0), Shape.LINEAR, 5)
    with pytest.raises(ValueError):
        interpolate((10, 0.0), (5, 1.0), Shape.LINEAR, 5)


def test_sample_ticks_negative_start() -> None:
    assert sample_ticks(-12, 3, 5).tolist() == [-10, -5, 0]
