import pytest

from ustx_pitch.boundary import ensure_note_boundaries, insert_point
from ustx_pitch.types import Note

NOTE = Note(0, 480, 60)


def test_empty_curve_is_flat_zero() -> None:
    assert ensure_note_boundaries([], NOTE) == ((0, 0.0), (480, 0.0))


def test_single_point_extends_flat() -> None:
    assert ensure_note_boundaries([(100, 3.0)], NOTE) == (
        (0, 3.0),
        (100, 3.0),
        (480, 3.0),
    )


def test_existing_boundaries_untouched() -> None:
    pts = [(0, 1.0), (240, 2.0), (480, 1.5)]
    assert ensure_note_boundaries(pts, NOTE) == tuple(pts)


def test_start_copies_first_and_end_returns_to_zero() -> None:
    out = ensure_note_boundaries([(100, 1.0), (200, 2.0)], NOTE)
    assert out == ((0, 1.0), (100, 1.0), (200, 2.0), (480, 0.0))


def test_interior_boundaries_interpolated() -> None:
    out = ensure_note_boundaries([(-100, 0.0), (100, 2.0), (500, 2.0)], NOTE)
    assert dict(out)[0] == pytest.approx(1.0)
    assert dict(out)[480] == pytest.approx(2.0)
    assert [t for t, _ in out] == [-100, 0, 100, 480, 500]


def test_curve_after_note() -> None:
    out = ensure_note_boundaries([(500, 1.0), (600, 2.0)], NOTE)
    assert out[0] == (0, 1.0)
    assert dict(out)[480] == pytest.approx(1.0)


def test_curve_before_note() -> None:
    out = ensure_note_boundaries([(-200, 1.0), (-100, 2.0)], NOTE)
    assert out[-2:] == ((0, 0.0), (480, 0.0))


def test_never_removes_points() -> None:
    pts = [(-50, 0.5), (10, 1.0), (20, 1.0), (700, 0.0)]
    out = ensure_note_boundaries(pts, NOTE)
    assert set(pts) <= set(out)
    ticks = [t for t, _ in out]
    assert len(ticks) == len(set(ticks))


def test_zero_width_note() -> None:
    note = Note(100, 100, 60)
    assert ensure_note_boundaries([], note) == ((100, 0.0),)
    out = ensure_note_boundaries([(0, 1.0), (200, 3.0)], note)
    assert out == ((0, 1.0), (100, 2.0), (200, 3.0))


def test_insert_point_sorted() -> None:
    assert insert_point([(0, 0.0), (10, 1.0)], (5, 0.5)) == [(0, 0.0), (5, 0.5), (10, 1.0)]
