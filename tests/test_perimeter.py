"""Tests for the perimeter parameterization and the overlap routine."""

import math

import pytest

from calb.geom.perimeter import Perimeter, Segment, SegmentKind, overlap, wrap_progress


@pytest.fixture
def pill():
    """300x100 button: radius 50, straight edges of 200."""
    return Perimeter(ext_radius=50.0, segment_length=200.0)


class TestLengths:
    """Test derived perimeter lengths."""

    def test_reference_button(self, pill):
        """300x100 gives hc = 50*pi and full = 400 + 100*pi."""
        assert pill.half_circle_length == pytest.approx(157.0796, abs=1e-4)
        assert pill.circle_length == pytest.approx(314.1593, abs=1e-4)
        assert pill.full_length == pytest.approx(714.1593, abs=1e-4)

    def test_circle_button_has_no_straight_part(self):
        """W == H: the full length is the circumference."""
        per = Perimeter(ext_radius=50.0, segment_length=0.0)
        assert per.full_length == pytest.approx(100.0 * math.pi)


class TestSegments:
    """Test the ordered segment table."""

    def test_clockwise_order(self, pill):
        """Segments go top, right cap, bottom, left cap."""
        kinds = [s.kind for s in pill.segments()]
        assert kinds == [SegmentKind.TOP, SegmentKind.RIGHT_ARC, SegmentKind.BOTTOM, SegmentKind.LEFT_ARC]

    def test_segments_tile_the_loop(self, pill):
        """Consecutive segments share their boundary and cover [0, full)."""
        segs = pill.segments()
        assert segs[0].start == 0.0
        for prev, nxt in zip(segs, segs[1:]):
            assert prev.end == nxt.start
        assert segs[-1].end == pytest.approx(pill.full_length)
        assert sum(s.length for s in segs) == pytest.approx(pill.full_length)

    def test_bottom_starts_half_way(self, pill):
        """By symmetry the bottom edge starts at half the perimeter."""
        bottom = pill.segments()[2]
        assert bottom.start == pytest.approx(pill.full_length / 2.0)


class TestWrapProgress:
    """Test normalization of animation values."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0.0), (0.25, 0.25), (1.0, 0.0), (1.25, 0.25), (-0.25, 0.75), (3.5, 0.5)],
    )
    def test_wraps_into_unit_range(self, value, expected):
        """Values are taken modulo 1."""
        assert wrap_progress(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), None, "x"])
    def test_non_finite_maps_to_zero(self, value):
        """Garbage from the driver does not leak into the geometry."""
        assert wrap_progress(value) == 0.0

    def test_tiny_negative_stays_below_one(self):
        """-1e-20 % 1.0 rounds to 1.0; it must wrap to 0."""
        assert 0.0 <= wrap_progress(-1e-20) < 1.0


class TestWindow:
    """Test splitting of the lit window."""

    def test_single_piece(self, pill):
        """A window that does not reach the loop point stays in one piece."""
        full = pill.full_length
        (piece,) = pill.window(0.1, 0.3)
        assert piece == pytest.approx((0.1 * full, 0.4 * full))

    def test_wrapped_window_has_two_pieces(self, pill):
        """a=0.95 with 30% lit crosses position 0."""
        full = pill.full_length
        first, second = pill.window(0.95, 0.3)
        assert first == pytest.approx((0.95 * full, full))
        assert second == pytest.approx((0.0, 0.25 * full))

    def test_nothing_lit(self, pill):
        """progression_percent == 0 lights nothing."""
        assert pill.window(0.5, 0.0) == ()
        assert pill.lit_spans(0.5, 0.0) == ()


class TestOverlap:
    """Test the overlap-and-clamp routine."""

    def test_clamps_into_segment(self):
        """Only the part of the piece inside the segment is kept."""
        seg = Segment(SegmentKind.RIGHT_ARC, 200.0, 357.0)
        span = overlap((150.0, 250.0), seg)
        assert span is not None
        assert (span.start, span.end) == (200.0, 250.0)
        assert (span.local_start, span.local_end) == (0.0, 50.0)

    def test_disjoint_is_none(self):
        """No overlap, no span."""
        seg = Segment(SegmentKind.TOP, 0.0, 200.0)
        assert overlap((250.0, 300.0), seg) is None

    def test_touching_boundary_is_none(self):
        """A piece ending exactly at the segment start has zero overlap."""
        seg = Segment(SegmentKind.RIGHT_ARC, 200.0, 357.0)
        assert overlap((100.0, 200.0), seg) is None

    def test_zero_length_segment_never_lit(self):
        """Straight edges of a circular button contribute nothing."""
        seg = Segment(SegmentKind.TOP, 0.0, 0.0)
        assert overlap((0.0, 50.0), seg) is None
