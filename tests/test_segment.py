"""Tests for the segment shape library.

Validates the canonical outlines, placement of every segment on the
250x492 design canvas, the cached path table, and display scaling.
"""

import math

import pytest

from sevenseg.constants import DESIGN_SIZE, STANDARD_SHAPE_POINTS
from sevenseg.geometry import AffineTransform, Path, Point, Rect, Size
from sevenseg.segment import (
    ALL_SEGMENTS,
    Segment,
    SegmentShapeLibrary,
    design_scale,
    segment_paths,
    shape_for,
)

# Where each placed segment should sit on the design canvas
EXPECTED_BOUNDS = {
    Segment.TOP: Rect(8, 0, 234, 58),
    Segment.TOP_RIGHT: Rect(192, 8, 58, 234),
    Segment.BOTTOM_RIGHT: Rect(192, 250, 58, 234),
    Segment.BOTTOM: Rect(8, 434, 234, 58),
    Segment.BOTTOM_LEFT: Rect(0, 250, 58, 234),
    Segment.TOP_LEFT: Rect(0, 8, 58, 234),
    Segment.CENTER: Rect(8, 212, 234, 68),
}


def _approx_rect(rect):
    return pytest.approx(tuple(rect), abs=1e-9)


# =========================================================================
# Layout data
# =========================================================================

class TestLayoutData:
    def test_seven_segments(self):
        assert len(Segment) == 7
        assert ALL_SEGMENTS == frozenset(Segment)

    def test_canonical_order(self):
        assert [s.value for s in Segment] == [
            'top', 'top_right', 'bottom_right', 'bottom',
            'bottom_left', 'top_left', 'center',
        ]

    def test_every_segment_has_rotation_and_offset(self):
        for s in Segment:
            assert s in SegmentShapeLibrary.ROTATIONS
            assert s in SegmentShapeLibrary.OFFSETS

    def test_rotations(self):
        rot = SegmentShapeLibrary.ROTATIONS
        assert rot[Segment.TOP] == rot[Segment.CENTER] == 0
        assert rot[Segment.TOP_LEFT] == rot[Segment.BOTTOM_LEFT] == -math.pi / 2
        assert rot[Segment.TOP_RIGHT] == rot[Segment.BOTTOM_RIGHT] == math.pi / 2
        assert abs(rot[Segment.BOTTOM]) == math.pi

    def test_center_uses_its_own_outline(self):
        assert SegmentShapeLibrary.outline_points(Segment.CENTER) != STANDARD_SHAPE_POINTS
        for s in ALL_SEGMENTS - {Segment.CENTER}:
            assert SegmentShapeLibrary.outline_points(s) == STANDARD_SHAPE_POINTS


# =========================================================================
# Placement
# =========================================================================

class TestPlacement:
    @pytest.mark.parametrize("segment", list(Segment))
    def test_bounds(self, segment):
        assert _approx_rect(segment_paths()[segment].bounds) == EXPECTED_BOUNDS[segment]

    @pytest.mark.parametrize("segment", list(Segment))
    def test_single_hexagon_loop(self, segment):
        path = segment_paths()[segment]
        assert len(path.loops) == 1
        assert len(path.loops[0]) == 6

    def test_all_inside_design_canvas(self):
        canvas = Rect(0, 0, DESIGN_SIZE.width, DESIGN_SIZE.height)
        for path in segment_paths().values():
            assert canvas.contains_rect(path.bounds)

    def test_outline_walked_in_reverse(self):
        """Top bar starts at its closing point and runs backwards."""
        loop = segment_paths()[Segment.TOP].loops[0]
        assert loop[:3] == (Point(8, 4), Point(62, 58), Point(188, 58))
        assert loop[-1] == Point(12, 0)

    def test_rotate_before_translate(self):
        """Translating first and rotating second lands off the canvas."""
        canvas = Rect(0, 0, *DESIGN_SIZE)
        swapped = AffineTransform.translation(250, 8).concatenating(
            AffineTransform.rotation(math.pi / 2))
        raw = Path.polygon(STANDARD_SHAPE_POINTS)
        assert not canvas.contains_rect(raw.transformed(swapped).bounds)
        assert canvas.contains_rect(segment_paths()[Segment.TOP_RIGHT].bounds)

    def test_placement_moves_origin_to_slot(self):
        for segment, offset in SegmentShapeLibrary.OFFSETS.items():
            assert SegmentShapeLibrary.placement(segment).apply([(0, 0)]) == (Point(*offset),)


# =========================================================================
# Cache
# =========================================================================

class TestSegmentPathCache:
    def test_built_once(self):
        assert segment_paths() is segment_paths()

    def test_read_only(self):
        with pytest.raises(TypeError):
            segment_paths()[Segment.TOP] = None

    def test_shape_for_without_size_is_cached_path(self):
        assert shape_for(Segment.CENTER) is segment_paths()[Segment.CENTER]


# =========================================================================
# Scaling
# =========================================================================

class TestScaling:
    def test_design_scale(self):
        assert design_scale(Size(125, 246)) == AffineTransform.scale(0.5, 0.5)

    def test_half_size(self):
        bounds = shape_for(Segment.TOP, Size(125, 246)).bounds
        assert _approx_rect(bounds) == Rect(4, 0, 117, 29)

    def test_stretch_changes_aspect(self):
        """Non-uniform scale: doubling width only widens the bar."""
        bounds = shape_for(Segment.CENTER, (500, 492)).bounds
        assert _approx_rect(bounds) == Rect(16, 212, 468, 68)

    def test_design_size_is_identity(self):
        assert shape_for(Segment.BOTTOM, DESIGN_SIZE) == segment_paths()[Segment.BOTTOM]

    def test_scaled_shapes_stay_in_display(self):
        size = Size(40, 300)
        display = Rect(0, 0, *size)
        for s in Segment:
            assert display.contains_rect(shape_for(s, size).bounds)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
