"""Segment shape library for seven-segment glyphs.

Separates layout data (class attributes) from path construction
(methods), the same way the LED renderers keep their encoding tables.

Segment layout on the 250x492 design canvas::

     ___top___
    |         |
    top_left  top_right
    |__center_|
    |         |
    bottom_left  bottom_right
    |__bottom_|

Each outer bar is the same standard outline, rotated into place; the
center bar has its own outline.  Placement is always
rotate -> translate -> scale, and the order matters.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .constants import CENTER_SHAPE_POINTS, DESIGN_SIZE, STANDARD_SHAPE_POINTS
from .geometry import AffineTransform, Path, Size

log = logging.getLogger(__name__)


class Segment(Enum):
    """The seven bars of a digit, in canonical paint order."""
    TOP = 'top'
    TOP_RIGHT = 'top_right'
    BOTTOM_RIGHT = 'bottom_right'
    BOTTOM = 'bottom'
    BOTTOM_LEFT = 'bottom_left'
    TOP_LEFT = 'top_left'
    CENTER = 'center'


ALL_SEGMENTS = frozenset(Segment)


class SegmentShapeLibrary:
    """Canonical segment outlines and their placement on the design canvas."""

    # ── Layout data ────────────────────────────────────────────────

    ROTATIONS: Dict[Segment, float] = {
        Segment.TOP: 0.0,
        Segment.TOP_RIGHT: math.pi / 2.0,
        Segment.BOTTOM_RIGHT: math.pi / 2.0,
        Segment.BOTTOM: -math.pi,
        Segment.BOTTOM_LEFT: math.pi / -2.0,
        Segment.TOP_LEFT: math.pi / -2.0,
        Segment.CENTER: 0.0,
    }

    # Offset applied after rotation
    OFFSETS: Dict[Segment, Tuple[float, float]] = {
        Segment.TOP: (8, 0),
        Segment.TOP_RIGHT: (250, 8),
        Segment.BOTTOM_RIGHT: (250, 250),
        Segment.BOTTOM: (242, 492),
        Segment.BOTTOM_LEFT: (0, 484),
        Segment.TOP_LEFT: (0, 242),
        Segment.CENTER: (8, 212),
    }

    # ── Construction ───────────────────────────────────────────────

    @staticmethod
    def outline_points(segment: Segment) -> Tuple[Tuple[int, int], ...]:
        return CENTER_SHAPE_POINTS if segment is Segment.CENTER else STANDARD_SHAPE_POINTS

    @classmethod
    def placement(cls, segment: Segment) -> AffineTransform:
        """Rotation followed by the slot offset for ``segment``."""
        tx, ty = cls.OFFSETS[segment]
        return AffineTransform.rotation(cls.ROTATIONS[segment]).concatenating(
            AffineTransform.translation(tx, ty))

    @classmethod
    def build(cls, segment: Segment) -> Path:
        """Build the placed, unscaled path for one segment.

        The outline is walked backwards from its closing point and closed
        on the point it started from.
        """
        points = list(cls.outline_points(segment))
        start = points.pop()
        walk = [start]
        while points:
            walk.append(points.pop())
        return Path.polygon(walk).transformed(cls.placement(segment))


@lru_cache(maxsize=1)
def segment_paths() -> Mapping[Segment, Path]:
    """Placed segment paths on the design canvas, built once per process."""
    table = {segment: SegmentShapeLibrary.build(segment) for segment in Segment}
    log.debug("Built %d segment paths on %gx%g canvas",
              len(table), DESIGN_SIZE.width, DESIGN_SIZE.height)
    return MappingProxyType(table)


def design_scale(display_size) -> AffineTransform:
    """Non-uniform scale mapping the design canvas onto ``display_size``."""
    size = Size.of(display_size)
    return AffineTransform.scale(size.width / DESIGN_SIZE.width,
                                 size.height / DESIGN_SIZE.height)


def shape_for(segment: Segment, display_size: Optional[Size] = None) -> Path:
    """Return the path for ``segment``, optionally stretched to ``display_size``."""
    path = segment_paths()[segment]
    if display_size is None:
        return path
    return path.transformed(design_scale(display_size))
