"""
sevenseg - Seven-segment display paths

Renders hex digits and multi-digit numbers as classic seven-segment
glyphs, expressed as vector outlines rather than pixels.  Callers fill or
stroke the returned paths with whatever toolkit they draw with.

Features:
- Hex digits 0-F, minus sign and blank
- Digit groups in base 2, 8, 10 or 16, with optional sign digit and
  leading zeroes
- Lit, unlit, mask and outline paths stretched to any size

Usage:
    # As a library
    from sevenseg import DigitGroup, NumberBase
    group = DigitGroup(4, (500, 246), NumberBase.DECIMAL, value=-123,
                       can_show_negative=True)
    group.digit_values          # [-1, 1, 2, 3]
    group.on_segments.to_svg()  # SVG path data

    # Command line
    sevenseg digits 255 -n 3 -b 10
    sevenseg paths 8 --show mask
"""

from sevenseg.__version__ import __version__

from sevenseg.digit import Digit, DigitValue, lit_segments
from sevenseg.digit_group import DigitGroup, NumberBase, decompose, recompose
from sevenseg.display import SegmentDisplay
from sevenseg.geometry import AffineTransform, Path, Point, Rect, Size
from sevenseg.layers import DisplayType, Layer, layers_for
from sevenseg.segment import Segment, SegmentShapeLibrary, segment_paths, shape_for

__all__ = [
    # Version
    "__version__",
    # Geometry
    "AffineTransform",
    "Path",
    "Point",
    "Rect",
    "Size",
    # Segments
    "Segment",
    "SegmentShapeLibrary",
    "segment_paths",
    "shape_for",
    # Displays
    "SegmentDisplay",
    "Digit",
    "DigitValue",
    "lit_segments",
    "DigitGroup",
    "NumberBase",
    "decompose",
    "recompose",
    # Layers
    "DisplayType",
    "Layer",
    "layers_for",
]
