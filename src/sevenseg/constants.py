"""Shared constants for sevenseg.

Segment outlines are drawn on a fixed design canvas and scaled to the
display size afterwards.  Coordinates are top-left origin, y down.
"""

from .geometry import Size

# Design canvas every segment shape is laid out on (width x height)
DESIGN_SIZE = Size(250.0, 492.0)

# Default aspect ratio of a single digit (125:246)
DEFAULT_ASPECT = DESIGN_SIZE.width / DESIGN_SIZE.height

# Outer bars: a long hexagon, flat along the outside edge, with 45° ends.
# The last point repeats the first to close the outline.
STANDARD_SHAPE_POINTS = (
    (0, 4),
    (4, 0),
    (230, 0),
    (234, 4),
    (180, 58),
    (54, 58),
    (0, 4),
)

# Center bar: symmetric hexagon, pointed at both ends.
CENTER_SHAPE_POINTS = (
    (0, 34),
    (34, 0),
    (200, 0),
    (234, 34),
    (200, 68),
    (34, 68),
    (0, 34),
)

# Single-digit value range: -2 (blank), -1 (minus), 0-15 (hex)
MIN_DIGIT_VALUE = -2
MAX_DIGIT_VALUE = 15

# Glyph characters for text dumps (index = digit value)
HEX_GLYPHS = "0123456789AbCdEF"
