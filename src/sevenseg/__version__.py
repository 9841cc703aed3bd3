"""sevenseg version information."""

__version__ = "1.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.0.0 - Initial release: segment shape library, single digit paths (0-F,
#         minus, blank), digit groups with base/sign/leading-zero policies
# 1.0.1 - Digit width now excludes trailing spacing (spacing only between
#         digits), value 0 glyph lights the top bar
# 1.1.0 - SegmentDisplay interface, explicit set_value()/set_size(), display
#         layers, JSON group settings, sevenseg CLI, PyQt6 path bridge
