"""Single seven-segment digit.

Maps a value in [-2, 15] to its lit segments and exposes the resulting
outline paths, stretched to the digit's size:

    - -2 is all off (blank)
    - -1 is the minus sign (center bar only)
    - 0-15 are the hex glyphs 0 1 2 3 4 5 6 7 8 9 A b C d E F
"""

from __future__ import annotations

import logging
import operator
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable

from .constants import DESIGN_SIZE, MAX_DIGIT_VALUE, MIN_DIGIT_VALUE
from .display import SegmentDisplay
from .geometry import Path, Rect, Size
from .segment import ALL_SEGMENTS, Segment, shape_for

log = logging.getLogger(__name__)

_T = Segment.TOP
_TR = Segment.TOP_RIGHT
_BR = Segment.BOTTOM_RIGHT
_B = Segment.BOTTOM
_BL = Segment.BOTTOM_LEFT
_TL = Segment.TOP_LEFT
_C = Segment.CENTER


class DigitValue(IntEnum):
    """Special non-numeric digit values."""
    OFF = -2
    MINUS = -1


# Font table: value -> lit segments
LIT_SEGMENTS: Dict[int, FrozenSet[Segment]] = {
    DigitValue.OFF: frozenset(),
    DigitValue.MINUS: frozenset({_C}),
    0: frozenset({_T, _TR, _BR, _B, _BL, _TL}),
    1: frozenset({_TR, _BR}),
    2: frozenset({_T, _TR, _BL, _C, _B}),
    3: frozenset({_T, _TR, _BR, _C, _B}),
    4: frozenset({_TL, _TR, _BR, _C}),
    5: frozenset({_T, _TL, _BR, _C, _B}),
    6: frozenset({_T, _TL, _BL, _BR, _C, _B}),
    7: frozenset({_T, _TR, _BR}),
    8: ALL_SEGMENTS,
    9: frozenset({_T, _TL, _TR, _BR, _B, _C}),
    0xA: frozenset({_T, _TL, _TR, _BR, _BL, _C}),
    0xB: frozenset({_TL, _BL, _B, _BR, _C}),
    0xC: frozenset({_TL, _BL, _B, _T}),
    0xD: frozenset({_TR, _BR, _B, _BL, _C}),
    0xE: frozenset({_TL, _BL, _B, _T, _C}),
    0xF: frozenset({_TL, _BL, _T, _C}),
}


def check_digit_value(value: int) -> int:
    # Raises TypeError for floats and other non-integers
    value = operator.index(value)
    if not MIN_DIGIT_VALUE <= value <= MAX_DIGIT_VALUE:
        raise ValueError(
            f"Digit value must be {MIN_DIGIT_VALUE}..{MAX_DIGIT_VALUE}, got {value!r}")
    return int(value)


def lit_segments(value: int) -> FrozenSet[Segment]:
    """Segments that are on for ``value``."""
    return LIT_SEGMENTS[check_digit_value(value)]


def _combined(segments: Iterable[Segment], size: Size) -> Path:
    chosen = set(segments)
    return Path.union(*(shape_for(s, size) for s in Segment if s in chosen))


class Digit(SegmentDisplay):
    """One seven-segment character cell.

    Args:
        size: Display size; defaults to the 250x492 design canvas.
        value: Initial value, -2 (blank) by default.

    Raises:
        ValueError: ``value`` is outside [-2, 15].
    """

    def __init__(self, size=DESIGN_SIZE, value: int = DigitValue.OFF):
        self._size = Size.of(size)
        self._value = check_digit_value(value)

    def __repr__(self) -> str:
        return f"Digit(size=({self._size.width:g}, {self._size.height:g}), value={self._value})"

    # ── State ──────────────────────────────────────────────────────

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, size) -> None:
        self.set_size(size)

    def set_size(self, size) -> None:
        self._size = Size.of(size)

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self.set_value(value)

    def set_value(self, value: int) -> int:
        self._value = check_digit_value(value)
        return self._value

    @property
    def lit_segments(self) -> FrozenSet[Segment]:
        return LIT_SEGMENTS[self._value]

    # ── Paths ──────────────────────────────────────────────────────

    @property
    def on_segments(self) -> Path:
        """Lit segments. Empty when the digit is blank."""
        return _combined(self.lit_segments, self._size)

    @property
    def off_segments(self) -> Path:
        """Unlit segments. Empty for 8."""
        return _combined(ALL_SEGMENTS - self.lit_segments, self._size)

    @property
    def segment_mask(self) -> Path:
        return _combined(ALL_SEGMENTS, self._size)

    @property
    def outline(self) -> Path:
        return Path.rect(Rect(0.0, 0.0, self._size.width, self._size.height))

    # ── Sizing ─────────────────────────────────────────────────────

    def ideal_width_from(self, height: float) -> float:
        return height * self.default_aspect

    def ideal_height_from(self, width: float) -> float:
        return width / self.default_aspect
