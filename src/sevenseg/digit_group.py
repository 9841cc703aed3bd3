"""Row of seven-segment digits showing one signed integer.

The group owns a fixed number of ``Digit`` cells laid out left to right
with uniform spacing.  Its value is clamped to what the digits can show
in the chosen base, then split into per-digit values:

    4 digits, decimal, negatives allowed:   -123  ->  [-, 1, 2, 3]
    3 digits, hex, leading zeroes:            10  ->  [0, 0, A]
    4 digits, binary, no leading zeroes:       5  ->  [ , 1, 0, 1]

When negatives are allowed the leftmost digit is reserved for the sign
and never shows a number.  Both the sign and leading-zero policies are
switched off for groups of one digit.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Sequence, Tuple

from .constants import DEFAULT_ASPECT
from .digit import Digit, DigitValue
from .display import SegmentDisplay
from .geometry import Path, Rect, Size

log = logging.getLogger(__name__)


class NumberBase(Enum):
    """Number base used to split the group value into digits."""
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def base(self) -> int:
        return self.value

    @property
    def max_value(self) -> int:
        """Largest single-digit value in this base."""
        return self.value - 1


# =========================================================================
# Value <-> digit conversion
# =========================================================================

def decompose(
    value: int,
    digit_count: int,
    number_base: NumberBase = NumberBase.HEX,
    can_show_negative: bool = False,
    show_leading_zeroes: bool = False,
) -> List[int]:
    """Split ``value`` into per-digit values, leftmost first.

    Unused positions are blank (-2).  With ``can_show_negative`` the first
    position is the sign slot: -1 for negative values, blank otherwise.

    Raises:
        RuntimeError: ``value`` does not fit in the available digits.
    """
    base = NumberBase(number_base).base
    can_show_negative = can_show_negative and digit_count > 1
    first_numeric = 1 if can_show_negative else 0

    if value < 0 and not can_show_negative:
        raise RuntimeError(f"Negative value {value} with no sign digit")

    digits = [int(DigitValue.OFF)] * digit_count
    is_negative = value < 0
    magnitude = abs(value)

    remainders: List[int] = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        remainders.append(remainder)
    if not remainders:
        remainders.append(0)

    if len(remainders) > digit_count - first_numeric:
        raise RuntimeError(
            f"{value} needs {len(remainders)} base-{base} digits, "
            f"only {digit_count - first_numeric} available")

    # Least significant remainder lands in the rightmost digit
    for offset, remainder in enumerate(remainders):
        digits[digit_count - 1 - offset] = remainder

    if show_leading_zeroes:
        for index in range(first_numeric, digit_count - len(remainders)):
            digits[index] = 0

    if can_show_negative:
        digits[0] = int(DigitValue.MINUS if is_negative else DigitValue.OFF)

    return digits


def recompose(digit_values: Sequence[int], number_base: NumberBase = NumberBase.HEX) -> int:
    """Rebuild the integer shown by ``digit_values`` (inverse of ``decompose``)."""
    base = NumberBase(number_base).base
    sign = 1
    total = 0
    for value in digit_values:
        if value == DigitValue.MINUS:
            sign = -1
        elif value == DigitValue.OFF:
            continue
        elif 0 <= value < base:
            total = total * base + value
        else:
            raise ValueError(f"Digit value {value} is not valid in base {base}")
    return sign * total


# =========================================================================
# Digit group
# =========================================================================

class DigitGroup(SegmentDisplay):
    """Horizontal group of digits displaying one integer.

    Args:
        number_of_digits: Total digit cells, including the sign digit
            when ``can_show_negative`` is set.
        size: Overall size; digits share the width left after spacing.
        number_base: Base used for display. Default is hexadecimal.
        value: Initial value, clamped to the displayable range.
        can_show_negative: Reserve the leftmost digit for a minus sign.
        show_leading_zeroes: Zero-fill unused numeric digits.
        spacing: Display units between adjacent digits.

    Raises:
        ValueError: Fewer than one digit, negative spacing, or spacing
            that leaves no room for the digits.
    """

    def __init__(
        self,
        number_of_digits: int,
        size,
        number_base: NumberBase = NumberBase.HEX,
        value: int = 0,
        can_show_negative: bool = False,
        show_leading_zeroes: bool = False,
        spacing: float = 0.0,
    ):
        if number_of_digits < 1:
            raise ValueError(f"A digit group needs at least one digit, got {number_of_digits}")
        if spacing < 0:
            raise ValueError(f"Spacing cannot be negative, got {spacing}")

        self._number_of_digits = int(number_of_digits)
        self._spacing = float(spacing)
        self._number_base = NumberBase(number_base)
        self._size = Size.of(size)
        self._digits: Tuple[Digit, ...] = self._make_digits(self._size)
        self._can_show_negative = self._policy('can_show_negative', can_show_negative)
        self._show_leading_zeroes = self._policy('show_leading_zeroes', show_leading_zeroes)
        self._value = 0
        self.set_value(value)

    def __repr__(self) -> str:
        return (f"DigitGroup(digits={self._number_of_digits}, base={self._number_base.base}, "
                f"value={self._value}, negative={self._can_show_negative}, "
                f"leading_zeroes={self._show_leading_zeroes})")

    # ── Internals ──────────────────────────────────────────────────

    def _digit_size(self, size: Size) -> Size:
        count = self._number_of_digits
        width = (size.width - (count - 1) * self._spacing) / count
        if width < 0:
            raise ValueError(
                f"Width {size.width:g} cannot fit {count} digits with spacing {self._spacing:g}")
        return Size(width, size.height)

    def _make_digits(self, size: Size) -> Tuple[Digit, ...]:
        digit_size = self._digit_size(size)
        return tuple(Digit(size=digit_size) for _ in range(self._number_of_digits))

    def _policy(self, name: str, enabled: bool) -> bool:
        allowed = bool(enabled) and self._number_of_digits > 1
        if enabled and not allowed:
            log.debug("%s ignored for a single-digit group", name)
        return allowed

    def _compose(self, attr: str) -> Path:
        return Path.union(*(
            getattr(digit, attr).translated(self.frame_for(index).x)
            for index, digit in enumerate(self._digits)
        ))

    # ── Configuration ──────────────────────────────────────────────

    @property
    def digits(self) -> Tuple[Digit, ...]:
        return self._digits

    @property
    def number_of_digits(self) -> int:
        return self._number_of_digits

    @property
    def spacing(self) -> float:
        return self._spacing

    @property
    def number_base(self) -> NumberBase:
        return self._number_base

    @number_base.setter
    def number_base(self, number_base: NumberBase) -> None:
        self._number_base = NumberBase(number_base)
        self.set_value(self._value)

    @property
    def can_show_negative(self) -> bool:
        return self._can_show_negative

    @can_show_negative.setter
    def can_show_negative(self, enabled: bool) -> None:
        self._can_show_negative = self._policy('can_show_negative', enabled)
        self.set_value(self._value)

    @property
    def show_leading_zeroes(self) -> bool:
        return self._show_leading_zeroes

    @show_leading_zeroes.setter
    def show_leading_zeroes(self, enabled: bool) -> None:
        self._show_leading_zeroes = self._policy('show_leading_zeroes', enabled)
        self.set_value(self._value)

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, size) -> None:
        self.set_size(size)

    def set_size(self, size) -> None:
        """Resize the group, rebuilding every digit at the new width."""
        size = Size.of(size)
        self._digits = self._make_digits(size)
        self._size = size
        self.set_value(self._value)

    @property
    def digit_size(self) -> Size:
        return self._digits[0].size

    def frame_for(self, index: int) -> Rect:
        """Frame of digit ``index`` (0 is leftmost) in group coordinates."""
        if not 0 <= index < self._number_of_digits:
            raise IndexError(f"Digit index {index} out of range 0..{self._number_of_digits - 1}")
        width, height = self.digit_size
        return Rect(index * (width + self._spacing), 0.0, width, height)

    # ── Value ──────────────────────────────────────────────────────

    @property
    def numerical_digit_count(self) -> int:
        """Digits available for the number itself (excludes the sign digit)."""
        return self._number_of_digits - (1 if self._can_show_negative else 0)

    @property
    def max_value(self) -> int:
        return self._number_base.base ** self.numerical_digit_count - 1

    @property
    def min_value(self) -> int:
        return -self.max_value if self._can_show_negative else 0

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self.set_value(value)

    def set_value(self, value: int) -> int:
        """Clamp ``value`` to the displayable range and push it to the digits."""
        clamped = min(self.max_value, max(self.min_value, int(value)))
        if clamped != value:
            log.debug("Clamped %s to %d (range %d..%d)",
                      value, clamped, self.min_value, self.max_value)
        digit_values = decompose(
            clamped,
            self._number_of_digits,
            self._number_base,
            self._can_show_negative,
            self._show_leading_zeroes,
        )
        for digit, digit_value in zip(self._digits, digit_values):
            digit.set_value(digit_value)
        self._value = clamped
        return clamped

    @property
    def digit_values(self) -> List[int]:
        return [digit.value for digit in self._digits]

    # ── Paths ──────────────────────────────────────────────────────

    @property
    def on_segments(self) -> Path:
        return self._compose('on_segments')

    @property
    def off_segments(self) -> Path:
        return self._compose('off_segments')

    @property
    def segment_mask(self) -> Path:
        return self._compose('segment_mask')

    @property
    def outline(self) -> Path:
        """Outline of each digit cell, not one rectangle around the group."""
        return self._compose('outline')

    # ── Sizing ─────────────────────────────────────────────────────

    @staticmethod
    def ideal_width_for(height: float, digit_count: int, spacing: float = 0.0) -> float:
        return digit_count * height * DEFAULT_ASPECT + spacing * (digit_count - 1)

    @staticmethod
    def ideal_height_for(width: float, digit_count: int, spacing: float = 0.0) -> float:
        return ((width - spacing * (digit_count - 1)) / digit_count) / DEFAULT_ASPECT

    def ideal_width_from(self, height: float) -> float:
        return self.ideal_width_for(height, self._number_of_digits, self._spacing)

    def ideal_height_from(self, width: float) -> float:
        return self.ideal_height_for(width, self._number_of_digits, self._spacing)
