"""Common interface for anything that produces seven-segment paths."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import DEFAULT_ASPECT, DESIGN_SIZE
from .geometry import Path, Size


class SegmentDisplay(ABC):
    """A sized, value-addressable source of segment paths.

    Implemented by ``Digit`` (one cell) and ``DigitGroup`` (a row of
    cells).  Mutation goes through ``set_size()`` / ``set_value()``; the
    path properties are recomputed from the current state on every read.
    """

    DESIGN_SIZE = DESIGN_SIZE

    # ── State ──────────────────────────────────────────────────────

    @property
    @abstractmethod
    def size(self) -> Size:
        """Display size the paths are stretched to fill."""

    @abstractmethod
    def set_size(self, size) -> None:
        """Resize the display."""

    @property
    @abstractmethod
    def value(self) -> int:
        """Current displayed value."""

    @abstractmethod
    def set_value(self, value: int) -> int:
        """Set the displayed value, returning the value actually stored."""

    # ── Paths ──────────────────────────────────────────────────────

    @property
    @abstractmethod
    def on_segments(self) -> Path:
        """Combined path of every lit segment."""

    @property
    @abstractmethod
    def off_segments(self) -> Path:
        """Combined path of every unlit segment."""

    @property
    @abstractmethod
    def segment_mask(self) -> Path:
        """Every segment, lit or not."""

    @property
    @abstractmethod
    def outline(self) -> Path:
        """Rectangular outline of the display area."""

    # ── Sizing ─────────────────────────────────────────────────────

    @abstractmethod
    def ideal_width_from(self, height: float) -> float:
        """Width that keeps the default digit aspect at ``height``."""

    @abstractmethod
    def ideal_height_from(self, width: float) -> float:
        """Height that keeps the default digit aspect at ``width``."""

    @property
    def default_aspect(self) -> float:
        return DEFAULT_ASPECT

    @property
    def current_aspect(self) -> float:
        return self.size.aspect
