"""PyQt6 adapters for sevenseg paths."""

from .uc_seven_segment import PYQT6_AVAILABLE

__all__ = [
    'PYQT6_AVAILABLE',
]
