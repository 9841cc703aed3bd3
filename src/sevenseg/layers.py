"""Display modes: which paths a renderer draws, in paint order."""

from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple

from .display import SegmentDisplay
from .geometry import Path


class DisplayType(Enum):
    OUTLINE = 'outline'
    MASK_ONLY = 'mask'
    ON_ONLY = 'on'
    OFF_ONLY = 'off'
    ALL = 'all'


class Layer(NamedTuple):
    name: str
    path: Path


# Layer names per mode, bottom layer first
_LAYERS = {
    DisplayType.OUTLINE: ('outline',),
    DisplayType.MASK_ONLY: ('segment_mask',),
    DisplayType.ON_ONLY: ('on_segments',),
    DisplayType.OFF_ONLY: ('off_segments',),
    DisplayType.ALL: ('outline', 'off_segments', 'on_segments'),
}


def layers_for(display: SegmentDisplay, display_type: DisplayType = DisplayType.ALL) -> List[Layer]:
    """Paths to paint for ``display_type``, bottom layer first."""
    return [Layer(name, getattr(display, name))
            for name in _LAYERS[DisplayType(display_type)]]
