"""
Vector geometry primitives for segment outlines.

A ``Path`` is an immutable sequence of closed polygon loops, the same
shape a platform path object (CGPath, QPainterPath) holds after a series
of ``move_to``/``line_to``/``close`` calls.  Combining paths just appends
their loops; no boolean clipping is done, since segment shapes never
overlap.

Transforms use the row-vector convention (``[x y 1] @ M``), so
``a.concatenating(b)`` applies ``a`` first, then ``b``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: float
    height: float

    @classmethod
    def of(cls, value) -> 'Size':
        """Coerce a ``Size``, ``(w, h)`` tuple or 2-item list."""
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(float(width), float(height))

    @property
    def aspect(self) -> float:
        """Width over height; ``inf`` for a zero-height size."""
        if not self.height:
            return math.inf
        return self.width / self.height


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains_rect(self, other: 'Rect', tolerance: float = 1e-9) -> bool:
        return (other.x >= self.x - tolerance
                and other.y >= self.y - tolerance
                and other.max_x <= self.max_x + tolerance
                and other.max_y <= self.max_y + tolerance)


Loop = Tuple[Point, ...]


# =========================================================================
# Affine transforms
# =========================================================================

# Rotation matrices built from pi fractions leave ~1e-16 residue where
# cos/sin should be exactly zero.
_SNAP_EPSILON = 1e-12


class AffineTransform:
    """2D affine transform backed by a 3x3 numpy matrix."""

    __slots__ = ('matrix',)

    def __init__(self, matrix: Optional[np.ndarray] = None):
        self.matrix = np.identity(3) if matrix is None else np.asarray(matrix, dtype=float)

    @classmethod
    def identity(cls) -> 'AffineTransform':
        return cls()

    @classmethod
    def rotation(cls, radians: float) -> 'AffineTransform':
        c, s = math.cos(radians), math.sin(radians)
        m = np.array([
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])
        m[np.abs(m) < _SNAP_EPSILON] = 0.0
        return cls(m)

    @classmethod
    def translation(cls, tx: float, ty: float) -> 'AffineTransform':
        m = np.identity(3)
        m[2, 0] = tx
        m[2, 1] = ty
        return cls(m)

    @classmethod
    def scale(cls, sx: float, sy: float) -> 'AffineTransform':
        return cls(np.diag([sx, sy, 1.0]))

    def concatenating(self, other: 'AffineTransform') -> 'AffineTransform':
        """Return a transform applying ``self`` and then ``other``."""
        return AffineTransform(self.matrix @ other.matrix)

    def apply(self, points: Sequence[Tuple[float, float]]) -> Loop:
        if not points:
            return ()
        xy = np.asarray(points, dtype=float)
        homogeneous = np.hstack([xy, np.ones((len(xy), 1))])
        out = homogeneous @ self.matrix
        return tuple(Point(float(x), float(y)) for x, y in out[:, :2])

    def __eq__(self, other) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.allclose(self.matrix, other.matrix))

    def __repr__(self) -> str:
        m = self.matrix
        return (f"AffineTransform(a={m[0, 0]:g}, b={m[0, 1]:g}, c={m[1, 0]:g}, "
                f"d={m[1, 1]:g}, tx={m[2, 0]:g}, ty={m[2, 1]:g})")


# =========================================================================
# Paths
# =========================================================================

@dataclass(frozen=True)
class Path:
    """Immutable collection of closed polygon loops."""
    loops: Tuple[Loop, ...] = field(default=())

    @classmethod
    def polygon(cls, points: Iterable[Tuple[float, float]]) -> 'Path':
        """Single closed loop through ``points``.

        A trailing point equal to the first is dropped; the loop closes
        back to its start implicitly.
        """
        loop = tuple(Point(float(x), float(y)) for x, y in points)
        if len(loop) > 1 and loop[-1] == loop[0]:
            loop = loop[:-1]
        return cls((loop,)) if loop else cls()

    @classmethod
    def rect(cls, rect: Rect) -> 'Path':
        x, y, w, h = rect
        return cls.polygon([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])

    @classmethod
    def union(cls, *paths: 'Path') -> 'Path':
        loops: list = []
        for path in paths:
            loops.extend(path.loops)
        return cls(tuple(loops))

    def __add__(self, other: 'Path') -> 'Path':
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.loops + other.loops)

    def __bool__(self) -> bool:
        return bool(self.loops)

    def __len__(self) -> int:
        return len(self.loops)

    @property
    def is_empty(self) -> bool:
        return not self.loops

    def transformed(self, transform: AffineTransform) -> 'Path':
        return Path(tuple(transform.apply(loop) for loop in self.loops))

    def translated(self, tx: float, ty: float = 0.0) -> 'Path':
        if not tx and not ty:
            return self
        return Path(tuple(
            tuple(Point(p.x + tx, p.y + ty) for p in loop)
            for loop in self.loops
        ))

    def scaled(self, sx: float, sy: float) -> 'Path':
        return self.transformed(AffineTransform.scale(sx, sy))

    @property
    def bounds(self) -> Optional[Rect]:
        """Bounding box of all loops, or None for an empty path."""
        if not self.loops:
            return None
        xy = np.array([p for loop in self.loops for p in loop], dtype=float)
        min_x, min_y = xy.min(axis=0)
        max_x, max_y = xy.max(axis=0)
        return Rect(float(min_x), float(min_y),
                    float(max_x - min_x), float(max_y - min_y))

    def to_svg(self, precision: int = 3) -> str:
        """SVG path data, one ``M ... Z`` subpath per loop."""
        def num(v: float) -> str:
            text = f"{v:.{precision}f}".rstrip('0').rstrip('.')
            return '0' if text in ('', '-0') else text

        parts = []
        for loop in self.loops:
            head, *rest = loop
            cmds = [f"M{num(head.x)} {num(head.y)}"]
            cmds.extend(f"L{num(p.x)} {num(p.y)}" for p in rest)
            cmds.append('Z')
            parts.append(' '.join(cmds))
        return ' '.join(parts)
