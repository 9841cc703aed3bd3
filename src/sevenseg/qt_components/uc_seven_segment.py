#!/usr/bin/env python3
"""
Qt bridge for seven-segment paths.

Converts ``sevenseg.geometry.Path`` loops into PyQt6 ``QPolygonF`` /
``QPainterPath`` objects, so a QPainter-based widget can fill or stroke
the on, off, mask and outline layers directly.
"""

from typing import List

from sevenseg.geometry import Path

try:
    from PyQt6.QtCore import QPointF, Qt
    from PyQt6.QtGui import QPainterPath, QPolygonF
    PYQT6_AVAILABLE = True
except ImportError:
    PYQT6_AVAILABLE = False


if PYQT6_AVAILABLE:

    def to_qpolygons(path: Path) -> List['QPolygonF']:
        """One closed QPolygonF per loop."""
        polygons = []
        for loop in path.loops:
            points = [QPointF(p.x, p.y) for p in loop]
            points.append(QPointF(loop[0].x, loop[0].y))
            polygons.append(QPolygonF(points))
        return polygons

    def to_qpainter_path(path: Path) -> 'QPainterPath':
        """Single QPainterPath holding every loop as a closed subpath."""
        qpath = QPainterPath()
        qpath.setFillRule(Qt.FillRule.WindingFill)
        for loop in path.loops:
            head, *rest = loop
            qpath.moveTo(head.x, head.y)
            for p in rest:
                qpath.lineTo(p.x, p.y)
            qpath.closeSubpath()
        return qpath
