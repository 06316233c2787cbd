## bulge arc expansion for dxfcurves
## Copyright (c) 2024 dxfcurves contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Expand polyline bulges into explicit arc points.

A bulge is ``tan(included_angle / 4)`` of the arc joining two polyline
vertices; positive bulges run counter-clockwise from the start vertex to
the end vertex.  :func:`bulge_points` returns the start vertex followed by
the interior arc samples, never the end vertex.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from dxfcurves.numeric import ceil_count, fdiv

Point3 = Tuple[float, float, float]

__all__ = [
    'Point3',
    'MIN_BULGE_SEGMENTS',
    'BULGE_SEGMENT_ANGLE',
    'bulge_points',
    'polyline_points',
]

# a segment roughly every 10 degrees, never fewer than 6
BULGE_SEGMENT_ANGLE = math.pi / 18
MIN_BULGE_SEGMENTS = 6


def _polar(x: float, y: float, distance: float, angle: float) -> Tuple[float, float]:
    return x + distance * math.cos(angle), y + distance * math.sin(angle)


def bulge_points(start: Sequence[float],
                 end: Sequence[float],
                 scale_factor: float = 1.0,
                 bulge: float = 1.0,
                 segments: Optional[int] = None) -> List[Point3]:
    """Return ``segments`` points of the bulge arc from ``start`` to ``end``.

    The first point is exactly the scaled ``start``.  A zero-length chord
    or a zero bulge is not trapped; such input yields coincident or
    non-finite points.
    """

    x0 = start[0] * scale_factor
    y0 = start[1] * scale_factor
    x1 = end[0] * scale_factor
    y1 = end[1] * scale_factor

    angle = 4.0 * math.atan(bulge)
    chord = math.hypot(x1 - x0, y1 - y0)
    radius = fdiv(chord / 2.0, math.sin(angle / 2.0))
    heading = math.atan2(y1 - y0, x1 - x0)
    cx, cy = _polar(x0, y0, radius, heading + (math.pi / 2.0 - angle / 2.0))

    if segments is None:
        segments = max(ceil_count(abs(angle) / BULGE_SEGMENT_ANGLE) or 0,
                       MIN_BULGE_SEGMENTS)
    elif segments < 1:
        raise ValueError('segments must be >= 1')

    start_angle = math.atan2(y0 - cy, x0 - cx)
    theta = angle / segments
    r = abs(radius)

    vertices: List[Point3] = [(x0, y0, 0.0)]
    for i in range(1, segments):
        x, y = _polar(cx, cy, r, start_angle + theta * i)
        vertices.append((x, y, 0.0))
    return vertices


def polyline_points(vertices: Sequence[Sequence[float]],
                    scale_factor: float = 1.0,
                    closed: bool = False) -> List[Point3]:
    """Walk ``(x, y[, bulge])`` vertices into a flat list of points.

    Vertices with a non-zero bulge are replaced by their arc samples; the
    bulge of the last vertex only matters for a closed polyline, whose arc
    ends at the first vertex.  A closed polyline repeats its first point
    at the end.
    """

    points: List[Point3] = []
    count = len(vertices)
    for i, vertex in enumerate(vertices):
        bulge = vertex[2] if len(vertex) > 2 else 0.0
        has_next = i + 1 < count
        if bulge and (has_next or closed):
            end = vertices[i + 1] if has_next else vertices[0]
            points.extend(bulge_points(vertex, end, scale_factor, bulge))
        else:
            points.append((vertex[0] * scale_factor, vertex[1] * scale_factor, 0.0))
    if closed and points:
        points.append(points[0])
    return points
