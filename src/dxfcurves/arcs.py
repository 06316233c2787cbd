## circular and elliptical arc sampling for dxfcurves
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

"""Adaptive sampling of circles, arcs, ellipses and elliptical arcs.

Arcs are always traversed counter-clockwise from the start angle to the
end angle.  The number of points is the larger of two budgets taken from
:class:`~dxfcurves.settings.TessellationSettings`:

* ``ceil(length / (max_chord_length * scale_factor)) + 1`` bounds the
  length of each chord in document units;
* ``ceil((length / radius) / max_angle_per_segment) + 1`` bounds the
  angle subtended by each chord, using the minor radius for ellipses.

Points are spaced uniformly in the angular parameter, the first at the
start angle and the last at the end angle.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple, Union

import mpmath as mpm

from dxfcurves.numeric import ceil_count, fdiv
from dxfcurves.settings import DEFAULT_SETTINGS, TessellationSettings

logger = logging.getLogger(__name__)

Point2 = Tuple[float, float]

__all__ = [
    'TAU',
    'arc_sweep',
    'elliptic_arc_length',
    'arc_point_count',
    'sample_arc',
    'sample_circle',
    'sample_ellipse',
]

TAU = 2.0 * math.pi

# sweeps closer than this to zero count as zero (or as a full turn)
_SWEEP_EPSILON = 1e-12


def arc_sweep(start_angle: float, end_angle: float) -> float:
    """Counter-clockwise angle from ``start_angle`` to ``end_angle``.

    The result lies in ``(0, 2*pi]``; equal angles give ``0`` and angles
    a whole number of turns apart give a full turn.
    """

    delta = end_angle - start_angle
    same = abs(delta) < _SWEEP_EPSILON
    delta = delta % TAU
    if delta < _SWEEP_EPSILON:
        return 0.0 if same else TAU
    return delta


def elliptic_arc_length(x_radius: float, y_radius: float,
                        sweep: float, start_angle: float = 0.0) -> float:
    """Length of ``(rx cos t, ry sin t)`` for ``t`` over the given sweep.

    Uses the incomplete elliptic integral of the second kind; circles
    reduce to ``radius * sweep``.
    """

    a = abs(x_radius)
    b = abs(y_radius)
    if a == b:
        return a * abs(sweep)
    major = max(a, b)
    minor = min(a, b)
    m = 1.0 - (minor / major) ** 2
    # with the major axis along x the integrand is a*sqrt(1 - m cos^2 t)
    offset = math.pi / 2.0 if a > b else 0.0
    t0 = start_angle - offset
    t1 = start_angle + sweep - offset
    return abs(float(major * (mpm.ellipe(t1, m) - mpm.ellipe(t0, m))))


def arc_point_count(arc_length: float, radius: float,
                    settings: TessellationSettings = DEFAULT_SETTINGS) -> int:
    """Number of points needed to satisfy both the chord and angle budgets."""

    by_length = ceil_count(
        arc_length / (settings.max_chord_length * settings.scale_factor))
    by_angle = ceil_count(
        fdiv(fdiv(arc_length, radius), settings.max_angle_per_segment))
    counts = [c + 1 for c in (by_length, by_angle) if c is not None]
    if not counts:
        # non-finite geometry: keep the end points so the caller sees it
        return 2
    return max(counts)


def _sample(center: Sequence[float], x_radius: float, y_radius: float,
            start_angle: float, sweep: float, rotation: float,
            settings: TessellationSettings) -> List[Point2]:
    scale = settings.scale_factor
    cx = center[0] * scale
    cy = center[1] * scale
    rx = x_radius * scale
    ry = y_radius * scale

    length = elliptic_arc_length(rx, ry, sweep, start_angle)
    count = arc_point_count(length, min(abs(rx), abs(ry)), settings)
    logger.debug('arc length %g sampled with %d points', length, count)

    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    points: List[Point2] = []
    for k in range(count):
        u = k / (count - 1) if count > 1 else 0.0
        theta = start_angle + u * sweep
        tx = rx * math.cos(theta)
        ty = ry * math.sin(theta)
        if rotation:
            tx, ty = tx * cos_r - ty * sin_r, tx * sin_r + ty * cos_r
        points.append((cx + tx, cy + ty))
    return points


def sample_arc(center: Sequence[float],
               radius: Union[float, Sequence[float]],
               start_angle: float,
               end_angle: float,
               rotation: float = 0.0,
               settings: Optional[TessellationSettings] = None) -> List[Point2]:
    """Sample a circular or elliptical arc counter-clockwise.

    ``radius`` is either a single radius or an ``(x_radius, y_radius)``
    pair; ``rotation`` turns the x radius away from the x axis.  Angles
    are in radians.
    """

    settings = settings or DEFAULT_SETTINGS
    if isinstance(radius, (int, float)):
        x_radius = y_radius = float(radius)
    else:
        x_radius, y_radius = radius
    sweep = arc_sweep(start_angle, end_angle)
    return _sample(center, x_radius, y_radius, start_angle, sweep,
                   rotation, settings)


def sample_circle(center: Sequence[float], radius: float,
                  start_angle: Optional[float] = None,
                  settings: Optional[TessellationSettings] = None) -> List[Point2]:
    """Sample a full circle; the last point repeats the first."""

    settings = settings or DEFAULT_SETTINGS
    start = start_angle or 0.0
    return _sample(center, radius, radius, start, TAU, 0.0, settings)


def sample_ellipse(center: Sequence[float],
                   major_axis: Sequence[float],
                   axis_ratio: float,
                   start_angle: float = 0.0,
                   end_angle: float = TAU,
                   settings: Optional[TessellationSettings] = None) -> List[Point2]:
    """Sample an ellipse given by its major axis vector and axis ratio.

    ``major_axis`` is relative to ``center``; its direction gives the
    rotation and its length the major radius.  ``start_angle`` and
    ``end_angle`` are parametric angles in radians.
    """

    settings = settings or DEFAULT_SETTINGS
    major = math.hypot(major_axis[0], major_axis[1])
    minor = major * axis_ratio
    rotation = math.atan2(major_axis[1], major_axis[0])
    return sample_arc(center, (major, minor), start_angle, end_angle,
                      rotation, settings)
