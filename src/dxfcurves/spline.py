## spline tessellation for dxfcurves
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

"""Turn a B-spline or NURBS curve into a dense 2D polyline.

The active knot domain is split at every distinct interior knot value and
each resulting segment is sampled ``samples_per_segment + 1`` times,
uniformly in the knot parameter.  Neighbouring segments both emit their
shared boundary point, so a curve with ``k`` segments produces
``k * (samples_per_segment + 1)`` points.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from dxfcurves.errors import ControlPointError, DegreeError
from dxfcurves.nurbs import check_knots, check_weights, evaluate_bspline, knot_domain

Point2 = Tuple[float, float]

__all__ = [
    'Point2',
    'spline_segment_bounds',
    'tessellate_spline',
]


def spline_segment_bounds(knots: Sequence[float], degree: int) -> List[float]:
    """Return the distinct knot values bounding the spline segments.

    Repeated knots (multiplicity) collapse to a single boundary, so no
    zero-length segment is produced.
    """

    bounds = [knots[degree]]
    for k in range(degree + 1, len(knots) - degree):
        if bounds[-1] != knots[k]:
            bounds.append(knots[k])
    return bounds


def tessellate_spline(control_points: Sequence[Sequence[float]],
                      degree: int,
                      knots: Sequence[float],
                      samples_per_segment: int,
                      scale_factor: float = 1.0,
                      weights: Optional[Sequence[float]] = None) -> List[Point2]:
    """Sample the spline into an ordered list of ``(x, y)`` points.

    Control points are scaled by ``scale_factor``; any z component is
    dropped.  The definition is validated before anything is evaluated.
    """

    if samples_per_segment < 1:
        raise ValueError('samples_per_segment must be >= 1')

    count = len(control_points)
    if count == 0:
        raise ControlPointError('spline has no control points', count)
    if degree < 1 or degree > count - 1:
        raise DegreeError(
            f'degree {degree} out of range for {count} control points', degree)
    check_knots(knots, count, degree)
    if weights is not None:
        check_weights(weights, count)

    ctrl = [[p[0] * scale_factor, p[1] * scale_factor] for p in control_points]

    domain_low, domain_high = knot_domain(knots, degree)
    span = domain_high - domain_low
    bounds = spline_segment_bounds(knots, degree)

    polyline: List[Point2] = []
    for i in range(1, len(bounds)):
        u_min = bounds[i - 1]
        u_max = bounds[i]
        for k in range(samples_per_segment + 1):
            u = (k / samples_per_segment) * (u_max - u_min) + u_min
            t = (u - domain_low) / span
            t = min(max(t, 0.0), 1.0)
            x, y = evaluate_bspline(t, degree, ctrl, knots, weights)
            polyline.append((x, y))
    return polyline
