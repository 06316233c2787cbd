## NURBS curve evaluation for dxfcurves
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

"""Point evaluation of (rational) B-spline curves.

``evaluate_bspline`` evaluates one point of a B-spline or NURBS curve with
the de Boor triangular scheme in homogeneous coordinates.  The parameter
``t`` is normalised to ``[0, 1]`` and mapped onto the active knot domain
``[knots[degree], knots[-degree - 1]]``.

Remapped parameters that overshoot the domain through floating point
error are clamped, but structurally invalid input (bad degree, wrong
vector lengths, ``t`` outside ``[0, 1]``) raises an
:class:`~dxfcurves.errors.InvalidCurveError` subclass.

Returned coordinates are rounded to nine decimal places with
:func:`~dxfcurves.numeric.round10`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from dxfcurves.errors import (
    ControlPointError,
    DegreeError,
    KnotVectorError,
    ParameterRangeError,
    WeightVectorError,
)
from dxfcurves.numeric import COORD_PRECISION, fdiv, round10

__all__ = [
    'uniform_knots',
    'check_knots',
    'check_weights',
    'knot_domain',
    'knot_span',
    'evaluate_bspline',
]


def uniform_knots(count: int, degree: int) -> List[float]:
    """Return the uniform knot vector ``0, 1, ..., count + degree``."""

    return [float(i) for i in range(count + degree + 1)]


def check_knots(knots: Sequence[float], count: int, degree: int) -> None:
    expected = count + degree + 1
    if len(knots) != expected:
        raise KnotVectorError(
            f'bad knot vector length: expected {expected}, got {len(knots)}',
            list(knots))
    for i in range(1, len(knots)):
        if knots[i] < knots[i - 1]:
            raise KnotVectorError(
                f'knot vector decreases at index {i}: {knots[i - 1]} > {knots[i]}',
                list(knots))


def check_weights(weights: Sequence[float], count: int) -> None:
    if len(weights) != count:
        raise WeightVectorError(
            f'bad weights vector length: expected {count}, got {len(weights)}',
            list(weights))


def knot_domain(knots: Sequence[float], degree: int) -> Tuple[float, float]:
    """Return the parameter interval on which the spline is defined."""

    return knots[degree], knots[len(knots) - 1 - degree]


def knot_span(u: float, knots: Sequence[float], degree: int) -> int:
    """Return the first index ``s`` with ``knots[s] <= u <= knots[s + 1]``.

    The scan starts at ``degree``.  A parameter matching no span (only
    ``nan`` can, once the knots are checked) maps to the last span.
    """

    last = len(knots) - 1 - degree
    for s in range(degree, last):
        if knots[s] <= u <= knots[s + 1]:
            return s
    return last - 1


def evaluate_bspline(t: float,
                     degree: int,
                     points: Sequence[Sequence[float]],
                     knots: Optional[Sequence[float]] = None,
                     weights: Optional[Sequence[float]] = None) -> Tuple[float, ...]:
    """Evaluate the spline at normalised parameter ``t``.

    ``points`` may be of any dimensionality; the result has the same.
    Without ``knots`` the uniform vector from :func:`uniform_knots` is
    used, without ``weights`` the curve is non-rational.
    """

    count = len(points)
    if t < 0 or t > 1:
        raise ParameterRangeError(f't out of bounds [0,1]: {t}', t)
    if degree < 1:
        raise DegreeError('degree must be at least 1 (linear)', degree)
    if degree > count - 1:
        raise DegreeError(
            'degree must be less than or equal to point count - 1', degree)

    if knots is None:
        knots = uniform_knots(count, degree)
    else:
        check_knots(knots, count, degree)

    if weights is None:
        weights = [1.0] * count
    else:
        check_weights(weights, count)

    dim = len(points[0])
    for p in points:
        if len(p) != dim:
            raise ControlPointError(
                f'control points mix dimensions {dim} and {len(p)}', p)

    low, high = knot_domain(knots, degree)
    u = t * (high - low) + low
    # absorb overshoot at the domain ends
    u = min(max(u, low), high)

    s = knot_span(u, knots, degree)

    # homogeneous coordinates, one row of dim + 1 values per control point
    v = [[0.0] * (dim + 1) for _ in range(count)]
    for i in range(count):
        w = weights[i]
        row = v[i]
        for j in range(dim):
            row[j] = points[i][j] * w
        row[dim] = w

    for level in range(1, degree + 2):
        for i in range(s, s - degree - 1 + level, -1):
            alpha = fdiv(u - knots[i], knots[i + degree + 1 - level] - knots[i])
            prev = v[i - 1]
            cur = v[i]
            for j in range(dim + 1):
                cur[j] = (1.0 - alpha) * prev[j] + alpha * cur[j]

    apex = v[s]
    return tuple(round10(fdiv(apex[j], apex[dim]), COORD_PRECISION)
                 for j in range(dim))
