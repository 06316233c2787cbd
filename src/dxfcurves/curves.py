## curve parameter types for dxfcurves
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

"""Immutable curve descriptions and a single tessellation entry point.

Each curve kind is a frozen dataclass holding only numeric parameters.
:func:`tessellate` routes a curve to the matching sampler and returns its
ordered points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from dxfcurves.arcs import TAU, sample_arc, sample_circle, sample_ellipse
from dxfcurves.bulge import bulge_points
from dxfcurves.errors import ControlPointError, DegreeError, WeightVectorError
from dxfcurves.nurbs import check_knots, check_weights, evaluate_bspline
from dxfcurves.settings import DEFAULT_SETTINGS, TessellationSettings
from dxfcurves.spline import tessellate_spline

__all__ = [
    'BulgeCurve',
    'ArcCurve',
    'EllipseCurve',
    'NurbsCurve',
    'Curve',
    'tessellate',
]


def _vec(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class BulgeCurve:
    """Arc between two polyline vertices encoded by a bulge factor."""

    start: Tuple[float, ...]
    end: Tuple[float, ...]
    bulge: float
    segments: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'start', _vec(self.start))
        object.__setattr__(self, 'end', _vec(self.end))


@dataclass(frozen=True)
class ArcCurve:
    """Circular arc; ``end_angle=None`` means a full circle."""

    center: Tuple[float, ...]
    radius: float
    start_angle: float = 0.0
    end_angle: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'center', _vec(self.center))

    @property
    def is_circle(self) -> bool:
        return self.end_angle is None


@dataclass(frozen=True)
class EllipseCurve:
    """Ellipse or elliptical arc with parametric angles in radians."""

    center: Tuple[float, ...]
    major_axis: Tuple[float, ...]
    axis_ratio: float
    start_angle: float = 0.0
    end_angle: float = TAU

    def __post_init__(self) -> None:
        object.__setattr__(self, 'center', _vec(self.center))
        object.__setattr__(self, 'major_axis', _vec(self.major_axis))


@dataclass(frozen=True)
class NurbsCurve:
    """B-spline curve, rational when ``weights`` is given.

    Construction fails with an :class:`~dxfcurves.errors.InvalidCurveError`
    subclass when the degree, knot vector or weights do not fit the
    control points.
    """

    control_points: Tuple[Tuple[float, ...], ...]
    degree: int
    knots: Tuple[float, ...]
    weights: Optional[Tuple[float, ...]] = None

    def __post_init__(self) -> None:
        ctrl = tuple(_vec(p) for p in self.control_points)
        object.__setattr__(self, 'control_points', ctrl)
        object.__setattr__(self, 'knots', _vec(self.knots))
        if self.weights is not None:
            object.__setattr__(self, 'weights', _vec(self.weights))

        count = len(ctrl)
        if count == 0:
            raise ControlPointError('spline has no control points', count)
        if self.degree < 1 or self.degree > count - 1:
            raise DegreeError(
                f'degree {self.degree} out of range for {count} control points',
                self.degree)
        check_knots(self.knots, count, self.degree)
        if self.weights is not None:
            check_weights(self.weights, count)
            for w in self.weights:
                if not w > 0:
                    raise WeightVectorError(f'weights must be positive, got {w}', w)

    @property
    def is_rational(self) -> bool:
        return self.weights is not None

    def evaluate(self, t: float) -> Tuple[float, ...]:
        """Evaluate the curve at normalised parameter ``t`` in ``[0, 1]``."""

        return evaluate_bspline(t, self.degree, self.control_points,
                                self.knots, self.weights)


Curve = Union[BulgeCurve, ArcCurve, EllipseCurve, NurbsCurve]


def tessellate(curve: Curve,
               settings: Optional[TessellationSettings] = None) -> List[Tuple[float, ...]]:
    """Return the ordered points approximating ``curve``.

    Bulge curves give ``(x, y, 0)`` points without the end vertex; a zero
    bulge is a straight segment and gives only the scaled start vertex.
    Arcs, ellipses and splines give ``(x, y)`` points.
    """

    settings = settings or DEFAULT_SETTINGS
    scale = settings.scale_factor
    if isinstance(curve, BulgeCurve):
        if curve.bulge == 0:
            return [(curve.start[0] * scale, curve.start[1] * scale, 0.0)]
        return bulge_points(curve.start, curve.end, scale, curve.bulge,
                            curve.segments)
    elif isinstance(curve, ArcCurve):
        if curve.is_circle:
            return sample_circle(curve.center, curve.radius, curve.start_angle,
                                 settings)
        return sample_arc(curve.center, curve.radius, curve.start_angle,
                          curve.end_angle, settings=settings)
    elif isinstance(curve, EllipseCurve):
        return sample_ellipse(curve.center, curve.major_axis, curve.axis_ratio,
                              curve.start_angle, curve.end_angle, settings)
    elif isinstance(curve, NurbsCurve):
        return tessellate_spline(curve.control_points, curve.degree, curve.knots,
                                 settings.samples_per_spline_segment, scale,
                                 curve.weights)
    raise TypeError(f'cannot tessellate {type(curve).__name__}')
