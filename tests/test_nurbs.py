"""Tests for single point B-spline / NURBS evaluation."""

import math

import pytest

from dxfcurves.errors import (
    ControlPointError,
    DegreeError,
    InvalidCurveError,
    KnotVectorError,
    ParameterRangeError,
    WeightVectorError,
)
from dxfcurves.numeric import round10
from dxfcurves.nurbs import evaluate_bspline, knot_domain, knot_span, uniform_knots

QUAD = [(0.0, 0.0), (1.0, 2.0), (2.0, 0.0)]
QUAD_KNOTS = [0, 0, 0, 1, 1, 1]

CUBIC = [(0, 0), (1, 3), (3, 3), (4, 0), (6, 1)]
CUBIC_KNOTS = [0, 0, 0, 0, 0.5, 1, 1, 1, 1]

QUARTER_CIRCLE = [(1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
QUARTER_WEIGHTS = [1.0, math.sqrt(2.0) / 2.0, 1.0]


def _close(a, b, tol=1e-6):
    assert len(a) == len(b)
    for x, y in zip(a, b):
        assert abs(x - y) <= tol


class TestEvaluate:

    def test_quadratic_bezier_midpoint(self):
        assert evaluate_bspline(0.5, 2, QUAD, QUAD_KNOTS) == (1.0, 1.0)

    def test_end_points_interpolated(self):
        cases = [
            (1, [(0, 0), (2, 1), (3, -1)], [0, 0, 0.5, 1, 1]),
            (2, QUAD, QUAD_KNOTS),
            (3, CUBIC, CUBIC_KNOTS),
            (2, CUBIC, [0, 0, 0, 1, 2, 3, 3, 3]),
            (2, CUBIC, [0, 0, 0, 0.5, 0.5, 1, 1, 1]),
        ]
        for degree, points, knots in cases:
            _close(evaluate_bspline(0.0, degree, points, knots), points[0])
            _close(evaluate_bspline(1.0, degree, points, knots), points[-1])

    def test_rational_quarter_circle(self):
        for i in range(11):
            x, y = evaluate_bspline(i / 10.0, 2, QUARTER_CIRCLE, QUAD_KNOTS,
                                    QUARTER_WEIGHTS)
            assert abs(math.hypot(x, y) - 1.0) < 1e-8
        mid = evaluate_bspline(0.5, 2, QUARTER_CIRCLE, QUAD_KNOTS, QUARTER_WEIGHTS)
        _close(mid, (math.sqrt(0.5), math.sqrt(0.5)), tol=1e-8)

    def test_unit_weights_match_non_rational(self):
        for t in (0.0, 0.3, 0.5, 0.9, 1.0):
            assert evaluate_bspline(t, 3, CUBIC, CUBIC_KNOTS, [1.0] * 5) == \
                evaluate_bspline(t, 3, CUBIC, CUBIC_KNOTS)

    def test_default_uniform_knots(self):
        pts = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
        assert evaluate_bspline(0.0, 1, pts) == (0.0, 0.0)
        assert evaluate_bspline(0.5, 1, pts) == (1.0, 0.0)
        assert evaluate_bspline(1.0, 1, pts) == (2.0, 0.0)

    def test_three_dimensional_points(self):
        pts = [(0, 0, 0), (1, 1, 1), (2, 2, 2)]
        p = evaluate_bspline(0.5, 2, pts, QUAD_KNOTS)
        assert len(p) == 3
        _close(p, (1.0, 1.0, 1.0))

    def test_coordinates_are_rounded(self):
        for i in range(21):
            for c in evaluate_bspline(i / 20.0, 3, CUBIC, CUBIC_KNOTS):
                assert round10(c, -9) == c

    def test_repeatable(self):
        first = [evaluate_bspline(i / 7.0, 3, CUBIC, CUBIC_KNOTS) for i in range(8)]
        second = [evaluate_bspline(i / 7.0, 3, CUBIC, CUBIC_KNOTS) for i in range(8)]
        assert first == second


class TestErrors:

    def test_parameter_out_of_range(self):
        with pytest.raises(ParameterRangeError):
            evaluate_bspline(-0.1, 2, QUAD, QUAD_KNOTS)
        with pytest.raises(ParameterRangeError):
            evaluate_bspline(1.5, 2, QUAD, QUAD_KNOTS)

    def test_degree_range(self):
        with pytest.raises(DegreeError):
            evaluate_bspline(0.5, 0, QUAD, [0, 0, 1, 1])
        with pytest.raises(DegreeError):
            evaluate_bspline(0.5, 3, QUAD, [0, 0, 0, 0, 1, 1, 1])

    def test_knot_vector_length(self):
        with pytest.raises(KnotVectorError) as info:
            evaluate_bspline(0.5, 3, CUBIC, [0, 0, 0, 1, 1, 1, 1])
        assert info.value.value == [0, 0, 0, 1, 1, 1, 1]

    def test_decreasing_knots(self):
        with pytest.raises(KnotVectorError):
            evaluate_bspline(0.5, 2, QUAD, [0, 0, 1, 0, 1, 1])

    def test_weight_vector_length(self):
        with pytest.raises(WeightVectorError):
            evaluate_bspline(0.5, 2, QUAD, QUAD_KNOTS, [1.0, 1.0])

    def test_mixed_dimensions(self):
        with pytest.raises(ControlPointError):
            evaluate_bspline(0.5, 2, [(0, 0), (1, 1, 1), (2, 0)], QUAD_KNOTS)

    def test_errors_are_value_errors(self):
        for cls in (ParameterRangeError, DegreeError, KnotVectorError,
                    WeightVectorError, ControlPointError):
            assert issubclass(cls, InvalidCurveError)
            assert issubclass(cls, ValueError)


class TestKnots:

    def test_uniform_knots(self):
        assert uniform_knots(3, 2) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    def test_domain(self):
        assert knot_domain(CUBIC_KNOTS, 3) == (0, 1)
        assert knot_domain(uniform_knots(3, 1), 1) == (1.0, 3.0)

    def test_span_prefers_first_match(self):
        knots = [0, 0, 0, 0.5, 1, 1, 1]
        assert knot_span(0.0, knots, 2) == 2
        assert knot_span(0.5, knots, 2) == 2
        assert knot_span(0.75, knots, 2) == 3
        assert knot_span(1.0, knots, 2) == 3

    def test_span_of_nan_is_last(self):
        knots = [0, 0, 0, 0.5, 1, 1, 1]
        assert knot_span(math.nan, knots, 2) == 3
