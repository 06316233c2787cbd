"""Tests for curve value types and the tessellate dispatcher."""

import math

import pytest

from dxfcurves.arcs import TAU
from dxfcurves.curves import ArcCurve, BulgeCurve, EllipseCurve, NurbsCurve, tessellate
from dxfcurves.errors import (
    ControlPointError,
    DegreeError,
    InvalidCurveError,
    KnotVectorError,
    WeightVectorError,
)
from dxfcurves.settings import TessellationSettings


class TestNurbsCurve:

    def test_fields_are_tuples(self):
        curve = NurbsCurve([[0, 0], [1, 2], [2, 0]], 2, [0, 0, 0, 1, 1, 1])
        assert curve.control_points == ((0.0, 0.0), (1.0, 2.0), (2.0, 0.0))
        assert curve.knots == (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
        assert not curve.is_rational
        hash(curve)

    def test_evaluate(self):
        curve = NurbsCurve([(0, 0), (1, 2), (2, 0)], 2, [0, 0, 0, 1, 1, 1])
        assert curve.evaluate(0.5) == (1.0, 1.0)

    def test_rational(self):
        curve = NurbsCurve([(1, 0), (1, 1), (0, 1)], 2, [0, 0, 0, 1, 1, 1],
                           [1.0, math.sqrt(2.0) / 2.0, 1.0])
        assert curve.is_rational
        x, y = curve.evaluate(0.25)
        assert math.hypot(x, y) == pytest.approx(1.0, abs=1e-8)

    @pytest.mark.parametrize('ctrl, degree, knots, weights, error', [
        ([], 1, [0, 1], None, ControlPointError),
        ([(0, 0), (1, 1)], 2, [0, 0, 0, 1, 1], None, DegreeError),
        ([(0, 0), (1, 1)], 0, [0, 1], None, DegreeError),
        ([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 1, 1, 1], None, KnotVectorError),
        ([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 1, 0, 1, 1], None, KnotVectorError),
        ([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 0, 1, 1, 1], [1, 1], WeightVectorError),
        ([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 0, 1, 1, 1], [1, 0, 1], WeightVectorError),
        ([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 0, 1, 1, 1], [1, -2, 1], WeightVectorError),
    ])
    def test_invalid(self, ctrl, degree, knots, weights, error):
        with pytest.raises(error) as info:
            NurbsCurve(ctrl, degree, knots, weights)
        assert isinstance(info.value, InvalidCurveError)
        assert isinstance(info.value, ValueError)

    def test_bad_weight_is_reported(self):
        with pytest.raises(WeightVectorError) as info:
            NurbsCurve([(0, 0), (1, 1), (2, 0)], 2, [0, 0, 0, 1, 1, 1], [1, 0, 1])
        assert info.value.value == 0.0


class TestTessellate:

    def test_bulge(self):
        pts = tessellate(BulgeCurve((0, 0), (2, 0), 1.0))
        assert len(pts) == 18
        assert pts[0] == (0.0, 0.0, 0.0)

    def test_bulge_segments(self):
        assert len(tessellate(BulgeCurve((0, 0), (2, 0), 1.0, segments=8))) == 8

    def test_zero_bulge_is_straight(self):
        settings = TessellationSettings(scale_factor=3.0)
        assert tessellate(BulgeCurve((1, 1), (5, 1), 0.0), settings) == [(3.0, 3.0, 0.0)]

    def test_circle(self):
        curve = ArcCurve((0, 0), 10.0)
        assert curve.is_circle
        assert len(tessellate(curve)) == 25

    def test_arc(self):
        curve = ArcCurve((0, 0), 10.0, 0.0, math.pi / 2)
        assert not curve.is_circle
        pts = tessellate(curve)
        assert len(pts) == 7
        assert pts[-1][0] == pytest.approx(0.0, abs=1e-9)
        assert pts[-1][1] == pytest.approx(10.0)

    def test_ellipse(self):
        curve = EllipseCurve((0, 0), (2, 0), 0.5)
        assert curve.end_angle == TAU
        assert len(tessellate(curve)) == 39

    def test_nurbs_uses_sample_setting(self):
        curve = NurbsCurve([(0, 0), (1, 2), (3, 2), (4, 0)], 2, [0, 0, 0, 0.5, 1, 1, 1])
        settings = TessellationSettings(samples_per_spline_segment=5)
        assert len(tessellate(curve, settings)) == 12
        assert len(tessellate(curve)) == 202

    def test_nurbs_scaled(self):
        curve = NurbsCurve([(0, 0), (1, 2), (2, 0)], 2, [0, 0, 0, 1, 1, 1])
        settings = TessellationSettings(scale_factor=2.0, samples_per_spline_segment=2)
        assert tessellate(curve, settings) == [(0.0, 0.0), (2.0, 2.0), (4.0, 0.0)]

    def test_unknown_curve(self):
        with pytest.raises(TypeError):
            tessellate(object())
