# -*- coding: utf-8 -*-
"""Curve tessellation for engineering-drawing entities.

Converts bulge arcs, circular and elliptical arcs and (rational)
B-splines into ordered point sequences with a controlled sampling
budget.
"""

from importlib.metadata import PackageNotFoundError, version

from dxfcurves.arcs import arc_point_count, elliptic_arc_length, sample_arc, sample_circle, sample_ellipse
from dxfcurves.bulge import bulge_points, polyline_points
from dxfcurves.curves import ArcCurve, BulgeCurve, EllipseCurve, NurbsCurve, tessellate
from dxfcurves.errors import (
    ControlPointError,
    DegreeError,
    InvalidCurveError,
    KnotVectorError,
    ParameterRangeError,
    UnsupportedEntityError,
    WeightVectorError,
)
from dxfcurves.numeric import round10
from dxfcurves.nurbs import evaluate_bspline
from dxfcurves.settings import DEFAULT_SETTINGS, TessellationSettings, load_settings
from dxfcurves.spline import tessellate_spline

try:
    __version__ = version("dxfcurves")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "__version__",
    "round10",
    "evaluate_bspline",
    "tessellate_spline",
    "bulge_points",
    "polyline_points",
    "sample_arc",
    "sample_circle",
    "sample_ellipse",
    "elliptic_arc_length",
    "arc_point_count",
    "BulgeCurve",
    "ArcCurve",
    "EllipseCurve",
    "NurbsCurve",
    "tessellate",
    "TessellationSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "InvalidCurveError",
    "ParameterRangeError",
    "DegreeError",
    "KnotVectorError",
    "WeightVectorError",
    "ControlPointError",
    "UnsupportedEntityError",
]
