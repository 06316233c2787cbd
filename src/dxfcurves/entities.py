## ezdxf entity adapter for dxfcurves
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

"""Tessellate drawing entities that were loaded with ezdxf.

:func:`tessellate_entity` turns one POINT, LINE, LWPOLYLINE, POLYLINE,
ARC, CIRCLE, ELLIPSE or SPLINE entity into an ordered list of
``(x, y, z)`` points.  Angles stored in degrees (ARC) are converted to
radians here; the samplers only see radians.

:func:`tessellate_entities` fans a batch out over a thread pool.  A
failing entity is reported in its result record and does not stop the
rest of the batch.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ezdxf.entities import DXFGraphic
from ezdxf.lldxf.const import DXFError

from dxfcurves.bulge import Point3, polyline_points
from dxfcurves.curves import ArcCurve, Curve, EllipseCurve, NurbsCurve, tessellate
from dxfcurves.errors import ControlPointError, UnsupportedEntityError
from dxfcurves.settings import DEFAULT_SETTINGS, TessellationSettings

logger = logging.getLogger(__name__)

__all__ = [
    'SUPPORTED_TYPES',
    'TessellationResult',
    'curve_from_entity',
    'tessellate_entity',
    'tessellate_entities',
]


def _lift(points: Iterable[Tuple[float, ...]]) -> List[Point3]:
    return [(p[0], p[1], 0.0) for p in points]


def _point(entity: DXFGraphic, settings: TessellationSettings) -> List[Point3]:
    loc = entity.dxf.location
    scale = settings.scale_factor
    z = 0.0 if settings.flatten_z else loc.z * scale
    return [(loc.x * scale, loc.y * scale, z)]


def _line(entity: DXFGraphic, settings: TessellationSettings) -> List[Point3]:
    scale = settings.scale_factor
    return [(v.x * scale, v.y * scale, 0.0)
            for v in (entity.dxf.start, entity.dxf.end)]


def _lwpolyline(entity: DXFGraphic, settings: TessellationSettings) -> List[Point3]:
    vertices = list(entity.get_points('xyb'))
    return polyline_points(vertices, settings.scale_factor, entity.closed)


def _polyline(entity: DXFGraphic, settings: TessellationSettings) -> List[Point3]:
    if entity.is_polygon_mesh or entity.is_poly_face_mesh:
        raise UnsupportedEntityError('POLYLINE mesh')
    vertices = [(v.dxf.location.x, v.dxf.location.y, v.dxf.bulge)
                for v in entity.vertices]
    return polyline_points(vertices, settings.scale_factor, entity.is_closed)


def curve_from_entity(entity: DXFGraphic) -> Curve:
    """Extract the curve parameters of an ARC, CIRCLE, ELLIPSE or SPLINE."""

    dxftype = entity.dxftype()
    if dxftype == 'ARC':
        return ArcCurve(entity.dxf.center, entity.dxf.radius,
                        math.radians(entity.dxf.start_angle),
                        math.radians(entity.dxf.end_angle))
    elif dxftype == 'CIRCLE':
        return ArcCurve(entity.dxf.center, entity.dxf.radius)
    elif dxftype == 'ELLIPSE':
        return EllipseCurve(entity.dxf.center, entity.dxf.major_axis,
                            entity.dxf.ratio, entity.dxf.start_param,
                            entity.dxf.end_param)
    elif dxftype == 'SPLINE':
        ctrl = [(p[0], p[1]) for p in entity.control_points]
        if not ctrl:
            raise ControlPointError(
                'spline defined by fit points only is not supported', 0)
        weights = list(entity.weights) or None
        return NurbsCurve(ctrl, entity.dxf.degree, list(entity.knots), weights)
    raise UnsupportedEntityError(dxftype)


def _curve(entity: DXFGraphic, settings: TessellationSettings) -> List[Point3]:
    return _lift(tessellate(curve_from_entity(entity), settings))


_HANDLERS: Dict[str, Callable[[DXFGraphic, TessellationSettings], List[Point3]]] = {
    'POINT': _point,
    'LINE': _line,
    'LWPOLYLINE': _lwpolyline,
    'POLYLINE': _polyline,
    'ARC': _curve,
    'CIRCLE': _curve,
    'ELLIPSE': _curve,
    'SPLINE': _curve,
}

SUPPORTED_TYPES = frozenset(_HANDLERS)


def tessellate_entity(entity: DXFGraphic,
                      settings: Optional[TessellationSettings] = None) -> List[Point3]:
    """Return the ordered ``(x, y, z)`` points of one entity.

    Raises :class:`~dxfcurves.errors.UnsupportedEntityError` for entity
    types that carry no curve, and an
    :class:`~dxfcurves.errors.InvalidCurveError` subclass for malformed
    splines.
    """

    settings = settings or DEFAULT_SETTINGS
    dxftype = entity.dxftype()
    handler = _HANDLERS.get(dxftype)
    if handler is None:
        logger.debug('no tessellation for %s entity %s', dxftype, entity.dxf.handle)
        raise UnsupportedEntityError(dxftype)
    return handler(entity, settings)


@dataclass(frozen=True)
class TessellationResult:
    """Outcome of tessellating one entity of a batch."""

    handle: Optional[str]
    dxftype: str
    points: Tuple[Point3, ...] = ()
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _tessellate_one(settings: TessellationSettings,
                    entity: DXFGraphic) -> TessellationResult:
    dxftype = entity.dxftype()
    handle = entity.dxf.handle
    try:
        points = tessellate_entity(entity, settings)
    except (ValueError, ArithmeticError, DXFError) as exc:
        logger.warning('tessellation of %s entity %s failed: %s', dxftype, handle, exc)
        return TessellationResult(handle, dxftype, error=exc)
    return TessellationResult(handle, dxftype, tuple(points))


def tessellate_entities(entities: Iterable[DXFGraphic],
                        settings: Optional[TessellationSettings] = None,
                        max_workers: Optional[int] = None) -> List[TessellationResult]:
    """Tessellate entities concurrently, returning results in input order."""

    settings = settings or DEFAULT_SETTINGS
    batch = list(entities)
    if not batch:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(partial(_tessellate_one, settings), batch))
