## curve definition errors for dxfcurves
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

"""Exceptions raised for structurally invalid curve definitions.

Every error derives from ``ValueError`` so callers that only care about
"bad input" can catch that, while batch tooling can report the precise
subclass and the offending ``value``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'InvalidCurveError',
    'ParameterRangeError',
    'DegreeError',
    'KnotVectorError',
    'WeightVectorError',
    'ControlPointError',
    'UnsupportedEntityError',
]


class InvalidCurveError(ValueError):
    """A curve definition that cannot be tessellated."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ParameterRangeError(InvalidCurveError):
    """Normalised curve parameter outside ``[0, 1]``."""


class DegreeError(InvalidCurveError):
    """Spline degree below 1 or above ``point count - 1``."""


class KnotVectorError(InvalidCurveError):
    """Knot vector of the wrong length or with decreasing values."""


class WeightVectorError(InvalidCurveError):
    """Weight vector of the wrong length or with non-positive weights."""


class ControlPointError(InvalidCurveError):
    """Missing control points or points of mixed dimensionality."""


class UnsupportedEntityError(ValueError):
    """Drawing entity type with no tessellation."""

    def __init__(self, dxftype: str):
        super().__init__(f'unsupported entity type: {dxftype}')
        self.dxftype = dxftype
