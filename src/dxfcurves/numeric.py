## numeric helpers for dxfcurves
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

"""Scalar helpers shared by the curve samplers.

``round10`` rounds a float to a power-of-ten precision by shifting the
decimal exponent of its shortest string representation instead of scaling
in binary, so ``round10(1.005, -2)`` is ``1.01`` and not ``1.0``.

``fdiv`` divides with IEEE 754 semantics: a zero denominator yields
``inf`` or ``nan`` instead of raising, which lets degenerate geometry
propagate as non-finite coordinates.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

__all__ = [
    'COORD_PRECISION',
    'round10',
    'fdiv',
    'ceil_count',
]

# decimal exponent used to stabilise evaluated spline coordinates
COORD_PRECISION = -9

_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    digits = Decimal(repr(float(value)))
    return float(digits.to_integral_value(rounding=ROUND_HALF_UP, context=_CONTEXT))


def round10(value: float, exp: Optional[float] = None) -> float:
    """Round ``value`` to the decimal exponent ``exp``.

    ``exp=-9`` rounds to the ninth decimal digit, ``exp=2`` to the
    nearest hundred.  Ties round away from zero.  With ``exp`` unset or
    zero the value is rounded to the nearest integer and non-finite
    values pass through.  Otherwise a non-finite or non-integral ``exp``,
    or a non-finite ``value``, gives ``nan``.
    """

    if exp is None or exp == 0:
        return _round_half_away(value)
    if not math.isfinite(exp) or exp % 1 != 0:
        return math.nan
    if not math.isfinite(value):
        return math.nan

    shift = int(exp)
    digits = Decimal(repr(float(value)))
    shifted = digits.scaleb(-shift, context=_CONTEXT)
    shifted = shifted.to_integral_value(rounding=ROUND_HALF_UP, context=_CONTEXT)
    return float(shifted.scaleb(shift, context=_CONTEXT))


def fdiv(numerator: float, denominator: float) -> float:
    """Divide without raising on a zero denominator."""

    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ceil_count(value: float) -> Optional[int]:
    """Return ``ceil(value)`` after discarding noise below ``1e-9``.

    ``2*pi / (pi/12)`` may come out as ``24.000000000000004``; the
    sample count must still be 24.  Returns ``None`` for non-finite input.
    """

    if not math.isfinite(value):
        return None
    return math.ceil(round10(value, COORD_PRECISION))
