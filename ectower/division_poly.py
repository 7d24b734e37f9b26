#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Division polynomials and n-torsion points.

For the curve y^2 = x^3 + a*x + b the division polynomials psi_n
vanish exactly at the affine points P with n*P == INF.
They are written as

    psi_n = f_n(x)      for odd n
    psi_n = y * f_n(x)  for even n

so that f_n is a polynomial in x only, with y^2 replaced by
R(x) = x^3 + a*x + b:

    f_0 = 0, f_1 = 1, f_2 = 2
    f_3 = 3x^4 + 6ax^2 + 12bx - a^2
    f_4 = 4(x^6 + 5ax^4 + 20bx^3 - 5a^2x^2 - 4abx - 8b^2 - a^3)
    f_(2m+1) = R^2 f_(m+2) f_m^3 - f_(m-1) f_(m+1)^3    (m even)
    f_(2m+1) = f_(m+2) f_m^3 - R^2 f_(m-1) f_(m+1)^3    (m odd)
    f_(2m) = f_m (f_(m+2) f_(m-1)^2 - f_(m-2) f_(m+1)^2) / 2

Polynomials are lists of curve field elements,
lowest degree coefficient first, without trailing zeros:
the zero polynomial is the empty list.

Root finding is by exhaustive search over the curve field,
so it is meant for small fields only.
"""

import logging
from typing import Dict, List, Sequence

from ectower.curve_group import CurveGroup, Point
from ectower.exceptions import ECTowerTypeError, ECTowerValueError
from ectower.field import FieldElement

logger = logging.getLogger(__name__)

Poly = List[FieldElement]


def _trim(f: Poly) -> Poly:
    while f and f[-1].is_zero():
        f.pop()
    return f


def poly_add(f: Sequence[FieldElement], g: Sequence[FieldElement]) -> Poly:
    if len(f) < len(g):
        f, g = g, f
    result = list(f)
    for i, c in enumerate(g):
        result[i] = result[i] + c
    return _trim(result)


def poly_sub(f: Sequence[FieldElement], g: Sequence[FieldElement]) -> Poly:
    return poly_add(f, [-c for c in g])


def poly_mul(f: Sequence[FieldElement], g: Sequence[FieldElement]) -> Poly:
    "Schoolbook product of two polynomials."

    if not f or not g:
        return []
    zero = f[0].field.zero()
    result = [zero] * (len(f) + len(g) - 1)
    for i, c in enumerate(f):
        if c.is_zero():
            continue
        for j, d in enumerate(g):
            result[i + j] = result[i + j] + c * d
    return _trim(result)


def poly_eval(f: Sequence[FieldElement], x: FieldElement) -> FieldElement:
    "Evaluate the polynomial at x (Horner rule)."

    result = x.field.zero()
    for c in reversed(f):
        result = result * x + c
    return result


def _cube(f: Poly) -> Poly:
    return poly_mul(poly_mul(f, f), f)


def _base_cases(ec: CurveGroup) -> Dict[int, Poly]:
    fld = ec.field
    a, b = ec.a, ec.b
    zero = fld.zero()
    f3 = [-a * a, b * 12, a * 6, zero, fld(3)]
    f4 = [
        (-b * b * 8 - a * a * a) * 4,
        -a * b * 16,
        -a * a * 20,
        b * 80,
        a * 20,
        zero,
        fld(4),
    ]
    return {0: [], 1: [fld.one()], 2: [fld(2)], 3: _trim(f3), 4: _trim(f4)}


def _f(
    n: int, ec: CurveGroup, R2: Poly, half: FieldElement, cache: Dict[int, Poly]
) -> Poly:
    if n in cache:
        return cache[n]

    m = n // 2
    if n % 2 == 1:
        f_m2 = _f(m + 2, ec, R2, half, cache)
        f_m1 = _f(m + 1, ec, R2, half, cache)
        f_m = _f(m, ec, R2, half, cache)
        f_m_1 = _f(m - 1, ec, R2, half, cache)
        t1 = poly_mul(f_m2, _cube(f_m))
        t2 = poly_mul(f_m_1, _cube(f_m1))
        # the even-index factors carry y^4 = R^2
        if m % 2 == 0:
            t1 = poly_mul(R2, t1)
        else:
            t2 = poly_mul(R2, t2)
        result = poly_sub(t1, t2)
    else:
        f_m2 = _f(m + 2, ec, R2, half, cache)
        f_m1 = _f(m + 1, ec, R2, half, cache)
        f_m = _f(m, ec, R2, half, cache)
        f_m_1 = _f(m - 1, ec, R2, half, cache)
        f_m_2 = _f(m - 2, ec, R2, half, cache)
        t = poly_sub(
            poly_mul(f_m2, poly_mul(f_m_1, f_m_1)),
            poly_mul(f_m_2, poly_mul(f_m1, f_m1)),
        )
        result = poly_mul([half], poly_mul(f_m, t))

    cache[n] = result
    return result


def division_polynomial(ec: CurveGroup, n: int) -> Poly:
    """Return f_n, the x-only part of the n-th division polynomial.

    psi_n is f_n for odd n and y*f_n for even n.
    """

    if not isinstance(ec, CurveGroup):
        raise ECTowerTypeError(f"not a curve: {ec!r}")
    if n < 0:
        raise ECTowerValueError(f"negative n: {n}")

    cache = _base_cases(ec)
    if n in cache:
        return cache[n]

    R = curve_polynomial(ec)
    R2 = poly_mul(R, R)
    half = ec.field(2).inverse()
    result = _f(n, ec, R2, half, cache)
    logger.debug("division polynomial %d has degree %d", n, len(result) - 1)
    return result


def curve_polynomial(ec: CurveGroup) -> Poly:
    "Return R(x) = x^3 + a*x + b."

    fld = ec.field
    return _trim([ec.b, ec.a, fld.zero(), fld.one()])


def torsion_polynomial(ec: CurveGroup, n: int) -> Poly:
    """Return the polynomial in x vanishing at the affine n-torsion points.

    It is f_n for odd n and R*f_n for even n,
    as psi_n = y*f_n vanishes also where y = 0.
    """

    f = division_polynomial(ec, n)
    if n % 2 == 0:
        f = poly_mul(curve_polynomial(ec), f)
    return f


def torsion_x_coordinates(ec: CurveGroup, n: int) -> List[FieldElement]:
    """Return the roots in the curve field of the n-torsion polynomial.

    The corresponding y-coordinates may lie in an extension field only:
    see torsion_points for the points defined over the curve field.
    """

    f = torsion_polynomial(ec, n)
    return [x for x in ec.field.elements() if poly_eval(f, x).is_zero()]


def torsion_points(ec: CurveGroup, n: int) -> List[Point]:
    "Return the affine points P over the curve field with n*P == INF."

    R = curve_polynomial(ec)
    points = []
    for x in torsion_x_coordinates(ec, n):
        y2 = poly_eval(R, x)
        if not y2.is_square():
            continue
        y = y2.sqrt()
        points.append(Point(ec, x, y))
        if not y.is_zero():
            points.append(Point(ec, x, -y))
    return points
