#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Frobenius endomorphism.

The p-power Frobenius map x -> x^p (p being the field characteristic)
is a field automorphism; applied coordinatewise it maps the points
of a curve over the field to the points of the curve whose coefficients
are mapped too.
If the curve is defined over the prime field Fp,
the Frobenius map is an endomorphism of the curve group
fixing exactly the points with coordinates in Fp.

For tower fields the map is computed coefficientwise,
using the tower Frobenius factor (or images of the power basis):
see ectower.tower_field.
"""

from ectower.curve_group import CurveGroup, Point
from ectower.exceptions import ECTowerTypeError, ECTowerValueError
from ectower.field import FieldElement


def frobenius_element(x: FieldElement, k: int = 1) -> FieldElement:
    "Return x^(p^k), p being the characteristic of the field of x."

    if k < 0:
        raise ECTowerValueError(f"negative k: {k}")
    return x.frobenius(k)


def frobenius_curve(ec: CurveGroup, k: int = 1) -> CurveGroup:
    """Return the curve with Frobenius-mapped coefficients.

    It is the curve itself if the coefficients are in the prime field.
    """

    if k < 0:
        raise ECTowerValueError(f"negative k: {k}")
    a = ec.a.frobenius(k)
    b = ec.b.frobenius(k)
    if a == ec.a and b == ec.b:
        return ec
    return CurveGroup(ec.field, a, b)


def frobenius(Q: Point, k: int = 1) -> Point:
    """Return the Frobenius image of the point, applied k times.

    Every coordinate is raised to p^k;
    the point at infinity is mapped to itself.
    Applying the map n times, with n the absolute degree of the
    curve field, returns the original point.
    """

    if not isinstance(Q, Point):
        raise ECTowerTypeError(f"not a point: {Q!r}")
    if k < 0:
        raise ECTowerValueError(f"negative k: {k}")

    ec = frobenius_curve(Q.ec, k)
    if Q.is_infinity():
        return ec.INF
    return Point(ec, Q.x.frobenius(k), Q.y.frobenius(k))  # type: ignore


def is_frobenius_fixed(Q: Point) -> bool:
    "Return True if the Frobenius map fixes the point, i.e. it is Fp-rational."
    return frobenius(Q) == Q
