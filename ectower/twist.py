#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve twists.

Given the curve E: y^2 = x^3 + a*x + b and an invertible element u
of the curve field, the map

    (x, y) -> (x*u^2, y*u^3)

is an isomorphism from E to the twisted curve

    E': y^2 = x^3 + a*u^4*x + b*u^6

The untwist map (x, y) -> (x*u^-2, y*u^-3) is its inverse.
When the curve is defined over a subfield and u is e.g.
a sixth root of a non-residue, as t in Fp[t]/(t^6 - beta),
E' is the sextic twist used to move computations
into a smaller field representation.
"""

from typing import Tuple

from ectower.alias import FieldLike
from ectower.curve_group import CurveGroup, Point
from ectower.exceptions import ECTowerTypeError, NonInvertibleError
from ectower.field import FieldElement


def _powers(ec: CurveGroup, u: FieldLike) -> Tuple[FieldElement, FieldElement]:
    "Return u^2 and u^3, with u coerced in the curve field."

    u = ec.field(u)
    if u.is_zero():
        raise NonInvertibleError("the twisting element must be invertible")
    u2 = u * u
    return u2, u2 * u


def _scaled_curve(ec: CurveGroup, u2: FieldElement, u3: FieldElement) -> CurveGroup:
    "Return the curve y^2 = x^3 + a*u2^2*x + b*u3^2."
    return CurveGroup(ec.field, ec.a * u2 * u2, ec.b * u3 * u3)


def twisted_curve(ec: CurveGroup, u: FieldLike) -> CurveGroup:
    "Return the twisted curve y^2 = x^3 + a*u^4*x + b*u^6."

    u2, u3 = _powers(ec, u)
    return _scaled_curve(ec, u2, u3)


def untwisted_curve(ec: CurveGroup, u: FieldLike) -> CurveGroup:
    "Return the untwisted curve y^2 = x^3 + a*u^-4*x + b*u^-6."

    u2, u3 = _powers(ec, u)
    return _scaled_curve(ec, u2.inverse(), u3.inverse())


def _scale(Q: Point, u2: FieldElement, u3: FieldElement) -> Point:
    "Return (x*u2, y*u3) on the curve scaled by u2 and u3."

    ec = _scaled_curve(Q.ec, u2, u3)
    if Q.is_infinity():
        return ec.INF
    return Point(ec, Q.x * u2, Q.y * u3)  # type: ignore


def twist(Q: Point, u: FieldLike) -> Point:
    """Return the point (x*u^2, y*u^3) of the twisted curve.

    The point at infinity is mapped to the point at infinity.
    """

    if not isinstance(Q, Point):
        raise ECTowerTypeError(f"not a point: {Q!r}")
    u2, u3 = _powers(Q.ec, u)
    return _scale(Q, u2, u3)


def untwist(Q: Point, u: FieldLike) -> Point:
    """Return the point (x*u^-2, y*u^-3) of the untwisted curve.

    It is the inverse of twist: untwist(twist(Q, u), u) == Q.
    NonInvertibleError is raised if u is not invertible.
    """

    if not isinstance(Q, Point):
        raise ECTowerTypeError(f"not a point: {Q!r}")
    u2, u3 = _powers(Q.ec, u)
    return _scale(Q, u2.inverse(), u3.inverse())
