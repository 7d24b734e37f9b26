#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and point classes.

The curve is defined over any finite field implementing the
Field capability set: a PrimeField or a TowerField.

Points are immutable values referencing their CurveGroup:
Point for affine coordinates, JacPoint for Jacobian coordinates.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ectower.alias import FieldLike
from ectower.exceptions import (
    ECTowerTypeError,
    ECTowerValueError,
    IncompatibleOperandsError,
    InvalidConstructionError,
)
from ectower.field import Field, FieldElement


def _require_field(x: FieldElement, ec: "CurveGroup") -> None:
    if not isinstance(x, FieldElement):
        raise ECTowerTypeError(f"not a field element: {x!r}")
    if not (x.field is ec.field or x.field == ec.field):
        err_msg = f"coordinate not in the curve field: {x.field!r} vs {ec.field!r}"
        raise IncompatibleOperandsError(err_msg)


@dataclass(frozen=True)
class Point:
    """Affine point of an elliptic curve.

    The point at infinity INF has both coordinates equal to None.
    The point is not checked to be on the curve:
    use CurveGroup.point for that.
    """

    ec: "CurveGroup" = field(repr=False)
    x: Optional[FieldElement] = None
    y: Optional[FieldElement] = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ECTowerTypeError("only one coordinate is None")
        if self.x is not None:
            _require_field(self.x, self.ec)
            _require_field(self.y, self.ec)  # type: ignore

    def is_infinity(self) -> bool:
        return self.x is None

    def __neg__(self) -> "Point":
        return self.ec.negate(self)

    def __add__(self, other: Any) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.ec.add(self, other)

    def __sub__(self, other: Any) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.ec.add(self, self.ec.negate(other))

    def __mul__(self, m: Any) -> "Point":
        if not isinstance(m, int):
            return NotImplemented
        # local import: curve_mult depends on this module
        from ectower.curve_mult import mult_aff

        self.ec.require_on_curve(self)
        return mult_aff(m, self)

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.is_infinity():
            return "INF"
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, eq=False)
class JacPoint:
    """Point of an elliptic curve in Jacobian coordinates.

    (X, Y, Z) represents the affine point (X/Z^2, Y/Z^3);
    Z = 0 represents the point at infinity, whatever X and Y are.
    Equality is the equivalence of the represented affine points.
    """

    ec: "CurveGroup" = field(repr=False)
    x: FieldElement
    y: FieldElement
    z: FieldElement

    def __post_init__(self) -> None:
        _require_field(self.x, self.ec)
        _require_field(self.y, self.ec)
        _require_field(self.z, self.ec)

    def is_infinity(self) -> bool:
        return self.z.is_zero()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JacPoint):
            return NotImplemented
        if self.ec != other.ec:
            return False
        return self.ec.jac_equality(self, other)

    def __hash__(self) -> int:
        return hash(self.ec.aff_from_jac(self))

    def __neg__(self) -> "JacPoint":
        return self.ec.negate_jac(self)


class CurveGroup:
    """Group of the points of an elliptic curve over a finite field.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in the field,
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, fld: Field, a: FieldLike, b: FieldLike) -> None:

        if not isinstance(fld, Field):
            raise InvalidConstructionError(f"not a field: {fld!r}")
        # the short Weierstrass form requires characteristic not 2 or 3
        if fld.characteristic in (2, 3):
            err_msg = f"unsupported field characteristic: {fld.characteristic}"
            raise InvalidConstructionError(err_msg)
        self.field = fld

        self.a = fld(a)
        self.b = fld(b)

        # Check that 4*a^3 + 27*b^2 ≠ 0
        if (self.a * self.a * self.a * 4 + self.b * self.b * 27).is_zero():
            raise InvalidConstructionError("zero discriminant")

        self.INF = Point(self)
        self.INFJ = JacPoint(self, fld.one(), fld.one(), fld.zero())

    @property
    def identity(self) -> Point:
        return self.INF

    @property
    def discriminant(self) -> FieldElement:
        "Return -16 * (4 a^3 + 27 b^2)."
        return (self.a * self.a * self.a * 4 + self.b * self.b * 27) * -16

    @property
    def j_invariant(self) -> FieldElement:
        "Return 1728 * 4 a^3 / (4 a^3 + 27 b^2)."
        a3_4 = self.a * self.a * self.a * 4
        return a3_4 * 1728 / (a3_4 + self.b * self.b * 27)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return self.field == other.field and self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.field, self.a, self.b))

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n field = {self.field}"
        result += f"\n a   = {self.a}"
        result += f"\n b   = {self.b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.field!r}, {self.a}, {self.b})"

    def _require_same_curve(self, Q: Any) -> None:
        if not isinstance(Q, (Point, JacPoint)):
            raise ECTowerTypeError(f"not a point: {Q!r}")
        if not (Q.ec is self or Q.ec == self):
            raise IncompatibleOperandsError(f"point not on this curve: {Q}")

    def point(self, x: FieldLike, y: FieldLike) -> Point:
        """Return the affine point (x, y), checking it is on the curve.

        The coordinates are coerced into the curve field:
        ints and elements of a subfield are accepted.
        """

        Q = Point(self, self.field(x), self.field(y))
        self.require_on_curve(Q)
        return Q

    def embed(self, Q: Point) -> Point:
        """Return the point Q, defined over a subfield, as a point of this curve.

        The curve of Q must have the same coefficients as this curve,
        once embedded in this curve field.
        """

        if not isinstance(Q, Point):
            raise ECTowerTypeError(f"not a point: {Q!r}")
        if self.field(Q.ec.a) != self.a or self.field(Q.ec.b) != self.b:
            raise IncompatibleOperandsError(f"not a subfield curve: {Q.ec!r}")
        if Q.is_infinity():
            return self.INF
        return Point(self, self.field(Q.x), self.field(Q.y))

    def extend(self, fld: Field) -> "CurveGroup":
        "Return the same curve over an extension field."
        return CurveGroup(fld, fld(self.a), fld(self.b))

    # methods using the field only

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        self._require_same_curve(Q)
        if Q.is_infinity():
            return Q
        return Point(self, Q.x, -Q.y)  # type: ignore

    def negate_jac(self, Q: JacPoint) -> JacPoint:
        """Return the opposite Jacobian point.

        The input point is not checked to be on the curve.
        """
        self._require_same_curve(Q)
        return JacPoint(self, Q.x, -Q.y, Q.z)

    def jac_from_aff(self, Q: Point) -> JacPoint:
        """Return the Jacobian representation of the affine point.

        The input point is assumed to be on curve.
        """
        self._require_same_curve(Q)
        if Q.is_infinity():
            return self.INFJ
        return JacPoint(self, Q.x, Q.y, self.field.one())  # type: ignore

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        self._require_same_curve(Q)
        if Q.is_infinity():
            return self.INF

        Z2 = Q.z * Q.z
        x = Q.x / Z2
        y = Q.y / (Z2 * Q.z)
        return Point(self, x, y)

    def jac_equality(self, QJ: JacPoint, PJ: JacPoint) -> bool:
        """Return True if Jacobian points are equal in affine coordinates.

        The input points are assumed to be on curve.
        """
        if QJ.is_infinity() or PJ.is_infinity():
            return QJ.is_infinity() and PJ.is_infinity()

        PJ2 = PJ.z * PJ.z
        QJ2 = QJ.z * QJ.z
        if QJ.x * PJ2 != PJ.x * QJ2:
            return False

        PJ3 = PJ2 * PJ.z
        QJ3 = QJ2 * QJ.z
        return QJ.y * PJ3 == PJ.y * QJ3

    # methods using a, b

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        # no Jacobian coordinates here as aff_from_jac would cost 2 inversions
        # while add_aff costs only one
        return self.add_aff(Q1, Q2)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point must be on the curve.
        """

        self.require_on_curve(Q)
        return self.double_aff(Q)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve
        self._require_same_curve(Q)
        self._require_same_curve(R)

        if R.is_infinity():
            return Q
        if Q.is_infinity():
            return R

        # opposite points, including the 2-torsion ones
        if Q.x == R.x and Q.y == -R.y:  # type: ignore
            return self.INF
        if Q == R:
            return self.double_aff(Q)

        # NonInvertibleError if R.x == Q.x here, i.e. not on curve
        lam = (R.y - Q.y) / (R.x - Q.x)  # type: ignore
        x = lam * lam - Q.x - R.x
        y = lam * (Q.x - x) - Q.y
        return Point(self, x, y)

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve
        self._require_same_curve(Q)

        if Q.is_infinity() or Q.y.is_zero():  # type: ignore
            return self.INF

        lam = (Q.x * Q.x * 3 + self.a) / (Q.y * 2)  # type: ignore
        x = lam * lam - Q.x - Q.x
        y = lam * (Q.x - x) - Q.y
        return Point(self, x, y)

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve
        self._require_same_curve(Q)
        self._require_same_curve(R)

        if R.is_infinity():
            return Q
        if Q.is_infinity():
            return R

        RZ2 = R.z * R.z
        RZ3 = RZ2 * R.z
        QZ2 = Q.z * Q.z
        QZ3 = QZ2 * Q.z

        M = Q.x * RZ2
        N = R.x * QZ2

        T = Q.y * RZ3
        U = R.y * QZ3

        if M == N:  # same affine x
            if T == U:  # point doubling
                return self.double_jac(Q)
            # opposite points
            return self.INFJ

        W = U - T
        V = N - M

        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = W * W - V3 - MV2 * 2
        Y = W * (MV2 - X) - T * V3
        Z = V * Q.z * R.z
        return JacPoint(self, X, Y, Z)

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve
        self._require_same_curve(Q)

        # if Q.y is zero then Z is zero too: the result is INFJ
        QZ2 = Q.z * Q.z
        QY2 = Q.y * Q.y
        W = Q.x * Q.x * 3 + self.a * QZ2 * QZ2
        V = Q.x * QY2 * 4
        X = W * W - V * 2
        Y = W * (V - X) - QY2 * QY2 * 8
        Z = Q.y * Q.z * 2
        return JacPoint(self, X, Y, Z)

    def _y2(self, x: FieldElement) -> FieldElement:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return (x * x + self.a) * x + self.b

    def y(self, x: FieldLike) -> FieldElement:
        """Return the y coordinate from x, as in (x, y).

        Note that -y is also valid.
        """
        x = self.field(x)
        y2 = self._y2(x)
        try:
            return y2.sqrt()
        except ECTowerValueError as e:
            raise ECTowerValueError(f"invalid x-coordinate: {x}") from e

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECTowerValueError(f"point not on curve: {Q}")

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        self._require_same_curve(Q)
        if not isinstance(Q, Point):
            raise ECTowerTypeError("not an affine point")
        if Q.is_infinity():
            return True
        return self._y2(Q.x) == Q.y * Q.y  # type: ignore

    def is_on_curve_jac(self, Q: JacPoint) -> bool:
        "Return True if the Jacobian point is on the curve."
        self._require_same_curve(Q)
        if not isinstance(Q, JacPoint):
            raise ECTowerTypeError("not a Jacobian point")
        if Q.is_infinity():
            return True
        # Y^2 = X^3 + a*X*Z^4 + b*Z^6
        Z2 = Q.z * Q.z
        Z4 = Z2 * Z2
        rhs = Q.x * Q.x * Q.x + self.a * Q.x * Z4 + self.b * Z4 * Z2
        return Q.y * Q.y == rhs
