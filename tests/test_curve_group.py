#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ectower.curve_group` module."

from typing import Iterable, List

import pytest

from ectower.curve_group import CurveGroup, JacPoint, Point
from ectower.exceptions import (
    ECTowerTypeError,
    ECTowerValueError,
    IncompatibleOperandsError,
    InvalidConstructionError,
    NonInvertibleError,
)
from ectower.field import FieldElement
from ectower.prime_field import PrimeField
from ectower.tower_field import TowerField

F67 = PrimeField(67)
F67_2 = TowerField(F67, [-1, 0])
ec67 = CurveGroup(F67, 4, 3)
ec67_2 = CurveGroup(F67_2, 4, 3)

F19 = PrimeField(19)
ec19 = CurveGroup(F19, 0, 5)
# y^2 = x^3 - x has the 2-torsion points (0, 0), (1, 0), (-1, 0)
ec19_2t = CurveGroup(F19, -1, 0)


def curve_points(ec: CurveGroup, xs: Iterable[FieldElement]) -> List[Point]:
    "Return the affine points of the curve with x-coordinate in xs."

    points = []
    for x in xs:
        try:
            y = ec.y(x)
        except ECTowerValueError:
            continue
        points.append(ec.point(x, y))
        if not y.is_zero():
            points.append(ec.point(x, -y))
    return points


def test_construction() -> None:
    with pytest.raises(InvalidConstructionError, match="not a field: "):
        CurveGroup(67, 4, 3)  # type: ignore
    with pytest.raises(InvalidConstructionError, match="zero discriminant"):
        CurveGroup(F67, 0, 0)
    # 4 * (-3)^3 + 27 * 2^2 = 0
    with pytest.raises(InvalidConstructionError, match="zero discriminant"):
        CurveGroup(F67, -3, 2)
    err_msg = "unsupported field characteristic: "
    with pytest.raises(InvalidConstructionError, match=err_msg):
        CurveGroup(PrimeField(2), 1, 1)
    with pytest.raises(InvalidConstructionError, match=err_msg):
        CurveGroup(PrimeField(3), 1, 1)
    with pytest.raises(InvalidConstructionError, match=err_msg):
        CurveGroup(TowerField(PrimeField(3), [-1, 0]), 1, 1)
    with pytest.raises(IncompatibleOperandsError, match="incompatible fields: "):
        CurveGroup(F67, F19(1), 1)

    assert ec67.a == 4
    assert ec67.b == 3
    assert ec67.field == F67
    assert ec67 == CurveGroup(PrimeField(67), 4, 3)
    assert hash(ec67) == hash(CurveGroup(PrimeField(67), 4, 3))
    assert ec67 != ec67_2
    assert ec67 != CurveGroup(F67, 4, 4)
    assert ec67 != "ec67"
    assert ec67.identity == ec67.INF
    assert ec67.INF.is_infinity()
    assert ec67.INFJ.is_infinity()

    assert ec67.discriminant == -16 * (4 * 4 ** 3 + 27 * 3 ** 2)
    assert ec67.j_invariant == F67(1728 * 4 * 4 ** 3) / (4 * 4 ** 3 + 27 * 3 ** 2)
    assert ec19.j_invariant == 0
    assert ec19_2t.j_invariant == 1728

    assert "field = F_67" in str(ec67)
    assert repr(ec67) == "CurveGroup(PrimeField(67), 4, 3)"


def test_point() -> None:
    P = ec67.point(15, 50)
    assert P.x == 15
    assert P.y == 50
    assert P == Point(ec67, F67(15), F67(50))
    assert str(P) == "(15, 50)"
    assert str(ec67.INF) == "INF"
    assert ec67.point(15 + 67, -17) == P

    with pytest.raises(ECTowerValueError, match="point not on curve: "):
        ec67.point(15, 51)
    with pytest.raises(ECTowerTypeError, match="only one coordinate is None"):
        Point(ec67, F67(15))
    with pytest.raises(ECTowerTypeError, match="only one coordinate is None"):
        Point(ec67, None, F67(50))
    with pytest.raises(ECTowerTypeError, match="not a field element: "):
        Point(ec67, 15, 50)  # type: ignore
    err_msg = "coordinate not in the curve field: "
    with pytest.raises(IncompatibleOperandsError, match=err_msg):
        Point(ec67, F19(15), F19(50))
    with pytest.raises(IncompatibleOperandsError, match=err_msg):
        JacPoint(ec67, F67(1), F67(1), F19(1))

    # points are immutable
    with pytest.raises(AttributeError):
        P.x = F67(1)  # type: ignore

    assert ec67.is_on_curve(P)
    assert ec67.is_on_curve(ec67.INF)
    assert not ec67.is_on_curve(Point(ec67, F67(15), F67(51)))
    with pytest.raises(ECTowerTypeError, match="not a point: "):
        ec67.is_on_curve((15, 50))  # type: ignore
    with pytest.raises(ECTowerTypeError, match="not an affine point"):
        ec67.is_on_curve(ec67.jac_from_aff(P))  # type: ignore
    with pytest.raises(ECTowerTypeError, match="not a Jacobian point"):
        ec67.is_on_curve_jac(P)  # type: ignore
    with pytest.raises(IncompatibleOperandsError, match="point not on this curve: "):
        ec67.is_on_curve(ec19.INF)


def test_y() -> None:
    for x in F67.elements():
        y2 = (x * x + 4) * x + 3
        if y2.is_square():
            y = ec67.y(x)
            assert y * y == y2
            assert ec67.is_on_curve(Point(ec67, x, y))
            assert ec67.is_on_curve(Point(ec67, x, -y))
        else:
            with pytest.raises(ECTowerValueError, match="invalid x-coordinate: "):
                ec67.y(x)

    # over Fp2 every x in Fp is a valid x-coordinate
    for x in range(67):
        y = ec67_2.y(x)
        assert ec67_2.is_on_curve(Point(ec67_2, F67_2(x), y))


def test_negate() -> None:
    P = ec67.point(15, 50)
    assert ec67.negate(P) == ec67.point(15, -50)
    assert -P == ec67.point(15, 17)
    assert -(-P) == P
    assert ec67.negate(ec67.INF) == ec67.INF
    assert -ec67.INF == ec67.INF

    PJ = ec67.jac_from_aff(P)
    assert ec67.negate_jac(PJ) == ec67.jac_from_aff(-P)
    assert -PJ == ec67.jac_from_aff(-P)
    assert ec67.negate_jac(ec67.INFJ) == ec67.INFJ

    with pytest.raises(ECTowerTypeError, match="not a point: "):
        ec67.negate((15, 50))  # type: ignore
    with pytest.raises(IncompatibleOperandsError, match="point not on this curve: "):
        ec19.negate(P)


def test_jacobian() -> None:
    P = ec67.point(15, 50)
    PJ = ec67.jac_from_aff(P)
    assert PJ.z == 1
    assert ec67.aff_from_jac(PJ) == P
    assert ec67.is_on_curve_jac(PJ)
    assert ec67.is_on_curve_jac(ec67.INFJ)

    for z in range(1, 67):
        Z = F67(z)
        QJ = JacPoint(ec67, P.x * Z * Z, P.y * Z * Z * Z, Z)  # type: ignore
        assert QJ == PJ
        assert hash(QJ) == hash(PJ)
        assert ec67.jac_equality(QJ, PJ)
        assert ec67.is_on_curve_jac(QJ)
        assert ec67.aff_from_jac(QJ) == P
        assert QJ != ec67.INFJ
        assert QJ != ec67.jac_from_aff(-P)

    assert ec67.jac_from_aff(ec67.INF) == ec67.INFJ
    assert ec67.aff_from_jac(ec67.INFJ) == ec67.INF
    # any (X, Y, 0) is the point at infinity
    assert JacPoint(ec67, F67(5), F67(7), F67(0)) == ec67.INFJ
    assert ec67.aff_from_jac(JacPoint(ec67, F67(5), F67(7), F67(0))) == ec67.INF
    assert not ec67.is_on_curve_jac(JacPoint(ec67, F67(15), F67(51), F67(1)))

    # same coordinates, different curves
    assert ec67.jac_from_aff(P) != ec67_2.jac_from_aff(ec67_2.embed(P))
    assert PJ != P


def test_group_laws() -> None:
    for ec in (ec19, ec19_2t, ec67):
        INF = ec.INF
        points = curve_points(ec, ec.field.elements())
        assert points
        for P in points:
            assert ec.add(P, INF) == P
            assert ec.add(INF, P) == P
            assert ec.add(P, ec.negate(P)) == INF
            assert P - P == INF
            assert ec.double(P) == ec.add(P, P)
            assert P + P == ec.add_aff(P, P)
            if P.y.is_zero():  # type: ignore
                assert ec.double(P) == INF
            PJ = ec.jac_from_aff(P)
            assert ec.aff_from_jac(ec.double_jac(PJ)) == ec.double_aff(P)
            for Q in points[::3]:
                R = P + Q
                assert ec.is_on_curve(R)
                assert R == Q + P
                assert R - Q == P
                QJ = ec.jac_from_aff(Q)
                assert ec.aff_from_jac(ec.add_jac(PJ, QJ)) == R
                assert ec.is_on_curve_jac(ec.add_jac(PJ, QJ))
                for S in points[::11]:
                    assert (P + Q) + S == P + (Q + S)

        assert ec.add(INF, INF) == INF
        assert ec.double(INF) == INF
        assert ec.add_jac(ec.INFJ, ec.INFJ) == ec.INFJ
        assert ec.double_jac(ec.INFJ) == ec.INFJ


def test_two_torsion() -> None:
    points = [ec19_2t.point(x, 0) for x in (0, 1, -1)]
    for P in points:
        assert -P == P
        assert P + P == ec19_2t.INF
        assert ec19_2t.double(P) == ec19_2t.INF
        PJ = ec19_2t.jac_from_aff(P)
        assert ec19_2t.double_jac(PJ) == ec19_2t.INFJ
        assert ec19_2t.add_jac(PJ, PJ) == ec19_2t.INFJ
    # the 2-torsion subgroup
    assert points[0] + points[1] == points[2]
    assert points[1] + points[2] == points[0]


def test_extension_field_points() -> None:
    ec = ec67_2
    xs = [F67_2.element_at(i) for i in range(0, F67_2.order, 97)]
    points = curve_points(ec, xs)
    assert len(points) > 10
    for P in points:
        assert P.x.field == F67_2  # type: ignore
        assert ec.is_on_curve(P)
        assert P + ec.negate(P) == ec.INF
        for Q in points[::5]:
            R = P + Q
            assert ec.is_on_curve(R)
            assert R == Q + P
            PJ = ec.jac_from_aff(P)
            QJ = ec.jac_from_aff(Q)
            assert ec.aff_from_jac(ec.add_jac(PJ, QJ)) == R


def test_add_errors() -> None:
    P = ec67.point(15, 50)
    Q = Point(ec67, F67(15), F67(51))
    with pytest.raises(ECTowerValueError, match="point not on curve: "):
        ec67.add(P, Q)
    with pytest.raises(ECTowerValueError, match="point not on curve: "):
        ec67.double(Q)
    with pytest.raises(ECTowerValueError, match="point not on curve: "):
        P + Q  # pylint: disable=pointless-statement
    with pytest.raises(IncompatibleOperandsError, match="point not on this curve: "):
        ec67.add_aff(P, ec19.INF)
    with pytest.raises(IncompatibleOperandsError, match="point not on this curve: "):
        P + ec67_2.embed(P)  # pylint: disable=pointless-statement
    with pytest.raises(TypeError):
        P + 1  # pylint: disable=pointless-statement
    with pytest.raises(TypeError):
        P - (15, 50)  # pylint: disable=pointless-statement

    # same x, not opposite y, not on curve: the slope is not defined
    R = Point(ec67, F67(15), F67(1))
    with pytest.raises(NonInvertibleError, match="No inverse for 0 mod 67"):
        ec67.add_aff(P, R)


def test_extend_and_embed() -> None:
    assert ec67.extend(F67_2) == ec67_2
    P = ec67.point(15, 50)
    P2 = ec67_2.embed(P)
    assert P2.x == F67_2([15, 0])
    assert P2.y == F67_2([50, 0])
    assert ec67_2.is_on_curve(P2)
    assert ec67_2.embed(ec67.INF) == ec67_2.INF
    assert ec67_2.embed(P2) == P2
    assert ec67_2.embed(P + P) == P2 + P2

    ec = CurveGroup(F67, 4, 4)
    with pytest.raises(IncompatibleOperandsError, match="not a subfield curve: "):
        ec67_2.embed(ec.INF)
    with pytest.raises(ECTowerTypeError, match="not a point: "):
        ec67_2.embed((15, 50))  # type: ignore
