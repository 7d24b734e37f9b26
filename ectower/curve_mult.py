#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve scalar multiplication functions.

The scalar m is an unsigned integer:
negative scalars are up to the caller, e.g. mult(m, ec.negate(Q)).
The input points are assumed to be on curve.
"""

from ectower.alias import Integer
from ectower.curve_group import JacPoint, Point
from ectower.exceptions import ECTowerValueError
from ectower.utils import int_from_integer


def mult_aff(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.
    """

    if m < 0:
        raise ECTowerValueError(f"negative m: {hex(m)}")

    ec = Q.ec
    if m == 0:
        return ec.INF

    R = ec.INF
    # most significant bit first
    for bit in bin(m)[2:]:
        R = ec.double_aff(R)
        if bit == "1":
            R = ec.add_aff(R, Q)
    return R


def mult_recursive_aff(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    a recursive version of 'double & add',
    affine coordinates.
    """

    if m < 0:
        raise ECTowerValueError(f"negative m: {hex(m)}")

    if m == 0:
        return Q.ec.INF

    if m % 2 == 1:
        return Q.ec.add_aff(Q, mult_recursive_aff((m - 1), Q))

    return mult_recursive_aff((m // 2), Q.ec.double_aff(Q))


def mult_jac(m: int, Q: JacPoint) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.
    """

    if m < 0:
        raise ECTowerValueError(f"negative m: {hex(m)}")

    ec = Q.ec
    R = ec.INFJ
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = ec.add_jac(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double_jac(Q)
        m >>= 1
    return R


def mult_mont_ladder(m: int, Q: JacPoint) -> JacPoint:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    This implementation uses
    'Montgomery ladder' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    Jacobian coordinates.

    The invariant R[1] = R[0] + Q holds at every step.
    """

    if m < 0:
        raise ECTowerValueError(f"negative m: {hex(m)}")

    ec = Q.ec
    R = [ec.INFJ, Q]
    for i in [int(i) for i in bin(m)[2:]]:
        R[not i] = ec.add_jac(R[i], R[not i])
        R[i] = ec.double_jac(R[i])
    return R[0]


def double_mult_jac(u: int, HJ: JacPoint, v: int, QJ: JacPoint) -> JacPoint:
    """Double scalar multiplication (u*H + v*Q).

    This implementation uses the Shamir-Strauss algorithm,
    'left-to-right' binary decomposition of the u and v coefficients,
    Jacobian coordinates.

    Strauss algorithm consists of a single 'double & add' loop
    for the parallel calculation of u*H and v*Q, efficiently
    using a single 'doubling' for both scalar multiplications.

    The Shamir trick adds the precomputation of H+Q,
    which is to be added in the loop when the binary digits
    of u and v are both equal to 1 (on average 1/4 of the cases).
    """

    if u < 0:
        raise ECTowerValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise ECTowerValueError(f"negative second coefficient: {hex(v)}")

    ec = HJ.ec
    # at each step one of the following points will be added
    T = [ec.INFJ, HJ, QJ, ec.add_jac(HJ, QJ)]
    # which one depends on binary digit for that step
    ui = bin(u)[2:]
    vi = bin(v)[2:].zfill(len(ui))
    ui = ui.zfill(len(vi))
    digits = [int(j) + 2 * int(k) for j, k in zip(ui, vi)]
    R = T[digits[0]]
    for i in digits[1:]:
        # the doubling part of 'double & add'
        R = ec.double_jac(R)
        # and the 'add' part
        R = ec.add_jac(R, T[i])
    return R


def mult(m: Integer, Q: Point) -> Point:
    """Elliptic curve scalar multiplication.

    The point is checked to be on curve,
    the computation is performed in Jacobian coordinates.
    """

    Q.ec.require_on_curve(Q)
    m = int_from_integer(m)
    RJ = mult_jac(m, Q.ec.jac_from_aff(Q))
    return Q.ec.aff_from_jac(RJ)


def double_mult(u: Integer, H: Point, v: Integer, Q: Point) -> Point:
    "Double scalar multiplication (u*H + v*Q)."

    ec = H.ec
    ec.require_on_curve(H)
    ec.require_on_curve(Q)
    u = int_from_integer(u)
    v = int_from_integer(v)
    RJ = double_mult_jac(u, ec.jac_from_aff(H), v, ec.jac_from_aff(Q))
    return ec.aff_from_jac(RJ)


# the canonical 'double & add' scalar multiplication
scalar_mul = mult_aff
