#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field Fp and its elements.

An element is the canonical (non-negative) residue in [0, p):
any integer, including a negative one, is reduced at construction.
"""

from typing import Any, List

from ectower.alias import FieldLike, Integer
from ectower.exceptions import (
    ECTowerValueError,
    IncompatibleOperandsError,
    InvalidConstructionError,
)
from ectower.field import Field, FieldElement
from ectower.number_theory import (
    is_prime,
    legendre_symbol,
    mod_inv,
    mod_sqrt,
    roots_of_unity,
)
from ectower.utils import int_from_integer, int_repr


class PrimeField(Field):
    """The finite field Fp of the integers modulo the prime p."""

    def __init__(self, p: Integer) -> None:

        p = int_from_integer(p)
        if p == 0:
            raise InvalidConstructionError("zero modulus")
        if not is_prime(p):
            raise InvalidConstructionError(f"p is not prime: {int_repr(p)}")
        self.p = p

    @property
    def order(self) -> int:
        return self.p

    @property
    def characteristic(self) -> int:
        return self.p

    @property
    def degree(self) -> int:
        return 1

    def __call__(self, value: FieldLike) -> "PrimeFieldElement":
        if isinstance(value, PrimeFieldElement):
            if value.field is self or value.field == self:
                return value
        if isinstance(value, FieldElement):
            err_msg = f"incompatible fields: {self!r} vs {value.field!r}"
            raise IncompatibleOperandsError(err_msg)
        return PrimeFieldElement(int_from_integer(value), self)

    def element_at(self, i: int) -> "PrimeFieldElement":
        if not 0 <= i < self.p:
            raise ECTowerValueError(f"index not in 0..p-1: {int_repr(i)}")
        return PrimeFieldElement(i, self)

    def roots_of_unity(self, n: int) -> List["PrimeFieldElement"]:
        "Return all the n-th roots of unity of the field."
        return [PrimeFieldElement(r, self) for r in roots_of_unity(n, self.p)]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash(("PrimeField", self.p))

    def __str__(self) -> str:
        return f"F_{int_repr(self.p)}"

    def __repr__(self) -> str:
        return f"PrimeField({int_repr(self.p)})"


class PrimeFieldElement(FieldElement):
    """Element of the prime field Fp.

    Elements compare (and hash) equal to the ints they represent.
    Comparing elements of different fields raises
    IncompatibleOperandsError, so a set or dict key can not mix
    equal values of different fields.
    """

    __slots__ = ("field", "value")

    def __init__(self, value: int, field: PrimeField) -> None:
        self.field = field
        # Python % always returns a non-negative residue for p > 0
        self.value = value % field.p

    def __add__(self, other: Any) -> "PrimeFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return PrimeFieldElement(self.value + other.value, self.field)

    def __sub__(self, other: Any) -> "PrimeFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return PrimeFieldElement(self.value - other.value, self.field)

    def __mul__(self, other: Any) -> "PrimeFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return PrimeFieldElement(self.value * other.value, self.field)

    def __neg__(self) -> "PrimeFieldElement":
        return PrimeFieldElement(-self.value, self.field)

    def __pow__(self, exponent: int) -> "PrimeFieldElement":
        if exponent < 0:
            raise ECTowerValueError(f"negative exponent: {exponent}")
        return PrimeFieldElement(pow(self.value, exponent, self.field.p), self.field)

    def inverse(self) -> "PrimeFieldElement":
        # NonInvertibleError from mod_inv for the zero element
        return PrimeFieldElement(mod_inv(self.value, self.field.p), self.field)

    def is_zero(self) -> bool:
        return self.value == 0

    def frobenius(self, k: int = 1) -> "PrimeFieldElement":
        # x^p = x in Fp
        return self

    def is_square(self) -> bool:
        if self.field.p == 2:
            return True
        return legendre_symbol(self.value, self.field.p) != -1

    def sqrt(self) -> "PrimeFieldElement":
        if self.field.p == 2:
            return self
        return PrimeFieldElement(mod_sqrt(self.value, self.field.p), self.field)

    def __eq__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        # equal to hash(int(self)), as elements compare equal to ints;
        # equal values of different fields collide, and comparing them
        # raises IncompatibleOperandsError, also inside sets and dicts
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}"

    def __repr__(self) -> str:
        return f"{self.field!r}({int_repr(self.value)})"
