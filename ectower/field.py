#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Finite field capability set.

Field is the abstract class of the finite fields (prime fields and
their tower extensions), FieldElement the abstract class of their
elements.

A FieldElement supports +, -, *, /, ** and unary -,
together with inverse(), is_zero(), frobenius(), is_square(), sqrt().
Python ints are coerced into the field of the other operand;
elements of different fields are never mixed:
an IncompatibleOperandsError is raised instead.
Elements are immutable: every operation returns a new element.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from ectower.alias import FieldLike
from ectower.exceptions import ECTowerValueError, IncompatibleOperandsError


class Field(ABC):
    """Abstract finite field of order q = p^n."""

    _non_residue: Optional["FieldElement"] = None

    @property
    @abstractmethod
    def order(self) -> int:
        "The number of elements of the field."

    @property
    @abstractmethod
    def characteristic(self) -> int:
        "The prime p underlying the field."

    @property
    @abstractmethod
    def degree(self) -> int:
        "The absolute degree n over the prime field, i.e. q = p^n."

    @abstractmethod
    def __call__(self, value: FieldLike) -> "FieldElement":
        "Return value as an element of the field."

    @abstractmethod
    def element_at(self, i: int) -> "FieldElement":
        "Return the i-th element of the field, in a fixed enumeration."

    def zero(self) -> "FieldElement":
        return self(0)

    def one(self) -> "FieldElement":
        return self(1)

    def elements(self) -> Iterator["FieldElement"]:
        "Iterate over all the elements of the (small) field."
        for i in range(self.order):
            yield self.element_at(i)

    def non_residue(self) -> "FieldElement":
        """Return the first quadratic non-residue of the field.

        The search follows the element_at enumeration,
        so that the result is deterministic.
        """

        if self._non_residue is None:
            if self.characteristic == 2:
                raise ECTowerValueError("no quadratic non-residue in characteristic 2")
            for i in range(2, self.order):
                candidate = self.element_at(i)
                if not candidate.is_square():
                    self._non_residue = candidate
                    break
        return self._non_residue  # type: ignore


class FieldElement(ABC):
    """Abstract element of a finite field."""

    __slots__ = ()

    field: Field

    @abstractmethod
    def __add__(self, other: Any) -> "FieldElement":
        ...

    @abstractmethod
    def __sub__(self, other: Any) -> "FieldElement":
        ...

    @abstractmethod
    def __mul__(self, other: Any) -> "FieldElement":
        ...

    @abstractmethod
    def __neg__(self) -> "FieldElement":
        ...

    @abstractmethod
    def inverse(self) -> "FieldElement":
        "Return the multiplicative inverse, raising NonInvertibleError for zero."

    @abstractmethod
    def is_zero(self) -> bool:
        ...

    @abstractmethod
    def frobenius(self, k: int = 1) -> "FieldElement":
        "Return the element raised to p^k, with p the field characteristic."

    def _coerce(self, other: Any) -> "FieldElement":
        # only ints are silently converted:
        # elements of other fields are never mixed
        if isinstance(other, FieldElement):
            if other.field is self.field or other.field == self.field:
                return other
            err_msg = f"incompatible fields: {self.field!r} vs {other.field!r}"
            raise IncompatibleOperandsError(err_msg)
        if isinstance(other, int):
            return self.field(other)
        return NotImplemented

    def __radd__(self, other: Any) -> "FieldElement":
        return self + other

    def __rsub__(self, other: Any) -> "FieldElement":
        return -self + other

    def __rmul__(self, other: Any) -> "FieldElement":
        return self * other

    def __truediv__(self, other: Any) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other: Any) -> "FieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inverse()

    def __pow__(self, exponent: int) -> "FieldElement":
        """Return self^exponent by 'square & multiply'.

        It uses the 'right-to-left' binary decomposition of the exponent,
        hence O(log exponent) multiplications.
        """

        if exponent < 0:
            raise ECTowerValueError(f"negative exponent: {exponent}")
        result = self.field.one()
        base = self
        while exponent > 0:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def __bool__(self) -> bool:
        return not self.is_zero()

    def is_square(self) -> bool:
        "Return True if the element is a square (Euler's criterion)."

        if self.is_zero():
            return True
        q = self.field.order
        if q % 2 == 0:
            # every element is a square in characteristic 2
            return True
        return self ** ((q - 1) // 2) == 1

    def sqrt(self) -> "FieldElement":
        """Return a square root of the element.

        The Tonelli-Shanks algorithm is used, generalized to any
        finite field of odd order q.
        Note that -r is also a root.
        """

        if self.is_zero():
            return self
        q = self.field.order
        if q % 2 == 0:
            raise ECTowerValueError("characteristic 2 is not supported")
        if not self.is_square():
            raise ECTowerValueError(f"no root for {self} in {self.field}")

        # Factor q-1 on the form m * 2^s (with m odd)
        m, s = q - 1, 0
        while m & 1 == 0:
            s += 1
            m >>= 1

        c = self.field.non_residue() ** m
        r = self ** ((m + 1) // 2)
        t = self ** m
        while t != 1:
            # Find the lowest i such that t^(2^i) = 1
            i, t2i = 0, t
            while t2i != 1:
                t2i = t2i * t2i
                i += 1
            b = c ** (1 << (s - i - 1))
            r = r * b
            c = b * b
            t = t * c
            s = i
        return r
