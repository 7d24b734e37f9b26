#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Extension (tower) fields.

A TowerField of degree d over a base field K is K[t]/(f(t)),
with the monic reduction polynomial f given by its reduction rule

    t^d = r_0 + r_1*t + ... + r_(d-1)*t^(d-1)

e.g. [-1, 0] for u^2 = -1, [2, 0, 0] for v^3 = 2,
[-2, 0, 0, 0, 0, 0] for x^6 = -2.
The base field can be a PrimeField or another TowerField,
so that towers of towers (e.g. Fp6 over Fp2) are supported too.

The reduction polynomial must be irreducible over the base field:
this is the caller's responsibility, only the obviously reducible
polynomials (zero constant term) being rejected.

A TowerFieldElement is the tuple of its d coefficients in the
power basis 1, t, ..., t^(d-1).
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ectower.alias import FieldLike
from ectower.exceptions import (
    ECTowerValueError,
    InvalidConstructionError,
    NonInvertibleError,
)
from ectower.field import Field, FieldElement
from ectower.utils import int_repr

logger = logging.getLogger(__name__)

Coefficients = Tuple[FieldElement, ...]


class TowerField(Field):
    """Extension field K[t]/(f(t)) of degree d over the base field K.

    The Frobenius map x -> x^p (p being the characteristic)
    sends t^i to (t^i)^p: these images are precomputed.
    If the reduction rule is binomial, t^d = beta,
    and d divides p-1, then t^p = gamma*t with

        gamma = beta^((p-1)/d)

    so that the Frobenius map multiplies the i-th coefficient
    by gamma^i only. gamma is the 'frobenius_factor':
    it can be supplied as a parameter (it is then validated)
    or it is derived from the reduction rule.
    """

    def __init__(
        self,
        base: Field,
        reduction: Sequence[FieldLike],
        frobenius_factor: Optional[FieldLike] = None,
    ) -> None:

        if not isinstance(base, Field):
            raise InvalidConstructionError(f"not a field: {base!r}")
        if isinstance(reduction, (str, bytes)) or not isinstance(reduction, Sequence):
            raise InvalidConstructionError(f"invalid reduction rule: {reduction!r}")
        d = len(reduction)
        if d < 2:
            raise InvalidConstructionError(f"extension degree less than 2: {d}")

        self.base = base
        self.extension_degree = d
        self.reduction: Coefficients = tuple(base(r) for r in reduction)
        if self.reduction[0].is_zero():
            raise InvalidConstructionError("reducible polynomial: zero constant term")

        self._table = self._reduction_table()
        self._frobenius_images: Optional[Tuple["TowerFieldElement", ...]] = None
        self.frobenius_factor = self._frobenius_factor(frobenius_factor)
        if self.frobenius_factor is not None:
            # (t^i)^p = gamma^i * t^i
            gamma = self.frobenius_factor
            self._factor_powers: List[FieldElement] = [base.one()]
            for _ in range(d - 1):
                self._factor_powers.append(self._factor_powers[-1] * gamma)

    @classmethod
    def binomial(
        cls,
        base: Field,
        degree: int,
        non_residue: FieldLike,
        frobenius_factor: Optional[FieldLike] = None,
    ) -> "TowerField":
        "Return the tower field defined by t^degree = non_residue."

        if degree < 2:
            raise InvalidConstructionError(f"extension degree less than 2: {degree}")
        reduction = [non_residue] + [0] * (degree - 1)
        return cls(base, reduction, frobenius_factor)

    def _reduction_table(self) -> List[Coefficients]:
        """Return the substitution rows for t^d, ..., t^(2d-2).

        The full product of two elements has degree up to 2d-2:
        the row k-d holds the coefficients of t^k reduced
        to degree less than d.
        Each row is derived from the previous one by a multiplication
        by t, folding the resulting t^d term through the reduction rule.
        """

        zero = self.base.zero()
        row = list(self.reduction)
        table = [tuple(row)]
        for _ in range(self.extension_degree - 2):
            top = row[-1]
            row = [zero] + row[:-1]
            row = [c + top * r for c, r in zip(row, self.reduction)]
            table.append(tuple(row))
        return table

    def _is_binomial(self) -> bool:
        return all(r.is_zero() for r in self.reduction[1:])

    def _frobenius_factor(
        self, frobenius_factor: Optional[FieldLike]
    ) -> Optional[FieldElement]:

        p = self.characteristic
        d = self.extension_degree
        if frobenius_factor is None:
            if not self._is_binomial() or (p - 1) % d != 0:
                return None
            gamma = self.reduction[0] ** ((p - 1) // d)
            logger.debug("derived Frobenius factor %s for %s", gamma, self)
            return gamma

        gamma = self.base(frobenius_factor)
        t = self.gen()
        t_p = t ** p
        if t_p != t.scale(gamma):
            err_msg = f"invalid Frobenius factor: {gamma}, while t^p = {t_p}"
            raise InvalidConstructionError(err_msg)
        return gamma

    @property
    def frobenius_images(self) -> Tuple["TowerFieldElement", ...]:
        "The images (t^i)^p of the power basis under the Frobenius map."

        if self._frobenius_images is None:
            p = self.characteristic
            zero = self.base.zero()
            images = []
            for i in range(self.extension_degree):
                coeffs = [zero] * self.extension_degree
                if self.frobenius_factor is None:
                    coeffs[i] = self.base.one()
                    images.append(TowerFieldElement(coeffs, self) ** p)
                else:
                    coeffs[i] = self._factor_powers[i]
                    images.append(TowerFieldElement(coeffs, self))
            self._frobenius_images = tuple(images)
        return self._frobenius_images

    @property
    def order(self) -> int:
        return self.base.order ** self.extension_degree

    @property
    def characteristic(self) -> int:
        return self.base.characteristic

    @property
    def degree(self) -> int:
        return self.base.degree * self.extension_degree

    def __call__(self, value: FieldLike) -> "TowerFieldElement":
        if isinstance(value, TowerFieldElement):
            if value.field is self or value.field == self:
                return value
        if isinstance(value, (list, tuple)):
            return TowerFieldElement(value, self)
        # constants: ints and elements of the base field (or of its subfields)
        zero = self.base.zero()
        return TowerFieldElement(
            [self.base(value)] + [zero] * (self.extension_degree - 1), self
        )

    def gen(self) -> "TowerFieldElement":
        "Return t, the root of the reduction polynomial."
        zero = self.base.zero()
        coeffs = [zero] * self.extension_degree
        coeffs[1] = self.base.one()
        return TowerFieldElement(coeffs, self)

    def element_at(self, i: int) -> "TowerFieldElement":
        if not 0 <= i < self.order:
            raise ECTowerValueError(f"index not in 0..order-1: {int_repr(i)}")
        coeffs = []
        for _ in range(self.extension_degree):
            i, digit = divmod(i, self.base.order)
            coeffs.append(self.base.element_at(digit))
        return TowerFieldElement(coeffs, self)

    def mul_coefficients(self, a: Coefficients, b: Coefficients) -> Coefficients:
        """Return the reduced product of two coefficient vectors.

        The schoolbook product, of degree up to 2d-2,
        is folded back into degrees 0..d-1
        using the precomputed substitution rows.
        """

        d = self.extension_degree
        zero = self.base.zero()
        full = [zero] * (2 * d - 1)
        for i, a_i in enumerate(a):
            if a_i.is_zero():
                continue
            for j, b_j in enumerate(b):
                full[i + j] = full[i + j] + a_i * b_j

        result = full[:d]
        for row, c in zip(self._table, full[d:]):
            if c.is_zero():
                continue
            result = [r + c * s for r, s in zip(result, row)]
        return tuple(result)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TowerField):
            return NotImplemented
        # the base fields are compared first, so that reduction rules
        # over different fields are never compared
        return (
            self.extension_degree == other.extension_degree
            and self.base == other.base
            and self.reduction == other.reduction
        )

    def __hash__(self) -> int:
        return hash(("TowerField", self.base, self.reduction))

    def __str__(self) -> str:
        terms = [f"{r}*t^{i}" for i, r in enumerate(self.reduction) if not r.is_zero()]
        return f"{self.base}[t]/(t^{self.extension_degree} = {' + '.join(terms)})"

    def __repr__(self) -> str:
        reduction = ", ".join(str(r) for r in self.reduction)
        return f"TowerField({self.base!r}, [{reduction}])"


class TowerFieldElement(FieldElement):
    """Element of a TowerField: exactly d base field coefficients."""

    __slots__ = ("field", "coeffs")

    def __init__(self, coeffs: Sequence[FieldLike], field: TowerField) -> None:
        if len(coeffs) != field.extension_degree:
            err_msg = f"invalid number of coefficients: {len(coeffs)}"
            err_msg += f" instead of {field.extension_degree}"
            raise InvalidConstructionError(err_msg)
        self.field = field
        self.coeffs: Coefficients = tuple(field.base(c) for c in coeffs)

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, TowerFieldElement) and other.field is self.field:
            return other
        return super()._coerce(other)

    def __add__(self, other: Any) -> "TowerFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        coeffs = [a + b for a, b in zip(self.coeffs, other.coeffs)]
        return TowerFieldElement(coeffs, self.field)

    def __sub__(self, other: Any) -> "TowerFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        coeffs = [a - b for a, b in zip(self.coeffs, other.coeffs)]
        return TowerFieldElement(coeffs, self.field)

    def __mul__(self, other: Any) -> "TowerFieldElement":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        coeffs = self.field.mul_coefficients(self.coeffs, other.coeffs)
        return TowerFieldElement(coeffs, self.field)

    def __neg__(self) -> "TowerFieldElement":
        return TowerFieldElement([-c for c in self.coeffs], self.field)

    def scale(self, c: FieldLike) -> "TowerFieldElement":
        "Return the element multiplied by the base field scalar c."
        c = self.field.base(c)
        return TowerFieldElement([a * c for a in self.coeffs], self.field)

    def inverse(self) -> "TowerFieldElement":
        """Return the multiplicative inverse.

        For degree 2, with t^2 = r_1*t + r_0, the conjugate of a + b*t
        is (a + b*r_1) - b*t and their product is the norm
        a^2 + a*b*r_1 - b^2*r_0, a base field element:
        only a base field inversion is needed.
        For higher degree x^(q^d - 2) is returned,
        q being the order of the base field.
        """

        if self.is_zero():
            raise NonInvertibleError(f"No inverse for zero in {self.field}")

        if self.field.extension_degree == 2:
            a, b = self.coeffs
            r_0, r_1 = self.field.reduction
            norm = a * a + a * b * r_1 - b * b * r_0
            # NonInvertibleError if the polynomial is reducible
            norm_inv = norm.inverse()
            conjugate = [(a + b * r_1) * norm_inv, -b * norm_inv]
            return TowerFieldElement(conjugate, self.field)

        inv = self ** (self.field.order - 2)
        if inv.is_zero() or self * inv != 1:
            # x^(q^d - 1) = 1 fails only if the polynomial is reducible
            raise NonInvertibleError(f"No inverse for {self} in {self.field}")
        return inv

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self.coeffs)

    def frobenius(self, k: int = 1) -> "TowerFieldElement":
        """Return x^(p^k), p being the characteristic.

        Each coefficient c_i is mapped by the base field Frobenius,
        then multiplied by the image (t^i)^p of the power basis:
        if the tower has a frobenius_factor gamma,
        this is just a multiplication by gamma^i.
        """

        field = self.field
        result = self
        # the Frobenius map has order equal to the absolute degree
        for _ in range(k % field.degree):
            coeffs = [c.frobenius() for c in result.coeffs]
            if field.frobenius_factor is not None:
                coeffs = [c * g for c, g in zip(coeffs, field._factor_powers)]
                result = TowerFieldElement(coeffs, field)
            else:
                acc = field.zero()
                for c, image in zip(coeffs, field.frobenius_images):
                    acc = acc + image.scale(c)
                result = acc
        return result

    def __eq__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self) -> int:
        # constants hash as their base field value, consistently with
        # the equality to ints
        if all(c.is_zero() for c in self.coeffs[1:]):
            return hash(self.coeffs[0])
        return hash(self.coeffs)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.coeffs) + "]"

    def __repr__(self) -> str:
        return f"{self.field!r}({self})"