#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named parameter sets of small curves and fields.

The parameter sets are stored in data/curves.json:
prime modulus (as hex-string), curve coefficients,
and, for curves over an extension field,
the tower reduction rule with an optional Frobenius factor.

* ec19, ec23: y^2 = x^3 + 5, tiny textbook curves
* ec41: y^2 = x^3 + 4x + 40
* ec67: y^2 = x^3 + 4x + 3, also over Fq2 (u^2 = -1) and Fq3 (v^3 = 2)
* ec103: y^2 = x^3 + 72, also over Fq6 (x^6 = -2)
"""

import json
import logging
from dataclasses import InitVar, dataclass, field
from os import path
from typing import Dict, List, Optional

from dataclasses_json import DataClassJsonMixin, config

from ectower.curve_group import CurveGroup
from ectower.exceptions import ECTowerValueError
from ectower.field import Field
from ectower.number_theory import is_prime
from ectower.prime_field import PrimeField
from ectower.tower_field import TowerField
from ectower.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    """Parameters of a curve y^2 = x^3 + a*x + b.

    The curve field is Fp if reduction is None,
    otherwise the tower field Fp[t]/(t^d = reduction).
    """

    p: int = field(metadata=config(encoder=hex, decoder=int_from_integer))
    a: int
    b: int
    reduction: Optional[List[int]] = None
    frobenius_factor: Optional[int] = None
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not is_prime(self.p):
            raise ECTowerValueError(f"p is not prime: {int_repr(self.p)}")
        if self.reduction is None:
            if self.frobenius_factor is not None:
                raise ECTowerValueError("Frobenius factor without reduction rule")
        elif len(self.reduction) < 2:
            raise ECTowerValueError(f"invalid reduction rule: {self.reduction}")

    def curve_field(self) -> Field:
        "Return the curve field."

        fld: Field = PrimeField(self.p)
        if self.reduction is not None:
            fld = TowerField(fld, self.reduction, self.frobenius_factor)
        return fld


def curve_from_params(params: CurveParams) -> CurveGroup:
    "Return the curve defined by the parameter set."
    return CurveGroup(params.curve_field(), params.a, params.b)


datadir = path.join(path.dirname(__file__), "data")
filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    _PARAMS = json.load(file_)

PARAMS: Dict[str, CurveParams] = {}
CURVES: Dict[str, CurveGroup] = {}
FIELDS: Dict[str, Field] = {}
for ec_name, dict_ in _PARAMS.items():
    PARAMS[ec_name] = CurveParams.from_dict(dict_)
    CURVES[ec_name] = curve_from_params(PARAMS[ec_name])
    FIELDS[ec_name] = CURVES[ec_name].field
    logger.debug("loaded curve %s over %s", ec_name, FIELDS[ec_name])
