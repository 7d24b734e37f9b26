#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
raised by ectower from those raised by other codebase.
Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ectower versions are derived.

The arithmetic failures are further split in:

* IncompatibleOperandsError: operands from different fields or curves
* NonInvertibleError: inverse of zero (or of a zero norm)
* InvalidConstructionError: rejected field, tower, or curve parameters
"""


class ECTowerValueError(ValueError):
    pass


class ECTowerTypeError(TypeError):
    pass


class ECTowerRuntimeError(RuntimeError):
    pass


class IncompatibleOperandsError(ECTowerTypeError):
    pass


class NonInvertibleError(ECTowerValueError):
    pass


class InvalidConstructionError(ECTowerValueError):
    pass
