#!/usr/bin/env python3

# Copyright (C) 2026 The ectower developers
#
# This file is part of ectower. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ectower including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases.

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Sequence, Union

# integers may also be given as hex-strings or big-endian bytes
Integer = Union[bytes, str, int]

# anything a Field can turn into one of its elements:
# an int, an element of the field (or of a subfield),
# or a sequence of coefficients for a tower field
FieldLike = Union[int, Any, Sequence[Any]]
