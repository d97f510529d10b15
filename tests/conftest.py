# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

import pytest
from rational32 import Rational as R

@pytest.fixture
def samples():
    """Canonical values spread over the 32-bit range, including the extremes
    that still have a representable reciprocal."""
    return [
        R(0),
        R(1),
        R(-1),
        R(1, 2),
        R(-1, 2),
        R(2, 3),
        R(-7, 3),
        R(5, 6),
        R(355, 113),
        R(2147483647, 1),
        R(-2147483647, 1),
        R(1, 2147483647),
    ]
