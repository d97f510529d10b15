# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

import itertools
from rational32 import Rational as R, parse
from rational32.checked import gcd

def test_canonical_form(samples):
    for x in samples:
        assert x.denominator > 0
        if x.numerator == 0:
            assert x.denominator == 1
        else:
            assert gcd(abs(x.numerator), x.denominator) == 1

def test_canonical_after_arithmetic(samples):
    small = [x for x in samples if abs(x.numerator) < 1000 and x.denominator < 1000]
    for x, y in itertools.product(small, repeat=2):
        results = [x + y, x - y, x * y]
        if y:
            results.append(x / y)
        for z in results:
            assert z.denominator > 0
            assert gcd(abs(z.numerator), z.denominator) == 1 or z == R(0)

def test_identities(samples):
    for x in samples:
        assert x + R(0, 1) == x
        assert x - R(0, 1) == x
        assert x * R(1, 1) == x
        assert x - x == R(0)

def test_division_inverse(samples):
    for x in samples:
        if x:
            assert (R(1, 1) / x) * x == R(1, 1)

def test_ordering_trichotomy(samples):
    for x, y in itertools.product(samples, repeat=2):
        assert [x < y, x == y, x > y].count(True) == 1
        assert (x <= y) == (x < y or x == y)
        assert (x >= y) == (x > y or x == y)
        assert x.compare(y) == -y.compare(x)

def test_text_roundtrip(samples):
    for x in samples:
        assert parse(str(x)) == x
        assert R(str(x)) == x
