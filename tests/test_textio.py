# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

import io
import pytest
from rational32 import Rational as R, DomainError, IntegerOverflow, ParseError
from rational32.textio import parse, parse_components, render, read, write

def test_parse():
    assert parse("3/4") == R(3, 4)
    assert parse("6/8") == R(3, 4)
    assert parse("3 4") == R(3, 4)
    assert parse("3\t4") == R(3, 4)
    assert parse("1 / 2") == R(1, 2)
    assert parse("  -6 /8\n") == R(-3, 4)
    assert parse("+2/-4") == R(-1, 2)
    assert parse("0/7") == R(0)
    assert parse("-2147483648/1") == R(-2147483648)

def test_parse_components_unreduced():
    assert parse_components("4/6") == (4, 6)
    assert parse_components("4 -6") == (4, -6)

@pytest.mark.parametrize("text", [
    "",
    "   ",
    "1",
    "1/",
    "/2",
    "a/b",
    "1/x",
    "1/2/3",
    "1-2",
    "1.5/2",
    "1\n2",
])
def test_parse_malformed(text):
    with pytest.raises(ParseError):
        parse(text)

def test_parse_error_position():
    with pytest.raises(ParseError) as excinfo:
        parse("1/x")
    e = excinfo.value
    assert e.text == "1/x"
    assert e.column == 3
    assert str(e).startswith("unexpected character 'x'")
    assert str(e).endswith("|   ^")

def test_parse_zero_denominator():
    with pytest.raises(DomainError, match="denominator is zero"):
        parse("1/0")

def test_parse_out_of_range():
    with pytest.raises(ParseError, match="integer out of 32-bit range"):
        parse("99999999999/1")
    with pytest.raises(ParseError) as excinfo:
        parse("1 -2147483649")
    assert excinfo.value.column == 3
    with pytest.raises(ValueError):
        read(io.StringIO("99999999999 1\n"))
    assert parse("2147483647 -2147483647") == R(-1)

def test_parse_unmovable_sign():
    # The denominator fits, but its negation does not.
    with pytest.raises(IntegerOverflow):
        parse("1/-2147483648")

def test_parse_rejects_non_str():
    with pytest.raises(TypeError):
        parse(b"1/2")

def test_render():
    assert render(R(1, 2)) == "1/2"
    assert render(R(-4, 2)) == "-2/1"
    assert render(R(0)) == "0/1"

def test_read():
    stream = io.StringIO("1/2\n6 8\n")
    assert read(stream) == R(1, 2)
    assert read(stream) == R(3, 4)
    with pytest.raises(ParseError, match="unexpected end of input"):
        read(stream)

def test_read_bad_line():
    with pytest.raises(ParseError):
        read(io.StringIO("one half\n"))
    with pytest.raises(DomainError):
        read(io.StringIO("1 0\n"))

def test_write():
    stream = io.StringIO()
    assert write(stream, R(2, 4)) is stream
    write(stream, R(3)).write("\n")
    assert stream.getvalue() == "1/23/1\n"
