# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

"""
Reading and writing rationals as text.

The canonical rendering is ``numerator/denominator``, with the denominator
shown even when it is 1. On input, the two integers may also be separated by
whitespace only, e.g. ``"3 4"``.
"""

from lark import Lark, Transformer, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput
from pathlib import Path
from public import public
from .checked import INT32_MIN, INT32_MAX
from .errors import ParseError

class ComponentTransformer(Transformer):
    def start(self, items):
        # Tokens are kept so that range errors can point at the offending integer.
        return tuple(items)

lark_fn = Path(__file__).parent / "rational.lark"
parser = Lark.open(
    lark_fn,
    parser="lalr",
    start="start",
    transformer=ComponentTransformer(),
)

def _position(e):
    column = getattr(e, 'column', None)
    if isinstance(column, int) and column > 0:
        return e.line, column
    return None, None

@public
def parse_components(text: str) -> tuple[int, int]:
    """
    Splits text into its (numerator, denominator) pair without reducing.

    Raises:
        ParseError: The text is not two integers within the signed 32-bit range.
    """
    if not isinstance(text, str):
        raise TypeError(f"{text!r} is not a string.")
    stripped = text.strip()
    if not stripped:
        raise ParseError("unexpected end of input")
    try:
        tokens = parser.parse(stripped)
    except UnexpectedCharacters as e:
        line, column = _position(e)
        raise ParseError(f"unexpected character {e.char!r}", stripped, line, column) from None
    except UnexpectedEOF:
        raise ParseError("unexpected end of input", stripped) from None
    except UnexpectedInput as e:
        line, column = _position(e)
        raise ParseError("expected two integers", stripped, line, column) from None
    components = []
    for token in tokens:
        value = int(token)
        if not (INT32_MIN <= value <= INT32_MAX):
            raise ParseError("integer out of 32-bit range", stripped, token.line, token.column)
        components.append(value)
    return tuple(components)

@public
def parse(text: str) -> 'Rational':
    """
    Parses ``"n/d"`` (or ``"n d"``) into a canonical :class:`Rational`.

    Raises:
        ParseError: The text is not two 32-bit integers.
        DomainError: The denominator is zero.
        IntegerOverflow: The denominator is -2**31, whose sign cannot move
            to the numerator.
    """
    from .rational import Rational
    numerator, denominator = parse_components(text)
    return Rational(numerator, denominator)

@public
def render(value: 'Rational') -> str:
    """Returns the canonical ``numerator/denominator`` text of value."""
    return f"{value.numerator}/{value.denominator}"

@public
def read(stream) -> 'Rational':
    """Reads one line from a text stream and parses it."""
    line = stream.readline()
    if not line:
        raise ParseError("unexpected end of input")
    return parse(line)

@public
def write(stream, value: 'Rational'):
    """Writes the rendered value (without newline) and returns the stream."""
    stream.write(render(value))
    return stream
