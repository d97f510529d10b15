# SPDX-FileCopyrightText: 2025 rational32 contributors
# SPDX-License-Identifier: Apache-2.0

"""
Small command-line host around :class:`Rational`:

    python -m rational32 1/2 + 1/3
    python -m rational32 3/4 '>' 0.5
"""

import argparse
import logging
import operator
from .rational import Rational
from .errors import RationalException
from .version import version

arithmetic_ops = {
    '+': Rational.add,
    '-': Rational.subtract,
    '*': Rational.multiply,
    '/': Rational.divide,
}

comparison_ops = {
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '>': operator.gt,
    '<=': operator.le,
    '>=': operator.ge,
}

def operand(text: str) -> Rational:
    """Reads an operand: a fraction like 3/4, an integer or a decimal float."""
    if '/' in text:
        return Rational(text)
    try:
        return Rational(int(text))
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return Rational(text) # Raises ParseError with position.
    return Rational(value)

def build_arg_parser():
    arg_parser = argparse.ArgumentParser(
        prog="rational32",
        description="Evaluate a single operation on 32-bit fractions.",
    )
    arg_parser.add_argument("left", help="Left operand, e.g. 3/4, 5 or 0.25")
    arg_parser.add_argument("op", choices=list(arithmetic_ops) + list(comparison_ops))
    arg_parser.add_argument("right", help="Right operand")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    arg_parser.add_argument("--version", action="version", version=f"%(prog)s {version}")
    return arg_parser

def evaluate(left: Rational, op: str, right: Rational):
    if op in arithmetic_ops:
        return arithmetic_ops[op](left, right)
    return comparison_ops[op](left, right)

def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    try:
        left = operand(args.left)
        right = operand(args.right)
        logging.debug("Operands: %s %s %s", left, args.op, right)
        result = evaluate(left, args.op, right)
    except RationalException as e:
        logging.error("%s: %s", type(e).__name__, e)
        return 1
    print(result)
    return 0
