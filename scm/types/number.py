"""Numeric tower: fixed-width integers and reduced rationals.

All arithmetic is carried out on (numerator, denominator) pairs using exact
Python integers, then re-normalized and range-checked so that results behave
like 32-bit fixnums: leaving the range raises ScmOverflow instead of wrapping.
"""

from __future__ import annotations

from math import gcd

from scm import Value
from scm.errors import (
    ScmDivisionByZero,
    ScmOverflow,
    ScmTypeError,
    ScmUndefinedOperation,
)
from scm.types.values import Integer, Rational

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def check_range(n: int) -> int:
    if n < INT_MIN or n > INT_MAX:
        raise ScmOverflow(f"Integer overflow: {n} does not fit in {INT_BITS} bits")
    return n


def make_integer(n: int) -> Integer:
    return Integer(check_range(n))


def reduce(numerator: int, denominator: int) -> tuple[int, int]:
    """Divide out gcd(|n|, |d|) and move the sign of d onto n."""
    if denominator == 0:
        raise ScmDivisionByZero("Division by zero")
    g = gcd(numerator, denominator)
    numerator, denominator = numerator // g, denominator // g
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def make_number(numerator: int, denominator: int = 1) -> Integer | Rational:
    """Normalize a fraction, collapsing to an Integer when the denominator is 1."""
    n, d = reduce(numerator, denominator)
    check_range(n)
    check_range(d)
    if d == 1:
        return Integer(n)
    return Rational(n, d)


def is_number(v: Value) -> bool:
    return isinstance(v, (Integer, Rational))


def as_fraction(v: Value, op: str) -> tuple[int, int]:
    if isinstance(v, Integer):
        return v.value, 1
    if isinstance(v, Rational):
        return v.numerator, v.denominator
    raise ScmTypeError(f"{op} expects numbers, got {type(v).__name__}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: Value, b: Value) -> Integer | Rational:
    n1, d1 = as_fraction(a, "+")
    n2, d2 = as_fraction(b, "+")
    return make_number(n1 * d2 + n2 * d1, d1 * d2)


def sub(a: Value, b: Value) -> Integer | Rational:
    n1, d1 = as_fraction(a, "-")
    n2, d2 = as_fraction(b, "-")
    return make_number(n1 * d2 - n2 * d1, d1 * d2)


def mul(a: Value, b: Value) -> Integer | Rational:
    n1, d1 = as_fraction(a, "*")
    n2, d2 = as_fraction(b, "*")
    return make_number(n1 * n2, d1 * d2)


def div(a: Value, b: Value) -> Integer | Rational:
    n1, d1 = as_fraction(a, "/")
    n2, d2 = as_fraction(b, "/")
    if n2 == 0:
        raise ScmDivisionByZero("Division by zero")
    return make_number(n1 * d2, d1 * n2)


def modulo(a: Value, b: Value) -> Integer:
    """(modulo n d): integers only, result takes the sign of the divisor."""
    if not isinstance(a, Integer) or not isinstance(b, Integer):
        raise ScmTypeError("modulo is only defined for integers")
    if b.value == 0:
        raise ScmDivisionByZero("Modulo by zero")
    return make_integer(a.value % b.value)


def expt(a: Value, b: Value) -> Integer:
    """Integer exponentiation by squaring with overflow detection."""
    if not isinstance(a, Integer) or not isinstance(b, Integer):
        raise ScmTypeError("expt is only defined for integers")
    base, exponent = a.value, b.value
    if exponent < 0:
        raise ScmUndefinedOperation("Negative exponent not supported for integers")
    if base == 0 and exponent == 0:
        raise ScmUndefinedOperation("0^0 is undefined")

    result = 1
    while exponent > 0:
        if exponent & 1:
            result = check_range(result * base)
        exponent >>= 1
        if exponent:
            base = check_range(base * base)
    return Integer(result)


# -------------------------------
# Comparison
# -------------------------------
def compare(a: Value, b: Value, op: str = "compare") -> int:
    """Three-way rational comparison by cross-multiplication: -1, 0 or 1."""
    n1, d1 = as_fraction(a, op)
    n2, d2 = as_fraction(b, op)
    left, right = n1 * d2, n2 * d1
    return (left > right) - (left < right)
