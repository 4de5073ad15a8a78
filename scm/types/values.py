"""Self-evaluating variants of the expression model.

Every class here evaluates to itself. Numbers, strings, booleans, void and the
empty list are immutable; Pair is the one mutable cell (set-car!/set-cdr!) and
compares by identity so that aliasing stays observable.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from math import gcd
from typing import TYPE_CHECKING

from scm.errors import ScmDivisionByZero

if TYPE_CHECKING:
    from scm.types.environment import Environment
    from scm.types.primitives import Form, Prim


@dataclass(frozen=True)
class Integer:
    value: int


@dataclass(frozen=True)
class Rational:
    """A reduced fraction with a positive denominator.

    Construction always reduces; use scm.types.number.make_number when the
    result may collapse to an Integer.
    """

    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator == 0:
            raise ScmDivisionByZero(f"Zero denominator in {self.numerator}/0")
        g = gcd(self.numerator, self.denominator)
        n, d = self.numerator // g, self.denominator // g
        if d < 0:
            n, d = -n, -d
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Symbol:
    """Quoted symbol data (never a variable reference)."""

    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash
        object.__setattr__(self, "name", sys.intern(self.name))


@dataclass(frozen=True)
class Void:
    pass


@dataclass(frozen=True)
class Null:
    pass


@dataclass(frozen=True)
class Exit:
    """Terminate literal; the REPL stops when a form evaluates to it."""


@dataclass(eq=False)
class Pair:
    car: object
    cdr: object


@dataclass(eq=False)
class Procedure:
    """A closure: parameter names, a body expression and the defining frame."""

    params: list[str]
    body: object
    env: Environment = field(repr=False)


@dataclass(frozen=True)
class Primitive:
    """First-class tag for a built-in operator looked up by name."""

    op: Prim


@dataclass(frozen=True)
class SpecialForm:
    """First-class tag for a reserved special-form name."""

    form: Form


TRUE = Boolean(True)
FALSE = Boolean(False)
VOID = Void()
NULL = Null()

SELF_EVALUATING = (
    Integer,
    Rational,
    String,
    Boolean,
    Symbol,
    Void,
    Null,
    Exit,
    Pair,
    Procedure,
    Primitive,
    SpecialForm,
)


def is_true(value: object) -> bool:
    """Scheme truthiness: everything except #f is true."""
    return not (isinstance(value, Boolean) and value.value is False)
