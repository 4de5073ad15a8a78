"""Operator, control and binding variants of the expression model.

These nodes are produced by the parser and consumed by the evaluator's single
match statement. Bodies of lambda, let, letrec and function-define are always
wrapped in a Begin.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from scm import Expr
from scm.errors import ScmArityError
from scm.types.primitives import Prim


# --- Parameter-count abstractions over primitive operators ---
@dataclass
class Unary:
    op: Prim
    rand: Expr


@dataclass
class Binary:
    op: Prim
    rand1: Expr
    rand2: Expr


@dataclass
class Variadic:
    op: Prim
    rands: list[Expr]


@dataclass
class And:
    rands: list[Expr]


@dataclass
class Or:
    rands: list[Expr]


# --- Control forms ---
@dataclass
class Var:
    name: str


@dataclass
class Quote:
    datum: Expr


@dataclass
class Begin:
    body: list[Expr]


@dataclass
class If:
    cond: Expr
    conseq: Expr
    alter: Expr


@dataclass
class CondClause:
    """One cond clause; test is None for an else clause."""

    test: Expr | None
    body: list[Expr] = field(default_factory=list)


@dataclass
class Cond:
    clauses: list[CondClause]


# --- Binding forms ---
@dataclass
class Let:
    bindings: list[tuple[str, Expr]]
    body: Begin


@dataclass
class Letrec:
    bindings: list[tuple[str, Expr]]
    body: Begin


@dataclass
class Set:
    name: str
    expr: Expr


@dataclass
class Define:
    name: str
    expr: Expr


@dataclass
class DefineFunction:
    name: str
    params: list[str]
    body: Begin


@dataclass
class Lambda:
    params: list[str]
    body: Begin


# --- Applications ---
@dataclass
class Apply:
    """Application whose operator is an arbitrary expression."""

    rator: Expr
    rands: list[Expr]


@dataclass
class SList:
    """Call form whose head name is resolved only at evaluation time."""

    head: Var
    terms: list[Expr]


def make_operator(op: Prim, rands: list[Expr]) -> Expr:
    """Build the operator node for `op`, validating its operand count."""
    if not op.accepts(len(rands)):
        raise ScmArityError(
            f"{op.symbol} requires {op.arity_text()} argument(s), got {len(rands)}"
        )
    if op is Prim.AND:
        return And(list(rands))
    if op is Prim.OR:
        return Or(list(rands))
    if op.min_args == op.max_args == 1:
        return Unary(op, rands[0])
    if op.min_args == op.max_args == 2:
        return Binary(op, rands[0], rands[1])
    return Variadic(op, list(rands))
