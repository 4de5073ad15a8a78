"""Canonical textual rendering of scm values.

Grammar: integers in decimal, rationals as n/d, #t/#f, () for the empty list,
(a b . c) for pairs with list tails flattened, #<procedure> for closures and
built-in operator tags, #<void> for void. `display` differs from `show` only in
writing strings without quotes. A pair reached again while it is still being
written (a cycle built with set-car! or set-cdr!) prints as `...`.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from scm import Value
from scm.types.values import (
    Boolean,
    Exit,
    Integer,
    Null,
    Pair,
    Primitive,
    Procedure,
    Rational,
    SpecialForm,
    String,
    Symbol,
    Void,
)


def show(value: Value) -> str:
    with StringIO() as buffer:
        write_value(value, buffer)
        return buffer.getvalue()


def write_value(value: Value, out: TextIO, active: set[int] | None = None) -> None:
    match value:
        case Integer(value=n):
            out.write(str(n))
        case Rational(numerator=n, denominator=d):
            out.write(f"{n}/{d}")
        case Boolean(value=b):
            out.write("#t" if b else "#f")
        case String(value=s):
            out.write(f'"{s}"')
        case Symbol(name=name):
            out.write(name)
        case Null():
            out.write("()")
        case Void():
            out.write("#<void>")
        case Exit():
            pass
        case Procedure() | Primitive() | SpecialForm():
            out.write("#<procedure>")
        case Pair():
            if active is None:
                active = set()
            if id(value) in active:
                # pair reached again through one of its own cells
                out.write("...")
            else:
                _write_pair(value, out, active)
        case _:
            out.write(f"#<{type(value).__name__}>")


def _write_pair(pair: Pair, out: TextIO, active: set[int]) -> None:
    """Write a pair chain; `active` holds the pairs currently being written."""
    entered = [id(pair)]
    active.add(id(pair))
    out.write("(")
    write_value(pair.car, out, active)
    tail = pair.cdr
    while isinstance(tail, Pair):
        if id(tail) in active:
            out.write(" ...")
            break
        entered.append(id(tail))
        active.add(id(tail))
        out.write(" ")
        write_value(tail.car, out, active)
        tail = tail.cdr
    else:
        if not isinstance(tail, Null):
            out.write(" . ")
            write_value(tail, out, active)
    out.write(")")
    active.difference_update(entered)


def display(value: Value, out: TextIO | None = None) -> None:
    """Write `value` to `out` (stdout by default); strings are unquoted."""
    out = out if out is not None else sys.stdout
    if isinstance(value, String):
        out.write(value.value)
    else:
        write_value(value, out)
