"""Quoting path: syntax -> literal data.

Used only under `quote`. Symbols become Symbol data rather than variable
references and lists become chains of Pair cells built by a right fold. A list
whose second-to-last element is the symbol `.` is dotted: its final element is
the tail instead of the empty list.
"""

from __future__ import annotations

from scm import Value
from scm.errors import ScmMalformedForm
from scm.reader.syntax import (
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    SymbolSyntax,
    Syntax,
)
from scm.types.number import make_integer, make_number
from scm.types.values import FALSE, NULL, TRUE, Pair, String, Symbol

DOT = SymbolSyntax(".")


def q_parse(syntax: Syntax) -> Value:
    match syntax:
        case NumberSyntax(value=n):
            return make_integer(n)
        case RationalSyntax(numerator=n, denominator=d):
            return make_number(n, d)
        case StringSyntax(value=s):
            return String(s)
        case BooleanSyntax(value=b):
            return TRUE if b else FALSE
        case SymbolSyntax(name=name):
            return Symbol(name)
        case ListSyntax(items=items):
            return _q_parse_list(items)
    raise ScmMalformedForm(f"Cannot quote {syntax!r}")


def _q_parse_list(items: tuple) -> Value:
    tail: Value = NULL
    if len(items) >= 3 and items[-2] == DOT:
        tail = q_parse(items[-1])
        items = items[:-2]
    for item in reversed(items):
        tail = Pair(q_parse(item), tail)
    return tail
