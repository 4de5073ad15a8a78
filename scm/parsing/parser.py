"""Parser: generic syntax tree -> expression tree.

Resolution order for a list form headed by a symbol `op`:
1) `op` bound in the environment chain (including parser scratch scopes) ->
   application of that variable, whatever else the name means
2) primitive name -> operator node, operand count validated
3) reserved special-form name -> that form's grammar
4) otherwise -> SList, resolved when evaluated
"""

from __future__ import annotations

from scm import Expr
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
from scm.types.environment import Environment
from scm.types.forms import Apply, Quote, SList, Var, make_operator
from scm.types.number import make_integer, make_number
from scm.types.primitives import PRIMITIVES, SPECIAL_FORMS
from scm.types.values import FALSE, NULL, TRUE, String
from scm.parsing.special_forms import SPECIAL_FORM_PARSERS


def parse(syntax: Syntax, env: Environment) -> Expr:
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
            return Var(name)
        case ListSyntax(items=()):
            return Quote(NULL)
        case ListSyntax(items=(SymbolSyntax(name=op), *tail)):
            return parse_call(op, tail, env)
        case ListSyntax(items=(head, *tail)):
            return Apply(parse(head, env), [parse(t, env) for t in tail])
    raise ScmMalformedForm(f"Cannot parse {syntax!r}")


def parse_call(op: str, tail: list[Syntax], env: Environment) -> Expr:
    """Parse `(op tail...)` applying the shadowing rule first."""
    if env.find(op) is not None:
        return Apply(Var(op), [parse(t, env) for t in tail])
    if op in PRIMITIVES:
        return make_operator(PRIMITIVES[op], [parse(t, env) for t in tail])
    if op in SPECIAL_FORMS:
        return SPECIAL_FORM_PARSERS[SPECIAL_FORMS[op]](list(tail), env, parse)
    return SList(Var(op), [parse(t, env) for t in tail])
