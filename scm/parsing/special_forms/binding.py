"""Helpers shared by the binding special forms (lambda, define, let, letrec)."""

from __future__ import annotations

from typing import Callable, Iterable

from scm import Expr
from scm.errors import ScmMalformedForm
from scm.reader.syntax import ListSyntax, SymbolSyntax, Syntax
from scm.types.environment import Environment, check_name
from scm.types.forms import Begin
from scm.types.values import VOID

ParseFn = Callable[[Syntax, Environment], Expr]


class ParseScope(Environment):
    """Scratch frame the parser uses to track names bound inside a body.

    Only membership matters: a name found here shadows any primitive or
    special form of the same name when it heads a list form.
    """

    __slots__ = ()


def parse_scope(env: Environment, names: Iterable[str]) -> ParseScope:
    scope = ParseScope(outer=env)
    for name in names:
        scope.define(name, VOID)
    return scope


def symbol_name(syntax: Syntax, form: str, what: str = "name") -> str:
    if not isinstance(syntax, SymbolSyntax):
        raise ScmMalformedForm(f"{form}: {what} must be a symbol, got {syntax!r}")
    return check_name(syntax.name)


def param_names(syntax: Syntax | tuple, form: str) -> list[str]:
    """Validate a parameter list: all symbols, valid names, no duplicates."""
    items = syntax.items if isinstance(syntax, ListSyntax) else syntax
    if not isinstance(items, tuple):
        raise ScmMalformedForm(f"{form} takes a parameter list, got {syntax!r}")
    params = [symbol_name(s, form, "parameter") for s in items]
    if len(set(params)) != len(params):
        raise ScmMalformedForm(f"{form}: duplicate parameter in {params}")
    return params


def parse_body(forms: Iterable[Syntax], env: Environment, parse_fn: ParseFn) -> Begin:
    """Parse body forms in order as an implicit begin."""
    return Begin([parse_fn(f, env) for f in forms])
