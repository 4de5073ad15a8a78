from scm import Expr
from scm.errors import ScmArityError, ScmMalformedForm
from scm.reader.syntax import ListSyntax, Syntax
from scm.types.environment import Environment
from scm.types.forms import Let, Letrec
from scm.parsing.special_forms.binding import (
    ParseFn,
    parse_body,
    parse_scope,
    symbol_name,
)


def _binding_specs(form: str, block: Syntax) -> list[tuple[str, Syntax]]:
    """Split ((name init) ...) into (name, init-syntax) pairs."""
    if not isinstance(block, ListSyntax):
        raise ScmMalformedForm(f"{form} takes a list of bindings, got {block!r}")
    pairs: list[tuple[str, Syntax]] = []
    for binding in block.items:
        if not isinstance(binding, ListSyntax) or len(binding.items) != 2:
            raise ScmMalformedForm(f"{form} binding must be (name expr), got {binding!r}")
        name_stx, init = binding.items
        pairs.append((symbol_name(name_stx, form), init))
    names = [name for name, _ in pairs]
    if len(set(names)) != len(names):
        raise ScmMalformedForm(f"{form}: duplicate binding in {names}")
    return pairs


def let_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    """(let ((name expr)...) body...) ; initializers cannot see each other."""
    if not tail:
        raise ScmArityError("let requires a binding list")
    pairs = _binding_specs("let", tail[0])
    bindings = [(name, parse_fn(init, env)) for name, init in pairs]
    scope = parse_scope(env, [name for name, _ in pairs])
    return Let(bindings, parse_body(tail[1:], scope, parse_fn))


def letrec_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    """(letrec ((name expr)...) body...) ; initializers see every name."""
    if not tail:
        raise ScmArityError("letrec requires a binding list")
    pairs = _binding_specs("letrec", tail[0])
    scope = parse_scope(env, [name for name, _ in pairs])
    bindings = [(name, parse_fn(init, scope)) for name, init in pairs]
    return Letrec(bindings, parse_body(tail[1:], scope, parse_fn))
