from scm import Expr
from scm.errors import ScmArityError, ScmMalformedForm
from scm.reader.syntax import ListSyntax, SymbolSyntax, Syntax
from scm.types.environment import Environment
from scm.types.forms import Define, DefineFunction
from scm.types.values import VOID
from scm.parsing.special_forms.binding import (
    ParseFn,
    ParseScope,
    param_names,
    parse_body,
    parse_scope,
    symbol_name,
)


def define_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    """
    (define name value)
    (define (name params...) body...)
    """
    if not tail:
        raise ScmArityError("define requires a name")

    target = tail[0]
    if isinstance(target, SymbolSyntax):
        if len(tail) != 2:
            raise ScmArityError("define requires exactly 2 arguments")
        name = symbol_name(target, "define")
        if isinstance(env, ParseScope):
            # internal define: later body forms see the name as local
            env.define(name, VOID)
        return Define(name, parse_fn(tail[1], env))

    if isinstance(target, ListSyntax) and target.items:
        name = symbol_name(target.items[0], "define", "function name")
        params = param_names(target.items[1:], "define")
        if isinstance(env, ParseScope):
            env.define(name, VOID)
        scope = parse_scope(env, [name, *params])
        return DefineFunction(name, params, parse_body(tail[1:], scope, parse_fn))

    raise ScmMalformedForm(f"define takes a name or (name params...), got {target!r}")
