from scm import Expr
from scm.reader.syntax import Syntax
from scm.types.environment import Environment
from scm.types.forms import Begin
from scm.parsing.special_forms.binding import ParseFn, ParseScope, parse_scope


def begin_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    """(begin e...) ; zero forms evaluate to void.

    A define inside the sequence shadows primitives for the forms after it,
    whether the begin sits at top level or inside a body.
    """
    scope = env if isinstance(env, ParseScope) else parse_scope(env, [])
    return Begin([parse_fn(e, scope) for e in tail])
