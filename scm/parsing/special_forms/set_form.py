from scm import Expr
from scm.errors import ScmArityError
from scm.reader.syntax import Syntax
from scm.types.environment import Environment
from scm.types.forms import Set
from scm.parsing.special_forms.binding import ParseFn, symbol_name


def set_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    if len(tail) != 2:
        raise ScmArityError("set! requires exactly 2 arguments: (set! var value)")
    var_stx, val_stx = tail
    return Set(symbol_name(var_stx, "set!"), parse_fn(val_stx, env))
