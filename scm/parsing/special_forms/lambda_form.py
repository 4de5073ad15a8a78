from scm import Expr
from scm.errors import ScmArityError
from scm.reader.syntax import Syntax
from scm.types.environment import Environment
from scm.types.forms import Lambda
from scm.parsing.special_forms.binding import (
    ParseFn,
    param_names,
    parse_body,
    parse_scope,
)


def lambda_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    # (lambda (params) body...) allows zero or more body forms; the body is
    # an implicit begin, so an empty body yields void when called.
    if not tail:
        raise ScmArityError("lambda requires at least a parameter list")

    params = param_names(tail[0], "lambda")
    body = parse_body(tail[1:], parse_scope(env, params), parse_fn)
    return Lambda(params, body)
