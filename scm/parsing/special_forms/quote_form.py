from scm import Expr
from scm.errors import ScmArityError
from scm.reader.syntax import Syntax
from scm.types.environment import Environment
from scm.types.forms import Quote
from scm.parsing.quoting import q_parse
from scm.parsing.special_forms.binding import ParseFn


def quote_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    if len(tail) != 1:
        raise ScmArityError("quote expects exactly 1 argument")
    return Quote(q_parse(tail[0]))
