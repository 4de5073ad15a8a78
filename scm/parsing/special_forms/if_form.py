from scm import Expr
from scm.errors import ScmArityError, ScmMalformedForm
from scm.reader.syntax import ListSyntax, SymbolSyntax, Syntax
from scm.types.environment import Environment
from scm.types.forms import Cond, CondClause, If
from scm.parsing.special_forms.binding import ParseFn


def if_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    if len(tail) != 3:
        raise ScmArityError("if requires a condition, a consequent and an alternative")
    cond, conseq, alter = (parse_fn(e, env) for e in tail)
    return If(cond, conseq, alter)


def _is_else(test: Syntax, env: Environment) -> bool:
    # A local binding named `else` turns it back into an ordinary test
    return test == SymbolSyntax("else") and env.find("else") is None


def cond_form(tail: list[Syntax], env: Environment, parse_fn: ParseFn) -> Expr:
    """
    (cond (test expr...) ... (else expr...))
    A clause with only a test yields the test's value when it is true.
    """
    clauses: list[CondClause] = []
    last_index = len(tail) - 1
    for i, clause in enumerate(tail):
        if not isinstance(clause, ListSyntax) or not clause.items:
            raise ScmMalformedForm(f"cond clause must be a non-empty list, got {clause!r}")
        test, *body = clause.items
        body_exprs = [parse_fn(e, env) for e in body]
        if _is_else(test, env):
            if i != last_index:
                raise ScmMalformedForm("else is only allowed as the last cond clause")
            clauses.append(CondClause(None, body_exprs))
        else:
            clauses.append(CondClause(parse_fn(test, env), body_exprs))
    return Cond(clauses)
