import pytest

from scm import errors
from scm.parsing.parser import parse
from scm.reader.reader import read
from scm.types.forms import (
    And,
    Apply,
    Begin,
    Binary,
    Cond,
    Define,
    DefineFunction,
    If,
    Lambda,
    Let,
    Letrec,
    Or,
    Quote,
    Set,
    SList,
    Unary,
    Var,
    Variadic,
)
from scm.types.primitives import Prim
from scm.types.values import NULL, Integer, Rational, String, Symbol, TRUE


def p(source, env):
    (syntax,) = read(source)
    return parse(syntax, env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", Integer(5)),
        ("6/4", Rational(3, 2)),
        ("4/2", Integer(2)),
        ('"s"', String("s")),
        ("#t", TRUE),
        ("x", Var("x")),
        ("()", Quote(NULL)),
    ],
)
def test_atoms(source, expected, env):
    assert p(source, env) == expected


def test_integer_literal_out_of_range(env):
    with pytest.raises(errors.ScmOverflow):
        p("2147483648", env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(not x)", Unary(Prim.NOT, Var("x"))),
        ("(cons 1 2)", Binary(Prim.CONS, Integer(1), Integer(2))),
        ("(+ 1 2)", Variadic(Prim.PLUS, [Integer(1), Integer(2)])),
        ("(+)", Variadic(Prim.PLUS, [])),
        ("(- 1)", Variadic(Prim.MINUS, [Integer(1)])),
        ("(and 1 2)", And([Integer(1), Integer(2)])),
        ("(or)", Or([])),
        ("(void)", Variadic(Prim.VOID, [])),
    ],
)
def test_primitive_operators(source, expected, env):
    assert p(source, env) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(car)",
        "(car 1 2)",
        "(cons 1)",
        "(modulo 1 2 3)",
        "(expt 2)",
        "(set-car! x)",
        "(-)",
        "(/)",
        "(null? 1 2)",
        "(exit 1)",
        "(if 1 2)",
        "(quote)",
        "(quote a b)",
        "(set! x)",
        "(define x 1 2)",
        "(lambda)",
    ],
)
def test_arity_errors(source, env):
    with pytest.raises(errors.ScmArityError):
        p(source, env)


@pytest.mark.parametrize(
    "source",
    [
        "(lambda (x 1) x)",
        "(lambda (x x) x)",
        "(lambda x x)",
        "(let ((x)) x)",
        "(let ((x 1 2)) x)",
        "(let (x 1) x)",
        "(let ((x 1) (x 2)) x)",
        "(letrec ((1 2)) 3)",
        "(define 5 1)",
        "(define (f 1) 1)",
        "(cond (else 1) (#t 2))",
        "(cond ())",
        "(cond 1)",
        "(set! 5 1)",
    ],
)
def test_malformed_forms(source, env):
    with pytest.raises(errors.ScmMalformedForm):
        p(source, env)


def test_invalid_binding_names(env):
    with pytest.raises(errors.ScmInvalidVariableName):
        p("(define .x 1)", env)
    with pytest.raises(errors.ScmInvalidVariableName):
        p("(lambda (@a) 1)", env)


def test_unknown_head_is_deferred(env):
    assert p("(f 1 x)", env) == SList(Var("f"), [Integer(1), Var("x")])


def test_non_symbol_head_is_application(env):
    expr = p("((lambda (x) x) 1)", env)
    assert isinstance(expr, Apply)
    assert isinstance(expr.rator, Lambda)
    assert expr.rands == [Integer(1)]


def test_local_binding_shadows_primitive():
    from scm.types.environment import Environment

    env = Environment()
    env.define("car", Integer(1))
    assert p("(car 1 2 3)", env) == Apply(Var("car"), [Integer(1), Integer(2), Integer(3)])


def test_parameter_shadows_primitive_in_body(env):
    expr = p("(lambda (list) (list 1))", env)
    assert expr == Lambda(["list"], Begin([Apply(Var("list"), [Integer(1)])]))


def test_parameter_shadows_special_form_in_body(env):
    expr = p("(lambda (if) (if 1 2))", env)
    assert expr.body == Begin([Apply(Var("if"), [Integer(1), Integer(2)])])


def test_shadowing_does_not_leak_out_of_body(env):
    p("(lambda (car) (car))", env)
    assert p("(car x)", env) == Unary(Prim.CAR, Var("x"))


def test_let_initializers_do_not_see_let_names(env):
    expr = p("(let ((cons 1) (y (cons 1 2))) (cons y))", env)
    assert isinstance(expr, Let)
    assert expr.bindings[1] == ("y", Binary(Prim.CONS, Integer(1), Integer(2)))
    assert expr.body == Begin([Apply(Var("cons"), [Var("y")])])


def test_letrec_initializers_see_letrec_names(env):
    expr = p("(letrec ((car (lambda () 1)) (y (car))) y)", env)
    assert isinstance(expr, Letrec)
    assert expr.bindings[1] == ("y", Apply(Var("car"), []))


def test_function_define_sees_its_own_name(env):
    expr = p("(define (display n) (display n))", env)
    assert expr == DefineFunction(
        "display", ["n"], Begin([Apply(Var("display"), [Var("n")])])
    )


def test_internal_define_shadows_later_forms(env):
    expr = p("(lambda () (define not 1) (not 2))", env)
    assert expr.body.body[0] == Define("not", Integer(1))
    assert expr.body.body[1] == Apply(Var("not"), [Integer(2)])


def test_cond_clauses(env):
    expr = p("(cond ((< x 1) 'a) (x) (else 1 2))", env)
    assert isinstance(expr, Cond)
    first, second, last = expr.clauses
    assert first.test == Variadic(Prim.LT, [Var("x"), Integer(1)])
    assert first.body == [Quote(Symbol("a"))]
    assert second.test == Var("x") and second.body == []
    assert last.test is None and last.body == [Integer(1), Integer(2)]


def test_shadowed_else_is_an_ordinary_test(env):
    expr = p("(lambda (else) (cond (else 1) (#t 2)))", env)
    (cond,) = expr.body.body
    assert cond.clauses[0].test == Var("else")


def test_if_and_set(env):
    assert p("(if #t 1 2)", env) == If(TRUE, Integer(1), Integer(2))
    assert p("(set! x 3)", env) == Set("x", Integer(3))


def test_empty_bodies(env):
    assert p("(begin)", env) == Begin([])
    assert p("(lambda ())", env) == Lambda([], Begin([]))
    assert p("(let ())", env) == Let([], Begin([]))


def test_parse_scopes_bind_placeholders_only_at_parse_time(env):
    p("(let ((x 1)) x)", env)
    assert env.vars == {}
    assert env.lookup("x") is None


def test_define_inside_top_level_begin_shadows_later_forms(env):
    expr = p("(begin (define (car x) 42) (car 1))", env)
    assert expr.body[1] == Apply(Var("car"), [Integer(1)])
    # the begin scope is parse-time only
    assert env.vars == {}


def test_begin_inside_body_shares_the_body_scope(env):
    expr = p("(lambda () (begin (define list 1)) (list 2))", env)
    assert expr.body.body[1] == Apply(Var("list"), [Integer(2)])
