import logging
from io import StringIO

import pytest

from scm.printer import display, show
from scm.types.environment import Environment
from scm.types.values import (
    FALSE,
    NULL,
    TRUE,
    VOID,
    Exit,
    Integer,
    Pair,
    Primitive,
    Procedure,
    Rational,
    String,
    Symbol,
)
from scm.types.forms import Begin
from scm.types.primitives import Prim


@pytest.mark.parametrize(
    "value,expected",
    [
        (Integer(-12), "-12"),
        (Rational(6, -8), "-3/4"),
        (TRUE, "#t"),
        (FALSE, "#f"),
        (NULL, "()"),
        (VOID, "#<void>"),
        (Exit(), ""),
        (String("hi"), '"hi"'),
        (Symbol("abc"), "abc"),
        (Primitive(Prim.CAR), "#<procedure>"),
        (Procedure([], Begin([]), Environment()), "#<procedure>"),
        (Pair(Integer(1), Integer(2)), "(1 . 2)"),
        (Pair(Integer(1), Pair(Integer(2), NULL)), "(1 2)"),
        (Pair(Integer(1), Pair(Integer(2), Integer(3))), "(1 2 . 3)"),
        (Pair(Pair(Integer(1), NULL), NULL), "((1))"),
        (Pair(NULL, NULL), "(())"),
    ],
)
def test_show(value, expected):
    assert show(value) == expected


def test_show_cyclic_list_terminates():
    p = Pair(Integer(1), NULL)
    p.cdr = Pair(Integer(2), p)
    assert show(p) == "(1 2 ...)"


def test_display_writes_strings_unquoted():
    out = StringIO()
    display(String("hello world"), out)
    display(Pair(String("a"), NULL), out)
    assert out.getvalue() == 'hello world("a")'


@pytest.mark.parametrize(
    "source",
    [
        "(1 2 3)",
        "(a (b c) . d)",
        "(1 . 2)",
        "((1 . 2) (3 . 4))",
        "(x y . (z))",
        "()",
        "(1/2 #t \"s\")",
    ],
)
def test_quoted_list_round_trips_through_display(interp, capsys, source):
    interp.eval(f"(display '{source})")
    expected = {"(x y . (z))": "(x y z)"}.get(source, source)
    assert capsys.readouterr().out == expected


def test_display_returns_void_and_prints_string(interp, capsys):
    assert interp.eval('(display "hi")') is VOID
    assert capsys.readouterr().out == "hi"


def test_display_procedure(interp, capsys):
    interp.eval("(display car)")
    interp.eval("(display (lambda (x) x))")
    assert capsys.readouterr().out == "#<procedure>#<procedure>"


def test_show_pair_containing_itself_terminates():
    p = Pair(Integer(1), Integer(2))
    p.car = p
    assert show(p) == "(... . 2)"
    nested = Pair(Integer(0), Pair(p, NULL))
    assert show(nested) == "(0 (... . 2))"


def test_shared_structure_is_not_mistaken_for_a_cycle():
    shared = Pair(Integer(1), NULL)
    assert show(Pair(shared, Pair(shared, NULL))) == "((1) (1))"


def test_eval_returning_self_referencing_pair(interp):
    interp.eval("(define p (cons 1 2))")
    interp.eval("(set-car! p p)")
    value = interp.eval("(car p)")
    assert value is interp.env.lookup("p")
    assert show(value) == "(... . 2)"
    assert show(interp.eval("(eq? (car p) p)")) == "#t"


def test_eval_with_debug_logging_of_cyclic_value(interp, caplog):
    interp.eval("(define p (list 1 2))")
    interp.eval("(set-cdr! (cdr p) p)")
    with caplog.at_level(logging.DEBUG, logger="scm.interpreter"):
        interp.eval("p")
    assert "=> (1 2 ...)" in caplog.text
