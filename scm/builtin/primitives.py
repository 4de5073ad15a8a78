"""Built-in operator semantics for the scm runtime.

Each function receives the already-evaluated operands as a list and returns a
value. PRIMITIVE_FUNCTIONS maps every Prim except the short-circuiting
`and`/`or` (which the evaluator handles itself) to its function. Operand
counts are checked when the operator node is built, so the functions here only
check operand types.
"""
from __future__ import annotations

from functools import reduce
from typing import Callable

from scm import Value
from scm.errors import ScmTypeError
from scm.printer import display as display_value
from scm.types import number
from scm.types.primitives import Prim
from scm.types.values import (
    FALSE,
    NULL,
    TRUE,
    VOID,
    Boolean,
    Exit,
    Integer,
    Null,
    Pair,
    Primitive,
    Procedure,
    Rational,
    SpecialForm,
    String,
    Symbol,
    Void,
    is_true,
)


def _bool(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Value]) -> Value:
    """Sum of all arguments; (+) is 0."""
    return reduce(number.add, args, Integer(0))


def sub(args: list[Value]) -> Value:
    """Subtract the rest from the first; unary negation for one arg."""
    if len(args) == 1:
        return number.sub(Integer(0), args[0])
    return reduce(number.sub, args[1:], args[0])


def mul(args: list[Value]) -> Value:
    """Product of all arguments; (*) is 1."""
    return reduce(number.mul, args, Integer(1))


def div(args: list[Value]) -> Value:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if len(args) == 1:
        return number.div(Integer(1), args[0])
    return reduce(number.div, args[1:], args[0])


def modulo(args: list[Value]) -> Value:
    return number.modulo(args[0], args[1])


def expt(args: list[Value]) -> Value:
    return number.expt(args[0], args[1])


# -------------------------------
# Comparison
# -------------------------------
def _chain(symbol: str, holds: Callable[[int], bool]) -> Callable[[list[Value]], Value]:
    """Chainable comparison: #t iff every adjacent pair satisfies `holds`."""

    def compare(args: list[Value]) -> Value:
        if len(args) == 1 and not number.is_number(args[0]):
            raise ScmTypeError(f"{symbol} expects numbers, got {type(args[0]).__name__}")
        for a, b in zip(args, args[1:]):
            if not holds(number.compare(a, b, symbol)):
                return FALSE
        return TRUE

    compare.__name__ = f"compare_{symbol}"
    return compare


lt = _chain("<", lambda c: c < 0)
lte = _chain("<=", lambda c: c <= 0)
num_eq = _chain("=", lambda c: c == 0)
gte = _chain(">=", lambda c: c >= 0)
gt = _chain(">", lambda c: c > 0)


# -------------------------------
# Lists
# -------------------------------
def cons(args: list[Value]) -> Pair:
    return Pair(args[0], args[1])


def _pair(value: Value, op: str) -> Pair:
    if not isinstance(value, Pair):
        raise ScmTypeError(f"{op} expects a pair, got {type(value).__name__}")
    return value


def car(args: list[Value]) -> Value:
    return _pair(args[0], "car").car


def cdr(args: list[Value]) -> Value:
    return _pair(args[0], "cdr").cdr


def set_car(args: list[Value]) -> Void:
    """Mutate the pair in place; every holder of the pair sees the change."""
    _pair(args[0], "set-car!").car = args[1]
    return VOID


def set_cdr(args: list[Value]) -> Void:
    _pair(args[0], "set-cdr!").cdr = args[1]
    return VOID


def list_builtin(args: list[Value]) -> Value:
    """Right fold of the arguments into pairs ending in the empty list."""
    result: Value = NULL
    for item in reversed(args):
        result = Pair(item, result)
    return result


def is_list_value(value: Value) -> bool:
    """A proper chain of pairs ending in the empty list (cycles are not lists)."""
    seen: set[int] = set()
    while isinstance(value, Pair):
        if id(value) in seen:
            return False
        seen.add(id(value))
        value = value.cdr
    return isinstance(value, Null)


# -------------------------------
# Logic and predicates
# -------------------------------
def logical_not(args: list[Value]) -> Boolean:
    """#t exactly when the operand is #f."""
    return _bool(not is_true(args[0]))


def is_eq(a: Value, b: Value) -> bool:
    """Value equality for scalar literals, object identity for everything else."""
    if isinstance(a, (Integer, Rational, Boolean, String, Symbol, Null, Void)):
        return type(a) is type(b) and a == b
    return a is b


def eq(args: list[Value]) -> Boolean:
    return _bool(is_eq(args[0], args[1]))


def _predicate(*types: type) -> Callable[[list[Value]], Boolean]:
    def check(args: list[Value]) -> Boolean:
        return _bool(isinstance(args[0], types))

    return check


is_boolean = _predicate(Boolean)
is_number = _predicate(Integer, Rational)
is_integer = _predicate(Integer)
is_null = _predicate(Null)
is_pair = _predicate(Pair)
is_procedure = _predicate(Procedure, Primitive, SpecialForm)
is_symbol = _predicate(Symbol)
is_string = _predicate(String)


def is_list(args: list[Value]) -> Boolean:
    return _bool(is_list_value(args[0]))


# -------------------------------
# Effects and control
# -------------------------------
def display(args: list[Value]) -> Void:
    display_value(args[0])
    return VOID


def make_void(args: list[Value]) -> Void:
    return VOID


def make_exit(args: list[Value]) -> Exit:
    return Exit()


# -------------------------------
# Registration
# -------------------------------
PRIMITIVE_FUNCTIONS: dict[Prim, Callable[[list[Value]], Value]] = {
    Prim.PLUS: add,
    Prim.MINUS: sub,
    Prim.MUL: mul,
    Prim.DIV: div,
    Prim.MODULO: modulo,
    Prim.EXPT: expt,
    Prim.LT: lt,
    Prim.LE: lte,
    Prim.EQ: num_eq,
    Prim.GE: gte,
    Prim.GT: gt,
    Prim.CONS: cons,
    Prim.CAR: car,
    Prim.CDR: cdr,
    Prim.LIST: list_builtin,
    Prim.SET_CAR: set_car,
    Prim.SET_CDR: set_cdr,
    Prim.NOT: logical_not,
    Prim.EQQ: eq,
    Prim.BOOLEANQ: is_boolean,
    Prim.NUMBERQ: is_number,
    Prim.INTEGERQ: is_integer,
    Prim.NULLQ: is_null,
    Prim.PAIRQ: is_pair,
    Prim.PROCEDUREQ: is_procedure,
    Prim.SYMBOLQ: is_symbol,
    Prim.LISTQ: is_list,
    Prim.STRINGQ: is_string,
    Prim.DISPLAY: display,
    Prim.VOID: make_void,
    Prim.EXIT: make_exit,
}


def call_primitive(op: Prim, args: list[Value]) -> Value:
    return PRIMITIVE_FUNCTIONS[op](args)
