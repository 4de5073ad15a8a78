"""Static enumeration of primitive operators and reserved special forms.

Each Prim carries its source name and operand-count bounds; each Form its
reserved word. PRIMITIVES and SPECIAL_FORMS map names to members and are the
only name tables the parser and evaluator consult.
"""

from __future__ import annotations

from enum import Enum


class Prim(Enum):
    # Arithmetic
    PLUS = ("+", 0, None)
    MINUS = ("-", 1, None)
    MUL = ("*", 0, None)
    DIV = ("/", 1, None)
    MODULO = ("modulo", 2, 2)
    EXPT = ("expt", 2, 2)

    # Comparison
    LT = ("<", 0, None)
    LE = ("<=", 0, None)
    EQ = ("=", 0, None)
    GE = (">=", 0, None)
    GT = (">", 0, None)

    # Lists
    CONS = ("cons", 2, 2)
    CAR = ("car", 1, 1)
    CDR = ("cdr", 1, 1)
    LIST = ("list", 0, None)
    SET_CAR = ("set-car!", 2, 2)
    SET_CDR = ("set-cdr!", 2, 2)

    # Logic
    NOT = ("not", 1, 1)
    AND = ("and", 0, None)
    OR = ("or", 0, None)

    # Identity and type predicates
    EQQ = ("eq?", 2, 2)
    BOOLEANQ = ("boolean?", 1, 1)
    NUMBERQ = ("number?", 1, 1)
    INTEGERQ = ("integer?", 1, 1)
    NULLQ = ("null?", 1, 1)
    PAIRQ = ("pair?", 1, 1)
    PROCEDUREQ = ("procedure?", 1, 1)
    SYMBOLQ = ("symbol?", 1, 1)
    LISTQ = ("list?", 1, 1)
    STRINGQ = ("string?", 1, 1)

    # Effects and control
    DISPLAY = ("display", 1, 1)
    VOID = ("void", 0, 0)
    EXIT = ("exit", 0, 0)

    def __init__(self, symbol: str, min_args: int, max_args: int | None):
        self.symbol = symbol
        self.min_args = min_args
        self.max_args = max_args

    def accepts(self, count: int) -> bool:
        return count >= self.min_args and (self.max_args is None or count <= self.max_args)

    def arity_text(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args}"
        return f"exactly {self.min_args}"


class Form(Enum):
    BEGIN = "begin"
    QUOTE = "quote"
    IF = "if"
    COND = "cond"
    LAMBDA = "lambda"
    DEFINE = "define"
    LET = "let"
    LETREC = "letrec"
    SET = "set!"


PRIMITIVES: dict[str, Prim] = {p.symbol: p for p in Prim}
SPECIAL_FORMS: dict[str, Form] = {f.value: f for f in Form}
