"""Core evaluator for the scm interpreter.

A single recursive `evaluate` matches on every expression variant. There is no
trampoline: recursion depth is bounded by the host stack, which the
interpreter facade raises via configuration.
"""

from __future__ import annotations

from scm import Expr, Value
from scm.errors import ScmUnboundVariable
from scm.builtin.primitives import call_primitive
from scm.evaluation.apply import apply
from scm.types.environment import Environment
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
    make_operator,
)
from scm.types.primitives import PRIMITIVES, SPECIAL_FORMS
from scm.types.values import (
    FALSE,
    SELF_EVALUATING,
    TRUE,
    VOID,
    Primitive,
    Procedure,
    SpecialForm,
    is_true,
)


# One shared tag per name, so eq? on two references to `car` holds
PRIMITIVE_TAGS = {name: Primitive(op) for name, op in PRIMITIVES.items()}
SPECIAL_FORM_TAGS = {name: SpecialForm(form) for name, form in SPECIAL_FORMS.items()}


def resolve(name: str, env: Environment) -> Value:
    """Variable lookup falling back to primitive, then special-form tags."""
    value = env.lookup(name)
    if value is not None:
        return value
    if name in PRIMITIVE_TAGS:
        return PRIMITIVE_TAGS[name]
    if name in SPECIAL_FORM_TAGS:
        return SPECIAL_FORM_TAGS[name]
    raise ScmUnboundVariable(f"Undefined variable {name}")


def evaluate(expr: Expr, env: Environment) -> Value:
    if isinstance(expr, SELF_EVALUATING):
        return expr

    match expr:
        # --- Operators: operands left-to-right, then the semantic function ---
        case Unary(op, rand):
            return call_primitive(op, [evaluate(rand, env)])
        case Binary(op, rand1, rand2):
            left = evaluate(rand1, env)
            right = evaluate(rand2, env)
            return call_primitive(op, [left, right])
        case Variadic(op, rands):
            return call_primitive(op, [evaluate(r, env) for r in rands])
        case And(rands):
            result: Value = TRUE
            for r in rands:
                result = evaluate(r, env)
                if not is_true(result):
                    return result
            return result
        case Or(rands):
            result = FALSE
            for r in rands:
                result = evaluate(r, env)
                if is_true(result):
                    return result
            return result

        # --- Control forms ---
        case Var(name):
            return resolve(name, env)
        case Quote(datum):
            return datum
        case Begin(body):
            return eval_sequence(body, env)
        case If(cond, conseq, alter):
            if is_true(evaluate(cond, env)):
                return evaluate(conseq, env)
            return evaluate(alter, env)
        case Cond(clauses):
            for clause in clauses:
                if clause.test is None:
                    return eval_sequence(clause.body, env)
                test = evaluate(clause.test, env)
                if is_true(test):
                    return eval_sequence(clause.body, env) if clause.body else test
            return VOID

        # --- Binding forms ---
        case Lambda(params, body):
            return Procedure(params, body, env)
        case Define(name, value_expr):
            env.define(name, evaluate(value_expr, env))
            return VOID
        case DefineFunction(name, params, body):
            # Bind first so the closure's frame already holds the name, then
            # overwrite that same binding with the closure itself.
            env.define(name, VOID)
            env.define(name, Procedure(params, body, env))
            return VOID
        case Let(bindings, body):
            values = [(name, evaluate(init, env)) for name, init in bindings]
            return evaluate(body, env.extend(values))
        case Letrec(bindings, body):
            frame = env.extend((name, VOID) for name, _ in bindings)
            for name, init in bindings:
                frame.define(name, evaluate(init, frame))
            return evaluate(body, frame)
        case Set(name, value_expr):
            env.set(name, evaluate(value_expr, env))
            return VOID

        # --- Applications ---
        case Apply(rator, rands):
            head = evaluate(rator, env)
            args = [evaluate(r, env) for r in rands]
            return apply(head, args, evaluate)
        case SList(head, terms):
            fn = resolve(head.name, env)
            # A name that turns out to be a primitive keeps its own operand rules
            if isinstance(fn, Primitive):
                return evaluate(make_operator(fn.op, terms), env)
            args = [evaluate(t, env) for t in terms]
            return apply(fn, args, evaluate)

    raise TypeError(f"Unknown expression node: {expr!r}")


def eval_sequence(body: list[Expr], env: Environment) -> Value:
    """Evaluate in order for effect, returning the last value (void if empty)."""
    result: Value = VOID
    for e in body:
        result = evaluate(e, env)
    return result
