"""Application engine for scm.

Centralizes what it means to call something:
- Closures bind their parameters in one new child frame of the captured frame
  and evaluate the body there. Argument count must match exactly.
- Primitive and special-form tags used as values are turned into an equivalent
  closure over freshly named parameters, then applied like any closure.

Kept separate from the evaluator so that both application nodes (Apply and
SList) share one implementation.
"""

from __future__ import annotations

from scm import EvaluatorFn, Expr, Value
from scm.errors import ScmArityError, ScmMalformedForm, ScmNotAProcedure
from scm.types.environment import Environment
from scm.types.forms import Begin, If, Var, make_operator
from scm.types.primitives import Form
from scm.types.values import Primitive, Procedure, SpecialForm


def build_form(form: Form, rands: list[Expr]) -> Expr:
    """Rebuild a special form from already-parsed operand expressions.

    Only forms whose operands are plain expressions can be rebuilt; binding
    forms need raw syntax and are rejected.
    """
    if form is Form.BEGIN:
        return Begin(list(rands))
    if form is Form.IF:
        if len(rands) != 3:
            raise ScmArityError(f"if requires exactly 3 arguments, got {len(rands)}")
        return If(*rands)
    if form is Form.QUOTE:
        if len(rands) != 1:
            raise ScmArityError(f"quote expects exactly 1 argument, got {len(rands)}")
        # operands reaching here are already values
        return rands[0]
    raise ScmMalformedForm(f"{form.value} cannot be applied as a procedure")


def synthesize(tag: Primitive | SpecialForm, argc: int) -> Procedure:
    """Closure equivalent to `tag` taking `argc` freshly named parameters."""
    params = [f"%arg{i}" for i in range(argc)]
    rands = [Var(p) for p in params]
    if isinstance(tag, Primitive):
        body = make_operator(tag.op, rands)
    else:
        body = build_form(tag.form, rands)
    return Procedure(params, body, Environment())


def apply_procedure(fn: Procedure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    if len(args) != len(fn.params):
        raise ScmArityError(
            f"Procedure expects {len(fn.params)} argument(s), got {len(args)}"
        )
    frame = fn.env.extend(zip(fn.params, args))
    return evaluate_fn(fn.body, frame)


def apply(head: Value, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply a closure or a first-class primitive/special-form tag."""
    if isinstance(head, Procedure):
        return apply_procedure(head, args, evaluate_fn)
    if isinstance(head, (Primitive, SpecialForm)):
        return apply_procedure(synthesize(head, len(args)), args, evaluate_fn)
    raise ScmNotAProcedure(f"Attempt to apply a non-procedure: {type(head).__name__}")
