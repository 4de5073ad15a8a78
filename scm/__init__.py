# Core type aliases for the scm interpreter.
# Source text is read into a Syntax tree (scm.reader.syntax), parsed into an
# Expr tree (scm.types.values / scm.types.forms) and evaluated to a Value.
# Values are themselves Expr variants: every self-evaluating literal, pair,
# procedure and primitive tag is both a node and a result.
#
# Naming guidance:
# - Expr:  use in parser/evaluator code for nodes that are about to be evaluated.
# - Value: use in runtime code (primitives, printer) for evaluated results.
# Both aliases resolve to `Any` so that the dataclass variants stay free of
# import cycles.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Expression alias (same representation as values)
Expr = Value

# Evaluator function type, passed to application helpers
EvaluatorFn = Callable[..., Value]
