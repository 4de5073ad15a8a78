"""Runtime environment for scm.

An Environment is one frame: a mapping from variable names to values plus an
`outer` link to the enclosing frame (None only at the root). Frames are shared
by reference, so a closure that captured a frame observes every later
define or set! made through any other holder of that frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from scm import Value
from scm.errors import ScmInvalidVariableName, ScmUnboundAssignment

_BAD_FIRST = ".@"
_BAD_ANY = "#'\"`"


def is_valid_name(name: str) -> bool:
    """Identifier rule shared by every binding form."""
    if not name:
        return False
    if name[0].isdigit() or name[0] in _BAD_FIRST:
        return False
    return not any(c.isspace() or c in _BAD_ANY for c in name)


def check_name(name: str) -> str:
    if not isinstance(name, str) or not is_valid_name(name):
        raise ScmInvalidVariableName(f"Not a valid variable name: {name!r}")
    return name


class Environment:
    """Hierarchical mapping from names to scm values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Optional[Value]:
        """Return the nearest binding of `name`, or None when it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def extend(self, bindings: Iterable[tuple[str, Value]]) -> Environment:
        """Return a new child frame holding `bindings`; this frame is untouched."""
        child = Environment(outer=self)
        for name, value in bindings:
            child.define(name, value)
        return child

    def define(self, name: str, value: Value) -> None:
        """Insert or overwrite `name` directly in this frame."""
        self.vars[check_name(name)] = value

    def set(self, name: str, value: Value) -> None:
        """Overwrite the nearest existing binding of `name`.

        Raises ScmUnboundAssignment if no frame in the chain binds it; set!
        never creates a binding.
        """
        check_name(name)
        env = self.find(name)
        if env is None:
            raise ScmUnboundAssignment(f"Cannot set! unbound variable {name}")
        env.vars[name] = value

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {type(v).__name__}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; values shown by type only."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
