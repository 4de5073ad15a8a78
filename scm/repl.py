"""Read-eval-print loop.

Input is consumed line by line; a line that leaves a form unfinished is kept
in the buffer until the form closes. Each evaluated form prints its value
(nothing for void) followed by a newline. Any scm error prints `RuntimeError`
and the loop continues; `(exit)` or end of input stops it.
"""

from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import Iterable, TextIO

from scm.errors import ScmError, ScmIncompleteInput
from scm.interpreter import Interpreter
from scm.printer import write_value
from scm.reader.reader import read
from scm.types.values import Exit, Void

logger = logging.getLogger(__name__)


def repl(
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
    prompt: str = "",
    interp: Interpreter | None = None,
) -> Interpreter:
    lines = lines if lines is not None else sys.stdin
    out = out if out is not None else sys.stdout
    interp = interp if interp is not None else Interpreter()

    buffer = ""
    out.write(prompt)
    out.flush()
    for line in lines:
        buffer += line
        try:
            forms = list(read(buffer))
        except ScmIncompleteInput:
            continue
        except ScmError as e:
            logger.info("read error: %s", e)
            out.write("RuntimeError\n")
            buffer = ""
            out.write(prompt)
            out.flush()
            continue
        buffer = ""

        for syntax in forms:
            try:
                # display writes to stdout; keep it on the same stream as results
                with redirect_stdout(out):
                    value = interp.eval_syntax(syntax)
            except (ScmError, RecursionError) as e:
                logger.info("%s: %s", type(e).__name__, e)
                out.write("RuntimeError\n")
                continue
            if isinstance(value, Exit):
                return interp
            if not isinstance(value, Void):
                write_value(value, out)
            out.write("\n")
        out.write(prompt)
        out.flush()
    return interp
