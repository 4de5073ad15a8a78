"""
  Reader: source text -> generic syntax tree

- Streaming, lazy reading: `read` yields one top-level form at a time
- Emits scm.reader.syntax nodes:

    - integers        -> NumberSyntax
    - n/d literals    -> RationalSyntax
    - #t / #f         -> BooleanSyntax
    - "text"          -> StringSyntax (escapes decoded)
    - lists           -> ListSyntax (a lone `.` stays a SymbolSyntax; the
                         quoting path gives it its dotted-pair meaning)
    - 'x              -> (quote x)
    - anything else   -> SymbolSyntax
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from scm.errors import ScmIncompleteInput, ScmSyntaxError
from scm.reader.syntax import (
    BooleanSyntax,
    ListSyntax,
    NumberSyntax,
    RationalSyntax,
    StringSyntax,
    SymbolSyntax,
    Syntax,
)


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<boolean>#[tf](?![^\s()'\";]))"  # #t / #f
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")
RATIONAL_RE = re.compile(r"([+-]?\d+)/(\d+)")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:].lstrip()
            if rest == "":
                break
            if rest.startswith('"'):
                # string still open at end of input
                raise ScmIncompleteInput("Unterminated string literal")
            raise ScmSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break


def decode_string(token: str) -> str:
    body = token[1:-1]
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def atom(token: str) -> Syntax:
    """Classify a bare token as a number, rational or symbol."""
    if INTEGER_RE.fullmatch(token):
        return NumberSyntax(int(token))
    m = RATIONAL_RE.fullmatch(token)
    if m:
        return RationalSyntax(int(m.group(1)), int(m.group(2)))
    return SymbolSyntax(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Syntax]:
        """Read one form; None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return atom(tok_val)

        if tok_type == "boolean":
            return BooleanSyntax(tok_val == "#t")

        if tok_type == "string":
            return StringSyntax(decode_string(tok_val))

        # Quote shorthand
        if tok_type == "quote":
            quoted = self.parse_expr()
            if quoted is None:
                raise ScmIncompleteInput("Expected a form after '")
            return ListSyntax((SymbolSyntax("quote"), quoted))

        if tok_type == "lparen":
            items: list[Syntax] = []
            while True:
                nxt, _ = self.peek()
                if nxt is None:
                    raise ScmIncompleteInput("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return ListSyntax(tuple(items))
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise ScmSyntaxError("Unexpected ')'")

        raise ScmSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Syntax]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def read(source: str) -> Iterator[Syntax]:
    """Lazily read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
