"""Generic syntax tree produced by the reader and consumed by the parser.

The tree carries no evaluation meaning: a SymbolSyntax is just a name and a
ListSyntax just an ordered sequence. The parser decides what they denote.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NumberSyntax:
    value: int


@dataclass(frozen=True)
class RationalSyntax:
    numerator: int
    denominator: int


@dataclass(frozen=True)
class SymbolSyntax:
    name: str


@dataclass(frozen=True)
class StringSyntax:
    value: str


@dataclass(frozen=True)
class BooleanSyntax:
    value: bool


@dataclass(frozen=True)
class ListSyntax:
    items: tuple = field(default_factory=tuple)


Syntax = NumberSyntax | RationalSyntax | SymbolSyntax | StringSyntax | BooleanSyntax | ListSyntax
