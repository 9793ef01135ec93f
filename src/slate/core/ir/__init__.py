"""
Slate intermediate representation: syntax tree and runtime values.
"""

from .ast import AST, Atom, AtomKind, Node, format_float
from .values import (
    FALSE,
    NOTHING,
    TRUE,
    BoolValue,
    FloatValue,
    NothingValue,
    StringValue,
    SymbolValue,
    Value,
    type_name,
)

__all__ = [
    # Syntax tree
    "AST",
    "Atom",
    "AtomKind",
    "Node",
    "format_float",
    # Values
    "Value",
    "StringValue",
    "SymbolValue",
    "FloatValue",
    "BoolValue",
    "NothingValue",
    "NOTHING",
    "TRUE",
    "FALSE",
    "type_name",
]
