"""
Syntax tree types for Slate.

An AST is either a leaf ``Atom`` (a literal, a symbol reference, or the
``nothing`` sentinel) or an interior ``Node`` whose head atom names the
operation and whose tail holds the operands in grammar order:

- Binary operators: ``[left, right]``
- ``=``: ``[target symbol, value]``
- ``if`` / ``elseif``: ``[condition, then block, else branch]``
- ``negate``: ``[operand]``
- ``block``: any number of expressions, evaluated in order
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# Atom kinds
# ---------------------------------------------------------------------------


class AtomKind(StrEnum):
    """Tags for leaves and operation heads."""

    # Literals
    SYMBOL = "symbol"
    STRING = "string"
    FLOAT = "float"
    TRUE = "true"
    FALSE = "false"
    NOTHING = "nothing"
    # Maths
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    NEGATE = "negate"
    # Logic
    IF = "if"
    ELSE = "else"
    ELSEIF = "elseif"
    EQUAL = "=="
    NOT_EQUAL = "!="
    NOT = "!"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    # Semantics
    ASSIGN = "="
    BLOCK = "block"
    END = "end"

    @property
    def is_leaf(self) -> bool:
        """True for kinds that may only appear as leaves."""
        return self in _LEAF_KINDS


_LEAF_KINDS = frozenset(
    {
        AtomKind.SYMBOL,
        AtomKind.STRING,
        AtomKind.FLOAT,
        AtomKind.TRUE,
        AtomKind.FALSE,
        AtomKind.NOTHING,
    }
)


def format_float(value: float) -> str:
    """Render a float without a trailing ``.0`` when it is integral."""
    if value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Atom(BaseModel):
    """
    A tagged terminal.

    ``value`` carries the payload of ``float`` (a float), ``symbol`` and
    ``string`` (a str) atoms, and is ``None`` for every other kind.
    """

    kind: AtomKind
    value: float | str | None = Field(default=None, description="Literal payload")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_payload(self) -> Atom:
        if self.kind == AtomKind.FLOAT and not isinstance(self.value, float):
            raise ValueError("float atom needs a float value")
        if self.kind in (AtomKind.SYMBOL, AtomKind.STRING) and not isinstance(self.value, str):
            raise ValueError(f"{self.kind} atom needs a str value")
        return self

    @classmethod
    def number(cls, value: float) -> Atom:
        return cls(kind=AtomKind.FLOAT, value=float(value))

    @classmethod
    def symbol(cls, name: str) -> Atom:
        return cls(kind=AtomKind.SYMBOL, value=name)

    @classmethod
    def string(cls, text: str) -> Atom:
        return cls(kind=AtomKind.STRING, value=text)

    @classmethod
    def tag(cls, kind: AtomKind) -> Atom:
        """A payload-free atom: an operation head, a boolean, or nothing."""
        return cls(kind=kind)

    def __str__(self) -> str:
        if self.kind == AtomKind.FLOAT:
            assert isinstance(self.value, float)
            return format_float(self.value)
        if self.kind == AtomKind.STRING:
            return f'"{self.value}"'
        if self.kind == AtomKind.SYMBOL:
            return str(self.value)
        return self.kind.value


class Node(BaseModel):
    """An operation: head atom plus ordered operands."""

    head: Atom
    tail: list[AST] = Field(default_factory=list, description="Operands in grammar order")

    model_config = ConfigDict(frozen=True)

    @field_validator("head")
    @classmethod
    def head_is_operation(cls, head: Atom) -> Atom:
        if head.kind.is_leaf:
            raise ValueError(f"{head.kind} atom cannot head a node")
        return head

    @field_validator("tail")
    @classmethod
    def leaves_are_terminals(cls, tail: list[AST]) -> list[AST]:
        for child in tail:
            if isinstance(child, Atom) and not child.kind.is_leaf:
                raise ValueError(f"{child.kind} atom cannot be a leaf")
        return tail

    @classmethod
    def op(cls, kind: AtomKind, *tail: AST) -> Node:
        """Build a node headed by ``kind``."""
        return cls(head=Atom.tag(kind), tail=list(tail))

    def __str__(self) -> str:
        if not self.tail:
            return f"({self.head})"
        children = " ".join(str(child) for child in self.tail)
        return f"({self.head} {children})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

AST = Atom | Node

# Rebuild for the recursive forward reference
Node.model_rebuild()
