"""
Lexer for the Slate language.

Classifies raw tokens from the tokenizer into typed tokens and gives the
parser a cursor over them, with lookahead and operator precedence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from slate.core.errors import ParseError
from slate.core.ir import Atom, AtomKind


class TokenKind(StrEnum):
    """Token types for the Slate language."""

    # Literals
    SYMBOL = auto()
    FLOAT = auto()
    TRUE = auto()
    FALSE = auto()

    # Brackets
    LPAREN = auto()
    RPAREN = auto()

    # Mathematical operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    POWER = auto()

    # Logical operators
    EQUAL = auto()
    NOT_EQUAL = auto()
    NOT = auto()
    GREATER_THAN = auto()
    LESS_THAN = auto()

    # Keywords
    IF = auto()
    THEN = auto()
    ELSE = auto()
    ELSEIF = auto()
    END = auto()
    FN = auto()  # reserved, no grammar rule

    NEWLINE = auto()
    ASSIGN = auto()

    # End of input
    EOF = auto()
    UNKNOWN = auto()


PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.EQUAL: 5,
    TokenKind.NOT_EQUAL: 5,
    TokenKind.GREATER_THAN: 10,
    TokenKind.LESS_THAN: 10,
    TokenKind.PLUS: 20,
    TokenKind.MINUS: 20,
    TokenKind.MULTIPLY: 30,
    TokenKind.DIVIDE: 30,
    TokenKind.POWER: 40,
    TokenKind.ASSIGN: 50,
}

_TOKEN_ATOMS: dict[TokenKind, AtomKind] = {
    TokenKind.PLUS: AtomKind.PLUS,
    TokenKind.MINUS: AtomKind.MINUS,
    TokenKind.MULTIPLY: AtomKind.MULTIPLY,
    TokenKind.DIVIDE: AtomKind.DIVIDE,
    TokenKind.POWER: AtomKind.POWER,
    TokenKind.ASSIGN: AtomKind.ASSIGN,
    TokenKind.TRUE: AtomKind.TRUE,
    TokenKind.FALSE: AtomKind.FALSE,
    TokenKind.EQUAL: AtomKind.EQUAL,
    TokenKind.NOT_EQUAL: AtomKind.NOT_EQUAL,
    TokenKind.NOT: AtomKind.NOT,
    TokenKind.GREATER_THAN: AtomKind.GREATER_THAN,
    TokenKind.LESS_THAN: AtomKind.LESS_THAN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single typed token.

    ``value`` holds the name of a ``SYMBOL``, the number of a ``FLOAT`` and
    the raw text of an ``UNKNOWN`` token; it is ``None`` otherwise.
    """

    kind: TokenKind
    value: str | float | None = None

    @property
    def precedence(self) -> int:
        """Infix binding power; 0 for tokens that are not infix operators."""
        return PRECEDENCE.get(self.kind, 0)

    def to_atom(self) -> Atom:
        """Convert a literal or operator token to its AST atom."""
        if self.kind == TokenKind.FLOAT:
            assert isinstance(self.value, float)
            return Atom.number(self.value)
        if self.kind == TokenKind.SYMBOL:
            assert isinstance(self.value, str)
            return Atom.symbol(self.value)
        if self.kind in _TOKEN_ATOMS:
            return Atom.tag(_TOKEN_ATOMS[self.kind])
        raise ParseError(f"Cannot convert token {self} to an atom")

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}({self.value!r})"


EOF = Token(TokenKind.EOF)

_RAW_KINDS: dict[str, TokenKind] = {
    # Mathematical operators
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.DIVIDE,
    "*": TokenKind.MULTIPLY,
    "^": TokenKind.POWER,
    # Logical operators
    "!": TokenKind.NOT,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    # Assignment
    "=": TokenKind.ASSIGN,
    # Brackets
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    # Keywords
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "elseif": TokenKind.ELSEIF,
    "end": TokenKind.END,
    "fn": TokenKind.FN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


def classify(raw: str) -> Token:
    """Turn one raw token into a typed token."""
    kind = _RAW_KINDS.get(raw)
    if kind is not None:
        return Token(kind)
    if raw == "\n":
        return Token(TokenKind.NEWLINE)
    if raw.isdecimal():
        return Token(TokenKind.FLOAT, float(raw))
    if raw.isalpha():
        return Token(TokenKind.SYMBOL, raw)
    return Token(TokenKind.UNKNOWN, raw)


class Lexer:
    """Cursor over the typed tokens of a program."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = [tok for tok in tokens if tok != "\n"]
        self.idx = 0

    def peek(self, n: int = 0) -> Token:
        """Token ``n`` places ahead of the cursor, without consuming it."""
        idx = self.idx + n
        if idx < len(self.tokens):
            return classify(self.tokens[idx])
        return EOF

    def next(self) -> Token:
        """Consume and return the token at the cursor."""
        token = self.peek()
        self.idx += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        """Consume the next token, which must be of ``kind``."""
        token = self.next()
        if token.kind != kind:
            raise ParseError(f"Expected {kind}, got {token}")
        return token

    def precedence(self, token: Token) -> int:
        return token.precedence

    def all(self) -> list[Token]:
        """Every remaining token up to end of input; rewinds the cursor to the start."""
        tokens: list[Token] = []
        while self.peek().kind != TokenKind.EOF:
            tokens.append(self.next())
        self.idx = 0
        return tokens
