"""
Pratt parser for the Slate language.

Each token kind has a prefix rule (applied when the token starts an
expression) and, for operators, an infix rule (applied when the token
follows an already parsed left operand). Binding power comes from the
lexer's precedence table:

    ==  !=      5
    >   <       10
    +   -       20
    *   /       30
    ^           40   (right-associative)
    =           50

Blocks are runs of expressions closed by end of input, ``end``, ``else``
or ``elseif``. Conditionals nest through ``elseif``:

    if cond then block (end | else block end | elseif cond then block ...)
"""

from __future__ import annotations

import logging

from slate.core.errors import ParseError
from slate.core.ir import AST, Atom, AtomKind, Node
from slate.core.language.lexer import Lexer, Token, TokenKind
from slate.core.language.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Tokens that close a block
_BLOCK_END = frozenset({TokenKind.EOF, TokenKind.END, TokenKind.ELSE, TokenKind.ELSEIF})

# Left-associative binary operators
_BINARY = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.DIVIDE,
        TokenKind.MULTIPLY,
        TokenKind.ASSIGN,
        TokenKind.GREATER_THAN,
        TokenKind.LESS_THAN,
        TokenKind.EQUAL,
        TokenKind.NOT_EQUAL,
    }
)

_LEAVES = frozenset({TokenKind.FLOAT, TokenKind.SYMBOL, TokenKind.TRUE, TokenKind.FALSE})


class Parser:
    """Builds an AST from a lexer's token stream."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer

    # -- Entry points --

    def parse(self) -> AST:
        """Parse a single expression."""
        return self.parse_at(0)

    def parse_block(self) -> Node:
        """Parse expressions up to the end of the enclosing block."""
        tail: list[AST] = []
        while self.lexer.peek().kind not in _BLOCK_END:
            tail.append(self.parse())
        return Node(head=Atom.tag(AtomKind.BLOCK), tail=tail)

    def parse_at(self, precedence: int) -> AST:
        """Parse an expression whose operators bind tighter than ``precedence``."""
        token = self.lexer.next()
        left = self.nud(token)
        while self.lexer.peek().precedence > precedence:
            token = self.lexer.next()
            left = self.led(left, token)
        return left

    # -- Prefix rules --

    def nud(self, token: Token) -> AST:
        """Start an expression with ``token``."""
        if token.kind in _LEAVES:
            return token.to_atom()

        if token.kind == TokenKind.LPAREN:
            inner = self.parse_at(0)
            self.lexer.expect(TokenKind.RPAREN)
            return inner

        if token.kind == TokenKind.PLUS:
            return self.parse_at(token.precedence)

        if token.kind == TokenKind.MINUS:
            operand = self.parse_at(token.precedence)
            return Node.op(AtomKind.NEGATE, operand)

        if token.kind == TokenKind.IF:
            return self._parse_conditional(AtomKind.IF)

        if token.kind == TokenKind.ELSEIF:
            return self._parse_conditional(AtomKind.ELSEIF)

        if token.kind == TokenKind.ELSE:
            block = self.parse_block()
            self.lexer.expect(TokenKind.END)
            return block

        if token.kind == TokenKind.EOF:
            raise ParseError("Unexpected end of input")

        raise ParseError(f"Unexpected token {token} at start of expression")

    def _parse_conditional(self, head: AtomKind) -> Node:
        """Rest of an ``if`` / ``elseif`` after its keyword."""
        condition = self.parse()
        self.lexer.expect(TokenKind.THEN)
        block = self.parse_block()

        following = self.lexer.peek()
        if following.kind == TokenKind.END:
            self.lexer.next()
            otherwise: AST = Atom.tag(AtomKind.NOTHING)
        elif following.kind in (TokenKind.ELSE, TokenKind.ELSEIF):
            otherwise = self.parse()
        else:
            raise ParseError(f"Unexpected token {following} after {head} block")

        logger.debug("Parsed %s with condition %s", head, condition)
        return Node.op(head, condition, block, otherwise)

    # -- Infix rules --

    def led(self, left: AST, token: Token) -> AST:
        """Continue an expression whose left operand is ``left``."""
        if token.kind in _BINARY:
            right = self.parse_at(token.precedence)
            return Node(head=token.to_atom(), tail=[left, right])

        if token.kind == TokenKind.POWER:
            right = self.parse_at(token.precedence - 1)
            return Node(head=token.to_atom(), tail=[left, right])

        raise ParseError(f"Token {token} cannot continue an expression")


def parse_source(source: str) -> Node:
    """Parse a whole program into a block.

    Args:
        source: Program text (e.g., "x = 10\\ny = x * 2")

    Returns:
        Block node holding every top-level expression.

    Raises:
        InvalidCharacterError: If tokenization fails.
        ParseError: If the program is malformed, has a stray ``end``,
            ``else`` or ``elseif``, or nests too deeply to parse.
    """
    parser = Parser(Lexer(tokenize(source)))
    try:
        block = parser.parse_block()
    except RecursionError as e:
        raise ParseError("Program nests too deeply to parse") from e

    # Ensure all tokens consumed
    leftover = parser.lexer.peek()
    if leftover.kind != TokenKind.EOF:
        raise ParseError(f"Unexpected token {leftover} outside of an if block")

    logger.debug("Parsed program with %d top-level expressions", len(block.tail))
    return block
