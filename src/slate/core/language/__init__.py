"""
Slate language pipeline.

Tokenizer, lexer, Pratt parser, environment, and evaluator.

Usage:
    from slate.core.language import Environment, evaluate, parse_source

    env = Environment()
    evaluate(parse_source("x = 10"), env)
    result = evaluate(parse_source("x * 2"), env)
    # result == FloatValue(value=20.0)
"""

from slate.core.language.environment import Environment
from slate.core.language.evaluator import evaluate, run
from slate.core.language.lexer import Lexer, Token, TokenKind
from slate.core.language.parser import Parser, parse_source
from slate.core.language.tokenizer import tokenize

__all__ = [
    "Environment",
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "evaluate",
    "parse_source",
    "run",
    "tokenize",
]
