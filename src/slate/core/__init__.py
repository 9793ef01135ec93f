"""Core Slate functionality: IR, language pipeline, errors, settings."""

from . import ir
from .errors import (
    ErrorContext,
    EvalError,
    InvalidCharacterError,
    ParseError,
    SlateError,
    TokenizeError,
    TypeMismatchError,
    UnboundSymbolError,
    UnknownOperationError,
)
from .language import Environment, Lexer, Parser, evaluate, parse_source, run, tokenize
from .settings import SlateConfig, load_config

__all__ = [
    "ir",
    "SlateError",
    "TokenizeError",
    "InvalidCharacterError",
    "ParseError",
    "EvalError",
    "UnboundSymbolError",
    "TypeMismatchError",
    "UnknownOperationError",
    "ErrorContext",
    "tokenize",
    "Lexer",
    "Parser",
    "parse_source",
    "Environment",
    "evaluate",
    "run",
    "SlateConfig",
    "load_config",
]
