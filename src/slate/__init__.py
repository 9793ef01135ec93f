"""
Slate - a small expression-oriented scripting language.

Tokenizer, Pratt parser and tree-walking evaluator with chained scopes.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import EvalError, ParseError, SlateError, TokenizeError
from .core.language import Environment, evaluate, parse_source, run, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "SlateError",
    "TokenizeError",
    "ParseError",
    "EvalError",
    "Environment",
    "evaluate",
    "parse_source",
    "run",
    "tokenize",
]
