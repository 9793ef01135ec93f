"""
Tokenizer for the Slate language.

Splits source text into raw substrings (digit runs, letter runs, and
operator glyphs). Classification into typed tokens is the lexer's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from slate.core.errors import InvalidCharacterError

logger = logging.getLogger(__name__)

GLYPHS = "<>[]{}(),:+-*/&|!%$@=^"

# Glyph pairs that form a single token
_FUSED = {"==", "!="}


def tokenize(source: str) -> list[str]:
    """Split source text into raw tokens.

    Args:
        source: Program text. Leading and trailing whitespace is ignored.

    Returns:
        Raw token strings in source order.

    Raises:
        InvalidCharacterError: On a character outside the language.
    """
    text = source.strip()
    offset = len(source) - len(source.lstrip())
    tokens: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        c = text[i]

        if c in GLYPHS:
            pair = text[i : i + 2]
            if pair in _FUSED:
                tokens.append(pair)
                i += 2
            else:
                tokens.append(c)
                i += 1
            continue

        if c.isdecimal():
            i, tok = _read_run(text, i, str.isdecimal)
            tokens.append(tok)
            continue

        if c.isalpha():
            i, tok = _read_run(text, i, str.isalpha)
            tokens.append(tok)
            continue

        # Newlines are whitespace too
        if c.isspace():
            i += 1
            continue

        raise InvalidCharacterError(c, offset + i, source)

    logger.debug("Tokenized %d raw tokens", len(tokens))
    return tokens


def _read_run(text: str, start: int, accept: Callable[[str], bool]) -> tuple[int, str]:
    """Read the maximal run of characters satisfying ``accept``."""
    i = start
    while i < len(text) and accept(text[i]):
        i += 1
    return i, text[start:i]
