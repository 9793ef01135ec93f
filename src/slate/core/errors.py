"""
Error types for Slate tokenizing, parsing, and evaluation.
"""

from dataclasses import dataclass


class SlateError(Exception):
    """Base exception for all Slate errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenizeError(SlateError):
    """Raised when source text cannot be split into raw tokens."""

    pass


class InvalidCharacterError(TokenizeError):
    """
    Raised when the tokenizer meets a character outside the language.

    Anything that is not whitespace, alphabetic, a decimal digit, or one of
    the punctuation glyphs ends tokenizing.
    """

    def __init__(self, char: str, pos: int, source: str | None = None):
        self.char = char
        self.pos = pos
        context = ErrorContext(source=source, pos=pos) if source is not None else None
        super().__init__(f"Invalid character {char!r} at position {pos}", context)


class ParseError(SlateError):
    """
    Raised when a token sequence cannot be parsed.

    Examples:
    - Unexpected token in prefix or infix position
    - Missing closing bracket
    - Missing ``then`` after an ``if`` condition
    - ``if`` chain not closed by ``end``
    """

    pass


class EvalError(SlateError):
    """
    Raised when an AST cannot be evaluated.

    Examples:
    - Empty block
    - Assignment to something other than a symbol
    """

    pass


class UnboundSymbolError(EvalError):
    """Raised when a symbol is read before it was ever assigned."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol {name!r} is not bound")


class TypeMismatchError(EvalError):
    """
    Raised when an operation gets a value of the wrong type.

    Examples:
    - Arithmetic on a boolean
    - Non-boolean ``if`` condition
    """

    pass


class UnknownOperationError(EvalError):
    """Raised when the evaluator reaches an atom it has no rule for."""

    pass


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        source: Full source text being processed
        pos: Character offset (0-indexed) into ``source``
    """

    source: str
    pos: int

    @property
    def line(self) -> int:
        """Line number (1-indexed)."""
        return self.source.count("\n", 0, self.pos) + 1

    @property
    def column(self) -> int:
        """Column number (1-indexed)."""
        return self.pos - (self.source.rfind("\n", 0, self.pos) + 1) + 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            The offending line with a ``^`` marker under the column,
            prefixed by ``line:column``.
        """
        text = self.source.split("\n")[self.line - 1]
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{self.line}:{self.column}\n{prefix}{text}\n{marker}"
