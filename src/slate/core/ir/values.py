"""
Runtime values produced by the Slate evaluator.

Values are immutable and compare structurally, so they can be shared
between scopes and returned from any number of evaluations.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from slate.core.ir.ast import format_float


class StringValue(BaseModel):
    """A piece of text."""

    value: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.value


class SymbolValue(BaseModel):
    """The name a value was just bound to; the result of ``x = ...``."""

    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"'{self.name}"


class FloatValue(BaseModel):
    """A 64-bit floating point number."""

    value: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_float(self.value)


class BoolValue(BaseModel):
    """``true`` or ``false``."""

    value: bool

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "true" if self.value else "false"


class NothingValue(BaseModel):
    """The unit value; result of an ``if`` with no taken branch."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "nothing"


Value = StringValue | SymbolValue | FloatValue | BoolValue | NothingValue

NOTHING = NothingValue()
TRUE = BoolValue(value=True)
FALSE = BoolValue(value=False)


def type_name(value: Value) -> str:
    """Short user-facing name of a value's type."""
    return {
        StringValue: "string",
        SymbolValue: "symbol",
        FloatValue: "float",
        BoolValue: "bool",
        NothingValue: "nothing",
    }[type(value)]
