"""
Tree-walking evaluator for the Slate language.

Evaluates AST nodes against an Environment. Blocks and conditional
branches share the environment they are given, so a binding made inside
an ``if`` stays visible after it.
"""

from __future__ import annotations

import logging
import math

from slate.core.errors import (
    EvalError,
    TypeMismatchError,
    UnboundSymbolError,
    UnknownOperationError,
)
from slate.core.ir import (
    AST,
    FALSE,
    NOTHING,
    TRUE,
    Atom,
    AtomKind,
    BoolValue,
    FloatValue,
    Node,
    StringValue,
    SymbolValue,
    Value,
    type_name,
)
from slate.core.language.environment import Environment
from slate.core.language.parser import parse_source

logger = logging.getLogger(__name__)

_MATH = frozenset(
    {AtomKind.PLUS, AtomKind.MINUS, AtomKind.DIVIDE, AtomKind.MULTIPLY, AtomKind.POWER}
)


def evaluate(node: AST, env: Environment) -> Value:
    """Evaluate an AST in ``env``.

    Args:
        node: Parsed AST, usually a block from ``parse_source``.
        env: Scope for symbol reads and assignments. It is mutated in place,
            so calling again with the same environment sees earlier bindings.

    Returns:
        The value of the expression; for a block, its last expression.

    Raises:
        UnboundSymbolError: If a symbol is read before assignment.
        TypeMismatchError: If an operand or condition has the wrong type.
        UnknownOperationError: If the node has no evaluation rule.
        EvalError: On an empty block, a bad assignment target, or nesting
            deeper than the interpreter stack allows.
    """
    try:
        return _evaluate(node, env)
    except RecursionError as e:
        raise EvalError("Expression nests too deeply to evaluate") from e


def _evaluate(node: AST, env: Environment) -> Value:
    if isinstance(node, Atom):
        return _eval_atom(node, env)
    return _eval_node(node, env)


def run(source: str, env: Environment | None = None) -> Value:
    """Tokenize, parse and evaluate a program.

    A fresh root environment is used when ``env`` is not given.
    """
    if env is None:
        env = Environment()
    return evaluate(parse_source(source), env)


def _eval_atom(atom: Atom, env: Environment) -> Value:
    """Evaluate a leaf."""
    if atom.kind == AtomKind.FLOAT:
        assert isinstance(atom.value, float)
        return FloatValue(value=atom.value)
    if atom.kind == AtomKind.STRING:
        assert isinstance(atom.value, str)
        return StringValue(value=atom.value)
    if atom.kind == AtomKind.SYMBOL:
        assert isinstance(atom.value, str)
        value = env.get(atom.value)
        if value is None:
            raise UnboundSymbolError(atom.value)
        return value
    if atom.kind == AtomKind.TRUE:
        return TRUE
    if atom.kind == AtomKind.FALSE:
        return FALSE
    if atom.kind == AtomKind.NOTHING:
        return NOTHING
    raise UnknownOperationError(f"Cannot interpret atom {atom.kind}")


def _eval_node(node: Node, env: Environment) -> Value:
    """Dispatch an operation node to its handler."""
    head = node.head.kind

    if head in _MATH:
        return _eval_math_chain(node, env)

    if head == AtomKind.NEGATE:
        operand = _expect_float(head, _evaluate(node.tail[0], env))
        return FloatValue(value=-operand)

    if head == AtomKind.ASSIGN:
        return _eval_assign(node, env)

    if head in (AtomKind.GREATER_THAN, AtomKind.LESS_THAN):
        a = _expect_float(head, _evaluate(node.tail[0], env))
        b = _expect_float(head, _evaluate(node.tail[1], env))
        return BoolValue(value=a > b if head == AtomKind.GREATER_THAN else a < b)

    if head in (AtomKind.EQUAL, AtomKind.NOT_EQUAL):
        a = _evaluate(node.tail[0], env)
        b = _evaluate(node.tail[1], env)
        return BoolValue(value=(a == b) == (head == AtomKind.EQUAL))

    if head == AtomKind.BLOCK:
        return _eval_block(node, env)

    if head in (AtomKind.IF, AtomKind.ELSEIF):
        return _eval_if(node, env)

    raise UnknownOperationError(f"Unknown operation {head}")


def _eval_math_chain(node: Node, env: Environment) -> Value:
    """Evaluate a run of arithmetic nodes nested through ``tail[0]``.

    Left-associative chains such as ``1 + 2 + 3`` nest on their first
    operand, so the spine is walked in a loop instead of recursing once
    per operator. Operands bind in reverse: ``tail[0]`` is "right" and
    ``tail[1]`` is "left".
    """
    spine = [node]
    inner = node.tail[0]
    while isinstance(inner, Node) and inner.head.kind in _MATH:
        spine.append(inner)
        inner = inner.tail[0]

    result = _evaluate(inner, env)
    for link in reversed(spine):
        left = _evaluate(link.tail[1], env)
        result = _eval_math(link.head.kind, left, result)
    return result


def _expect_float(op: AtomKind, value: Value) -> float:
    if not isinstance(value, FloatValue):
        raise TypeMismatchError(f"Operator {op} needs a float, got {type_name(value)} {value}")
    return value.value


def _eval_math(op: AtomKind, left: Value, right: Value) -> FloatValue:
    """Apply an arithmetic operator to two floats."""
    if not isinstance(left, FloatValue) or not isinstance(right, FloatValue):
        raise TypeMismatchError(
            f"Cannot evaluate {op} with {type_name(left)} {left} and {type_name(right)} {right}"
        )
    x = left.value
    y = right.value

    if op == AtomKind.PLUS:
        return FloatValue(value=x + y)
    if op == AtomKind.MINUS:
        return FloatValue(value=x - y)
    if op == AtomKind.DIVIDE:
        return FloatValue(value=_divide(x, y))
    if op == AtomKind.MULTIPLY:
        return FloatValue(value=x * y)
    return FloatValue(value=_power(y, x))


def _divide(x: float, y: float) -> float:
    """IEEE-754 division; zero divisors give inf or nan."""
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _power(base: float, exponent: float) -> float:
    """IEEE-754 style power; domain errors give nan, overflow gives inf.

    An infinite result carries the sign of ``base`` when ``exponent`` is an
    odd integer, so ``(-10) ^ 309`` is -inf and ``(-0) ^ (-1)`` is -inf.
    """
    odd = exponent.is_integer() and exponent % 2 == 1
    infinity = math.copysign(math.inf, base) if odd else math.inf
    if base == 0 and exponent < 0:
        return infinity
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return infinity


def _eval_assign(node: Node, env: Environment) -> SymbolValue:
    """Bind the value of ``tail[1]`` to the symbol in ``tail[0]``.

    The value is evaluated before the target is checked, so its side
    effects happen even when the target is rejected.
    """
    value = _evaluate(node.tail[1], env)

    target = node.tail[0]
    if not isinstance(target, Atom) or target.kind != AtomKind.SYMBOL:
        raise EvalError(f"Invalid assignment target {target}")
    assert isinstance(target.value, str)

    env.insert(target.value, value)
    logger.debug("Bound %s = %s", target.value, value)
    return SymbolValue(name=target.value)


def _eval_block(node: Node, env: Environment) -> Value:
    """Evaluate each expression in order; the last one is the result."""
    if not node.tail:
        raise EvalError("Cannot evaluate an empty block")
    for expr in node.tail[:-1]:
        _evaluate(expr, env)
    return _evaluate(node.tail[-1], env)


def _eval_if(node: Node, env: Environment) -> Value:
    """Evaluate the branch selected by the condition, and only that one."""
    condition = _evaluate(node.tail[0], env)
    if not isinstance(condition, BoolValue):
        raise TypeMismatchError(
            f"Non boolean value given to {node.head.kind}: {type_name(condition)} {condition}"
        )
    return _evaluate(node.tail[1] if condition.value else node.tail[2], env)
