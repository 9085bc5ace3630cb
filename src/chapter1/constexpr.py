"""Compile-time evaluation of integer expressions.

Functions decorated with :func:`constexpr` may be evaluated while folding an
expression's syntax tree, without running any program code. Folding succeeds
only when every operand is an integer literal, a name bound to a known
constant, or the result of a ``constexpr`` call on foldable arguments. The
same functions remain ordinary callables at run time.

Example:
    >>> fold("select_min(a, b)", {"a": 1, "b": 4})
    1
"""

from __future__ import annotations

import ast
import inspect
import logging
import operator
from collections.abc import Callable, Mapping
from typing import TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., int])

# Registered constant-evaluable functions, by name
CONSTEXPR_FUNCTIONS: dict[str, Callable[..., int]] = {}

_BINARY_OPS: dict[type[ast.operator], Callable[[int, int], int]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
}


class NotConstantError(ValueError):
    """Raised when an expression cannot be evaluated at compile time."""


def constexpr(func: F) -> F:
    """Mark ``func`` as evaluable during constant folding."""
    CONSTEXPR_FUNCTIONS[func.__name__] = func
    return func


def fold(expression: str, constants: Mapping[str, int] | None = None) -> int:
    """Evaluate an integer expression at compile time.

    Args:
        expression: Python expression source, e.g. ``"select_min(a, b)"``.
        constants: Names bound to compile-time constant values.

    Returns:
        The folded integer value.

    Raises:
        NotConstantError: If any part of the expression is not constant.
        SyntaxError: If the expression does not parse.
    """
    tree = ast.parse(expression, mode="eval")
    value = _fold_node(tree.body, dict(constants or {}))
    logger.debug("Folded %r to %d", expression, value)
    return value


def is_constant(expression: str, constants: Mapping[str, int] | None = None) -> bool:
    """Check if an expression can be folded at compile time."""
    try:
        fold(expression, constants)
    except NotConstantError:
        return False
    return True


def _fold_node(node: ast.expr, constants: dict[str, int]) -> int:
    match node:
        case ast.Constant(value=bool()):
            msg = f"Boolean literal is not an integer constant: {ast.unparse(node)}"
            raise NotConstantError(msg)
        case ast.Constant(value=int() as val):
            return val
        case ast.Name(id=name):
            if name not in constants:
                msg = f"Name {name!r} is not a compile-time constant"
                raise NotConstantError(msg)
            return constants[name]
        case ast.UnaryOp(op=ast.USub(), operand=operand):
            return -_fold_node(operand, constants)
        case ast.UnaryOp(op=ast.UAdd(), operand=operand):
            return _fold_node(operand, constants)
        case ast.BinOp(left=left, op=op, right=right) if type(op) in _BINARY_OPS:
            lhs = _fold_node(left, constants)
            rhs = _fold_node(right, constants)
            if rhs == 0 and isinstance(op, (ast.FloorDiv, ast.Mod)):
                msg = f"Division by zero in constant expression: {ast.unparse(node)}"
                raise NotConstantError(msg)
            return _BINARY_OPS[type(op)](lhs, rhs)
        case ast.Call(func=ast.Name(id=name), args=args, keywords=[]):
            func = CONSTEXPR_FUNCTIONS.get(name)
            if func is None:
                msg = f"Function {name!r} is not constexpr"
                raise NotConstantError(msg)
            values = [_fold_node(arg, constants) for arg in args]
            try:
                inspect.signature(func).bind(*values)
            except TypeError as e:
                msg = f"Bad arguments to constexpr {name!r}: {e}"
                raise NotConstantError(msg) from e
            return func(*values)
    msg = f"Unsupported construct in constant expression: {ast.unparse(node)}"
    raise NotConstantError(msg)
