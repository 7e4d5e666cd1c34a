"""
Expression evaluator for mathexpr.

Evaluates expression AST nodes to a float. Pure evaluation: no I/O, no
side effects, no use of Python's eval(). Only the closed set of AST node
types is handled.

Domain rules:
    Div   divisor == 0.0                          → division by zero
    Ln    operand <= 0.0                          → invalid ln argument
    Log   value <= 0.0, base <= 0.0, base == 1.0  → invalid log arguments
    Root  degree == 0.0                           → zero root degree

Everything else follows IEEE-754 and may produce nan or ±inf.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from mathexpr.core.errors import DomainErrorKind, NumericDomainError
from mathexpr.core.ir.expressions import (
    Add,
    Cos,
    Div,
    Exp,
    Expr,
    Ln,
    Log,
    Mul,
    Num,
    Pow,
    Root,
    Sin,
    Sub,
    Tan,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression AST.

    Children are evaluated depth-first; the first failure aborts the whole
    evaluation.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        NumericDomainError: If an operand is outside a function's domain.
        TypeError: If ``expr`` is not an expression node.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Num):
        return expr.value

    if isinstance(expr, Add):
        return _interpret(expr.left) + _interpret(expr.right)
    if isinstance(expr, Sub):
        return _interpret(expr.left) - _interpret(expr.right)
    if isinstance(expr, Mul):
        return _interpret(expr.left) * _interpret(expr.right)
    if isinstance(expr, Div):
        return _interpret_div(expr)

    if isinstance(expr, Sin):
        return _ieee(math.sin, _interpret(expr.operand))
    if isinstance(expr, Cos):
        return _ieee(math.cos, _interpret(expr.operand))
    if isinstance(expr, Tan):
        return _ieee(math.tan, _interpret(expr.operand))
    if isinstance(expr, Exp):
        return _ieee(math.exp, _interpret(expr.operand))
    if isinstance(expr, Ln):
        return _interpret_ln(expr)

    if isinstance(expr, Pow):
        return _pow(_interpret(expr.base), _interpret(expr.exponent))
    if isinstance(expr, Log):
        return _interpret_log(expr)
    if isinstance(expr, Root):
        return _interpret_root(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_div(expr: Div) -> float:
    """Divisor first, so a zero divisor fails before the dividend runs."""
    divisor = _interpret(expr.right)
    if divisor == 0.0:
        logger.debug("Division by zero in %s", expr)
        raise NumericDomainError(
            "Division by zero",
            DomainErrorKind.DIVISION_BY_ZERO,
            {"divisor": divisor},
        )
    return _interpret(expr.left) / divisor


def _interpret_ln(expr: Ln) -> float:
    value = _interpret(expr.operand)
    if value <= 0.0:
        logger.debug("Invalid ln argument in %s", expr)
        raise NumericDomainError(
            f"Invalid argument for ln: {value}",
            DomainErrorKind.INVALID_LN_ARGUMENT,
            {"value": value},
        )
    return math.log(value)


def _interpret_log(expr: Log) -> float:
    """Both operands are evaluated before either is checked."""
    value = _interpret(expr.value)
    base = _interpret(expr.base)
    if value <= 0.0 or base <= 0.0 or base == 1.0:
        logger.debug("Invalid log arguments in %s", expr)
        raise NumericDomainError(
            f"Invalid arguments for log(value, base): value={value} base={base}",
            DomainErrorKind.INVALID_LOG_ARGUMENTS,
            {"value": value, "base": base},
        )
    return math.log(value) / math.log(base)


def _interpret_root(expr: Root) -> float:
    """Degree first, so a zero degree fails before the radicand runs."""
    degree = _interpret(expr.degree)
    if degree == 0.0:
        logger.debug("Zero root degree in %s", expr)
        raise NumericDomainError(
            "Root degree cannot be zero",
            DomainErrorKind.ZERO_ROOT_DEGREE,
            {"degree": degree},
        )
    return _pow(_interpret(expr.value), 1.0 / degree)


# ---------------------------------------------------------------------------
# IEEE-754 results where the math module raises instead
# ---------------------------------------------------------------------------


def _ieee(func: Callable[[float], float], x: float) -> float:
    """Apply a one-argument math function, mapping raises to nan/inf.

    math.sin/cos/tan raise ValueError on ±inf (IEEE: nan); math.exp raises
    OverflowError for large arguments (IEEE: +inf).
    """
    try:
        return func(x)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def _pow(base: float, exponent: float) -> float:
    """base ** exponent with IEEE-754 pow() results instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0.0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0.0:
            # Zero to a negative power: pole, signed for odd integer exponents
            negative = math.copysign(1.0, base) < 0.0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        # Negative base with a non-integer exponent
        return math.nan
