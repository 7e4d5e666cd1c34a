"""
mathexpr - parse and evaluate fully parenthesised arithmetic expressions.

    >>> from mathexpr import parse_and_evaluate
    >>> parse_and_evaluate("((1+2)*(3+4))")
    21.0
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    ConfigError,
    ExpressionSyntaxError,
    MathExprError,
    NumericDomainError,
    StructuralError,
)
from .core.expression_lang import evaluate, parse_and_evaluate, parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_expr",
    "evaluate",
    "parse_and_evaluate",
    "MathExprError",
    "ExpressionSyntaxError",
    "StructuralError",
    "NumericDomainError",
    "ConfigError",
]
