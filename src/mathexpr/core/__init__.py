"""Core mathexpr functionality: IR, grammar, AST builder, evaluator, configuration."""

from . import ir
from .config import MathExprConfig, load_config
from .errors import (
    ConfigError,
    DomainErrorKind,
    ErrorContext,
    ExpressionSyntaxError,
    MathExprError,
    NumericDomainError,
    StructuralError,
)
from .expression_lang import DEFAULT_MAX_DEPTH, evaluate, parse_and_evaluate, parse_expr

__all__ = [
    "ir",
    "MathExprError",
    "ExpressionSyntaxError",
    "StructuralError",
    "NumericDomainError",
    "DomainErrorKind",
    "ConfigError",
    "ErrorContext",
    "MathExprConfig",
    "load_config",
    "DEFAULT_MAX_DEPTH",
    "parse_expr",
    "evaluate",
    "parse_and_evaluate",
]
