"""
Error types for mathexpr parsing, AST construction, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathexpr.core.ir.parse_tree import Rule


class MathExprError(Exception):
    """Base exception for all mathexpr errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class ExpressionSyntaxError(MathExprError):
    """
    Raised when expression text cannot be parsed.

    Examples:
    - Unexpected or unknown characters
    - Unknown function names
    - Missing parentheses or commas
    - Trailing input after a complete expression
    - Nesting deeper than the configured limit
    """

    def __init__(
        self,
        message: str,
        pos: int = 0,
        expected: tuple[str, ...] = (),
        context: ErrorContext | None = None,
    ):
        self.pos = pos
        self.expected = expected
        super().__init__(message, context)


class StructuralError(MathExprError):
    """
    Raised when a concrete parse tree cannot be turned into an AST.

    Examples:
    - Wrapper rule without a child
    - Operator rule missing an operand
    - Function rule missing its argument
    - Rule tag the builder does not know
    """

    def __init__(self, message: str, rule: Rule | None = None):
        self.rule = rule
        super().__init__(message)


class DomainErrorKind(StrEnum):
    """Numeric domain violations detected during evaluation."""

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_LN_ARGUMENT = "invalid_ln_argument"
    INVALID_LOG_ARGUMENTS = "invalid_log_arguments"
    ZERO_ROOT_DEGREE = "zero_root_degree"


class NumericDomainError(MathExprError):
    """
    Raised when operand values fall outside a function's domain.

    Attributes:
        kind: Which domain rule was violated
        operands: Offending operand values by role (e.g. {"value": 0.0})
    """

    def __init__(
        self,
        message: str,
        kind: DomainErrorKind,
        operands: dict[str, float] | None = None,
    ):
        self.kind = kind
        self.operands = operands or {}
        super().__init__(message)


class ConfigError(MathExprError):
    """Raised when a mathexpr.toml file is unreadable or invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of a syntax error.

    Attributes:
        source: The full expression text
        pos: 0-based character offset of the error
    """

    source: str
    pos: int

    @property
    def column(self) -> int:
        """1-indexed column of the error."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format the source with a marker under the error column.

        Returns:
            Location line, the expression, then a caret under the error
        """
        # Whitespace characters are single-width so the caret stays aligned
        flat = self.source.translate(_FLATTEN_WHITESPACE)
        return f"at column {self.column}:\n  {flat}\n  {' ' * self.pos}^"


_FLATTEN_WHITESPACE = str.maketrans("\t\r\n", "   ")


def make_syntax_error(
    message: str,
    source: str,
    pos: int,
    expected: tuple[str, ...] = (),
) -> ExpressionSyntaxError:
    """
    Helper to create an ExpressionSyntaxError with a source snippet.

    Args:
        message: Error description
        source: Full expression text
        pos: 0-based offset of the offending character
        expected: Descriptions of the tokens that would have been accepted

    Returns:
        ExpressionSyntaxError with context attached
    """
    context = ErrorContext(source=source, pos=pos)
    return ExpressionSyntaxError(message, pos=pos, expected=expected, context=context)
