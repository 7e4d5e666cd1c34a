"""Parse-then-evaluate convenience for callers that only want the number."""

from __future__ import annotations

from mathexpr.core.expression_lang.evaluator import evaluate
from mathexpr.core.expression_lang.grammar import DEFAULT_MAX_DEPTH
from mathexpr.core.expression_lang.parser import parse_expr


def parse_and_evaluate(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> float:
    """Parse an expression string and evaluate it.

    Raises:
        ExpressionSyntaxError: If the expression is invalid.
        StructuralError: If the parse tree cannot be turned into an AST.
        NumericDomainError: If evaluation violates a domain rule.
    """
    return evaluate(parse_expr(source, max_depth=max_depth))
