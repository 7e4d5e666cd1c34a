"""
Expression parser for mathexpr.

Runs the grammar over the source text and builds the typed AST from the
resulting concrete parse tree. The parse tree is not exposed.
"""

from __future__ import annotations

import logging

from mathexpr.core.expression_lang.builder import build_expr
from mathexpr.core.expression_lang.grammar import DEFAULT_MAX_DEPTH, parse_tree
from mathexpr.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


def parse_expr(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "((1+2)*(3+4))")
        max_depth: Maximum expression nesting depth

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionSyntaxError: If the expression is invalid.
        StructuralError: If the parse tree cannot be turned into an AST.
    """
    tree = parse_tree(source, max_depth=max_depth)
    expr = build_expr(tree)
    logger.debug("Parsed %r as %s", source, expr)
    return expr
