"""
mathexpr expression language.

Tokenizer, grammar, AST builder, and evaluator for fully parenthesised
arithmetic with sin, cos, tan, exp, ln, pow, root, and log.

Usage:
    from mathexpr.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("((1+2)*(3+4))")
    result = evaluate(expr)
    # result == 21.0
"""

from mathexpr.core.expression_lang.calculate import parse_and_evaluate
from mathexpr.core.expression_lang.evaluator import evaluate
from mathexpr.core.expression_lang.grammar import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT
from mathexpr.core.expression_lang.parser import parse_expr

__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_LIMIT", "evaluate", "parse_and_evaluate", "parse_expr"]
