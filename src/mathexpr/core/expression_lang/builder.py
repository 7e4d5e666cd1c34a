"""
AST builder: concrete parse tree → expression AST.

Dispatch is by rule tag only; the matched text is read for number literals
and nothing else.
"""

from __future__ import annotations

from mathexpr.core.errors import StructuralError
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
from mathexpr.core.ir.parse_tree import ParseNode, Rule

_WRAPPERS = frozenset({Rule.INPUT, Rule.EXPRESSION})

_BINARY: dict[Rule, type[Add | Sub | Mul | Div]] = {
    Rule.PLUS: Add,
    Rule.MINUS: Sub,
    Rule.MULTIPLY: Mul,
    Rule.DIVIDE: Div,
}

_UNARY: dict[Rule, type[Sin | Cos | Tan | Exp | Ln]] = {
    Rule.SIN: Sin,
    Rule.COS: Cos,
    Rule.TAN: Tan,
    Rule.EXP: Exp,
    Rule.LN: Ln,
}


def build_expr(node: ParseNode) -> Expr:
    """Build an expression AST from a concrete parse tree node.

    Raises:
        StructuralError: If the tree is missing children or carries a rule
            the builder does not handle.
    """
    rule = node.rule

    if rule in _WRAPPERS:
        if not node.children:
            raise StructuralError("Empty expression", rule)
        return build_expr(node.children[0])

    if rule == Rule.NUM:
        return _build_num(node)

    if rule in _BINARY or rule in (Rule.POW, Rule.LOG, Rule.ROOT):
        left, right = _operands(node)
        if rule == Rule.POW:
            return Pow(base=left, exponent=right)
        if rule == Rule.LOG:
            return Log(value=left, base=right)
        if rule == Rule.ROOT:
            return Root(value=left, degree=right)
        return _BINARY[rule](left=left, right=right)

    if rule in _UNARY:
        if not node.children:
            raise StructuralError("Missing argument", rule)
        return _UNARY[rule](operand=build_expr(node.children[0]))

    raise StructuralError(f"Unexpected rule: {rule}", rule)


def _build_num(node: ParseNode) -> Num:
    try:
        return Num(value=float(node.text))
    except ValueError as e:
        raise StructuralError(f"Failed to parse number '{node.text}': {e}", node.rule) from e


def _operands(node: ParseNode) -> tuple[Expr, Expr]:
    """Left and right operands, built left first."""
    if len(node.children) < 1:
        raise StructuralError("Missing left operand", node.rule)
    if len(node.children) < 2:
        raise StructuralError("Missing right operand", node.rule)
    return build_expr(node.children[0]), build_expr(node.children[1])
