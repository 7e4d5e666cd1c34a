"""
Intermediate representations for mathexpr.

- parse_tree: the grammar-shaped concrete tree (Rule, ParseNode)
- expressions: the typed expression AST (Expr and its node types)
"""

from mathexpr.core.ir.expressions import (
    BINARY_NODES,
    UNARY_NODES,
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

__all__ = [
    "BINARY_NODES",
    "UNARY_NODES",
    "Add",
    "Cos",
    "Div",
    "Exp",
    "Expr",
    "Ln",
    "Log",
    "Mul",
    "Num",
    "ParseNode",
    "Pow",
    "Root",
    "Rule",
    "Sin",
    "Sub",
    "Tan",
]
