"""
Concrete parse tree produced by the grammar.

Nodes mirror grammar rules one-to-one: an ``input`` root wraps one
``expression``, which wraps exactly one of a number literal, an operator
form, or a function call. Operator and function nodes hold ``expression``
children. The tree is consumed by the AST builder and then dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Rule(StrEnum):
    """Grammar rule tags."""

    # Wrappers
    INPUT = "input"
    EXPRESSION = "expression"

    # Literal
    NUM = "num"

    # Parenthesised operators
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    # One-argument functions
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    EXP = "exp"
    LN = "ln"

    # Two-argument functions
    POW = "pow"
    ROOT = "root"
    LOG = "log"


@dataclass(frozen=True)
class ParseNode:
    """A matched grammar rule.

    Attributes:
        rule: The rule that matched
        text: The source slice covered by this rule
        pos: 0-based offset of ``text`` in the source
        children: Sub-rule matches in source order
    """

    rule: Rule
    text: str
    pos: int = 0
    children: tuple[ParseNode, ...] = field(default_factory=tuple)

    def pretty(self, indent: int = 0) -> str:
        """Render the subtree one rule per line, for debugging."""
        pad = "  " * indent
        if not self.children:
            lines = [f"{pad}{self.rule} {self.text!r}"]
        else:
            lines = [f"{pad}{self.rule}"]
            lines.extend(child.pretty(indent + 1) for child in self.children)
        return "\n".join(lines)
