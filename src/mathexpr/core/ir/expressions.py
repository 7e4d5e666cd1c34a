"""
Expression AST for mathexpr.

A closed set of frozen node types produced by the AST builder and consumed
by the evaluator:

- Literal: Num
- Arithmetic: Add, Sub, Mul, Div
- Unary functions: Sin, Cos, Tan, Exp, Ln
- Binary functions: Pow(base, exponent), Root(value, degree), Log(value, base)

Nodes never share children and are immutable once built.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------


class Num(BaseModel):
    """A numeric literal. Any float, including inf/nan, is accepted."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


# ---------------------------------------------------------------------------
# Infix arithmetic
# ---------------------------------------------------------------------------


class _Infix(BaseModel):
    """Shared shape for the parenthesised binary forms."""

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    symbol: ClassVar[str] = ""

    def __str__(self) -> str:
        return f"({self.left}{self.symbol}{self.right})"


class Add(_Infix):
    """(left + right)"""

    symbol: ClassVar[str] = "+"


class Sub(_Infix):
    """(left - right)"""

    symbol: ClassVar[str] = "-"


class Mul(_Infix):
    """(left * right)"""

    symbol: ClassVar[str] = "*"


class Div(_Infix):
    """(left / right)"""

    symbol: ClassVar[str] = "/"


# ---------------------------------------------------------------------------
# Unary functions
# ---------------------------------------------------------------------------


class _Unary(BaseModel):
    """Shared shape for one-argument function calls."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    name: ClassVar[str] = ""

    def __str__(self) -> str:
        return f"{self.name}({self.operand})"


class Sin(_Unary):
    """Sine, argument in radians."""

    name: ClassVar[str] = "sin"


class Cos(_Unary):
    """Cosine, argument in radians."""

    name: ClassVar[str] = "cos"


class Tan(_Unary):
    """Tangent, argument in radians."""

    name: ClassVar[str] = "tan"


class Exp(_Unary):
    """e raised to the operand."""

    name: ClassVar[str] = "exp"


class Ln(_Unary):
    """Natural logarithm."""

    name: ClassVar[str] = "ln"


# ---------------------------------------------------------------------------
# Binary functions
# ---------------------------------------------------------------------------


class Pow(BaseModel):
    """pow(base, exponent)"""

    base: Expr
    exponent: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"pow({self.base},{self.exponent})"


class Root(BaseModel):
    """
    root(value, degree): the degree-th root of value.

    The first call argument is the radicand, the second the degree.
    """

    value: Expr
    degree: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"root({self.value},{self.degree})"


class Log(BaseModel):
    """
    log(value, base): logarithm of value in the given base.

    The first call argument is the value, the second the base.
    """

    value: Expr
    base: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"log({self.value},{self.base})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Num | Add | Sub | Mul | Div | Sin | Cos | Tan | Exp | Ln | Pow | Root | Log

BINARY_NODES = (Add, Sub, Mul, Div, Pow, Root, Log)
UNARY_NODES = (Sin, Cos, Tan, Exp, Ln)

# Rebuild models for recursive forward references
for _model in (_Infix, *BINARY_NODES, _Unary, *UNARY_NODES):
    _model.model_rebuild()
del _model
