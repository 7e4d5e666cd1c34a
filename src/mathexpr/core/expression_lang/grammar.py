"""
Recursive descent grammar for mathexpr expressions.

Grammar:
    input         → expression EOF
    expression    → num | binary_form | function_call
    num           → ("+" | "-")? NUMBER          (sign must touch the digits)
    binary_form   → "(" expression operator expression ")"
    operator      → "+" | "-" | "*" | "/"
    function_call → unary_name "(" expression ")"
                  | binary_name "(" expression "," expression ")"
    unary_name    → "sin" | "cos" | "tan" | "exp" | "ln"
    binary_name   → "pow" | "root" | "log"

Whitespace between tokens is ignored. The result is a concrete parse tree
of ParseNode objects tagged with Rule members; operator and function nodes
always carry ``expression`` children.
"""

from __future__ import annotations

from mathexpr.core.errors import ExpressionSyntaxError, make_syntax_error
from mathexpr.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from mathexpr.core.ir.parse_tree import ParseNode, Rule

DEFAULT_MAX_DEPTH = 128

# Parse, build and evaluate each take up to three frames per nesting level;
# this keeps the deepest accepted input under the default recursion limit.
MAX_DEPTH_LIMIT = 200

# Operator token → rule tag for the parenthesised binary form
OPERATORS: dict[TokenKind, Rule] = {
    TokenKind.PLUS: Rule.PLUS,
    TokenKind.MINUS: Rule.MINUS,
    TokenKind.STAR: Rule.MULTIPLY,
    TokenKind.SLASH: Rule.DIVIDE,
}

# Function name → (rule tag, argument count)
FUNCTIONS: dict[str, tuple[Rule, int]] = {
    "sin": (Rule.SIN, 1),
    "cos": (Rule.COS, 1),
    "tan": (Rule.TAN, 1),
    "exp": (Rule.EXP, 1),
    "ln": (Rule.LN, 1),
    "pow": (Rule.POW, 2),
    "root": (Rule.ROOT, 2),
    "log": (Rule.LOG, 2),
}

_TOKEN_NAMES: dict[TokenKind, str] = {
    TokenKind.NUMBER: "number",
    TokenKind.IDENT: "function name",
    TokenKind.PLUS: "'+'",
    TokenKind.MINUS: "'-'",
    TokenKind.STAR: "'*'",
    TokenKind.SLASH: "'/'",
    TokenKind.LPAREN: "'('",
    TokenKind.RPAREN: "')'",
    TokenKind.COMMA: "','",
    TokenKind.EOF: "end of input",
}

_EXPRESSION_START = ("number", "'('", "function name")


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return repr(tok.value)


class _Parser:
    """Recursive descent parser producing a concrete parse tree."""

    def __init__(self, source: str, tokens: list[Token], max_depth: int) -> None:
        self.source = source
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.depth = 0
        self.last_end = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        self.last_end = tok.end
        return tok

    def error(self, message: str, expected: tuple[str, ...] = ()) -> ExpressionSyntaxError:
        return make_syntax_error(message, self.source, self.current.pos, expected)

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise self.error(
                f"Expected {_TOKEN_NAMES[kind]}, got {_describe(tok)}",
                (_TOKEN_NAMES[kind],),
            )
        return self.advance()

    def node(self, rule: Rule, start: int, children: tuple[ParseNode, ...] = ()) -> ParseNode:
        """Build a node spanning from ``start`` to the last consumed token."""
        return ParseNode(rule, self.source[start : self.last_end], start, children)

    # -- Grammar rules --

    def parse_input(self) -> ParseNode:
        """expression EOF"""
        expr = self.parse_expression()
        if self.current.kind != TokenKind.EOF:
            raise self.error(
                f"Unexpected token after expression: {_describe(self.current)}",
                ("end of input",),
            )
        return ParseNode(Rule.INPUT, self.source, 0, (expr,))

    def parse_expression(self) -> ParseNode:
        """num | binary_form | function_call"""
        if self.depth >= self.max_depth:
            raise self.error(f"Expression nesting exceeds maximum depth of {self.max_depth}")
        self.depth += 1

        tok = self.current
        if self._at_number():
            inner = self.parse_num()
        elif tok.kind == TokenKind.LPAREN:
            inner = self.parse_binary_form()
        elif tok.kind == TokenKind.IDENT:
            inner = self.parse_function_call()
        else:
            raise self.error(f"Expected expression, got {_describe(tok)}", _EXPRESSION_START)

        self.depth -= 1
        return self.node(Rule.EXPRESSION, inner.pos, (inner,))

    def _at_number(self) -> bool:
        tok = self.current
        if tok.kind == TokenKind.NUMBER:
            return True
        if tok.kind in (TokenKind.PLUS, TokenKind.MINUS):
            nxt = self.peek(1)
            return nxt.kind == TokenKind.NUMBER and nxt.pos == tok.end
        return False

    def parse_num(self) -> ParseNode:
        """('+' | '-')? NUMBER"""
        start = self.current.pos
        if self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
            self.advance()
        self.expect(TokenKind.NUMBER)
        return self.node(Rule.NUM, start)

    def parse_binary_form(self) -> ParseNode:
        """'(' expression operator expression ')'"""
        start = self.expect(TokenKind.LPAREN).pos
        left = self.parse_expression()

        op = self.current
        if op.kind not in OPERATORS:
            raise self.error(
                f"Expected operator, got {_describe(op)}",
                tuple(_TOKEN_NAMES[kind] for kind in OPERATORS),
            )
        self.advance()

        right = self.parse_expression()
        self.expect(TokenKind.RPAREN)
        return self.node(OPERATORS[op.kind], start, (left, right))

    def parse_function_call(self) -> ParseNode:
        """name '(' expression (',' expression)? ')'"""
        name_tok = self.current
        if name_tok.value not in FUNCTIONS:
            raise self.error(
                f"Unknown function: {name_tok.value!r}",
                tuple(FUNCTIONS),
            )
        rule, arity = FUNCTIONS[name_tok.value]
        self.advance()

        self.expect(TokenKind.LPAREN)
        args = [self.parse_expression()]
        for _ in range(arity - 1):
            self.expect(TokenKind.COMMA)
            args.append(self.parse_expression())
        self.expect(TokenKind.RPAREN)

        return self.node(rule, name_tok.pos, tuple(args))


def parse_tree(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> ParseNode:
    """Parse an expression string into a concrete parse tree.

    Args:
        source: Expression string (e.g., "(12+34)", "log(8, 2)")
        max_depth: Maximum expression nesting depth

    Returns:
        Root ``input`` node of the concrete parse tree.

    Raises:
        ExpressionSyntaxError: If the expression is invalid.
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT.
    """
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")

    tokens = tokenize(source)
    return _Parser(source, tokens, max_depth).parse_input()
