"""
parsemath Parser Package

Implements a recursive descent parser for arithmetic expressions,
producing immutable ASTs with source spans.

Key Features:
- Two-level precedence ladder (+ - below * /) plus left-associative ^
- Unary negation binding tighter than every binary operator
- Whole-input parsing: trailing tokens are rejected, never ignored
- Structured syntax errors with help text and suggestions

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, Node, Literal, Unary, Binary, UnaryOperator, BinaryOperator,
    SourceSpan, format_ast
)
from .parser import Parser, parse_string
from .errors import (
    ParseError, UnexpectedTokenError, UnclosedParenError, TrailingInputError
)

__all__ = [
    # Core parser
    "Parser", "parse_string",

    # AST nodes
    "ASTNodeType", "Node", "Literal", "Unary", "Binary",
    "UnaryOperator", "BinaryOperator", "SourceSpan", "format_ast",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnclosedParenError", "TrailingInputError",
]
