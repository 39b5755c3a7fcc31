"""
Abstract Syntax Tree node definitions for parsemath.

The tree is a tagged union of three immutable node kinds. Nodes own their
children exclusively, carry no parent pointers, and are never mutated
after the parser builds them. Source spans are attached for diagnostics
but do not take part in equality, so hand-built trees compare equal to
parsed ones.

Author: xwest
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from ..lexer.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    UNARY = "Unary"
    BINARY = "Binary"


class UnaryOperator(Enum):
    """Prefix operators."""
    NEGATE = "-"


class BinaryOperator(Enum):
    """Infix operators, valued by their source symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


_NOWHERE = SourceLocation("<ast>", 0, 0, 0)


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


NO_SPAN = SourceSpan(_NOWHERE, _NOWHERE)


@dataclass(frozen=True)
class Literal:
    """Numeric literal. The value is always finite."""
    value: float
    span: SourceSpan = field(default=NO_SPAN, compare=False, repr=False)

    node_type = ASTNodeType.LITERAL

    def children(self) -> List["Node"]:
        return []


@dataclass(frozen=True)
class Unary:
    """Prefix operation."""
    operator: UnaryOperator
    operand: "Node"
    span: SourceSpan = field(default=NO_SPAN, compare=False, repr=False)

    node_type = ASTNodeType.UNARY

    def children(self) -> List["Node"]:
        return [self.operand]


@dataclass(frozen=True)
class Binary:
    """Infix operation."""
    operator: BinaryOperator
    left: "Node"
    right: "Node"
    span: SourceSpan = field(default=NO_SPAN, compare=False, repr=False)

    node_type = ASTNodeType.BINARY

    def children(self) -> List["Node"]:
        return [self.left, self.right]


Node = Union[Literal, Unary, Binary]


# Names used by format_ast
_OPERATOR_NAMES = {
    UnaryOperator.NEGATE: "Neg",
    BinaryOperator.ADD: "Add",
    BinaryOperator.SUB: "Sub",
    BinaryOperator.MUL: "Mul",
    BinaryOperator.DIV: "Div",
    BinaryOperator.POW: "Pow",
}


def _format_value(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_ast(node: Node) -> str:
    """
    Render a tree in compact functional form, e.g. `Add(1, Mul(2, 3))`.
    """
    if isinstance(node, Literal):
        return _format_value(node.value)
    elif isinstance(node, Unary):
        return f"{_OPERATOR_NAMES[node.operator]}({format_ast(node.operand)})"
    elif isinstance(node, Binary):
        return (f"{_OPERATOR_NAMES[node.operator]}"
                f"({format_ast(node.left)}, {format_ast(node.right)})")
    raise TypeError(f"Not an AST node: {node!r}")
