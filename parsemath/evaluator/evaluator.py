"""
Tree-walking evaluator for parsemath ASTs.

Reduces a tree to a float using IEEE double arithmetic. Division by zero
and powers without a real result are errors, never silent inf/NaN values.

Author: xwest
"""

import math

from ..parser.ast_nodes import (
    Node, Literal, Unary, Binary, UnaryOperator, BinaryOperator
)
from .errors import (
    create_division_by_zero_error, create_zero_negative_power_error,
    create_invalid_power_error, create_numeric_overflow_error
)


class Evaluator:
    """
    Evaluates AST nodes.

    Holds no state between calls; one instance can evaluate any number of
    trees.
    """

    def evaluate(self, node: Node) -> float:
        """
        Evaluate a tree.

        Raises:
            EvaluationError: On division by zero or an invalid power
        """
        if isinstance(node, Literal):
            return node.value
        elif isinstance(node, Unary):
            return self._evaluate_unary(node)
        elif isinstance(node, Binary):
            return self._evaluate_binary(node)
        raise TypeError(f"Cannot evaluate {node!r}")

    def _evaluate_unary(self, node: Unary) -> float:
        operand = self.evaluate(node.operand)

        if node.operator == UnaryOperator.NEGATE:
            return -operand
        raise TypeError(f"Unknown unary operator {node.operator!r}")

    def _evaluate_binary(self, node: Binary) -> float:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        operator = node.operator

        if operator == BinaryOperator.ADD:
            return left + right
        elif operator == BinaryOperator.SUB:
            return left - right
        elif operator == BinaryOperator.MUL:
            return left * right
        elif operator == BinaryOperator.DIV:
            if right == 0.0:
                raise create_division_by_zero_error(node.right)
            return left / right
        elif operator == BinaryOperator.POW:
            return self._evaluate_power(node, left, right)
        raise TypeError(f"Unknown binary operator {operator!r}")

    def _evaluate_power(self, node: Binary, base: float, exponent: float) -> float:
        if base == 0.0 and exponent < 0:
            raise create_zero_negative_power_error(node)
        if base < 0 and not exponent.is_integer():
            raise create_invalid_power_error(node, base, exponent)

        try:
            return math.pow(base, exponent)
        except OverflowError:
            raise create_numeric_overflow_error(node) from None


def evaluate_ast(node: Node) -> float:
    """
    Convenience function to evaluate a tree.

    Raises:
        EvaluationError: If the tree cannot be reduced to a number
    """
    return Evaluator().evaluate(node)
