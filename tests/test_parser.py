"""
Test suite for the parsemath parser.

Tests cover:
- Tree shapes for each operator
- Precedence and associativity
- Syntax errors and their locations

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from parsemath.lexer.lexer import tokenize_string
from parsemath.lexer.tokens import TokenType
from parsemath.parser.parser import Parser, parse_string
from parsemath.parser.ast_nodes import (
    Literal, Unary, Binary, UnaryOperator, BinaryOperator, ASTNodeType, format_ast
)
from parsemath.parser.errors import (
    ParseError, UnexpectedTokenError, UnclosedParenError, TrailingInputError
)


def num(value):
    return Literal(float(value))


def binop(operator, left, right):
    return Binary(operator, left, right)


ADD, SUB, MUL, DIV, POW = (BinaryOperator.ADD, BinaryOperator.SUB, BinaryOperator.MUL,
                           BinaryOperator.DIV, BinaryOperator.POW)


class TestParser(unittest.TestCase):
    """Test cases for building trees."""

    def test_parser_number(self):
        """Test a lone number."""
        self.assertEqual(parse_string("42"), num(42))

    def test_parser_add(self):
        self.assertEqual(parse_string("1+2"), binop(ADD, num(1), num(2)))

    def test_parser_sub(self):
        self.assertEqual(parse_string("1-2"), binop(SUB, num(1), num(2)))

    def test_parser_mul(self):
        self.assertEqual(parse_string("1*2"), binop(MUL, num(1), num(2)))

    def test_parser_div(self):
        self.assertEqual(parse_string("1/2"), binop(DIV, num(1), num(2)))

    def test_parser_caret(self):
        self.assertEqual(parse_string("1^2"), binop(POW, num(1), num(2)))

    def test_parser_negative(self):
        self.assertEqual(parse_string("-1"), Unary(UnaryOperator.NEGATE, num(1)))

    def test_multiplication_binds_tighter(self):
        """Test 1+2*3 parses as Add(1, Mul(2, 3))."""
        self.assertEqual(parse_string("1+2*3"),
                         binop(ADD, num(1), binop(MUL, num(2), num(3))))

    def test_parentheses_override_precedence(self):
        self.assertEqual(parse_string("(1+2)*3"),
                         binop(MUL, binop(ADD, num(1), num(2)), num(3)))

    def test_left_associativity(self):
        """Test a-b-c groups as (a-b)-c and a/b/c as (a/b)/c."""
        self.assertEqual(parse_string("10-2-3"),
                         binop(SUB, binop(SUB, num(10), num(2)), num(3)))
        self.assertEqual(parse_string("8/4/2"),
                         binop(DIV, binop(DIV, num(8), num(4)), num(2)))

    def test_power_left_associativity(self):
        """Test 2^3^2 groups as (2^3)^2."""
        self.assertEqual(parse_string("2^3^2"),
                         binop(POW, binop(POW, num(2), num(3)), num(2)))
        self.assertEqual(format_ast(parse_string("2^3^2")), "Pow(Pow(2, 3), 2)")

    def test_power_binds_tighter_than_multiplication(self):
        self.assertEqual(parse_string("2*3^2"),
                         binop(MUL, num(2), binop(POW, num(3), num(2))))

    def test_unary_binds_tighter_than_binary(self):
        """Test -2*3 negates 2 first, and -2^2 is (-2)^2."""
        neg2 = Unary(UnaryOperator.NEGATE, num(2))
        self.assertEqual(parse_string("-2*3"), binop(MUL, neg2, num(3)))
        self.assertEqual(parse_string("-2^2"), binop(POW, neg2, num(2)))

    def test_negative_exponent(self):
        self.assertEqual(parse_string("2^-1"),
                         binop(POW, num(2), Unary(UnaryOperator.NEGATE, num(1))))

    def test_nested_negation(self):
        self.assertEqual(parse_string("--3"),
                         Unary(UnaryOperator.NEGATE, Unary(UnaryOperator.NEGATE, num(3))))

    def test_negated_group(self):
        self.assertEqual(parse_string("-(2+3)"),
                         Unary(UnaryOperator.NEGATE, binop(ADD, num(2), num(3))))

    def test_spans(self):
        """Test node spans point back into the source."""
        tree = parse_string("1 + (2 * 3)")
        self.assertEqual(tree.span.start.offset, 0)
        self.assertEqual(tree.span.end.offset, 10)
        self.assertEqual(tree.right.span.start.offset, 4)
        self.assertEqual(tree.node_type, ASTNodeType.BINARY)

    def test_format_ast(self):
        self.assertEqual(format_ast(parse_string("1+2*3")), "Add(1, Mul(2, 3))")
        self.assertEqual(format_ast(parse_string("-(0.5^2)")), "Neg(Pow(0.5, 2))")

    def test_unterminated_token_list(self):
        """Test a token list without EOF is treated as ending there."""
        tokens = tokenize_string("1+2")[:-1]
        self.assertEqual(Parser(tokens).parse(), binop(ADD, num(1), num(2)))


class TestParserErrors(unittest.TestCase):
    """Test cases for syntax errors."""

    def test_missing_operand(self):
        """Test '1+' reports an unexpected end of input."""
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("1+")
        error = ctx.exception
        self.assertEqual(error.token.type, TokenType.EOF)
        self.assertEqual(error.position, 2)
        self.assertEqual(error.expected, (TokenType.NUMBER, TokenType.LEFT_PAREN))
        self.assertEqual(error.diagnostic.code, "P001")

    def test_empty_expression(self):
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("")
        self.assertEqual(ctx.exception.position, 0)

    def test_operator_without_left_operand(self):
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("*3")
        self.assertEqual(ctx.exception.token.type, TokenType.STAR)

    def test_unary_plus_not_supported(self):
        with self.assertRaises(UnexpectedTokenError):
            parse_string("+1")

    def test_empty_parentheses(self):
        with self.assertRaises(UnexpectedTokenError) as ctx:
            parse_string("()")
        self.assertEqual(ctx.exception.token.type, TokenType.RIGHT_PAREN)
        self.assertEqual(ctx.exception.position, 1)

    def test_unclosed_paren(self):
        """Test '(1+2' points at the opening parenthesis."""
        with self.assertRaises(UnclosedParenError) as ctx:
            parse_string("(1+2")
        self.assertEqual(ctx.exception.position, 0)
        self.assertEqual(ctx.exception.diagnostic.code, "P004")

    def test_unclosed_inner_paren(self):
        with self.assertRaises(UnclosedParenError) as ctx:
            parse_string("1 * ((2)")
        self.assertEqual(ctx.exception.position, 4)

    def test_unclosed_paren_followed_by_number(self):
        with self.assertRaises(UnclosedParenError):
            parse_string("(1 2")

    def test_trailing_input(self):
        """Test '1 2' is rejected rather than parsed as 1."""
        with self.assertRaises(TrailingInputError) as ctx:
            parse_string("1 2")
        self.assertEqual(ctx.exception.position, 2)
        self.assertEqual(ctx.exception.token.type, TokenType.NUMBER)
        self.assertEqual(ctx.exception.diagnostic.code, "P013")

    def test_unmatched_close_paren(self):
        with self.assertRaises(TrailingInputError) as ctx:
            parse_string("1)")
        self.assertEqual(ctx.exception.position, 1)

    def test_adjacent_groups_are_trailing_input(self):
        with self.assertRaises(TrailingInputError):
            parse_string("(1)(2)")

    def test_errors_share_base_class(self):
        for source in ("1+", "(1", "1 2"):
            with self.assertRaises(ParseError):
                parse_string(source)


if __name__ == '__main__':
    unittest.main()
