"""
parsemath Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    expression := term (( '+' | '-' ) term)*
    term       := power (( '*' | '/' ) power)*
    power      := unary ( '^' unary )*
    unary      := '-' unary | primary
    primary    := NUMBER | '(' expression ')'

The grammar is LL(1): every decision looks at the current token only and
the cursor never moves backwards.

Author: xwest
"""

from typing import Dict, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from .ast_nodes import (
    Node, Literal, Unary, Binary, UnaryOperator, BinaryOperator, SourceSpan
)
from .errors import (
    create_unexpected_token_error, create_unclosed_paren_error,
    create_trailing_input_error
)


# Token types accepted by each binary precedence level
ADDITIVE_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}

# What may start an operand, reported when none is found
OPERAND_START = (TokenType.NUMBER, TokenType.LEFT_PAREN)


class Parser:
    """
    Arithmetic expression parser.

    Consumes a token list (as produced by the lexer, ending with EOF) and
    builds a single AST. A Parser holds one forward-only cursor and is
    meant for a single parse.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Node:
        """
        Parse the whole token list into an AST.

        Returns:
            Root node of the expression

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        expr = self._parse_expression()

        if not self._check(TokenType.EOF):
            raise create_trailing_input_error(self._peek())

        return expr

    # Grammar rules

    def _parse_expression(self) -> Node:
        """expression := term (( '+' | '-' ) term)*"""
        left = self._parse_term()

        while self._peek().type in ADDITIVE_OPERATORS:
            operator = ADDITIVE_OPERATORS[self._advance().type]
            right = self._parse_term()
            left = self._make_binary(operator, left, right)

        return left

    def _parse_term(self) -> Node:
        """term := power (( '*' | '/' ) power)*"""
        left = self._parse_power()

        while self._peek().type in MULTIPLICATIVE_OPERATORS:
            operator = MULTIPLICATIVE_OPERATORS[self._advance().type]
            right = self._parse_power()
            left = self._make_binary(operator, left, right)

        return left

    def _parse_power(self) -> Node:
        """power := unary ( '^' unary )*"""
        left = self._parse_unary()

        while self._match(TokenType.CARET):
            right = self._parse_unary()
            left = self._make_binary(BinaryOperator.POW, left, right)

        return left

    def _parse_unary(self) -> Node:
        """unary := '-' unary | primary"""
        if self._check(TokenType.MINUS):
            operator_token = self._advance()
            operand = self._parse_unary()
            span = SourceSpan(operator_token.location, operand.span.end)
            return Unary(UnaryOperator.NEGATE, operand, span)

        return self._parse_primary()

    def _parse_primary(self) -> Node:
        """primary := NUMBER | '(' expression ')'"""
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal(token.value, SourceSpan(token.location, token.location))

        if token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        raise create_unexpected_token_error(OPERAND_START, token)

    def _parse_grouping(self) -> Node:
        """Parse parenthesized expression."""
        open_token = self._advance()  # Consume (

        expr = self._parse_expression()

        if not self._check(TokenType.RIGHT_PAREN):
            raise create_unclosed_paren_error(open_token, self._peek())
        close_token = self._advance()

        # Widen the span to cover the parentheses
        span = SourceSpan(open_token.location, close_token.location)
        if isinstance(expr, Literal):
            return Literal(expr.value, span)
        if isinstance(expr, Unary):
            return Unary(expr.operator, expr.operand, span)
        return Binary(expr.operator, expr.left, expr.right, span)

    # Utility methods

    def _make_binary(self, operator: BinaryOperator, left: Node, right: Node) -> Binary:
        return Binary(operator, left, right, SourceSpan(left.span.start, right.span.end))

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if token.type != TokenType.EOF:
            self.current += 1
        return token

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Synthesize EOF if the list was not terminated
        if self.tokens:
            last = self.tokens[-1].location
            end = SourceLocation(last.filename, last.line,
                                 last.column + len(self.tokens[-1].lexeme),
                                 last.offset + len(self.tokens[-1].lexeme))
        else:
            end = SourceLocation("<input>", 1, 1, 0)
        return Token(TokenType.EOF, "", None, end)


def parse_string(source: str, filename: str = "<input>") -> Node:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        filename: Name shown in diagnostics

    Returns:
        Root AST node

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    parser = Parser(tokens)
    return parser.parse()
