"""
Error handling for the parsemath parser.

Syntax errors carry the offending token, its location and a Diagnostic
with help text and suggestions.

Author: xwest
"""

from typing import Optional, List, Sequence

from ..lexer.tokens import Token, TokenType, SourceLocation, describe_token_type
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def position(self) -> int:
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """A grammar rule expected a different kind of token."""

    def __init__(self, message: str, token: Token, expected: Sequence[TokenType], **kwargs):
        super().__init__(message, token.location, token=token, **kwargs)
        self.expected = tuple(expected)


class UnclosedParenError(ParseError):
    """An opening parenthesis without its matching closing one."""


class TrailingInputError(ParseError):
    """Tokens left over after a complete expression."""


class SyntaxErrorRecovery:
    """
    Suggestion helpers for syntax errors.
    """

    @staticmethod
    def suggest_for_unexpected(found: Token) -> List[str]:
        """Suggest fixes when an operand was expected but `found` was seen."""
        if found.type == TokenType.EOF:
            return ["Add the missing operand at the end of the expression"]
        if found.type == TokenType.RIGHT_PAREN:
            return ["Remove the ')'", "Put an expression inside the parentheses"]
        if found.type == TokenType.PLUS:
            return ["Remove the '+'; unary plus is not supported"]
        if found.is_operator:
            return [f"Add an operand before '{found.lexeme}'",
                    "Check for two operators in a row"]
        return []

    @staticmethod
    def suggest_for_trailing(found: Token) -> List[str]:
        """Suggest fixes for leftover tokens after a complete expression."""
        if found.type == TokenType.NUMBER:
            return ["Insert an operator between the numbers"]
        if found.type == TokenType.LEFT_PAREN:
            return ["Insert '*' before '(' to multiply"]
        if found.type == TokenType.RIGHT_PAREN:
            return ["Remove the unmatched ')'"]
        return ["Remove the trailing input"]


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P013": "Trailing input",
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Sequence[TokenType], found: Token) -> UnexpectedTokenError:
    """Create an error for a token no rule accepts at this position."""
    expected_str = " or ".join(describe_token_type(t) for t in expected)
    found_str = describe_token_type(found.type)
    if found.type != TokenType.EOF:
        found_str = f"'{found.lexeme}'"

    return UnexpectedTokenError(
        f"Expected {expected_str}, found {found_str}",
        found,
        expected,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=SyntaxErrorRecovery.suggest_for_unexpected(found)
    )


def create_unclosed_paren_error(open_token: Token, found: Token) -> UnclosedParenError:
    """Create an error for a '(' whose ')' never arrives."""
    return UnclosedParenError(
        "Unclosed parenthesis",
        open_token.location,
        token=found,
        code="P004",
        help_text=f"The '(' at {open_token.location} was never closed; found {found} instead of ')'.",
        suggestions=["Add a closing ')'", "Check for missing delimiters"]
    )


def create_trailing_input_error(found: Token) -> TrailingInputError:
    """Create an error for tokens left after the expression ended."""
    return TrailingInputError(
        f"Unexpected trailing input '{found.lexeme}'",
        found.location,
        token=found,
        code="P013",
        help_text="A complete expression was parsed but more input follows it.",
        suggestions=SyntaxErrorRecovery.suggest_for_trailing(found)
    )
