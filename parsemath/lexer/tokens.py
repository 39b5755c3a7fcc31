"""
Token definitions for the parsemath lexer.

Defines every token type an arithmetic expression can contain, the
source location attached to each token, and the lookup table the lexer
uses to recognize single-character operators.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """Enumeration of all token types in an arithmetic expression."""

    # Special
    EOF = auto()                    # End of input

    # Literals
    NUMBER = auto()                 # 42, 3.14, 7.

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # - (binary subtraction or unary negation)
    STAR = auto()                   # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^ (exponentiation)

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    `offset` is the 0-based character offset reported in diagnostics;
    line and column are 1-based.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: type, raw text, semantic value and location.

    Only NUMBER tokens carry a value (the parsed float).
    """
    type: TokenType
    lexeme: str
    value: Any
    location: SourceLocation

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "end of input"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_operator(self) -> bool:
        return self.lexeme in OPERATORS


# Single-character operators and delimiters
OPERATORS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Human readable spellings used in diagnostics
TOKEN_DESCRIPTIONS: Dict[TokenType, str] = {
    TokenType.EOF: "end of input",
    TokenType.NUMBER: "a number",
    TokenType.PLUS: "'+'",
    TokenType.MINUS: "'-'",
    TokenType.STAR: "'*'",
    TokenType.SLASH: "'/'",
    TokenType.CARET: "'^'",
    TokenType.LEFT_PAREN: "'('",
    TokenType.RIGHT_PAREN: "')'",
}


def describe_token_type(token_type: TokenType) -> str:
    """Return the diagnostic spelling of a token type."""
    return TOKEN_DESCRIPTIONS.get(token_type, token_type.name)
