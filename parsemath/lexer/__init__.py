"""
parsemath Lexer Package

Implements the lexical analyzer (tokenizer) for arithmetic expressions.

Key Features:
- Integer and decimal literals parsed to floats
- Single-character operators: + - * / ^ ( )
- Error collection with recovery and correction suggestions
- Source location tracking (offset, line, column) for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import (
    Diagnostic, LexerError, UnexpectedCharacterError, NumberOverflowError
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "UnexpectedCharacterError",
    "NumberOverflowError",
]
