"""
parsemath Lexer - turns expression text into tokens

Numbers are ASCII digit runs with an optional single decimal point;
everything else is a one-character operator or parenthesis.

xwest
"""

import math
import re
from typing import List

from .tokens import Token, TokenType, SourceLocation, OPERATORS
from .errors import (
    LexerError, create_unexpected_character_error, create_number_overflow_error
)


class Lexer:
    """
    Arithmetic expression lexical analyzer.

    Converts expression text into a list of tokens terminated by EOF.
    Errors are collected rather than raised so that one pass reports every
    bad character; `tokenize_string` raises the first one.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with expression text.

        Args:
            source: Expression text
            filename: Name shown in diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        # re.ASCII keeps superscripts and other Unicode digits out of numbers
        self.number_pattern = re.compile(r'\d+(?:\.\d*)?', re.ASCII)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens including the EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            try:
                self._skip_whitespace()

                if self.pos >= len(self.source):
                    break

                self.tokens.append(self._next_token())

            except LexerError as e:
                self.errors.append(e)
                # Recover by skipping the offending character
                self._advance()

        self.tokens.append(Token(TokenType.EOF, "", None, self._location()))

        return self.tokens

    def _next_token(self) -> Token:
        """Scan the token starting at the current position."""
        location = self._location()
        current_char = self.source[self.pos]

        if '0' <= current_char <= '9':
            return self._tokenize_number(location)

        token_type = OPERATORS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, current_char, None, location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize an integer or decimal literal."""
        match = self.number_pattern.match(self.source, self.pos)
        lexeme = match.group(0)

        value = float(lexeme)
        if not math.isfinite(value):
            # Skip the rest of the literal so recovery resumes after it
            self._advance_by(len(lexeme) - 1)
            raise create_number_overflow_error(lexeme, location)

        self._advance_by(len(lexeme))
        return Token(TokenType.NUMBER, lexeme, value, location)

    def _skip_whitespace(self):
        """Skip whitespace, newlines included."""
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        """Get all collected errors in source order."""
        return list(self.errors)


def tokenize_string(source: str, filename: str = "<input>") -> List[Token]:
    """
    Convenience function to tokenize an expression.

    Args:
        source: Expression text
        filename: Name shown in diagnostics

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If the text contains an invalid character or literal
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
