"""
Error handling for the parsemath lexer.

Provides error reporting with source location information, correction
suggestions, and the Diagnostic record shared by every pipeline stage.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def summary(self) -> str:
        """One-line form: `error[L001]: message (at offset N)`."""
        prefix = self.severity
        if self.code:
            prefix += f"[{self.code}]"
        return f"{prefix}: {self.message} (at offset {self.location.offset})"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters an invalid input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def position(self) -> int:
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """A character that is not part of the expression alphabet."""

    def __init__(self, character: str, location: SourceLocation, **kwargs):
        super().__init__(f"Unexpected character: '{character}'", location, **kwargs)
        self.character = character


class NumberOverflowError(LexerError):
    """A numeric literal too large to be represented as a finite float."""

    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        shown = lexeme if len(lexeme) <= 20 else lexeme[:17] + "..."
        super().__init__(f"Number literal overflow: '{shown}'", location, **kwargs)
        self.lexeme = lexeme


class ErrorRecovery:
    """
    Suggestion helpers for lexer diagnostics.
    """

    # Look-alike characters people paste into expressions
    ASCII_ALTERNATIVES = {
        '×': ['*'],
        '·': ['*'],
        '⋅': ['*'],
        '÷': ['/'],
        '∕': ['/'],
        '−': ['-'],
        '–': ['-'],
        '＋': ['+'],
        '[': ['('],
        ']': [')'],
        '{': ['('],
        '}': [')'],
        ',': ['.'],
        '%': ['/ 100'],
    }

    @staticmethod
    def suggest_ascii_alternatives(char: str) -> List[str]:
        """Suggest ASCII operators for Unicode or out-of-alphabet characters."""
        return ErrorRecovery.ASCII_ALTERNATIVES.get(char, [])


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L007": "Number literal overflow",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character outside the expression alphabet."""
    suggestions = ErrorRecovery.suggest_ascii_alternatives(char)

    if suggestions:
        help_text = f"Did you mean {' or '.join(repr(s) for s in suggestions)}?"
    elif char.isprintable():
        help_text = "Expressions may only contain numbers, + - * / ^ and parentheses."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=[f"Replace '{char}' with '{s}'" for s in suggestions]
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation) -> NumberOverflowError:
    """Create an error for a literal that does not fit in a float."""
    return NumberOverflowError(
        lexeme,
        location,
        code="L007",
        help_text="Numeric literals must be finite double precision values.",
        suggestions=["Use a smaller number"]
    )
