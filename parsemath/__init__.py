"""
parsemath - Arithmetic Expression Evaluator

Evaluates arithmetic expressions given as text through a three stage
pipeline: lexical analysis, recursive descent parsing and tree-walking
evaluation.

Architecture:
    parsemath/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Syntax analysis and AST generation
    ├── evaluator/       # AST evaluation
    ├── pipeline.py      # evaluate(text) entry point
    └── cli.py           # Command line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string
from .parser import Parser, ParseError, format_ast, parse_string
from .evaluator import Evaluator, EvaluationError, evaluate_ast
from .pipeline import EvaluationResult, evaluate, format_number

__all__ = [
    # Pipeline
    "evaluate",
    "EvaluationResult",
    "format_number",

    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize_string",
    "Parser",
    "parse_string",
    "format_ast",
    "Evaluator",
    "evaluate_ast",

    # Errors
    "LexerError",
    "ParseError",
    "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
