"""
Expression evaluation pipeline.

Sequences the three stages (tokenize -> parse -> evaluate) behind a
single entry point and reports the outcome as an EvaluationResult instead
of raising, so callers can inspect which stage failed and why.

Author: xwest
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .lexer import Token, LexerError, tokenize_string
from .parser import Node, Parser, ParseError, format_ast
from .evaluator import Evaluator, EvaluationError

logger = logging.getLogger(__name__)

PipelineError = Union[LexerError, ParseError, EvaluationError]


@dataclass
class EvaluationResult:
    """Outcome of evaluating one expression."""
    source: str
    value: Optional[float] = None
    error: Optional[PipelineError] = None
    tokens: List[Token] = field(default_factory=list)
    ast: Optional[Node] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def has_errors(self) -> bool:
        """Check if any stage failed."""
        return self.error is not None

    def unwrap(self) -> float:
        """Return the value, raising the stored error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value


def evaluate(text: str, filename: str = "<input>") -> EvaluationResult:
    """
    Evaluate an arithmetic expression.

    Stops at the first stage that fails; the error is stored verbatim on
    the result. RecursionError from pathologically deep nesting is not
    caught.

    Args:
        text: Expression text, e.g. "1 + 2 * 3"
        filename: Name shown in diagnostics

    Returns:
        EvaluationResult with either `value` or `error` set
    """
    result = EvaluationResult(source=text)

    try:
        result.tokens = tokenize_string(text, filename)
        logger.debug("Generated %d tokens", len(result.tokens))

        result.ast = Parser(result.tokens).parse()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generated AST: %s", format_ast(result.ast))

        result.value = Evaluator().evaluate(result.ast)
        logger.debug("Computed value: %r", result.value)

    except (LexerError, ParseError, EvaluationError) as e:
        logger.debug("Evaluation of %r failed: %s", text, e.diagnostic.summary())
        result.error = e

    return result


def format_number(value: float) -> str:
    """
    Render a result in a stable, locale-independent form.

    Integral values print without a fractional part (7, -6); everything
    else uses the shortest round-tripping repr (0.5, inf).
    """
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
