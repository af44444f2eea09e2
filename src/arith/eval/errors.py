"""Error types for the arithmetic evaluator."""

from arith.core.ast import Term


class EvaluationError(Exception):
    """Base class for evaluation errors."""


class StepLimitExceeded(EvaluationError):
    """Evaluation did not reach a normal form within the step bound.

    Well-typed terms always normalize; hitting this means the step relation
    loops or the bound is too small for the term.
    """

    def __init__(self, term: Term, last: Term, max_steps: int):
        self.term = term
        self.last = last
        self.max_steps = max_steps
        super().__init__(f"{term} did not reach a normal form within {max_steps} steps (last: {last})")
