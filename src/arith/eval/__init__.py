"""Operational semantics: small-step rewriting and big-step evaluation."""

from arith.eval.errors import EvaluationError, StepLimitExceeded
from arith.eval.machine import (
    DEFAULT_MAX_STEPS,
    Evaluation,
    Evaluator,
    big_step,
    is_normal_form,
    is_stuck,
    multistep,
    normalize,
    step,
)

__all__ = [
    "DEFAULT_MAX_STEPS",
    "Evaluation",
    "EvaluationError",
    "Evaluator",
    "StepLimitExceeded",
    "big_step",
    "is_normal_form",
    "is_stuck",
    "multistep",
    "normalize",
    "step",
]
