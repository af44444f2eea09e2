"""Tests for multistep, normalize, big-step evaluation and the Evaluator."""

import pytest

from arith.core.ast import FALSE, TRUE, ZERO, If, IsZero, Pred, Succ, as_int, nat
from arith.eval.errors import EvaluationError, StepLimitExceeded
from arith.eval.machine import Evaluator, big_step, multistep, normalize


class TestMultistep:
    """Tests for the reduction trace."""

    def test_value_yields_itself(self):
        assert list(multistep(ZERO)) == [ZERO]

    def test_iszero_chain(self):
        """iszero (pred (succ 0)) -> iszero 0 -> true"""
        term = IsZero(Pred(Succ(ZERO)))
        assert list(multistep(term)) == [term, IsZero(ZERO), TRUE]

    def test_trace_ends_at_stuck_term(self):
        term = Succ(If(TRUE, TRUE, TRUE))
        assert list(multistep(term)) == [term, Succ(TRUE)]

    def test_bound_exceeded(self):
        term = Pred(Pred(Pred(nat(1))))
        with pytest.raises(StepLimitExceeded):
            list(multistep(term, max_steps=1))

    def test_exact_bound_is_enough(self):
        term = Pred(Pred(nat(2)))
        assert list(multistep(term, max_steps=2))[-1] == ZERO


class TestNormalize:
    """Tests for driving a term to its normal form."""

    def test_if_false(self):
        """if false then 0 else succ 0 normalizes to succ 0."""
        assert normalize(If(FALSE, ZERO, Succ(ZERO))) == Succ(ZERO)

    def test_pred_succ_succ(self):
        assert normalize(Pred(nat(2))) == nat(1)

    def test_value_is_fixpoint(self):
        assert normalize(nat(3)) == nat(3)

    def test_stuck_term_is_returned(self):
        """Getting stuck is an outcome, not an error."""
        assert normalize(If(ZERO, TRUE, FALSE)) == If(ZERO, TRUE, FALSE)

    def test_nested_arithmetic(self):
        term = If(IsZero(Pred(Pred(nat(2)))), Succ(Pred(nat(3))), ZERO)
        assert normalize(term) == nat(3)

    def test_deep_numeral(self):
        term = Pred(nat(200))
        assert normalize(term) == nat(199)

    def test_very_deep_numeral(self):
        """Numerals far past the interpreter recursion limit still evaluate."""
        assert as_int(normalize(Pred(nat(5000)))) == 4999
        assert normalize(IsZero(nat(5000))) is FALSE
        assert as_int(big_step(Pred(nat(5000)))) == 4999

    def test_bound_exceeded_diagnostic(self):
        term = IsZero(Pred(Pred(nat(2))))
        with pytest.raises(StepLimitExceeded) as info:
            normalize(term, max_steps=1)
        assert info.value.term == term
        assert info.value.max_steps == 1
        assert info.value.last == IsZero(Pred(nat(1)))
        assert "did not reach a normal form within 1 steps" in str(info.value)

    def test_bound_exceeded_is_evaluation_error(self):
        with pytest.raises(EvaluationError):
            normalize(Pred(ZERO), max_steps=0)

    def test_zero_bound_accepts_normal_forms(self):
        assert normalize(Succ(TRUE), max_steps=0) == Succ(TRUE)


class TestBigStep:
    """Tests for the big-step semantics."""

    def test_value(self):
        assert big_step(nat(2)) == nat(2)

    def test_if(self):
        assert big_step(If(IsZero(ZERO), nat(1), ZERO)) == nat(1)

    def test_succ(self):
        assert big_step(Succ(Pred(nat(1)))) == nat(1)

    def test_pred(self):
        assert big_step(Pred(ZERO)) == ZERO
        assert big_step(Pred(Succ(If(TRUE, ZERO, ZERO)))) == ZERO

    def test_iszero(self):
        assert big_step(IsZero(Pred(Succ(ZERO)))) == TRUE
        assert big_step(IsZero(nat(2))) == FALSE

    def test_no_derivation_for_stuck_term(self):
        assert big_step(If(ZERO, TRUE, FALSE)) is None
        assert big_step(Succ(If(TRUE, TRUE, TRUE))) is None
        assert big_step(Pred(TRUE)) is None
        assert big_step(IsZero(FALSE)) is None

    def test_ill_typed_but_evaluates(self):
        """if true then 0 else false is ill-typed, yet evaluates to 0."""
        assert big_step(If(TRUE, ZERO, FALSE)) == ZERO


class TestEvaluator:
    """Tests for the tracing evaluator."""

    def test_run_records_trace(self, evaluator: Evaluator):
        term = IsZero(Pred(Succ(ZERO)))
        evaluation = evaluator.run(term)
        assert evaluation.trace == (term, IsZero(ZERO), TRUE)
        assert evaluation.result == TRUE
        assert evaluation.steps == 2
        assert evaluation.is_value
        assert not evaluation.is_stuck

    def test_run_reports_stuck(self, evaluator: Evaluator):
        evaluation = evaluator.run(Succ(If(TRUE, TRUE, TRUE)))
        assert evaluation.result == Succ(TRUE)
        assert evaluation.steps == 1
        assert evaluation.is_stuck

    def test_str(self, evaluator: Evaluator):
        evaluation = evaluator.run(Pred(nat(2)))
        assert str(evaluation) == "pred (succ (succ 0)) ->* succ 0 (value, 1 steps)"

    def test_bound(self):
        with pytest.raises(StepLimitExceeded):
            Evaluator(max_steps=2).run(Pred(Pred(Pred(nat(3)))))

    def test_negative_bound_rejected(self):
        with pytest.raises(ValueError):
            Evaluator(max_steps=-1)

    def test_step_and_normalize(self, evaluator: Evaluator):
        assert evaluator.step(Pred(ZERO)) == ZERO
        assert evaluator.normalize(If(FALSE, ZERO, nat(1))) == nat(1)
