"""Tests for the single-step rewrite relation."""

from arith.core.ast import FALSE, TRUE, ZERO, If, IsZero, Pred, Succ, as_int, nat
from arith.eval.machine import is_normal_form, is_stuck, step


class TestIfRules:
    """E-IfTrue, E-IfFalse and E-If."""

    def test_if_true(self):
        assert step(If(TRUE, ZERO, Succ(ZERO))) == ZERO

    def test_if_false(self):
        """if false then 0 else succ 0 -> succ 0"""
        assert step(If(FALSE, ZERO, Succ(ZERO))) == Succ(ZERO)

    def test_if_branches_are_not_evaluated(self):
        term = If(TRUE, Pred(nat(2)), Pred(ZERO))
        assert step(term) == Pred(nat(2))

    def test_if_congruence(self):
        term = If(IsZero(ZERO), ZERO, nat(1))
        assert step(term) == If(TRUE, ZERO, nat(1))

    def test_if_nested_congruence(self):
        term = If(If(TRUE, FALSE, TRUE), ZERO, ZERO)
        assert step(term) == If(FALSE, ZERO, ZERO)

    def test_if_with_numeric_condition_is_stuck(self):
        """if 0 then true else false has no rule."""
        term = If(ZERO, TRUE, FALSE)
        assert step(term) is None
        assert is_stuck(term)


class TestSuccRule:
    """E-Succ."""

    def test_succ_congruence(self):
        assert step(Succ(Pred(ZERO))) == Succ(ZERO)

    def test_succ_of_value_is_normal(self):
        assert step(nat(3)) is None

    def test_deep_numeral_is_normal(self):
        term = nat(5000)
        assert step(term) is None
        assert is_normal_form(term)
        assert not is_stuck(term)

    def test_congruence_under_deep_succ(self):
        """succ^n (pred 0) steps to succ^n 0 in one E-Succ step."""
        term = Pred(ZERO)
        for _ in range(5000):
            term = Succ(term)
        assert as_int(step(term)) == 5000

    def test_nested_succ_of_true_is_stuck(self):
        assert step(Succ(Succ(Succ(TRUE)))) is None
        assert is_stuck(Succ(Succ(Succ(TRUE))))

    def test_succ_of_true_is_stuck(self):
        assert step(Succ(TRUE)) is None
        assert is_stuck(Succ(TRUE))

    def test_succ_takes_one_step_then_sticks(self):
        """succ (if true then true else true) -> succ true, then stuck."""
        term = Succ(If(TRUE, TRUE, TRUE))
        following = step(term)
        assert following == Succ(TRUE)
        assert step(following) is None
        assert not is_stuck(term)
        assert is_stuck(following)


class TestPredRules:
    """E-PredZero, E-PredSucc and E-Pred."""

    def test_pred_zero(self):
        assert step(Pred(ZERO)) == ZERO

    def test_pred_succ(self):
        """pred (succ (succ 0)) -> succ 0"""
        assert step(Pred(nat(2))) == nat(1)
        assert step(nat(1)) is None

    def test_pred_succ_requires_numeric_value(self):
        """pred (succ (pred 0)) reduces inside, not by E-PredSucc."""
        term = Pred(Succ(Pred(ZERO)))
        assert step(term) == Pred(Succ(ZERO))

    def test_pred_congruence(self):
        assert step(Pred(If(TRUE, nat(2), ZERO))) == Pred(nat(2))

    def test_pred_of_malformed_numeral_is_stuck(self):
        term = Pred(Succ(TRUE))
        assert step(term) is None
        assert is_stuck(term)

    def test_pred_of_bool_is_stuck(self):
        assert is_stuck(Pred(FALSE))


class TestIsZeroRules:
    """E-IszeroZero, E-IszeroSucc and E-Iszero."""

    def test_iszero_zero(self):
        assert step(IsZero(ZERO)) == TRUE

    def test_iszero_succ(self):
        assert step(IsZero(nat(4))) == FALSE

    def test_iszero_succ_requires_numeric_value(self):
        term = IsZero(Succ(Pred(ZERO)))
        assert step(term) == IsZero(Succ(ZERO))

    def test_iszero_congruence(self):
        """iszero (pred (succ 0)) -> iszero 0"""
        assert step(IsZero(Pred(Succ(ZERO)))) == IsZero(ZERO)

    def test_iszero_of_bool_is_stuck(self):
        assert is_stuck(IsZero(TRUE))

    def test_iszero_of_malformed_numeral_is_stuck(self):
        assert is_stuck(IsZero(Succ(FALSE)))


class TestNormalForms:
    """Values are normal forms; not every normal form is a value."""

    def test_values_do_not_step(self):
        for term in (TRUE, FALSE, ZERO, nat(5)):
            assert step(term) is None
            assert is_normal_form(term)
            assert not is_stuck(term)

    def test_redex_is_not_normal(self):
        assert not is_normal_form(Pred(ZERO))

    def test_step_does_not_mutate(self):
        term = IsZero(Pred(Succ(ZERO)))
        before = repr(term)
        step(term)
        assert repr(term) == before

    def test_step_is_repeatable(self):
        term = If(IsZero(Pred(nat(1))), Succ(ZERO), ZERO)
        assert step(term) == step(term)
