"""Test configuration and shared fixtures."""

import os

import pytest
from hypothesis import HealthCheck, settings

from arith.core.checker import TypeChecker
from arith.eval.machine import Evaluator

# The typed-term strategies shrink toward the deepest tree (booleans() -> False
# means "do not stop at a leaf"), which trips these health checks; draws are also slow.
settings.register_profile("arith", suppress_health_check=[HealthCheck.large_base_example, HealthCheck.too_slow])
settings.load_profile("arith")


@pytest.fixture
def checker() -> TypeChecker:
    return TypeChecker()


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator(max_steps=1_000)


@pytest.fixture(autouse=True)
def _clean_arith_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ARITH_* settings from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("ARITH_"):
            monkeypatch.delenv(key)
