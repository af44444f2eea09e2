"""Soundness harness: executable progress, preservation and friends."""

from arith.eval.machine import is_stuck
from arith.soundness.enumerate import terms_of_size, terms_up_to_depth, terms_up_to_size
from arith.soundness.generate import random_term, random_well_typed
from arith.soundness.harness import (
    Counterexample,
    HarnessReport,
    Property,
    PropertyStats,
    SoundnessHarness,
    population,
    standard_properties,
)
from arith.soundness.properties import (
    check_big_step_agreement,
    check_canonical_forms,
    check_consts_bound,
    check_determinism,
    check_preservation,
    check_progress,
    check_size_decreases,
    check_soundness,
    check_value_normal,
    subject_expansion_counterexample,
)
from arith.soundness.reference import derivations, successors

__all__ = [
    # Predicates
    "check_determinism",
    "check_value_normal",
    "check_progress",
    "check_preservation",
    "check_soundness",
    "check_canonical_forms",
    "check_size_decreases",
    "check_consts_bound",
    "check_big_step_agreement",
    "is_stuck",
    "subject_expansion_counterexample",
    # Reference relation
    "derivations",
    "successors",
    # Populations
    "terms_of_size",
    "terms_up_to_size",
    "terms_up_to_depth",
    "random_term",
    "random_well_typed",
    "population",
    # Runner
    "Property",
    "PropertyStats",
    "Counterexample",
    "HarnessReport",
    "SoundnessHarness",
    "standard_properties",
]
