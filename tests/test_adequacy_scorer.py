"""Tests for nutrient adequacy scoring."""

import math

from feeding_planner.domain.patients import NutritionRequirements
from feeding_planner.services.adequacy import AdequacyBands, AdequacyScorer


def test_intake_matching_requirements_scores_full(requirements) -> None:
    breakdown = AdequacyScorer().score(requirements, requirements.model_dump())

    assert breakdown.overall == 100
    assert breakdown.macro_score == 100
    assert breakdown.electrolyte_score == 100
    assert breakdown.trace_element_score == 100
    assert len(breakdown.details) == 16
    assert {detail.status for detail in breakdown.details} == {"normal"}


def test_missing_intake_scores_zero(requirements) -> None:
    breakdown = AdequacyScorer().score(requirements, {})

    assert breakdown.overall == 0
    energy = breakdown.details[0]
    assert energy.nutrient == "energy"
    assert energy.current == 0
    assert energy.percentage == 0
    assert energy.status == "deficient"


def test_macro_weighting_and_overall(requirements) -> None:
    intake = {**requirements.model_dump(), "energy": 900}

    breakdown = AdequacyScorer().score(requirements, intake)

    assert breakdown.macro_score == 82
    assert breakdown.overall == 91
    assert breakdown.details[0].percentage == 50
    assert breakdown.details[0].status == "low"


def test_zero_targets_score_full() -> None:
    breakdown = AdequacyScorer().score(NutritionRequirements(), {"energy": "abc"})

    assert breakdown.overall == 100
    assert breakdown.details[0].percentage == 0


def test_nutrient_score_bands() -> None:
    scorer = AdequacyScorer()

    assert scorer.nutrient_score(95, 100) == 100
    assert scorer.nutrient_score(110, 100) == 100
    assert scorer.nutrient_score(45, 100) == 50
    assert scorer.nutrient_score(155, 100) == 50
    assert scorer.nutrient_score(250, 100) == 0
    assert scorer.nutrient_score(0, 100) == 0
    assert scorer.nutrient_score(10, 0) == 100


def test_status_bands() -> None:
    scorer = AdequacyScorer()

    assert scorer.status(40) == "deficient"
    assert scorer.status(60) == "low"
    assert scorer.status(100) == "normal"
    assert scorer.status(120) == "normal"
    assert scorer.status(121) == "excess"


def test_custom_bands_are_used() -> None:
    scorer = AdequacyScorer(bands=AdequacyBands(adequate_low=80))

    assert scorer.nutrient_score(85, 100) == 100


def test_huge_intake_against_tiny_target_is_excess() -> None:
    breakdown = AdequacyScorer().score(
        NutritionRequirements(energy=0.001), {"energy": 1e307}
    )

    energy = breakdown.details[0]
    assert energy.status == "excess"
    assert math.isfinite(energy.percentage)
    assert breakdown.macro_score == 60
    assert 0 <= breakdown.overall <= 100
