"""Tests for condition-specific requirement adjustment."""

import pytest

from feeding_planner.domain.conditions import ConditionCategory
from feeding_planner.rules.conditions import rule_for_condition
from feeding_planner.services.requirements import adjust_requirements_for_condition


def test_renal_halves_potassium_and_phosphorus(requirements) -> None:
    adjusted = adjust_requirements_for_condition(
        requirements, rule_for_condition(ConditionCategory.RENAL)
    )

    assert adjusted.potassium == 30
    assert adjusted.phosphorus == 15
    assert adjusted.sodium == requirements.sodium
    assert adjusted.energy == 1800
    assert adjusted.protein == 48


def test_diabetes_shifts_carbohydrate_to_fat(requirements) -> None:
    adjusted = adjust_requirements_for_condition(
        requirements, rule_for_condition(ConditionCategory.DIABETES)
    )

    assert adjusted.carbs == 200
    assert adjusted.fat == pytest.approx(55)


def test_multipliers_round_energy_and_protein(requirements) -> None:
    adjusted = adjust_requirements_for_condition(
        requirements.model_copy(update={"energy": 1555, "protein": 61}),
        rule_for_condition(ConditionCategory.CARDIAC),
    )

    assert adjusted.energy == 1400
    assert adjusted.protein == 61
    assert adjusted.sodium == 50


def test_burn_raises_energy_and_protein(requirements) -> None:
    adjusted = adjust_requirements_for_condition(
        requirements, rule_for_condition(ConditionCategory.BURN)
    )

    assert adjusted.energy == 2700
    assert adjusted.protein == 90
    assert requirements.energy == 1800
