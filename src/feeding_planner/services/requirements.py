"""Condition-specific adjustment of nutrient requirements."""

from feeding_planner.domain.conditions import ConditionCategory, ConditionProductRule
from feeding_planner.domain.patients import NutritionRequirements
from feeding_planner.numbers import round_half_up

# Per-condition scaling of non-energy, non-protein targets.
CONDITION_NUTRIENT_FACTORS: dict[ConditionCategory, dict[str, float]] = {
    ConditionCategory.RENAL: {"potassium": 0.5, "phosphorus": 0.5},
    ConditionCategory.HEPATIC: {"sodium": 0.5},
    ConditionCategory.CARDIAC: {"sodium": 0.5},
    ConditionCategory.DIABETES: {"carbs": 0.8, "fat": 1.1},
}


def adjust_requirements_for_condition(
    requirements: NutritionRequirements, rule: ConditionProductRule
) -> NutritionRequirements:
    """Apply a condition's nutrient factors and energy/protein multipliers."""
    updates = {
        nutrient: requirements.value(nutrient) * factor
        for nutrient, factor in CONDITION_NUTRIENT_FACTORS.get(rule.condition, {}).items()
    }
    updates["energy"] = round_half_up(requirements.energy * rule.energy_multiplier)
    updates["protein"] = round_half_up(
        requirements.protein * rule.protein_multiplier, 1
    )
    return requirements.model_copy(update=updates)
