"""Diagnosis classification into condition categories."""

from dataclasses import dataclass

from feeding_planner.domain.conditions import (
    ClassifiedCondition,
    ConditionCategory,
    ConditionProductRule,
    KeywordRule,
)
from feeding_planner.rules.classification import KEYWORD_RULES, REFEEDING_KEYWORDS
from feeding_planner.rules.conditions import CONDITION_PRODUCT_RULES, rule_for_condition
from feeding_planner.services.text import contains_any

_NICU = "nicu"
_PICU = "picu"
_ADULT_AGE = 18


@dataclass(frozen=True)
class ConditionClassifier:
    """Classifies free-text diagnoses using a priority-ordered keyword table."""

    keyword_rules: tuple[KeywordRule, ...] = KEYWORD_RULES
    refeeding_keywords: tuple[str, ...] = REFEEDING_KEYWORDS
    product_rules: tuple[ConditionProductRule, ...] = CONDITION_PRODUCT_RULES

    def classify(
        self, diagnosis: str, patient_type: str, age: float
    ) -> ClassifiedCondition:
        """Classify a diagnosis for a patient of the given ward type and age."""
        ward = patient_type.strip().lower()
        if ward == _NICU or (age < 1 and ward == _PICU):
            return ClassifiedCondition(
                primary=ConditionCategory.PEDIATRIC_NICU,
                secondary=(),
                fluid_restriction=None,
                refeeding_risk=False,
            )

        matched = [
            rule for rule in self.keyword_rules if contains_any(diagnosis, rule.keywords)
        ]
        keyword_refeeding = contains_any(diagnosis, self.refeeding_keywords)

        if ward == _PICU or age < _ADULT_AGE:
            return ClassifiedCondition(
                primary=ConditionCategory.PEDIATRIC_STANDARD,
                secondary=tuple(rule.category for rule in matched),
                fluid_restriction=None,
                refeeding_risk=keyword_refeeding,
            )

        if not matched:
            return ClassifiedCondition(
                primary=ConditionCategory.STANDARD,
                secondary=(),
                fluid_restriction=None,
                refeeding_risk=keyword_refeeding,
            )

        ranked = sorted(matched, key=lambda rule: rule.priority, reverse=True)
        fluid_restriction = next(
            (
                rule.fluid_restriction
                for rule in ranked
                if rule.fluid_restriction is not None
            ),
            None,
        )
        refeeding_risk = keyword_refeeding or any(
            rule.category == ConditionCategory.REFEEDING_RISK for rule in matched
        )
        return ClassifiedCondition(
            primary=ranked[0].category,
            secondary=tuple(rule.category for rule in ranked[1:]),
            fluid_restriction=fluid_restriction,
            refeeding_risk=refeeding_risk,
        )

    def label(self, category: ConditionCategory) -> str:
        """Return the display label of a category."""
        return rule_for_condition(category, self.product_rules).label
