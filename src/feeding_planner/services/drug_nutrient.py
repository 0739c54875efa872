"""Drug-nutrient interaction screening for a whole plan."""

from collections.abc import Sequence
from dataclasses import dataclass

from feeding_planner.domain.products import (
    CALCIUM,
    CARBS,
    CATEGORY,
    IRON,
    MAGNESIUM,
    POTASSIUM,
    SUB_CATEGORY,
    NutritionRoute,
    Product,
    product_name,
    product_number,
    product_text,
)
from feeding_planner.domain.safety import DrugNutrientInteraction, DrugNutrientRule
from feeding_planner.rules.drug_nutrient import DRUG_NUTRIENT_RULES
from feeding_planner.services.text import contains_any, normalize_text

_ENTERAL_MARKERS = frozenset({"経腸", "enteral", "チューブ", "経管"})

# Keyword -> numeric column that proves the nutrient is present.
_NUMERIC_EVIDENCE: dict[str, str] = {
    "k": POTASSIUM,
    "カリウム": POTASSIUM,
    "potassium": POTASSIUM,
    "mg": MAGNESIUM,
    "マグネシウム": MAGNESIUM,
    "magnesium": MAGNESIUM,
    "ca": CALCIUM,
    "カルシウム": CALCIUM,
    "calcium": CALCIUM,
    "fe": IRON,
    "鉄": IRON,
    "炭水化物": CARBS,
    "糖": CARBS,
    "ブドウ糖": CARBS,
    "グルコース": CARBS,
    "glucose": CARBS,
    "carbs": CARBS,
}

_SEVERITY_ORDER = {"high": 0, "medium": 1, "low": 2}


@dataclass(frozen=True)
class DrugNutrientChecker:
    """Fires interaction rules for medications against a candidate plan."""

    rules: tuple[DrugNutrientRule, ...] = DRUG_NUTRIENT_RULES

    def check(
        self,
        medications: Sequence[str],
        products: Sequence[Product],
        route: NutritionRoute | str,
    ) -> tuple[DrugNutrientInteraction, ...]:
        """Return deduplicated interactions sorted by severity."""
        if not medications or not products:
            return ()

        interactions: list[DrugNutrientInteraction] = []
        seen: set[tuple[str, str]] = set()
        for medication in medications:
            for rule in self.rules:
                if (rule.id, medication) in seen:
                    continue
                if not contains_any(medication, rule.drug_keywords):
                    continue
                if not _plan_contains_nutrient(products, rule.nutrient_keywords, route):
                    continue
                seen.add((rule.id, medication))
                interactions.append(
                    DrugNutrientInteraction(
                        rule_id=rule.id,
                        drug=medication,
                        severity=rule.severity,
                        interaction=rule.interaction,
                        recommendation=rule.recommendation,
                    )
                )

        return tuple(
            sorted(interactions, key=lambda item: _SEVERITY_ORDER[item.severity])
        )


def _plan_contains_nutrient(
    products: Sequence[Product],
    nutrient_keywords: tuple[str, ...],
    route: NutritionRoute | str,
) -> bool:
    normalized_keywords = [normalize_text(keyword) for keyword in nutrient_keywords]
    if route == NutritionRoute.ENTERAL and any(
        keyword in _ENTERAL_MARKERS for keyword in normalized_keywords
    ):
        return True

    for product in products:
        searchable = "|".join(
            (
                product_name(product),
                product_text(product, CATEGORY),
                product_text(product, SUB_CATEGORY),
            )
        )
        if contains_any(searchable, nutrient_keywords):
            return True
        for keyword in normalized_keywords:
            field = _NUMERIC_EVIDENCE.get(keyword)
            if field is not None and product_number(product, field) > 0:
                return True
    return False
