"""Condition-aware product selection from the catalog."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from feeding_planner.domain.conditions import (
    ConditionCategory,
    ConditionProductRule,
    NutrientFilter,
    ProductCriteria,
)
from feeding_planner.domain.products import (
    CATEGORY,
    ROUTE,
    SUB_CATEGORY,
    NutritionRoute,
    Product,
    energy_density,
    product_name,
    product_number,
    product_text,
)
from feeding_planner.rules.conditions import CONDITION_PRODUCT_RULES, rule_for_condition
from feeding_planner.services.allergy import AllergyChecker
from feeding_planner.services.text import normalize_text

ROUTE_MARKERS: dict[NutritionRoute, tuple[str, ...]] = {
    NutritionRoute.ENTERAL: ("経腸", "enteral"),
    NutritionRoute.PARENTERAL: ("静脈", "parenteral"),
}

KEYWORD_POINTS = 10
FILTER_POINTS = 3
ENERGY_POINTS = 1

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductSelector:
    """Filters, scores and ranks catalog products for a condition and route."""

    allergy_checker: AllergyChecker = field(default_factory=AllergyChecker)
    rules: tuple[ConditionProductRule, ...] = CONDITION_PRODUCT_RULES
    debug: bool = False

    def select(
        self,
        products: Sequence[Product],
        route: NutritionRoute,
        condition: ConditionCategory,
        allergies: Sequence[str],
        max_products: int,
    ) -> tuple[Product, ...]:
        """Return at most max_products candidates, best first."""
        criteria = criteria_for_route(rule_for_condition(condition, self.rules), route)
        candidates = [
            product
            for product in filter_by_route(products, route)
            if not self.allergy_checker.check(allergies, [product])
        ]
        if not candidates:
            if self.debug:
                _logger.info(
                    "Product selection empty: route=%s condition=%s catalog=%s",
                    route,
                    condition,
                    len(products),
                )
            return ()

        ranked = sorted(candidates, key=lambda product: _tie_break(product, criteria))
        ranked = sorted(
            ranked, key=lambda product: score_product(product, criteria), reverse=True
        )

        selected: list[Product] = []
        names: set[str] = set()
        for product in ranked:
            if len(selected) >= max_products:
                break
            name = product_name(product)
            if name in names:
                continue
            names.add(name)
            selected.append(product)

        if self.debug:
            _logger.info(
                "Product selection: route=%s condition=%s selected=%s",
                route,
                condition,
                [product_name(product) for product in selected],
            )
        return tuple(selected)


def criteria_for_route(
    rule: ConditionProductRule, route: NutritionRoute
) -> ProductCriteria:
    """Return the rule's criteria for a route."""
    if route == NutritionRoute.PARENTERAL:
        return rule.parenteral_criteria
    return rule.enteral_criteria


def filter_by_route(
    products: Sequence[Product], route: NutritionRoute
) -> list[Product]:
    """Keep products whose route, category or sub-category names the route."""
    markers = [normalize_text(marker) for marker in ROUTE_MARKERS[route]]
    kept: list[Product] = []
    for product in products:
        text = "|".join(
            normalize_text(product_text(product, column))
            for column in (ROUTE, CATEGORY, SUB_CATEGORY)
        )
        if any(marker in text for marker in markers):
            kept.append(product)
    return kept


def matches_name_keyword(product: Product, keyword: str) -> bool:
    """Return True if keyword occurs in the product's name or sub-category."""
    needle = normalize_text(keyword)
    if not needle:
        return False
    return needle in normalize_text(product_name(product)) or needle in normalize_text(
        product_text(product, SUB_CATEGORY)
    )


def passes_filter(product: Product, nutrient_filter: NutrientFilter) -> bool:
    """Compare a product field against a nutrient filter threshold."""
    value = product_number(product, nutrient_filter.field)
    threshold = nutrient_filter.value
    if nutrient_filter.operator == "gt":
        return value > threshold
    if nutrient_filter.operator == "lt":
        return value < threshold
    if nutrient_filter.operator == "gte":
        return value >= threshold
    return value <= threshold


def score_product(product: Product, criteria: ProductCriteria) -> int:
    """Score a product against a condition's selection criteria."""
    score = 0
    for keyword in criteria.name_keywords:
        if matches_name_keyword(product, keyword):
            score += KEYWORD_POINTS
    for nutrient_filter in criteria.nutrient_filters:
        if passes_filter(product, nutrient_filter):
            score += FILTER_POINTS
    if energy_density(product) > 0:
        score += ENERGY_POINTS
    return score


def _tie_break(product: Product, criteria: ProductCriteria) -> float:
    value = product_number(product, criteria.sort_by)
    if criteria.sort_order == "desc":
        return -value
    return value
