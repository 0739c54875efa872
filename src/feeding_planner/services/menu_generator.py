"""Feeding plan generation from diagnosis to safety-screened menu."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from feeding_planner.domain.conditions import (
    ClassifiedCondition,
    ConditionCategory,
    ConditionProductRule,
)
from feeding_planner.domain.menus import GeneratedMenu, GeneratedMenuItem, OptimizedItem
from feeding_planner.domain.patients import LabValues, NutritionRequirements, Patient
from feeding_planner.domain.products import (
    PROTEIN,
    NutritionRoute,
    Product,
    energy_density,
    product_name,
    product_number,
)
from feeding_planner.numbers import to_amount
from feeding_planner.rules.conditions import CONDITION_PRODUCT_RULES, rule_for_condition
from feeding_planner.services.allergy import AllergyChecker
from feeding_planner.services.classifier import ConditionClassifier
from feeding_planner.services.drug_nutrient import DrugNutrientChecker
from feeding_planner.services.optimizer import VolumeOptimizer
from feeding_planner.services.refeeding import RefeedingRiskAssessor
from feeding_planner.services.requirements import adjust_requirements_for_condition
from feeding_planner.services.selector import ProductSelector, matches_name_keyword

DEFAULT_FLUID_LIMIT_ML = 2500.0

_ROUTE_LABELS = {
    NutritionRoute.ENTERAL: "an enteral nutrition plan",
    NutritionRoute.PARENTERAL: "a parenteral nutrition plan",
}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuGenerator:
    """Composes classification, selection, optimization and safety checks."""

    classifier: ConditionClassifier = field(default_factory=ConditionClassifier)
    selector: ProductSelector = field(default_factory=ProductSelector)
    optimizer: VolumeOptimizer = field(default_factory=VolumeOptimizer)
    allergy_checker: AllergyChecker = field(default_factory=AllergyChecker)
    drug_checker: DrugNutrientChecker = field(default_factory=DrugNutrientChecker)
    refeeding_assessor: RefeedingRiskAssessor = field(
        default_factory=RefeedingRiskAssessor
    )
    rules: tuple[ConditionProductRule, ...] = CONDITION_PRODUCT_RULES
    default_fluid_limit: float = DEFAULT_FLUID_LIMIT_ML
    debug: bool = False

    def generate(  # noqa: PLR0913
        self,
        patient: Patient,
        requirements: NutritionRequirements,
        products: Sequence[Product],
        *,
        fluid_restriction: float | None = None,
        route: NutritionRoute | None = None,
        labs: LabValues | None = None,
    ) -> GeneratedMenu:
        """Generate a proposed feeding plan for a patient."""
        condition = self.classifier.classify(
            patient.diagnosis, patient.patient_type, patient.age_years
        )
        rule = rule_for_condition(condition.primary, self.rules)
        resolved_route = route or _preferred_route(rule)
        targets = adjust_requirements_for_condition(requirements, rule)

        selected = self.selector.select(
            products,
            resolved_route,
            condition.primary,
            patient.allergies,
            rule.max_products,
        )
        fluid_limit = self._fluid_limit(fluid_restriction, condition)
        optimized = self.optimizer.optimize(
            selected,
            targets.energy,
            targets.protein,
            fluid_limit,
            parenteral=resolved_route == NutritionRoute.PARENTERAL,
        )

        items = tuple(
            _to_menu_item(item, self._item_rationale(item.product, condition.primary))
            for item in optimized.items
        )
        chosen = [item.product for item in items]
        allergy_warnings = self.allergy_checker.check(patient.allergies, chosen)
        drug_interactions = self.drug_checker.check(
            patient.medications, chosen, resolved_route
        )

        cautions = list(rule.cautions)
        refeeding = self.refeeding_assessor.assess(patient, labs)
        if condition.refeeding_risk or refeeding.level != "none":
            cautions.extend(
                note for note in refeeding.recommendations if note not in cautions
            )
            if not refeeding.recommendations:
                cautions.extend(
                    note
                    for note in rule_for_condition(
                        ConditionCategory.REFEEDING_RISK, self.rules
                    ).cautions
                    if note not in cautions
                )

        if self.debug:
            _logger.info(
                "Menu generated: condition=%s route=%s items=%s energy=%s%%",
                condition.primary,
                resolved_route,
                len(items),
                optimized.energy_achievement,
            )

        return GeneratedMenu(
            items=items,
            route=resolved_route,
            total_energy=optimized.total_energy,
            total_protein=optimized.total_protein,
            total_volume=optimized.total_volume,
            energy_achievement=optimized.energy_achievement,
            protein_achievement=optimized.protein_achievement,
            fluid_limit=fluid_limit,
            requirements=targets,
            condition=condition,
            condition_label=rule.label,
            rationale=self._rationale(condition, resolved_route, selected, targets),
            cautions=tuple(cautions),
            allergy_warnings=allergy_warnings,
            drug_interactions=drug_interactions,
            warnings=optimized.warnings,
        )

    def _fluid_limit(
        self, fluid_restriction: float | None, condition: ClassifiedCondition
    ) -> float:
        if fluid_restriction is not None:
            return to_amount(fluid_restriction)
        if condition.fluid_restriction is not None:
            return condition.fluid_restriction
        return self.default_fluid_limit

    def _label(self, category: ConditionCategory) -> str:
        return rule_for_condition(category, self.rules).label

    def _item_rationale(self, product: Product, condition: ConditionCategory) -> str:
        name = product_name(product)
        base = (
            f"{name} ({energy_density(product):g} kcal/mL, "
            f"protein {product_number(product, PROTEIN):g} g/100mL)"
        )
        rule = rule_for_condition(condition, self.rules)
        keywords = (
            rule.enteral_criteria.name_keywords + rule.parenteral_criteria.name_keywords
        )
        if any(matches_name_keyword(product, keyword) for keyword in keywords):
            return f"{base}: recommended for {rule.label}"
        return base

    def _rationale(
        self,
        condition: ClassifiedCondition,
        route: NutritionRoute,
        products: Sequence[Product],
        targets: NutritionRequirements,
    ) -> str:
        names = ", ".join(product_name(product) for product in products) or "none"
        parts = [
            f"[{self._label(condition.primary)}] "
            f"Generated {_ROUTE_LABELS[route]}.",
            f"Energy target {targets.energy:g} kcal/day, "
            f"protein target {targets.protein:g} g/day.",
            f"Selected products: {names}.",
        ]
        if condition.secondary:
            labels = ", ".join(
                self._label(category) for category in condition.secondary
            )
            parts.append(f"Comorbidities considered: {labels}.")
        if condition.fluid_restriction:
            parts.append(f"Fluid restriction: {condition.fluid_restriction:g} mL/day.")
        if condition.refeeding_risk:
            parts.append(
                "Refeeding syndrome risk detected; starting at a low energy intake."
            )
        return " ".join(parts)


def _preferred_route(rule: ConditionProductRule) -> NutritionRoute:
    if rule.preferred_route == "parenteral":
        return NutritionRoute.PARENTERAL
    return NutritionRoute.ENTERAL


def _to_menu_item(item: OptimizedItem, rationale: str) -> GeneratedMenuItem:
    return GeneratedMenuItem(
        product=item.product,
        volume=item.volume,
        frequency=item.frequency,
        daily_volume=item.daily_volume,
        energy_contribution=item.energy_contribution,
        protein_contribution=item.protein_contribution,
        rationale=rationale,
    )
