"""Dependency container wiring for host applications."""

from dataclasses import dataclass

from feeding_planner.config import Settings
from feeding_planner.services.adequacy import AdequacyScorer
from feeding_planner.services.allergy import AllergyChecker
from feeding_planner.services.classifier import ConditionClassifier
from feeding_planner.services.drug_nutrient import DrugNutrientChecker
from feeding_planner.services.menu_generator import MenuGenerator
from feeding_planner.services.optimizer import VolumeOptimizer
from feeding_planner.services.refeeding import RefeedingRiskAssessor
from feeding_planner.services.selector import ProductSelector
from feeding_planner.services.simulation import SimulationScorer


@dataclass
class PlannerContainer:
    """Holds planner services sharing one set of rule tables."""

    settings: Settings
    classifier: ConditionClassifier
    allergy_checker: AllergyChecker
    drug_checker: DrugNutrientChecker
    selector: ProductSelector
    optimizer: VolumeOptimizer
    adequacy_scorer: AdequacyScorer
    refeeding_assessor: RefeedingRiskAssessor
    menu_generator: MenuGenerator
    simulation_scorer: SimulationScorer


def build_container(settings: Settings | None = None) -> PlannerContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    classifier = ConditionClassifier()
    allergy_checker = AllergyChecker()
    drug_checker = DrugNutrientChecker()
    selector = ProductSelector(allergy_checker, debug=resolved_settings.debug)
    optimizer = VolumeOptimizer(
        enteral_default_volume=resolved_settings.enteral_default_volume_ml,
        parenteral_default_volume=resolved_settings.parenteral_default_volume_ml,
    )
    adequacy_scorer = AdequacyScorer()
    refeeding_assessor = RefeedingRiskAssessor()
    menu_generator = MenuGenerator(
        classifier=classifier,
        selector=selector,
        optimizer=optimizer,
        allergy_checker=allergy_checker,
        drug_checker=drug_checker,
        refeeding_assessor=refeeding_assessor,
        default_fluid_limit=resolved_settings.default_fluid_limit_ml,
        debug=resolved_settings.debug,
    )
    simulation_scorer = SimulationScorer(
        adequacy_scorer=adequacy_scorer,
        allergy_checker=allergy_checker,
        drug_checker=drug_checker,
        debug=resolved_settings.debug,
    )
    return PlannerContainer(
        settings=resolved_settings,
        classifier=classifier,
        allergy_checker=allergy_checker,
        drug_checker=drug_checker,
        selector=selector,
        optimizer=optimizer,
        adequacy_scorer=adequacy_scorer,
        refeeding_assessor=refeeding_assessor,
        menu_generator=menu_generator,
        simulation_scorer=simulation_scorer,
    )
