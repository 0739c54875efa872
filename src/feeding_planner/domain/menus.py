"""Domain models for optimized and generated feeding plans."""

from dataclasses import dataclass

from feeding_planner.domain.conditions import ClassifiedCondition
from feeding_planner.domain.patients import NutritionRequirements
from feeding_planner.domain.products import NutritionRoute, Product
from feeding_planner.domain.safety import AllergyWarning, DrugNutrientInteraction


@dataclass(frozen=True)
class OptimizedItem:
    """Dose and contribution of one product."""

    product: Product
    volume: float
    frequency: int
    daily_volume: float
    energy_contribution: float
    protein_contribution: float


@dataclass(frozen=True)
class OptimizationResult:
    """Volume optimizer output with totals and advisory warnings."""

    items: tuple[OptimizedItem, ...]
    total_energy: float
    total_protein: float
    total_volume: float
    energy_achievement: float
    protein_achievement: float
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class GeneratedMenuItem:
    """Generated plan line with its rationale."""

    product: Product
    volume: float
    frequency: int
    daily_volume: float
    energy_contribution: float
    protein_contribution: float
    rationale: str


@dataclass(frozen=True)
class GeneratedMenu:
    """Complete proposed feeding plan."""

    items: tuple[GeneratedMenuItem, ...]
    route: NutritionRoute
    total_energy: float
    total_protein: float
    total_volume: float
    energy_achievement: float
    protein_achievement: float
    fluid_limit: float
    requirements: NutritionRequirements
    condition: ClassifiedCondition
    condition_label: str
    rationale: str
    cautions: tuple[str, ...]
    allergy_warnings: tuple[AllergyWarning, ...]
    drug_interactions: tuple[DrugNutrientInteraction, ...]
    warnings: tuple[str, ...]
