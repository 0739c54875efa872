"""Safety screening domain models."""

from dataclasses import dataclass
from typing import Literal

InteractionSeverity = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class AllergyWarning:
    """A product that may contain something the patient is allergic to."""

    product_name: str
    allergen: str
    severity: Literal["high", "medium"]
    message: str


@dataclass(frozen=True)
class DrugNutrientRule:
    """Known interaction between a drug class and a nutrient."""

    id: str
    drug_keywords: tuple[str, ...]
    nutrient_keywords: tuple[str, ...]
    severity: InteractionSeverity
    interaction: str
    recommendation: str


@dataclass(frozen=True)
class DrugNutrientInteraction:
    """A fired drug-nutrient rule for one medication."""

    rule_id: str
    drug: str
    severity: InteractionSeverity
    interaction: str
    recommendation: str
