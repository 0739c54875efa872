"""Condition classification domain models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class ConditionCategory(StrEnum):
    """Condition categories that drive product selection."""

    STANDARD = "standard"
    RENAL = "renal"
    RENAL_DIALYSIS = "renal_dialysis"
    HEPATIC = "hepatic"
    DIABETES = "diabetes"
    RESPIRATORY = "respiratory"
    BURN = "burn"
    REFEEDING_RISK = "refeeding_risk"
    CARDIAC = "cardiac"
    POSTOPERATIVE = "postoperative"
    PEDIATRIC_STANDARD = "pediatric_standard"
    PEDIATRIC_NICU = "pediatric_nicu"


@dataclass(frozen=True)
class KeywordRule:
    """Diagnosis keywords that map to a category with a clinical priority."""

    category: ConditionCategory
    keywords: tuple[str, ...]
    priority: int
    fluid_restriction: float | None = None


@dataclass(frozen=True)
class ClassifiedCondition:
    """Result of classifying a diagnosis."""

    primary: ConditionCategory
    secondary: tuple[ConditionCategory, ...]
    fluid_restriction: float | None
    refeeding_risk: bool


@dataclass(frozen=True)
class NutrientFilter:
    """Numeric threshold a product field should satisfy."""

    field: str
    operator: Literal["gt", "lt", "gte", "lte"]
    value: float


@dataclass(frozen=True)
class ProductCriteria:
    """Selection criteria for one route."""

    name_keywords: tuple[str, ...]
    nutrient_filters: tuple[NutrientFilter, ...]
    sort_by: str
    sort_order: Literal["asc", "desc"]


@dataclass(frozen=True)
class ConditionProductRule:
    """Product selection and dosing rule attached to a condition."""

    condition: ConditionCategory
    preferred_route: Literal["enteral", "parenteral", "either"]
    enteral_criteria: ProductCriteria
    parenteral_criteria: ProductCriteria
    max_products: int
    energy_multiplier: float
    protein_multiplier: float
    cautions: tuple[str, ...]
    label: str
