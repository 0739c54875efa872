"""Score breakdowns and feedback."""

from dataclasses import dataclass
from typing import Literal

NutrientStatus = Literal["deficient", "low", "normal", "excess"]
FeedbackType = Literal["correct", "warning", "error", "tip"]


@dataclass(frozen=True)
class NutrientDetail:
    """Intake against target for a single nutrient."""

    nutrient: str
    label: str
    current: float
    target: float
    percentage: float
    status: NutrientStatus


@dataclass(frozen=True)
class AdequacyBreakdown:
    """Adequacy score with per-group sub-scores."""

    overall: float
    macro_score: float
    electrolyte_score: float
    trace_element_score: float
    details: tuple[NutrientDetail, ...]


@dataclass(frozen=True)
class SimulationScore:
    """Weighted score of a trainee plan."""

    overall: float
    macro_score: float
    constraint_score: float
    safety_score: float
    efficiency_score: float


@dataclass(frozen=True)
class FeedbackItem:
    """Single feedback message for the trainee."""

    type: FeedbackType
    category: str
    message: str
    detail: str | None = None
