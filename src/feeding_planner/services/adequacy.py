"""Nutrient adequacy scoring of an intake against requirements."""

from collections.abc import Mapping
from dataclasses import dataclass

from feeding_planner.domain.patients import NutritionRequirements
from feeding_planner.domain.scoring import AdequacyBreakdown, NutrientDetail, NutrientStatus
from feeding_planner.numbers import percentage, round_half_up, to_amount

MACRO_WEIGHTS: tuple[tuple[str, str, float], ...] = (
    ("energy", "Energy", 0.4),
    ("protein", "Protein", 0.3),
    ("fat", "Fat", 0.15),
    ("carbs", "Carbohydrate", 0.15),
)
ELECTROLYTES: tuple[tuple[str, str], ...] = (
    ("sodium", "Na"),
    ("potassium", "K"),
    ("calcium", "Ca"),
    ("magnesium", "Mg"),
    ("phosphorus", "P"),
    ("chloride", "Cl"),
)
TRACE_ELEMENTS: tuple[tuple[str, str], ...] = (
    ("iron", "Fe"),
    ("zinc", "Zn"),
    ("copper", "Cu"),
    ("manganese", "Mn"),
    ("iodine", "I"),
    ("selenium", "Se"),
)

OVERALL_WEIGHTS = {"macro": 0.5, "electrolyte": 0.3, "trace": 0.2}


@dataclass(frozen=True)
class AdequacyBands:
    """Percentage bands used for nutrient scoring and status."""

    adequate_low: float = 90
    adequate_high: float = 110
    excess_span: float = 90
    deficient_below: float = 50
    low_below: float = 80
    normal_up_to: float = 120


@dataclass(frozen=True)
class AdequacyScorer:
    """Scores macro, electrolyte and trace element coverage on 0-100."""

    bands: AdequacyBands = AdequacyBands()

    def score(
        self,
        requirements: NutritionRequirements,
        intake: Mapping[str, object],
    ) -> AdequacyBreakdown:
        """Compare intake with requirements and return a score breakdown."""
        details: list[NutrientDetail] = []

        macro_sum = 0.0
        for nutrient, label, weight in MACRO_WEIGHTS:
            detail, score = self._evaluate(nutrient, label, requirements, intake, 1)
            details.append(detail)
            macro_sum += score * weight
        macro_score = _bounded(round_half_up(macro_sum))

        electrolyte_scores = []
        for nutrient, label in ELECTROLYTES:
            detail, score = self._evaluate(nutrient, label, requirements, intake, 1)
            details.append(detail)
            electrolyte_scores.append(score)
        electrolyte_score = _average(electrolyte_scores)

        trace_scores = []
        for nutrient, label in TRACE_ELEMENTS:
            detail, score = self._evaluate(nutrient, label, requirements, intake, 2)
            details.append(detail)
            trace_scores.append(score)
        trace_score = _average(trace_scores)

        overall = _bounded(
            round_half_up(
                macro_score * OVERALL_WEIGHTS["macro"]
                + electrolyte_score * OVERALL_WEIGHTS["electrolyte"]
                + trace_score * OVERALL_WEIGHTS["trace"]
            )
        )
        return AdequacyBreakdown(
            overall=overall,
            macro_score=macro_score,
            electrolyte_score=electrolyte_score,
            trace_element_score=trace_score,
            details=tuple(details),
        )

    def nutrient_score(self, current: float, target: float) -> float:
        """Score one nutrient: full marks in the adequate band, scaled outside."""
        if target <= 0:
            return 100.0
        pct = percentage(current, target)
        if self.bands.adequate_low <= pct <= self.bands.adequate_high:
            return 100.0
        if pct < self.bands.adequate_low:
            return _bounded(round_half_up(pct / self.bands.adequate_low * 100))
        overshoot = (pct - self.bands.adequate_high) / self.bands.excess_span
        return _bounded(round_half_up(100 - min(overshoot, 1.0) * 100))

    def status(self, pct: float) -> NutrientStatus:
        """Band a percentage into a status."""
        if pct < self.bands.deficient_below:
            return "deficient"
        if pct < self.bands.low_below:
            return "low"
        if pct <= self.bands.normal_up_to:
            return "normal"
        return "excess"

    def _evaluate(
        self,
        nutrient: str,
        label: str,
        requirements: NutritionRequirements,
        intake: Mapping[str, object],
        digits: int,
    ) -> tuple[NutrientDetail, float]:
        current = to_amount(intake.get(nutrient))
        target = requirements.value(nutrient)
        pct = percentage(current, target)
        detail = NutrientDetail(
            nutrient=nutrient,
            label=label,
            current=round_half_up(current, digits),
            target=target,
            percentage=round_half_up(pct),
            status=self.status(pct),
        )
        return detail, self.nutrient_score(current, target)


def _average(scores: list[float]) -> float:
    if not scores:
        return 0.0
    return _bounded(round_half_up(sum(scores) / len(scores)))


def _bounded(value: float) -> float:
    return min(100.0, max(0.0, value))
