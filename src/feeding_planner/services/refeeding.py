"""Refeeding syndrome risk assessment from body metrics and labs."""

from dataclasses import dataclass
from typing import Literal

from feeding_planner.domain.patients import LabValues, Patient
from feeding_planner.numbers import round_half_up

RiskLevel = Literal["high", "moderate", "none"]

SEVERE_BMI = 16.0
UNDERWEIGHT_BMI = 18.5
LOW_ADULT_WEIGHT_KG = 40.0
ADULT_AGE = 18
LOW_PHOSPHORUS = 2.5
LOW_POTASSIUM = 3.5
LOW_MAGNESIUM = 1.8

HIGH_RECOMMENDATIONS: tuple[str, ...] = (
    "Start at 10 kcal/kg/day",
    "Give thiamine (vitamin B1)",
    "Correct P, K and Mg before starting",
    "ECG monitoring recommended",
)
MODERATE_RECOMMENDATIONS: tuple[str, ...] = (
    "Start at 15-20 kcal/kg/day",
    "Monitor electrolytes frequently",
    "Consider thiamine supplementation",
)


@dataclass(frozen=True)
class RefeedingRisk:
    """Refeeding risk level with the flags that raised it."""

    level: RiskLevel
    reasons: tuple[str, ...]
    recommendations: tuple[str, ...]


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Return BMI rounded to one decimal, or 0 for missing metrics."""
    if weight_kg <= 0 or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


@dataclass(frozen=True)
class RefeedingRiskAssessor:
    """Counts refeeding risk flags; two or more is high risk."""

    def assess(self, patient: Patient, labs: LabValues | None = None) -> RefeedingRisk:
        """Assess refeeding risk for a patient."""
        reasons = _collect_flags(patient, labs)
        if len(reasons) >= 2:  # noqa: PLR2004
            return RefeedingRisk("high", reasons, HIGH_RECOMMENDATIONS)
        if reasons:
            return RefeedingRisk("moderate", reasons, MODERATE_RECOMMENDATIONS)
        return RefeedingRisk("none", (), ())


def _collect_flags(patient: Patient, labs: LabValues | None) -> tuple[str, ...]:
    flags: list[str] = []
    bmi = calculate_bmi(patient.weight, patient.height)
    if 0 < bmi < SEVERE_BMI:
        flags.append("BMI < 16 (severely underweight)")
    elif SEVERE_BMI <= bmi < UNDERWEIGHT_BMI:
        flags.append("BMI 16-18.5 (underweight)")

    if patient.age_years >= ADULT_AGE and 0 < patient.weight < LOW_ADULT_WEIGHT_KG:
        flags.append("Weight < 40 kg")

    if labs is not None:
        if labs.phosphorus is not None and labs.phosphorus < LOW_PHOSPHORUS:
            flags.append("Hypophosphatemia (P < 2.5)")
        if labs.potassium is not None and labs.potassium < LOW_POTASSIUM:
            flags.append("Hypokalemia (K < 3.5)")
        if labs.magnesium is not None and labs.magnesium < LOW_MAGNESIUM:
            flags.append("Hypomagnesemia (Mg < 1.8)")
    return tuple(flags)
