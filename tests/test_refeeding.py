"""Tests for refeeding risk assessment."""

from feeding_planner.domain.patients import LabValues
from feeding_planner.services.refeeding import (
    HIGH_RECOMMENDATIONS,
    MODERATE_RECOMMENDATIONS,
    RefeedingRiskAssessor,
    calculate_bmi,
)


def test_calculate_bmi() -> None:
    assert calculate_bmi(60, 165) == 22.0
    assert calculate_bmi(35, 160) == 13.7
    assert calculate_bmi(0, 165) == 0
    assert calculate_bmi(60, 0) == 0


def test_low_bmi_and_weight_is_high_risk(make_patient) -> None:
    risk = RefeedingRiskAssessor().assess(make_patient(weight=35, height=160, age=22))

    assert risk.level == "high"
    assert len(risk.reasons) == 2
    assert risk.recommendations == HIGH_RECOMMENDATIONS


def test_single_flag_is_moderate_risk(make_patient) -> None:
    risk = RefeedingRiskAssessor().assess(make_patient(weight=50, height=165))

    assert risk.level == "moderate"
    assert risk.reasons == ("BMI 16-18.5 (underweight)",)
    assert risk.recommendations == MODERATE_RECOMMENDATIONS


def test_low_weight_flag_applies_to_adults_only(make_patient) -> None:
    risk = RefeedingRiskAssessor().assess(make_patient(weight=30, height=140, age=10))

    assert risk.level == "moderate"


def test_lab_values_add_flags(make_patient) -> None:
    assessor = RefeedingRiskAssessor()
    patient = make_patient()

    assert assessor.assess(patient, LabValues(phosphorus=2.0)).level == "moderate"
    assert (
        assessor.assess(patient, LabValues(phosphorus=2.0, potassium=3.0)).level
        == "high"
    )
    assert assessor.assess(patient, LabValues(magnesium=2.1)).level == "none"


def test_healthy_patient_has_no_risk(make_patient) -> None:
    risk = RefeedingRiskAssessor().assess(make_patient())

    assert risk.level == "none"
    assert risk.reasons == ()
    assert risk.recommendations == ()


def test_adult_weight_flag_uses_age_in_months(make_patient) -> None:
    patient = make_patient(age=0, age_months=300, weight=35, height=150)

    assert RefeedingRiskAssessor().assess(patient).level == "high"
