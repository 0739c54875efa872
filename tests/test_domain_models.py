"""Tests for caller-supplied records."""

from feeding_planner.domain.patients import LabValues, NutritionRequirements, Patient
from feeding_planner.domain.products import (
    ENERGY_DENSITY,
    PROTEIN,
    energy_density,
    product_name,
    product_number,
    protein_density,
)
from feeding_planner.domain.simulation import UserMenu


def test_patient_numbers_are_parsed_permissively() -> None:
    patient = Patient.model_validate(
        {
            "age": "72",
            "weight": "abc",
            "height": -160,
            "age_months": None,
            "allergies": ["乳", "egg"],
        }
    )

    assert patient.age == 72
    assert patient.weight == 0
    assert patient.height == 0
    assert patient.age_months is None
    assert patient.allergies == ("乳", "egg")


def test_lab_values_keep_missing_as_none() -> None:
    labs = LabValues.model_validate({"phosphorus": "2.1", "potassium": "n/a"})

    assert labs.phosphorus == 2.1
    assert labs.potassium == 0
    assert labs.magnesium is None


def test_requirements_value_lookup() -> None:
    requirements = NutritionRequirements.model_validate({"energy": "1800", "fat": None})

    assert requirements.value("energy") == 1800
    assert requirements.value("fat") == 0
    assert requirements.value("model_config") == 0


def test_user_menu_intake_is_coerced() -> None:
    menu = UserMenu.model_validate(
        {"current_intake": {"energy": "1500", "protein": float("inf")}}
    )

    assert menu.current_intake == {"energy": 1500, "protein": 0}


def test_product_accessors_tolerate_bad_data() -> None:
    product = {ENERGY_DENSITY: "1.5", PROTEIN: "n/a"}

    assert energy_density(product) == 1.5
    assert product_number(product, PROTEIN) == 0
    assert protein_density({PROTEIN: 4.0}) == 0.04
    assert product_name(product) == ""


def test_age_years_falls_back_to_months() -> None:
    assert Patient(age=40, age_months=6).age_years == 40
    assert Patient(age_months=18).age_years == 1.5
    assert Patient().age_years == 0
