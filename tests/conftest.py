"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from feeding_planner.config import Settings
from feeding_planner.domain.patients import NutritionRequirements, Patient
from feeding_planner.domain.products import (
    AMINO_ACIDS,
    CALCIUM,
    CARBS,
    CATEGORY,
    CHLORIDE,
    ENERGY_DENSITY,
    FAT,
    GLUCOSE,
    LIPIDS,
    MAGNESIUM,
    MANUFACTURER,
    NAME,
    PHOSPHORUS,
    POTASSIUM,
    PROTEIN,
    ROUTE,
    SODIUM,
    SUB_CATEGORY,
    Product,
)

ENSURE: Product = {
    NAME: "エンシュア・リキッド",
    MANUFACTURER: "アボット",
    CATEGORY: "経腸栄養剤",
    SUB_CATEGORY: "半消化態",
    ROUTE: "経腸",
    ENERGY_DENSITY: 1.0,
    PROTEIN: 3.5,
    FAT: 3.5,
    CARBS: 14.0,
    SODIUM: 18,
    POTASSIUM: 16,
    CALCIUM: 12,
    MAGNESIUM: 4,
    PHOSPHORUS: 10,
    CHLORIDE: 14,
}

RENALEN: Product = {
    NAME: "リーナレンLP",
    MANUFACTURER: "テルモ",
    CATEGORY: "経腸栄養剤",
    SUB_CATEGORY: "腎臓病用",
    ROUTE: "経腸",
    ENERGY_DENSITY: 1.6,
    PROTEIN: 2.0,
    FAT: 5.6,
    CARBS: 22.4,
    SODIUM: 12,
    POTASSIUM: 5,
    CALCIUM: 6,
    MAGNESIUM: 3,
    PHOSPHORUS: 4,
    CHLORIDE: 10,
}

ELNEOPA: Product = {
    NAME: "エルネオパNF1号",
    MANUFACTURER: "大塚製薬",
    CATEGORY: "点滴製剤",
    SUB_CATEGORY: "TPN用",
    ROUTE: "静脈",
    ENERGY_DENSITY: 0.56,
    PROTEIN: 0,
    AMINO_ACIDS: 3.0,
    GLUCOSE: 12.0,
    LIPIDS: 0,
    SODIUM: 35,
    POTASSIUM: 22,
}

GLUCERNA: Product = {
    NAME: "グルセルナ・REX",
    MANUFACTURER: "アボット",
    CATEGORY: "経腸栄養剤",
    SUB_CATEGORY: "糖尿病用",
    ROUTE: "経腸",
    ENERGY_DENSITY: 0.93,
    PROTEIN: 4.0,
    FAT: 4.8,
    CARBS: 8.2,
    SODIUM: 20,
    POTASSIUM: 18,
}


@pytest.fixture
def products() -> list[Product]:
    return [ENSURE, RENALEN, ELNEOPA, GLUCERNA]


@pytest.fixture
def enteral_products() -> list[Product]:
    return [ENSURE, RENALEN, GLUCERNA]


@pytest.fixture
def make_patient() -> Callable[..., Patient]:
    def factory(**overrides: object) -> Patient:
        values: dict[str, object] = {
            "id": "patient-1",
            "name": "Test Patient",
            "age": 65,
            "gender": "male",
            "weight": 60,
            "height": 165,
            "diagnosis": "肺炎",
            "patient_type": "ICU",
        }
        values.update(overrides)
        return Patient(**values)

    return factory


@pytest.fixture
def requirements() -> NutritionRequirements:
    return NutritionRequirements(
        energy=1800,
        protein=60,
        fat=50,
        carbs=250,
        sodium=100,
        potassium=60,
        calcium=20,
        magnesium=10,
        phosphorus=30,
        chloride=100,
        iron=10,
        zinc=10,
        copper=1,
        manganese=3.5,
        iodine=130,
        selenium=30,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_fluid_limit_ml=2000,
        enteral_default_volume_ml=250,
        parenteral_default_volume_ml=400,
        debug=True,
    )
