"""Tests for feeding plan generation."""

from feeding_planner.domain.conditions import ConditionCategory
from feeding_planner.domain.patients import LabValues
from feeding_planner.domain.products import NutritionRoute, product_name
from feeding_planner.rules.conditions import rule_for_condition
from feeding_planner.services.menu_generator import MenuGenerator
from feeding_planner.services.optimizer import NO_PRODUCTS_WARNING
from feeding_planner.services.refeeding import HIGH_RECOMMENDATIONS
from tests.conftest import RENALEN


def _names(menu) -> list[str]:
    return [product_name(item.product) for item in menu.items]


def test_standard_patient_gets_enteral_plan(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(make_patient(), requirements, products)

    assert menu.route == NutritionRoute.ENTERAL
    assert menu.condition.primary == ConditionCategory.STANDARD
    assert menu.condition_label == "Standard"
    assert _names(menu) == ["エンシュア・リキッド", "リーナレンLP"]
    assert menu.total_energy > 0
    assert menu.requirements.energy == 1800
    assert menu.fluid_limit == 2500
    assert menu.rationale.startswith("[Standard] Generated an enteral nutrition plan.")
    assert menu.cautions == ()


def test_renal_diagnosis_prefers_renal_product(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="腎不全"), requirements, products
    )

    assert menu.condition.primary == ConditionCategory.RENAL
    assert _names(menu)[0] == "リーナレンLP"
    assert "Renal failure" in menu.rationale
    assert menu.items[0].rationale.endswith("recommended for Renal failure")
    assert "1.6 kcal/mL" in menu.items[0].rationale
    assert menu.requirements.potassium == 30
    assert menu.requirements.protein == 48
    assert menu.cautions == rule_for_condition(ConditionCategory.RENAL).cautions


def test_diabetes_diagnosis_prefers_low_carbohydrate_product(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="糖尿病"), requirements, products
    )

    assert menu.condition.primary == ConditionCategory.DIABETES
    assert _names(menu)[0] == "グルセルナ・REX"


def test_fluid_restriction_clamps_plan(make_patient, requirements) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="腎不全"),
        requirements,
        [RENALEN],
        fluid_restriction=500,
    )

    assert menu.fluid_limit == 500
    assert menu.total_volume <= 500
    assert menu.energy_achievement < 80
    assert any("fluid restriction may be too tight" in w for w in menu.warnings)


def test_cardiac_diagnosis_applies_classified_fluid_restriction(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="心不全"), requirements, products
    )

    assert menu.fluid_limit == 1500
    assert menu.total_volume <= 1500
    assert len(menu.items) == 1
    assert "Fluid restriction: 1500 mL/day." in menu.rationale


def test_anorexia_patient_gets_refeeding_cautions(
    make_patient, requirements, products
) -> None:
    patient = make_patient(
        weight=35,
        height=160,
        age=22,
        diagnosis="神経性食思不振症",
        patient_type="ward",
    )

    menu = MenuGenerator().generate(patient, requirements, products)

    assert menu.condition.refeeding_risk
    assert menu.route == NutritionRoute.PARENTERAL
    assert _names(menu) == ["エルネオパNF1号"]
    assert menu.requirements.energy == 720
    assert menu.cautions
    assert set(HIGH_RECOMMENDATIONS) <= set(menu.cautions)
    assert "Refeeding syndrome risk detected" in menu.rationale


def test_lab_values_add_refeeding_cautions(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(),
        requirements,
        products,
        labs=LabValues(phosphorus=2.0, potassium=3.0),
    )

    assert not menu.condition.refeeding_risk
    assert menu.cautions == HIGH_RECOMMENDATIONS


def test_route_mismatch_returns_empty_plan(
    make_patient, requirements, enteral_products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(),
        requirements,
        enteral_products,
        route=NutritionRoute.PARENTERAL,
    )

    assert menu.route == NutritionRoute.PARENTERAL
    assert menu.items == ()
    assert menu.total_energy == 0
    assert menu.total_protein == 0
    assert menu.total_volume == 0
    assert menu.warnings == (NO_PRODUCTS_WARNING,)
    assert "Selected products: none." in menu.rationale


def test_either_route_defaults_to_enteral(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="術後"), requirements, products
    )

    assert menu.condition.primary == ConditionCategory.POSTOPERATIVE
    assert menu.route == NutritionRoute.ENTERAL


def test_allergens_are_excluded_and_interactions_reported(
    make_patient, requirements, products
) -> None:
    patient = make_patient(allergies=("エンシュア",), medications=("フロセミド",))

    menu = MenuGenerator().generate(patient, requirements, products)

    assert "エンシュア・リキッド" not in _names(menu)
    assert menu.allergy_warnings == ()
    assert [item.rule_id for item in menu.drug_interactions] == [
        "loop-diuretic-k",
        "loop-diuretic-mg",
    ]


def test_comorbidities_listed_in_rationale(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator().generate(
        make_patient(diagnosis="糖尿病 心不全"), requirements, products
    )

    assert menu.condition.primary == ConditionCategory.CARDIAC
    assert "Comorbidities considered: Diabetes." in menu.rationale


def test_default_fluid_limit_is_configurable(
    make_patient, requirements, products
) -> None:
    menu = MenuGenerator(default_fluid_limit=2000, debug=True).generate(
        make_patient(), requirements, products
    )

    assert menu.fluid_limit == 2000


def test_generation_is_deterministic(
    make_patient, requirements, products
) -> None:
    generator = MenuGenerator()
    patient = make_patient(diagnosis="肝硬変", medications=("インスリン",))

    assert generator.generate(patient, requirements, products) == generator.generate(
        patient, requirements, products
    )


def test_age_in_months_decides_adult_classification(
    make_patient, requirements, products
) -> None:
    patient = make_patient(age=0, age_months=240, diagnosis="腎不全")

    menu = MenuGenerator().generate(patient, requirements, products)

    assert menu.condition.primary == ConditionCategory.RENAL
