"""Tests for allergy screening."""

from dataclasses import MISSING, fields

from feeding_planner.domain.products import CATEGORY, INGREDIENTS, NAME
from feeding_planner.rules.allergens import ALLERGEN_PRODUCT_MAP
from feeding_planner.services.allergy import AllergyChecker
from tests.conftest import ENSURE, GLUCERNA

MILK_FORMULA = {
    NAME: "Test formula",
    CATEGORY: "経腸栄養剤",
    INGREDIENTS: "乳たんぱく質, 大豆油, milk protein concentrate",
}


def test_allergen_map_match_is_high_severity() -> None:
    warnings = AllergyChecker().check(["乳"], [MILK_FORMULA, GLUCERNA])

    assert len(warnings) == 1
    assert warnings[0].product_name == "Test formula"
    assert warnings[0].allergen == "乳"
    assert warnings[0].severity == "high"


def test_english_allergy_matches_english_ingredients() -> None:
    warnings = AllergyChecker().check(["milk"], [MILK_FORMULA])

    assert [warning.severity for warning in warnings] == ["high"]


def test_allergy_phrase_containing_allergen_key_matches() -> None:
    warnings = AllergyChecker().check(["牛乳アレルギー"], [MILK_FORMULA])

    assert len(warnings) == 1
    assert warnings[0].severity == "high"


def test_name_containment_is_medium_severity() -> None:
    warnings = AllergyChecker().check(["エンシュア"], [ENSURE])

    assert len(warnings) == 1
    assert warnings[0].product_name == "エンシュア・リキッド"
    assert warnings[0].severity == "medium"


def test_warnings_are_deduplicated_per_product_and_allergy() -> None:
    warnings = AllergyChecker().check(["乳", "乳"], [MILK_FORMULA, MILK_FORMULA])

    assert len(warnings) == 1


def test_empty_inputs_return_no_warnings() -> None:
    checker = AllergyChecker()

    assert checker.check([], [MILK_FORMULA]) == ()
    assert checker.check(["乳"], []) == ()


def test_injected_allergen_map_is_used() -> None:
    checker = AllergyChecker(allergen_map={"sesame": ("sesame", "ゴマ")})
    product = {NAME: "Sesame blend", INGREDIENTS: "ゴマ油"}

    warnings = checker.check(["sesame"], [product])

    assert [warning.severity for warning in warnings] == ["high"]
    assert checker.check(["乳"], [MILK_FORMULA]) == ()


def test_default_allergen_map_comes_from_a_factory() -> None:
    allergen_map = next(f for f in fields(AllergyChecker) if f.name == "allergen_map")

    assert allergen_map.default is MISSING
    assert AllergyChecker().allergen_map is ALLERGEN_PRODUCT_MAP
