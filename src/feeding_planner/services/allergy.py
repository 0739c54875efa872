"""Allergy screening of catalog products."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from feeding_planner.domain.products import (
    CATEGORY,
    INGREDIENTS,
    NOTES,
    SUB_CATEGORY,
    Product,
    product_name,
    product_text,
)
from feeding_planner.domain.safety import AllergyWarning
from feeding_planner.rules.allergens import ALLERGEN_PRODUCT_MAP
from feeding_planner.services.text import normalize_text

_UNKNOWN_PRODUCT = "Unknown product"


@dataclass(frozen=True)
class AllergyChecker:
    """Matches patient allergies against product text fields."""

    allergen_map: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: ALLERGEN_PRODUCT_MAP
    )

    def check(
        self, allergies: Sequence[str], products: Sequence[Product]
    ) -> tuple[AllergyWarning, ...]:
        """Return one warning per matching (product, allergy) pair."""
        if not allergies or not products:
            return ()

        warnings: list[AllergyWarning] = []
        seen: set[tuple[str, str]] = set()
        for allergy in allergies:
            normalized_allergy = normalize_text(allergy)
            if not normalized_allergy:
                continue
            for product in products:
                name = product_name(product) or _UNKNOWN_PRODUCT
                key = (name, allergy)
                if key in seen:
                    continue
                if self._matches_allergen_map(normalized_allergy, product):
                    seen.add(key)
                    warnings.append(
                        AllergyWarning(
                            product_name=name,
                            allergen=allergy,
                            severity="high",
                            message=(
                                f"{name} may contain ingredients related to "
                                f"{allergy}"
                            ),
                        )
                    )
                    continue
                if _matches_name(normalized_allergy, product):
                    seen.add(key)
                    warnings.append(
                        AllergyWarning(
                            product_name=name,
                            allergen=allergy,
                            severity="medium",
                            message=f"{name} may match the {allergy} allergy",
                        )
                    )
        return tuple(warnings)

    def _matches_allergen_map(self, normalized_allergy: str, product: Product) -> bool:
        searchable = _searchable_text(product)
        for allergen, related_terms in self.allergen_map.items():
            if normalize_text(allergen) not in normalized_allergy:
                continue
            if any(normalize_text(term) in searchable for term in related_terms):
                return True
        return False


def _searchable_text(product: Product) -> str:
    fields = (
        product_name(product),
        product_text(product, CATEGORY),
        product_text(product, SUB_CATEGORY),
        product_text(product, NOTES),
        product_text(product, INGREDIENTS),
    )
    return "|".join(normalize_text(value) for value in fields)


def _matches_name(normalized_allergy: str, product: Product) -> bool:
    name = normalize_text(product_name(product))
    if not name:
        return False
    return normalized_allergy in name or name in normalized_allergy
