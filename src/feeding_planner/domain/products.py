"""Catalog product records.

Products come from a heterogeneous catalog where each manufacturer exposes a
different set of columns, so they stay plain mappings keyed by the catalog's
column names and are read through the accessors below.
"""

from collections.abc import Mapping
from enum import StrEnum

from feeding_planner.numbers import to_amount

Product = Mapping[str, object]

NAME = "製剤名"
MANUFACTURER = "メーカー"
CATEGORY = "カテゴリ"
SUB_CATEGORY = "サブカテゴリ"
ROUTE = "投与経路"
NOTES = "備考"
INGREDIENTS = "原材料"

ENERGY_DENSITY = "エネルギー[kcal/ml]"
PROTEIN = "タンパク質[g/100ml]"
FAT = "脂質[g/100ml]"
CARBS = "炭水化物[g/100ml]"
AMINO_ACIDS = "アミノ酸[%]"
GLUCOSE = "ブドウ糖[%]"
LIPIDS = "脂肪[%]"
SODIUM = "Na[mEq/L]"
POTASSIUM = "K[mEq/L]"
CALCIUM = "Ca[mEq/L]"
MAGNESIUM = "Mg[mEq/L]"
PHOSPHORUS = "P[mEq/L]"
CHLORIDE = "Cl[mEq/L]"
IRON = "Fe[mg/100ml]"


class NutritionRoute(StrEnum):
    """Feeding route of a plan."""

    ENTERAL = "enteral"
    PARENTERAL = "parenteral"


def product_number(product: Product, field: str) -> float:
    """Return a numeric product field, treating missing or invalid data as 0."""
    return to_amount(product.get(field))


def product_text(product: Product, field: str) -> str:
    """Return a product field as text."""
    value = product.get(field)
    if value is None:
        return ""
    return str(value)


def product_name(product: Product) -> str:
    """Return the display name of a product."""
    return product_text(product, NAME)


def energy_density(product: Product) -> float:
    """Return kcal per mL."""
    return product_number(product, ENERGY_DENSITY)


def protein_density(product: Product) -> float:
    """Return grams of protein per mL."""
    return product_number(product, PROTEIN) / 100
