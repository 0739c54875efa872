"""Caller-supplied patient and requirement records."""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

from feeding_planner.numbers import to_amount

Amount = Annotated[float, BeforeValidator(to_amount)]


def _optional_amount(value: object) -> float | None:
    if value is None:
        return None
    return to_amount(value)


OptionalAmount = Annotated[float | None, BeforeValidator(_optional_amount)]


class Patient(BaseModel):
    """Patient snapshot used for a single evaluation."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    age: Amount = 0.0
    age_months: OptionalAmount = None
    gender: str = ""
    weight: Amount = 0.0
    height: Amount = 0.0
    diagnosis: str = ""
    patient_type: str = ""
    allergies: tuple[str, ...] = ()
    medications: tuple[str, ...] = ()

    @property
    def age_years(self) -> float:
        """Age in years, falling back to age_months when age is missing."""
        if self.age > 0 or not self.age_months:
            return self.age
        return self.age_months / 12


class LabValues(BaseModel):
    """Serum values relevant to refeeding risk, in mg/dL or mEq/L."""

    model_config = ConfigDict(frozen=True)

    phosphorus: OptionalAmount = None
    potassium: OptionalAmount = None
    magnesium: OptionalAmount = None


class NutritionRequirements(BaseModel):
    """Daily nutrient targets."""

    model_config = ConfigDict(frozen=True)

    energy: Amount = 0.0
    protein: Amount = 0.0
    fat: Amount = 0.0
    carbs: Amount = 0.0
    sodium: Amount = 0.0
    potassium: Amount = 0.0
    calcium: Amount = 0.0
    magnesium: Amount = 0.0
    phosphorus: Amount = 0.0
    chloride: Amount = 0.0
    iron: Amount = 0.0
    zinc: Amount = 0.0
    copper: Amount = 0.0
    manganese: Amount = 0.0
    iodine: Amount = 0.0
    selenium: Amount = 0.0

    def value(self, nutrient: str) -> float:
        """Return the target for a nutrient name, or 0 when unknown."""
        if nutrient not in type(self).model_fields:
            return 0.0
        return float(getattr(self, nutrient))
