"""Pydantic models for simulation cases and trainee plans."""

from pydantic import BaseModel, ConfigDict, Field

from feeding_planner.domain.patients import Amount, NutritionRequirements, Patient
from feeding_planner.domain.products import NutritionRoute


class IdealMenuItem(BaseModel):
    """Product category expected in the ideal answer."""

    model_config = ConfigDict(frozen=True)

    product_keywords: tuple[str, ...] = ()
    category: str = ""
    volume_range: tuple[Amount, Amount] = (0.0, 0.0)
    required: bool = False


class IdealAnswer(BaseModel):
    """Reference plan used to score a trainee's plan."""

    model_config = ConfigDict(frozen=True)

    route: NutritionRoute = NutritionRoute.ENTERAL
    menu_items: tuple[IdealMenuItem, ...] = ()
    requirements: NutritionRequirements = Field(default_factory=NutritionRequirements)
    key_points: tuple[str, ...] = ()
    rationale: str = ""
    common_mistakes: tuple[str, ...] = ()
    references: tuple[str, ...] = ()


class SimulationCase(BaseModel):
    """Training case with its patient and ideal answer."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    difficulty: str = "beginner"
    category: str = ""
    patient: Patient
    clinical_context: str = ""
    objectives: tuple[str, ...] = ()
    ideal_answer: IdealAnswer


class UserMenuItem(BaseModel):
    """Line of a trainee-built plan."""

    model_config = ConfigDict(frozen=True)

    product_name: str
    volume: Amount = 0.0
    frequency: Amount = 0.0


class UserMenu(BaseModel):
    """Plan assembled by a trainee, with its computed intake."""

    model_config = ConfigDict(frozen=True)

    route: NutritionRoute = NutritionRoute.ENTERAL
    items: tuple[UserMenuItem, ...] = ()
    current_intake: dict[str, Amount] = Field(default_factory=dict)
    total_volume: Amount = 0.0
