"""Scoring and feedback for trainee-built plans in simulation cases."""

import logging
import re
from dataclasses import dataclass, field
from typing import Literal

from feeding_planner.domain.products import CATEGORY, NAME, SUB_CATEGORY, Product
from feeding_planner.domain.safety import AllergyWarning, DrugNutrientInteraction
from feeding_planner.domain.scoring import FeedbackItem, SimulationScore
from feeding_planner.domain.simulation import IdealAnswer, SimulationCase, UserMenu
from feeding_planner.numbers import round_half_up, to_amount
from feeding_planner.services.adequacy import AdequacyScorer
from feeding_planner.services.allergy import AllergyChecker
from feeding_planner.services.drug_nutrient import DrugNutrientChecker
from feeding_planner.services.text import normalize_text

WEIGHT_MACRO = 0.4
WEIGHT_CONSTRAINT = 0.3
WEIGHT_SAFETY = 0.2
WEIGHT_EFFICIENCY = 0.1

SAFETY_PENALTY_HIGH = 20
SAFETY_PENALTY_MEDIUM = 10
SAFETY_PENALTY_ALLERGY = 20

REQUIRED_POINTS = 60
COUNT_POINTS = 40
COUNT_PENALTY_PER_ITEM = 10

PARTIAL_CREDIT = 0.5

_NUTRIENT_ALIASES: dict[str, str] = {
    "エネルギー": "energy",
    "energy": "energy",
    "蛋白質": "protein",
    "蛋白": "protein",
    "タンパク質": "protein",
    "タンパク": "protein",
    "protein": "protein",
    "na": "sodium",
    "sodium": "sodium",
    "k": "potassium",
    "potassium": "potassium",
    "ca": "calcium",
    "calcium": "calcium",
    "mg": "magnesium",
    "magnesium": "magnesium",
    "p": "phosphorus",
    "phosphorus": "phosphorus",
    "水分": "volume",
    "volume": "volume",
}

_ENGLISH_NUTRIENTS = (
    r"(?i:energy|protein|sodium|potassium|calcium|magnesium|phosphorus|volume"
    r"|fat|carbs)"
)
_NUTRIENT = (
    r"(エネルギー|蛋白質|蛋白|タンパク質|タンパク|脂質|炭水化物|糖質|水分"
    r"|Na|Ca|Mg|Fe|Zn|Cu|K|P|" + _ENGLISH_NUTRIENTS + r")"
)
_NUMBER = r"(\d+(?:\.\d+)?)"
_RANGE_SEPARATOR = r"\s*[-~～〜–]\s*"
RANGE_PATTERN = re.compile(
    _NUTRIENT + r"\s*[：:]?\s*" + _NUMBER + _RANGE_SEPARATOR + _NUMBER
)
UPPER_PATTERN = re.compile(_NUTRIENT + r"\s*[<＜≤≦]=?\s*" + _NUMBER)
LOWER_PATTERN = re.compile(_NUTRIENT + r"\s*[>＞≥≧]=?\s*" + _NUMBER)

CATEGORY_HINT_KEYWORDS: tuple[str, ...] = (
    "bcaa",
    "アミノレバン",
    "ヘパン",
    "腎",
    "レナ",
    "リーナレン",
    "グルセルナ",
    "糖尿",
    "母乳",
    "強化",
    "チアミン",
    "フェニトイン",
    "mct",
    "renal",
    "diabet",
    "thiamine",
    "peptide",
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericConstraint:
    """Numeric relation parsed from a key point."""

    nutrient: str
    op: Literal["range", "lt", "gt"]
    low: float
    high: float


def extract_numeric_constraint(key_point: str) -> NumericConstraint | None:
    """Parse a range, upper bound or lower bound clause from a key point."""
    match = RANGE_PATTERN.search(key_point)
    if match:
        return NumericConstraint(
            nutrient=match.group(1),
            op="range",
            low=float(match.group(2)),
            high=float(match.group(3)),
        )
    match = UPPER_PATTERN.search(key_point)
    if match:
        return NumericConstraint(
            nutrient=match.group(1), op="lt", low=0.0, high=float(match.group(2))
        )
    match = LOWER_PATTERN.search(key_point)
    if match:
        return NumericConstraint(
            nutrient=match.group(1), op="gt", low=float(match.group(2)), high=0.0
        )
    return None


def menu_products(user_menu: UserMenu) -> list[Product]:
    """Turn a trainee plan into product records for the safety checkers."""
    return [
        {NAME: item.product_name, CATEGORY: "", SUB_CATEGORY: ""}
        for item in user_menu.items
    ]


@dataclass(frozen=True)
class SimulationScorer:
    """Scores a trainee plan against a case's ideal answer."""

    adequacy_scorer: AdequacyScorer = field(default_factory=AdequacyScorer)
    allergy_checker: AllergyChecker = field(default_factory=AllergyChecker)
    drug_checker: DrugNutrientChecker = field(default_factory=DrugNutrientChecker)
    category_keywords: tuple[str, ...] = CATEGORY_HINT_KEYWORDS
    debug: bool = False

    def score(self, user_menu: UserMenu, case: SimulationCase) -> SimulationScore:
        """Return the weighted score breakdown for a trainee plan."""
        ideal = case.ideal_answer
        macro = self.macro_score(user_menu, ideal)
        constraint = self.constraint_score(user_menu, ideal, case)
        safety = self.safety_score(user_menu, case)
        efficiency = self.efficiency_score(user_menu, ideal)
        overall = round_half_up(
            macro * WEIGHT_MACRO
            + constraint * WEIGHT_CONSTRAINT
            + safety * WEIGHT_SAFETY
            + efficiency * WEIGHT_EFFICIENCY
        )
        if self.debug:
            _logger.info(
                "Simulation score: case=%s overall=%s macro=%s constraint=%s "
                "safety=%s efficiency=%s",
                case.id,
                overall,
                macro,
                constraint,
                safety,
                efficiency,
            )
        return SimulationScore(
            overall=overall,
            macro_score=macro,
            constraint_score=constraint,
            safety_score=safety,
            efficiency_score=efficiency,
        )

    def macro_score(self, user_menu: UserMenu, ideal: IdealAnswer) -> float:
        """Adequacy of the plan's intake against the ideal requirements."""
        return self.adequacy_scorer.score(
            ideal.requirements, user_menu.current_intake
        ).overall

    def constraint_score(
        self, user_menu: UserMenu, ideal: IdealAnswer, case: SimulationCase
    ) -> float:
        """Share of key points the plan satisfies, with partial credit."""
        if not ideal.key_points:
            return 100.0
        points = sum(
            self._key_point_credit(key_point, user_menu, case)
            for key_point in ideal.key_points
        )
        return min(100.0, round_half_up(points / len(ideal.key_points) * 100))

    def safety_findings(
        self, user_menu: UserMenu, case: SimulationCase
    ) -> tuple[tuple[DrugNutrientInteraction, ...], tuple[AllergyWarning, ...]]:
        """Return interactions and allergy warnings raised by the plan."""
        products = menu_products(user_menu)
        interactions = self.drug_checker.check(
            case.patient.medications, products, user_menu.route
        )
        allergies = self.allergy_checker.check(case.patient.allergies, products)
        return interactions, allergies

    def safety_score(self, user_menu: UserMenu, case: SimulationCase) -> float:
        """100 minus penalties for interactions and allergy hits."""
        interactions, allergies = self.safety_findings(user_menu, case)
        penalty = 0
        for interaction in interactions:
            if interaction.severity == "high":
                penalty += SAFETY_PENALTY_HIGH
            elif interaction.severity == "medium":
                penalty += SAFETY_PENALTY_MEDIUM
        penalty += SAFETY_PENALTY_ALLERGY * len(allergies)
        return float(max(0, 100 - penalty))

    def efficiency_score(self, user_menu: UserMenu, ideal: IdealAnswer) -> float:
        """Required category coverage plus closeness of the item count."""
        user_count = len(user_menu.items)
        if user_count == 0:
            return 0.0

        required = [item for item in ideal.menu_items if item.required]
        if required:
            matched = sum(
                1
                for item in required
                if self._has_category(user_menu, item.product_keywords)
            )
            required_score = matched / len(required) * REQUIRED_POINTS
        else:
            required_score = float(REQUIRED_POINTS)

        difference = abs(user_count - len(ideal.menu_items))
        penalty = min(COUNT_POINTS, difference * COUNT_PENALTY_PER_ITEM)
        count_score = COUNT_POINTS - penalty
        return min(100.0, max(0.0, round_half_up(required_score + count_score)))

    def feedback(
        self,
        user_menu: UserMenu,
        case: SimulationCase,
        score: SimulationScore,
    ) -> tuple[FeedbackItem, ...]:
        """Build categorized feedback messages for a scored plan."""
        ideal = case.ideal_answer
        items: list[FeedbackItem] = []

        if score.macro_score >= 80:  # noqa: PLR2004
            items.append(
                FeedbackItem(
                    type="correct",
                    category="Nutrient adequacy",
                    message=(
                        f"Adequacy score {score.macro_score:g}: nutrient amounts "
                        "meet the targets"
                    ),
                )
            )
        elif score.macro_score >= 50:  # noqa: PLR2004
            items.append(
                FeedbackItem(
                    type="warning",
                    category="Nutrient adequacy",
                    message=(
                        f"Adequacy score {score.macro_score:g}: some nutrients "
                        "fall short of the targets"
                    ),
                    detail="Review the adequacy details and cover the shortfalls",
                )
            )
        else:
            items.append(
                FeedbackItem(
                    type="error",
                    category="Nutrient adequacy",
                    message=(
                        f"Adequacy score {score.macro_score:g}: major nutrient "
                        "deficits"
                    ),
                    detail="Revisit volumes, focusing on energy and protein",
                )
            )

        if score.constraint_score < 70:  # noqa: PLR2004
            items.append(
                FeedbackItem(
                    type="error",
                    category="Disease-specific constraints",
                    message="Key clinical constraints are not met",
                    detail="Points to check: " + ", ".join(ideal.key_points[:3]),
                )
            )
        elif score.constraint_score < 90:  # noqa: PLR2004
            items.append(
                FeedbackItem(
                    type="warning",
                    category="Disease-specific constraints",
                    message="Some constraints could be met more closely",
                )
            )

        interactions, allergies = self.safety_findings(user_menu, case)
        for interaction in interactions:
            items.append(
                FeedbackItem(
                    type="error" if interaction.severity == "high" else "warning",
                    category="Drug-nutrient interaction",
                    message=f"{interaction.drug}: {interaction.interaction}",
                    detail=interaction.recommendation,
                )
            )
        for warning in allergies:
            items.append(
                FeedbackItem(type="error", category="Allergy", message=warning.message)
            )

        if score.efficiency_score < 50:  # noqa: PLR2004
            missing = [
                item.category
                for item in ideal.menu_items
                if item.required
                and not self._has_category(user_menu, item.product_keywords)
            ]
            items.append(
                FeedbackItem(
                    type="warning",
                    category="Product selection",
                    message="Recommended product categories are missing",
                    detail="Consider products from: " + ", ".join(missing),
                )
            )

        for mistake in ideal.common_mistakes:
            items.append(
                FeedbackItem(type="tip", category="Common mistakes", message=mistake)
            )
        return tuple(items)

    def _key_point_credit(
        self, key_point: str, user_menu: UserMenu, case: SimulationCase
    ) -> float:
        constraint = extract_numeric_constraint(key_point)
        if constraint is None:
            return self._category_hint_credit(key_point, user_menu)

        nutrient = _NUTRIENT_ALIASES.get(constraint.nutrient.lower())
        if nutrient is None:
            return PARTIAL_CREDIT
        actual = _actual_value(nutrient, user_menu, case)
        if constraint.op == "range":
            return 1.0 if constraint.low <= actual <= constraint.high else 0.0
        if constraint.op == "lt":
            return 1.0 if actual <= constraint.high else 0.0
        return 1.0 if actual >= constraint.low else 0.0

    def _category_hint_credit(self, key_point: str, user_menu: UserMenu) -> float:
        point_text = normalize_text(key_point)
        menu_text = normalize_text(
            " ".join(item.product_name for item in user_menu.items)
        )
        for keyword in self.category_keywords:
            needle = normalize_text(keyword)
            if needle in point_text and needle in menu_text:
                return 1.0
        return PARTIAL_CREDIT

    @staticmethod
    def _has_category(user_menu: UserMenu, keywords: tuple[str, ...]) -> bool:
        for item in user_menu.items:
            name = normalize_text(item.product_name)
            if any(normalize_text(keyword) in name for keyword in keywords if keyword):
                return True
        return False


def _actual_value(nutrient: str, user_menu: UserMenu, case: SimulationCase) -> float:
    if nutrient == "volume":
        return user_menu.total_volume
    value = to_amount(user_menu.current_intake.get(nutrient))
    if nutrient == "protein":
        weight = case.patient.weight
        return value / weight if weight > 0 else 0.0
    return value
