"""Volume and frequency optimization under a fluid budget."""

from collections.abc import Sequence
from dataclasses import dataclass

from feeding_planner.domain.menus import OptimizationResult, OptimizedItem
from feeding_planner.domain.products import Product, energy_density, protein_density
from feeding_planner.numbers import percentage, round_half_up, to_amount

ENTERAL_STEP_ML = 25
PARENTERAL_STEP_ML = 50

ENTERAL_TIERS: tuple[tuple[float, int], ...] = ((600, 3), (1000, 4), (1500, 5))
ENTERAL_UNDIVIDED_LIMIT = 300
ENTERAL_UNDIVIDED_FREQUENCY = 3
ENTERAL_MAX_FREQUENCY = 6
PARENTERAL_SINGLE_LIMIT = 1500

DUAL_PRIMARY_ENERGY_SHARE = 0.65
DUAL_SECONDARY_ENERGY_SHARE = 0.35
DUAL_PRIMARY_VOLUME_CAP = 0.7
MULTI_PRIMARY_ENERGY_SHARE = 0.5

ENERGY_WARNING_THRESHOLD = 80
PROTEIN_WARNING_THRESHOLD = 70

NO_PRODUCTS_WARNING = "No matching product was found"
ENERGY_WARNING = (
    "Energy achievement is {pct:g}% of target; fluid restriction may be too tight"
)
VOLUME_WARNING = (
    "Total {volume:g} mL/day: daily volume exceeds restriction of {limit:g} mL"
)
PROTEIN_WARNING = (
    "Protein achievement is {pct:g}% of target; consider adding a protein supplement"
)


@dataclass(frozen=True)
class VolumeOptimizer:
    """Splits energy targets across products and converts volumes to doses."""

    enteral_default_volume: float = 300.0
    parenteral_default_volume: float = 500.0

    def optimize(
        self,
        products: Sequence[Product],
        target_energy: float,
        target_protein: float,
        max_total_volume: float,
        parenteral: bool,
    ) -> OptimizationResult:
        """Return per-product doses, totals and advisory warnings."""
        target_energy = to_amount(target_energy)
        target_protein = to_amount(target_protein)
        max_total_volume = to_amount(max_total_volume)

        if not products:
            return OptimizationResult(
                items=(),
                total_energy=0.0,
                total_protein=0.0,
                total_volume=0.0,
                energy_achievement=0.0,
                protein_achievement=0.0,
                warnings=(NO_PRODUCTS_WARNING,),
            )

        if len(products) == 1:
            items = [
                self._optimize_single(
                    products[0], target_energy, max_total_volume, parenteral
                )
            ]
        elif len(products) == 2:  # noqa: PLR2004
            items = self._optimize_dual(
                products[0], products[1], target_energy, max_total_volume, parenteral
            )
        else:
            share = max_total_volume / len(products)
            secondary_energy = (
                target_energy * (1 - MULTI_PRIMARY_ENERGY_SHARE) / (len(products) - 1)
            )
            items = [
                self._optimize_single(
                    product,
                    target_energy * MULTI_PRIMARY_ENERGY_SHARE
                    if index == 0
                    else secondary_energy,
                    share,
                    parenteral,
                )
                for index, product in enumerate(products)
            ]

        total_energy = sum(item.energy_contribution for item in items)
        total_protein = sum(item.protein_contribution for item in items)
        total_volume = sum(item.daily_volume for item in items)
        energy_achievement = round_half_up(percentage(total_energy, target_energy))
        protein_achievement = round_half_up(percentage(total_protein, target_protein))

        warnings: list[str] = []
        if energy_achievement < ENERGY_WARNING_THRESHOLD:
            warnings.append(ENERGY_WARNING.format(pct=energy_achievement))
        if total_volume > max_total_volume:
            warnings.append(
                VOLUME_WARNING.format(volume=total_volume, limit=max_total_volume)
            )
        if protein_achievement < PROTEIN_WARNING_THRESHOLD:
            warnings.append(PROTEIN_WARNING.format(pct=protein_achievement))

        return OptimizationResult(
            items=tuple(items),
            total_energy=total_energy,
            total_protein=total_protein,
            total_volume=total_volume,
            energy_achievement=energy_achievement,
            protein_achievement=protein_achievement,
            warnings=tuple(warnings),
        )

    def _optimize_single(
        self,
        product: Product,
        target_energy: float,
        allowance: float,
        parenteral: bool,
    ) -> OptimizedItem:
        density = energy_density(product)
        if density <= 0:
            ideal = (
                self.parenteral_default_volume
                if parenteral
                else self.enteral_default_volume
            )
        else:
            ideal = target_energy / density
        return build_item(product, min(ideal, allowance), parenteral, allowance)

    def _optimize_dual(
        self,
        primary: Product,
        secondary: Product,
        target_energy: float,
        max_total_volume: float,
        parenteral: bool,
    ) -> list[OptimizedItem]:
        primary_cap = max_total_volume * DUAL_PRIMARY_VOLUME_CAP
        primary_density = energy_density(primary)
        if primary_density > 0:
            primary_ideal = min(
                target_energy * DUAL_PRIMARY_ENERGY_SHARE / primary_density,
                primary_cap,
            )
        else:
            primary_ideal = max_total_volume * 0.5
        primary_item = build_item(primary, primary_ideal, parenteral, primary_cap)

        remaining = max(max_total_volume - primary_item.daily_volume, 0.0)
        secondary_density = energy_density(secondary)
        if secondary_density > 0:
            secondary_ideal = min(
                target_energy * DUAL_SECONDARY_ENERGY_SHARE / secondary_density,
                remaining,
            )
        else:
            secondary_ideal = remaining * 0.5
        secondary_item = build_item(secondary, secondary_ideal, parenteral, remaining)
        return [primary_item, secondary_item]


def choose_frequency(daily_volume: float, parenteral: bool) -> tuple[float, int]:
    """Return (volume per dose, doses per day) for an ideal daily volume."""
    if parenteral:
        if daily_volume <= PARENTERAL_SINGLE_LIMIT:
            return daily_volume, 1
        return round_half_up(daily_volume / 2), 2

    if daily_volume <= ENTERAL_UNDIVIDED_LIMIT:
        return daily_volume, ENTERAL_UNDIVIDED_FREQUENCY
    for limit, frequency in ENTERAL_TIERS:
        if daily_volume <= limit:
            return round_half_up(daily_volume / frequency), frequency
    return round_half_up(daily_volume / ENTERAL_MAX_FREQUENCY), ENTERAL_MAX_FREQUENCY


def round_dose(volume: float, parenteral: bool) -> float:
    """Round a dose to the route's granularity, never below one step."""
    step = PARENTERAL_STEP_ML if parenteral else ENTERAL_STEP_ML
    return max(round_half_up(volume / step) * step, step)


def build_item(
    product: Product,
    ideal_daily_volume: float,
    parenteral: bool,
    allowance: float | None = None,
) -> OptimizedItem:
    """Convert an ideal continuous volume into a rounded dosing schedule.

    When an allowance is given, the dose steps down by the rounding
    granularity and then the frequency drops until the schedule fits. Only an
    allowance smaller than a single minimum dose is left exceeded.
    """
    step = PARENTERAL_STEP_ML if parenteral else ENTERAL_STEP_ML
    volume, frequency = choose_frequency(to_amount(ideal_daily_volume), parenteral)
    dose = round_dose(volume, parenteral)
    if allowance is not None:
        while dose * frequency > allowance and dose > step:
            dose -= step
        while dose * frequency > allowance and frequency > 1:
            frequency -= 1

    daily_volume = dose * frequency
    return OptimizedItem(
        product=product,
        volume=dose,
        frequency=frequency,
        daily_volume=daily_volume,
        energy_contribution=energy_density(product) * daily_volume,
        protein_contribution=protein_density(product) * daily_volume,
    )
