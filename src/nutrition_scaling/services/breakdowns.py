"""Per-nutrient and per-food reporting breakdowns."""

import logging
from collections.abc import Callable, Iterable
from operator import attrgetter

from nutrition_scaling.domain.foods import ScaledFoodItem
from nutrition_scaling.domain.nutrients import Nutrient, find_nutrient
from nutrition_scaling.domain.summaries import (
    FoodBreakdown,
    FoodContribution,
    NutrientBreakdown,
    NutrientContribution,
)
from nutrition_scaling.services.aggregation import ensure_scaled

_logger = logging.getLogger(__name__)

DEFAULT_FOOD_UNIT = "serving"
DEFAULT_NUTRIENT_UNIT = "g"

# Keys are nutrient names lowercased with spaces removed.
DISPLAY_UNITS: dict[str, str] = {
    "protein": "g",
    "carbohydrates": "g",
    "fat": "g",
    "fiber": "g",
    "sugar": "g",
    "saturatedfat": "g",
    "unsaturatedfat": "g",
    "transfat": "g",
    "sodium": "mg",
    "potassium": "mg",
    "calcium": "mg",
    "iron": "mg",
    "zinc": "mg",
    "cholesterol": "mg",
    "vitamina": "IU",
    "vitaminc": "mg",
    "vitamind": "IU",
    "vitamine": "mg",
}

_NUTRIENT_BREAKDOWN_FIELDS: tuple[
    tuple[str, Callable[[ScaledFoodItem], float]], ...
] = (
    ("Protein", attrgetter("protein")),
    ("Carbohydrates", attrgetter("carbohydrates")),
    ("Fat", attrgetter("fat")),
    ("Fiber", attrgetter("fiber")),
    ("Sugar", attrgetter("sugar")),
    ("Saturated Fat", attrgetter("saturated_fat")),
)

_FOOD_BREAKDOWN_FIELDS: tuple[
    tuple[str, str, Callable[[ScaledFoodItem], float]], ...
] = (
    ("Calories", "kcal", attrgetter("calories")),
    ("Protein", "g", attrgetter("protein")),
    ("Carbohydrates", "g", attrgetter("carbohydrates")),
    ("Fat", "g", attrgetter("fat")),
    ("Fiber", "g", attrgetter("fiber")),
    ("Sugar", "g", attrgetter("sugar")),
    ("Saturated Fat", "g", attrgetter("saturated_fat")),
)


def nutrient_display_unit(name: str) -> str:
    """Return the unit a nutrient total is displayed in."""
    key = name.replace(" ", "").lower()
    unit = DISPLAY_UNITS.get(key)
    if unit is not None:
        return unit
    nutrient = find_nutrient(name)
    if nutrient is not None:
        return nutrient.unit
    return DEFAULT_NUTRIENT_UNIT


def generate_nutrient_breakdowns(
    items: Iterable[ScaledFoodItem],
) -> list[NutrientBreakdown]:
    """Build one breakdown per nutrient that any item contributes to.

    Named macros come first, then every micronutrient seen on any item.
    The result is ordered by total amount, largest first.
    """
    foods = ensure_scaled(items)
    breakdowns: list[NutrientBreakdown] = []

    for name, selector in _NUTRIENT_BREAKDOWN_FIELDS:
        breakdown = _nutrient_breakdown(name, foods, selector)
        if breakdown is not None:
            breakdowns.append(breakdown)

    for nutrient in _micronutrients_in(foods):
        breakdown = _nutrient_breakdown(
            nutrient.label,
            foods,
            lambda item, key=nutrient: item.micronutrients.get(key, 0.0),
        )
        if breakdown is not None:
            breakdowns.append(breakdown)

    return sorted(breakdowns, key=lambda entry: entry.total_amount, reverse=True)


def _nutrient_breakdown(
    name: str,
    items: list[ScaledFoodItem],
    selector: Callable[[ScaledFoodItem], float],
) -> NutrientBreakdown | None:
    unit = nutrient_display_unit(name)
    contributions: list[FoodContribution] = []
    for item in items:
        amount = selector(item)
        if amount <= 0:
            continue
        contributions.append(
            FoodContribution(
                name=item.name,
                brand=item.brand,
                amount=amount,
                unit=unit,
                food_unit=item.unit or DEFAULT_FOOD_UNIT,
                display_quantity=item.quantity,
            )
        )
    if not contributions:
        return None
    return NutrientBreakdown(
        name=name,
        total_amount=sum(entry.amount for entry in contributions),
        unit=unit,
        foods=sorted(contributions, key=lambda entry: entry.amount, reverse=True),
    )


def generate_food_breakdowns(items: Iterable[ScaledFoodItem]) -> list[FoodBreakdown]:
    """Build one breakdown per food name with the nutrients it supplied.

    Items are grouped by exact name. The group's display unit is the first
    item's unit; differing units are logged, not converted.
    """
    groups: dict[str, list[ScaledFoodItem]] = {}
    for item in ensure_scaled(items):
        groups.setdefault(item.name, []).append(item)

    breakdowns = [_food_breakdown(name, group) for name, group in groups.items()]
    return sorted(breakdowns, key=lambda entry: entry.total_amount, reverse=True)


def _food_breakdown(name: str, group: list[ScaledFoodItem]) -> FoodBreakdown:
    first = group[0]
    unit = first.unit or DEFAULT_FOOD_UNIT
    distinct_units = list(dict.fromkeys(item.unit for item in group))
    if len(distinct_units) > 1:
        _logger.warning(
            "Multiple units for food %s: %s; using first item's unit %s",
            name,
            ", ".join(distinct_units),
            unit,
        )

    nutrients: list[NutrientContribution] = []
    for label, nutrient_unit, selector in _FOOD_BREAKDOWN_FIELDS:
        amount = sum(selector(item) for item in group)
        if amount > 0:
            nutrients.append(
                NutrientContribution(
                    name=label,
                    brand=first.brand,
                    amount=amount,
                    unit=nutrient_unit,
                    original_unit=unit,
                )
            )

    for nutrient in _micronutrients_in(group):
        amount = sum(item.micronutrients.get(nutrient, 0.0) for item in group)
        if amount > 0:
            nutrients.append(
                NutrientContribution(
                    name=nutrient.label,
                    brand=first.brand,
                    amount=amount,
                    unit=nutrient_display_unit(nutrient.label),
                )
            )

    return FoodBreakdown(
        name=name,
        brand=first.brand,
        total_amount=sum(item.quantity for item in group),
        unit=unit,
        food_item_ids=[item.id for item in group],
        nutrients=sorted(nutrients, key=lambda entry: entry.amount, reverse=True),
    )


def _micronutrients_in(items: list[ScaledFoodItem]) -> list[Nutrient]:
    """Return micronutrient keys in first-seen order."""
    seen: dict[Nutrient, None] = {}
    for item in items:
        for nutrient in item.micronutrients:
            seen.setdefault(nutrient, None)
    return list(seen)
