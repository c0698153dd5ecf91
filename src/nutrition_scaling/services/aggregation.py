"""Flattening and totalling of already-scaled food items."""

from collections.abc import Iterable

from nutrition_scaling.domain.foods import FoodEntry, ScaledFoodItem
from nutrition_scaling.domain.nutrients import Nutrient
from nutrition_scaling.domain.summaries import NutritionTotals
from nutrition_scaling.errors import AggregationAssumptionError


def flatten_entries(entries: Iterable[FoodEntry]) -> list[ScaledFoodItem]:
    """Return every item of every group, in entry and group order."""
    return [
        item for entry in entries for group in entry.groups for item in group.items
    ]


def ensure_scaled(items: Iterable[object]) -> list[ScaledFoodItem]:
    """Return items as a list, rejecting anything that was never scaled."""
    checked: list[ScaledFoodItem] = []
    for item in items:
        if not isinstance(item, ScaledFoodItem):
            raise AggregationAssumptionError(item)
        checked.append(item)
    return checked


def calculate_totals(items: Iterable[ScaledFoodItem]) -> NutritionTotals:
    """Sum nutrients across items.

    Item amounts are already final for their quantity, so they are added as
    they are and never multiplied by quantity.
    """
    calories = protein = carbohydrates = fat = saturated_fat = 0.0
    fiber = sugar = 0.0
    micronutrients: dict[Nutrient, float] = {}
    for item in ensure_scaled(items):
        calories += item.calories
        protein += item.protein
        carbohydrates += item.carbohydrates
        fat += item.fat
        saturated_fat += item.saturated_fat
        fiber += item.fiber
        sugar += item.sugar
        for nutrient, amount in item.micronutrients.items():
            micronutrients[nutrient] = micronutrients.get(nutrient, 0.0) + amount

    return NutritionTotals(
        calories=calories,
        protein=protein,
        carbohydrates=carbohydrates,
        fat=fat,
        saturated_fat=saturated_fat,
        fiber=fiber,
        sugar=sugar,
        micronutrients=micronutrients,
    )
