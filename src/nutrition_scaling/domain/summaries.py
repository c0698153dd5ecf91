"""Domain models for aggregated reporting views."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from nutrition_scaling.domain.nutrients import Nutrient


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrients across a set of scaled food items."""

    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    saturated_fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    micronutrients: Mapping[Nutrient, float] = field(default_factory=dict)


@dataclass(frozen=True)
class FoodContribution:
    """How much of a nutrient one food item contributed."""

    name: str
    brand: str | None
    amount: float
    unit: str
    food_unit: str
    display_quantity: float


@dataclass(frozen=True)
class NutrientBreakdown:
    """One nutrient's total with the foods that contributed to it."""

    name: str
    total_amount: float
    unit: str
    foods: list[FoodContribution]


@dataclass(frozen=True)
class NutrientContribution:
    """How much of one nutrient a food group supplied."""

    name: str
    brand: str | None
    amount: float
    unit: str
    original_unit: str | None = None


@dataclass(frozen=True)
class FoodBreakdown:
    """One food's total quantity with the nutrients it supplied."""

    name: str
    brand: str | None
    total_amount: float
    unit: str
    food_item_ids: list[UUID]
    nutrients: list[NutrientContribution]


@dataclass(frozen=True)
class DailyNutrition:
    """Totals for a single local day."""

    day: date
    totals: NutritionTotals


@dataclass(frozen=True)
class PeriodSummary:
    """Totals and per-day averages over a run of days."""

    start: date
    end: date
    daily: list[DailyNutrition]
    totals: NutritionTotals
    avg_calories: float
    avg_protein: float
    avg_carbohydrates: float
    avg_fat: float


@dataclass(frozen=True)
class DetailedSummary:
    """Breakdowns and totals for one account and day."""

    account_id: str
    day: date
    nutrients: list[NutrientBreakdown]
    foods: list[FoodBreakdown]
    totals: NutritionTotals
