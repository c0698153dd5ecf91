"""Domain models for reference servings and food items."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from nutrition_scaling.domain.nutrients import Nutrient
from nutrition_scaling.domain.units import UnitKind


class ReferenceServing(BaseModel):
    """Canonical serving reported by the nutrition data source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    food_name: str = Field(default="", alias="foodName")
    brand_name: str | None = Field(default=None, alias="brandName")
    serving_quantity: float = Field(gt=0, alias="servingQuantity")
    serving_unit: str = Field(default="", alias="servingUnit")
    serving_weight_grams: float | None = Field(
        default=None, ge=0, alias="servingWeightGrams"
    )
    nutrient_code_values: dict[int, float] = Field(
        default_factory=dict, alias="nutrientCodeValues"
    )


class UserRequest(BaseModel):
    """Quantity and unit a user reported for one food item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quantity: float = Field(ge=0)
    unit: str = ""
    brand: str | None = None
    is_branded: bool = Field(default=False, alias="isBranded")


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for some quantity of a food."""

    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    saturated_fat: float = 0.0
    unsaturated_fat: float = 0.0
    trans_fat: float = 0.0
    micronutrients: Mapping[Nutrient, float] = field(default_factory=dict)

    def scaled(self, factor: float) -> "NutrientProfile":
        """Return a copy with every amount multiplied by factor."""
        return NutrientProfile(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbohydrates=self.carbohydrates * factor,
            fat=self.fat * factor,
            fiber=self.fiber * factor,
            sugar=self.sugar * factor,
            saturated_fat=self.saturated_fat * factor,
            unsaturated_fat=self.unsaturated_fat * factor,
            trans_fat=self.trans_fat * factor,
            micronutrients={
                nutrient: amount * factor
                for nutrient, amount in self.micronutrients.items()
            },
        )


@dataclass(frozen=True)
class RawFoodItem:
    """Food item carrying reference-serving nutrients, not yet scaled."""

    name: str
    brand: str | None
    serving_quantity: float
    serving_unit: str
    serving_weight_grams: float | None
    requested_quantity: float
    requested_unit: str
    unit_kind: UnitKind
    nutrients: NutrientProfile


@dataclass(frozen=True)
class ScaledFoodItem:
    """Food item whose nutrients are final for its quantity and unit."""

    name: str
    brand: str | None
    quantity: float
    unit: str
    unit_kind: UnitKind
    servings: float
    nutrients: NutrientProfile
    scaling_resolved: bool = True
    id: UUID = field(default_factory=uuid4)

    @property
    def calories(self) -> float:
        return self.nutrients.calories

    @property
    def protein(self) -> float:
        return self.nutrients.protein

    @property
    def carbohydrates(self) -> float:
        return self.nutrients.carbohydrates

    @property
    def fat(self) -> float:
        return self.nutrients.fat

    @property
    def fiber(self) -> float:
        return self.nutrients.fiber

    @property
    def sugar(self) -> float:
        return self.nutrients.sugar

    @property
    def saturated_fat(self) -> float:
        return self.nutrients.saturated_fat

    @property
    def unsaturated_fat(self) -> float:
        return self.nutrients.unsaturated_fat

    @property
    def trans_fat(self) -> float:
        return self.nutrients.trans_fat

    @property
    def micronutrients(self) -> Mapping[Nutrient, float]:
        return self.nutrients.micronutrients


class MealType(Enum):
    """Meal occasion a food entry was logged for."""

    UNKNOWN = "Unknown"
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


@dataclass(frozen=True)
class FoodGroup:
    """Named cluster of items forming one portion of a meal."""

    group_name: str
    items: list[ScaledFoodItem] = field(default_factory=list)


@dataclass(frozen=True)
class FoodEntry:
    """One logged meal occasion. logged_at must be timezone-aware."""

    id: UUID
    account_id: str
    description: str
    logged_at: datetime
    meal: MealType = MealType.UNKNOWN
    groups: list[FoodGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.logged_at.utcoffset() is None:
            raise ValueError(f"logged_at must be timezone-aware: {self.logged_at}")
