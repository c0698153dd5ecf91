"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from nutrition_scaling.config import Settings
from nutrition_scaling.domain.foods import (
    FoodEntry,
    FoodGroup,
    MealType,
    NutrientProfile,
    RawFoodItem,
    ScaledFoodItem,
)
from nutrition_scaling.domain.nutrients import Nutrient
from nutrition_scaling.domain.units import UnitKind
from nutrition_scaling.services.scaling import ScalingService, scale_food_item
from nutrition_scaling.services.summaries import FoodEntryRepository, SummaryService


def scaled_item(  # noqa: PLR0913
    name: str,
    *,
    quantity: float = 1.0,
    unit: str = "serving",
    brand: str | None = None,
    calories: float = 0.0,
    protein: float = 0.0,
    carbohydrates: float = 0.0,
    fat: float = 0.0,
    fiber: float = 0.0,
    sugar: float = 0.0,
    saturated_fat: float = 0.0,
    micronutrients: dict[Nutrient, float] | None = None,
) -> ScaledFoodItem:
    """Build a final item through the scaler with a unit multiplier."""
    raw = RawFoodItem(
        name=name,
        brand=brand,
        serving_quantity=quantity,
        serving_unit=unit,
        serving_weight_grams=None,
        requested_quantity=quantity,
        requested_unit=unit,
        unit_kind=UnitKind.COUNT,
        nutrients=NutrientProfile(
            calories=calories,
            protein=protein,
            carbohydrates=carbohydrates,
            fat=fat,
            fiber=fiber,
            sugar=sugar,
            saturated_fat=saturated_fat,
            micronutrients=micronutrients or {},
        ),
    )
    return scale_food_item(raw, 1.0)


def food_entry(
    items: list[ScaledFoodItem],
    *,
    logged_at: datetime | None = None,
    account_id: str = "account-1",
    group_name: str = "Meal",
) -> FoodEntry:
    """Wrap items into a single-group food entry."""
    return FoodEntry(
        id=uuid4(),
        account_id=account_id,
        description=group_name,
        logged_at=logged_at or datetime(2026, 3, 10, 12, 0, tzinfo=UTC),
        meal=MealType.LUNCH,
        groups=[FoodGroup(group_name=group_name, items=items)],
    )


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory food entry repository for tests."""

    entries: list[FoodEntry] = field(default_factory=list)
    queries: list[tuple[str, datetime, datetime]] = field(default_factory=list)

    def list_entries(
        self, account_id: str, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        self.queries.append((account_id, start, end))
        return [
            entry
            for entry in self.entries
            if entry.account_id == account_id and start <= entry.logged_at < end
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        log_level="DEBUG",
        default_timezone="UTC",
        strict_unit_classification=False,
    )


@pytest.fixture
def entry_repository() -> InMemoryFoodEntryRepository:
    return InMemoryFoodEntryRepository()


@pytest.fixture
def summary_service(entry_repository: InMemoryFoodEntryRepository) -> SummaryService:
    return SummaryService(entry_repository)


@pytest.fixture
def scaling_service() -> ScalingService:
    return ScalingService()
