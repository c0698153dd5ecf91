"""Daily, period and detailed nutrition summaries over logged food entries."""

import calendar
import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from nutrition_scaling.domain.foods import FoodEntry
from nutrition_scaling.domain.summaries import (
    DailyNutrition,
    DetailedSummary,
    NutritionTotals,
    PeriodSummary,
)
from nutrition_scaling.errors import EmptySummaryError
from nutrition_scaling.services.aggregation import calculate_totals, flatten_entries
from nutrition_scaling.services.breakdowns import (
    generate_food_breakdowns,
    generate_nutrient_breakdowns,
)

DAYS_IN_WEEK = 7
DECEMBER = 12

_logger = logging.getLogger(__name__)


class FoodEntryRepository(Protocol):
    """Read interface for logged food entries."""

    def list_entries(
        self, account_id: str, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return entries logged at or after start and before end."""


@dataclass
class SummaryService:
    """Service that aggregates logged entries into reporting summaries."""

    repository: FoodEntryRepository
    default_timezone: str = "UTC"

    def get_daily_totals(
        self, account_id: str, day: date, timezone_name: str | None = None
    ) -> DailyNutrition:
        """Return totals for one local day."""
        tz = self._zone(timezone_name)
        entries = self._fetch(account_id, day, 1, tz)
        return DailyNutrition(day=day, totals=_totals_for_day(day, entries, tz))

    def get_period_summary(
        self,
        account_id: str,
        start_day: date,
        days: int,
        timezone_name: str | None = None,
    ) -> PeriodSummary:
        """Return per-day totals and averages for a run of days."""
        tz = self._zone(timezone_name)
        span = max(days, 1)
        _logger.info(
            "Generating %s-day summary for account %s from %s",
            span,
            account_id,
            start_day,
        )
        entries = self._fetch(account_id, start_day, span, tz)
        daily = [
            DailyNutrition(day=day, totals=_totals_for_day(day, entries, tz))
            for day in (start_day + timedelta(days=offset) for offset in range(span))
        ]
        totals = calculate_totals(flatten_entries(entries))
        return PeriodSummary(
            start=start_day,
            end=start_day + timedelta(days=span - 1),
            daily=daily,
            totals=totals,
            avg_calories=totals.calories / span,
            avg_protein=totals.protein / span,
            avg_carbohydrates=totals.carbohydrates / span,
            avg_fat=totals.fat / span,
        )

    def get_weekly_summary(
        self, account_id: str, start_day: date, timezone_name: str | None = None
    ) -> PeriodSummary:
        """Return a seven-day summary starting at start_day."""
        return self.get_period_summary(
            account_id, start_day, DAYS_IN_WEEK, timezone_name
        )

    def get_monthly_summary(
        self, account_id: str, start_day: date, timezone_name: str | None = None
    ) -> PeriodSummary:
        """Return a summary from start_day up to the same day next month."""
        days = (_add_month(start_day) - start_day).days
        return self.get_period_summary(account_id, start_day, days, timezone_name)

    def get_detailed_summary(
        self, account_id: str, day: date, timezone_name: str | None = None
    ) -> DetailedSummary:
        """Return nutrient and food breakdowns for one local day."""
        tz = self._zone(timezone_name)
        entries = self._fetch(account_id, day, 1, tz)
        if not entries:
            raise EmptySummaryError(f"No food entries for {account_id} on {day}")
        items = flatten_entries(entries)
        if not items:
            raise EmptySummaryError(f"No food items for {account_id} on {day}")
        return DetailedSummary(
            account_id=account_id,
            day=day,
            nutrients=generate_nutrient_breakdowns(items),
            foods=generate_food_breakdowns(items),
            totals=calculate_totals(items),
        )

    def _zone(self, timezone_name: str | None) -> ZoneInfo:
        return ZoneInfo(timezone_name or self.default_timezone)

    def _fetch(
        self, account_id: str, start_day: date, days: int, tz: ZoneInfo
    ) -> list[FoodEntry]:
        start = datetime.combine(start_day, time.min, tzinfo=tz)
        end = datetime.combine(start_day + timedelta(days=days), time.min, tzinfo=tz)
        entries = self.repository.list_entries(
            account_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        if not entries:
            _logger.info(
                "No food entries for account %s between %s and %s",
                account_id,
                start,
                end,
            )
        return entries


def _totals_for_day(
    day: date, entries: list[FoodEntry], tz: ZoneInfo
) -> NutritionTotals:
    same_day = [
        entry for entry in entries if entry.logged_at.astimezone(tz).date() == day
    ]
    return calculate_totals(flatten_entries(same_day))


def _add_month(day: date) -> date:
    if day.month == DECEMBER:
        year, month = day.year + 1, 1
    else:
        year, month = day.year, day.month + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
