"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from nutrition_scaling.app_logging import configure_logging
from nutrition_scaling.config import Settings, parse_log_level
from nutrition_scaling.services.scaling import ScalingService
from nutrition_scaling.services.summaries import FoodEntryRepository, SummaryService


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    scaling_service: ScalingService
    summary_service: SummaryService


def build_container(
    entry_repository: FoodEntryRepository, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(
        parse_log_level(resolved_settings.log_level, debug=resolved_settings.debug)
    )
    scaling_service = ScalingService(
        strict_unit_classification=resolved_settings.strict_unit_classification,
    )
    summary_service = SummaryService(
        repository=entry_repository,
        default_timezone=resolved_settings.default_timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        scaling_service=scaling_service,
        summary_service=summary_service,
    )
