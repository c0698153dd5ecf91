"""Error types raised by the scaling engine."""


class UnitClassificationError(ValueError):
    """Raised when a unit string matches no known unit kind."""

    def __init__(self, unit: str | None) -> None:
        self.unit = unit
        super().__init__(f"Unrecognized unit: {unit!r}")


class AggregationAssumptionError(TypeError):
    """Raised when an item that was never scaled reaches aggregation."""

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(
            f"Expected ScaledFoodItem, got {type(item).__name__}; "
            "items must be scaled before aggregation"
        )


class EmptySummaryError(LookupError):
    """Raised when a summary is requested for a period with no food items."""
