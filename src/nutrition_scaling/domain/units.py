"""Unit kind model."""

from enum import Enum


class UnitKind(Enum):
    """Kind of measurement a unit expresses."""

    WEIGHT = "Weight"
    VOLUME = "Volume"
    COUNT = "Count"
