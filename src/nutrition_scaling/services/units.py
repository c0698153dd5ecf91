"""Unit classification and conversion to grams."""

import logging
import re

from nutrition_scaling.domain.units import UnitKind
from nutrition_scaling.errors import UnitClassificationError

_logger = logging.getLogger(__name__)

WEIGHT_TERMS = ("g", "gram", "grams", "oz", "mg", "lb", "kilogram", "kg")
VOLUME_TERMS = (
    "ml",
    "l",
    "cup",
    "cups",
    "tbsp",
    "tablespoon",
    "tablespoons",
    "tsp",
    "teaspoon",
    "teaspoons",
    "fl oz",
    "floz",
    "fluid ounce",
    "liter",
    "liters",
    "litre",
    "milliliter",
    "millilitre",
)
COUNT_TERMS = (
    "slice",
    "slices",
    "piece",
    "pieces",
    "medium",
    "large",
    "small",
    "serving",
    "servings",
    "item",
    "items",
    "unit",
    "units",
    "each",
)

# Checked in this order; earlier kinds win ties between equally long terms.
_KIND_TERMS: tuple[tuple[UnitKind, tuple[str, ...]], ...] = (
    (UnitKind.WEIGHT, WEIGHT_TERMS),
    (UnitKind.VOLUME, VOLUME_TERMS),
    (UnitKind.COUNT, COUNT_TERMS),
)

_TERM_PATTERNS: list[tuple[UnitKind, str, re.Pattern[str]]] = [
    (kind, term, re.compile(rf"(?<![a-z]){re.escape(term)}(?:e?s)?(?![a-z])"))
    for kind, terms in _KIND_TERMS
    for term in terms
]

GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "mg": 0.001,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "oz": 28.3495,
    "ounce": 28.3495,
    "ounces": 28.3495,
    "lb": 453.592,
    "lbs": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
}

# Millilitres per unit, read as grams for water-like liquids.
MILLILITRES_PER_UNIT: dict[str, float] = {
    "ml": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "fl oz": 29.5735,
    "floz": 29.5735,
    "fluid ounce": 29.5735,
    "fluid ounces": 29.5735,
    "litre": 1000.0,
    "litres": 1000.0,
    "millilitre": 1.0,
    "millilitres": 1.0,
    "tsp": 4.92892,
    "teaspoon": 4.92892,
    "teaspoons": 4.92892,
    "tbsp": 14.7868,
    "tablespoon": 14.7868,
    "tablespoons": 14.7868,
    "cup": 236.588,
    "cups": 236.588,
}

_PARENTHETICAL = re.compile(r"\(([^)]*)\)")
_AMOUNT_AND_UNIT = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*(\S.*?)\s*$")


def strip_parenthetical(unit: str | None) -> str:
    """Drop any parenthetical suffix and normalise case and spacing."""
    if not unit:
        return ""
    base = unit.split("(", 1)[0]
    return " ".join(base.lower().split())


def classify_unit(unit: str | None) -> UnitKind:
    """Classify a unit string as weight, volume or count.

    Each known term is searched for as a whole word, optionally pluralised,
    inside the unit text.
    When several terms match, the longest one decides; equally long matches
    go to weight, then volume, then count.
    """
    base = strip_parenthetical(unit)
    if not base:
        raise UnitClassificationError(unit)

    best: tuple[int, int] | None = None
    best_kind: UnitKind | None = None
    for order, (kind, term, pattern) in enumerate(_TERM_PATTERNS):
        if not pattern.search(base):
            continue
        rank = (len(term), -order)
        if best is None or rank > best:
            best = rank
            best_kind = kind

    if best_kind is None:
        raise UnitClassificationError(unit)
    return best_kind


def classify_unit_or_default(unit: str | None) -> UnitKind:
    """Classify a unit, falling back to count when it is not recognised."""
    try:
        return classify_unit(unit)
    except UnitClassificationError:
        _logger.debug("Unit %r not recognised, defaulting to Count", unit)
        return UnitKind.COUNT


def to_grams(quantity: float, unit: str | None) -> float | None:
    """Convert a quantity of a weight or volume unit to grams."""
    if not unit or not unit.strip():
        return None
    key = " ".join(unit.lower().split())
    grams_per_unit = GRAMS_PER_UNIT.get(key)
    if grams_per_unit is not None:
        return quantity * grams_per_unit
    millilitres_per_unit = MILLILITRES_PER_UNIT.get(key)
    if millilitres_per_unit is not None:
        return quantity * millilitres_per_unit
    return None


def parse_parenthetical(text: str | None) -> tuple[float, str] | None:
    """Split a clause like "(8 fl oz)" into its amount and unit."""
    if not text:
        return None
    clause = _PARENTHETICAL.search(text)
    if clause is None:
        return None
    parts = _AMOUNT_AND_UNIT.match(clause.group(1))
    if parts is None:
        return None
    return float(parts.group(1)), parts.group(2)


def parse_parenthetical_mass(serving_unit: str | None) -> float | None:
    """Return the gram equivalent of a serving's parenthetical hint."""
    parsed = parse_parenthetical(serving_unit)
    if parsed is None:
        return None
    amount, unit = parsed
    return to_grams(amount, unit)


def units_match(first: str | None, second: str | None) -> bool:
    """Return True when two unit strings name the same base unit."""
    return strip_parenthetical(first) == strip_parenthetical(second)
