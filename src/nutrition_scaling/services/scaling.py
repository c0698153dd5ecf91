"""Scaling of reference-serving nutrients to user-reported quantities."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_scaling.domain.foods import (
    FoodGroup,
    NutrientProfile,
    RawFoodItem,
    ReferenceServing,
    ScaledFoodItem,
    UserRequest,
)
from nutrition_scaling.domain.nutrients import (
    PROFILE_FIELD_CODES,
    Nutrient,
    nutrient_for_code,
)
from nutrition_scaling.domain.units import UnitKind
from nutrition_scaling.services.units import (
    classify_unit,
    classify_unit_or_default,
    parse_parenthetical,
    parse_parenthetical_mass,
    strip_parenthetical,
    to_grams,
    units_match,
)

_logger = logging.getLogger(__name__)

_OUNCE_UNITS = {"oz", "ounce", "ounces"}


def resolve_scaling_factor(  # noqa: PLR0913
    user_quantity: float,
    user_unit: str | None,
    serving_quantity: float,
    serving_unit: str | None,
    serving_weight_grams: float | None = None,
    api_serving_kind: UnitKind = UnitKind.WEIGHT,
) -> float | None:
    """Return how many reference servings the user's quantity represents.

    Strategies are tried in order: direct unit match, a match against the
    serving's parenthetical hint ("cup (8 fl oz)"), a plain count ratio when
    the user gave no unit for a count serving, and finally conversion of both
    sides to grams. Returns None when none of them applies.
    """
    unit = _disambiguate_ounces(user_unit, api_serving_kind)

    if units_match(unit, serving_unit):
        return _ratio(user_quantity, serving_quantity)

    inner = parse_parenthetical(serving_unit)
    if inner is not None:
        inner_amount, inner_unit = inner
        if units_match(unit, inner_unit):
            return _ratio(user_quantity, serving_quantity * inner_amount)

    if not unit.strip() and api_serving_kind is UnitKind.COUNT:
        return _ratio(user_quantity, serving_quantity)

    user_grams = to_grams(user_quantity, unit)
    if user_grams is None:
        return None
    serving_grams = _serving_grams(
        serving_quantity, serving_unit, serving_weight_grams
    )
    if serving_grams is None or serving_grams <= 0:
        return None
    return user_grams / serving_grams


def _disambiguate_ounces(unit: str | None, api_serving_kind: UnitKind) -> str:
    """Read a bare ounce as fluid ounces when the serving is a volume."""
    if api_serving_kind is UnitKind.VOLUME and strip_parenthetical(unit) in (
        _OUNCE_UNITS
    ):
        return "fl oz"
    return unit or ""


def _serving_grams(
    serving_quantity: float,
    serving_unit: str | None,
    serving_weight_grams: float | None,
) -> float | None:
    if serving_weight_grams is not None:
        return serving_weight_grams
    converted = to_grams(serving_quantity, strip_parenthetical(serving_unit))
    if converted is not None:
        return converted
    hinted = parse_parenthetical_mass(serving_unit)
    if hinted is not None:
        return serving_quantity * hinted
    return None


def _ratio(numerator: float, denominator: float) -> float | None:
    if denominator <= 0:
        return None
    return numerator / denominator


def build_raw_food_item(
    serving: ReferenceServing, request: UserRequest, unit_kind: UnitKind
) -> RawFoodItem:
    """Build an unscaled item from a reference serving and a user request."""
    return RawFoodItem(
        name=serving.food_name,
        brand=request.brand or serving.brand_name,
        serving_quantity=serving.serving_quantity,
        serving_unit=serving.serving_unit,
        serving_weight_grams=serving.serving_weight_grams,
        requested_quantity=request.quantity,
        requested_unit=request.unit,
        unit_kind=unit_kind,
        nutrients=profile_from_codes(serving.nutrient_code_values),
    )


def profile_from_codes(code_values: dict[int, float]) -> NutrientProfile:
    """Map external nutrient codes onto a nutrient profile."""
    fields: dict[str, float] = {}
    micronutrients: dict[Nutrient, float] = {}
    for code, value in code_values.items():
        field_name = PROFILE_FIELD_CODES.get(code)
        if field_name is not None:
            fields[field_name] = fields.get(field_name, 0.0) + float(value)
            continue
        nutrient = nutrient_for_code(code)
        if nutrient is None:
            _logger.debug("Skipping unknown nutrient code %s", code)
            continue
        micronutrients[nutrient] = float(value)
    return NutrientProfile(**fields, micronutrients=micronutrients)


def scale_food_item(item: RawFoodItem, factor: float | None) -> ScaledFoodItem:
    """Apply a resolved multiplier once and return the final item.

    A resolved item takes the user's quantity and unit. When no factor could
    be resolved the reference values are kept and the item is recorded as a
    single reference serving.
    """
    if factor is None:
        _logger.warning(
            "No scaling factor for %s (%s %s vs serving %s %s); "
            "keeping reference values",
            item.name,
            item.requested_quantity,
            item.requested_unit,
            item.serving_quantity,
            item.serving_unit,
        )
        return ScaledFoodItem(
            name=item.name,
            brand=item.brand,
            quantity=1.0,
            unit=item.serving_unit,
            unit_kind=item.unit_kind,
            servings=1.0,
            nutrients=item.nutrients,
            scaling_resolved=False,
        )

    return ScaledFoodItem(
        name=item.name,
        brand=item.brand,
        quantity=item.requested_quantity,
        unit=item.requested_unit or item.serving_unit,
        unit_kind=item.unit_kind,
        servings=factor,
        nutrients=item.nutrients.scaled(factor),
    )


def create_scaled_food_item(
    serving: ReferenceServing, request: UserRequest, unit_kind: UnitKind
) -> ScaledFoodItem:
    """Build a food item from a reference serving and scale it in one step."""
    raw = build_raw_food_item(serving, request, unit_kind)
    factor = resolve_scaling_factor(
        request.quantity,
        request.unit,
        serving.serving_quantity,
        serving.serving_unit,
        serving.serving_weight_grams,
        unit_kind,
    )
    _logger.debug(
        "Scaling %s: %s %s -> factor %s",
        raw.name,
        request.quantity,
        request.unit,
        factor,
    )
    return scale_food_item(raw, factor)


@dataclass
class ScalingService:
    """Service that turns reference servings into scaled food items."""

    strict_unit_classification: bool = False

    def serving_unit_kind(self, serving: ReferenceServing) -> UnitKind:
        """Infer the unit kind of a reference serving's unit."""
        if self.strict_unit_classification:
            return classify_unit(serving.serving_unit)
        return classify_unit_or_default(serving.serving_unit)

    def scale(
        self,
        serving: ReferenceServing,
        request: UserRequest,
        unit_kind: UnitKind | None = None,
    ) -> ScaledFoodItem:
        """Scale one reference serving to the user's request."""
        kind = unit_kind or self.serving_unit_kind(serving)
        return create_scaled_food_item(serving, request, kind)

    def scale_group(
        self,
        group_name: str,
        pairs: Iterable[tuple[ReferenceServing, UserRequest]],
    ) -> FoodGroup:
        """Scale every item of a meal portion into a food group."""
        items = [self.scale(serving, request) for serving, request in pairs]
        return FoodGroup(group_name=group_name, items=items)
