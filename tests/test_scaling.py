"""Tests for scaling factor resolution and nutrient scaling."""

import pytest
from pydantic import ValidationError

from nutrition_scaling.domain.foods import ReferenceServing, UserRequest
from nutrition_scaling.domain.nutrients import Nutrient
from nutrition_scaling.domain.units import UnitKind
from nutrition_scaling.errors import UnitClassificationError
from nutrition_scaling.services.scaling import (
    ScalingService,
    build_raw_food_item,
    create_scaled_food_item,
    profile_from_codes,
    resolve_scaling_factor,
    scale_food_item,
)


def _coffee_serving() -> ReferenceServing:
    return ReferenceServing.model_validate(
        {
            "foodName": "Coffee with milk",
            "servingQuantity": 1,
            "servingUnit": "cup (8 fl oz)",
            "nutrientCodeValues": {"203": 8, "208": 100, "301": 240},
        }
    )


def test_resolve_direct_unit_match() -> None:
    assert resolve_scaling_factor(2, "cup", 1, "cup", None, UnitKind.VOLUME) == 2.0


def test_resolve_parenthetical_inner_unit() -> None:
    factor = resolve_scaling_factor(
        16, "fl oz", 1, "cup (8 fl oz)", None, UnitKind.VOLUME
    )
    assert factor == 2.0


def test_resolve_parenthetical_multiplies_serving_quantity() -> None:
    factor = resolve_scaling_factor(
        16, "fl oz", 2, "cup (8 fl oz)", None, UnitKind.VOLUME
    )
    assert factor == 1.0


def test_resolve_reads_ounces_as_fluid_for_volume_servings() -> None:
    factor = resolve_scaling_factor(16, "oz", 1, "cup (8 fl oz)", None, UnitKind.VOLUME)
    assert factor == 2.0


def test_resolve_keeps_weight_ounces_for_weight_servings() -> None:
    factor = resolve_scaling_factor(16, "oz", 1, "cup (8 fl oz)", None, UnitKind.WEIGHT)
    assert factor == pytest.approx((16 * 28.3495) / 236.588)


def test_resolve_gram_fallback_uses_serving_weight() -> None:
    factor = resolve_scaling_factor(3, "oz", 1, "slice", 28, UnitKind.WEIGHT)
    assert factor == pytest.approx((3 * 28.3495) / 28)
    assert factor == pytest.approx(3.0375, rel=1e-4)


def test_resolve_gram_fallback_converts_serving_unit() -> None:
    factor = resolve_scaling_factor(1, "cup", 2, "tbsp", None, UnitKind.VOLUME)
    assert factor == pytest.approx(236.588 / (2 * 14.7868))


def test_resolve_gram_fallback_uses_parenthetical_mass() -> None:
    factor = resolve_scaling_factor(1, "l", 1, "bottle (500 ml)", None, UnitKind.VOLUME)
    assert factor == pytest.approx(2.0)


def test_resolve_parenthetical_mass_multiplies_serving_quantity() -> None:
    factor = resolve_scaling_factor(1, "l", 2, "bottle (500 ml)", None, UnitKind.VOLUME)
    assert factor == pytest.approx(1.0)


def test_resolve_zero_serving_weight_returns_none() -> None:
    assert resolve_scaling_factor(3, "oz", 1, "slice", 0, UnitKind.WEIGHT) is None
    assert resolve_scaling_factor(1, "cup", 1, "tbsp", 0, UnitKind.VOLUME) is None


def test_resolve_blank_unit_for_count_serving() -> None:
    assert resolve_scaling_factor(3, "", 1, "medium", None, UnitKind.COUNT) == 3.0


def test_resolve_unresolvable_returns_none() -> None:
    assert resolve_scaling_factor(1, "banana", 1, "scoop", None, UnitKind.COUNT) is None


def test_resolve_zero_serving_quantity_returns_none() -> None:
    assert resolve_scaling_factor(2, "cup", 0, "cup", None, UnitKind.VOLUME) is None


def test_profile_from_codes_routes_named_fields() -> None:
    profile = profile_from_codes(
        {
            203: 10,
            204: 5,
            205: 20,
            208: 170,
            291: 3,
            269: 7,
            606: 2,
            605: 0.5,
            645: 1.5,
            646: 1.0,
            303: 2.2,
            99999: 4,
        }
    )

    assert profile.protein == 10
    assert profile.fat == 5
    assert profile.carbohydrates == 20
    assert profile.calories == 170
    assert profile.fiber == 3
    assert profile.sugar == 7
    assert profile.saturated_fat == 2
    assert profile.trans_fat == 0.5
    assert profile.unsaturated_fat == pytest.approx(2.5)
    assert profile.micronutrients == {Nutrient.IRON: 2.2}


def test_create_scaled_food_item_end_to_end() -> None:
    request = UserRequest(quantity=16, unit="fl oz")

    item = create_scaled_food_item(_coffee_serving(), request, UnitKind.VOLUME)

    assert item.protein == 16
    assert item.calories == 200
    assert item.micronutrients[Nutrient.CALCIUM] == 480
    assert item.servings == 2.0
    assert item.quantity == 16
    assert item.unit == "fl oz"
    assert item.scaling_resolved


def test_scale_unresolved_keeps_reference_values() -> None:
    serving = ReferenceServing(
        food_name="Protein powder",
        serving_quantity=1,
        serving_unit="scoop",
        nutrient_code_values={203: 24, 208: 120},
    )
    raw = build_raw_food_item(
        serving, UserRequest(quantity=2, unit="banana"), UnitKind.COUNT
    )

    item = scale_food_item(raw, None)

    assert item.protein == 24
    assert item.calories == 120
    assert item.quantity == 1
    assert item.unit == "scoop"
    assert item.servings == 1.0
    assert not item.scaling_resolved


def test_scale_does_not_touch_raw_item() -> None:
    raw = build_raw_food_item(
        _coffee_serving(), UserRequest(quantity=2, unit="cup"), UnitKind.VOLUME
    )

    scale_food_item(raw, 2.0)

    assert raw.nutrients.protein == 8
    assert raw.nutrients.micronutrients[Nutrient.CALCIUM] == 240


def test_request_brand_overrides_serving_brand() -> None:
    serving = ReferenceServing(
        food_name="Cola",
        brand_name="Generic",
        serving_quantity=12,
        serving_unit="fl oz",
    )
    request = UserRequest.model_validate(
        {"quantity": 12, "unit": "fl oz", "brand": "Fizz", "isBranded": True}
    )

    item = create_scaled_food_item(serving, request, UnitKind.VOLUME)

    assert item.brand == "Fizz"
    assert item.servings == 1.0


def test_reference_serving_requires_positive_quantity() -> None:
    with pytest.raises(ValidationError):
        ReferenceServing(food_name="Bad", serving_quantity=0, serving_unit="cup")


def test_scaling_service_infers_serving_kind(scaling_service: ScalingService) -> None:
    item = scaling_service.scale(_coffee_serving(), UserRequest(quantity=16, unit="oz"))

    assert item.unit_kind is UnitKind.VOLUME
    assert item.protein == 16


def test_scaling_service_lenient_kind_defaults_to_count(
    scaling_service: ScalingService,
) -> None:
    serving = ReferenceServing(
        food_name="Shake", serving_quantity=1, serving_unit="scoop"
    )

    assert scaling_service.serving_unit_kind(serving) is UnitKind.COUNT


def test_scaling_service_strict_kind_raises() -> None:
    service = ScalingService(strict_unit_classification=True)
    serving = ReferenceServing(
        food_name="Shake", serving_quantity=1, serving_unit="scoop"
    )

    with pytest.raises(UnitClassificationError):
        service.scale(serving, UserRequest(quantity=1, unit="scoop"))


def test_scaling_service_scale_group(scaling_service: ScalingService) -> None:
    group = scaling_service.scale_group(
        "Coffee with milk",
        [
            (_coffee_serving(), UserRequest(quantity=2, unit="cup")),
            (
                ReferenceServing(
                    food_name="Whole milk",
                    serving_quantity=100,
                    serving_unit="ml",
                    nutrient_code_values={203: 3.3},
                ),
                UserRequest(quantity=50, unit="ml"),
            ),
        ],
    )

    assert group.group_name == "Coffee with milk"
    assert [item.name for item in group.items] == ["Coffee with milk", "Whole milk"]
    assert group.items[0].protein == 16
    assert group.items[1].protein == pytest.approx(1.65)


def test_scaling_service_plural_volume_serving_reads_ounces_as_fluid(
    scaling_service: ScalingService,
) -> None:
    serving = ReferenceServing(
        food_name="Orange juice",
        serving_quantity=8,
        serving_unit="fluid ounces",
        nutrient_code_values={208: 110},
    )

    item = scaling_service.scale(serving, UserRequest(quantity=16, unit="oz"))

    assert item.unit_kind is UnitKind.VOLUME
    assert item.servings == pytest.approx(2.0)
    assert item.calories == pytest.approx(220)
