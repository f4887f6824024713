import dataclasses

import pytest

from mead_data import (
    CalculationInput, GravityTargets, IngredientResult,
    UnitSystem, Sweetness, FermentationMode,
    MeadError, InvalidInput, InvalidSweetness, ImpracticalGravity
)


def test_sweetness_parse():
    assert Sweetness.parse(" DRY ") is Sweetness.DRY
    assert Sweetness.parse("semi-sweet") is Sweetness.SEMI_SWEET
    assert Sweetness.parse(Sweetness.DESSERT) is Sweetness.DESSERT


def test_sweetness_parse_unknown():
    with pytest.raises(InvalidSweetness) as exc:
        Sweetness.parse("semisweet")
    assert exc.value.token == "semisweet"
    assert "Semi-Sweet" in str(exc.value)


def test_unit_system_parse():
    assert UnitSystem.parse("1") is UnitSystem.US
    assert UnitSystem.parse("Gallons") is UnitSystem.US
    assert UnitSystem.parse("imperial") is UnitSystem.US
    assert UnitSystem.parse("2") is UnitSystem.METRIC
    assert UnitSystem.parse("Litres") is UnitSystem.METRIC
    with pytest.raises(InvalidInput):
        UnitSystem.parse("3")


def test_unit_labels():
    assert UnitSystem.US.mass_unit == "lbs"
    assert UnitSystem.US.volume_unit == "gallons"
    assert UnitSystem.METRIC.mass_unit == "kg"
    assert UnitSystem.METRIC.volume_unit == "liters"
    assert UnitSystem.METRIC.volume_label == "Liters"


def test_fermentation_mode_parse():
    assert FermentationMode.parse(True) is FermentationMode.TURBO
    assert FermentationMode.parse(False) is FermentationMode.STANDARD
    assert FermentationMode.parse("2") is FermentationMode.TURBO
    assert FermentationMode.parse("standard") is FermentationMode.STANDARD
    with pytest.raises(InvalidInput):
        FermentationMode.parse("fast")


def test_errors_share_a_base():
    assert issubclass(InvalidInput, MeadError)
    assert issubclass(InvalidSweetness, MeadError)
    assert issubclass(ImpracticalGravity, MeadError)
    assert issubclass(InvalidInput, ValueError)


def test_records_are_immutable():
    targets = GravityTargets(original_gravity=1.117, final_gravity=1.010)
    with pytest.raises(dataclasses.FrozenInstanceError):
        targets.original_gravity = 1.2


def test_calculation_input_to_dict():
    calc_input = CalculationInput(
        batch_volume=20.0,
        unit_system=UnitSystem.METRIC,
        target_abv=12,
        sweetness=Sweetness.SWEET,
        mode=FermentationMode.TURBO
    )
    assert calc_input.to_dict() == {
        "volume": 20.0, "units": "Metric", "abv": 12,
        "sweetness": "Sweet", "turbo": True
    }


def test_gravity_points_display_rounds():
    result = IngredientResult(
        original_gravity=1.117, honey_amount=1.0, honey_unit="lbs",
        water_amount=1.0, water_unit="gallons", gravity_points_total=618.6
    )
    assert result.gravity_points_display == 619
