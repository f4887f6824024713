"""
src/mead_math.py
Gravity targets and honey/water quantities for a mead batch.
"""
import math
from decimal import Decimal, ROUND_HALF_UP

from mead_data import (
    CalculationInput, GravityTargets, IngredientResult,
    UnitSystem, Sweetness, FermentationMode,
    InvalidInput, ImpracticalGravity
)

# Floral honey estimate: gravity points per pound per gallon (PPG)
GRAVITY_POINTS_PER_LB = 35.0

# 10 lbs of honey displaces ~0.65 gallons
HONEY_GAL_PER_10_LBS = 0.65

KG_TO_LBS = 2.20462
L_TO_GAL = 0.264172

# ABV = (OG - FG) * 131.25
ABV_FACTOR = 131.25

# Above this most mead yeasts stall
MAX_PRACTICAL_OG = 1.225

ABV_MIN = 5
ABV_MAX = 25

FINAL_GRAVITY = {
    Sweetness.DRY: 1.000,
    Sweetness.SEMI_SWEET: 1.010,
    Sweetness.SWEET: 1.020,
    Sweetness.DESSERT: 1.030
}
TURBO_FINAL_GRAVITY = 1.000

TOO_LARGE_MESSAGE = "Invalid volume. Batch volume is too large to calculate."


def liters_to_gallons(liters):
    return liters * L_TO_GAL


def gallons_to_liters(gallons):
    return gallons / L_TO_GAL


def lbs_to_kg(lbs):
    return lbs / KG_TO_LBS


def round_gravity(value):
    """Rounds a gravity to 3 decimals, half away from zero (1.1165 -> 1.117)."""
    rounded = Decimal(repr(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    return float(rounded)


class MeadMath:
    @staticmethod
    def resolve_targets(abv, sweetness, mode=FermentationMode.STANDARD):
        level = Sweetness.parse(sweetness)
        mode = FermentationMode.parse(mode)

        if mode is FermentationMode.TURBO:
            # Turbo yeast ferments to bone dry whatever the selection
            fg = TURBO_FINAL_GRAVITY
        else:
            fg = FINAL_GRAVITY[level]

        og = fg + (abv / ABV_FACTOR)

        return GravityTargets(
            original_gravity=round_gravity(og),
            final_gravity=fg,
            mode=mode,
            sweetness=level
        )

    @staticmethod
    def is_impractical(original_gravity):
        return original_gravity > MAX_PRACTICAL_OG

    @staticmethod
    def check_gravity(targets):
        """Raises ImpracticalGravity when the OG is beyond the yeast ceiling."""
        if MeadMath.is_impractical(targets.original_gravity):
            raise ImpracticalGravity(targets.original_gravity, MAX_PRACTICAL_OG)
        return targets

    @staticmethod
    def calculate_ingredients(targets, volume, unit):
        unit = UnitSystem.parse(unit)
        is_metric = unit is UnitSystem.METRIC

        # Everything below runs in gallons / lbs
        volume_gal = liters_to_gallons(volume) if is_metric else volume

        gravity_points = (targets.original_gravity - 1.000) * 1000.0 * volume_gal
        if not math.isfinite(gravity_points):
            raise InvalidInput(TOO_LARGE_MESSAGE)
        honey_lbs = gravity_points / GRAVITY_POINTS_PER_LB

        honey_volume_gal = (honey_lbs / 10.0) * HONEY_GAL_PER_10_LBS
        water_gal = volume_gal - honey_volume_gal

        # Honey alone fills the batch: nothing to top off
        water_clamped = water_gal <= 0.0
        water_gal = max(0.0, water_gal)

        if is_metric:
            return IngredientResult(
                original_gravity=targets.original_gravity,
                honey_amount=lbs_to_kg(honey_lbs),
                honey_unit=unit.mass_unit,
                water_amount=gallons_to_liters(water_gal),
                water_unit=unit.volume_unit,
                gravity_points_total=gravity_points,
                honey_volume=gallons_to_liters(honey_volume_gal),
                water_clamped=water_clamped
            )

        return IngredientResult(
            original_gravity=targets.original_gravity,
            honey_amount=honey_lbs,
            honey_unit=unit.mass_unit,
            water_amount=water_gal,
            water_unit=unit.volume_unit,
            gravity_points_total=gravity_points,
            honey_volume=honey_volume_gal,
            water_clamped=water_clamped
        )

    @staticmethod
    def validate_inputs(volume, abv, sweetness, unit, mode=FermentationMode.STANDARD):
        """
        Parses raw shell input into a CalculationInput.
        Accepts numbers or the strings typed by the user.
        """
        unit = UnitSystem.parse(unit)
        mode = FermentationMode.parse(mode)

        try:
            volume_val = float(str(volume).strip().replace(",", "."))
        except ValueError:
            raise InvalidInput(f"Invalid volume '{volume}'.") from None
        if not math.isfinite(volume_val) or volume_val <= 0.0:
            raise InvalidInput("Invalid volume. Batch volume must be greater than zero.")

        abv_val = MeadMath._parse_abv(abv)
        if abv_val < ABV_MIN or abv_val > ABV_MAX:
            raise InvalidInput(
                f"Invalid ABV range (must be between {ABV_MIN}% and {ABV_MAX}%)."
            )

        # Sweetest FG bounds the points any sweetness can ask of this volume
        peak_og = max(FINAL_GRAVITY.values()) + abv_val / ABV_FACTOR
        if not math.isfinite((peak_og - 1.000) * 1000.0 * volume_val):
            raise InvalidInput(TOO_LARGE_MESSAGE)

        if sweetness is None or not str(sweetness).strip():
            raise InvalidInput("Invalid sweetness input.")
        level = Sweetness.parse(sweetness)

        return CalculationInput(
            batch_volume=volume_val,
            unit_system=unit,
            target_abv=abv_val,
            sweetness=level,
            mode=mode
        )

    @staticmethod
    def _parse_abv(abv):
        if isinstance(abv, bool):
            raise InvalidInput(f"Invalid ABV '{abv}'.")
        if isinstance(abv, int):
            return abv
        if isinstance(abv, float):
            if not abv.is_integer():
                raise InvalidInput(f"Invalid ABV '{abv}'. Use a whole percentage.")
            return int(abv)
        try:
            return int(str(abv).strip().rstrip("%").strip())
        except ValueError:
            raise InvalidInput(f"Invalid ABV '{abv}'. Use a whole percentage.") from None

    @staticmethod
    def calculate(calc_input):
        """Resolve + calculate for an already validated input. No gravity policy applied."""
        targets = MeadMath.resolve_targets(
            calc_input.target_abv, calc_input.sweetness, calc_input.mode
        )
        result = MeadMath.calculate_ingredients(
            targets, calc_input.batch_volume, calc_input.unit_system
        )
        return targets, result
