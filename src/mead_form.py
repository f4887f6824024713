"""
src/mead_form.py
Turns the raw text of the calculator form into label strings.
Kept free of Kivy so the form logic runs headless.
"""
from dataclasses import dataclass

from mead_data import MeadError, UnitSystem, Sweetness
from mead_math import MeadMath, MAX_PRACTICAL_OG, gallons_to_liters, liters_to_gallons
from mead_info import TURBO_NOTE

UNIT_OPTIONS = [u.volume_label for u in UnitSystem]
SWEETNESS_OPTIONS = [s.value for s in Sweetness]

# Status colors (RGBA) used by the kv rules
LEVEL_COLORS = {
    "info": [1, 1, 1, 1],
    "turbo": [1, 0.3, 0.3, 1],
    "warning": [1, 0.65, 0, 1],
    "error": [1, 0.2, 0.2, 1]
}

PROMPT_MESSAGE = "Press 'Calculate Ingredients' to see the results."


@dataclass(frozen=True)
class FormOutput:
    ok: bool
    message: str
    level: str = "info"
    og_text: str = ""
    fg_text: str = ""
    honey_text: str = ""
    water_text: str = ""
    points_text: str = ""
    calc_input: object = None

    @property
    def message_color(self):
        return LEVEL_COLORS.get(self.level, LEVEL_COLORS["info"])


def evaluate_form(volume_text, abv_text, unit_label, sweetness_label, turbo):
    """
    Validates the form and runs the calculation.
    Errors come back as ok=False with the message; impractical gravity is
    only a warning here and the results are still filled in.
    """
    try:
        calc_input = MeadMath.validate_inputs(
            volume_text, abv_text, sweetness_label, unit_label, bool(turbo)
        )
        targets, result = MeadMath.calculate(calc_input)
    except MeadError as e:
        return FormOutput(ok=False, message=f"Error: {e}", level="error")

    if MeadMath.is_impractical(targets.original_gravity):
        message = (
            f"WARNING: Calculated OG ({targets.original_gravity:.3f}) is above "
            f"{MAX_PRACTICAL_OG:.3f}. Try a lower ABV."
        )
        level = "warning"
    elif targets.is_turbo:
        message = f"Calculation complete. ({TURBO_NOTE})"
        level = "turbo"
    else:
        message = "Calculation complete."
        level = "info"

    water_text = f"{result.water_amount:.2f} {result.water_unit}"
    if result.water_clamped:
        water_text += " (honey volume meets or exceeds batch volume)"

    return FormOutput(
        ok=True,
        message=message,
        level=level,
        og_text=f"{targets.original_gravity:.3f}",
        fg_text=f"{targets.final_gravity:.3f}",
        honey_text=f"{result.honey_amount:.2f} {result.honey_unit}",
        water_text=water_text,
        points_text=f"{result.gravity_points_display}",
        calc_input=calc_input
    )


def convert_volume_text(volume_text, from_label, to_label):
    """
    Re-expresses the typed volume when the unit spinner changes.
    Text that is not a positive number is left as typed.
    """
    try:
        from_unit = UnitSystem.parse(from_label)
        to_unit = UnitSystem.parse(to_label)
        value = float(str(volume_text).strip().replace(",", "."))
    except (MeadError, ValueError):
        return volume_text

    if from_unit is to_unit or value <= 0.0:
        return volume_text

    if to_unit is UnitSystem.METRIC:
        converted = gallons_to_liters(value)
    else:
        converted = liters_to_gallons(value)
    return f"{converted:.2f}"


def restore_form_values(last_inputs, is_metric):
    """Form field values for a saved session. Unknown sweetness falls back to Semi-Sweet."""
    sweetness = last_inputs.get("sweetness", "Semi-Sweet")
    return {
        "unit_label": UNIT_OPTIONS[1] if is_metric else UNIT_OPTIONS[0],
        "volume_text": str(last_inputs.get("volume", 5.0)),
        "abv_text": str(last_inputs.get("abv", 14)),
        "sweetness_label": sweetness if sweetness in SWEETNESS_OPTIONS else "Semi-Sweet",
        "turbo": bool(last_inputs.get("turbo", False))
    }


class UnitSwitch:
    """
    Tracks the unit spinner so the typed volume is converted once per change.
    While ignore_changes is set (restoring a session) labels are recorded
    without converting.
    """

    def __init__(self, label=UNIT_OPTIONS[0]):
        self.last_label = label
        self.ignore_changes = False

    def restore(self, label):
        self.last_label = label

    def convert(self, volume_text, label):
        """Returns the volume text for the new unit, or None when nothing changed."""
        if self.ignore_changes:
            return None
        previous = self.last_label
        self.last_label = label
        if previous == label:
            return None
        return convert_volume_text(volume_text, previous, label)
