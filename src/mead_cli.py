"""
src/mead_cli.py
Text-prompt front end. Strict policy: any invalid input or an impractical
gravity stops the run with exit code 1.

Examples:
  meadbrain
  meadbrain --units metric --volume 20 --abv 14 --sweetness semi-sweet
  meadbrain --units us --volume 5 --abv 18 --sweetness dry --turbo
"""
import argparse
import sys

from mead_data import (
    MeadError, InvalidInput, ImpracticalGravity, UnitSystem, FermentationMode
)
from mead_math import MeadMath, ABV_MIN, ABV_MAX
import mead_info

UNIT_NAMES = {UnitSystem.US: "pounds", UnitSystem.METRIC: "kilograms"}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="meadbrain",
        description="Estimate honey and top-off water for a mead batch."
    )
    parser.add_argument("--units", help="us | metric (prompted when omitted)")
    parser.add_argument("--volume", help="batch volume in gallons or liters")
    parser.add_argument("--abv", help=f"target ABV in percent ({ABV_MIN}-{ABV_MAX})")
    parser.add_argument("--sweetness", help="Dry | Semi-Sweet | Sweet | Dessert")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--turbo", dest="mode", action="store_const", const="turbo",
                      help="turbo yeast: ferment to FG 1.000")
    mode.add_argument("--standard", dest="mode", action="store_const", const="standard")
    parser.add_argument("--info", choices=["water", "honey"],
                        help="print water quality or honey variety notes and exit")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {mead_info.VERSION_STRING}")
    return parser


def _ask(reader, prompt):
    try:
        return reader(prompt).strip()
    except EOFError:
        raise InvalidInput("No input given.") from None


def format_results(targets, result, unit):
    lines = [
        "--- Calculation Results ---",
        f"Target Original Gravity (OG): {targets.original_gravity:.3f}",
        f"Required Honey:             {result.honey_amount:.2f} {result.honey_unit} ({UNIT_NAMES[unit]})"
    ]
    if result.water_clamped:
        lines.append(
            f"Required Water (to top off):  0.00 {result.water_unit} "
            "(Honey volume meets or exceeds batch volume.)"
        )
    else:
        lines.append(f"Required Water (to top off):  {result.water_amount:.2f} {result.water_unit}")

    points = f"Total Gravity Points Needed:  {result.gravity_points_display}"
    if unit is UnitSystem.METRIC:
        points += " (Based on US Gal/Lbs)"
    lines.append(points)
    return "\n".join(lines)


def run(args, reader=input, writer=print):
    if args.info:
        text = mead_info.WATER_INFO if args.info == "water" else mead_info.HONEY_INFO
        writer(mead_info.strip_markup(text))
        return 0

    writer(mead_info.banner())

    if args.units is None:
        args.units = _ask(reader, "\nSelect unit system (1 for US Imperial, 2 for Metric): ")
    try:
        unit = UnitSystem.parse(args.units)
    except InvalidInput:
        writer("Invalid selection. Exiting.")
        return 1

    if args.volume is None:
        args.volume = _ask(reader, f"Enter batch volume (in {unit.volume_label}): ")
    if args.abv is None:
        args.abv = _ask(reader, "Enter target ABV (%, e.g., 14): ")
    if args.sweetness is None:
        args.sweetness = _ask(reader, "Enter sweetness level (Dry, Semi-Sweet, Sweet, Dessert): ")
    if args.mode is None:
        args.mode = _ask(
            reader,
            "Are you using Turbo Yeast Method? (1 for Standard Yeast, 2 for Turbo Yeast): "
        )

    calc_input = MeadMath.validate_inputs(args.volume, args.abv, args.sweetness, unit, args.mode)
    targets = MeadMath.resolve_targets(calc_input.target_abv, calc_input.sweetness, calc_input.mode)

    if calc_input.mode is FermentationMode.TURBO:
        writer(f"\nNOTE: {mead_info.TURBO_NOTE}")

    # Strict policy: stop before computing ingredients
    MeadMath.check_gravity(targets)

    result = MeadMath.calculate_ingredients(targets, calc_input.batch_volume, unit)
    writer("")
    writer(format_results(targets, result, unit))
    writer(f"\n{mead_info.ESTIMATE_DISCLAIMER}")
    return 0


def main(argv=None, reader=input, writer=print):
    args = build_parser().parse_args(argv)
    try:
        return run(args, reader=reader, writer=writer)
    except MeadError as e:
        writer(f"\nError: {e}")
        if isinstance(e, ImpracticalGravity):
            writer("Please try a lower ABV or a smaller batch size.")
        writer("Exiting.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
