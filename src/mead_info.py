"""
src/mead_info.py
Fixed help text shown by the CLI banner and the form's info popups.
Texts use Kivy markup ([b]...[/b]); strip_markup() gives the console version.
"""
import re

VERSION_STRING = "0.1.1"

APP_TITLE = "Mead Ingredients Calculator"

ASSUMPTIONS = [
    "Honey contributes 35 gravity points per pound per gallon (PPG).",
    "Sweetness level determines the assumed Final Gravity (FG).",
    "TURBO YEAST MODE: Forces Final Gravity (FG) to 1.000 (Dry)."
]

INTRO = (
    "This tool calculates the approximate amount of honey needed to reach a\n"
    "target Original Gravity (OG) based on your desired ABV and sweetness."
)

TURBO_NOTE = "Turbo Yeast selected. Final Gravity (FG) forced to 1.000."

ESTIMATE_DISCLAIMER = (
    "Calculation complete. Remember this is an ESTIMATE and specific "
    "yeast/flavorings are required."
)

WATER_INFO_TITLE = "Water Quality"
WATER_INFO = (
    "[b]Water quality in mead making[/b]\n\n"
    "Water quality is decisive for a healthy fermentation and for the final taste. "
    "It affects yeast activity, mouthfeel and how spices or fruit release their aroma.\n\n"
    "[b]Key points:[/b]\n"
    "- [b]Chlorine/Chloramine:[/b] Must be removed! They cause unpleasant 'medicinal' "
    "off-flavors. Use Campden tablets or a carbon filter.\n"
    "- [b]Mineral content (hardness):[/b] Minerals such as calcium and magnesium are yeast "
    "nutrients. Fully distilled water may need mineral additions.\n"
    "- [b]pH:[/b] Yeast prefers a slightly acidic environment (pH 3.0-4.0). High alkalinity "
    "in tap water can stress the yeast.\n"
)

HONEY_INFO_TITLE = "Honey Varieties"
HONEY_INFO = (
    "[b]Main honey varieties for mead[/b]\n\n"
    "The floral source of the honey sets the color, aroma and final taste of the mead.\n\n"
    "[b]Most common varieties:[/b]\n"
    "- [b]Clover:[/b] Light, delicate flavor. Excellent for traditional meads. "
    "The most common and easiest to find.\n"
    "- [b]Orange Blossom:[/b] Citrusy, floral aroma. Valued in lighter meads and "
    "melomels (fruit meads).\n"
    "- [b]Wildflower:[/b] Highly variable, rich and complex. Suits spiced meads (metheglins).\n"
    "- [b]Buckwheat:[/b] Very dark, rich and strong, often molasses-like. Needs long aging.\n"
)

_MARKUP_TAG = re.compile(r"\[/?[a-z]+(=[^\]]*)?\]")


def strip_markup(text):
    return _MARKUP_TAG.sub("", text)


def banner():
    """Intro block printed by the CLI before the prompts."""
    rule = "=" * 38
    lines = [
        rule,
        f"      {APP_TITLE} v{VERSION_STRING}",
        rule,
        INTRO,
        "Assumptions:"
    ]
    lines.extend(f" - {a}" for a in ASSUMPTIONS)
    return "\n".join(lines)
