"""
src/mead_data.py
"""
from dataclasses import dataclass
from enum import Enum


# --- ERRORS ---

class MeadError(Exception):
    """Base class for every calculator error surfaced to the user."""


class InvalidInput(MeadError, ValueError):
    pass


class InvalidSweetness(MeadError, ValueError):
    def __init__(self, token):
        self.token = token
        super().__init__(
            f"Invalid sweetness level '{token}'. "
            "Please use Dry, Semi-Sweet, Sweet, or Dessert."
        )


class ImpracticalGravity(MeadError):
    def __init__(self, original_gravity, limit):
        self.original_gravity = original_gravity
        self.limit = limit
        super().__init__(
            f"Calculated Original Gravity (OG={original_gravity:.3f}) is extremely high "
            f"(limit {limit:.3f}). This OG requires an impractical amount of honey and "
            "exceeds the tolerance of most mead yeasts."
        )


# --- ENUMS ---

class UnitSystem(Enum):
    US = "US"
    METRIC = "Metric"

    @property
    def volume_unit(self):
        return "gallons" if self is UnitSystem.US else "liters"

    @property
    def mass_unit(self):
        return "lbs" if self is UnitSystem.US else "kg"

    @property
    def volume_label(self):
        """Label used by the form spinner and the CLI prompt."""
        return "Gallons" if self is UnitSystem.US else "Liters"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("us", "imperial", "gallons", "gal", "1"):
            return cls.US
        if key in ("metric", "liters", "litres", "l", "2"):
            return cls.METRIC
        raise InvalidInput(f"Unknown unit system '{value}'.")


class Sweetness(Enum):
    DRY = "Dry"
    SEMI_SWEET = "Semi-Sweet"
    SWEET = "Sweet"
    DESSERT = "Dessert"

    @classmethod
    def parse(cls, value):
        """Case-insensitive match against the four labels."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for level in cls:
            if level.value.lower() == key:
                return level
        raise InvalidSweetness(value)


class FermentationMode(Enum):
    STANDARD = "Standard"
    TURBO = "Turbo"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.TURBO if value else cls.STANDARD
        key = str(value).strip().lower()
        if key in ("standard", "1"):
            return cls.STANDARD
        if key in ("turbo", "2"):
            return cls.TURBO
        raise InvalidInput(f"Unknown yeast method '{value}'.")


# --- VALUE RECORDS ---

@dataclass(frozen=True)
class CalculationInput:
    batch_volume: float
    unit_system: UnitSystem
    target_abv: int
    sweetness: Sweetness
    mode: FermentationMode = FermentationMode.STANDARD

    @property
    def volume_unit(self):
        return self.unit_system.volume_label

    def to_dict(self):
        return {
            "volume": self.batch_volume,
            "units": self.unit_system.value,
            "abv": self.target_abv,
            "sweetness": self.sweetness.value,
            "turbo": self.mode is FermentationMode.TURBO
        }


@dataclass(frozen=True)
class GravityTargets:
    original_gravity: float
    final_gravity: float
    mode: FermentationMode = FermentationMode.STANDARD
    # Selection that produced the targets; FG ignores it under Turbo
    sweetness: Sweetness = None

    @property
    def is_turbo(self):
        return self.mode is FermentationMode.TURBO


@dataclass(frozen=True)
class IngredientResult:
    original_gravity: float
    honey_amount: float
    honey_unit: str
    water_amount: float
    water_unit: str
    gravity_points_total: float
    honey_volume: float = 0.0
    water_clamped: bool = False

    @property
    def gravity_points_display(self):
        return int(round(self.gravity_points_total))
