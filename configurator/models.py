from dataclasses import dataclass
import enum

from .calculators.base import parse_number, parse_count, parse_choice


# --- Enums ---

class ProductType(str, enum.Enum):
    WINDOW = "window"
    DOOR = "door"
    BALCONY = "balcony"


class ProfileMaterial(str, enum.Enum):
    PVC = "PVC"
    ALUMINUM = "Aluminum"


class GlassType(str, enum.Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TEMPERED = "tempered"


# Form labels as shown in the configurator UI
PRODUCT_TYPE_LABELS = {
    ProductType.WINDOW: "Deraza",
    ProductType.DOOR: "Eshik",
    ProductType.BALCONY: "Balkon",
}

PROFILE_MATERIAL_LABELS = {
    ProfileMaterial.PVC: "PVC",
    ProfileMaterial.ALUMINUM: "Aluminum",
}

GLASS_TYPE_LABELS = {
    GlassType.SINGLE: "Yagona",
    GlassType.DOUBLE: "Ikki qavat",
    GlassType.TEMPERED: "Tempered",
}


# --- Form defaults (initial state of a fresh configurator) ---

DEFAULT_FIELDS = {
    "product_type": ProductType.WINDOW,
    "width_cm": 120.0,
    "height_cm": 150.0,
    "frame_thickness_cm": 6.0,
    "bar_thickness_cm": 3.0,
    "vertical_bars": 1,
    "horizontal_bars": 0,
    "profile_material": ProfileMaterial.PVC,
    "glass_type": GlassType.DOUBLE,
    "frame_color": "#333333",
    "bar_color": "#333333",
}


@dataclass(frozen=True)
class ConfigurationInput:
    """One snapshot of the configurator form. Replaced, never mutated, on each edit."""
    product_type: ProductType = ProductType.WINDOW
    width_cm: float = 120.0
    height_cm: float = 150.0
    frame_thickness_cm: float = 6.0
    bar_thickness_cm: float = 3.0
    vertical_bars: int = 1
    horizontal_bars: int = 0
    profile_material: ProfileMaterial = ProfileMaterial.PVC
    glass_type: GlassType = GlassType.DOUBLE
    frame_color: str = "#333333"
    bar_color: str = "#333333"

    @classmethod
    def from_fields(cls, fields: dict) -> "ConfigurationInput":
        """
        Build a configuration from raw form fields.

        Every field is optional. Numbers that are missing or unparsable take the
        form default, bar counts are whole and non-negative, and unknown enum
        values fall back to window / PVC / double.
        """
        fields = fields or {}
        d = DEFAULT_FIELDS

        def number(key):
            return parse_number(fields.get(key), default=d[key])

        def color(key):
            value = fields.get(key)
            return str(value) if value not in (None, "") else d[key]

        return cls(
            product_type=parse_choice(fields.get("product_type"), ProductType, d["product_type"]),
            width_cm=number("width_cm"),
            height_cm=number("height_cm"),
            frame_thickness_cm=number("frame_thickness_cm"),
            bar_thickness_cm=number("bar_thickness_cm"),
            vertical_bars=parse_count(fields.get("vertical_bars"), default=d["vertical_bars"]),
            horizontal_bars=parse_count(fields.get("horizontal_bars"), default=d["horizontal_bars"]),
            profile_material=parse_choice(fields.get("profile_material"), ProfileMaterial, d["profile_material"]),
            glass_type=parse_choice(fields.get("glass_type"), GlassType, d["glass_type"]),
            frame_color=color("frame_color"),
            bar_color=color("bar_color"),
        )

    def to_fields(self) -> dict:
        return {
            "product_type": self.product_type.value,
            "width_cm": self.width_cm,
            "height_cm": self.height_cm,
            "frame_thickness_cm": self.frame_thickness_cm,
            "bar_thickness_cm": self.bar_thickness_cm,
            "vertical_bars": self.vertical_bars,
            "horizontal_bars": self.horizontal_bars,
            "profile_material": self.profile_material.value,
            "glass_type": self.glass_type.value,
            "frame_color": self.frame_color,
            "bar_color": self.bar_color,
        }
