"""
Price estimator — configuration to itemized cost breakdown.

Perimeter-based frame pricing, area-based glass pricing, length-based bar
pricing, a product-type multiplier and a flat installation fee.

Every money value is rounded (half away from zero) at its own stage before
being summed, so totals match the stage-by-stage figures shown to the user.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .base import BaseCalculator, clamp, parse_choice, parse_count, parse_thickness
from ..models import ConfigurationInput, GlassType, ProductType, ProfileMaterial

# Size floor and sanity ceiling, metres per side
MIN_SIDE_M = 0.3
MAX_SIDE_M = 1000.0

# Reference thicknesses (cm) and the lowest factor a thin part can bring
FRAME_REFERENCE_CM = 6.0
FRAME_MIN_FACTOR = 0.5
BAR_REFERENCE_CM = 3.0
BAR_MIN_FACTOR = 0.6

# Doors carry handles and hinges, balconies more material
TYPE_MULTIPLIERS = MappingProxyType({
    ProductType.WINDOW: 1.0,
    ProductType.DOOR: 1.15,
    ProductType.BALCONY: 1.12,
})

DEFAULT_PROFILE = ProfileMaterial.PVC
DEFAULT_GLASS = GlassType.DOUBLE


@dataclass(frozen=True)
class PriceTable:
    profile_price_per_meter: Mapping[ProfileMaterial, int]
    glass_price_per_square_meter: Mapping[GlassType, int]
    bar_price_per_meter: int
    installation_fee: int
    currency: str = "so'm"

    def profile_price(self, material) -> Tuple[ProfileMaterial, int]:
        """Price per metre for a profile; unknown materials are priced as PVC."""
        material = parse_choice(material, ProfileMaterial, DEFAULT_PROFILE)
        if material not in self.profile_price_per_meter:
            material = DEFAULT_PROFILE
        return material, self.profile_price_per_meter[material]

    def glass_price(self, glass_type) -> Tuple[GlassType, int]:
        """Price per m² for a glass type; unknown types are priced as double."""
        glass_type = parse_choice(glass_type, GlassType, DEFAULT_GLASS)
        if glass_type not in self.glass_price_per_square_meter:
            glass_type = DEFAULT_GLASS
        return glass_type, self.glass_price_per_square_meter[glass_type]

    def to_dict(self) -> dict:
        return {
            "profile_price_per_meter": {k.value: v for k, v in self.profile_price_per_meter.items()},
            "glass_price_per_square_meter": {k.value: v for k, v in self.glass_price_per_square_meter.items()},
            "bar_price_per_meter": self.bar_price_per_meter,
            "installation_fee": self.installation_fee,
            "currency": self.currency,
        }


# Base prices, so'm
DEFAULT_PRICE_TABLE = PriceTable(
    profile_price_per_meter=MappingProxyType({
        ProfileMaterial.PVC: 120000,
        ProfileMaterial.ALUMINUM: 220000,
    }),
    glass_price_per_square_meter=MappingProxyType({
        GlassType.SINGLE: 150000,
        GlassType.DOUBLE: 280000,
        GlassType.TEMPERED: 420000,
    }),
    bar_price_per_meter=70000,
    installation_fee=180000,
)


@dataclass(frozen=True)
class PriceLine:
    code: str
    label: str
    amount: int


@dataclass(frozen=True)
class PriceBreakdown:
    area_m2: float
    perimeter_m: float
    bars_length_m: float
    profile_material: ProfileMaterial
    glass_type: GlassType
    frame_cost: int
    glass_cost: int
    bars_cost: int
    installation_fee: int
    type_multiplier: float
    total: int
    currency: str = "so'm"

    @property
    def components_cost(self) -> int:
        return self.frame_cost + self.glass_cost + self.bars_cost

    def line_items(self) -> List[PriceLine]:
        """Display rows in form order: glass, frame, bars, installation."""
        return [
            PriceLine("glass", f"Shisha ({self.area_m2:.2f} m²)", self.glass_cost),
            PriceLine("frame", f"Ramka (perim {self.perimeter_m:.2f} m)", self.frame_cost),
            PriceLine("bars", "Tayoqchalar", self.bars_cost),
            PriceLine("installation", "O'rnatish", self.installation_fee),
        ]


class PriceEstimator(BaseCalculator):

    def __init__(self, table: PriceTable = DEFAULT_PRICE_TABLE):
        self.table = table

    def calculate(self, config: ConfigurationInput) -> PriceBreakdown:
        table = self.table

        width_m = clamp(self.parse_number(config.width_cm) / 100, MIN_SIDE_M, MAX_SIDE_M)
        height_m = clamp(self.parse_number(config.height_cm) / 100, MIN_SIDE_M, MAX_SIDE_M)
        area = width_m * height_m
        perimeter = 2 * (width_m + height_m)

        # 1. Frame: priced by perimeter, scaled by profile thickness
        profile, profile_price = table.profile_price(config.profile_material)
        frame_factor = max(FRAME_MIN_FACTOR, parse_thickness(config.frame_thickness_cm) / FRAME_REFERENCE_CM)
        frame_cost = self.round_half_away(perimeter * profile_price * frame_factor)

        # 2. Glass: priced by area
        glass, glass_price = table.glass_price(config.glass_type)
        glass_cost = self.round_half_away(area * glass_price)

        # 3. Bars: vertical bars span the height, horizontal ones the width
        bars_length = height_m * parse_count(config.vertical_bars) + width_m * parse_count(config.horizontal_bars)
        bar_factor = max(BAR_MIN_FACTOR, parse_thickness(config.bar_thickness_cm) / BAR_REFERENCE_CM)
        bars_cost = self.round_half_away(bars_length * table.bar_price_per_meter * bar_factor)

        # 4. Type multiplier never touches installation
        product_type = parse_choice(config.product_type, ProductType, ProductType.WINDOW)
        multiplier = TYPE_MULTIPLIERS[product_type]
        installation = table.installation_fee

        total = self.round_half_away((frame_cost + glass_cost + bars_cost) * multiplier + installation)

        return PriceBreakdown(
            area_m2=area,
            perimeter_m=perimeter,
            bars_length_m=bars_length,
            profile_material=profile,
            glass_type=glass,
            frame_cost=frame_cost,
            glass_cost=glass_cost,
            bars_cost=bars_cost,
            installation_fee=installation,
            type_multiplier=multiplier,
            total=total,
            currency=table.currency,
        )


def compute_price(config: ConfigurationInput, table: PriceTable = DEFAULT_PRICE_TABLE) -> PriceBreakdown:
    return PriceEstimator(table).calculate(config)
