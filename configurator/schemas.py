from pydantic import BaseModel
from typing import Dict, List, Optional, Union

from .calculators.geometry_scaler import Preview
from .calculators.price_estimator import PriceBreakdown
from .formatting import format_sum
from .models import ConfigurationInput, GlassType, ProductType, ProfileMaterial
from .orders import OrderReceipt

# Form fields arrive as whatever the widget produced: numbers or strings.
RawNumber = Union[float, str]


class ConfigurationRequest(BaseModel):
    product_type: Optional[str] = None
    width_cm: Optional[RawNumber] = None
    height_cm: Optional[RawNumber] = None
    frame_thickness_cm: Optional[RawNumber] = None
    bar_thickness_cm: Optional[RawNumber] = None
    vertical_bars: Optional[RawNumber] = None
    horizontal_bars: Optional[RawNumber] = None
    profile_material: Optional[str] = None
    glass_type: Optional[str] = None
    frame_color: Optional[str] = None
    bar_color: Optional[str] = None

    def to_config(self) -> ConfigurationInput:
        return ConfigurationInput.from_fields(self.model_dump(exclude_none=True))


class ConfigurationOut(BaseModel):
    product_type: ProductType
    width_cm: float
    height_cm: float
    frame_thickness_cm: float
    bar_thickness_cm: float
    vertical_bars: int
    horizontal_bars: int
    profile_material: ProfileMaterial
    glass_type: GlassType
    frame_color: str
    bar_color: str
    class Config:
        from_attributes = True


# --- Preview ---

class BarPositionOut(BaseModel):
    index: int
    percent: float
    center_px: float
    offset_px: float
    class Config:
        from_attributes = True


class GeometryOut(BaseModel):
    scale: float
    scale_label: str
    preview_width_px: int
    preview_height_px: int
    frame_px: int
    bar_px: int
    glass_width_px: int
    glass_height_px: int
    vertical_bars: List[BarPositionOut] = []
    horizontal_bars: List[BarPositionOut] = []
    class Config:
        from_attributes = True


class TypeAccentOut(BaseModel):
    kind: str
    height_px: float
    inset_right_px: Optional[float] = None
    class Config:
        from_attributes = True


class PreviewResponse(BaseModel):
    product_type: ProductType
    geometry: GeometryOut
    accent: Optional[TypeAccentOut] = None
    glass_tint: str
    frame_color: str
    bar_color: str
    class Config:
        from_attributes = True

    @classmethod
    def from_preview(cls, preview: Preview) -> "PreviewResponse":
        return cls.model_validate(preview, from_attributes=True)


# --- Price ---

class PriceLineOut(BaseModel):
    code: str
    label: str
    amount: int
    formatted: str


class PriceResponse(BaseModel):
    area_m2: float
    perimeter_m: float
    bars_length_m: float
    profile_material: ProfileMaterial
    glass_type: GlassType
    frame_cost: int
    glass_cost: int
    bars_cost: int
    components_cost: int
    installation_fee: int
    type_multiplier: float
    total: int
    currency: str
    lines: List[PriceLineOut] = []
    formatted_total: str

    @classmethod
    def from_breakdown(cls, breakdown: PriceBreakdown) -> "PriceResponse":
        return cls(
            area_m2=breakdown.area_m2,
            perimeter_m=breakdown.perimeter_m,
            bars_length_m=breakdown.bars_length_m,
            profile_material=breakdown.profile_material,
            glass_type=breakdown.glass_type,
            frame_cost=breakdown.frame_cost,
            glass_cost=breakdown.glass_cost,
            bars_cost=breakdown.bars_cost,
            components_cost=breakdown.components_cost,
            installation_fee=breakdown.installation_fee,
            type_multiplier=breakdown.type_multiplier,
            total=breakdown.total,
            currency=breakdown.currency,
            lines=[
                PriceLineOut(code=line.code, label=line.label, amount=line.amount,
                             formatted=format_sum(line.amount, breakdown.currency))
                for line in breakdown.line_items()
            ],
            formatted_total=format_sum(breakdown.total, breakdown.currency),
        )


class EstimateResponse(BaseModel):
    configuration: ConfigurationOut
    preview: PreviewResponse
    price: PriceResponse


# --- Options / price table ---

class OptionOut(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    product_types: List[OptionOut]
    profile_materials: List[OptionOut]
    glass_types: List[OptionOut]
    defaults: ConfigurationOut
    canvas_width_px: int
    canvas_height_px: int


class PriceTableResponse(BaseModel):
    profile_price_per_meter: Dict[str, int]
    glass_price_per_square_meter: Dict[str, int]
    bar_price_per_meter: int
    installation_fee: int
    currency: str
    type_multipliers: Dict[str, float]


# --- Orders ---

class OrderResponse(BaseModel):
    accepted: bool
    message: str
    order_id: Optional[str] = None
    total: Optional[int] = None
    formatted_total: Optional[str] = None

    @classmethod
    def from_receipt(cls, receipt: OrderReceipt) -> "OrderResponse":
        return cls(
            accepted=receipt.accepted,
            message=receipt.message,
            order_id=receipt.order_id,
            total=receipt.total,
            formatted_total=format_sum(receipt.total) if receipt.total is not None else None,
        )
