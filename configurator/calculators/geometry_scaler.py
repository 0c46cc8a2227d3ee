"""
Geometry scaler — physical dimensions (cm) to preview pixels.

Fits the unit into a fixed canvas, then derives frame/bar stroke widths,
the glass box and evenly divided bar positions. Pure math, no state.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import (
    BaseCalculator, clamp, parse_choice, parse_count, parse_number, parse_thickness, round_half_away,
)
from ..models import ConfigurationInput, GlassType, ProductType

# Canvas bounds
MAX_PREVIEW_WIDTH_PX = 420
MAX_PREVIEW_HEIGHT_PX = 520

# Scale limits (px per cm)
MAX_SCALE = 4.0
MIN_SCALE = 0.4

# Accepted physical range, cm: (min, max, default when missing)
WIDTH_RANGE_CM = (30.0, 400.0, 120.0)
HEIGHT_RANGE_CM = (30.0, 800.0, 150.0)

MIN_STROKE_PX = 2
MIN_GLASS_PX = 10

GLASS_TINTS = {
    GlassType.DOUBLE: "#e6f7ff",
}
DEFAULT_GLASS_TINT = "#f8fbff"


@dataclass(frozen=True)
class BarPosition:
    index: int
    percent: float      # centre line, % of the glass span
    center_px: float    # centre line, px from the glass edge
    offset_px: float    # leading edge, centre minus half the bar width


@dataclass(frozen=True)
class PreviewGeometry:
    scale: float
    preview_width_px: int
    preview_height_px: int
    frame_px: int
    bar_px: int
    glass_width_px: int
    glass_height_px: int
    vertical_bars: List[BarPosition] = field(default_factory=list)
    horizontal_bars: List[BarPosition] = field(default_factory=list)

    @property
    def scale_label(self) -> str:
        return f"{self.scale:.2f} px/cm"


@dataclass(frozen=True)
class TypeAccent:
    """Door handle or balcony ledge drawn inside the glass box."""
    kind: str
    height_px: float
    inset_right_px: Optional[float] = None


@dataclass(frozen=True)
class Preview:
    product_type: ProductType
    geometry: PreviewGeometry
    accent: Optional[TypeAccent]
    glass_tint: str
    frame_color: str
    bar_color: str


def _effective_dimension(value, dim_range) -> float:
    low, high, default = dim_range
    # Zero counts as "not entered" here, like an empty form field
    number = parse_number(value, default=default, finite=False) or default
    return clamp(number, low, high)


def _stroke_px(thickness_cm, scale: float) -> int:
    return max(MIN_STROKE_PX, round_half_away(parse_thickness(thickness_cm) * scale))


def bar_positions(count, span_px: float, bar_px: float) -> List[BarPosition]:
    """
    Evenly divide a span into count + 1 gaps and put a bar on each inner line.

    Bar i sits at (i + 1) / (count + 1) of the span. Changing the count
    moves every bar; there is no fixed gap.

    On a narrow span bars may overlap, but every bar is placed. The count
    itself is capped at MAX_BAR_COUNT when parsed.
    """
    n = parse_count(count)
    positions = []
    for i in range(n):
        percent = (i + 1) / (n + 1) * 100
        center = span_px * percent / 100
        positions.append(BarPosition(
            index=i,
            percent=percent,
            center_px=center,
            offset_px=center - bar_px / 2,
        ))
    return positions


def compute_geometry(
    width_cm,
    height_cm,
    frame_thickness_cm,
    bar_thickness_cm,
    vertical_bars=0,
    horizontal_bars=0,
    max_width_px: float = MAX_PREVIEW_WIDTH_PX,
    max_height_px: float = MAX_PREVIEW_HEIGHT_PX,
) -> PreviewGeometry:
    """
    Map physical dimensions into preview pixel geometry.

    Never raises: width/height are defaulted then clamped, thicknesses that
    make no sense land on the 2 px floor.

    The 0.4 px/cm floor wins over the canvas bounds, so very large units
    can render wider or taller than the canvas.
    """
    w = _effective_dimension(width_cm, WIDTH_RANGE_CM)
    h = _effective_dimension(height_cm, HEIGHT_RANGE_CM)

    scale = min(MAX_SCALE, max_width_px / w, max_height_px / h)
    if scale < MIN_SCALE:
        scale = MIN_SCALE

    preview_w = round_half_away(w * scale)
    preview_h = round_half_away(h * scale)
    frame_px = _stroke_px(frame_thickness_cm, scale)
    bar_px = _stroke_px(bar_thickness_cm, scale)

    glass_w = max(MIN_GLASS_PX, preview_w - 2 * frame_px)
    glass_h = max(MIN_GLASS_PX, preview_h - 2 * frame_px)

    return PreviewGeometry(
        scale=scale,
        preview_width_px=preview_w,
        preview_height_px=preview_h,
        frame_px=frame_px,
        bar_px=bar_px,
        glass_width_px=glass_w,
        glass_height_px=glass_h,
        vertical_bars=bar_positions(vertical_bars, glass_w, bar_px),
        horizontal_bars=bar_positions(horizontal_bars, glass_h, bar_px),
    )


def compute_type_accent(product_type, geometry: PreviewGeometry) -> Optional[TypeAccent]:
    """Door: handle on the right. Balcony: floor ledge. Window: nothing."""
    product_type = parse_choice(product_type, ProductType, ProductType.WINDOW)
    if product_type == ProductType.DOOR:
        return TypeAccent(
            kind="door_handle",
            height_px=max(24, geometry.bar_px * 2),
            inset_right_px=max(8, geometry.frame_px * 0.6),
        )
    if product_type == ProductType.BALCONY:
        return TypeAccent(
            kind="balcony_ledge",
            height_px=max(6, round_half_away(geometry.frame_px * 0.6)),
        )
    return None


def glass_tint(glass_type) -> str:
    glass_type = parse_choice(glass_type, GlassType, GlassType.DOUBLE)
    return GLASS_TINTS.get(glass_type, DEFAULT_GLASS_TINT)


class GeometryScaler(BaseCalculator):
    """Builds the full preview model for one configuration snapshot."""

    def __init__(self, max_width_px: float = MAX_PREVIEW_WIDTH_PX,
                 max_height_px: float = MAX_PREVIEW_HEIGHT_PX):
        self.max_width_px = max_width_px
        self.max_height_px = max_height_px

    def calculate(self, config: ConfigurationInput) -> Preview:
        geometry = compute_geometry(
            config.width_cm,
            config.height_cm,
            config.frame_thickness_cm,
            config.bar_thickness_cm,
            vertical_bars=config.vertical_bars,
            horizontal_bars=config.horizontal_bars,
            max_width_px=self.max_width_px,
            max_height_px=self.max_height_px,
        )
        return Preview(
            product_type=parse_choice(config.product_type, ProductType, ProductType.WINDOW),
            geometry=geometry,
            accent=compute_type_accent(config.product_type, geometry),
            glass_tint=glass_tint(config.glass_type),
            frame_color=config.frame_color,
            bar_color=config.bar_color,
        )


def build_preview(config: ConfigurationInput,
                  max_width_px: float = MAX_PREVIEW_WIDTH_PX,
                  max_height_px: float = MAX_PREVIEW_HEIGHT_PX) -> Preview:
    return GeometryScaler(max_width_px, max_height_px).calculate(config)
