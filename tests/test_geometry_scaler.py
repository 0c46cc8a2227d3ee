"""
Geometry scaler tests — cm to preview pixels.

Tests:
1-4.   Input coercion (defaults, clamping, junk values)
5-10.  Scale, preview size, stroke widths, glass box
11-16. Bar placement
17-20. Type accents, glass tint, full preview model
21-22. Properties over the accepted size range
"""

import math

import pytest

from configurator.calculators.base import MAX_BAR_COUNT, MAX_THICKNESS_CM, round_half_away
from configurator.calculators.geometry_scaler import (
    MAX_PREVIEW_HEIGHT_PX, MAX_PREVIEW_WIDTH_PX, MIN_GLASS_PX, MIN_SCALE,
    GeometryScaler, bar_positions, build_preview, compute_geometry,
    compute_type_accent, glass_tint,
)
from configurator.models import ConfigurationInput, GlassType, ProductType


def _default_geometry(**kwargs):
    return compute_geometry(120, 150, 6, 3, **kwargs)


# ============================================================
# Input coercion
# ============================================================

def test_missing_width_and_height_use_form_defaults():
    """None, NaN, empty string and zero all mean 'not entered': 120 × 150."""
    expected = _default_geometry()
    for missing in (None, float("nan"), "", 0, "abc"):
        g = compute_geometry(missing, missing, 6, 3)
        assert g.preview_width_px == expected.preview_width_px
        assert g.preview_height_px == expected.preview_height_px


def test_width_clamped_to_range():
    """Width below 30 cm renders as 30, above 400 cm renders as 400."""
    assert compute_geometry(5, 150, 6, 3) == compute_geometry(30, 150, 6, 3)
    assert compute_geometry(-20, 150, 6, 3) == compute_geometry(30, 150, 6, 3)
    assert compute_geometry(5000, 150, 6, 3) == compute_geometry(400, 150, 6, 3)
    assert compute_geometry(float("inf"), 150, 6, 3) == compute_geometry(400, 150, 6, 3)


def test_height_clamped_to_range():
    """Height below 30 cm renders as 30, above 800 cm renders as 800."""
    assert compute_geometry(120, 10, 6, 3) == compute_geometry(120, 30, 6, 3)
    assert compute_geometry(120, 9000, 6, 3) == compute_geometry(120, 800, 6, 3)


def test_numeric_strings_accepted():
    """Form fields often arrive as strings."""
    assert compute_geometry("120", "150", "6", "3") == _default_geometry()


# ============================================================
# Scale and sizes
# ============================================================

def test_default_window_geometry():
    """120 × 150 cm: height is the binding bound, 520 / 150 px per cm."""
    g = _default_geometry()
    assert g.scale == pytest.approx(520 / 150)
    assert g.preview_width_px == 416
    assert g.preview_height_px == 520
    assert g.frame_px == 21   # 6 * 3.467 = 20.8
    assert g.bar_px == 10     # 3 * 3.467 = 10.4
    assert g.glass_width_px == 416 - 2 * 21
    assert g.glass_height_px == 520 - 2 * 21
    assert g.scale_label == "3.47 px/cm"


def test_scale_capped_at_four():
    """Small units never scale beyond 4 px per cm."""
    g = compute_geometry(30, 30, 6, 3)
    assert g.scale == 4
    assert g.preview_width_px == 120
    assert g.preview_height_px == 120
    assert g.frame_px == 24
    assert g.bar_px == 12


def test_scale_floor_can_exceed_canvas():
    """Below 0.4 px/cm the floor wins and the box outgrows the canvas."""
    g = compute_geometry(400, 150, 6, 3, max_width_px=100, max_height_px=100)
    assert g.scale == MIN_SCALE
    assert g.preview_width_px == 160
    assert g.preview_width_px > 100


def test_strokes_never_thinner_than_two_px():
    """Thin, zero, negative and junk thicknesses all draw at 2 px."""
    for thickness in (0.1, 0, -4, None, float("nan"), "thick"):
        g = compute_geometry(120, 150, thickness, thickness)
        assert g.frame_px == 2
        assert g.bar_px == 2


def test_glass_box_never_below_ten_px():
    """A frame wider than half the unit leaves a 10 px glass box, not a negative one."""
    g = compute_geometry(30, 30, 20, 3)
    assert g.frame_px == 80
    assert g.glass_width_px == MIN_GLASS_PX
    assert g.glass_height_px == MIN_GLASS_PX


def test_absurd_thickness_capped():
    """1e308 cm strokes draw as MAX_THICKNESS_CM, never as an infinite width."""
    g = compute_geometry(120, 150, "1e308", 1e308)
    assert g.frame_px == round_half_away(MAX_THICKNESS_CM * 520 / 150)
    assert g.bar_px == g.frame_px
    assert g.glass_width_px == MIN_GLASS_PX


# ============================================================
# Bar placement
# ============================================================

def test_three_bars_on_300_px_divide_evenly():
    """Bars at 25 / 50 / 75 %, each shifted back by half its width."""
    positions = bar_positions(3, 300, 10)
    assert [p.percent for p in positions] == [25.0, 50.0, 75.0]
    assert [p.center_px for p in positions] == [75.0, 150.0, 225.0]
    assert [p.offset_px for p in positions] == [70.0, 145.0, 220.0]
    assert [p.index for p in positions] == [0, 1, 2]


def test_no_bars_no_positions():
    """Zero, negative and junk counts give an empty list."""
    assert bar_positions(0, 300, 10) == []
    assert bar_positions(-2, 300, 10) == []
    assert bar_positions(None, 300, 10) == []


def test_bar_count_change_redistributes_all_bars():
    """Going from 1 to 2 bars moves the first bar too (division, not a fixed gap)."""
    one = bar_positions(1, 300, 10)
    two = bar_positions(2, 300, 10)
    assert one[0].center_px == 150.0
    assert two[0].center_px == pytest.approx(100.0)
    assert two[1].center_px == pytest.approx(200.0)


def test_geometry_places_bars_on_glass_box():
    """Vertical bars measure against glass width, horizontal against glass height."""
    g = _default_geometry(vertical_bars=1, horizontal_bars=2)
    assert len(g.vertical_bars) == 1
    assert g.vertical_bars[0].center_px == g.glass_width_px / 2
    assert g.vertical_bars[0].offset_px == g.glass_width_px / 2 - g.bar_px / 2
    assert len(g.horizontal_bars) == 2
    assert g.horizontal_bars[1].center_px == pytest.approx(g.glass_height_px * 2 / 3)


def test_narrow_glass_keeps_every_bar():
    """30 × 800 cm leaves 12 px of glass; 13 bars still sit at 1/14 steps."""
    g = compute_geometry(30, 800, 6, 3, vertical_bars=13)
    assert g.glass_width_px == 12
    assert len(g.vertical_bars) == 13
    assert g.vertical_bars[0].percent == pytest.approx(100 / 14)
    assert g.vertical_bars[-1].percent == pytest.approx(1300 / 14)


def test_absurd_bar_count_capped():
    """A count far beyond any real grille is placed as MAX_BAR_COUNT bars."""
    g = compute_geometry(120, 150, 6, 3, vertical_bars="1e305", horizontal_bars=MAX_BAR_COUNT + 5)
    assert len(g.vertical_bars) == MAX_BAR_COUNT
    assert len(g.horizontal_bars) == MAX_BAR_COUNT
    assert g.vertical_bars[0].percent == pytest.approx(100 / (MAX_BAR_COUNT + 1))


# ============================================================
# Accents, tint, preview model
# ============================================================

def test_door_gets_handle():
    """Door handle: inset max(8, 0.6 × frame), height max(24, 2 × bar)."""
    g = _default_geometry()
    accent = compute_type_accent(ProductType.DOOR, g)
    assert accent.kind == "door_handle"
    assert accent.inset_right_px == pytest.approx(21 * 0.6)
    assert accent.height_px == 24


def test_balcony_gets_ledge_window_gets_nothing():
    """Balcony ledge is max(6, round(0.6 × frame)); plain windows have no accent."""
    g = _default_geometry()
    ledge = compute_type_accent("balcony", g)
    assert ledge.kind == "balcony_ledge"
    assert ledge.height_px == 13
    assert compute_type_accent(ProductType.WINDOW, g) is None
    assert compute_type_accent("garage", g) is None


def test_glass_tint_by_type():
    """Double glazing is tinted blue, everything else near-white."""
    assert glass_tint(GlassType.DOUBLE) == "#e6f7ff"
    assert glass_tint("single") == "#f8fbff"
    assert glass_tint("tempered") == "#f8fbff"


def test_build_preview_carries_colors_and_accent():
    """The preview bundles geometry with what the renderer needs."""
    config = ConfigurationInput(product_type=ProductType.DOOR, frame_color="#aa0000",
                                bar_color="#00aa00", vertical_bars=2)
    preview = build_preview(config)
    assert preview.product_type == ProductType.DOOR
    assert preview.frame_color == "#aa0000"
    assert preview.bar_color == "#00aa00"
    assert preview.accent.kind == "door_handle"
    assert len(preview.geometry.vertical_bars) == 2
    assert preview.glass_tint == "#e6f7ff"
    assert GeometryScaler().calculate(config) == preview


# ============================================================
# Properties
# ============================================================

def test_sizes_stay_in_bounds_across_range():
    """Inside the accepted range every box fits the canvas and glass is at least 10 px."""
    for w in range(30, 401, 37):
        for h in range(30, 801, 53):
            g = compute_geometry(w, h, 6, 3)
            assert isinstance(g.preview_width_px, int)
            assert isinstance(g.preview_height_px, int)
            assert 0 <= g.preview_width_px <= MAX_PREVIEW_WIDTH_PX
            assert 0 <= g.preview_height_px <= MAX_PREVIEW_HEIGHT_PX
            assert g.glass_width_px >= MIN_GLASS_PX
            assert g.glass_height_px >= MIN_GLASS_PX


def test_scale_non_increasing_as_size_grows():
    """Bigger units never get a larger scale."""
    scales = [compute_geometry(w, 150, 6, 3).scale for w in range(30, 401, 10)]
    assert all(a >= b for a, b in zip(scales, scales[1:]))
    scales = [compute_geometry(120, h, 6, 3).scale for h in range(30, 801, 10)]
    assert all(a >= b for a, b in zip(scales, scales[1:]))
    assert min(scales) >= MIN_SCALE


def test_round_half_away_from_zero():
    """Halves round away from zero, unlike Python's round()."""
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.5) == 1
    assert round_half_away(10.4) == 10
    assert round_half_away(20.8) == 21
    assert math.isclose(round_half_away(0.0), 0)
