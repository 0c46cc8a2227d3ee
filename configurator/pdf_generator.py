"""
Printable estimate — one-page PDF of a configuration.

Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header (shop name, date)
2. Schematic preview (frame, glass, bars, door handle / balcony ledge)
3. Configuration summary
4. Price breakdown + total
"""

from datetime import datetime

from fpdf import FPDF

from .calculators.geometry_scaler import Preview
from .calculators.price_estimator import PriceBreakdown
from .formatting import format_size, format_sum
from .models import (
    ConfigurationInput, GLASS_TYPE_LABELS, PRODUCT_TYPE_LABELS, PROFILE_MATERIAL_LABELS,
)

# Schematic box on the page, mm
SCHEMATIC_MAX_W_MM = 80.0
SCHEMATIC_MAX_H_MM = 100.0

DEFAULT_RGB = (51, 51, 51)


def _rgb(color, fallback=DEFAULT_RGB) -> tuple:
    """'#3a3a3a' or '#333' -> (r, g, b). Anything else gives the fallback."""
    if not isinstance(color, str):
        return fallback
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        return fallback
    try:
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return fallback


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u00a0", " ")  # nbsp from money grouping
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class EstimatePDF(FPDF):
    """Custom PDF class for configurator estimates."""

    def __init__(self, shop_name=""):
        super().__init__()
        self.shop_name = shop_name
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, "Taxminiy hisob. Yakuniy narx o'lchovdan keyin belgilanadi.", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def price_row(self, label, amount, bold=False):
        self.set_font("Helvetica", "B" if bold else "", 10)
        self.cell(130, 7, _safe(label), border="T" if bold else "")
        self.cell(0, 7, _safe(amount), align="R", border="T" if bold else "",
                  new_x="LMARGIN", new_y="NEXT")

    def draw_schematic(self, preview: Preview, x: float, y: float) -> float:
        """
        Draw the preview scaled into the schematic box at (x, y).
        Returns the drawn height in mm.
        """
        g = preview.geometry
        mm_per_px = min(SCHEMATIC_MAX_W_MM / g.preview_width_px,
                        SCHEMATIC_MAX_H_MM / g.preview_height_px)

        def mm(px):
            return px * mm_per_px

        # Frame box
        self.set_fill_color(*_rgb(preview.frame_color))
        self.rect(x, y, mm(g.preview_width_px), mm(g.preview_height_px), style="F")

        # Glass box inside the frame
        gx, gy = x + mm(g.frame_px), y + mm(g.frame_px)
        gw, gh = mm(g.glass_width_px), mm(g.glass_height_px)
        self.set_fill_color(*_rgb(preview.glass_tint, fallback=(248, 251, 255)))
        self.rect(gx, gy, gw, gh, style="F")

        # Bars, clipped to the glass box
        self.set_fill_color(*_rgb(preview.bar_color))
        for bar in g.vertical_bars:
            left = max(gx, gx + mm(bar.offset_px))
            width = min(mm(g.bar_px), gx + gw - left)
            if width > 0:
                self.rect(left, gy, width, gh, style="F")
        for bar in g.horizontal_bars:
            top = max(gy, gy + mm(bar.offset_px))
            height = min(mm(g.bar_px), gy + gh - top)
            if height > 0:
                self.rect(gx, top, gw, height, style="F")

        accent = preview.accent
        if accent is not None:
            self.set_fill_color(*_rgb(preview.frame_color))
            if accent.kind == "door_handle":
                hw = max(mm(g.bar_px), 1.0)
                hx = gx + gw - mm(accent.inset_right_px) - hw
                self.rect(hx, gy + (gh - mm(accent.height_px)) / 2, hw, mm(accent.height_px), style="F")
            elif accent.kind == "balcony_ledge":
                self.rect(gx, gy + gh - mm(accent.height_px), gw, mm(accent.height_px), style="F")

        return mm(g.preview_height_px)


def generate_estimate_pdf(
    config: ConfigurationInput,
    preview: Preview,
    breakdown: PriceBreakdown,
    shop_name: str = "",
    shop_info: str = "",
) -> bytes:
    """
    Generate a one-page estimate document.

    Returns:
        PDF bytes
    """
    pdf = EstimatePDF(shop_name=shop_name)
    pdf.add_page()

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, _safe(shop_name or "Hisob"), new_x="LMARGIN", new_y="NEXT")
    if shop_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(shop_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 6, f"Sana: {datetime.now().strftime('%d.%m.%Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Schematic ──
    pdf.section_header("KO'RINISH")
    top = pdf.get_y()
    drawn_h = pdf.draw_schematic(preview, pdf.l_margin, top)

    # ── SECTION 3: Configuration, beside the schematic ──
    g = preview.geometry
    rows = [
        ("Mahsulot turi", PRODUCT_TYPE_LABELS.get(preview.product_type, str(preview.product_type))),
        ("O'lcham", format_size(config.width_cm, config.height_cm)),
        ("Ramka", f"{config.frame_thickness_cm:g} cm"),
        ("Tayoq", f"{config.bar_thickness_cm:g} cm"),
        ("Vertikal tayoq", str(config.vertical_bars)),
        ("Gorizontal tayoq", str(config.horizontal_bars)),
        ("Profil", PROFILE_MATERIAL_LABELS.get(breakdown.profile_material, "")),
        ("Shisha", GLASS_TYPE_LABELS.get(breakdown.glass_type, "")),
        ("Preview", f"{g.preview_width_px}x{g.preview_height_px} px"),
        ("Skala", g.scale_label),
    ]
    col_x = pdf.l_margin + SCHEMATIC_MAX_W_MM + 10
    pdf.set_xy(col_x, top)
    for label, value in rows:
        pdf.set_x(col_x)
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(35, 6, _safe(label))
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(0, 6, _safe(value), new_x="LMARGIN", new_y="NEXT")

    pdf.set_y(max(pdf.get_y(), top + drawn_h) + 8)

    # ── SECTION 4: Price ──
    pdf.section_header("HISOB")
    for line in breakdown.line_items():
        pdf.price_row(line.label, format_sum(line.amount, breakdown.currency))
    if breakdown.type_multiplier != 1.0:
        pdf.set_font("Helvetica", "I", 8)
        pdf.set_text_color(100, 100, 100)
        components = format_sum(breakdown.components_cost, breakdown.currency)
        pdf.cell(0, 5, _safe(f"Mahsulot koeffitsienti: x{breakdown.type_multiplier:g} "
                             f"({components} ga, o'rnatishdan tashqari)"),
                 new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.price_row("Jami", format_sum(breakdown.total, breakdown.currency), bold=True)

    return pdf.output()
