"""
PDF download endpoint.

POST /api/configurator/estimate/pdf — printable estimate for a configuration.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from .. import schemas
from ..calculators.geometry_scaler import build_preview
from ..calculators.price_estimator import compute_price
from ..config import settings
from ..pdf_generator import generate_estimate_pdf

router = APIRouter(prefix="/configurator", tags=["pdf"])


@router.post("/estimate/pdf")
def download_estimate_pdf(request: schemas.ConfigurationRequest):
    """
    Generate and download a one-page estimate.

    Returns: application/pdf
    """
    config = request.to_config()
    preview = build_preview(
        config,
        max_width_px=settings.CANVAS_MAX_WIDTH_PX,
        max_height_px=settings.CANVAS_MAX_HEIGHT_PX,
    )
    breakdown = compute_price(config)

    shop_info = " | ".join(p for p in [settings.SHOP_PHONE, settings.SHOP_EMAIL] if p)

    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_estimate_pdf(config, preview, breakdown, settings.SHOP_NAME, shop_info))

    filename = f"Hisob-{config.product_type.value}-{config.width_cm:g}x{config.height_cm:g}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
