"""
Configurator API — recompute on every form change.

GET  /api/configurator/options      — enum choices, labels, form defaults
GET  /api/configurator/price-table  — base prices and type multipliers
POST /api/configurator/geometry     — preview geometry for a configuration
POST /api/configurator/price        — itemized price for a configuration
POST /api/configurator/estimate     — both, from one snapshot

Every POST takes the full configuration and derives everything from
scratch. Nothing is kept between requests.
"""

from fastapi import APIRouter

from .. import schemas
from ..calculators.geometry_scaler import build_preview
from ..calculators.price_estimator import DEFAULT_PRICE_TABLE, TYPE_MULTIPLIERS, compute_price
from ..config import settings
from ..models import (
    ConfigurationInput, GLASS_TYPE_LABELS, PRODUCT_TYPE_LABELS, PROFILE_MATERIAL_LABELS,
)

router = APIRouter(prefix="/configurator", tags=["configurator"])


def _preview(config: ConfigurationInput):
    return build_preview(
        config,
        max_width_px=settings.CANVAS_MAX_WIDTH_PX,
        max_height_px=settings.CANVAS_MAX_HEIGHT_PX,
    )


def _options(labels: dict) -> list:
    return [schemas.OptionOut(value=member.value, label=label) for member, label in labels.items()]


@router.get("/options", response_model=schemas.OptionsResponse)
def get_options():
    return schemas.OptionsResponse(
        product_types=_options(PRODUCT_TYPE_LABELS),
        profile_materials=_options(PROFILE_MATERIAL_LABELS),
        glass_types=_options(GLASS_TYPE_LABELS),
        defaults=schemas.ConfigurationOut.model_validate(ConfigurationInput(), from_attributes=True),
        canvas_width_px=settings.CANVAS_MAX_WIDTH_PX,
        canvas_height_px=settings.CANVAS_MAX_HEIGHT_PX,
    )


@router.get("/price-table", response_model=schemas.PriceTableResponse)
def get_price_table():
    return schemas.PriceTableResponse(
        **DEFAULT_PRICE_TABLE.to_dict(),
        type_multipliers={k.value: v for k, v in TYPE_MULTIPLIERS.items()},
    )


@router.post("/geometry", response_model=schemas.PreviewResponse)
def calculate_geometry(request: schemas.ConfigurationRequest):
    return schemas.PreviewResponse.from_preview(_preview(request.to_config()))


@router.post("/price", response_model=schemas.PriceResponse)
def calculate_price(request: schemas.ConfigurationRequest):
    return schemas.PriceResponse.from_breakdown(compute_price(request.to_config()))


@router.post("/estimate", response_model=schemas.EstimateResponse)
def calculate_estimate(request: schemas.ConfigurationRequest):
    """Preview and price from the same configuration snapshot."""
    config = request.to_config()
    return schemas.EstimateResponse(
        configuration=schemas.ConfigurationOut.model_validate(config, from_attributes=True),
        preview=schemas.PreviewResponse.from_preview(_preview(config)),
        price=schemas.PriceResponse.from_breakdown(compute_price(config)),
    )
