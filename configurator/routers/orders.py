"""
Order endpoint.

POST /api/orders — price the configuration and hand it to the OrderSubmission.

The submission backend is a dependency; the default one is the prototype
that declines every order with a notice.
"""

from fastapi import APIRouter, Depends

from .. import schemas
from ..calculators.price_estimator import compute_price
from ..orders import OrderSubmission, get_order_submission

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=schemas.OrderResponse)
def place_order(
    request: schemas.ConfigurationRequest,
    submission: OrderSubmission = Depends(get_order_submission),
):
    config = request.to_config()
    receipt = submission.submit(config, compute_price(config))
    return schemas.OrderResponse.from_receipt(receipt)
