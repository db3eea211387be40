"""
PayNL Payment Route.

Endpoint:
  POST /api/v1/paynl/{provider_id}/payment — Start a PayNL transaction

Returns a redirect instruction: the PayNL payment page when the transaction
was created, the provider's fail URL otherwise.
"""

import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_paynl_service, get_provider_settings
from app.schemas.paynl import (
    PaymentRequest,
    PaymentRequestResult,
    PaymentServiceProviderSettings,
)
from app.services.paynl_service import PayNlService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{provider_id}/payment",
    response_model=PaymentRequestResult,
    summary="Start a PayNL payment",
    description=(
        "Create a PayNL transaction for the given orders and return the URL "
        "the buyer must be redirected to."
    ),
    tags=["paynl", "payments"],
)
async def start_payment(
    body: PaymentRequest,
    provider_settings: PaymentServiceProviderSettings = Depends(get_provider_settings),
    service: PayNlService = Depends(get_paynl_service),
):
    return await service.start_payment(
        orders=body.orders,
        user_details=body.user_details,
        provider_settings=provider_settings,
        invoice_number=body.invoice_number,
    )
