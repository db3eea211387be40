"""
PayNL Invoice Number Route.

Endpoint:
  GET /api/v1/paynl/{provider_id}/invoice-number — invoice number carried by
  the buyer's return from PayNL (``orderId`` field)
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.dependencies import get_paynl_service, get_provider_settings
from app.schemas.paynl import InvoiceNumberResponse, PaymentServiceProviderSettings
from app.services.paynl_service import PayNlService

router = APIRouter()


@router.get(
    "/{provider_id}/invoice-number",
    response_model=InvoiceNumberResponse,
    summary="Read the invoice number from a PayNL return",
    tags=["paynl"],
)
async def get_invoice_number(
    request: Request,
    provider_settings: PaymentServiceProviderSettings = Depends(get_provider_settings),
    service: PayNlService = Depends(get_paynl_service),
):
    invoice_number = await service.get_invoice_number_from_request(request)
    if not invoice_number:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing orderId",
        )
    return InvoiceNumberResponse(invoice_number=invoice_number)
