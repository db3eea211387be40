"""
PayNL Exchange (webhook) Route.

Endpoint:
  POST /api/v1/paynl/{provider_id}/webhook — PayNL exchange call

PayNL posts the transaction id as form field ``id``; the current status is
fetched from PayNL rather than trusted from the call itself.
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.core.dependencies import get_paynl_service, get_provider_settings
from app.schemas.paynl import PaymentServiceProviderSettings, StatusUpdateResult
from app.services.paynl_service import PayNlService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{provider_id}/webhook",
    response_model=StatusUpdateResult,
    summary="Receive PayNL exchange calls",
    tags=["paynl", "webhooks"],
)
async def handle_paynl_webhook(
    request: Request,
    provider_settings: PaymentServiceProviderSettings = Depends(get_provider_settings),
    service: PayNlService = Depends(get_paynl_service),
):
    paynl_settings = await service.get_provider_settings(provider_settings)

    result = await service.process_status_update(paynl_settings, request)

    logger.info(
        f"[paynl] exchange processed — provider={provider_settings.id}, status={result.status}"
    )
    return result
