"""
PayNL Router Aggregator.

Combines all PayNL sub-routers. When registered in the main app under
/api/v1 with prefix /paynl, the full paths become:

  POST /api/v1/paynl/{provider_id}/payment         — Start a transaction
  POST /api/v1/paynl/{provider_id}/webhook         — PayNL exchange call
  GET  /api/v1/paynl/{provider_id}/invoice-number  — Invoice number of a return
"""

from fastapi import APIRouter

from app.api.v1.endpoints.paynl.invoice import router as invoice_router
from app.api.v1.endpoints.paynl.payment import router as payment_router
from app.api.v1.endpoints.paynl.webhook import router as webhook_router

paynl_router = APIRouter()

paynl_router.include_router(payment_router)
paynl_router.include_router(webhook_router)
paynl_router.include_router(invoice_router)
