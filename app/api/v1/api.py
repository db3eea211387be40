from fastapi import APIRouter

from app.api.v1.endpoints.paynl.router import paynl_router

api_router = APIRouter()

# PayNL payment gateway routes, prefix /paynl
# Full paths: /api/v1/paynl/{provider_id}/payment, etc.
api_router.include_router(
    paynl_router,
    prefix="/paynl",
    tags=["paynl"],
)
