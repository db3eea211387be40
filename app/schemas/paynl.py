"""
Pydantic models for the PayNL adapter: resolved settings, gateway request
and response bodies, and the results handed back to the checkout pipeline.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import Environment


# ──────────────────────────────────────────────────────────────────────
#  Provider settings
# ──────────────────────────────────────────────────────────────────────


class PaymentServiceProviderSettings(BaseModel):
    """Provider-agnostic settings of one configured payment service provider."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    title: str = ""
    provider_type: str = "paynl"
    currency: str = "EUR"
    return_url: Optional[str] = None
    webhook_url: Optional[str] = None
    fail_url: Optional[str] = None
    log_all_requests: bool = False
    orders_can_be_set_directly_to_finished: bool = False
    skip_payment_when_order_amount_equals_zero: bool = False


class PayNlSettings(PaymentServiceProviderSettings):
    """Provider settings with the PayNL credentials of one environment."""

    username: str = ""
    password: str = ""
    service_id: str = ""
    environment: Environment = Environment.LIVE


class ValidationResult(BaseModel):
    valid: bool
    reason: Optional[str] = None


# ──────────────────────────────────────────────────────────────────────
#  Gateway – POST /v2/transactions
# ──────────────────────────────────────────────────────────────────────


class _GatewayModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Amount(_GatewayModel):
    value: int  # minor units
    currency: str


class Integration(_GatewayModel):
    test_mode: bool


class TransactionStartBody(_GatewayModel):
    """Request body for creating a PayNL transaction."""

    service_id: str
    amount: Amount
    description: str
    return_url: Optional[str] = None
    exchange_url: Optional[str] = None
    integration: Integration


class TransactionCreatedResponse(_GatewayModel):
    payment_url: Optional[str] = None


# ──────────────────────────────────────────────────────────────────────
#  Gateway – GET /v2/transactions/{id}
# ──────────────────────────────────────────────────────────────────────


class TransactionStatus(BaseModel):
    action: Optional[str] = None


class TransactionStatusResponse(BaseModel):
    """The subset of a PayNL transaction the adapter reads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    status: Optional[TransactionStatus] = None
    order_id: Optional[str] = None


# ──────────────────────────────────────────────────────────────────────
#  Results returned to the checkout pipeline
# ──────────────────────────────────────────────────────────────────────


class PaymentRequestResult(BaseModel):
    successful: bool
    action: Literal["redirect"] = "redirect"
    action_data: Optional[str] = None


class StatusUpdateResult(BaseModel):
    successful: bool
    status: str


# ──────────────────────────────────────────────────────────────────────
#  Inbound – POST /api/v1/paynl/{provider_id}/payment
# ──────────────────────────────────────────────────────────────────────


class OrderLine(BaseModel):
    price: Decimal = Field(..., description="Line price including VAT")
    quantity: int = 1


class ConceptOrder(BaseModel):
    main: Dict[str, Any] = Field(default_factory=dict)
    lines: List[OrderLine] = Field(default_factory=list)


class PaymentRequest(BaseModel):
    """Request body for starting a PayNL payment."""

    invoice_number: str
    orders: List[ConceptOrder]
    user_details: Dict[str, Any] = Field(default_factory=dict)


class InvoiceNumberResponse(BaseModel):
    invoice_number: str
