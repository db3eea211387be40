"""
PayNL Payment Service.

Connects the checkout pipeline to the PayNL REST API: starts transactions,
interprets transaction status updates and resolves the provider credentials
for the active environment.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Awaitable, Callable, Optional, Sequence

from fastapi import Request
from pydantic import ValidationError

from app.core.config import Environment, is_test_environment, settings, to_environment
from app.core.constants import (
    WEBHOOK_INVOICE_NUMBER_PROPERTY,
    WEBHOOK_TRANSACTION_ID_PROPERTY,
    PaymentServiceProviders,
)
from app.core.exceptions import GatewayTransportError, SecretDecryptionError
from app.core.money import to_minor_units
from app.schemas.paynl import (
    Amount,
    ConceptOrder,
    Integration,
    PaymentRequestResult,
    PaymentServiceProviderSettings,
    PayNlSettings,
    StatusUpdateResult,
    TransactionCreatedResponse,
    TransactionStartBody,
    TransactionStatusResponse,
    ValidationResult,
)
from app.services.payment_log_service import PaymentActionLogger
from app.services.paynl_client import GatewayResponse, PayNlClient
from app.services.provider_settings_service import ProviderSettingsService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════
# Constants
# ══════════════════════════════════════════════════════════════════════

AT_CODE_PREFIX = "AT-"
NO_CREDENTIALS_REASON = "no username or password"
AT_CODE_WITHOUT_SERVICE_ID_REASON = "AT-code without serviceId"

HTTP_OK = 200
HTTP_CREATED = 201

PAID_STATUS = "paid"
ERROR_STATUS = "error"
NO_REQUEST_CONTEXT_STATUS = "Error retrieving status: No HttpContext available."

PriceCalculator = Callable[[Sequence[ConceptOrder]], Awaitable[Decimal]]
ClientFactory = Callable[[str, str], PayNlClient]


# ══════════════════════════════════════════════════════════════════════
# Pure helper functions
# ══════════════════════════════════════════════════════════════════════


async def sum_order_totals(orders: Sequence[ConceptOrder]) -> Decimal:
    """Default price calculator: sum of price * quantity over all lines."""
    total = Decimal("0")
    for order in orders:
        for line in order.lines:
            total += line.price * line.quantity
    return total


def validate_paynl_settings(paynl_settings: PayNlSettings) -> ValidationResult:
    if not paynl_settings.username or not paynl_settings.password:
        return ValidationResult(valid=False, reason=NO_CREDENTIALS_REASON)

    if paynl_settings.username.startswith(AT_CODE_PREFIX) and not paynl_settings.service_id:
        return ValidationResult(valid=False, reason=AT_CODE_WITHOUT_SERVICE_ID_REASON)

    return ValidationResult(valid=True)


def build_transaction_start_body(
    total_price: Decimal,
    paynl_settings: PayNlSettings,
    invoice_number: str,
    environment: Optional[Environment] = None,
) -> TransactionStartBody:
    environment = environment or paynl_settings.environment
    return TransactionStartBody(
        service_id=paynl_settings.service_id,
        amount=Amount(
            value=to_minor_units(total_price),
            currency=paynl_settings.currency,
        ),
        description=f"Order #{invoice_number}",
        return_url=paynl_settings.return_url,
        exchange_url=paynl_settings.webhook_url,
        integration=Integration(test_mode=is_test_environment(environment)),
    )


def interpret_transaction_created(
    response: GatewayResponse,
    fail_url: Optional[str],
) -> PaymentRequestResult:
    """201 Created redirects to the PayNL payment page, anything else to the fail URL."""
    if response.status_code != HTTP_CREATED:
        return PaymentRequestResult(successful=False, action_data=fail_url)

    body = response.json()
    try:
        created = TransactionCreatedResponse.model_validate(body if isinstance(body, dict) else {})
    except ValidationError:
        created = TransactionCreatedResponse()

    return PaymentRequestResult(successful=True, action_data=created.payment_url)


def parse_transaction_status(body: Any) -> Optional[TransactionStatusResponse]:
    if not isinstance(body, dict):
        return None
    try:
        return TransactionStatusResponse.model_validate(body)
    except ValidationError:
        return None


def interpret_status_response(status_code: int, body: Any) -> StatusUpdateResult:
    if status_code != HTTP_OK:
        return StatusUpdateResult(successful=False, status=ERROR_STATUS)

    parsed = parse_transaction_status(body)
    action = parsed.status.action if parsed and parsed.status else None
    if not action or not action.strip():
        return StatusUpdateResult(successful=False, status=ERROR_STATUS)

    return StatusUpdateResult(
        successful=action.lower() == PAID_STATUS,
        status=action,
    )


def invoice_number_of(body: Any) -> Optional[str]:
    parsed = parse_transaction_status(body)
    return parsed.order_id if parsed else None


async def _get_request_value(request: Request, key: str, *, query: bool = True) -> str:
    """Value of a query string or form field, '' when absent."""
    if query:
        value = request.query_params.get(key)
        if value:
            return value
    form = await request.form()
    value = form.get(key)
    return value if isinstance(value, str) else ""


# ══════════════════════════════════════════════════════════════════════
# PayNlService class
# ══════════════════════════════════════════════════════════════════════


class PayNlService:
    """
    PayNL implementation of the payment service provider contract.

    Every call is independent: credentials are resolved per call and every
    gateway call uses a fresh HTTP client.
    """

    provider = PaymentServiceProviders.PAYNL

    def __init__(
        self,
        payment_logger: PaymentActionLogger,
        settings_resolver: Optional[ProviderSettingsService] = None,
        environment: Optional[Environment | str] = None,
        price_calculator: PriceCalculator = sum_order_totals,
        client_factory: ClientFactory = PayNlClient,
    ) -> None:
        self.payment_logger = payment_logger
        self.settings_resolver = settings_resolver
        self.environment = to_environment(environment or settings.ENVIRONMENT)
        self.price_calculator = price_calculator
        self.client_factory = client_factory

    # ──────────────────────────────────────────────────────────────
    # Settings
    # ──────────────────────────────────────────────────────────────

    async def get_provider_settings(
        self,
        provider_settings: PaymentServiceProviderSettings,
    ) -> PayNlSettings:
        if self.settings_resolver is None:
            raise RuntimeError("PayNlService was created without a settings resolver")
        return await self.settings_resolver.resolve(provider_settings, self.environment)

    # ──────────────────────────────────────────────────────────────
    # Payment request
    # ──────────────────────────────────────────────────────────────

    async def start_payment(
        self,
        orders: Sequence[ConceptOrder],
        user_details: dict[str, Any],
        provider_settings: PaymentServiceProviderSettings,
        invoice_number: str,
    ) -> PaymentRequestResult:
        """Resolve credentials and start the transaction; bad credentials redirect to the fail URL."""
        try:
            paynl_settings = await self.get_provider_settings(provider_settings)
        except SecretDecryptionError as e:
            logger.error(
                "Validation in 'handle_payment_request' of 'PayNlService' failed because: "
                f"PayNL misconfigured: {e.message}"
            )
            return PaymentRequestResult(successful=False, action_data=provider_settings.fail_url)

        return await self.handle_payment_request(
            orders, user_details, paynl_settings, invoice_number
        )

    async def handle_payment_request(
        self,
        orders: Sequence[ConceptOrder],
        user_details: dict[str, Any],
        paynl_settings: PayNlSettings,
        invoice_number: str,
    ) -> PaymentRequestResult:
        validation = validate_paynl_settings(paynl_settings)
        if not validation.valid:
            logger.error(
                "Validation in 'handle_payment_request' of 'PayNlService' failed because: "
                f"PayNL misconfigured: {validation.reason}"
            )
            return PaymentRequestResult(successful=False, action_data=paynl_settings.fail_url)

        total_price = await self.price_calculator(orders)
        body = build_transaction_start_body(
            total_price, paynl_settings, invoice_number, self.environment
        )

        logger.info(
            f"[paynl] starting transaction — invoice={invoice_number}, "
            f"amount={body.amount.value} {body.amount.currency}, "
            f"test_mode={body.integration.test_mode}"
        )

        client = self.client_factory(paynl_settings.username, paynl_settings.password)
        try:
            response = await client.create_transaction(body)
        except GatewayTransportError as e:
            logger.error(f"[paynl] transaction start failed for invoice {invoice_number}: {e.message}")
            return PaymentRequestResult(successful=False, action_data=paynl_settings.fail_url)

        if paynl_settings.log_all_requests:
            await self.payment_logger.log_outgoing_action(
                self.provider.value,
                invoice_number,
                response.status_code,
                request_body=body.model_dump_json(by_alias=True),
                response_body=response.text,
            )

        result = interpret_transaction_created(response, paynl_settings.fail_url)
        if not result.successful:
            logger.warning(
                f"[paynl] transaction start rejected for invoice {invoice_number} "
                f"— HTTP {response.status_code}"
            )
        return result

    # ──────────────────────────────────────────────────────────────
    # Status update (webhook / return)
    # ──────────────────────────────────────────────────────────────

    async def process_status_update(
        self,
        paynl_settings: PayNlSettings,
        request: Optional[Request],
    ) -> StatusUpdateResult:
        # Credentials were validated when the transaction was started.
        # Outcomes that never reached the gateway are audited with status code 0.
        if request is None:
            logger.warning("[paynl] status update without request context")
            await self.payment_logger.log_incoming_action(
                self.provider.value, "", 0, response_body=NO_REQUEST_CONTEXT_STATUS
            )
            return StatusUpdateResult(successful=False, status=NO_REQUEST_CONTEXT_STATUS)

        transaction_id = await _get_request_value(
            request, WEBHOOK_TRANSACTION_ID_PROPERTY, query=False
        )
        if not transaction_id:
            logger.warning("[paynl] status update without transaction id")
            await self.payment_logger.log_incoming_action(self.provider.value, "", 0)
            return StatusUpdateResult(successful=False, status=ERROR_STATUS)

        client = self.client_factory(paynl_settings.username, paynl_settings.password)
        try:
            response = await client.get_transaction(transaction_id)
        except GatewayTransportError as e:
            await self.payment_logger.log_incoming_action(
                self.provider.value, "", 0, response_body=e.message
            )
            return StatusUpdateResult(successful=False, status=ERROR_STATUS)

        body = response.json()
        result = interpret_status_response(response.status_code, body)
        invoice_number = invoice_number_of(body) or ""

        if response.status_code == HTTP_OK and result.status == ERROR_STATUS:
            logger.warning(
                f"[paynl] transaction {transaction_id} returned no status action: "
                f"{response.text[:500]}"
            )

        await self.payment_logger.log_incoming_action(
            self.provider.value,
            invoice_number,
            response.status_code,
            response_body=response.text,
        )

        logger.info(
            f"[paynl] status update — transaction={transaction_id}, invoice={invoice_number}, "
            f"status={result.status}, successful={result.successful}"
        )
        return result

    async def get_invoice_number_from_request(self, request: Optional[Request]) -> str:
        if request is None:
            return ""
        return await _get_request_value(request, WEBHOOK_INVOICE_NUMBER_PROPERTY)
