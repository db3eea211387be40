import logging
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class PaymentActionLogger(Protocol):
    async def log_incoming_action(
        self,
        provider: str,
        invoice_number: str,
        status_code: int,
        response_body: Optional[str] = None,
        request_body: Optional[str] = None,
    ) -> None: ...

    async def log_outgoing_action(
        self,
        provider: str,
        invoice_number: str,
        status_code: int,
        request_body: Optional[str] = None,
        response_body: Optional[str] = None,
    ) -> None: ...


class PaymentLogService:
    """Writes gateway exchanges to the payment_logs audit table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _write(
        self,
        direction: str,
        provider: str,
        invoice_number: str,
        status_code: int,
        request_body: Optional[str],
        response_body: Optional[str],
    ) -> None:
        async with UnitOfWork(self.session_factory) as uow:
            log = await uow.payment_logs.create(
                payment_service_provider=provider,
                direction=direction,
                invoice_number=invoice_number or "",
                status_code=status_code,
                request_body=request_body,
                response_body=response_body,
            )
            await uow.commit()
        logger.info(
            f"Logged {direction} payment action {log.id}: "
            f"provider={provider}, invoice={invoice_number}, status={status_code}"
        )

    async def log_incoming_action(
        self,
        provider: str,
        invoice_number: str,
        status_code: int,
        response_body: Optional[str] = None,
        request_body: Optional[str] = None,
    ) -> None:
        await self._write("incoming", provider, invoice_number, status_code, request_body, response_body)

    async def log_outgoing_action(
        self,
        provider: str,
        invoice_number: str,
        status_code: int,
        request_body: Optional[str] = None,
        response_body: Optional[str] = None,
    ) -> None:
        await self._write("outgoing", provider, invoice_number, status_code, request_body, response_body)
