"""
FastAPI dependencies.

Each database read or audit write runs in its own short-lived UnitOfWork, so a
request never holds a pooled connection while it waits on the gateway.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.database import AsyncSessionLocal
from app.core.exceptions import ProviderNotFoundError
from app.core.unit_of_work import UnitOfWork
from app.schemas.paynl import PaymentServiceProviderSettings
from app.services.payment_log_service import PaymentActionLogger, PaymentLogService
from app.services.paynl_service import PayNlService
from app.services.provider_settings_service import ProviderSettingsService, StoredPayNlDetails


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return AsyncSessionLocal


def get_payment_logger(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> PaymentActionLogger:
    return PaymentLogService(session_factory)


async def get_provider_settings(
    provider_id: str,
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> PaymentServiceProviderSettings:
    async with UnitOfWork(session_factory) as uow:
        provider = await uow.provider_settings.get_provider(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        return PaymentServiceProviderSettings.model_validate(provider)


def get_paynl_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    payment_logger: PaymentActionLogger = Depends(get_payment_logger),
) -> PayNlService:
    return PayNlService(
        payment_logger=payment_logger,
        settings_resolver=ProviderSettingsService(StoredPayNlDetails(session_factory)),
        environment=settings.ENVIRONMENT,
    )
