"""Exchange calls hold at most one pooled connection at a time."""

import asyncio

import httpx
import pytest
from sqlalchemy import func, select
from sqlalchemy.pool import AsyncAdaptedQueuePool

from app.core.constants import (
    PAYNL_PASSWORD_TEST_PROPERTY,
    PAYNL_SERVICE_ID_TEST_PROPERTY,
    PAYNL_USERNAME_TEST_PROPERTY,
)
from app.core.crypto import encrypt_secret
from app.core.dependencies import get_payment_logger, get_paynl_service, get_provider_settings
from app.core.unit_of_work import UnitOfWork
from app.models import PaymentLog, PaymentServiceProvider, PaymentServiceProviderDetail

CONCURRENT_CALLS = 5


async def _seed(session_factory, encryption_key):
    async with UnitOfWork(session_factory) as uow:
        uow.session.add(PaymentServiceProvider(id="psp_1", title="PayNL", provider_type="paynl"))
        for key, value in {
            PAYNL_USERNAME_TEST_PROPERTY: "AT-1111-2222",
            PAYNL_PASSWORD_TEST_PROPERTY: "api-token",
            PAYNL_SERVICE_ID_TEST_PROPERTY: "SL-3333-4444",
        }.items():
            uow.session.add(
                PaymentServiceProviderDetail(
                    provider_id="psp_1", key=key, value=encrypt_secret(value, encryption_key)
                )
            )
        await uow.commit()


@pytest.mark.asyncio
async def test_concurrent_exchange_calls_on_single_connection_pool(
    sqlite_database, encryption_key, client_factory, build_form_request
):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0.05)
        return httpx.Response(200, text='{"orderId": "1001", "status": {"action": "PAID"}}')

    async with sqlite_database(
        poolclass=AsyncAdaptedQueuePool, pool_size=1, max_overflow=0, pool_timeout=5
    ) as session_factory:
        await _seed(session_factory, encryption_key)

        async def exchange_call():
            provider_settings = await get_provider_settings("psp_1", session_factory)
            service = get_paynl_service(session_factory, get_payment_logger(session_factory))
            service.client_factory = client_factory(handler)
            paynl_settings = await service.get_provider_settings(provider_settings)
            return await service.process_status_update(
                paynl_settings, build_form_request({"id": "EX-9"})
            )

        results = await asyncio.gather(*(exchange_call() for _ in range(CONCURRENT_CALLS)))

        async with UnitOfWork(session_factory) as uow:
            logged = await uow.session.scalar(select(func.count()).select_from(PaymentLog))

    assert [result.status for result in results] == ["PAID"] * CONCURRENT_CALLS
    assert logged == CONCURRENT_CALLS
