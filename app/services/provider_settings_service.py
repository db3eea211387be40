"""
Resolves PayNL credentials from configuration storage.

Development and test select the ``...test`` settings, every other environment
the ``...live`` settings. Values are stored encrypted and decrypted here.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import Environment, is_test_environment, settings, to_environment
from app.core.constants import (
    PAYNL_PASSWORD_LIVE_PROPERTY,
    PAYNL_PASSWORD_TEST_PROPERTY,
    PAYNL_SERVICE_ID_LIVE_PROPERTY,
    PAYNL_SERVICE_ID_TEST_PROPERTY,
    PAYNL_USERNAME_LIVE_PROPERTY,
    PAYNL_USERNAME_TEST_PROPERTY,
)
from app.core.crypto import decrypt_secret
from app.core.unit_of_work import UnitOfWork
from app.schemas.paynl import PaymentServiceProviderSettings, PayNlSettings

logger = logging.getLogger(__name__)


class PayNlDetailsSource(Protocol):
    async def get_paynl_details(
        self, provider_id: str, provider_type: str
    ) -> Optional[dict[str, Optional[str]]]: ...


def select_credential_keys(environment: Environment | str) -> tuple[str, str, str]:
    """(username, password, service id) setting keys for the environment."""
    if is_test_environment(environment):
        return (
            PAYNL_USERNAME_TEST_PROPERTY,
            PAYNL_PASSWORD_TEST_PROPERTY,
            PAYNL_SERVICE_ID_TEST_PROPERTY,
        )
    return (
        PAYNL_USERNAME_LIVE_PROPERTY,
        PAYNL_PASSWORD_LIVE_PROPERTY,
        PAYNL_SERVICE_ID_LIVE_PROPERTY,
    )


class StoredPayNlDetails:
    """Reads the stored PayNL details in a session of its own."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_paynl_details(
        self, provider_id: str, provider_type: str
    ) -> Optional[dict[str, Optional[str]]]:
        async with UnitOfWork(self.session_factory) as uow:
            return await uow.provider_settings.get_paynl_details(provider_id, provider_type)


class ProviderSettingsService:
    def __init__(
        self,
        source: PayNlDetailsSource,
        encryption_key: Optional[str] = None,
    ) -> None:
        self.source = source
        self.encryption_key = encryption_key if encryption_key is not None else settings.SECRET_ENCRYPTION_KEY

    async def resolve(
        self,
        provider_settings: PaymentServiceProviderSettings,
        environment: Environment | str,
    ) -> PayNlSettings:
        environment = to_environment(environment)
        base = provider_settings.model_dump()
        base.update(environment=environment, username="", password="", service_id="")

        details = await self.source.get_paynl_details(
            provider_settings.id, provider_settings.provider_type
        )
        if details is None:
            logger.warning(f"[paynl] no configuration record for provider {provider_settings.id}")
            return PayNlSettings(**base)

        username_key, password_key, service_id_key = select_credential_keys(environment)
        base.update(
            username=decrypt_secret(details.get(username_key), self.encryption_key, username_key),
            password=decrypt_secret(details.get(password_key), self.encryption_key, password_key),
            service_id=decrypt_secret(details.get(service_id_key), self.encryption_key, service_id_key),
        )
        return PayNlSettings(**base)
