from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import PAYNL_SETTING_KEYS
from app.models.payment_service_provider import (
    PaymentServiceProvider,
    PaymentServiceProviderDetail,
)


class ProviderSettingsRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_provider(self, provider_id: str) -> PaymentServiceProvider | None:
        result = await self.session.execute(
            select(PaymentServiceProvider).where(PaymentServiceProvider.id == provider_id)
        )
        return result.scalar_one_or_none()

    async def get_paynl_details(
        self,
        provider_id: str,
        provider_type: str,
    ) -> dict[str, str | None] | None:
        """
        Raw (still encrypted) PayNL credential values of one provider.

        Returns None when the provider record does not exist; keys without a
        stored row map to None.
        """
        provider = await self.session.execute(
            select(PaymentServiceProvider.id).where(
                PaymentServiceProvider.id == provider_id,
                PaymentServiceProvider.provider_type == provider_type,
            )
        )
        if provider.scalar_one_or_none() is None:
            return None

        rows = await self.session.execute(
            select(PaymentServiceProviderDetail.key, PaymentServiceProviderDetail.value).where(
                PaymentServiceProviderDetail.provider_id == provider_id,
                PaymentServiceProviderDetail.key.in_(PAYNL_SETTING_KEYS),
            )
        )
        details: dict[str, str | None] = dict.fromkeys(PAYNL_SETTING_KEYS)
        for key, value in rows.all():
            details[key] = value
        return details
