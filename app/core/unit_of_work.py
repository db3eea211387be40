"""Transaction boundary over one async session and its repositories."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.payment_log_repository import PaymentLogRepository
from app.repositories.provider_settings_repository import ProviderSettingsRepository


class UnitOfWork:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        self.session = self.session_factory()
        self.provider_settings = ProviderSettingsRepository(self.session)
        self.payment_logs = PaymentLogRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            await self.rollback()
        await self.session.close()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
