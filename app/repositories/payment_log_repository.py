from sqlalchemy.ext.asyncio import AsyncSession

from app.models.payment_log import PaymentLog


class PaymentLogRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **fields) -> PaymentLog:
        log = PaymentLog(**fields)
        self.session.add(log)
        await self.session.flush()
        return log
