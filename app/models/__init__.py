from app.models.base import Base, TimestampMixin
from app.models.payment_log import PaymentLog
from app.models.payment_service_provider import (
    PaymentServiceProvider,
    PaymentServiceProviderDetail,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "PaymentLog",
    "PaymentServiceProvider",
    "PaymentServiceProviderDetail",
]
