from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, generate_prefixed_id


def generate_payment_log_id() -> str:
    return generate_prefixed_id("plog")


class PaymentLog(TimestampMixin, Base):
    """Audit trail of gateway exchanges, keyed by provider and invoice number."""

    __tablename__ = "payment_logs"

    id: Mapped[str] = mapped_column(
        String(50), primary_key=True, default=generate_payment_log_id
    )
    payment_service_provider: Mapped[str] = mapped_column(String(50), index=True)
    direction: Mapped[str] = mapped_column(String(10), default="incoming")
    invoice_number: Mapped[str] = mapped_column(String(255), index=True, default="")
    status_code: Mapped[int] = mapped_column(Integer)
    request_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    response_body: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PaymentLog {self.id} {self.payment_service_provider}:{self.invoice_number}>"
