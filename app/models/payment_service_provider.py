from sqlalchemy import Boolean, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, generate_prefixed_id


def generate_psp_id() -> str:
    return generate_prefixed_id("psp")


def generate_psp_detail_id() -> str:
    return generate_prefixed_id("pspd")


class PaymentServiceProvider(TimestampMixin, Base):
    __tablename__ = "payment_service_providers"

    id: Mapped[str] = mapped_column(
        String(50), primary_key=True, default=generate_psp_id
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    provider_type: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="EUR", nullable=False)
    return_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    webhook_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    fail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    log_all_requests: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    orders_can_be_set_directly_to_finished: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    skip_payment_when_order_amount_equals_zero: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    details: Mapped[list["PaymentServiceProviderDetail"]] = relationship(
        back_populates="provider", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<PaymentServiceProvider {self.id} {self.provider_type}>"


class PaymentServiceProviderDetail(TimestampMixin, Base):
    """One key/value setting of a provider; values may be AES-encrypted."""

    __tablename__ = "payment_service_provider_details"

    __table_args__ = (
        UniqueConstraint("provider_id", "key", name="uq_provider_detail_key"),
    )

    id: Mapped[str] = mapped_column(
        String(50), primary_key=True, default=generate_psp_detail_id
    )
    provider_id: Mapped[str] = mapped_column(
        ForeignKey("payment_service_providers.id", ondelete="CASCADE"),
        index=True,
    )
    key: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    provider: Mapped[PaymentServiceProvider] = relationship(back_populates="details")
