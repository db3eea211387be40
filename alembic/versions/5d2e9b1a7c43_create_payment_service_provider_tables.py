"""create payment service provider and payment log tables

Revision ID: 5d2e9b1a7c43
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "5d2e9b1a7c43"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "payment_service_providers",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("provider_type", sa.String(length=50), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False, server_default="EUR"),
        sa.Column("return_url", sa.Text(), nullable=True),
        sa.Column("webhook_url", sa.Text(), nullable=True),
        sa.Column("fail_url", sa.Text(), nullable=True),
        sa.Column("log_all_requests", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "orders_can_be_set_directly_to_finished",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column(
            "skip_payment_when_order_amount_equals_zero",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_payment_service_providers_provider_type"),
        "payment_service_providers",
        ["provider_type"],
        unique=False,
    )

    op.create_table(
        "payment_service_provider_details",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("provider_id", sa.String(length=50), nullable=False),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["provider_id"], ["payment_service_providers.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("provider_id", "key", name="uq_provider_detail_key"),
    )
    op.create_index(
        op.f("ix_payment_service_provider_details_provider_id"),
        "payment_service_provider_details",
        ["provider_id"],
        unique=False,
    )

    op.create_table(
        "payment_logs",
        sa.Column("id", sa.String(length=50), nullable=False),
        sa.Column("payment_service_provider", sa.String(length=50), nullable=False),
        sa.Column("direction", sa.String(length=10), nullable=False),
        sa.Column("invoice_number", sa.String(length=255), nullable=False),
        sa.Column("status_code", sa.Integer(), nullable=False),
        sa.Column("request_body", sa.Text(), nullable=True),
        sa.Column("response_body", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_payment_logs_payment_service_provider"),
        "payment_logs",
        ["payment_service_provider"],
        unique=False,
    )
    op.create_index(
        op.f("ix_payment_logs_invoice_number"),
        "payment_logs",
        ["invoice_number"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_payment_logs_invoice_number"), table_name="payment_logs")
    op.drop_index(op.f("ix_payment_logs_payment_service_provider"), table_name="payment_logs")
    op.drop_table("payment_logs")
    op.drop_index(
        op.f("ix_payment_service_provider_details_provider_id"),
        table_name="payment_service_provider_details",
    )
    op.drop_table("payment_service_provider_details")
    op.drop_index(
        op.f("ix_payment_service_providers_provider_type"),
        table_name="payment_service_providers",
    )
    op.drop_table("payment_service_providers")
