import pytest

from app.models.payment_log import PaymentLog
from app.services.payment_log_service import PaymentLogService


class _FakeSession:
    def __init__(self, store):
        self.store = store
        self.pending = []
        self.closed = False

    def add(self, obj):
        self.pending.append(obj)

    async def flush(self):
        pass

    async def commit(self):
        self.store.extend(self.pending)
        self.pending = []

    async def rollback(self):
        self.pending = []

    async def close(self):
        self.closed = True


@pytest.fixture
def stored_logs():
    return []


@pytest.fixture
def service(stored_logs):
    return PaymentLogService(lambda: _FakeSession(stored_logs))


@pytest.mark.asyncio
async def test_log_incoming_action_writes_audit_row(service, stored_logs):
    await service.log_incoming_action("paynl", "1001", 200, response_body='{"orderId": "1001"}')

    assert len(stored_logs) == 1
    log = stored_logs[0]
    assert isinstance(log, PaymentLog)
    assert log.payment_service_provider == "paynl"
    assert log.direction == "incoming"
    assert log.invoice_number == "1001"
    assert log.status_code == 200
    assert log.response_body == '{"orderId": "1001"}'


@pytest.mark.asyncio
async def test_log_outgoing_action_keeps_request_body(service, stored_logs):
    await service.log_outgoing_action(
        "paynl", "1001", 201, request_body='{"description": "Order #1001"}', response_body="{}"
    )

    log = stored_logs[0]
    assert log.direction == "outgoing"
    assert log.request_body == '{"description": "Order #1001"}'


@pytest.mark.asyncio
async def test_missing_invoice_number_is_stored_empty(service, stored_logs):
    await service.log_incoming_action("paynl", None, 0)

    assert stored_logs[0].invoice_number == ""
