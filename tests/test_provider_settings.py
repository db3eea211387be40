"""Credential resolution and stored secret decryption."""

import pytest

from app.core.config import Environment
from app.core.constants import (
    PAYNL_PASSWORD_LIVE_PROPERTY,
    PAYNL_PASSWORD_TEST_PROPERTY,
    PAYNL_SERVICE_ID_LIVE_PROPERTY,
    PAYNL_SERVICE_ID_TEST_PROPERTY,
    PAYNL_USERNAME_LIVE_PROPERTY,
    PAYNL_USERNAME_TEST_PROPERTY,
)
from app.core.crypto import decrypt_secret, encrypt_secret
from app.core.exceptions import SecretDecryptionError
from app.schemas.paynl import PaymentServiceProviderSettings
from app.services.provider_settings_service import ProviderSettingsService

PROVIDER = PaymentServiceProviderSettings(
    id="psp_1",
    title="PayNL",
    currency="EUR",
    return_url="https://shop.example/return",
    webhook_url="https://shop.example/webhook",
    fail_url="https://shop.example/fail",
    log_all_requests=True,
)


def _stored_details(encryption_key):
    plain = {
        PAYNL_USERNAME_LIVE_PROPERTY: "AT-live-user",
        PAYNL_PASSWORD_LIVE_PROPERTY: "live-password",
        PAYNL_SERVICE_ID_LIVE_PROPERTY: "SL-live",
        PAYNL_USERNAME_TEST_PROPERTY: "AT-test-user",
        PAYNL_PASSWORD_TEST_PROPERTY: "test-password",
        PAYNL_SERVICE_ID_TEST_PROPERTY: "SL-test",
    }
    return {key: encrypt_secret(value, encryption_key) for key, value in plain.items()}


@pytest.mark.asyncio
@pytest.mark.parametrize("environment", [Environment.TEST, Environment.DEVELOPMENT])
async def test_test_environments_select_test_credentials(environment, details_source, encryption_key):
    service = ProviderSettingsService(details_source(_stored_details(encryption_key)), encryption_key)

    resolved = await service.resolve(PROVIDER, environment)

    assert resolved.username == "AT-test-user"
    assert resolved.password == "test-password"
    assert resolved.service_id == "SL-test"
    assert resolved.environment == environment


@pytest.mark.asyncio
@pytest.mark.parametrize("environment", [Environment.ACCEPTANCE, Environment.LIVE])
async def test_other_environments_select_live_credentials(environment, details_source, encryption_key):
    service = ProviderSettingsService(details_source(_stored_details(encryption_key)), encryption_key)

    resolved = await service.resolve(PROVIDER, environment)

    assert resolved.username == "AT-live-user"
    assert resolved.password == "live-password"
    assert resolved.service_id == "SL-live"


@pytest.mark.asyncio
async def test_resolve_keeps_provider_settings(details_source, encryption_key):
    service = ProviderSettingsService(details_source(_stored_details(encryption_key)), encryption_key)

    resolved = await service.resolve(PROVIDER, "live")

    assert resolved.id == "psp_1"
    assert resolved.currency == "EUR"
    assert resolved.fail_url == "https://shop.example/fail"
    assert resolved.log_all_requests is True


@pytest.mark.asyncio
async def test_missing_record_resolves_to_empty_credentials(details_source, encryption_key):
    source = details_source(None)
    service = ProviderSettingsService(source, encryption_key)

    resolved = await service.resolve(PROVIDER, Environment.LIVE)

    assert (resolved.username, resolved.password, resolved.service_id) == ("", "", "")
    assert source.calls == [("psp_1", "paynl")]


@pytest.mark.asyncio
async def test_missing_detail_rows_resolve_to_empty_strings(details_source, encryption_key):
    details = _stored_details(encryption_key)
    details[PAYNL_SERVICE_ID_LIVE_PROPERTY] = None
    service = ProviderSettingsService(details_source(details), encryption_key)

    resolved = await service.resolve(PROVIDER, Environment.LIVE)

    assert resolved.username == "AT-live-user"
    assert resolved.service_id == ""


@pytest.mark.asyncio
async def test_every_call_reads_storage_again(details_source, encryption_key):
    source = details_source(_stored_details(encryption_key))
    service = ProviderSettingsService(source, encryption_key)

    await service.resolve(PROVIDER, Environment.LIVE)
    await service.resolve(PROVIDER, Environment.LIVE)

    assert len(source.calls) == 2


def test_decrypt_secret_reverses_encrypt_secret(encryption_key):
    stored = encrypt_secret("s3cret", encryption_key)

    assert stored != "s3cret"
    assert decrypt_secret(stored, encryption_key) == "s3cret"


@pytest.mark.parametrize("value", [None, ""])
def test_decrypt_secret_of_empty_value_is_empty(value, encryption_key):
    assert decrypt_secret(value, encryption_key) == ""


def test_decrypt_secret_rejects_plain_text(encryption_key):
    with pytest.raises(SecretDecryptionError):
        decrypt_secret("not encrypted!", encryption_key, PAYNL_PASSWORD_LIVE_PROPERTY)

