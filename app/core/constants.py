"""PayNL field names and fixed gateway literals."""

from enum import StrEnum


class PaymentServiceProviders(StrEnum):
    PAYNL = "paynl"


WEBHOOK_INVOICE_NUMBER_PROPERTY = "orderId"
WEBHOOK_TRANSACTION_ID_PROPERTY = "id"

PAYNL_USERNAME_LIVE_PROPERTY = "paynlusernamelive"
PAYNL_USERNAME_TEST_PROPERTY = "paynlusernametest"
PAYNL_PASSWORD_LIVE_PROPERTY = "paynlpasswordlive"
PAYNL_PASSWORD_TEST_PROPERTY = "paynlpasswordtest"
PAYNL_SERVICE_ID_LIVE_PROPERTY = "paynlserviceidlive"
PAYNL_SERVICE_ID_TEST_PROPERTY = "paynlserviceidtest"

PAYNL_SETTING_KEYS = (
    PAYNL_USERNAME_LIVE_PROPERTY,
    PAYNL_USERNAME_TEST_PROPERTY,
    PAYNL_PASSWORD_LIVE_PROPERTY,
    PAYNL_PASSWORD_TEST_PROPERTY,
    PAYNL_SERVICE_ID_LIVE_PROPERTY,
    PAYNL_SERVICE_ID_TEST_PROPERTY,
)
