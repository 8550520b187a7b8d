import json
from datetime import datetime, timedelta, timezone

import pytest

from otp_validator.settings import get_settings
from tests.fakes import FakeErroredOtpStore, FakeOtpStore

OTP_CODE = "AAAAAAAA123"
FISCAL_CODE = "DNLLSS99S20H501F"
NOW = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
EXPIRES_AT = NOW + timedelta(hours=1)
INVALIDATED_AT = NOW + timedelta(minutes=5)


def stored_payload(**overrides) -> str:
    payload = {
        "expiresAt": EXPIRES_AT.isoformat(),
        "fiscalCode": FISCAL_CODE,
        "ttl": 3600,
    }
    payload.update(overrides)
    return json.dumps({k: v for k, v in payload.items() if v is not None})


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def store():
    return FakeOtpStore(
        {
            f"OTP_{OTP_CODE}": stored_payload(),
            f"OTP_FISCALCODE_{FISCAL_CODE}": OTP_CODE,
        }
    )


@pytest.fixture()
def empty_store():
    return FakeOtpStore()


@pytest.fixture()
def errored_store():
    return FakeErroredOtpStore()


@pytest.fixture()
def clock():
    return lambda: INVALIDATED_AT
