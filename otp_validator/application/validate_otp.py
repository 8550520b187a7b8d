import logging
from datetime import datetime, timezone
from typing import Callable

from pydantic import ValidationError

from otp_validator.domain.entities import OtpValidationResult, decode_otp_code
from otp_validator.domain.errors import (
    CannotInvalidateOtp,
    CannotValidateOtp,
    InvalidationInvariantViolation,
    MalformedRecord,
    OtpNotFound,
    StoreUnavailable,
)
from otp_validator.domain.ports.otp_store import OtpStorePort
from otp_validator.logging import mask_code
from otp_validator.schemas.records import StoredOtpPayload, StoredOtpPayloadWithTtl
from otp_validator.schemas.requests import ValidateOtpByPathIn, ValidateOtpIn
from otp_validator.settings import get_settings

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def otp_key(code: str) -> str:
    return f"{get_settings().otp_key_prefix}{code}"


def fiscal_code_key(fiscal_code: str) -> str:
    return f"{get_settings().otp_fiscal_code_key_prefix}{fiscal_code}"


async def lookup_otp(
    store: OtpStorePort,
    code: str,
    payload_model: type[StoredOtpPayload] = StoredOtpPayload,
) -> OtpValidationResult | None:
    """
    Resolve an OTP code to its owner and expiry.

    Returns None when the key is absent. A payload that is not JSON or does
    not match ``payload_model`` raises MalformedRecord; store failures
    propagate as StoreUnavailable.
    """
    raw = await store.get(otp_key(code))
    if raw is None:
        return None
    try:
        payload = payload_model.model_validate_json(raw)
    except ValidationError as err:
        raise MalformedRecord("Cannot decode Otp Payload") from err
    return OtpValidationResult(
        fiscal_code=payload.fiscal_code, expires_at=payload.expires_at
    )


async def invalidate_otp(store: OtpStorePort, code: str, fiscal_code: str) -> None:
    """
    Delete the OTP record, then the owner's index entry.

    Both deletes must remove a key. Nothing is retried or rolled back, so a
    failure on the second delete leaves the primary record already gone.
    """
    if not await store.delete(otp_key(code)):
        raise InvalidationInvariantViolation("Unexpected delete OTP operation")
    if not await store.delete(fiscal_code_key(fiscal_code)):
        raise InvalidationInvariantViolation("Unexpected delete fiscalCode operation")


async def validate_otp(
    store: OtpStorePort,
    code: str,
    invalidate: bool,
    *,
    payload_model: type[StoredOtpPayload] = StoredOtpPayload,
    clock: Callable[[], datetime] = utc_now,
) -> datetime:
    """
    Check that ``code`` names a stored OTP and return its expiry.

    When ``invalidate`` is set the OTP is consumed and the current time is
    returned instead of the stored expiry.
    """
    masked = mask_code(code)
    try:
        found = await lookup_otp(store, code, payload_model)
    except (StoreUnavailable, MalformedRecord) as err:
        logger.error(
            "otp lookup failed", extra={"otp_code": masked}, exc_info=True
        )
        raise CannotValidateOtp() from err

    if found is None:
        logger.info("otp not found", extra={"otp_code": masked})
        raise OtpNotFound()

    if not invalidate:
        return found.expires_at

    try:
        await invalidate_otp(store, code, found.fiscal_code)
    except (StoreUnavailable, InvalidationInvariantViolation) as err:
        logger.error(
            "otp invalidation failed", extra={"otp_code": masked}, exc_info=True
        )
        raise CannotInvalidateOtp() from err

    logger.info("otp invalidated", extra={"otp_code": masked})
    return clock()


async def validate_otp_from_body(
    store: OtpStorePort,
    payload: ValidateOtpIn,
    clock: Callable[[], datetime] = utc_now,
) -> datetime:
    return await validate_otp(
        store, payload.otp_code, payload.invalidate_otp, clock=clock
    )


async def validate_otp_from_path(
    store: OtpStorePort,
    raw_code: str,
    payload: ValidateOtpByPathIn,
    clock: Callable[[], datetime] = utc_now,
) -> datetime:
    code = decode_otp_code(raw_code)
    return await validate_otp(
        store,
        code,
        payload.invalidate_otp,
        payload_model=StoredOtpPayloadWithTtl,
        clock=clock,
    )
