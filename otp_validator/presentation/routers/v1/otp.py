import logging
from datetime import datetime
from typing import Annotated, Callable

from fastapi import APIRouter, Body, Depends, HTTPException, status

from otp_validator.application.validate_otp import (
    validate_otp_from_body,
    validate_otp_from_path,
)
from otp_validator.domain.errors import (
    CannotInvalidateOtp,
    CannotValidateOtp,
    DomainError,
    MalformedInputCode,
    OtpNotFound,
)
from otp_validator.domain.ports.otp_store import OtpStorePort
from otp_validator.presentation.dependencies import get_clock, get_otp_store
from otp_validator.schemas.requests import ValidateOtpByPathIn, ValidateOtpIn
from otp_validator.schemas.responses import OtpValidationOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/otp", tags=["OTP"])


def _to_http_error(err: DomainError) -> HTTPException:
    if isinstance(err, OtpNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=err.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=err.message
    )


@router.post("/validate", response_model=OtpValidationOut)
async def post_validate_otp(
    payload: ValidateOtpIn,
    store: Annotated[OtpStorePort, Depends(get_otp_store)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
):
    try:
        expires_at = await validate_otp_from_body(store, payload, clock=clock)
    except (OtpNotFound, CannotValidateOtp, CannotInvalidateOtp) as err:
        raise _to_http_error(err) from err
    return OtpValidationOut(expires_at=expires_at)


@router.post("/{otp_code}/validate", response_model=OtpValidationOut)
async def post_validate_otp_by_path(
    otp_code: str,
    store: Annotated[OtpStorePort, Depends(get_otp_store)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
    payload: ValidateOtpByPathIn = Body(...),
):
    try:
        expires_at = await validate_otp_from_path(store, otp_code, payload, clock=clock)
    except MalformedInputCode as err:
        logger.error("malformed otp code in path", extra={"length": len(otp_code)})
        raise _to_http_error(err) from err
    except (OtpNotFound, CannotValidateOtp, CannotInvalidateOtp) as err:
        raise _to_http_error(err) from err
    return OtpValidationOut(expires_at=expires_at)
