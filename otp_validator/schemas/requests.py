from pydantic import BaseModel, Field

from otp_validator.domain.entities import OTP_CODE_PATTERN


class ValidateOtpIn(BaseModel):
    otp_code: str = Field(..., description="The OTP code to check", pattern=OTP_CODE_PATTERN)
    invalidate_otp: bool = Field(
        ..., description="Consume the OTP once it has been found valid"
    )


class ValidateOtpByPathIn(BaseModel):
    invalidate_otp: bool = Field(
        ..., description="Consume the OTP once it has been found valid"
    )
