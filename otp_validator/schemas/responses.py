from datetime import datetime

from pydantic import BaseModel, Field


class OtpValidationOut(BaseModel):
    expires_at: datetime = Field(..., description="When the OTP stops being valid")
