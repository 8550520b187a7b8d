"""Payloads written into the cache by the OTP issuer."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from otp_validator.domain.entities import FISCAL_CODE_PATTERN

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


class StoredOtpPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    expires_at: datetime = Field(..., alias="expiresAt")
    fiscal_code: str = Field(..., alias="fiscalCode", pattern=FISCAL_CODE_PATTERN)

    @field_validator("expires_at", mode="before")
    @classmethod
    def parse_iso_timestamp(cls, v: object) -> datetime:
        """Only ISO-8601 strings (as written by Date.toJSON()), never epochs."""
        if not isinstance(v, str) or not _ISO_DATE_PREFIX.match(v):
            raise ValueError("expiresAt must be an ISO-8601 string")
        try:
            return datetime.fromisoformat(v)
        except ValueError as err:
            raise ValueError("expiresAt must be an ISO-8601 string") from err


class StoredOtpPayloadWithTtl(StoredOtpPayload):
    # Carried for the issuer's benefit, not read when validating.
    ttl: NonNegativeInt
