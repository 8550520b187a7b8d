from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from otp_validator.domain.errors import MalformedInputCode

OTP_CODE_PATTERN = r"^[A-Z0-9]{11}$"
FISCAL_CODE_PATTERN = (
    r"^[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST]"
    r"[0-9LMNPQRSTUV]{2}[A-Z][0-9LMNPQRSTUV]{3}[A-Z]$"
)

_OTP_CODE_RE = re.compile(OTP_CODE_PATTERN)


def decode_otp_code(raw: object) -> str:
    """
    Return ``raw`` as an OTP code, or raise MalformedInputCode when it is not
    an 11-character uppercase alphanumeric string.
    """
    if not isinstance(raw, str) or not _OTP_CODE_RE.fullmatch(raw):
        raise MalformedInputCode()
    return raw


@dataclass(frozen=True)
class OtpValidationResult:
    fiscal_code: str
    expires_at: datetime
