class DomainError(Exception):
    """Base class for all domain-level errors."""

    message = "Internal error"


class StoreUnavailable(DomainError):
    """The key-value store failed to answer a get or a delete."""

    pass


class MalformedRecord(DomainError):
    """A stored OTP payload could not be parsed or failed schema validation."""

    pass


class InvalidationInvariantViolation(DomainError):
    """A delete succeeded but reported that no key was removed."""

    pass


class MalformedInputCode(DomainError):
    """A raw OTP code (e.g. from the request path) is not well-formed."""

    message = "Invalid OTP Code"


class OtpNotFound(DomainError):
    """No OTP record matches the given code (absent or expired)."""

    message = "OTP Not Found or invalid"


class CannotValidateOtp(DomainError):
    """The OTP record could not be read or decoded."""

    message = "Cannot validate OTP Code"


class CannotInvalidateOtp(DomainError):
    """One of the deletes required to consume an OTP failed."""

    message = "Cannot invalidate OTP"
