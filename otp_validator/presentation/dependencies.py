from datetime import datetime
from typing import Callable

from otp_validator.application.validate_otp import utc_now
from otp_validator.domain.ports.otp_store import OtpStorePort
from otp_validator.infrastructure.redis_cache.otp_store import RedisOtpStore
from otp_validator.infrastructure.redis_cache.pool import get_redis


def get_otp_store() -> OtpStorePort:
    return RedisOtpStore(get_redis())


def get_clock() -> Callable[[], datetime]:
    return utc_now
