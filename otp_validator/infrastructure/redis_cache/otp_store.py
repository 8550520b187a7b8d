from __future__ import annotations

from redis.asyncio import Redis
from redis.exceptions import RedisError

from otp_validator.domain.errors import MalformedRecord, StoreUnavailable
from otp_validator.domain.ports.otp_store import OtpStorePort


class RedisOtpStore(OtpStorePort):
    """
    Plain GET/DEL access to the OTP keys written by the issuer.
    Every redis-py failure (connection, timeout, bad reply) surfaces as
    StoreUnavailable so callers only deal with one store error. A value that
    is not valid UTF-8 is a MalformedRecord.
    """

    def __init__(self, redis: Redis) -> None:
        self._redis = redis

    async def get(self, key: str) -> str | None:
        try:
            return await self._redis.get(key)
        except RedisError as err:
            raise StoreUnavailable("redis GET failed") from err
        except UnicodeDecodeError as err:
            raise MalformedRecord("Cannot decode Otp Payload") from err

    async def delete(self, key: str) -> bool:
        try:
            deleted = await self._redis.delete(key)
        except RedisError as err:
            raise StoreUnavailable("redis DEL failed") from err
        return int(deleted) == 1
