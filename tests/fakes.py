from otp_validator.domain.errors import StoreUnavailable


class FakeOtpStore:
    """
    In-memory OtpStorePort.

    ``delete_results`` lets a test script the outcome of successive deletes:
    True/False is returned as-is, an exception instance is raised. Once the
    script is exhausted, deletes fall back to the real dict behaviour.
    """

    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})
        self.get_calls: list[str] = []
        self.delete_calls: list[str] = []
        self.delete_results: list[bool | Exception] = []

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        return self.data.get(key)

    async def delete(self, key: str) -> bool:
        self.delete_calls.append(key)
        if self.delete_results:
            result = self.delete_results.pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return self.data.pop(key, None) is not None


class FakeErroredOtpStore(FakeOtpStore):
    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        raise StoreUnavailable("Redis down")


class FakeUndecodableRedis:
    """redis.asyncio stand-in whose GET hits a value that is not UTF-8."""

    async def get(self, key: str):
        raise UnicodeDecodeError("utf-8", b"\xff\xfe{", 0, 1, "invalid start byte")

    async def delete(self, key: str) -> int:
        return 1
