from typing import Protocol


class OtpStorePort(Protocol):
    async def get(self, key: str) -> str | None:
        """Value stored at key, or None when the key is absent."""

    async def delete(self, key: str) -> bool:
        """True if a key was removed, False if it did not exist."""
