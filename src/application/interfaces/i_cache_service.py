from abc import ABC, abstractmethod
from typing import Any, Optional


class ICacheService(ABC):
    """Interface for the short-lived cache in front of the analytics backend."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Get a value from cache."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Set a value in cache with optional TTL."""
        pass
