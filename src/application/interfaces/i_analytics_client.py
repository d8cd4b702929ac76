from abc import ABC, abstractmethod
from typing import Any


class IAnalyticsClient(ABC):
    """Interface for the external booking analytics backend."""

    @abstractmethod
    async def fetch_summary(self, hours: int) -> dict[str, Any]:
        """Fetch aggregate search and reservation statistics for the last N hours.

        Raises:
            AnalyticsBackendError: If the backend answers with an error status
        """
        pass
