import logging
from typing import Any

import httpx

from src.application.exceptions import AnalyticsBackendError
from src.application.interfaces.i_analytics_client import IAnalyticsClient

logger = logging.getLogger(__name__)


class HttpAnalyticsClient(IAnalyticsClient):
    """Reads aggregate booking statistics from the analytics REST backend."""

    SUMMARY_PATH = "/api/v1/analytics/summary"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_summary(self, hours: int) -> dict[str, Any]:
        url = f"{self.base_url}{self.SUMMARY_PATH}"
        logger.info("Fetching analytics from: %s?hours=%s", url, hours)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.get(
                    url,
                    params={"hours": hours},
                    headers={"Accept": "application/json"},
                )
            except httpx.HTTPError as e:
                logger.error("Analytics backend unreachable: %s", e)
                raise AnalyticsBackendError(
                    f"Analytics backend unreachable: {e}"
                ) from e

        if response.is_error:
            logger.error("API Error: %s %s", response.status_code, response.text)
            raise AnalyticsBackendError(
                f"API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise AnalyticsBackendError("Analytics backend returned invalid JSON") from e
