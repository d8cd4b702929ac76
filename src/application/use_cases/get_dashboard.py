import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import ValidationError

from src.domain.value_objects.time_range import TimeRange
from src.application.dtos.analytics_dtos import (
    AnalyticsSummaryDTO,
    DashboardDTO,
    KPIDTO,
    ReservationDTO,
    ReservationRowDTO,
    SearchDTO,
    SearchRowDTO,
)
from src.application.exceptions import AnalyticsBackendError
from src.application.interfaces.i_analytics_client import IAnalyticsClient
from src.application.interfaces.i_cache_service import ICacheService

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10


def format_euro(amount: float, decimals: int = 2) -> str:
    """Format an amount the way de-DE does: €1.234,50.

    Halves round up, so 412.5 with no decimals shows as €413.
    """
    rounded = Decimal(str(amount)).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
    )
    formatted = f"{rounded:,.{decimals}f}"
    return "€" + formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def format_date(value: Optional[str]) -> str:
    """Render an ISO date or datetime as dd.mm.yyyy, leaving anything else as is."""
    if not value:
        return ""
    try:
        return date.fromisoformat(value[:10]).strftime("%d.%m.%Y")
    except ValueError:
        return value


def _reservation_row(reservation: ReservationDTO) -> ReservationRowDTO:
    name = ""
    if reservation.guest:
        parts = (reservation.guest.given_name, reservation.guest.surname)
        name = " ".join(part for part in parts if part)
    amount = (
        format_euro(reservation.total_amount)
        if reservation.total_amount is not None
        else ""
    )
    return ReservationRowDTO(
        reservation_id=str(reservation.reservation_id or ""),
        guest=name,
        arrival=format_date(reservation.arrival),
        departure=format_date(reservation.departure),
        room_type=reservation.room_type_code or "",
        amount=amount,
    )


def _search_row(search: SearchDTO) -> SearchRowDTO:
    data = search.data
    timespan = data.timespan if data else None
    return SearchRowDTO(
        adults=data.adults if data else 0,
        children=len(data.children) if data else 0,
        from_date=format_date(timespan.from_date if timespan else None),
        to_date=format_date(timespan.to_date if timespan else None),
        nights=data.duration if data else None,
        results_count=search.results_count,
    )


@dataclass
class GetDashboardUseCase:
    """Use case for the admin analytics dashboard.

    Summaries are cached per window for ``cache_ttl_seconds``, which matches
    the dashboard's auto-refresh interval. ``refresh`` forces a new fetch.
    """

    analytics_client: IAnalyticsClient
    cache_service: ICacheService
    cache_ttl_seconds: int = 900

    async def execute(
        self,
        time_range: TimeRange = TimeRange.DAY,
        refresh: bool = False,
    ) -> DashboardDTO:
        """Fetch (or reuse) the summary for a window and shape it for display.

        Raises:
            AnalyticsBackendError: If the backend fails or returns an unexpected payload
        """
        hours = time_range.hours
        cache_key = f"analytics:summary:{hours}"

        cached = None if refresh else await self.cache_service.get(cache_key)

        if cached:
            summary = AnalyticsSummaryDTO.model_validate(cached["summary"])
            fetched_at = datetime.fromisoformat(cached["fetched_at"])
        else:
            raw = await self.analytics_client.fetch_summary(hours)
            try:
                summary = AnalyticsSummaryDTO.model_validate(raw)
            except ValidationError as e:
                logger.error("Unexpected analytics payload: %s", e)
                raise AnalyticsBackendError(
                    f"Unexpected analytics payload: {e.error_count()} invalid fields"
                ) from e
            fetched_at = datetime.now(timezone.utc)

            await self.cache_service.set(
                cache_key,
                {
                    "summary": summary.model_dump(mode="json"),
                    "fetched_at": fetched_at.isoformat(),
                },
                ttl_seconds=self.cache_ttl_seconds,
            )

        return DashboardDTO(
            time_range=time_range.value,
            hours=hours,
            period_description=time_range.description,
            kpis=KPIDTO(
                total_searches=summary.total_searches,
                total_reservations=summary.total_reservations,
                conversion_rate=f"{summary.conversion_rate:.1f}%",
                total_revenue=format_euro(summary.total_revenue),
                average_booking_value=format_euro(summary.average_booking_value, 0),
            ),
            popular_durations=summary.popular_durations,
            recent_reservations=[
                _reservation_row(r) for r in summary.reservations[:RECENT_LIMIT]
            ],
            recent_searches=[_search_row(s) for s in summary.searches[:RECENT_LIMIT]],
            fetched_at=fetched_at,
            cached=bool(cached),
        )
