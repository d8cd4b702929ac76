from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, field_validator


class GuestDTO(BaseModel):
    given_name: Optional[str] = None
    surname: Optional[str] = None


class ReservationDTO(BaseModel):
    """A reservation record as the analytics backend reports it."""

    reservation_id: Optional[Union[str, int]] = None
    guest: Optional[GuestDTO] = None
    arrival: Optional[str] = None
    departure: Optional[str] = None
    room_type_code: Optional[str] = None
    total_amount: Optional[float] = None


class SearchTimespanDTO(BaseModel):
    from_date: Optional[str] = None
    to_date: Optional[str] = None


class SearchDataDTO(BaseModel):
    adults: int = 0
    children: List[Any] = []
    timespan: Optional[SearchTimespanDTO] = None
    duration: Optional[int] = None

    @field_validator("adults", mode="before")
    @classmethod
    def none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("children", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SearchDTO(BaseModel):
    """A room search record as the analytics backend reports it."""

    data: Optional[SearchDataDTO] = None
    results_count: int = 0

    @field_validator("results_count", mode="before")
    @classmethod
    def none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class AnalyticsSummaryDTO(BaseModel):
    """Payload of GET /api/v1/analytics/summary on the analytics backend."""

    total_searches: int = 0
    total_reservations: int = 0
    conversion_rate: float = 0.0
    total_revenue: float = 0.0
    average_booking_value: float = 0.0
    popular_durations: Dict[int, int] = {}
    searches: List[SearchDTO] = []
    reservations: List[ReservationDTO] = []

    @field_validator(
        "total_searches",
        "total_reservations",
        "conversion_rate",
        "total_revenue",
        "average_booking_value",
        mode="before",
    )
    @classmethod
    def missing_number_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("popular_durations", mode="before")
    @classmethod
    def missing_durations_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("searches", "reservations", mode="before")
    @classmethod
    def missing_records_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class KPIDTO(BaseModel):
    """Headline figures, formatted for display."""

    total_searches: int
    total_reservations: int
    conversion_rate: str  # "12.5%"
    total_revenue: str  # "€1.234,50"
    average_booking_value: str  # "€412"


class ReservationRowDTO(BaseModel):
    reservation_id: str
    guest: str
    arrival: str
    departure: str
    room_type: str
    amount: str


class SearchRowDTO(BaseModel):
    adults: int
    children: int
    from_date: str
    to_date: str
    nights: Optional[int] = None
    results_count: int


class DashboardDTO(BaseModel):
    """Response DTO for the admin analytics dashboard."""

    time_range: str
    hours: int
    period_description: str
    kpis: KPIDTO
    popular_durations: Dict[int, int]
    recent_reservations: List[ReservationRowDTO]
    recent_searches: List[SearchRowDTO]
    fetched_at: datetime
    cached: bool = False
