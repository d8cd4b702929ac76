"""
Analytics Router - Data for the admin dashboard.
"""

from fastapi import APIRouter, HTTPException, Query, status

from src.application.dtos.analytics_dtos import DashboardDTO
from src.application.exceptions import AnalyticsBackendError
from src.domain.value_objects.time_range import TimeRange
from src.presentation.api.dependencies import GetDashboardUseCaseDep

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/analytics",
    response_model=DashboardDTO,
    summary="Analytics dashboard",
    description="Search and reservation statistics for the selected time range.",
)
async def get_analytics(
    use_case: GetDashboardUseCaseDep,
    time_range: TimeRange = Query(TimeRange.DAY, alias="range"),
    refresh: bool = False,
):
    try:
        return await use_case.execute(time_range=time_range, refresh=refresh)
    except AnalyticsBackendError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
