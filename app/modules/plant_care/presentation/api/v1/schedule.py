# 📄 File: app/modules/plant_care/presentation/api/v1/schedule.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the month calendar and the home dashboard.
#
# 🧪 Purpose (Technical Summary):
# FastAPI read endpoints exposing the care-schedule engine month grid (with tasks per day) and
# the dashboard summary.
#
# 🔗 Dependencies:
# - FastAPI router, Path parameters
# - app.modules.plant_care.presentation.dependencies, schedule schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (calendar_router under /calendar, dashboard_router under /dashboard)

from datetime import datetime

from fastapi import APIRouter, Depends, Path

from app.modules.plant_care.domain.services.plant_care_service import PlantCareService
from app.modules.plant_care.presentation.api.schemas import CalendarMonthResponse, DashboardResponse
from app.modules.plant_care.presentation.dependencies import get_clock, get_plant_care_service

calendar_router = APIRouter()
dashboard_router = APIRouter()


@calendar_router.get(
    "/{year}/{month}",
    response_model=CalendarMonthResponse,
    summary="Month calendar",
    description="Sunday-first month grid with the tasks of each day. `month` is 0-based (0 = January).",
    responses={422: {"description": "Month or year out of range"}},
)
async def get_calendar(
    year: int = Path(..., description="Four-digit year"),
    month: int = Path(..., description="0-based month index"),
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> CalendarMonthResponse:
    calendar = await service.calendar(month, year, now=now)
    return CalendarMonthResponse.from_domain(calendar)


@dashboard_router.get("", response_model=DashboardResponse, summary="Dashboard summary")
async def get_dashboard(
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> DashboardResponse:
    return DashboardResponse.from_domain(await service.dashboard(now=now))
