import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from travel_planner.core.config import settings
from travel_planner.dependencies import (
    get_calendar_service,
    get_plan_service,
    get_recommendation_service,
)
from travel_planner.schemas.calendar import (
    CalendarMonthResponse,
    DayHolidaysResponse,
    RecommendationResponse,
    SelectionCommitResponse,
    SelectionPreviewResponse,
    SelectionRequest,
)
from travel_planner.services.calendar_view import CalendarViewService
from travel_planner.services.plan_service import VacationPlanService
from travel_planner.services.recommendations import RecommendationService

router = APIRouter(prefix="/user/{user_id}", tags=["Calendar"])


# Declared before /calendar/{year}/{month} so "holidays" is not parsed as a year
@router.get("/calendar/holidays/{day}", response_model=DayHolidaysResponse)
def holidays_on_day(user_id: int, day: dt.date, service: CalendarViewService = Depends(get_calendar_service)):
    return service.day(user_id, day)


@router.get("/calendar/{year}/{month}", response_model=CalendarMonthResponse)
def month_view(
    user_id: int,
    year: int = Path(..., ge=1900, le=2100),
    month: int = Path(..., ge=1, le=12),
    service: CalendarViewService = Depends(get_calendar_service)
):
    return service.month(user_id, year, month)


@router.post("/calendar/preview", response_model=SelectionPreviewResponse)
def preview_selection(
    user_id: int,
    request: SelectionRequest,
    service: VacationPlanService = Depends(get_plan_service)
):
    """What a press on `anchor` and drag to `current` would select, without saving."""
    return service.preview_selection(user_id, request)


@router.post("/calendar/selection", response_model=SelectionCommitResponse)
def commit_selection(
    user_id: int,
    request: SelectionRequest,
    service: VacationPlanService = Depends(get_plan_service)
):
    """
    Press on `anchor`, drag to `current`, release.

    Pressing a date covered by an existing plan deletes that plan instead.
    A single-day selection needs `leaveType`; `merge=true` runs the
    consecutive-plan merge afterwards.
    """
    return service.commit_selection(user_id, request)


@router.get("/recommendations/{year}", response_model=List[RecommendationResponse])
def recommendations(
    user_id: int,
    year: int = Path(..., ge=1900, le=2100),
    max_leave_days: Optional[float] = Query(None, alias="maxLeaveDays", ge=0),
    limit: int = Query(settings.max_recommendations, ge=1, le=50),
    service: RecommendationService = Depends(get_recommendation_service)
):
    return [
        RecommendationResponse.model_validate(r)
        for r in service.recommend(user_id, year, max_leave_days, limit)
    ]
