import datetime as dt
from pydantic import Field, model_validator
from typing import List, Literal, Optional

from travel_planner.core.schemas import CamelModel
from travel_planner.models.vacation_plan import LeaveType
from travel_planner.schemas.plan import VacationPlanResponse

MAX_SELECTION_DAYS = 366


class HolidayAnnotationResponse(CamelModel):
    name: str
    type: str
    country: Optional[str] = None
    source: Literal["home", "company", "destination"]


class CalendarDay(CamelModel):
    date: dt.date
    in_current_month: bool
    is_weekend: bool
    is_workable: bool
    holidays: List[HolidayAnnotationResponse] = Field(default_factory=list)
    plan_id: Optional[int] = None


class CalendarMonthResponse(CamelModel):
    user_id: int
    year: int
    month: int
    label: str
    days: List[CalendarDay]


class DayHolidaysResponse(CamelModel):
    date: dt.date
    is_workable: bool
    holidays: List[HolidayAnnotationResponse]


class SelectionRequest(CamelModel):
    """A press on `anchor`, a drag to `current` (defaults to the anchor) and a release."""
    anchor: dt.date
    current: Optional[dt.date] = None
    leave_type: Optional[LeaveType] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    notes: Optional[str] = None
    merge: bool = False

    @model_validator(mode="after")
    def check_span(self):
        if self.current is not None and abs((self.current - self.anchor).days) >= MAX_SELECTION_DAYS:
            raise ValueError(f"a selection may span at most {MAX_SELECTION_DAYS} days")
        return self


class SelectionPreviewResponse(CamelModel):
    state: Literal["idle", "selecting", "extending"]
    dates: List[dt.date]
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    leave_days_used: float = 0
    requires_leave_type: bool = False
    covering_plan_id: Optional[int] = None


class SelectionCommitResponse(CamelModel):
    action: Literal["created", "deleted", "ignored"]
    plan: Optional[VacationPlanResponse] = None
    merged: List[VacationPlanResponse] = Field(default_factory=list)
    removed_plan_ids: List[int] = Field(default_factory=list)


class RecommendationResponse(CamelModel):
    name: str
    start_date: dt.date
    end_date: dt.date
    total_days: int
    leave_days_used: float
    score: float
