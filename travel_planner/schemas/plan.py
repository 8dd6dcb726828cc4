import datetime as dt
from pydantic import Field, field_validator, model_validator
from typing import List, Optional

from travel_planner.core.schemas import CamelModel
from travel_planner.models.vacation_plan import LeaveType


class VacationPlanBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    start_date: dt.date
    end_date: dt.date
    leave_days_used: float = Field(..., ge=0)
    leave_type: LeaveType = LeaveType.FULL
    destinations: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("destinations")
    @classmethod
    def upper_codes(cls, v: List[str]) -> List[str]:
        return [code.upper() for code in v]

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self


class VacationPlanCreate(VacationPlanBase):
    user_id: int


class VacationPlanUpdate(CamelModel):
    """Partial edit; the resulting range is re-checked by the plan service."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    leave_days_used: Optional[float] = Field(None, ge=0)
    leave_type: Optional[LeaveType] = None
    destinations: Optional[List[str]] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_required(self):
        # notes is the only field a partial edit may clear
        nulls = sorted(f for f in self.model_fields_set if f != "notes" and getattr(self, f) is None)
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


class VacationPlanResponse(VacationPlanBase):
    id: int
    user_id: int


class MergeResultResponse(CamelModel):
    merged: List[VacationPlanResponse]
    removed_plan_ids: List[int]


class ResetResponse(CamelModel):
    success: bool = True
    deleted: int
