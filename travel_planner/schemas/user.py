from pydantic import Field, model_validator
from typing import Optional

from travel_planner.core.config import settings
from travel_planner.core.schemas import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    total_leave_days: float = Field(default_factory=lambda: settings.default_total_leave_days, ge=0)
    used_leave_days: float = Field(0, ge=0)


class UserUpdate(CamelModel):
    """Partial ledger update. Values are not checked against each other."""
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    total_leave_days: Optional[float] = Field(None, ge=0)
    used_leave_days: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def reject_null(self):
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


class UserResponse(CamelModel):
    id: int
    username: str
    total_leave_days: float
    used_leave_days: float


class LeaveBalanceResponse(CamelModel):
    user_id: int
    total_leave_days: float
    used_leave_days: float
    planned_leave_days: float
    remaining_leave_days: float
    plan_count: int
