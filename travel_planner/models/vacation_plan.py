from sqlalchemy import Column, Integer, String, Date, Float, JSON, ForeignKey
from travel_planner.database import Base
import enum


class LeaveType(str, enum.Enum):
    FULL = "full"
    HALF = "half"
    QUARTER = "quarter"

    @property
    def cost(self) -> float:
        """Leave days consumed by one day of this type."""
        return LEAVE_TYPE_COST[self]

    @property
    def label(self) -> str:
        return LEAVE_TYPE_LABEL[self]


LEAVE_TYPE_COST = {
    LeaveType.FULL: 1.0,
    LeaveType.HALF: 0.5,
    LeaveType.QUARTER: 0.25,
}

LEAVE_TYPE_LABEL = {
    LeaveType.FULL: "연차",
    LeaveType.HALF: "반차",
    LeaveType.QUARTER: "반반차",
}


class VacationPlan(Base):
    __tablename__ = "vacation_plans"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String, nullable=False)
    # Date-only columns: no timezone to drift
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    leave_days_used = Column(Float, nullable=False)
    leave_type = Column(String, nullable=False, default=LeaveType.FULL.value)
    destinations = Column(JSON, nullable=False, default=list)
    notes = Column(String, nullable=True)
