# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import user, custom_holiday, destination, vacation_plan

# Explicit class exports for cleaner imports
from .user import User
from .custom_holiday import CustomHoliday
from .destination import SelectedDestination
from .vacation_plan import VacationPlan, LeaveType

__all__ = [
    "User",
    "CustomHoliday",
    "SelectedDestination",
    "VacationPlan",
    "LeaveType",
]
