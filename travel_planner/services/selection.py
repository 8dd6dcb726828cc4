"""
Calendar Selection & Plan Builder

Pure building blocks for turning a drag on the calendar into a vacation
plan, independent of any input-event binding:

- CalendarSelection: the Idle -> Selecting -> Extending state machine.
  Pressing a date that an existing plan covers resolves to a delete of
  that plan instead of starting a selection.
- build_plan(): leave-day cost and title for a committed selection.
- group_consecutive() / merged_plan(): the consecutive-plan merge pass.

Nothing in this module touches storage; VacationPlanService wires it to
the repositories.
"""
import datetime as dt
import enum
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from travel_planner.core.exceptions import EmptySelectionError, LeaveTypeRequiredError
from travel_planner.models.vacation_plan import LeaveType
from travel_planner.schemas.plan import VacationPlanCreate

ONE_DAY = dt.timedelta(days=1)
KOREAN_WEEKDAYS = "월화수목금토일"
MERGED_TITLE = "휴가"

Predicate = Callable[[dt.date], bool]


def date_range(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Every calendar day between two dates, inclusive, in either order."""
    if start > end:
        start, end = end, start
    for offset in range((end - start).days + 1):
        yield start + dt.timedelta(days=offset)


def selection_between(anchor: dt.date, current: dt.date, is_workable: Predicate) -> List[dt.date]:
    """Workable dates of the contiguous range anchor..current.

    Non-workable dates are dropped but do not split the range.
    """
    return [day for day in date_range(anchor, current) if is_workable(day)]


def covers(plan, day: dt.date) -> bool:
    return plan.start_date <= day <= plan.end_date


def find_covering_plan(day: dt.date, plans: Sequence):
    return next((p for p in plans if covers(p, day)), None)


def overlapping_plans(start: dt.date, end: dt.date, plans: Sequence) -> list:
    return [p for p in plans if p.start_date <= end and start <= p.end_date]


def format_korean_date(day: dt.date) -> str:
    """6월 4일(화)"""
    return f"{day.month}월 {day.day}일({KOREAN_WEEKDAYS[day.weekday()]})"


def single_day_title(day: dt.date, leave_type: LeaveType) -> str:
    return f"{leave_type.label} ({format_korean_date(day)})"


def span_title(start: dt.date, end: dt.date) -> str:
    if start == end:
        return f"{MERGED_TITLE} ({format_korean_date(start)})"
    return f"{MERGED_TITLE} ({format_korean_date(start)} ~ {format_korean_date(end)})"


class SelectionState(str, enum.Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    EXTENDING = "extending"


class PressAction(str, enum.Enum):
    SELECT = "select"
    DELETE = "delete"
    IGNORE = "ignore"


@dataclass(frozen=True)
class PressResult:
    action: PressAction
    plan: Optional[object] = None


class CalendarSelection:
    """
    Interactive drag selection for one calendar session.

    `is_workable` decides which dates may carry leave; `plans` are the
    user's existing plans, used for toggle-to-delete on press.
    """

    def __init__(self, is_workable: Predicate, plans: Sequence = ()):
        self.is_workable = is_workable
        self.plans = list(plans)
        self.state = SelectionState.IDLE
        self.anchor: Optional[dt.date] = None
        self.dates: List[dt.date] = []

    def press(self, day: dt.date) -> PressResult:
        if self.state != SelectionState.IDLE:
            self.cancel()

        plan = find_covering_plan(day, self.plans)
        if plan is not None:
            return PressResult(PressAction.DELETE, plan)
        if not self.is_workable(day):
            return PressResult(PressAction.IGNORE)

        self.state = SelectionState.SELECTING
        self.anchor = day
        self.dates = [day]
        return PressResult(PressAction.SELECT)

    def move(self, day: dt.date) -> List[dt.date]:
        if self.state == SelectionState.IDLE:
            return []
        self.state = SelectionState.EXTENDING
        self.dates = selection_between(self.anchor, day, self.is_workable)
        return list(self.dates)

    def release(self) -> List[dt.date]:
        """Commit whatever was last computed and return to Idle."""
        dates = list(self.dates)
        self._reset()
        return dates

    def cancel(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.state = SelectionState.IDLE
        self.anchor = None
        self.dates = []


def selection_cost(dates: Sequence[dt.date], leave_type: Optional[LeaveType]) -> float:
    """Single dates cost what their leave type costs, longer selections 1.0 per date."""
    if len(dates) == 1:
        if leave_type is None:
            raise LeaveTypeRequiredError(dates[0])
        return leave_type.cost
    return float(len(dates))


def build_plan(
    user_id: int,
    dates: Sequence[dt.date],
    leave_type: Optional[LeaveType] = None,
    destinations: Sequence[str] = (),
    title: Optional[str] = None,
    notes: Optional[str] = None,
) -> VacationPlanCreate:
    if not dates:
        raise EmptySelectionError()

    first, last = min(dates), max(dates)
    cost = selection_cost(dates, leave_type)
    if len(dates) == 1:
        default_title = single_day_title(first, leave_type)
    else:
        leave_type = LeaveType.FULL
        default_title = span_title(first, last)

    return VacationPlanCreate(
        user_id=user_id,
        title=title or default_title,
        start_date=first,
        end_date=last,
        leave_days_used=cost,
        leave_type=leave_type,
        destinations=list(destinations),
        notes=notes,
    )


def group_consecutive(plans: Sequence) -> List[list]:
    """Group plans whose gap to the running group end is at most one day."""
    ordered = sorted(plans, key=lambda p: (p.start_date, p.end_date, p.id))
    groups: List[list] = []
    group_end: Optional[dt.date] = None
    for plan in ordered:
        if groups and (plan.start_date - group_end).days <= 1:
            groups[-1].append(plan)
            group_end = max(group_end, plan.end_date)
        else:
            groups.append([plan])
            group_end = plan.end_date
    return groups


def merged_plan(user_id: int, group: Sequence) -> VacationPlanCreate:
    start = min(p.start_date for p in group)
    end = max(p.end_date for p in group)

    destinations: List[str] = []
    for plan in group:
        for code in plan.destinations:
            if code not in destinations:
                destinations.append(code)

    leave_types = {p.leave_type for p in group}
    notes = "\n".join(p.notes for p in group if p.notes) or None

    return VacationPlanCreate(
        user_id=user_id,
        title=span_title(start, end),
        start_date=start,
        end_date=end,
        leave_days_used=sum(p.leave_days_used for p in group),
        leave_type=leave_types.pop() if len(leave_types) == 1 else LeaveType.FULL,
        destinations=destinations,
        notes=notes,
    )
