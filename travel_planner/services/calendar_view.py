import datetime as dt

from travel_planner.core.exceptions import InvalidRequestError
from travel_planner.schemas.calendar import (
    CalendarDay,
    CalendarMonthResponse,
    DayHolidaysResponse,
    HolidayAnnotationResponse,
)
from travel_planner.services.base import BaseService
from travel_planner.services.holiday_resolver import HolidayResolver, is_weekend
from travel_planner.services.selection import find_covering_plan

GRID_DAYS = 42  # six Sunday-first weeks


def month_grid(year: int, month: int):
    """The 42 dates shown for a month, starting on the Sunday on or before the 1st."""
    first = dt.date(year, month, 1)
    offset = (first.weekday() + 1) % 7
    start = first - dt.timedelta(days=offset)
    return [start + dt.timedelta(days=i) for i in range(GRID_DAYS)]


def _annotations(items):
    return [
        HolidayAnnotationResponse(name=a.name, type=a.type, country=a.country, source=a.source)
        for a in items
    ]


class CalendarViewService(BaseService):
    def __init__(self, repos, resolver: HolidayResolver = None):
        super().__init__(repos)
        self.resolver = resolver or HolidayResolver(repos)

    def month(self, user_id: int, year: int, month: int) -> CalendarMonthResponse:
        if not 1 <= month <= 12:
            raise InvalidRequestError("month must be between 1 and 12", details={"month": month})
        self.require_user(user_id)

        days = month_grid(year, month)
        calendar = self.resolver.calendar_between(user_id, days[0], days[-1])
        plans = self.repos.plans.list(user_id)

        cells = []
        for day in days:
            plan = find_covering_plan(day, plans)
            cells.append(CalendarDay(
                date=day,
                in_current_month=day.month == month,
                is_weekend=is_weekend(day),
                is_workable=calendar.is_workable(day),
                holidays=_annotations(calendar.holidays_on(day)),
                plan_id=plan.id if plan else None,
            ))
        return CalendarMonthResponse(
            user_id=user_id,
            year=year,
            month=month,
            label=f"{year}년 {month}월",
            days=cells,
        )

    def day(self, user_id: int, day: dt.date) -> DayHolidaysResponse:
        self.require_user(user_id)
        calendar = self.resolver.calendar_for(user_id, [day.year])
        return DayHolidaysResponse(
            date=day,
            is_workable=calendar.is_workable(day),
            holidays=_annotations(calendar.holidays_on(day)),
        )
