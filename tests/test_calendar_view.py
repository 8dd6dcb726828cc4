from datetime import date

import pytest

from travel_planner.core.exceptions import InvalidRequestError
from travel_planner.schemas.plan import VacationPlanCreate
from travel_planner.services.calendar_view import CalendarViewService, month_grid
from travel_planner.services.holiday_resolver import HolidayResolver
from travel_planner.services.reference_data import reference_data


@pytest.fixture
def service(memory_repos):
    return CalendarViewService(memory_repos, HolidayResolver(memory_repos, reference_data, "KR"))


def test_month_grid_starts_on_sunday():
    days = month_grid(2024, 6)
    assert len(days) == 42
    assert days[0] == date(2024, 5, 26)
    assert days[0].weekday() == 6


def test_month_view(service, memory_repos, user):
    plan = memory_repos.plans.create(VacationPlanCreate(
        user_id=user.id, title="trip", start_date=date(2024, 6, 3), end_date=date(2024, 6, 4),
        leave_days_used=2,
    ))
    view = service.month(user.id, 2024, 6)
    assert view.label == "2024년 6월"
    cells = {c.date: c for c in view.days}

    assert cells[date(2024, 6, 6)].holidays[0].name == "현충일"
    assert not cells[date(2024, 6, 6)].is_workable
    assert cells[date(2024, 6, 8)].is_weekend
    assert cells[date(2024, 6, 4)].plan_id == plan.id
    assert cells[date(2024, 6, 5)].plan_id is None
    assert not cells[date(2024, 5, 31)].in_current_month


def test_invalid_month(service, user):
    with pytest.raises(InvalidRequestError):
        service.month(user.id, 2024, 13)


def test_day_view(service, user):
    day = service.day(user.id, date(2024, 5, 15))
    assert not day.is_workable
    assert [h.name for h in day.holidays] == ["부처님 오신날"]
