from datetime import date

import pytest

from travel_planner.core.exceptions import (
    EmptySelectionError,
    InvalidRequestError,
    LeaveTypeRequiredError,
    NotFoundError,
    PlanOverlapError,
)
from travel_planner.models.vacation_plan import LeaveType
from travel_planner.schemas.calendar import SelectionRequest
from travel_planner.schemas.holiday import CustomHolidayCreate, DestinationCreate
from travel_planner.schemas.plan import VacationPlanCreate, VacationPlanUpdate
from travel_planner.services.holiday_resolver import HolidayResolver
from travel_planner.services.plan_service import VacationPlanService
from travel_planner.services.reference_data import reference_data


@pytest.fixture
def service(memory_repos):
    return VacationPlanService(memory_repos, HolidayResolver(memory_repos, reference_data, "KR"))


def _create(service, user_id, start, end, cost, **kwargs):
    return service.create_plan(VacationPlanCreate(
        user_id=user_id, title="trip", start_date=start, end_date=end, leave_days_used=cost, **kwargs
    ))


class TestCrud:
    def test_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            service.list_plans(99)

    def test_get_missing_plan(self, service):
        with pytest.raises(NotFoundError):
            service.get_plan(123)

    def test_update_rechecks_range(self, service, user):
        plan = _create(service, user.id, date(2024, 6, 3), date(2024, 6, 5), 3)
        with pytest.raises(InvalidRequestError):
            service.update_plan(plan.id, VacationPlanUpdate(start_date=date(2024, 6, 10)))

    def test_update_partial(self, service, user):
        plan = _create(service, user.id, date(2024, 6, 3), date(2024, 6, 5), 3)
        updated = service.update_plan(plan.id, VacationPlanUpdate(title="오사카", destinations=["jp"]))
        assert updated.title == "오사카"
        assert updated.destinations == ["JP"]
        assert updated.leave_days_used == 3

    def test_reset(self, service, user):
        _create(service, user.id, date(2024, 6, 3), date(2024, 6, 3), 1)
        _create(service, user.id, date(2024, 6, 10), date(2024, 6, 10), 1)
        assert service.reset_plans(user.id) == 2
        assert service.list_plans(user.id) == []


class TestMerge:
    def test_adjacent_plans_merge_with_summed_cost(self, service, user):
        _create(service, user.id, date(2024, 6, 1), date(2024, 6, 2), 0)
        _create(service, user.id, date(2024, 6, 3), date(2024, 6, 4), 2)
        result = service.merge_consecutive(user.id)

        [plan] = service.list_plans(user.id)
        assert plan.start_date == date(2024, 6, 1)
        assert plan.end_date == date(2024, 6, 4)
        assert plan.leave_days_used == 2
        assert result.merged == [plan]
        assert len(result.removed_plan_ids) == 2

    def test_gap_prevents_merge(self, service, user):
        _create(service, user.id, date(2024, 6, 3), date(2024, 6, 3), 1)
        _create(service, user.id, date(2024, 6, 5), date(2024, 6, 5), 1)
        result = service.merge_consecutive(user.id)
        assert result.merged == []
        assert len(service.list_plans(user.id)) == 2

    def test_merge_is_idempotent(self, service, user):
        _create(service, user.id, date(2024, 6, 3), date(2024, 6, 3), 1)
        _create(service, user.id, date(2024, 6, 4), date(2024, 6, 4), 1)
        _create(service, user.id, date(2024, 6, 5), date(2024, 6, 5), 1)
        service.merge_consecutive(user.id)
        first = service.list_plans(user.id)
        assert service.merge_consecutive(user.id).merged == []
        assert service.list_plans(user.id) == first


class TestSelection:
    def test_single_day_commit(self, service, user):
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 4), leave_type=LeaveType.HALF)
        )
        assert response.action == "created"
        assert response.plan.leave_days_used == 0.5
        assert response.plan.title == "반차 (6월 4일(화))"

    def test_single_day_needs_leave_type(self, service, user):
        with pytest.raises(LeaveTypeRequiredError):
            service.commit_selection(user.id, SelectionRequest(anchor=date(2024, 6, 4)))
        assert service.list_plans(user.id) == []

    def test_drag_over_weekend_and_holiday(self, service, user):
        # Wed 6/5 .. Tue 6/11: 6/6 현충일, 6/8-9 weekend
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 5), current=date(2024, 6, 11))
        )
        plan = response.plan
        assert plan.leave_days_used == 4
        assert plan.leave_type == LeaveType.FULL
        assert (plan.start_date, plan.end_date) == (date(2024, 6, 5), date(2024, 6, 11))

    def test_company_holiday_is_skipped(self, service, memory_repos, user):
        memory_repos.custom_holidays.create(
            CustomHolidayCreate(user_id=user.id, date=date(2024, 6, 4), name="창립기념일")
        )
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 3), current=date(2024, 6, 5))
        )
        assert response.plan.leave_days_used == 2

    def test_destinations_are_attached(self, service, memory_repos, user):
        memory_repos.destinations.create(DestinationCreate(user_id=user.id, country_code="JP", country_name="일본"))
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 3), current=date(2024, 6, 4))
        )
        assert response.plan.destinations == ["JP"]

    def test_press_on_planned_date_deletes(self, service, user):
        plan = _create(service, user.id, date(2024, 6, 3), date(2024, 6, 5), 3)
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 4), current=date(2024, 6, 12))
        )
        assert response.action == "deleted"
        assert response.plan.id == plan.id
        assert service.list_plans(user.id) == []

    def test_press_on_weekend_is_ignored(self, service, user):
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 8), leave_type=LeaveType.FULL)
        )
        assert response.action == "ignored"
        assert service.list_plans(user.id) == []

    def test_overlap_is_rejected(self, service, user):
        existing = _create(service, user.id, date(2024, 6, 5), date(2024, 6, 5), 1)
        with pytest.raises(PlanOverlapError) as exc:
            service.commit_selection(
                user.id, SelectionRequest(anchor=date(2024, 6, 3), current=date(2024, 6, 7))
            )
        assert exc.value.details == {"planIds": [existing.id]}

    def test_commit_with_merge(self, service, user):
        _create(service, user.id, date(2024, 6, 3), date(2024, 6, 4), 2)
        response = service.commit_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 5), leave_type=LeaveType.FULL, merge=True)
        )
        assert response.action == "created"
        [merged] = response.merged
        assert (merged.start_date, merged.end_date) == (date(2024, 6, 3), date(2024, 6, 5))
        assert merged.leave_days_used == 3
        assert len(service.list_plans(user.id)) == 1

    def test_preview_does_not_write(self, service, user):
        preview = service.preview_selection(
            user.id, SelectionRequest(anchor=date(2024, 6, 7), current=date(2024, 6, 10))
        )
        assert preview.state == "extending"
        assert preview.dates == [date(2024, 6, 7), date(2024, 6, 10)]
        assert preview.leave_days_used == 2
        assert not preview.requires_leave_type
        assert service.list_plans(user.id) == []

    def test_preview_single_day_flags_leave_type(self, service, user):
        preview = service.preview_selection(user.id, SelectionRequest(anchor=date(2024, 6, 7)))
        assert preview.state == "selecting"
        assert preview.requires_leave_type

    def test_preview_on_planned_date(self, service, user):
        plan = _create(service, user.id, date(2024, 6, 3), date(2024, 6, 3), 1)
        preview = service.preview_selection(user.id, SelectionRequest(anchor=date(2024, 6, 3)))
        assert preview.covering_plan_id == plan.id
        assert preview.dates == []


def test_empty_selection_error_is_a_validation_error():
    assert EmptySelectionError().status_code == 400
