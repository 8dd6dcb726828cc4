"""
Vacation Plan Service Layer

Router -> Service (this module) -> Repositories.

CRUD over vacation plans, the explicit consecutive-plan merge pass, and the
calendar selection commit that ties the selection state machine to storage.
A failed write leaves previously stored plans untouched and is never retried.
"""
import datetime as dt
from typing import List, Optional, Tuple

from travel_planner.core.exceptions import (
    InvalidRequestError,
    NotFoundError,
    PlanOverlapError,
)
from travel_planner.repositories.base import Repositories
from travel_planner.schemas.calendar import (
    SelectionCommitResponse,
    SelectionPreviewResponse,
    SelectionRequest,
)
from travel_planner.schemas.plan import (
    MergeResultResponse,
    VacationPlanCreate,
    VacationPlanResponse,
    VacationPlanUpdate,
)
from travel_planner.services.base import BaseService
from travel_planner.services.holiday_resolver import HolidayResolver
from travel_planner.services.selection import (
    CalendarSelection,
    PressAction,
    build_plan,
    group_consecutive,
    merged_plan,
    overlapping_plans,
)


class VacationPlanService(BaseService):
    def __init__(self, repos: Repositories, resolver: Optional[HolidayResolver] = None):
        super().__init__(repos)
        self.resolver = resolver or HolidayResolver(repos)

    # --- CRUD ---

    def list_plans(self, user_id: int) -> List[VacationPlanResponse]:
        self.require_user(user_id)
        return self.repos.plans.list(user_id)

    def get_plan(self, plan_id: int) -> VacationPlanResponse:
        plan = self.repos.plans.get(plan_id)
        if plan is None:
            raise NotFoundError("Vacation plan", plan_id)
        return plan

    def create_plan(self, data: VacationPlanCreate) -> VacationPlanResponse:
        self.require_user(data.user_id)
        plan = self.repos.plans.create(data)
        self.log_info(f"Created vacation plan {plan.id} for user {plan.user_id}", plan_id=plan.id)
        return plan

    def update_plan(self, plan_id: int, update: VacationPlanUpdate) -> VacationPlanResponse:
        plan = self.get_plan(plan_id)
        changes = update.model_dump(exclude_unset=True)
        if "destinations" in changes:
            changes["destinations"] = [code.upper() for code in changes["destinations"]]

        start = changes.get("start_date", plan.start_date)
        end = changes.get("end_date", plan.end_date)
        if start > end:
            raise InvalidRequestError(
                "startDate must not be after endDate",
                details={"startDate": start.isoformat(), "endDate": end.isoformat()},
            )
        if not changes:
            return plan
        return self.repos.plans.update(plan_id, changes)

    def delete_plan(self, plan_id: int) -> None:
        """Idempotent: an unknown id is silently accepted."""
        self.repos.plans.delete(plan_id)
        self.log_info(f"Deleted vacation plan {plan_id}", plan_id=plan_id)

    def reset_plans(self, user_id: int) -> int:
        self.require_user(user_id)
        deleted = self.repos.plans.delete_all(user_id)
        self.log_info(f"Reset {deleted} vacation plan(s) for user {user_id}")
        return deleted

    # --- Merge ---

    def merge_consecutive(self, user_id: int) -> MergeResultResponse:
        """
        Single deterministic pass: every group of 2+ plans separated by at
        most one day is replaced by one plan spanning the group.

        Each merged plan is separated from its neighbours by more than a
        day, so a second pass over the result finds nothing to do.
        """
        self.require_user(user_id)
        plans = self.repos.plans.list(user_id)

        merged: List[VacationPlanResponse] = []
        removed: List[int] = []
        for group in group_consecutive(plans):
            if len(group) < 2:
                continue
            proposal = merged_plan(user_id, group)
            group_ids = [p.id for p in group]
            new_plan = self.repos.plans.replace(user_id, group_ids, proposal)
            merged.append(new_plan)
            removed.extend(group_ids)
            self.log_info(
                f"Merged plans {group_ids} into plan {new_plan.id}",
                merged_plan_id=new_plan.id,
            )
        return MergeResultResponse(merged=merged, removed_plan_ids=removed)

    # --- Calendar selection ---

    def _session(self, user_id: int, anchor: dt.date, current: dt.date) -> Tuple[CalendarSelection, list]:
        plans = self.repos.plans.list(user_id)
        calendar = self.resolver.calendar_between(user_id, anchor, current)
        return CalendarSelection(calendar.is_workable, plans), plans

    def preview_selection(self, user_id: int, request: SelectionRequest) -> SelectionPreviewResponse:
        self.require_user(user_id)
        current = request.current or request.anchor
        selection, _ = self._session(user_id, request.anchor, current)

        pressed = selection.press(request.anchor)
        if pressed.action == PressAction.DELETE:
            return SelectionPreviewResponse(state="idle", dates=[], covering_plan_id=pressed.plan.id)
        if pressed.action == PressAction.IGNORE:
            return SelectionPreviewResponse(state="idle", dates=[])

        if current != request.anchor:
            selection.move(current)
        dates = list(selection.dates)
        state = selection.state.value
        selection.cancel()

        leave_days = float(len(dates)) if len(dates) > 1 else (
            request.leave_type.cost if request.leave_type else 0.0
        )
        return SelectionPreviewResponse(
            state=state,
            dates=dates,
            start_date=min(dates) if dates else None,
            end_date=max(dates) if dates else None,
            leave_days_used=leave_days,
            requires_leave_type=len(dates) == 1 and request.leave_type is None,
        )

    def commit_selection(self, user_id: int, request: SelectionRequest) -> SelectionCommitResponse:
        self.require_user(user_id)
        current = request.current or request.anchor
        selection, plans = self._session(user_id, request.anchor, current)

        pressed = selection.press(request.anchor)
        if pressed.action == PressAction.DELETE:
            self.repos.plans.delete(pressed.plan.id)
            self.log_info(
                f"Press on {request.anchor} removed plan {pressed.plan.id}",
                plan_id=pressed.plan.id,
            )
            return SelectionCommitResponse(action="deleted", plan=pressed.plan)
        if pressed.action == PressAction.IGNORE:
            return SelectionCommitResponse(action="ignored")

        if current != request.anchor:
            selection.move(current)
        dates = selection.release()

        destinations = [d.country_code for d in self.repos.destinations.list(user_id)]
        draft = build_plan(
            user_id,
            dates,
            leave_type=request.leave_type,
            destinations=destinations,
            title=request.title,
            notes=request.notes,
        )

        clashes = overlapping_plans(draft.start_date, draft.end_date, plans)
        if clashes:
            raise PlanOverlapError([p.id for p in clashes])

        plan = self.repos.plans.create(draft)
        self.log_info(
            f"Created plan {plan.id} from selection {plan.start_date}..{plan.end_date}",
            plan_id=plan.id,
            leave_days_used=plan.leave_days_used,
        )

        response = SelectionCommitResponse(action="created", plan=plan)
        if request.merge:
            result = self.merge_consecutive(user_id)
            response.merged = result.merged
            response.removed_plan_ids = result.removed_plan_ids
        return response
