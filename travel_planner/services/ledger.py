"""
Leave Ledger

remaining = totalLeaveDays - sum(plan.leaveDaysUsed)

Adjustments accept any non-negative number. A balance that goes negative is
accepted and reported, not rejected: over-planning is the user's call.
"""
from typing import Any, Dict, Iterable

from travel_planner.core.exceptions import ConflictError, InvalidRequestError
from travel_planner.schemas.user import LeaveBalanceResponse, UserResponse, UserUpdate
from travel_planner.services.base import BaseService

LEDGER_FIELDS = ("total_leave_days", "used_leave_days")


def planned_leave_days(plans: Iterable) -> float:
    return float(sum(p.leave_days_used for p in plans))


def remaining_leave_days(total_leave_days: float, plans: Iterable) -> float:
    return total_leave_days - planned_leave_days(plans)


class LeaveLedger(BaseService):
    def remaining(self, user_id: int) -> float:
        user = self.require_user(user_id)
        return remaining_leave_days(user.total_leave_days, self.repos.plans.list(user_id))

    def balance(self, user_id: int) -> LeaveBalanceResponse:
        user = self.require_user(user_id)
        plans = self.repos.plans.list(user_id)
        planned = planned_leave_days(plans)
        return LeaveBalanceResponse(
            user_id=user.id,
            total_leave_days=user.total_leave_days,
            used_leave_days=user.used_leave_days,
            planned_leave_days=planned,
            remaining_leave_days=user.total_leave_days - planned,
            plan_count=len(plans),
        )

    def adjust_total(self, user_id: int, new_total: float) -> UserResponse:
        return self._apply(user_id, {"total_leave_days": new_total})

    def adjust_used(self, user_id: int, new_used: float) -> UserResponse:
        return self._apply(user_id, {"used_leave_days": new_used})

    def update_user(self, user_id: int, update: UserUpdate) -> UserResponse:
        return self._apply(user_id, update.model_dump(exclude_unset=True))

    def _apply(self, user_id: int, changes: Dict[str, Any]) -> UserResponse:
        """Single write path for ledger and profile changes."""
        user = self.require_user(user_id)
        for field in LEDGER_FIELDS:
            if field in changes:
                value = changes[field]
                if value is None or value < 0:
                    raise InvalidRequestError(f"{field} must be a non-negative number", details={field: value})
        if changes.get("username") is not None:
            owner = self.repos.users.get_by_username(changes["username"])
            if owner and owner.id != user_id:
                raise ConflictError(f"Username '{changes['username']}' is already taken")
        if not changes:
            return user
        user = self.repos.users.update(user_id, changes)
        self._warn_if_overdrawn(user)
        return user

    def _warn_if_overdrawn(self, user: UserResponse) -> None:
        if user.used_leave_days > user.total_leave_days:
            self.log_warning(
                f"User {user.id} has used more leave than granted",
                user_id=user.id,
                total_leave_days=user.total_leave_days,
                used_leave_days=user.used_leave_days,
            )
