"""
Process-memory repositories. Everything is lost on restart.
"""
import itertools
import threading
from typing import Any, Dict, Iterable, List, Optional

from travel_planner.core.exceptions import ConflictError, NotFoundError
from travel_planner.repositories.base import (
    CustomHolidayRepository,
    DestinationRepository,
    Repositories,
    UserRepository,
    VacationPlanRepository,
)
from travel_planner.schemas.holiday import (
    CustomHolidayCreate,
    CustomHolidayResponse,
    DestinationCreate,
    DestinationResponse,
)
from travel_planner.schemas.plan import VacationPlanCreate, VacationPlanResponse
from travel_planner.schemas.user import UserCreate, UserResponse


class _MemoryTable:
    """Insertion-ordered id -> record map with its own id sequence and lock."""

    def __init__(self):
        self.rows: Dict[int, Any] = {}
        self.lock = threading.RLock()
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)


class MemoryUserRepository(UserRepository):
    def __init__(self):
        self._table = _MemoryTable()

    def get(self, user_id: int) -> Optional[UserResponse]:
        return self._table.rows.get(user_id)

    def get_by_username(self, username: str) -> Optional[UserResponse]:
        return next((u for u in self._table.rows.values() if u.username == username), None)

    def create(self, data: UserCreate) -> UserResponse:
        with self._table.lock:
            if self.get_by_username(data.username):
                raise ConflictError(f"Username '{data.username}' is already taken")
            user = UserResponse(id=self._table.next_id(), **data.model_dump())
            self._table.rows[user.id] = user
            return user

    def update(self, user_id: int, changes: Dict[str, Any]) -> UserResponse:
        with self._table.lock:
            user = self._table.rows.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            updated = UserResponse.model_validate({**user.model_dump(), **changes})
            self._table.rows[user_id] = updated
            return updated


class MemoryCustomHolidayRepository(CustomHolidayRepository):
    def __init__(self):
        self._table = _MemoryTable()

    def list(self, user_id: int) -> List[CustomHolidayResponse]:
        return [h for h in self._table.rows.values() if h.user_id == user_id]

    def get(self, holiday_id: int) -> Optional[CustomHolidayResponse]:
        return self._table.rows.get(holiday_id)

    def create(self, data: CustomHolidayCreate) -> CustomHolidayResponse:
        with self._table.lock:
            holiday = CustomHolidayResponse(id=self._table.next_id(), **data.model_dump())
            self._table.rows[holiday.id] = holiday
            return holiday

    def delete(self, holiday_id: int) -> None:
        with self._table.lock:
            self._table.rows.pop(holiday_id, None)


class MemoryDestinationRepository(DestinationRepository):
    def __init__(self):
        self._table = _MemoryTable()

    def list(self, user_id: int) -> List[DestinationResponse]:
        return [d for d in self._table.rows.values() if d.user_id == user_id]

    def get_by_code(self, user_id: int, country_code: str) -> Optional[DestinationResponse]:
        return next(
            (d for d in self._table.rows.values()
             if d.user_id == user_id and d.country_code == country_code),
            None,
        )

    def create(self, data: DestinationCreate) -> DestinationResponse:
        with self._table.lock:
            if self.get_by_code(data.user_id, data.country_code):
                raise ConflictError(f"Destination '{data.country_code}' is already selected")
            destination = DestinationResponse(id=self._table.next_id(), **data.model_dump())
            self._table.rows[destination.id] = destination
            return destination

    def delete(self, user_id: int, country_code: str) -> None:
        with self._table.lock:
            destination = self.get_by_code(user_id, country_code)
            if destination:
                del self._table.rows[destination.id]


class MemoryVacationPlanRepository(VacationPlanRepository):
    def __init__(self):
        self._table = _MemoryTable()

    def list(self, user_id: int) -> List[VacationPlanResponse]:
        with self._table.lock:
            return [p for p in self._table.rows.values() if p.user_id == user_id]

    def get(self, plan_id: int) -> Optional[VacationPlanResponse]:
        return self._table.rows.get(plan_id)

    def _insert(self, data: VacationPlanCreate) -> VacationPlanResponse:
        plan = VacationPlanResponse(id=self._table.next_id(), **data.model_dump())
        self._table.rows[plan.id] = plan
        return plan

    def create(self, data: VacationPlanCreate) -> VacationPlanResponse:
        with self._table.lock:
            return self._insert(data)

    def update(self, plan_id: int, changes: Dict[str, Any]) -> VacationPlanResponse:
        with self._table.lock:
            plan = self._table.rows.get(plan_id)
            if plan is None:
                raise NotFoundError("Vacation plan", plan_id)
            updated = VacationPlanResponse.model_validate({**plan.model_dump(), **changes})
            self._table.rows[plan_id] = updated
            return updated

    def delete(self, plan_id: int) -> None:
        with self._table.lock:
            self._table.rows.pop(plan_id, None)

    def delete_all(self, user_id: int) -> int:
        with self._table.lock:
            doomed = [pid for pid, p in self._table.rows.items() if p.user_id == user_id]
            for pid in doomed:
                del self._table.rows[pid]
            return len(doomed)

    def replace(self, user_id: int, remove_ids: Iterable[int], data: VacationPlanCreate) -> VacationPlanResponse:
        with self._table.lock:
            # Build the new plan first so a validation failure leaves the table untouched
            plan = VacationPlanResponse(id=self._table.next_id(), **data.model_dump())
            for pid in remove_ids:
                existing = self._table.rows.get(pid)
                if existing is not None and existing.user_id == user_id:
                    del self._table.rows[pid]
            self._table.rows[plan.id] = plan
            return plan


def build_memory_repositories() -> Repositories:
    return Repositories(
        users=MemoryUserRepository(),
        custom_holidays=MemoryCustomHolidayRepository(),
        destinations=MemoryDestinationRepository(),
        plans=MemoryVacationPlanRepository(),
    )
