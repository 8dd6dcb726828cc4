"""
Repository interfaces.

Services only talk to these abstractions; the concrete backend (process
memory or SQLAlchemy) is chosen at startup and injected per request.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from travel_planner.schemas.holiday import (
    CustomHolidayCreate,
    CustomHolidayResponse,
    DestinationCreate,
    DestinationResponse,
)
from travel_planner.schemas.plan import VacationPlanCreate, VacationPlanResponse
from travel_planner.schemas.user import UserCreate, UserResponse


class UserRepository(ABC):
    @abstractmethod
    def get(self, user_id: int) -> Optional[UserResponse]: ...

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[UserResponse]: ...

    @abstractmethod
    def create(self, data: UserCreate) -> UserResponse: ...

    @abstractmethod
    def update(self, user_id: int, changes: Dict[str, Any]) -> UserResponse:
        """Apply `changes` and return the new state. Raises NotFoundError."""


class CustomHolidayRepository(ABC):
    @abstractmethod
    def list(self, user_id: int) -> List[CustomHolidayResponse]: ...

    @abstractmethod
    def get(self, holiday_id: int) -> Optional[CustomHolidayResponse]: ...

    @abstractmethod
    def create(self, data: CustomHolidayCreate) -> CustomHolidayResponse: ...

    @abstractmethod
    def delete(self, holiday_id: int) -> None:
        """Deleting an unknown id is a no-op."""


class DestinationRepository(ABC):
    @abstractmethod
    def list(self, user_id: int) -> List[DestinationResponse]:
        """Destinations in the order they were added."""

    @abstractmethod
    def get_by_code(self, user_id: int, country_code: str) -> Optional[DestinationResponse]: ...

    @abstractmethod
    def create(self, data: DestinationCreate) -> DestinationResponse:
        """Raises ConflictError when (user_id, country_code) already exists."""

    @abstractmethod
    def delete(self, user_id: int, country_code: str) -> None: ...


class VacationPlanRepository(ABC):
    @abstractmethod
    def list(self, user_id: int) -> List[VacationPlanResponse]:
        """Plans in insertion order. Callers sort when they need to."""

    @abstractmethod
    def get(self, plan_id: int) -> Optional[VacationPlanResponse]: ...

    @abstractmethod
    def create(self, data: VacationPlanCreate) -> VacationPlanResponse: ...

    @abstractmethod
    def update(self, plan_id: int, changes: Dict[str, Any]) -> VacationPlanResponse:
        """Apply `changes` and return the new state. Raises NotFoundError."""

    @abstractmethod
    def delete(self, plan_id: int) -> None:
        """Deleting an unknown id is a no-op."""

    @abstractmethod
    def delete_all(self, user_id: int) -> int:
        """Bulk reset. Returns the number of plans removed."""

    @abstractmethod
    def replace(self, user_id: int, remove_ids: Iterable[int], data: VacationPlanCreate) -> VacationPlanResponse:
        """Atomically delete `remove_ids` and create `data`. All or nothing."""


@dataclass
class Repositories:
    users: UserRepository
    custom_holidays: CustomHolidayRepository
    destinations: DestinationRepository
    plans: VacationPlanRepository
