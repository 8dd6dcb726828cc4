from typing import List, Optional

from travel_planner.core.config import settings
from travel_planner.core.exceptions import ConflictError, InvalidRequestError
from travel_planner.repositories.base import Repositories
from travel_planner.schemas.holiday import (
    CustomHolidayCreate,
    CustomHolidayResponse,
    DestinationCreate,
    DestinationResponse,
)
from travel_planner.schemas.user import UserCreate, UserResponse
from travel_planner.services.base import BaseService
from travel_planner.services.reference_data import ReferenceDataProvider, reference_data

DEFAULT_USERNAME = "user1"


class ProfileService(BaseService):
    """Users, company holidays and travel destinations."""

    def __init__(self, repos: Repositories, reference: ReferenceDataProvider = reference_data):
        super().__init__(repos)
        self.reference = reference

    def get_user(self, user_id: int) -> UserResponse:
        return self.require_user(user_id)

    def create_user(self, data: UserCreate) -> UserResponse:
        user = self.repos.users.create(data)
        self.log_info(f"Created user {user.id} ({user.username})", user_id=user.id)
        return user

    # --- Company holidays ---

    def list_custom_holidays(self, user_id: int) -> List[CustomHolidayResponse]:
        self.require_user(user_id)
        return self.repos.custom_holidays.list(user_id)

    def add_custom_holiday(self, data: CustomHolidayCreate) -> CustomHolidayResponse:
        self.require_user(data.user_id)
        return self.repos.custom_holidays.create(data)

    def delete_custom_holiday(self, holiday_id: int) -> None:
        self.repos.custom_holidays.delete(holiday_id)

    # --- Destinations ---

    def list_destinations(self, user_id: int) -> List[DestinationResponse]:
        self.require_user(user_id)
        return self.repos.destinations.list(user_id)

    def add_destination(self, data: DestinationCreate) -> DestinationResponse:
        self.require_user(data.user_id)
        if self.repos.destinations.get_by_code(data.user_id, data.country_code):
            raise ConflictError(
                f"Destination '{data.country_code}' is already selected",
                details={"countryCode": data.country_code},
            )
        if not data.country_name:
            country = self.reference.country(data.country_code)
            if country is None:
                raise InvalidRequestError(
                    f"Unknown country code '{data.country_code}'; countryName is required"
                )
            data = data.model_copy(update={"country_name": country.name_kr})
        return self.repos.destinations.create(data)

    def remove_destination(self, user_id: int, country_code: str) -> None:
        self.repos.destinations.delete(user_id, country_code.upper())


def seed_default_user(repos: Repositories) -> Optional[UserResponse]:
    """Make sure the single default user exists (id 1 on a fresh store)."""
    existing = repos.users.get_by_username(DEFAULT_USERNAME)
    if existing:
        return existing
    return repos.users.create(
        UserCreate(username=DEFAULT_USERNAME, total_leave_days=settings.default_total_leave_days)
    )
