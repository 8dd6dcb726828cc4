"""
Request-scoped dependencies.

The repository set lives on app.state (built once in the lifespan) and is
handed to services per request; tests swap it with dependency_overrides.
"""
from fastapi import Depends, Request

from travel_planner.core.logging import user_id_var
from travel_planner.repositories.base import Repositories
from travel_planner.services.calendar_view import CalendarViewService
from travel_planner.services.holiday_resolver import HolidayResolver
from travel_planner.services.ledger import LeaveLedger
from travel_planner.services.plan_service import VacationPlanService
from travel_planner.services.profile_service import ProfileService
from travel_planner.services.recommendations import RecommendationService
from travel_planner.services.reference_data import ReferenceDataProvider, reference_data


async def bind_log_context(request: Request) -> None:
    """Tag log records of user-scoped requests with the user id.

    Async so the value is set in the request task and copied into the
    threadpool that runs sync endpoints.
    """
    user_id = request.path_params.get("user_id")
    if user_id is not None:
        user_id_var.set(str(user_id))


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_reference_data() -> ReferenceDataProvider:
    return reference_data


def get_holiday_resolver(
    repos: Repositories = Depends(get_repositories),
    reference: ReferenceDataProvider = Depends(get_reference_data),
) -> HolidayResolver:
    return HolidayResolver(repos, reference)


def get_profile_service(
    repos: Repositories = Depends(get_repositories),
    reference: ReferenceDataProvider = Depends(get_reference_data),
) -> ProfileService:
    return ProfileService(repos, reference)


def get_ledger(repos: Repositories = Depends(get_repositories)) -> LeaveLedger:
    return LeaveLedger(repos)


def get_plan_service(
    repos: Repositories = Depends(get_repositories),
    resolver: HolidayResolver = Depends(get_holiday_resolver),
) -> VacationPlanService:
    return VacationPlanService(repos, resolver)


def get_calendar_service(
    repos: Repositories = Depends(get_repositories),
    resolver: HolidayResolver = Depends(get_holiday_resolver),
) -> CalendarViewService:
    return CalendarViewService(repos, resolver)


def get_recommendation_service(
    repos: Repositories = Depends(get_repositories),
    resolver: HolidayResolver = Depends(get_holiday_resolver),
) -> RecommendationService:
    return RecommendationService(repos, resolver)
