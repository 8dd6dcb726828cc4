import logging

from travel_planner.core.exceptions import NotFoundError
from travel_planner.repositories.base import Repositories
from travel_planner.schemas.user import UserResponse


class BaseService:
    """Common plumbing for services working against the injected repositories."""

    def __init__(self, repos: Repositories):
        self.repos = repos
        self._logger = logging.getLogger(self.__class__.__module__)

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    def require_user(self, user_id: int) -> UserResponse:
        user = self.repos.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user
