"""
SQLAlchemy-backed repositories.

Each call opens its own session from the injected factory and commits (or
rolls back) before returning, so every repository call is one transaction.
"""
import enum
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from travel_planner.core.exceptions import ConflictError, NotFoundError
from travel_planner.models.custom_holiday import CustomHoliday
from travel_planner.models.destination import SelectedDestination
from travel_planner.models.user import User
from travel_planner.models.vacation_plan import VacationPlan
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

logger = logging.getLogger(__name__)


def _column_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Enums are stored by value in plain String columns."""
    return {k: (v.value if isinstance(v, enum.Enum) else v) for k, v in values.items()}


class _SqlRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _transaction(self):
        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


class SqlUserRepository(_SqlRepository, UserRepository):
    def get(self, user_id: int) -> Optional[UserResponse]:
        with self._transaction() as db:
            user = db.get(User, user_id)
            return UserResponse.model_validate(user) if user else None

    def get_by_username(self, username: str) -> Optional[UserResponse]:
        with self._transaction() as db:
            user = db.query(User).filter(User.username == username).first()
            return UserResponse.model_validate(user) if user else None

    def create(self, data: UserCreate) -> UserResponse:
        try:
            with self._transaction() as db:
                user = User(**data.model_dump())
                db.add(user)
                db.flush()
                return UserResponse.model_validate(user)
        except IntegrityError:
            raise ConflictError(f"Username '{data.username}' is already taken")

    def update(self, user_id: int, changes: Dict[str, Any]) -> UserResponse:
        with self._transaction() as db:
            user = db.get(User, user_id)
            if not user:
                raise NotFoundError("User", user_id)
            for key, value in _column_values(changes).items():
                setattr(user, key, value)
            db.flush()
            return UserResponse.model_validate(user)


class SqlCustomHolidayRepository(_SqlRepository, CustomHolidayRepository):
    def list(self, user_id: int) -> List[CustomHolidayResponse]:
        with self._transaction() as db:
            rows = db.query(CustomHoliday).filter(
                CustomHoliday.user_id == user_id
            ).order_by(CustomHoliday.id).all()
            return [CustomHolidayResponse.model_validate(r) for r in rows]

    def get(self, holiday_id: int) -> Optional[CustomHolidayResponse]:
        with self._transaction() as db:
            row = db.get(CustomHoliday, holiday_id)
            return CustomHolidayResponse.model_validate(row) if row else None

    def create(self, data: CustomHolidayCreate) -> CustomHolidayResponse:
        with self._transaction() as db:
            row = CustomHoliday(**data.model_dump())
            db.add(row)
            db.flush()
            return CustomHolidayResponse.model_validate(row)

    def delete(self, holiday_id: int) -> None:
        with self._transaction() as db:
            db.query(CustomHoliday).filter(CustomHoliday.id == holiday_id).delete(
                synchronize_session=False
            )


class SqlDestinationRepository(_SqlRepository, DestinationRepository):
    def list(self, user_id: int) -> List[DestinationResponse]:
        with self._transaction() as db:
            rows = db.query(SelectedDestination).filter(
                SelectedDestination.user_id == user_id
            ).order_by(SelectedDestination.id).all()
            return [DestinationResponse.model_validate(r) for r in rows]

    def get_by_code(self, user_id: int, country_code: str) -> Optional[DestinationResponse]:
        with self._transaction() as db:
            row = db.query(SelectedDestination).filter(
                SelectedDestination.user_id == user_id,
                SelectedDestination.country_code == country_code
            ).first()
            return DestinationResponse.model_validate(row) if row else None

    def create(self, data: DestinationCreate) -> DestinationResponse:
        try:
            with self._transaction() as db:
                row = SelectedDestination(**data.model_dump())
                db.add(row)
                db.flush()
                return DestinationResponse.model_validate(row)
        except IntegrityError:
            raise ConflictError(f"Destination '{data.country_code}' is already selected")

    def delete(self, user_id: int, country_code: str) -> None:
        with self._transaction() as db:
            db.query(SelectedDestination).filter(
                SelectedDestination.user_id == user_id,
                SelectedDestination.country_code == country_code
            ).delete(synchronize_session=False)


class SqlVacationPlanRepository(_SqlRepository, VacationPlanRepository):
    def list(self, user_id: int) -> List[VacationPlanResponse]:
        with self._transaction() as db:
            rows = db.query(VacationPlan).filter(
                VacationPlan.user_id == user_id
            ).order_by(VacationPlan.id).all()
            return [VacationPlanResponse.model_validate(r) for r in rows]

    def get(self, plan_id: int) -> Optional[VacationPlanResponse]:
        with self._transaction() as db:
            row = db.get(VacationPlan, plan_id)
            return VacationPlanResponse.model_validate(row) if row else None

    def create(self, data: VacationPlanCreate) -> VacationPlanResponse:
        with self._transaction() as db:
            row = VacationPlan(**_column_values(data.model_dump()))
            db.add(row)
            db.flush()
            return VacationPlanResponse.model_validate(row)

    def update(self, plan_id: int, changes: Dict[str, Any]) -> VacationPlanResponse:
        with self._transaction() as db:
            row = db.get(VacationPlan, plan_id)
            if not row:
                raise NotFoundError("Vacation plan", plan_id)
            for key, value in _column_values(changes).items():
                setattr(row, key, value)
            db.flush()
            return VacationPlanResponse.model_validate(row)

    def delete(self, plan_id: int) -> None:
        with self._transaction() as db:
            db.query(VacationPlan).filter(VacationPlan.id == plan_id).delete(
                synchronize_session=False
            )

    def delete_all(self, user_id: int) -> int:
        with self._transaction() as db:
            return db.query(VacationPlan).filter(VacationPlan.user_id == user_id).delete(
                synchronize_session=False
            )

    def replace(self, user_id: int, remove_ids: Iterable[int], data: VacationPlanCreate) -> VacationPlanResponse:
        remove_ids = list(remove_ids)
        with self._transaction() as db:
            if remove_ids:
                db.query(VacationPlan).filter(
                    VacationPlan.user_id == user_id,
                    VacationPlan.id.in_(remove_ids)
                ).delete(synchronize_session=False)
            row = VacationPlan(**_column_values(data.model_dump()))
            db.add(row)
            db.flush()
            logger.info(f"Replaced plans {remove_ids} with plan {row.id} for user {user_id}")
            return VacationPlanResponse.model_validate(row)


def build_sql_repositories(session_factory: sessionmaker) -> Repositories:
    return Repositories(
        users=SqlUserRepository(session_factory),
        custom_holidays=SqlCustomHolidayRepository(session_factory),
        destinations=SqlDestinationRepository(session_factory),
        plans=SqlVacationPlanRepository(session_factory),
    )
