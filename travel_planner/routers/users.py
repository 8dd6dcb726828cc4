from fastapi import APIRouter, Depends

from travel_planner.dependencies import get_ledger, get_profile_service
from travel_planner.schemas.user import LeaveBalanceResponse, UserCreate, UserResponse, UserUpdate
from travel_planner.services.ledger import LeaveLedger
from travel_planner.services.profile_service import ProfileService

router = APIRouter(prefix="/user", tags=["Users"])


@router.post("", response_model=UserResponse)
def create_user(data: UserCreate, service: ProfileService = Depends(get_profile_service)):
    return service.create_user(data)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: ProfileService = Depends(get_profile_service)):
    return service.get_user(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, update: UserUpdate, ledger: LeaveLedger = Depends(get_ledger)):
    """Adjust the leave ledger. usedLeaveDays may exceed totalLeaveDays."""
    return ledger.update_user(user_id, update)


@router.get("/{user_id}/balance", response_model=LeaveBalanceResponse)
def get_balance(user_id: int, ledger: LeaveLedger = Depends(get_ledger)):
    return ledger.balance(user_id)
