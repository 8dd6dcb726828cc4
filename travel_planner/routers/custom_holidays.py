from typing import List

from fastapi import APIRouter, Depends

from travel_planner.core.schemas import SuccessResponse
from travel_planner.dependencies import get_profile_service
from travel_planner.schemas.holiday import CustomHolidayCreate, CustomHolidayResponse
from travel_planner.services.profile_service import ProfileService

router = APIRouter(tags=["Company Holidays"])


@router.get("/user/{user_id}/custom-holidays", response_model=List[CustomHolidayResponse])
def list_custom_holidays(user_id: int, service: ProfileService = Depends(get_profile_service)):
    return service.list_custom_holidays(user_id)


@router.post("/custom-holidays", response_model=CustomHolidayResponse)
def create_custom_holiday(data: CustomHolidayCreate, service: ProfileService = Depends(get_profile_service)):
    return service.add_custom_holiday(data)


@router.delete("/custom-holidays/{holiday_id}", response_model=SuccessResponse)
def delete_custom_holiday(holiday_id: int, service: ProfileService = Depends(get_profile_service)):
    service.delete_custom_holiday(holiday_id)
    return SuccessResponse()
