from typing import List

from fastapi import APIRouter, Depends

from travel_planner.core.schemas import SuccessResponse
from travel_planner.dependencies import get_profile_service
from travel_planner.schemas.holiday import DestinationCreate, DestinationResponse
from travel_planner.services.profile_service import ProfileService

router = APIRouter(tags=["Destinations"])


@router.get("/user/{user_id}/destinations", response_model=List[DestinationResponse])
def list_destinations(user_id: int, service: ProfileService = Depends(get_profile_service)):
    return service.list_destinations(user_id)


@router.post("/destinations", response_model=DestinationResponse)
def add_destination(data: DestinationCreate, service: ProfileService = Depends(get_profile_service)):
    return service.add_destination(data)


@router.delete("/user/{user_id}/destinations/{country_code}", response_model=SuccessResponse)
def remove_destination(user_id: int, country_code: str, service: ProfileService = Depends(get_profile_service)):
    service.remove_destination(user_id, country_code)
    return SuccessResponse()
