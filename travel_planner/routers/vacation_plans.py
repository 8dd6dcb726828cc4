from typing import List

from fastapi import APIRouter, Depends

from travel_planner.core.schemas import SuccessResponse
from travel_planner.dependencies import get_plan_service
from travel_planner.schemas.plan import (
    MergeResultResponse,
    ResetResponse,
    VacationPlanCreate,
    VacationPlanResponse,
    VacationPlanUpdate,
)
from travel_planner.services.plan_service import VacationPlanService

router = APIRouter(tags=["Vacation Plans"])


@router.get("/user/{user_id}/vacation-plans", response_model=List[VacationPlanResponse])
def list_vacation_plans(user_id: int, service: VacationPlanService = Depends(get_plan_service)):
    """Plans in the order they were created."""
    return service.list_plans(user_id)


@router.delete("/user/{user_id}/vacation-plans", response_model=ResetResponse)
def reset_vacation_plans(user_id: int, service: VacationPlanService = Depends(get_plan_service)):
    return ResetResponse(deleted=service.reset_plans(user_id))


@router.post("/user/{user_id}/vacation-plans/merge", response_model=MergeResultResponse)
def merge_vacation_plans(user_id: int, service: VacationPlanService = Depends(get_plan_service)):
    return service.merge_consecutive(user_id)


@router.post("/vacation-plans", response_model=VacationPlanResponse)
def create_vacation_plan(data: VacationPlanCreate, service: VacationPlanService = Depends(get_plan_service)):
    return service.create_plan(data)


@router.patch("/vacation-plans/{plan_id}", response_model=VacationPlanResponse)
def update_vacation_plan(
    plan_id: int,
    update: VacationPlanUpdate,
    service: VacationPlanService = Depends(get_plan_service)
):
    return service.update_plan(plan_id, update)


@router.delete("/vacation-plans/{plan_id}", response_model=SuccessResponse)
def delete_vacation_plan(plan_id: int, service: VacationPlanService = Depends(get_plan_service)):
    service.delete_plan(plan_id)
    return SuccessResponse()
