from fastapi import APIRouter, Depends
from travel_planner.dependencies import bind_log_context
from travel_planner.routers import (
    users, custom_holidays, destinations, vacation_plans, calendar, reference
)

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter(dependencies=[Depends(bind_log_context)])

api_router.include_router(users.router)
api_router.include_router(custom_holidays.router)
api_router.include_router(destinations.router)
api_router.include_router(vacation_plans.router)
api_router.include_router(calendar.router)
api_router.include_router(reference.router)
