import datetime as dt
from pydantic import Field, field_validator
from typing import Optional

from travel_planner.core.schemas import CamelModel


class CustomHolidayCreate(CamelModel):
    user_id: int
    date: dt.date
    name: str = Field(..., min_length=1, max_length=100)


class CustomHolidayResponse(CustomHolidayCreate):
    id: int


class DestinationCreate(CamelModel):
    user_id: int
    country_code: str = Field(..., pattern="^[A-Za-z]{2}$")
    # Filled in from the country table when omitted
    country_name: Optional[str] = Field(None, min_length=1, max_length=100)

    @field_validator("country_code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.upper()


class DestinationResponse(CamelModel):
    id: int
    user_id: int
    country_code: str
    country_name: str
