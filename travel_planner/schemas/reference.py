import datetime as dt
from pydantic import Field
from typing import Dict, List, Literal

from travel_planner.core.schemas import CamelModel


class Holiday(CamelModel):
    date: dt.date
    name: str
    type: Literal["public", "religious", "observance"]
    country: str
    country_code: str


class CountryInfo(CamelModel):
    code: str
    name: str
    name_kr: str
    emoji: str
    region: str
    popular: bool = False


class TravelEvent(CamelModel):
    name: str
    dates: str


class TravelInsight(CamelModel):
    country_code: str
    country_name: str
    month: int = Field(..., ge=1, le=12)
    year: int
    suitability_score: int
    weather: str
    weather_score: Literal["good", "fair", "poor"]
    flight_cost: str
    flight_cost_score: Literal["low", "medium", "high"]
    crowd_level: str
    crowd_score: Literal["low", "medium", "high"]
    events: List[TravelEvent] = Field(default_factory=list)


class NewsItem(CamelModel):
    title: str
    url: str
    published_at: dt.datetime
    source: str


class CountryDirectory(CamelModel):
    countries: List[CountryInfo]
    popular: List[CountryInfo]
    regions: Dict[str, List[CountryInfo]]
