from typing import List

from fastapi import APIRouter, Depends, Path

from travel_planner.dependencies import get_reference_data
from travel_planner.schemas.reference import CountryDirectory, Holiday, NewsItem, TravelInsight
from travel_planner.services.reference_data import ReferenceDataProvider

router = APIRouter(tags=["Reference Data"])


@router.get("/holidays/{country_code}/{year}", response_model=List[Holiday])
def get_holidays(
    country_code: str,
    year: int,
    reference: ReferenceDataProvider = Depends(get_reference_data)
):
    """Public holidays; unknown countries or years return an empty list."""
    return reference.holidays_for(country_code, year)


@router.get("/insights/{country_code}/{month}/{year}", response_model=TravelInsight)
def get_insights(
    country_code: str,
    month: int = Path(..., ge=1, le=12),
    year: int = Path(...),
    reference: ReferenceDataProvider = Depends(get_reference_data)
):
    return reference.insights_for(country_code, month, year)


@router.get("/news/travel", response_model=List[NewsItem])
def travel_news(reference: ReferenceDataProvider = Depends(get_reference_data)):
    return reference.travel_news()


@router.get("/news/holidays", response_model=List[NewsItem])
def holiday_news(reference: ReferenceDataProvider = Depends(get_reference_data)):
    return reference.holiday_news()


@router.get("/countries", response_model=CountryDirectory)
def countries(reference: ReferenceDataProvider = Depends(get_reference_data)):
    return CountryDirectory(
        countries=reference.countries(),
        popular=reference.popular_countries(),
        regions=reference.countries_by_region(),
    )
