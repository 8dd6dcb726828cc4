"""
Holiday Resolver

Combines home-country public holidays, the user's company holidays and the
holidays of each selected destination into per-date annotations, and decides
which dates are workable (i.e. selectable for leave).
"""
import datetime as dt
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from travel_planner.core.config import settings
from travel_planner.repositories.base import Repositories
from travel_planner.schemas.holiday import CustomHolidayResponse
from travel_planner.schemas.reference import Holiday
from travel_planner.services.base import BaseService
from travel_planner.services.reference_data import ReferenceDataProvider, reference_data

HOME = "home"
COMPANY = "company"
DESTINATION = "destination"


def is_weekend(day: dt.date) -> bool:
    return day.weekday() >= 5  # Saturday, Sunday


@dataclass(frozen=True)
class HolidayAnnotation:
    name: str
    type: str
    country: Optional[str]
    source: str


class HolidayCalendar:
    """
    Immutable snapshot of everything that annotates one user's calendar.

    Destination holidays are informational only: they are reported by
    holidays_on() but never make a date non-workable.
    """

    def __init__(
        self,
        home_holidays: Iterable[Holiday] = (),
        custom_holidays: Iterable[CustomHolidayResponse] = (),
        destination_holidays: Sequence[Tuple[str, Iterable[Holiday]]] = (),
    ):
        self._home: Dict[dt.date, List[HolidayAnnotation]] = defaultdict(list)
        self._company: Dict[dt.date, List[HolidayAnnotation]] = defaultdict(list)
        self._destinations: List[Dict[dt.date, List[HolidayAnnotation]]] = []

        for h in home_holidays:
            self._home[h.date].append(HolidayAnnotation(h.name, h.type, h.country_code, HOME))
        for h in custom_holidays:
            self._company[h.date].append(HolidayAnnotation(h.name, COMPANY, None, COMPANY))
        for country_code, holidays in destination_holidays:
            index: Dict[dt.date, List[HolidayAnnotation]] = defaultdict(list)
            for h in holidays:
                index[h.date].append(HolidayAnnotation(h.name, h.type, country_code, DESTINATION))
            self._destinations.append(index)

    def holidays_on(self, day: dt.date) -> List[HolidayAnnotation]:
        """Home first, then company, then destinations in the order they were added."""
        annotations = list(self._home.get(day, ()))
        annotations.extend(self._company.get(day, ()))
        for index in self._destinations:
            annotations.extend(index.get(day, ()))
        return annotations

    def is_day_off(self, day: dt.date) -> bool:
        return day in self._home or day in self._company

    def is_workable(self, day: dt.date) -> bool:
        return not is_weekend(day) and not self.is_day_off(day)


def holidays_on(
    day: dt.date,
    home_holidays: Iterable[Holiday],
    custom_holidays: Iterable[CustomHolidayResponse],
    destination_holidays: Sequence[Tuple[str, Iterable[Holiday]]],
) -> List[HolidayAnnotation]:
    return HolidayCalendar(home_holidays, custom_holidays, destination_holidays).holidays_on(day)


def years_between(start: dt.date, end: dt.date) -> List[int]:
    return list(range(min(start, end).year, max(start, end).year + 1))


class HolidayResolver(BaseService):
    def __init__(
        self,
        repos: Repositories,
        reference: ReferenceDataProvider = reference_data,
        home_country: Optional[str] = None,
    ):
        super().__init__(repos)
        self.reference = reference
        self.home_country = (home_country or settings.home_country).upper()

    def calendar_for(self, user_id: int, years: Iterable[int]) -> HolidayCalendar:
        years = sorted(set(years))
        home = [h for year in years for h in self.reference.holidays_for(self.home_country, year)]
        custom = self.repos.custom_holidays.list(user_id)
        destinations = []
        for destination in self.repos.destinations.list(user_id):
            code = destination.country_code
            if code == self.home_country:
                continue
            holidays = [h for year in years for h in self.reference.holidays_for(code, year)]
            destinations.append((code, holidays))
        return HolidayCalendar(home, custom, destinations)

    def calendar_between(self, user_id: int, start: dt.date, end: dt.date) -> HolidayCalendar:
        return self.calendar_for(user_id, years_between(start, end))

    def holidays_on(self, user_id: int, day: dt.date) -> List[HolidayAnnotation]:
        return self.calendar_for(user_id, [day.year]).holidays_on(day)

    def is_workable(self, user_id: int, day: dt.date) -> bool:
        return self.calendar_for(user_id, [day.year]).is_workable(day)
