"""
Golden-holiday recommendations.

For each home-country holiday, try spending 1..N leave days before, after,
or on both sides of the holiday's off-block, then stretch the window over
adjacent weekends and holidays. Windows are ranked by how many days off
each leave day buys, with a bonus for longer trips.
"""
import datetime as dt
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from travel_planner.schemas.reference import Holiday
from travel_planner.services.base import BaseService
from travel_planner.services.holiday_resolver import HolidayResolver
from travel_planner.services.ledger import LeaveLedger
from travel_planner.services.selection import ONE_DAY, Predicate, date_range

MAX_LEAVE_PER_WINDOW = 5
MIN_TRIP_DAYS = 4
# A run of days off longer than this is treated as unbounded (e.g. a long company shutdown)
MAX_STRETCH_DAYS = 31


@dataclass(frozen=True)
class Recommendation:
    name: str
    start_date: dt.date
    end_date: dt.date
    total_days: int
    leave_days_used: float
    score: float


def vacation_score(total_days: int, leave_days: float) -> float:
    efficiency = total_days / leave_days
    length_bonus = min(total_days / 7, 2)
    return efficiency * length_bonus


def stretch(start: dt.date, end: dt.date, is_workable: Predicate) -> Tuple[dt.date, dt.date]:
    """Grow [start, end] over neighbouring non-workable days."""
    for _ in range(MAX_STRETCH_DAYS):
        if is_workable(start - ONE_DAY):
            break
        start -= ONE_DAY
    for _ in range(MAX_STRETCH_DAYS):
        if is_workable(end + ONE_DAY):
            break
        end += ONE_DAY
    return start, end


def _spend(day: dt.date, count: int, step: dt.timedelta, is_workable: Predicate) -> dt.date:
    """Walk from `day` in direction `step` until `count` workable days are consumed."""
    spent = 0
    for _ in range(366):
        if spent >= count:
            break
        day += step
        if is_workable(day):
            spent += 1
    return day


def candidate_windows(holiday_day: dt.date, leave_days: int, is_workable: Predicate) -> List[Tuple[dt.date, dt.date]]:
    block_start, block_end = stretch(holiday_day, holiday_day, is_workable)
    before = leave_days // 2
    after = leave_days - before
    windows = [
        (_spend(block_start, leave_days, -ONE_DAY, is_workable), block_end),
        (block_start, _spend(block_end, leave_days, ONE_DAY, is_workable)),
    ]
    if before:
        windows.append((
            _spend(block_start, before, -ONE_DAY, is_workable),
            _spend(block_end, after, ONE_DAY, is_workable),
        ))
    return [stretch(start, end, is_workable) for start, end in windows]


def recommend_windows(
    holidays: Iterable[Holiday],
    is_workable: Predicate,
    max_leave_days: float,
    limit: int = 10,
) -> List[Recommendation]:
    budget = int(min(max_leave_days, MAX_LEAVE_PER_WINDOW))
    best: Dict[Tuple[dt.date, dt.date], Recommendation] = {}

    for holiday in sorted(holidays, key=lambda h: h.date):
        for leave_days in range(1, budget + 1):
            for start, end in candidate_windows(holiday.date, leave_days, is_workable):
                total_days = (end - start).days + 1
                spent = sum(1 for day in date_range(start, end) if is_workable(day))
                if total_days < MIN_TRIP_DAYS or spent == 0:
                    continue
                key = (start, end)
                if key in best:
                    continue
                best[key] = Recommendation(
                    name=f"{holiday.name} 연휴",
                    start_date=start,
                    end_date=end,
                    total_days=total_days,
                    leave_days_used=float(spent),
                    score=round(vacation_score(total_days, spent), 4),
                )

    ranked = sorted(best.values(), key=lambda r: (-r.score, r.start_date))
    return ranked[:limit]


class RecommendationService(BaseService):
    def __init__(self, repos, resolver: Optional[HolidayResolver] = None):
        super().__init__(repos)
        self.resolver = resolver or HolidayResolver(repos)

    def recommend(self, user_id: int, year: int, max_leave_days: Optional[float] = None,
                  limit: int = 10) -> List[Recommendation]:
        if max_leave_days is None:
            max_leave_days = LeaveLedger(self.repos).remaining(user_id)
        else:
            self.require_user(user_id)
        if max_leave_days < 1:
            return []

        # Windows may spill into the neighbouring years
        calendar = self.resolver.calendar_for(user_id, [year - 1, year, year + 1])
        home = self.resolver.reference.holidays_for(self.resolver.home_country, year)
        return recommend_windows(home, calendar.is_workable, max_leave_days, limit)
