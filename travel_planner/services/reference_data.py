"""
Reference Data Provider

Static (mocked) country, holiday, travel-insight and news tables. Nothing
here is user-owned and nothing is ever written.

Holiday tables are reached through HOLIDAY_SOURCES, a lookup keyed by
country code, so adding a country means adding an entry, not a branch.
"""
import datetime as dt
from typing import Callable, Dict, List, Optional, Tuple

from travel_planner.schemas.reference import (
    CountryInfo,
    Holiday,
    NewsItem,
    TravelEvent,
    TravelInsight,
)

HolidaySource = Callable[[int], List[Holiday]]


class StaticHolidaySource:
    """Holiday source backed by a hardcoded (date, name, type) table."""

    def __init__(self, country: str, country_code: str, entries: List[Tuple[str, str, str]]):
        self.country = country
        self.country_code = country_code
        self._by_year: Dict[int, List[Holiday]] = {}
        for day, name, kind in entries:
            holiday = Holiday(
                date=dt.date.fromisoformat(day),
                name=name,
                type=kind,
                country=country,
                country_code=country_code,
            )
            self._by_year.setdefault(holiday.date.year, []).append(holiday)

    def __call__(self, year: int) -> List[Holiday]:
        return sorted(self._by_year.get(year, []), key=lambda h: h.date)


KR_HOLIDAYS = StaticHolidaySource("South Korea", "KR", [
    # 2024
    ("2024-01-01", "신정", "public"),
    ("2024-02-09", "설날", "public"),
    ("2024-02-10", "설날", "public"),
    ("2024-02-11", "설날", "public"),
    ("2024-02-12", "설날 대체공휴일", "public"),
    ("2024-03-01", "삼일절", "public"),
    ("2024-05-01", "근로자의 날", "public"),
    ("2024-05-05", "어린이날", "public"),
    ("2024-05-06", "어린이날 대체공휴일", "public"),
    ("2024-05-15", "부처님 오신날", "public"),
    ("2024-06-06", "현충일", "public"),
    ("2024-08-15", "광복절", "public"),
    ("2024-09-16", "추석", "public"),
    ("2024-09-17", "추석", "public"),
    ("2024-09-18", "추석", "public"),
    ("2024-10-03", "개천절", "public"),
    ("2024-10-09", "한글날", "public"),
    ("2024-12-25", "성탄절", "public"),
    # 2025
    ("2025-01-01", "신정", "public"),
    ("2025-01-28", "설날", "public"),
    ("2025-01-29", "설날", "public"),
    ("2025-01-30", "설날", "public"),
    ("2025-03-01", "삼일절", "public"),
    ("2025-03-03", "삼일절 대체공휴일", "public"),
    ("2025-05-01", "근로자의 날", "observance"),
    ("2025-05-05", "어린이날", "public"),
    ("2025-05-05", "부처님 오신날", "religious"),
    ("2025-05-06", "대체공휴일", "public"),
    ("2025-06-06", "현충일", "public"),
    ("2025-08-15", "광복절", "public"),
    ("2025-10-03", "개천절", "public"),
    ("2025-10-05", "추석", "public"),
    ("2025-10-06", "추석", "public"),
    ("2025-10-07", "추석", "public"),
    ("2025-10-08", "추석 대체공휴일", "public"),
    ("2025-10-09", "한글날", "public"),
    ("2025-12-25", "성탄절", "public"),
])

JP_HOLIDAYS = StaticHolidaySource("Japan", "JP", [
    ("2024-01-01", "元日", "public"),
    ("2024-01-08", "成人の日", "public"),
    ("2024-02-11", "建国記念の日", "public"),
    ("2024-02-12", "建国記念の日 振替休日", "public"),
    ("2024-02-23", "天皇誕生日", "public"),
    ("2024-03-20", "春分の日", "public"),
    ("2024-04-29", "昭和の日", "public"),
    ("2024-05-03", "憲法記念日", "public"),
    ("2024-05-04", "みどりの日", "public"),
    ("2024-05-05", "こどもの日", "public"),
    ("2024-05-06", "振替休日", "public"),
    ("2024-07-15", "海の日", "public"),
    ("2024-08-11", "山の日", "public"),
    ("2024-08-12", "山の日 振替休日", "public"),
    ("2024-09-16", "敬老の日", "public"),
    ("2024-09-22", "秋分の日", "public"),
    ("2024-09-23", "秋分の日 振替休日", "public"),
    ("2024-10-14", "スポーツの日", "public"),
    ("2024-11-03", "文化の日", "public"),
    ("2024-11-04", "文化の日 振替休日", "public"),
    ("2024-11-23", "勤労感謝の日", "public"),
])

TH_HOLIDAYS = StaticHolidaySource("Thailand", "TH", [
    ("2024-01-01", "วันขึ้นปีใหม่", "public"),
    ("2024-02-24", "วันมาฆบูชา", "religious"),
    ("2024-04-06", "วันจักรี", "public"),
    ("2024-04-13", "วันสงกรานต์", "public"),
    ("2024-04-14", "วันสงกรานต์", "public"),
    ("2024-04-15", "วันสงกรานต์", "public"),
    ("2024-05-01", "วันแรงงานแห่งชาติ", "public"),
    ("2024-05-04", "วันฉัตรมงคล", "public"),
    ("2024-05-22", "วันวิสาขบูชา", "religious"),
    ("2024-07-20", "วันอาสาฬหบูชา", "religious"),
    ("2024-07-28", "วันเฉลิมพระชนมพรรษา", "public"),
    ("2024-08-12", "วันแม่แห่งชาติ", "public"),
    ("2024-10-13", "วันคล้ายวันสวรรคต", "public"),
    ("2024-10-23", "วันปิยมหาราช", "public"),
    ("2024-12-05", "วันพ่อแห่งชาติ", "public"),
    ("2024-12-10", "วันรัฐธรรมนูญ", "public"),
    ("2024-12-31", "วันสิ้นปี", "public"),
])

HOLIDAY_SOURCES: Dict[str, HolidaySource] = {
    "KR": KR_HOLIDAYS,
    "JP": JP_HOLIDAYS,
    "TH": TH_HOLIDAYS,
}


# (code, name, Korean name, emoji, region, popular)
_COUNTRY_ROWS = [
    ("JP", "Japan", "일본", "🇯🇵", "Asia", True),
    ("TH", "Thailand", "태국", "🇹🇭", "Asia", True),
    ("VN", "Vietnam", "베트남", "🇻🇳", "Asia", True),
    ("US", "United States", "미국", "🇺🇸", "North America", True),
    ("PH", "Philippines", "필리핀", "🇵🇭", "Asia", True),
    ("SG", "Singapore", "싱가포르", "🇸🇬", "Asia", True),
    ("GB", "United Kingdom", "영국", "🇬🇧", "Europe", False),
    ("FR", "France", "프랑스", "🇫🇷", "Europe", False),
    ("DE", "Germany", "독일", "🇩🇪", "Europe", False),
    ("IT", "Italy", "이탈리아", "🇮🇹", "Europe", False),
    ("ES", "Spain", "스페인", "🇪🇸", "Europe", False),
    ("CH", "Switzerland", "스위스", "🇨🇭", "Europe", False),
    ("NL", "Netherlands", "네덜란드", "🇳🇱", "Europe", False),
    ("BE", "Belgium", "벨기에", "🇧🇪", "Europe", False),
    ("AT", "Austria", "오스트리아", "🇦🇹", "Europe", False),
    ("CZ", "Czech Republic", "체코", "🇨🇿", "Europe", False),
    ("MY", "Malaysia", "말레이시아", "🇲🇾", "Asia", False),
    ("ID", "Indonesia", "인도네시아", "🇮🇩", "Asia", False),
    ("IN", "India", "인도", "🇮🇳", "Asia", False),
    ("HK", "Hong Kong", "홍콩", "🇭🇰", "Asia", False),
    ("MO", "Macao", "마카오", "🇲🇴", "Asia", False),
    ("MM", "Myanmar", "미얀마", "🇲🇲", "Asia", False),
    ("LA", "Laos", "라오스", "🇱🇦", "Asia", False),
    ("KH", "Cambodia", "캄보디아", "🇰🇭", "Asia", False),
    ("AU", "Australia", "호주", "🇦🇺", "Oceania", False),
    ("NZ", "New Zealand", "뉴질랜드", "🇳🇿", "Oceania", False),
    ("FJ", "Fiji", "피지", "🇫🇯", "Oceania", False),
    ("CA", "Canada", "캐나다", "🇨🇦", "North America", False),
    ("MX", "Mexico", "멕시코", "🇲🇽", "North America", False),
    ("BR", "Brazil", "브라질", "🇧🇷", "South America", False),
    ("AR", "Argentina", "아르헨티나", "🇦🇷", "South America", False),
    ("CL", "Chile", "칠레", "🇨🇱", "South America", False),
    ("PE", "Peru", "페루", "🇵🇪", "South America", False),
    ("AE", "United Arab Emirates", "아랍에미리트", "🇦🇪", "Middle East", False),
    ("SA", "Saudi Arabia", "사우디아라비아", "🇸🇦", "Middle East", False),
    ("TR", "Turkey", "터키", "🇹🇷", "Middle East", False),
    ("EG", "Egypt", "이집트", "🇪🇬", "Africa", False),
    ("ZA", "South Africa", "남아프리카공화국", "🇿🇦", "Africa", False),
    ("KE", "Kenya", "케냐", "🇰🇪", "Africa", False),
]

COUNTRIES: List[CountryInfo] = [
    CountryInfo(code=code, name=name, name_kr=name_kr, emoji=emoji, region=region, popular=popular)
    for code, name, name_kr, emoji, region, popular in _COUNTRY_ROWS
]

REGIONS = ["Asia", "Europe", "North America", "South America", "Oceania", "Middle East", "Africa"]

_INSIGHTS = {
    "JP": dict(
        country_name="일본",
        suitability_score=85,
        weather="매우 좋음",
        weather_score="good",
        flight_cost="높음 (골든위크)",
        flight_cost_score="high",
        crowd_level="매우 높음",
        crowd_score="high",
        events=[TravelEvent(name="골든위크", dates="4/29-5/5"),
                TravelEvent(name="도쿄 카츠도 축제", dates="5/18-19")],
    ),
    "TH": dict(
        country_name="태국",
        suitability_score=65,
        weather="우기 시작",
        weather_score="fair",
        flight_cost="보통",
        flight_cost_score="medium",
        crowd_level="낮음",
        crowd_score="low",
        events=[TravelEvent(name="로켓 페스티벌", dates="5/11-13"),
                TravelEvent(name="부처님 오신날", dates="5/22")],
    ),
}

_TRAVEL_NEWS = [
    ("일본 벚꽃 개화 예상일 발표 (3월 말)", "2024-02-15T10:00:00Z", "여행 뉴스"),
    ("태국 비자 면제 연장 확정", "2024-02-14T15:30:00Z", "아시아 투데이"),
    ("유럽 항공료 여름 시즌 15% 인상", "2024-02-13T09:15:00Z", "항공 뉴스"),
    ("베트남 다낭 직항편 증편", "2024-02-12T14:20:00Z", "여행업계"),
    ("제주항공 동남아 노선 확대", "2024-02-11T11:45:00Z", "항공 소식"),
]

_HOLIDAY_NEWS = [
    ("2024년 어린이날 대체공휴일 적용 확정", "2024-01-20T14:00:00Z", "정책 뉴스"),
    ("근로자의 날 토요일 겹침으로 연휴 효과 감소", "2024-01-18T16:30:00Z", "노동부"),
    ("개천절 화요일로 3일 연휴 가능", "2024-01-15T10:20:00Z", "캘린더 분석"),
    ("한글날 수요일 배치", "2024-01-12T13:15:00Z", "공휴일 정책"),
    ("추석 연휴 최대 6일 가능", "2024-01-10T09:45:00Z", "연휴 계획"),
]


def _news(rows) -> List[NewsItem]:
    return [NewsItem(title=title, url="#", published_at=at, source=source) for title, at, source in rows]


class ReferenceDataProvider:
    def __init__(self, holiday_sources: Optional[Dict[str, HolidaySource]] = None):
        self._holiday_sources = dict(HOLIDAY_SOURCES if holiday_sources is None else holiday_sources)
        self._countries = {c.code: c for c in COUNTRIES}

    def holidays_for(self, country_code: str, year: int) -> List[Holiday]:
        """Public holidays of a country for a year. Unknown codes yield []."""
        source = self._holiday_sources.get(country_code.upper())
        if source is None:
            return []
        return source(year)

    def has_holiday_data(self, country_code: str) -> bool:
        return country_code.upper() in self._holiday_sources

    def insights_for(self, country_code: str, month: int, year: int) -> TravelInsight:
        code = country_code.upper()
        profile = _INSIGHTS.get(code)
        if profile is None:
            # Unknown destinations get a neutral medium/fair profile
            return TravelInsight(
                country_code=code,
                country_name=code,
                month=month,
                year=year,
                suitability_score=70,
                weather="보통",
                weather_score="fair",
                flight_cost="보통",
                flight_cost_score="medium",
                crowd_level="보통",
                crowd_score="medium",
                events=[],
            )
        return TravelInsight(country_code=code, month=month, year=year, **profile)

    def countries(self) -> List[CountryInfo]:
        return list(COUNTRIES)

    def popular_countries(self) -> List[CountryInfo]:
        return [c for c in COUNTRIES if c.popular]

    def countries_by_region(self) -> Dict[str, List[CountryInfo]]:
        return {region: [c for c in COUNTRIES if c.region == region] for region in REGIONS}

    def country(self, code: str) -> Optional[CountryInfo]:
        return self._countries.get(code.upper())

    def travel_news(self) -> List[NewsItem]:
        return _news(_TRAVEL_NEWS)

    def holiday_news(self) -> List[NewsItem]:
        return _news(_HOLIDAY_NEWS)


reference_data = ReferenceDataProvider()
