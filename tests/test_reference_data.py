from datetime import date

from travel_planner.schemas.reference import Holiday
from travel_planner.services.reference_data import ReferenceDataProvider, reference_data


def test_unknown_country_has_no_holidays():
    assert reference_data.holidays_for("ZZ", 2025) == []
    assert not reference_data.has_holiday_data("ZZ")


def test_unknown_year_has_no_holidays():
    assert reference_data.holidays_for("JP", 1999) == []


def test_holidays_are_sorted_and_tagged():
    holidays = reference_data.holidays_for("kr", 2024)
    assert holidays
    assert [h.date for h in holidays] == sorted(h.date for h in holidays)
    assert all(h.country_code == "KR" and h.country == "South Korea" for h in holidays)


def test_holiday_sources_are_pluggable():
    def fixed(year):
        return [Holiday(date=date(year, 7, 1), name="Test Day", type="public",
                        country="Testland", country_code="TL")]

    provider = ReferenceDataProvider({"TL": fixed})
    assert provider.holidays_for("TL", 2030)[0].date == date(2030, 7, 1)
    assert provider.holidays_for("KR", 2024) == []


def test_insights_known_and_default():
    japan = reference_data.insights_for("jp", 5, 2024)
    assert japan.country_name == "일본"
    assert japan.month == 5
    assert len(japan.events) == 2

    other = reference_data.insights_for("FR", 8, 2024)
    assert other.suitability_score == 70
    assert other.weather_score == "fair"
    assert other.events == []


def test_country_directory():
    popular = reference_data.popular_countries()
    assert {c.code for c in popular} >= {"JP", "TH"}
    regions = reference_data.countries_by_region()
    assert sum(len(v) for v in regions.values()) == len(reference_data.countries())
    assert reference_data.country("th").name_kr == "태국"
    assert reference_data.country("ZZ") is None


def test_news_items():
    assert len(reference_data.travel_news()) == 5
    assert len(reference_data.holiday_news()) == 5
