from datetime import date, datetime

import pytest
from pydantic import ValidationError

from stopfinder.schemas.search import DateRange, FlightSearchRequest, parse_date_value


def test_offset_datetimes_are_normalized_to_utc():
    assert parse_date_value("2025-03-01T23:30:00-05:00") == datetime(2025, 3, 2, 4, 30)
    assert parse_date_value("2025-03-01T08:00:00Z") == datetime(2025, 3, 1, 8, 0)
    assert parse_date_value("2025-03-01T08:00:00") == datetime(2025, 3, 1, 8, 0)


def test_departure_date_follows_utc_calendar_day():
    date_range = DateRange.model_validate({"from": "2025-03-01T23:30:00-05:00"})
    assert date_range.departure_date == date(2025, 3, 2)
    assert date_range.departure_at(10) == datetime(2025, 3, 2, 4, 30)


def test_date_only_departs_at_default_hour():
    date_range = DateRange.model_validate({"from": "2025-03-01"})
    assert date_range.departure_at(10) == datetime(2025, 3, 1, 10, 0)
    assert date_range.return_date is None


def test_codes_are_normalized():
    req = FlightSearchRequest.model_validate(
        {"origins": [" pl "], "destinations": ["bkk"], "dateRange": {"from": "2025-03-01"}}
    )
    assert req.origins == ["PL"]
    assert req.destinations == ["BKK"]


def test_infants_need_an_adult_each():
    with pytest.raises(ValidationError):
        FlightSearchRequest.model_validate(
            {"origins": ["WAW"], "destinations": ["BKK"], "dateRange": {"from": "2025-03-01"}, "infants": 2}
        )
