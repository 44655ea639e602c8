from datetime import date, datetime, time, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class TravelClass(str, Enum):
    ECONOMY = "ECONOMY"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"


def parse_date_value(value: str) -> datetime:
    """Parse an ISO date or datetime string. Offset-aware values are normalized to naive UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _is_date_only(value: str) -> bool:
    return len(value.strip()) == 10


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str | None = None

    @field_validator("from_", "to")
    @classmethod
    def _parseable(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            parse_date_value(v)
        except ValueError:
            raise ValueError("Invalid date format")
        return v.strip()

    @model_validator(mode="after")
    def _ordered(self) -> "DateRange":
        if self.to and parse_date_value(self.to).date() < parse_date_value(self.from_).date():
            raise ValueError("Return date must not be before departure date")
        return self

    @property
    def departure_date(self) -> date:
        return parse_date_value(self.from_).date()

    @property
    def return_date(self) -> date | None:
        return parse_date_value(self.to).date() if self.to else None

    def departure_at(self, default_hour: int) -> datetime:
        """Departure moment; date-only values depart at default_hour."""
        if _is_date_only(self.from_):
            return datetime.combine(self.departure_date, time(hour=default_hour))
        return parse_date_value(self.from_)


class FlightSearchRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    origins: list[str] = Field(min_length=1, max_length=5)
    destinations: list[str] = Field(min_length=1, max_length=5)
    date_range: DateRange
    departure_flex: int = Field(3, ge=0, le=30)
    return_flex: int = Field(3, ge=0, le=30)
    travel_class: TravelClass = TravelClass.ECONOMY
    adults: int = Field(1, ge=1, le=9)
    children: int = Field(0, ge=0, le=8)
    infants: int = Field(0, ge=0, le=8)
    max_results: int = Field(50, ge=1, le=250)
    non_stop: bool = False
    auto_recommend_stopovers: bool = False
    include_neighboring_countries: bool = False
    affiliate_provider: str | None = None
    search_id: str | None = Field(None, max_length=100)

    @field_validator("origins", "destinations")
    @classmethod
    def _codes(cls, codes: list[str]) -> list[str]:
        normalized = []
        for code in codes:
            code = code.strip().upper()
            if len(code) not in (2, 3) or not code.isalpha():
                raise ValueError(f"'{code}' is not a 2-letter region or 3-letter airport code")
            normalized.append(code)
        return normalized

    @model_validator(mode="after")
    def _infants_on_laps(self) -> "FlightSearchRequest":
        if self.infants > self.adults:
            raise ValueError("Each infant must travel with an adult")
        return self
