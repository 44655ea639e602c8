from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchMeta(_CamelModel):
    count: int
    data_source: str
    searched_routes: list[str]
    timestamp: str
    total_possible_routes: int
    enhanced_multi_leg: bool
    multi_leg_count: int = 0
    search_id: str | None = None


class Dictionaries(_CamelModel):
    carriers: dict[str, str]
    aircraft: dict[str, str]


class FlightSearchResponse(_CamelModel):
    success: bool
    flights: list[dict[str, Any]]
    meta: SearchMeta
    dictionaries: Dictionaries


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
    message: str
    timestamp: str


class FieldError(_CamelModel):
    field: str
    message: str


class ValidationErrorResponse(_CamelModel):
    success: bool = False
    error: str = "Validation failed"
    details: list[FieldError]
    timestamp: str
