from datetime import datetime

import pytest

from stopfinder.schemas.search import FlightSearchRequest
from stopfinder.services.amadeus_client import ProviderError
from stopfinder.services.offer_builder import Leg, Travelers, build_offer


class FakeProvider:
    """Stands in for AmadeusClient; records every params dict it receives."""

    def __init__(self, offers=None, dictionaries=None, error: Exception | None = None):
        self.offers = offers or []
        self.dictionaries = dictionaries or {}
        self.error = error
        self.calls: list[dict] = []

    async def search_offers(self, params: dict) -> dict:
        self.calls.append(params)
        if self.error:
            raise self.error
        return {"data": self.offers, "dictionaries": self.dictionaries}


def make_provider_offer(offer_id: str, total: float, origin: str = "WAW", destination: str = "BKK") -> dict:
    departure = datetime(2025, 3, 1, 10, 0)
    leg = Leg(origin, destination, departure, datetime(2025, 3, 1, 20, 25), "LO", "1", "789")
    offer = build_offer(offer_id, "GDS", [leg], total, Travelers(), "PLN", "ECONOMY")
    return offer


def make_request(**overrides) -> FlightSearchRequest:
    body = {
        "origins": ["WAW"],
        "destinations": ["BKK"],
        "dateRange": {"from": "2025-03-01"},
    }
    body.update(overrides)
    return FlightSearchRequest.model_validate(body)


@pytest.fixture
def failing_provider():
    return FakeProvider(error=ProviderError("Amadeus search error: 503"))


@pytest.fixture
def departure_at():
    return datetime(2025, 3, 1, 10, 0)
