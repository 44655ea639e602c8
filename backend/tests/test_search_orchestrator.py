import asyncio
import random

from conftest import FakeProvider, make_provider_offer, make_request

from stopfinder.services.search_orchestrator import SearchOrchestrator


def _search(provider, **overrides) -> dict:
    return asyncio.run(SearchOrchestrator(provider=provider).search(make_request(**overrides)))


def test_region_search_recommends_stopovers(failing_provider):
    result = _search(
        failing_provider,
        origins=["PL"], destinations=["TH"],
        autoRecommendStopovers=True, searchId="abc123",
    )

    assert result["success"] is True
    multi_leg = [f for f in result["flights"] if f["multiLeg"]]
    assert multi_leg
    for offer in multi_leg:
        segments = offer["itineraries"][0]["segments"]
        assert segments[0]["arrival"]["iataCode"] in {"DXB", "DOH", "IST", "AUH"}
        assert offer["stopoverInfo"]["layoverDays"] in (2, 3)

    meta = result["meta"]
    assert meta["dataSource"] == "mock"
    assert meta["searchedRoutes"] == ["WAW-BKK"]
    assert meta["totalPossibleRoutes"] == 8 * 7
    assert meta["enhancedMultiLeg"] is True
    assert meta["multiLegCount"] == len(multi_leg)
    assert meta["searchId"] == "abc123"


def test_provider_failure_falls_back_to_generated_offers(failing_provider):
    result = _search(failing_provider)

    assert result["success"] is True
    assert result["meta"]["dataSource"] == "mock"
    assert [f["id"] for f in result["flights"]] == ["MOCK-1STOP-WAW-DXB-BKK", "MOCK-DIRECT-WAW-BKK"]
    assert len(failing_provider.calls) == 1


def test_no_multi_leg_without_stopover_flag(failing_provider):
    result = _search(failing_provider, origins=["WAW"], destinations=["BKK"])
    assert not any(f["multiLeg"] for f in result["flights"])
    assert result["meta"]["enhancedMultiLeg"] is False


def test_max_results_keeps_cheapest_offer():
    offers = [make_provider_offer(f"P{i}", 1000.0 + i * 50) for i in range(20)]
    random.Random(7).shuffle(offers)
    provider = FakeProvider(offers=offers)

    result = _search(provider, maxResults=1)

    assert len(result["flights"]) == 1
    assert result["flights"][0]["id"] == "P0"
    assert result["meta"]["dataSource"] == "provider"


def test_results_sorted_and_capped(failing_provider):
    result = _search(
        failing_provider,
        origins=["PL"], destinations=["TH"],
        autoRecommendStopovers=True, searchId="sorted", maxResults=15,
    )
    totals = [float(f["price"]["total"]) for f in result["flights"]]
    assert len(totals) <= 15
    assert totals == sorted(totals)


def test_same_search_id_gives_same_itineraries(failing_provider):
    kwargs = dict(origins=["PL"], destinations=["TH"], autoRecommendStopovers=True, searchId="abc123")
    first = _search(failing_provider, **kwargs)
    second = _search(failing_provider, **kwargs)

    def signatures(result):
        return {f["stopoverInfo"]["routeSignature"] for f in result["flights"] if f["multiLeg"]}

    assert signatures(first) == signatures(second)


def test_multi_leg_signatures_unique(failing_provider):
    result = _search(
        failing_provider,
        origins=["PL", "WAW"], destinations=["TH", "BKK"],
        autoRecommendStopovers=True, searchId="dedup", maxResults=250,
    )
    signatures = [f["stopoverInfo"]["routeSignature"] for f in result["flights"] if f["multiLeg"]]
    assert len(signatures) == len(set(signatures))


def test_provider_offers_are_tagged_and_padded():
    provider = FakeProvider(
        offers=[make_provider_offer("P1", 2500.0)],
        dictionaries={"carriers": {"LO": "LOT"}},
    )
    result = _search(provider)

    by_id = {f["id"]: f for f in result["flights"]}
    assert by_id["P1"]["source"] == "provider"
    assert by_id["P1"]["providerSource"] == "GDS"
    assert by_id["P1"]["multiLeg"] is False
    assert "MOCK-DIRECT-WAW-BKK" in by_id
    assert result["meta"]["dataSource"] == "provider"
    assert result["dictionaries"]["carriers"]["LO"] == "LOT"


def test_no_padding_when_provider_is_plentiful():
    provider = FakeProvider(offers=[make_provider_offer(f"P{i}", 2000.0 + i) for i in range(10)])
    result = _search(provider)
    assert all(f["source"] == "provider" for f in result["flights"])


def test_request_options_reach_provider(failing_provider):
    _search(
        failing_provider,
        dateRange={"from": "2025-03-01", "to": "2025-03-15"},
        nonStop=True, travelClass="BUSINESS", adults=2, children=1, maxResults=20,
    )
    params = failing_provider.calls[0]
    assert params["originLocationCode"] == "WAW"
    assert params["destinationLocationCode"] == "BKK"
    assert params["returnDate"] == "2025-03-15"
    assert params["nonStop"] == "true"
    assert params["travelClass"] == "BUSINESS"
    assert params["adults"] == 2
    assert params["children"] == 1
    assert params["max"] == 20


def test_non_stop_drops_synthetic_one_stop(failing_provider):
    result = _search(failing_provider, nonStop=True)
    assert [f["id"] for f in result["flights"]] == ["MOCK-DIRECT-WAW-BKK"]


def test_neighbor_expansion_respects_cap(failing_provider):
    result = _search(
        failing_provider,
        origins=["PL"], destinations=["TH"], includeNeighboringCountries=True,
    )
    assert result["meta"]["totalPossibleRoutes"] <= 10 * 10


def test_offset_departure_is_sent_as_utc_date(failing_provider):
    _search(failing_provider, dateRange={"from": "2025-03-01T23:30:00-05:00"})
    assert failing_provider.calls[0]["departureDate"] == "2025-03-02"


def test_padding_ignores_multi_leg_offers(failing_provider):
    result = _search(
        failing_provider,
        origins=["PL"], destinations=["TH"],
        autoRecommendStopovers=True, searchId="abc123", maxResults=250,
    )
    assert result["meta"]["multiLegCount"] >= 10
    assert any(f["source"] == "synthetic" for f in result["flights"])
