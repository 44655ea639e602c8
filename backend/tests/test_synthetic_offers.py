from stopfinder.services.offer_builder import Travelers
from stopfinder.services.synthetic_offers import synthetic_offer_generator


def test_padding_floor():
    assert synthetic_offer_generator.needs_padding(0)
    assert synthetic_offer_generator.needs_padding(9)
    assert not synthetic_offer_generator.needs_padding(10)


def test_direct_and_one_stop_offers(departure_at):
    direct, one_stop = synthetic_offer_generator.generate("WAW", "BKK", departure_at)

    assert direct["id"] == "MOCK-DIRECT-WAW-BKK"
    assert direct["source"] == "synthetic"
    assert direct["multiLeg"] is False
    assert direct["price"]["total"] == "3200.00"
    assert direct["validatingAirlineCodes"] == ["LO"]
    segment = direct["itineraries"][0]["segments"][0]
    assert segment["arrival"]["at"] == "2025-03-01T20:25:00"
    assert segment["duration"] == "PT10H25M"

    assert one_stop["id"] == "MOCK-1STOP-WAW-DXB-BKK"
    assert one_stop["price"]["total"] == "2720.00"
    first, second = one_stop["itineraries"][0]["segments"]
    assert first["arrival"]["at"] == "2025-03-01T16:15:00"
    assert second["departure"]["at"] == "2025-03-01T18:45:00"
    assert second["arrival"]["at"] == "2025-03-02T01:05:00"
    assert "stopoverInfo" not in one_stop


def test_offers_are_deterministic(departure_at):
    first = synthetic_offer_generator.generate("WAW", "BKK", departure_at)
    second = synthetic_offer_generator.generate("WAW", "BKK", departure_at)
    assert first == second


def test_non_stop_suppresses_one_stop_offer(departure_at):
    offers = synthetic_offer_generator.generate("WAW", "BKK", departure_at, non_stop=True)
    assert [o["id"] for o in offers] == ["MOCK-DIRECT-WAW-BKK"]


def test_one_stop_skips_hub_at_endpoint(departure_at):
    offers = synthetic_offer_generator.generate("DXB", "BKK", departure_at)
    assert [o["id"] for o in offers] == ["MOCK-DIRECT-DXB-BKK", "MOCK-1STOP-DXB-DOH-BKK"]
    assert offers[0]["validatingAirlineCodes"] == ["EK"]


def test_travel_class_and_travelers_scale_price(departure_at):
    direct, _ = synthetic_offer_generator.generate(
        "WAW", "BKK", departure_at, travel_class="FIRST", travelers=Travelers(adults=2),
    )
    assert direct["price"]["total"] == "32000.00"
    assert direct["travelerPricings"][0]["fareDetailsBySegment"][0]["cabin"] == "FIRST"


def test_unknown_route_uses_default_price(departure_at):
    direct, _ = synthetic_offer_generator.generate("RZE", "UTP", departure_at)
    assert direct["price"]["total"] == "3500.00"


def test_affiliate_link_on_every_offer(departure_at):
    offers = synthetic_offer_generator.generate("WAW", "BKK", departure_at, affiliate_provider="skyscanner")
    for offer in offers:
        assert offer["affiliateUrl"] == (
            "https://www.skyscanner.net/transport/flights/waw/bkk/250301/?affiliate=skyscanner"
        )
