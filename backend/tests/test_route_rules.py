from stopfinder.data.hubs import HUB_CATALOG, Hub, HubRule
from stopfinder.services.route_rules import RouteRules, route_rules

HUBS = {hub.iata: hub for hub in HUB_CATALOG}


def test_europe_to_southeast_asia_is_long_haul():
    assert route_rules.is_long_haul("WAW", "BKK")
    assert not route_rules.is_long_haul("BKK", "WAW")
    assert not route_rules.is_long_haul("WAW", "KRK")


def test_unknown_airports_are_not_long_haul():
    assert not route_rules.is_long_haul("ZZZ", "BKK")


def test_allowed_hubs_for_thailand():
    valid = {iata for iata, hub in HUBS.items() if route_rules.is_valid_hub(hub, "WAW", "BKK")}
    assert valid == {"DXB", "DOH", "IST", "AUH"}


def test_oceania_routes_through_singapore():
    assert route_rules.is_valid_hub(HUBS["SIN"], "WAW", "SYD")
    assert not route_rules.is_valid_hub(HUBS["IST"], "WAW", "SYD")


def test_hub_is_never_an_endpoint():
    assert not route_rules.is_valid_hub(HUBS["DXB"], "DXB", "BKK")
    assert not route_rules.is_valid_hub(HUBS["SIN"], "WAW", "SIN")


def test_pairs_without_rule_accept_every_hub():
    hub = Hub("HUB", "Hub", "City", "XX", 1, 3, ("XX",), (), "", 100.0)
    rules = RouteRules(
        airport_regions={"AAA": "A", "BBB": "B"},
        hub_rules=(HubRule("c-to-d", frozenset({"C"}), frozenset({"D"}), frozenset({"OTH"})),),
        long_haul_origin_regions=frozenset({"A"}),
        long_haul_destination_regions=frozenset({"B"}),
    )
    assert rules.matching_rules("AAA", "BBB") == []
    assert rules.is_valid_hub(hub, "AAA", "BBB")
