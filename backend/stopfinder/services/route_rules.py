"""Route rules — long-haul eligibility and hub validity as set-membership predicates."""

from collections.abc import Mapping

from stopfinder.data.airports import AIRPORT_REGIONS
from stopfinder.data.hubs import (
    HUB_RULES,
    LONG_HAUL_DESTINATION_REGIONS,
    LONG_HAUL_ORIGIN_REGIONS,
    Hub,
    HubRule,
)


class RouteRules:
    """Decides which airport pairs get hub itineraries, and through which hubs."""

    def __init__(
        self,
        airport_regions: Mapping[str, str] = AIRPORT_REGIONS,
        hub_rules: tuple[HubRule, ...] = HUB_RULES,
        long_haul_origin_regions: frozenset[str] = LONG_HAUL_ORIGIN_REGIONS,
        long_haul_destination_regions: frozenset[str] = LONG_HAUL_DESTINATION_REGIONS,
    ):
        self._airport_regions = airport_regions
        self._hub_rules = hub_rules
        self._origin_regions = long_haul_origin_regions
        self._destination_regions = long_haul_destination_regions

    def region_of(self, airport: str) -> str | None:
        return self._airport_regions.get(airport)

    def is_long_haul(self, origin: str, destination: str) -> bool:
        """Origin in a short/medium-haul origin region and destination in a long-haul one."""
        return (
            self.region_of(origin) in self._origin_regions
            and self.region_of(destination) in self._destination_regions
        )

    def matching_rules(self, origin: str, destination: str) -> list[HubRule]:
        origin_region = self.region_of(origin)
        destination_region = self.region_of(destination)
        return [
            rule for rule in self._hub_rules
            if origin_region in rule.origin_regions
            and destination_region in rule.destination_regions
        ]

    def is_valid_hub(self, hub: Hub, origin: str, destination: str) -> bool:
        """
        A hub is never an endpoint of the trip. When rules match the pair,
        the hub must be allowed by at least one of them; pairs no rule
        covers accept every hub.
        """
        if hub.iata in (origin, destination):
            return False
        rules = self.matching_rules(origin, destination)
        if not rules:
            return True
        return any(hub.iata in rule.allowed_hubs for rule in rules)


route_rules = RouteRules()
