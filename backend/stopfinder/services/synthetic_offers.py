"""Synthetic offer generator — baseline direct and one-stop offers for thin result sets."""

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta

from stopfinder.data.hubs import HUB_CATALOG, Hub
from stopfinder.data.routes import (
    DEFAULT_CARRIER,
    DIRECT_PRICES,
    FLIGHT_DURATIONS,
    HOME_CARRIERS,
    lookup_route,
)
from stopfinder.services.affiliate_links import build_affiliate_url
from stopfinder.services.offer_builder import Leg, Travelers, build_offer
from stopfinder.services.policy import (
    MultiLegPolicy,
    SyntheticPolicy,
    class_multiplier,
    multi_leg_policy,
    synthetic_policy,
)
from stopfinder.services.route_rules import RouteRules, route_rules

logger = logging.getLogger(__name__)


def _flight_number(origin: str, destination: str, offset: int = 0) -> str:
    """Stable flight number for a route."""
    return str(100 + (sum(ord(c) for c in origin + destination) * 7 + offset) % 900)


class SyntheticOfferGenerator:
    """Builds one direct and one single-stop offer for the primary route."""

    def __init__(
        self,
        hubs: tuple[Hub, ...] = HUB_CATALOG,
        rules: RouteRules = route_rules,
        durations: Mapping[str, int] = FLIGHT_DURATIONS,
        direct_prices: Mapping[str, float] = DIRECT_PRICES,
        pricing_policy: MultiLegPolicy = multi_leg_policy,
        policy: SyntheticPolicy = synthetic_policy,
    ):
        self._hubs = hubs
        self._rules = rules
        self._durations = durations
        self._direct_prices = direct_prices
        self._pricing = pricing_policy
        self.policy = policy

    def needs_padding(self, result_count: int) -> bool:
        return result_count < self.policy.padding_floor

    def generate(
        self,
        origin: str,
        destination: str,
        departure_at: datetime,
        travel_class: str = "ECONOMY",
        travelers: Travelers = Travelers(),
        affiliate_provider: str | None = None,
        non_stop: bool = False,
    ) -> list[dict]:
        multiplier = class_multiplier(travel_class)
        base_price = lookup_route(self._direct_prices, origin, destination, self._pricing.default_direct_price)
        currency = self._pricing.currency
        affiliate_url = build_affiliate_url(affiliate_provider, origin, destination, departure_at.date())

        offers = [
            self._direct_offer(
                origin, destination, departure_at, round(base_price * multiplier, 2),
                currency, travel_class, travelers,
            )
        ]

        hub = self._connection_hub(origin, destination)
        if not non_stop and hub is not None:
            one_stop_price = round(base_price * (1 - self.policy.one_stop_discount) * multiplier, 2)
            offers.append(self._one_stop_offer(
                origin, hub, destination, departure_at, one_stop_price,
                currency, travel_class, travelers,
            ))

        if affiliate_url:
            for offer in offers:
                offer["affiliateUrl"] = affiliate_url

        logger.debug(f"Synthetic offers for {origin}->{destination}: {len(offers)}")
        return offers

    def _connection_hub(self, origin: str, destination: str) -> Hub | None:
        return next(
            (hub for hub in self._hubs if self._rules.is_valid_hub(hub, origin, destination)),
            None,
        )

    def _direct_offer(
        self,
        origin: str,
        destination: str,
        departure_at: datetime,
        fare: float,
        currency: str,
        travel_class: str,
        travelers: Travelers,
    ) -> dict:
        region = self._rules.region_of(origin)
        carrier = HOME_CARRIERS.get(region, DEFAULT_CARRIER)
        duration = lookup_route(self._durations, origin, destination, self._pricing.default_leg_duration_minutes)
        leg = Leg(
            origin, destination, departure_at, departure_at + timedelta(minutes=duration),
            carrier, _flight_number(origin, destination), "789",
        )
        return build_offer(
            offer_id=f"MOCK-DIRECT-{origin}-{destination}",
            source="synthetic",
            legs=[leg],
            adult_fare=fare,
            travelers=travelers,
            currency=currency,
            travel_class=travel_class,
        )

    def _one_stop_offer(
        self,
        origin: str,
        hub: Hub,
        destination: str,
        departure_at: datetime,
        fare: float,
        currency: str,
        travel_class: str,
        travelers: Travelers,
    ) -> dict:
        carrier = hub.carriers[0]
        default = self._pricing.default_leg_duration_minutes
        first_arrival = departure_at + timedelta(minutes=lookup_route(self._durations, origin, hub.iata, default))
        second_departure = first_arrival + timedelta(minutes=self.policy.connection_minutes)
        second_arrival = second_departure + timedelta(
            minutes=lookup_route(self._durations, hub.iata, destination, default)
        )
        legs = [
            Leg(origin, hub.iata, departure_at, first_arrival,
                carrier, _flight_number(origin, hub.iata), "359"),
            Leg(hub.iata, destination, second_departure, second_arrival,
                carrier, _flight_number(hub.iata, destination, offset=1), "77W"),
        ]
        return build_offer(
            offer_id=f"MOCK-1STOP-{origin}-{hub.iata}-{destination}",
            source="synthetic",
            legs=legs,
            adult_fare=fare,
            travelers=travelers,
            currency=currency,
            travel_class=travel_class,
        )


synthetic_offer_generator = SyntheticOfferGenerator()
