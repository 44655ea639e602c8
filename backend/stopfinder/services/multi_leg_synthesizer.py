"""Multi-leg synthesizer — two-leg itineraries with multi-day stopovers at hub airports.

For every long-haul origin/destination pair and every valid catalog hub, a
layover length is drawn from the search's seeded random stream, the
itinerary is timed and priced from the static route tables, and it is kept
only when it costs at most the acceptance ratio times the direct fare.
Every randomized choice (layover, carrier, aircraft, flight number) comes
from the same seeded stream, so a search id reproduces its itineraries.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta

from stopfinder.data.currency import convert_from_usd
from stopfinder.data.hubs import HUB_CATALOG, Hub
from stopfinder.data.routes import AIRCRAFT_TYPES, DIRECT_PRICES, FLIGHT_DURATIONS, LEG_PRICES, lookup_route
from stopfinder.services.affiliate_links import build_affiliate_url
from stopfinder.services.offer_builder import Leg, Travelers, build_offer, round_half_up
from stopfinder.services.policy import MultiLegPolicy, class_multiplier, multi_leg_policy
from stopfinder.services.route_rules import RouteRules, route_rules
from stopfinder.services.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


def route_signature(origin: str, hub: str, destination: str, layover_days: int) -> str:
    return f"{origin}-{hub}-{destination}-{layover_days}"


@dataclass
class MultiLegPricing:
    direct_price: float
    multi_leg_price: float
    savings: float
    savings_percent: int


@dataclass
class SynthesisStats:
    pairs_considered: int = 0
    pairs_long_haul: int = 0
    invalid_hubs: int = 0
    duplicates: int = 0
    rejected_price: int = 0
    accepted: int = 0


class MultiLegSynthesizer:
    """Enumerates hub itineraries across the cross product of expanded airports."""

    def __init__(
        self,
        hubs: tuple[Hub, ...] = HUB_CATALOG,
        rules: RouteRules = route_rules,
        durations: Mapping[str, int] = FLIGHT_DURATIONS,
        direct_prices: Mapping[str, float] = DIRECT_PRICES,
        leg_prices: Mapping[str, float] = LEG_PRICES,
        aircraft_types: tuple[str, ...] = AIRCRAFT_TYPES,
        policy: MultiLegPolicy = multi_leg_policy,
    ):
        self.hubs = hubs
        self.rules = rules
        self._durations = durations
        self._direct_prices = direct_prices
        self._leg_prices = leg_prices
        self._aircraft_types = aircraft_types
        self.policy = policy

    def synthesize(
        self,
        origins: list[str],
        destinations: list[str],
        departure_at: datetime,
        rng: SeededRandom,
        travel_class: str = "ECONOMY",
        travelers: Travelers = Travelers(),
        affiliate_provider: str | None = None,
    ) -> list[dict]:
        """Return all accepted multi-leg offers, unsorted."""
        seen_signatures: set[str] = set()
        stats = SynthesisStats()
        offers: list[dict] = []

        for origin in origins:
            for destination in destinations:
                stats.pairs_considered += 1
                if origin == destination or not self.rules.is_long_haul(origin, destination):
                    continue
                stats.pairs_long_haul += 1

                for hub in self.hubs:
                    if not self.rules.is_valid_hub(hub, origin, destination):
                        stats.invalid_hubs += 1
                        continue

                    layover_days = rng.randint(self.policy.layover_days_min, self.policy.layover_days_max)
                    signature = route_signature(origin, hub.iata, destination, layover_days)
                    if signature in seen_signatures:
                        stats.duplicates += 1
                        continue
                    seen_signatures.add(signature)

                    pricing = self.price(origin, hub.iata, destination, layover_days, travel_class)
                    if not self.is_acceptable(pricing):
                        stats.rejected_price += 1
                        continue

                    offers.append(self._assemble(
                        origin, hub, destination, layover_days, signature, pricing,
                        departure_at, rng, travel_class, travelers, affiliate_provider,
                    ))
                    stats.accepted += 1

        logger.info(
            f"Multi-leg synthesis: {stats.accepted} accepted from {stats.pairs_long_haul}/"
            f"{stats.pairs_considered} long-haul pairs "
            f"(invalid hubs={stats.invalid_hubs}, duplicates={stats.duplicates}, "
            f"over price={stats.rejected_price})"
        )
        return offers

    def leg_duration(self, origin: str, destination: str) -> int:
        """Leg duration in minutes; reverse pair as fallback, then the default."""
        return lookup_route(self._durations, origin, destination, self.policy.default_leg_duration_minutes)

    def price(
        self,
        origin: str,
        hub: str,
        destination: str,
        layover_days: int,
        travel_class: str = "ECONOMY",
    ) -> MultiLegPricing:
        multiplier = class_multiplier(travel_class)
        policy = self.policy

        direct = lookup_route(self._direct_prices, origin, destination, policy.default_direct_price) * multiplier
        first = lookup_route(self._leg_prices, origin, hub, policy.default_leg_price) * multiplier
        second = lookup_route(self._leg_prices, hub, destination, policy.default_leg_price) * multiplier

        multi_leg = first + second
        if layover_days > policy.long_layover_threshold_days:
            multi_leg *= 1 - policy.long_layover_discount

        direct = round(direct, 2)
        multi_leg = round(multi_leg, 2)
        savings = round(direct - multi_leg, 2)
        savings_percent = round_half_up(savings / direct * 100) if direct else 0
        return MultiLegPricing(direct, multi_leg, savings, savings_percent)

    def is_acceptable(self, pricing: MultiLegPricing) -> bool:
        return pricing.multi_leg_price <= self.policy.acceptance_ratio * pricing.direct_price

    def _assemble(
        self,
        origin: str,
        hub: Hub,
        destination: str,
        layover_days: int,
        signature: str,
        pricing: MultiLegPricing,
        departure_at: datetime,
        rng: SeededRandom,
        travel_class: str,
        travelers: Travelers,
        affiliate_provider: str | None,
    ) -> dict:
        carrier = rng.choice(hub.carriers)
        first_aircraft = rng.choice(self._aircraft_types)
        second_aircraft = rng.choice(self._aircraft_types)
        first_number = str(rng.randint(100, 999))
        second_number = str(rng.randint(100, 999))

        first_arrival = departure_at + timedelta(minutes=self.leg_duration(origin, hub.iata))
        second_departure = first_arrival + timedelta(days=layover_days)
        second_arrival = second_departure + timedelta(minutes=self.leg_duration(hub.iata, destination))

        legs = [
            Leg(origin, hub.iata, departure_at, first_arrival, carrier, first_number, first_aircraft),
            Leg(hub.iata, destination, second_departure, second_arrival, carrier, second_number, second_aircraft),
        ]
        currency = self.policy.currency
        offer = build_offer(
            offer_id=f"ML-{signature}",
            source="multi-leg",
            legs=legs,
            adult_fare=pricing.multi_leg_price,
            travelers=travelers,
            currency=currency,
            travel_class=travel_class,
        )

        stay_cost = layover_days * convert_from_usd(hub.average_daily_cost, currency)
        offer["multiLeg"] = True
        offer["stopoverInfo"] = {
            "hub": hub.to_dict(),
            "layoverDays": layover_days,
            "savings": pricing.savings,
            "savingsPercent": pricing.savings_percent,
            "directPrice": pricing.direct_price,
            "multiLegPrice": pricing.multi_leg_price,
            "totalCostWithStay": round(pricing.multi_leg_price + stay_cost, 2),
            "routeSignature": signature,
        }

        affiliate_url = build_affiliate_url(affiliate_provider, origin, destination, departure_at.date())
        if affiliate_url:
            offer["affiliateUrl"] = affiliate_url
        return offer


multi_leg_synthesizer = MultiLegSynthesizer()
