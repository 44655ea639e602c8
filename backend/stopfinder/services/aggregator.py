"""Aggregator — merges offer streams, ranks by price and caps the result set."""

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timezone

from stopfinder.data.routes import AIRCRAFT_NAMES, CARRIER_NAMES

logger = logging.getLogger(__name__)


def parse_total_price(offer: dict) -> float:
    """Offer total as a float. Unparsable or non-finite prices count as 0 and sort first."""
    try:
        total = float(offer["price"]["total"])
    except (KeyError, TypeError, ValueError):
        return 0.0
    return total if math.isfinite(total) else 0.0


def aggregate(
    provider_offers: list[dict],
    synthetic_offers: list[dict],
    multi_leg_offers: list[dict],
    max_results: int,
) -> list[dict]:
    """Concatenate all streams, sort ascending by total price, truncate to max_results."""
    merged = [*provider_offers, *synthetic_offers, *multi_leg_offers]
    merged.sort(key=parse_total_price)
    if len(merged) > max_results:
        logger.debug(f"Truncating {len(merged)} offers to {max_results}")
        merged = merged[:max_results]
    return merged


def build_dictionaries(provider_dictionaries: Mapping | None = None) -> dict:
    """Carrier and aircraft display names; the provider's entries win on conflict."""
    provider_dictionaries = provider_dictionaries or {}
    return {
        "carriers": {**CARRIER_NAMES, **(provider_dictionaries.get("carriers") or {})},
        "aircraft": {**AIRCRAFT_NAMES, **(provider_dictionaries.get("aircraft") or {})},
    }


def build_meta(
    flights: list[dict],
    provider_offer_count: int,
    searched_routes: list[str],
    total_possible_routes: int,
    enhanced_multi_leg: bool,
    search_id: str | None = None,
) -> dict:
    return {
        "count": len(flights),
        "dataSource": "provider" if provider_offer_count > 0 else "mock",
        "searchedRoutes": searched_routes,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "totalPossibleRoutes": total_possible_routes,
        "enhancedMultiLeg": enhanced_multi_leg,
        "multiLegCount": sum(1 for f in flights if f.get("multiLeg")),
        "searchId": search_id,
    }
