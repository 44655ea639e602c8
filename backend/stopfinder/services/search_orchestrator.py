"""Search orchestrator — provider call, offer synthesis and ranking for one search."""

import logging
import time
from typing import Protocol

from stopfinder.schemas.search import FlightSearchRequest
from stopfinder.services.aggregator import aggregate, build_dictionaries, build_meta
from stopfinder.services.airport_expander import AirportExpander, airport_expander
from stopfinder.services.amadeus_client import amadeus_client, build_search_params
from stopfinder.services.multi_leg_synthesizer import MultiLegSynthesizer, multi_leg_synthesizer
from stopfinder.services.offer_builder import Travelers
from stopfinder.services.seeded_random import SeededRandom
from stopfinder.services.synthetic_offers import SyntheticOfferGenerator, synthetic_offer_generator

logger = logging.getLogger(__name__)


class OfferProvider(Protocol):
    async def search_offers(self, params: dict) -> dict: ...


def _tag_provider_offer(offer: dict) -> dict:
    tagged = dict(offer)
    if "source" in offer:
        tagged["providerSource"] = offer["source"]
    tagged["source"] = "provider"
    tagged.setdefault("multiLeg", False)
    return tagged


class SearchOrchestrator:
    """Runs the search pipeline: expand → provider → synthesize → rank."""

    def __init__(
        self,
        provider: OfferProvider = amadeus_client,
        expander: AirportExpander = airport_expander,
        synthesizer: MultiLegSynthesizer = multi_leg_synthesizer,
        generator: SyntheticOfferGenerator = synthetic_offer_generator,
    ):
        self.provider = provider
        self.expander = expander
        self.synthesizer = synthesizer
        self.generator = generator

    async def search(self, req: FlightSearchRequest) -> dict:
        """
        Execute one flight search.

        Returns the success payload: flights, meta and dictionaries.
        Provider failures are absorbed; anything else propagates.
        """
        start_time = time.monotonic()
        include_neighbors = req.include_neighboring_countries
        origin_airports = self.expander.expand_all(req.origins, include_neighbors)
        destination_airports = self.expander.expand_all(req.destinations, include_neighbors)

        primary_origin = origin_airports[0]
        primary_destination = destination_airports[0]
        searched_routes = [f"{primary_origin}-{primary_destination}"]
        travel_class = req.travel_class.value
        travelers = Travelers(req.adults, req.children, req.infants)
        departure_at = req.date_range.departure_at(self.synthesizer.policy.departure_hour)

        logger.info(
            f"Flight search {req.search_id or '-'}: {req.origins}->{req.destinations} "
            f"({len(origin_airports)}x{len(destination_airports)} airports), "
            f"date={req.date_range.departure_date.isoformat()}, flex=±{req.departure_flex}/±{req.return_flex}, "
            f"class={travel_class}, stopovers={req.auto_recommend_stopovers}, "
            f"neighbors={include_neighbors}"
        )

        # 1. Provider, primary route only, one attempt
        provider_offers: list[dict] = []
        provider_dictionaries: dict = {}
        params = build_search_params(
            primary_origin,
            primary_destination,
            req.date_range.departure_date,
            return_date=req.date_range.return_date,
            adults=req.adults,
            children=req.children,
            infants=req.infants,
            travel_class=travel_class,
            non_stop=req.non_stop,
            max_results=req.max_results,
        )
        try:
            response = await self.provider.search_offers(params)
            provider_offers = [_tag_provider_offer(o) for o in response.get("data", [])]
            provider_dictionaries = response.get("dictionaries") or {}
        except Exception as e:
            logger.warning(f"Provider search failed for {searched_routes[0]}, using generated offers: {e}")

        # 2. Multi-leg stopover itineraries
        rng = SeededRandom(req.search_id)
        enhanced_multi_leg = bool(
            req.auto_recommend_stopovers and origin_airports and destination_airports
        )
        multi_leg_offers: list[dict] = []
        if enhanced_multi_leg:
            multi_leg_offers = self.synthesizer.synthesize(
                origin_airports,
                destination_airports,
                departure_at,
                rng,
                travel_class=travel_class,
                travelers=travelers,
                affiliate_provider=req.affiliate_provider,
            )

        # 3. Pad thin provider results
        # Floor counts provider offers only; multi-leg offers do not suppress padding.
        synthetic_offers: list[dict] = []
        if self.generator.needs_padding(len(provider_offers)):
            synthetic_offers = self.generator.generate(
                primary_origin,
                primary_destination,
                departure_at,
                travel_class=travel_class,
                travelers=travelers,
                affiliate_provider=req.affiliate_provider,
                non_stop=req.non_stop,
            )
            logger.info(
                f"Padding {len(provider_offers)} provider offers with {len(synthetic_offers)} synthetic offers"
            )

        # 4. Rank and cap
        flights = aggregate(provider_offers, synthetic_offers, multi_leg_offers, req.max_results)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"Flight search {req.search_id or '-'} done in {elapsed_ms}ms: {len(flights)} offers "
            f"(provider={len(provider_offers)}, synthetic={len(synthetic_offers)}, "
            f"multi-leg={len(multi_leg_offers)})"
        )

        return {
            "success": True,
            "flights": flights,
            "meta": build_meta(
                flights,
                provider_offer_count=len(provider_offers),
                searched_routes=searched_routes,
                total_possible_routes=len(origin_airports) * len(destination_airports),
                enhanced_multi_leg=enhanced_multi_leg,
                search_id=req.search_id,
            ),
            "dictionaries": build_dictionaries(provider_dictionaries),
        }


search_orchestrator = SearchOrchestrator()
