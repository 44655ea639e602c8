"""Airport expander — turns region or airport codes into bounded airport lists."""

import logging
from collections.abc import Iterable, Mapping

from stopfinder.config import settings
from stopfinder.data.airports import NEIGHBOR_REGIONS, REGION_AIRPORTS
from stopfinder.services.policy import ExpansionLimits, expansion_limits

logger = logging.getLogger(__name__)


def _dedupe(codes: Iterable[str]) -> list[str]:
    seen = set()
    unique = []
    for code in codes:
        if code not in seen:
            seen.add(code)
            unique.append(code)
    return unique


class AirportExpander:
    """Resolves 2-letter region codes and 3-letter airport codes to airports."""

    def __init__(
        self,
        region_airports: Mapping[str, tuple[str, ...]] = REGION_AIRPORTS,
        neighbor_regions: Mapping[str, tuple[str, ...]] = NEIGHBOR_REGIONS,
        limits: ExpansionLimits = expansion_limits,
        default_airport: str = settings.default_airport,
    ):
        self._region_airports = region_airports
        self._neighbor_regions = neighbor_regions
        self._limits = limits
        self._default_airport = default_airport

    def expand(self, code: str, include_neighbors: bool = False) -> list[str]:
        """
        Expand one code into an ordered airport list.

        Airport codes pass through unchanged. Region codes map to their
        catalog airports, unknown ones to the default airport. With
        include_neighbors, airports of neighboring regions are appended.
        """
        code = code.strip().upper()
        if len(code) == 3:
            return [code]

        airports = list(self._region_airports.get(code, (self._default_airport,)))
        if include_neighbors and len(code) == 2:
            airports.extend(self.neighbor_airports(code))

        return _dedupe(airports)[: self._limits.max_airports_per_side]

    def expand_all(self, codes: Iterable[str], include_neighbors: bool = False) -> list[str]:
        """Expand every code of one side (origins or destinations) under the shared cap."""
        airports: list[str] = []
        for code in codes:
            airports.extend(self.expand(code, include_neighbors))
        return _dedupe(airports)[: self._limits.max_airports_per_side]

    def neighbor_airports(self, region: str) -> list[str]:
        """Top airports of the first neighboring regions, capped in total."""
        limits = self._limits
        neighbors = self._neighbor_regions.get(region, ())[: limits.max_neighbor_regions]

        airports: list[str] = []
        for neighbor in neighbors:
            airports.extend(self._region_airports.get(neighbor, ())[: limits.airports_per_neighbor_region])

        selected = airports[: limits.max_neighbor_airports]
        if selected:
            logger.debug(f"Region {region}: neighbor airports from {list(neighbors)}: {selected}")
        return selected


airport_expander = AirportExpander()
