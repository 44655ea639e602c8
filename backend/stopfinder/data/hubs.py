"""Stopover hub catalog and hub eligibility rules.

Hubs are tried in catalog order. A hub rule applies when the origin airport
belongs to one of its origin regions and the destination airport to one of
its destination regions; the hub must then be in the rule's allowed set.
"""

from dataclasses import dataclass

from stopfinder.data.airports import EAST_ASIA, EUROPE, OCEANIA, SOUTH_ASIA, SOUTHEAST_ASIA


@dataclass(frozen=True)
class Hub:
    iata: str
    name: str
    city: str
    country: str
    min_layover_days: int
    max_layover_days: int
    carriers: tuple[str, ...]
    attractions: tuple[str, ...]
    description: str
    average_daily_cost: float  # USD, hotel + food + local transport

    def to_dict(self) -> dict:
        return {
            "iata": self.iata,
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "attractions": list(self.attractions),
            "description": self.description,
            "averageDailyCost": self.average_daily_cost,
            "minLayoverDays": self.min_layover_days,
            "maxLayoverDays": self.max_layover_days,
        }


@dataclass(frozen=True)
class HubRule:
    name: str
    origin_regions: frozenset[str]
    destination_regions: frozenset[str]
    allowed_hubs: frozenset[str]


HUB_CATALOG: tuple[Hub, ...] = (
    Hub(
        iata="DXB",
        name="Dubai International Airport",
        city="Dubai",
        country="United Arab Emirates",
        min_layover_days=1,
        max_layover_days=4,
        carriers=("EK", "FZ"),
        attractions=("Burj Khalifa", "Dubai Mall", "Desert safari", "Gold Souk", "Palm Jumeirah"),
        description="Skyscrapers, desert dunes and year-round sunshine between two long flights.",
        average_daily_cost=150.0,
    ),
    Hub(
        iata="DOH",
        name="Hamad International Airport",
        city="Doha",
        country="Qatar",
        min_layover_days=1,
        max_layover_days=3,
        carriers=("QR",),
        attractions=("Museum of Islamic Art", "Souq Waqif", "The Pearl-Qatar", "Katara Cultural Village"),
        description="Compact, walkable waterfront with world-class museums.",
        average_daily_cost=120.0,
    ),
    Hub(
        iata="IST",
        name="Istanbul Airport",
        city="Istanbul",
        country="Turkey",
        min_layover_days=1,
        max_layover_days=4,
        carriers=("TK",),
        attractions=("Hagia Sophia", "Grand Bazaar", "Bosphorus cruise", "Topkapi Palace", "Blue Mosque"),
        description="Two continents, Byzantine and Ottoman history and excellent food.",
        average_daily_cost=80.0,
    ),
    Hub(
        iata="AUH",
        name="Zayed International Airport",
        city="Abu Dhabi",
        country="United Arab Emirates",
        min_layover_days=1,
        max_layover_days=3,
        carriers=("EY",),
        attractions=("Sheikh Zayed Grand Mosque", "Louvre Abu Dhabi", "Yas Island", "Corniche"),
        description="Calmer Gulf capital with landmark architecture and beaches.",
        average_daily_cost=140.0,
    ),
    Hub(
        iata="SIN",
        name="Singapore Changi Airport",
        city="Singapore",
        country="Singapore",
        min_layover_days=1,
        max_layover_days=3,
        carriers=("SQ", "TR"),
        attractions=("Gardens by the Bay", "Marina Bay Sands", "Hawker centres", "Sentosa"),
        description="Garden city stopover on the way to Australia and New Zealand.",
        average_daily_cost=160.0,
    ),
)

HUB_RULES: tuple[HubRule, ...] = (
    HubRule(
        name="europe-southeast-asia",
        origin_regions=EUROPE,
        destination_regions=SOUTHEAST_ASIA,
        allowed_hubs=frozenset({"DXB", "DOH", "IST", "AUH"}),
    ),
    HubRule(
        name="europe-east-asia",
        origin_regions=EUROPE,
        destination_regions=EAST_ASIA,
        allowed_hubs=frozenset({"DXB", "DOH", "IST"}),
    ),
    HubRule(
        name="europe-south-asia",
        origin_regions=EUROPE,
        destination_regions=SOUTH_ASIA,
        allowed_hubs=frozenset({"DXB", "DOH", "AUH"}),
    ),
    HubRule(
        name="europe-oceania",
        origin_regions=EUROPE,
        destination_regions=OCEANIA,
        allowed_hubs=frozenset({"DXB", "DOH", "SIN"}),
    ),
)

# Origins where routing through a hub plausibly beats a direct long-haul fare
LONG_HAUL_ORIGIN_REGIONS = EUROPE
LONG_HAUL_DESTINATION_REGIONS = SOUTHEAST_ASIA | EAST_ASIA | SOUTH_ASIA | OCEANIA
