"""Search engine policies — single source for all expansion and synthesis thresholds."""

from dataclasses import dataclass

from stopfinder.config import Settings, settings


@dataclass(frozen=True)
class ExpansionLimits:
    """How far a region code may be widened into concrete airports."""
    max_airports_per_side: int = 10
    max_neighbor_regions: int = 5
    airports_per_neighbor_region: int = 3
    max_neighbor_airports: int = 15

    @classmethod
    def from_settings(cls, s: Settings) -> "ExpansionLimits":
        return cls(
            max_airports_per_side=s.max_airports_per_side,
            max_neighbor_regions=s.max_neighbor_regions,
            airports_per_neighbor_region=s.airports_per_neighbor_region,
            max_neighbor_airports=s.max_neighbor_airports,
        )


@dataclass(frozen=True)
class MultiLegPolicy:
    """When a hub itinerary is priced, discounted and accepted."""
    acceptance_ratio: float = 1.15       # multi-leg <= 115% of direct
    long_layover_threshold_days: int = 2  # strictly more than this earns the discount
    long_layover_discount: float = 0.05
    layover_days_min: int = 2
    layover_days_max: int = 3
    default_direct_price: float = 3500.0
    default_leg_price: float = 1600.0
    default_leg_duration_minutes: int = 480
    departure_hour: int = 10
    currency: str = "PLN"

    @classmethod
    def from_settings(cls, s: Settings) -> "MultiLegPolicy":
        return cls(
            acceptance_ratio=s.multi_leg_acceptance_ratio,
            long_layover_threshold_days=s.long_layover_threshold_days,
            long_layover_discount=s.long_layover_discount,
            layover_days_min=s.layover_days_min,
            layover_days_max=s.layover_days_max,
            default_direct_price=s.default_direct_price,
            default_leg_price=s.default_leg_price,
            default_leg_duration_minutes=s.default_leg_duration_minutes,
            departure_hour=s.departure_hour,
            currency=s.currency,
        )


@dataclass(frozen=True)
class SyntheticPolicy:
    """Padding of thin result sets with baseline offers."""
    padding_floor: int = 10
    one_stop_discount: float = 0.15
    connection_minutes: int = 150

    @classmethod
    def from_settings(cls, s: Settings) -> "SyntheticPolicy":
        return cls(padding_floor=s.synthetic_padding_floor)


# Travel class → price multiplier
CLASS_MULTIPLIERS: dict[str, float] = {
    "ECONOMY": 1.0,
    "PREMIUM_ECONOMY": 1.5,
    "BUSINESS": 3.0,
    "FIRST": 5.0,
}

# Traveler type → share of the adult fare
TRAVELER_FARE_SHARES: dict[str, float] = {
    "ADULT": 1.0,
    "CHILD": 0.75,
    "HELD_INFANT": 0.1,
}


def class_multiplier(travel_class: str) -> float:
    return CLASS_MULTIPLIERS.get(travel_class.upper(), 1.0)


expansion_limits = ExpansionLimits.from_settings(settings)
multi_leg_policy = MultiLegPolicy.from_settings(settings)
synthetic_policy = SyntheticPolicy.from_settings(settings)
