"""Offer builder — assembles Amadeus-shaped flight offers for generated itineraries."""

import math
from dataclasses import dataclass
from datetime import datetime

from stopfinder.services.policy import TRAVELER_FARE_SHARES


@dataclass(frozen=True)
class Travelers:
    adults: int = 1
    children: int = 0
    infants: int = 0

    def types(self) -> list[str]:
        """Traveler types in Amadeus order: adults, children, held infants."""
        return (
            ["ADULT"] * self.adults
            + ["CHILD"] * self.children
            + ["HELD_INFANT"] * self.infants
        )


@dataclass(frozen=True)
class Leg:
    origin: str
    destination: str
    departure: datetime
    arrival: datetime
    carrier: str
    number: str
    aircraft: str

    @property
    def duration_minutes(self) -> int:
        return int((self.arrival - self.departure).total_seconds() // 60)


def format_amount(amount: float) -> str:
    return f"{amount:.2f}"


def format_duration(minutes: int) -> str:
    """Minutes to ISO 8601 duration (PT2H30M). Hours are not folded into days."""
    hours, mins = divmod(int(minutes), 60)
    return f"PT{hours}H{mins}M"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_itinerary(legs: list[Leg]) -> dict:
    """Itinerary whose duration spans first departure to last arrival."""
    segments = []
    for idx, leg in enumerate(legs, start=1):
        segments.append({
            "id": str(idx),
            "departure": {"iataCode": leg.origin, "at": leg.departure.isoformat(timespec="seconds")},
            "arrival": {"iataCode": leg.destination, "at": leg.arrival.isoformat(timespec="seconds")},
            "carrierCode": leg.carrier,
            "number": leg.number,
            "aircraft": {"code": leg.aircraft},
            "duration": format_duration(leg.duration_minutes),
            "numberOfStops": 0,
        })
    span = int((legs[-1].arrival - legs[0].departure).total_seconds() // 60)
    return {"duration": format_duration(span), "segments": segments}


def build_pricing(
    adult_fare: float,
    travelers: Travelers,
    currency: str,
    travel_class: str,
    segment_count: int,
) -> tuple[dict, list[dict]]:
    """
    Price block and per-traveler breakdown.

    Each traveler pays its share of the adult fare; the offer total is the
    sum over travelers. Base fare is 85% of the total, the rest is taxes.
    """
    traveler_pricings = []
    total = 0.0
    for idx, traveler_type in enumerate(travelers.types(), start=1):
        amount = round(adult_fare * TRAVELER_FARE_SHARES[traveler_type], 2)
        total += amount
        traveler_pricings.append({
            "travelerId": str(idx),
            "fareOption": "STANDARD",
            "travelerType": traveler_type,
            "price": {
                "currency": currency,
                "total": format_amount(amount),
                "base": format_amount(round(amount * 0.85, 2)),
            },
            "fareDetailsBySegment": [
                {"segmentId": str(seg), "cabin": travel_class}
                for seg in range(1, segment_count + 1)
            ],
        })

    total = round(total, 2)
    base = round(total * 0.85, 2)
    price = {
        "currency": currency,
        "total": format_amount(total),
        "base": format_amount(base),
        "fees": [
            {"amount": "0.00", "type": "SUPPLIER"},
            {"amount": "0.00", "type": "TICKETING"},
            {"amount": format_amount(round(total - base, 2)), "type": "TAXES"},
        ],
        "grandTotal": format_amount(total),
    }
    return price, traveler_pricings


def build_offer(
    offer_id: str,
    source: str,
    legs: list[Leg],
    adult_fare: float,
    travelers: Travelers,
    currency: str,
    travel_class: str,
) -> dict:
    price, traveler_pricings = build_pricing(
        adult_fare, travelers, currency, travel_class, segment_count=len(legs)
    )
    return {
        "type": "flight-offer",
        "id": offer_id,
        "source": source,
        "oneWay": True,
        "numberOfBookableSeats": 9,
        "itineraries": [build_itinerary(legs)],
        "price": price,
        "travelerPricings": traveler_pricings,
        "validatingAirlineCodes": [legs[0].carrier],
        "multiLeg": False,
    }
