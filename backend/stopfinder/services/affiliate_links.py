"""Affiliate deep links for booking partners."""

from datetime import date
from urllib.parse import urlencode

from stopfinder.config import settings

AFFILIATE_TEMPLATES: dict[str, str] = {
    "skyscanner": "https://www.skyscanner.net/transport/flights/{origin}/{destination}/{yymmdd}/",
    "kiwi": "https://www.kiwi.com/deep?from={origin}&to={destination}&departure={iso_date}",
    "kayak": "https://www.kayak.com/flights/{origin}-{destination}/{iso_date}",
}


def build_affiliate_url(
    provider: str | None,
    origin: str,
    destination: str,
    departure_date: date,
    base_url: str = settings.affiliate_base_url,
) -> str | None:
    """Deep link for the partner, tagged with the partner id. None without a partner."""
    if not provider:
        return None

    key = provider.strip().lower()
    template = AFFILIATE_TEMPLATES.get(key)
    if template:
        url = template.format(
            origin=origin.lower() if key == "skyscanner" else origin,
            destination=destination.lower() if key == "skyscanner" else destination,
            yymmdd=departure_date.strftime("%y%m%d"),
            iso_date=departure_date.isoformat(),
        )
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{urlencode({'affiliate': provider})}"

    query = urlencode({
        "q": f"Flights from {origin} to {destination} on {departure_date.isoformat()}",
        "affiliate": provider,
    })
    return f"{base_url}?{query}"
