"""Amadeus API client — flight-offer search with OAuth2 client-credentials auth.

Every call is attempted exactly once. Any failure surfaces as ProviderError
so the search pipeline can fall back to generated offers.
"""

import logging
from datetime import date, datetime, timedelta, timezone

import httpx

from stopfinder.config import settings

logger = logging.getLogger(__name__)

AMADEUS_MAX_OFFERS = 250


class ProviderError(Exception):
    """The upstream flight-data provider could not serve the request."""


class ProviderNotConfiguredError(ProviderError):
    """No provider credentials are configured."""


def build_search_params(
    origin: str,
    destination: str,
    departure_date: date,
    return_date: date | None = None,
    adults: int = 1,
    children: int = 0,
    infants: int = 0,
    travel_class: str = "ECONOMY",
    non_stop: bool = False,
    currency: str = settings.currency,
    max_results: int = settings.amadeus_max_offers,
) -> dict:
    """Query parameters for GET /v2/shopping/flight-offers."""
    params = {
        "originLocationCode": origin,
        "destinationLocationCode": destination,
        "departureDate": departure_date.isoformat(),
        "adults": adults,
        "travelClass": travel_class,
        "currencyCode": currency,
        "max": min(max_results, AMADEUS_MAX_OFFERS),
        "nonStop": "true" if non_stop else "false",
    }
    if return_date:
        params["returnDate"] = return_date.isoformat()
    if children:
        params["children"] = children
    if infants:
        params["infants"] = infants
    return params


class AmadeusClient:
    """Adapter for Amadeus Self-Service API."""

    def __init__(
        self,
        client_id: str = settings.amadeus_client_id,
        client_secret: str = settings.amadeus_client_secret,
        base_url: str = settings.amadeus_base_url,
        timeout: float = settings.amadeus_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._token: str | None = None
        self._token_expires: datetime | None = None
        self._client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self._client_id and self._client_secret)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def _ensure_token(self) -> str:
        """Get or refresh the OAuth2 token, kept until a minute before expiry."""
        if self._token and self._token_expires and datetime.now(timezone.utc) < self._token_expires:
            return self._token

        client = await self._get_client()
        try:
            resp = await client.post(
                "/v1/security/oauth2/token",
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            resp.raise_for_status()
            data = resp.json()
            self._token = data["access_token"]
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"Amadeus OAuth failed: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise ProviderError(f"Amadeus OAuth request error: {e}") from e
        except (ValueError, KeyError) as e:
            raise ProviderError(f"Amadeus OAuth returned an unexpected body: {e}") from e

        self._token_expires = datetime.now(timezone.utc) + timedelta(
            seconds=data.get("expires_in", 1799) - 60
        )
        logger.info("Amadeus token refreshed")
        return self._token

    async def search_offers(self, params: dict) -> dict:
        """
        Search flight offers.

        Returns {"data": [...offers], "dictionaries": {...}}; raises
        ProviderError on missing credentials, HTTP or transport errors.
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError("Amadeus API credentials not configured")

        token = await self._ensure_token()
        client = await self._get_client()
        try:
            resp = await client.get(
                "/v2/shopping/flight-offers",
                params=params,
                headers={"Authorization": f"Bearer {token}"},
            )
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"Amadeus search error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise ProviderError(f"Amadeus request error: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Amadeus returned invalid JSON: {e}") from e

        offers = body.get("data") or []
        logger.info(
            f"Amadeus returned {len(offers)} offers for "
            f"{params.get('originLocationCode')}->{params.get('destinationLocationCode')}"
        )
        return {"data": offers, "dictionaries": body.get("dictionaries") or {}}

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


amadeus_client = AmadeusClient()
