"""Currency utilities — static exchange rates and conversion."""

# Static exchange rates to USD (can be updated periodically)
EXCHANGE_RATES_TO_USD: dict[str, float] = {
    "USD": 1.0,
    "PLN": 0.25,
    "EUR": 1.08,
    "GBP": 1.27,
    "CZK": 0.043,
    "CHF": 1.13,
    "SEK": 0.095,
    "NOK": 0.093,
    "DKK": 0.145,
    "HUF": 0.0027,
    "TRY": 0.031,
    "AED": 0.27,
    "QAR": 0.27,
    "SGD": 0.75,
    "THB": 0.028,
    "JPY": 0.0067,
    "AUD": 0.65,
    "CAD": 0.74,
}


def convert_from_usd(amount: float, to_currency: str) -> float:
    """Convert a USD amount to another currency using static exchange rates."""
    rate = EXCHANGE_RATES_TO_USD.get(to_currency, 1.0)
    if rate == 0:
        return amount
    return round(amount / rate, 2)
