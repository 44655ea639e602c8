from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Amadeus
    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_base_url: str = "https://test.api.amadeus.com"
    amadeus_timeout_seconds: float = 20.0
    amadeus_max_offers: int = 50

    # Response currency and fallback airport for unknown region codes
    currency: str = "PLN"
    default_airport: str = "WAW"

    # Airport expansion
    max_airports_per_side: int = 10
    max_neighbor_regions: int = 5
    airports_per_neighbor_region: int = 3
    max_neighbor_airports: int = 15

    # Multi-leg synthesis
    multi_leg_acceptance_ratio: float = 1.15  # multi-leg may cost at most 15% more than direct
    long_layover_threshold_days: int = 2
    long_layover_discount: float = 0.05
    layover_days_min: int = 2
    layover_days_max: int = 3
    default_direct_price: float = 3500.0
    default_leg_price: float = 1600.0
    default_leg_duration_minutes: int = 480  # 8 hours
    departure_hour: int = 10

    # Synthetic padding
    synthetic_padding_floor: int = 10

    # Affiliate links
    affiliate_base_url: str = "https://www.google.com/travel/flights"

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
