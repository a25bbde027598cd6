import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # football-data.org
    football_api_key: str | None = os.getenv("FOOTBALL_API_KEY")
    football_api_base_url: str = os.getenv("FOOTBALL_API_BASE_URL", "https://api.football-data.org/v4")
    football_competition: str = os.getenv("FOOTBALL_COMPETITION", "WC")  # FIFA World Cup
    match_cache_ttl: int = int(os.getenv("MATCH_CACHE_TTL", "1800"))  # 30 minutes

    # Beehiiv
    beehiiv_api_key: str | None = os.getenv("BEEHIIV_API_KEY")
    beehiiv_pub_id: str | None = os.getenv("BEEHIIV_PUB_ID")
    beehiiv_base_url: str = os.getenv("BEEHIIV_BASE_URL", "https://api.beehiiv.com")
    subscribe_utm_source: str = os.getenv("SUBSCRIBE_UTM_SOURCE", "wc26-pwa")
    subscribe_utm_medium: str = os.getenv("SUBSCRIBE_UTM_MEDIUM", "gate")

    # Outbound HTTP
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    @property
    def has_beehiiv_credentials(self) -> bool:
        """Check if both Beehiiv credentials are present.

        Returns:
            True if the API key and publication id are set, False otherwise
        """
        return bool(self.beehiiv_api_key) and bool(self.beehiiv_pub_id)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.match_cache_ttl <= 0:
            raise ValueError("MATCH_CACHE_TTL must be a positive number of seconds")

        if self.upstream_timeout <= 0:
            raise ValueError(
                f"UPSTREAM_TIMEOUT must be a positive number of seconds, got {self.upstream_timeout}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
