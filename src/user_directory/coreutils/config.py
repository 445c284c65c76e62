"""
API configuration - a single immutable value handed to the client at construction
"""

from dataclasses import dataclass

from .env import env_get, env_int

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT_MS = 8000
DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_BASE_MS = 1000
DEFAULT_BACKOFF_CAP_MS = 3000


@dataclass(frozen=True)
class APIConfig:
    """Connection settings for the users API"""

    base_url: str = DEFAULT_BASE_URL
    request_timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_base_ms: int = DEFAULT_BACKOFF_BASE_MS
    backoff_cap_ms: int = DEFAULT_BACKOFF_CAP_MS

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.request_timeout_ms <= 0:
            raise ValueError(
                f"request_timeout_ms must be positive, got {self.request_timeout_ms}"
            )
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        # frozen dataclass, so bypass __setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Build config from USERS_API_* environment variables (or .env)"""
        return cls(
            base_url=env_get("USERS_API_BASE_URL", DEFAULT_BASE_URL),
            request_timeout_ms=env_int("USERS_API_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            max_retries=env_int("USERS_API_MAX_RETRIES", DEFAULT_MAX_RETRIES),
        )
