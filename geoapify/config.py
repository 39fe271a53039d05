import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from geoapify.errors import ConfigError

load_dotenv()
log = logging.getLogger(__name__)


# Public API host
DEFAULT_BASE_URL = "https://api.geoapify.com"

# Environment variables read by Settings.from_env()
API_KEY_ENV = "GEOAPIFY_API_KEY"
BASE_URL_ENV = "GEOAPIFY_BASE_URL"
MAX_RETRIES_ENV = "GEOAPIFY_MAX_RETRIES"
INITIAL_DELAY_ENV = "GEOAPIFY_RETRY_INITIAL_DELAY"
MAX_DELAY_ENV = "GEOAPIFY_RETRY_MAX_DELAY"

# Retry defaults when only GEOAPIFY_MAX_RETRIES is given (seconds)
DEFAULT_INITIAL_DELAY = 0.5
DEFAULT_MAX_DELAY = 30.0


class RetryConfig(BaseModel):
    """Retry settings shared by every call made through one client.

    Attributes:
        max_retries (int): Retries after the first attempt (0 disables them).
        initial_delay (float): Backoff before the first retry, in seconds.
        max_delay (float): Upper bound on any computed backoff, in seconds.
    """

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(ge=0)
    initial_delay: float = Field(gt=0)
    max_delay: float

    @model_validator(mode="after")
    def _check_delays(self) -> "RetryConfig":
        if self.max_delay < self.initial_delay:
            raise ValueError("max_delay must be >= initial_delay")
        return self


class Settings(BaseModel):
    """Client settings, usually loaded from the environment."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    retry: Optional[RetryConfig] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Reads settings from GEOAPIFY_* environment variables (and a .env file).

        Retries stay disabled unless GEOAPIFY_MAX_RETRIES is set.

        Returns:
            Settings: The parsed settings.

        Raises:
            ConfigError: If the API key is missing or a value is invalid.
        """
        api_key = os.getenv(API_KEY_ENV)
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} is not set")

        retry = None
        max_retries = os.getenv(MAX_RETRIES_ENV)
        try:
            if max_retries is not None:
                retry = RetryConfig(
                    max_retries=int(max_retries),
                    initial_delay=float(
                        os.getenv(INITIAL_DELAY_ENV, DEFAULT_INITIAL_DELAY)
                    ),
                    max_delay=float(os.getenv(MAX_DELAY_ENV, DEFAULT_MAX_DELAY)),
                )
            settings = cls(
                api_key=api_key,
                base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
                retry=retry,
            )
        except (ValueError, ValidationError) as e:
            raise ConfigError(f"Invalid retry settings: {e}") from e

        log.debug(
            f"Settings loaded: base_url={settings.base_url}, "
            f"retry={'off' if retry is None else retry.max_retries}"
        )
        return settings
