"""Async client for the Geoapify location APIs.

    async with GeoapifyClient("YOUR_API_KEY") as client:
        found = await client.geocoding.search(SearchParams(text="1313 Broadway, Tacoma, WA"))
"""

from .client import EndpointCall, GeoapifyClient
from .config import DEFAULT_BASE_URL, RetryConfig, Settings
from .endpoints import *  # noqa: F401,F403
from .endpoints import __all__ as _endpoint_names
from .errors import (
    APIError,
    ConfigError,
    DecodeError,
    GeoapifyError,
    PollTimeoutError,
    RequestBuildError,
    RequestError,
    ResponseReadError,
    TransportError,
    as_api_error,
)
from .logger import setup_logging
from .models import *  # noqa: F401,F403
from .models import __all__ as _model_names
from .retry import RetryPolicy, is_retryable

__all__ = [
    "APIError",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "EndpointCall",
    "GeoapifyClient",
    "GeoapifyError",
    "PollTimeoutError",
    "RequestBuildError",
    "RequestError",
    "ResponseReadError",
    "RetryConfig",
    "RetryPolicy",
    "Settings",
    "TransportError",
    "as_api_error",
    "is_retryable",
    "setup_logging",
    *_endpoint_names,
    *_model_names,
]
