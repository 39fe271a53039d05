import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from geoapify.config import DEFAULT_BASE_URL, RetryConfig, Settings
from geoapify.endpoints import (
    BatchGeocodingService,
    BoundariesService,
    GeocodingService,
    IPGeolocationService,
    IsolinesService,
    MapMatchingService,
    PlaceDetailsService,
    PlacesService,
    PostcodeService,
    RouteMatrixService,
    RoutePlannerService,
    RoutingService,
)
from geoapify.errors import (
    APIError,
    DecodeError,
    RequestBuildError,
    ResponseReadError,
    RetryableError,
    TransportError,
)
from geoapify.retry import RetryPolicy, is_retryable

log = logging.getLogger(__name__)

QueryParams = Union[Mapping[str, str], Sequence[Tuple[str, str]]]

API_KEY_PARAM = "apiKey"


@dataclass(frozen=True)
class EndpointCall:
    """One logical request: method, path, ordered query pairs and optional body."""

    method: str
    path: str
    params: Tuple[Tuple[str, str], ...] = ()
    body: Any = None
    target: Any = None


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _pairs(params: Optional[QueryParams]) -> Tuple[Tuple[str, str], ...]:
    if not params:
        return ()
    items = params.items() if isinstance(params, Mapping) else params
    return tuple((str(k), str(v)) for k, v in items)


class GeoapifyClient:
    """A client for the Geoapify location APIs. Handles auth, dispatch and retries.

    Every endpoint service goes through `execute_get` / `execute_post`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        retry: Optional[RetryConfig] = None,
    ):
        """
        Initializes the client with the API key and optional transport and retry settings.

        Args:
            api_key (str): Geoapify API key, sent as the `apiKey` query parameter.
            base_url (str): API host; trailing slashes are stripped.
            http_client (httpx.AsyncClient, optional): Shared transport. When
                omitted the client creates one without a timeout and owns it.
            retry (RetryConfig, optional): Enables retries on 429/5xx.
        """
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=None)
        self.retry_config = retry
        self._retry = RetryPolicy(retry) if retry is not None else None

        self.geocoding = GeocodingService(self)
        self.batch_geocoding = BatchGeocodingService(self)
        self.routing = RoutingService(self)
        self.route_matrix = RouteMatrixService(self)
        self.route_planner = RoutePlannerService(self)
        self.map_matching = MapMatchingService(self)
        self.isolines = IsolinesService(self)
        self.places = PlacesService(self)
        self.place_details = PlaceDetailsService(self)
        self.boundaries = BoundariesService(self)
        self.ip_geolocation = IPGeolocationService(self)
        self.postcode = PostcodeService(self)

        log.debug(
            f"Geoapify client initialized for {self.base_url} "
            f"(retries: {retry.max_retries if retry else 'off'})"
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "GeoapifyClient":
        """Builds a client from Settings (read from the environment by default)."""
        settings = settings or Settings.from_env()
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            http_client=http_client,
            retry=settings.retry,
        )

    async def aclose(self) -> None:
        """Closes the transport if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "GeoapifyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # === Request execution ====================================================

    def build_url(self, path: str, params: Optional[QueryParams] = None) -> str:
        """Joins base URL and path and appends the query, with `apiKey` last.

        A caller-supplied `apiKey` is dropped in favour of the client's key.
        """
        pairs: List[Tuple[str, str]] = [
            (k, v) for k, v in _pairs(params) if k != API_KEY_PARAM
        ]
        pairs.append((API_KEY_PARAM, self._api_key))
        query = str(httpx.QueryParams(pairs))
        return f"{self.base_url}{path}?{query}"

    async def execute_get(
        self,
        path: str,
        params: Optional[QueryParams] = None,
        target: Any = None,
    ) -> Any:
        """Performs a GET and decodes the body into `target`.

        Args:
            path (str): API path, e.g. "/v1/geocode/search".
            params (mapping or pairs, optional): Query parameters, in order.
            target (type, optional): Shape to decode the body into (a pydantic
                model, `dict`, `List[Model]`, ...). None skips decoding.

        Returns:
            The decoded body, or None when no target is given.
        """
        call = EndpointCall("GET", path, _pairs(params), target=target)
        return await self._execute(call)

    async def execute_post(
        self,
        path: str,
        params: Optional[QueryParams] = None,
        body: Any = None,
        target: Any = None,
    ) -> Any:
        """Performs a POST with `body` serialized as JSON and decodes the result.

        Args:
            path (str): API path, e.g. "/v1/routematrix".
            params (mapping or pairs, optional): Query parameters, in order.
            body: Any JSON-serializable value.
            target (type, optional): Shape to decode the body into.

        Returns:
            The decoded body, or None when no target is given.
        """
        call = EndpointCall("POST", path, _pairs(params), body=body, target=target)
        return await self._execute(call)

    async def _execute(self, call: EndpointCall) -> Any:
        url, content, headers = self._prepare(call)

        async def attempt() -> Any:
            return await self._attempt(call, url, content, headers)

        if self._retry is None:
            try:
                return await attempt()
            except RetryableError as e:
                raise e.error from None

        return await self._retry.run(attempt)

    def _prepare(
        self, call: EndpointCall
    ) -> Tuple[str, Optional[bytes], Dict[str, str]]:
        """Builds the URL and encodes the body once per logical call."""
        headers: Dict[str, str] = {}
        content = None
        try:
            url = self.build_url(call.path, call.params)
            if call.method == "POST":
                content = json.dumps(call.body, allow_nan=False).encode("utf-8")
                headers["Content-Type"] = "application/json"
        except (TypeError, ValueError) as e:
            raise RequestBuildError(e) from e
        return url, content, headers

    async def _attempt(
        self,
        call: EndpointCall,
        url: str,
        content: Optional[bytes],
        headers: Dict[str, str],
    ) -> Any:
        """Makes exactly one round trip and classifies the outcome."""
        log.debug(f"{call.method} {self.base_url}{call.path}")

        try:
            request = self._http.build_request(
                call.method, url, content=content, headers=headers
            )
        except (TypeError, ValueError, httpx.InvalidURL) as e:
            raise RequestBuildError(e) from e

        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(e) from e

        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            raise ResponseReadError(e) from e
        finally:
            await response.aclose()

        status = response.status_code
        if not 200 <= status < 300:
            error = APIError.from_response(status, body)
            log.debug(f"HTTP {status} on {call.path}: {error.message}")
            if is_retryable(status):
                raise RetryableError(error, response.headers.get("Retry-After"))
            raise error

        return self._decode(body, call.target)

    @staticmethod
    def _decode(body: bytes, target: Any) -> Any:
        if target is None:
            return None
        try:
            return _adapter(target).validate_json(body)
        except ValidationError as e:
            raise DecodeError(e) from e
