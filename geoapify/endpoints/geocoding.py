from typing import List, Optional

from geoapify.models import Format, GeocodingResponse, LocationType

from .base import Params, Service, fixed, joined, positive, query


class SearchParams(Params):
    """Forward geocoding: free text and/or structured address parts."""

    text: str = ""
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postcode: Optional[str] = None
    housenumber: Optional[str] = None
    type: Optional[LocationType] = None
    lang: Optional[str] = None
    limit: Optional[int] = None
    filters: List[str] = []
    biases: List[str] = []
    format: Optional[Format] = None

    def to_query(self):
        return [("text", self.text)] + query(
            ("name", self.name),
            ("street", self.street),
            ("city", self.city),
            ("state", self.state),
            ("country", self.country),
            ("postcode", self.postcode),
            ("housenumber", self.housenumber),
            ("type", self.type),
            ("lang", self.lang),
            ("limit", positive(self.limit)),
            ("filter", joined(self.filters, "|")),
            ("bias", joined(self.biases, "|")),
            ("format", self.format),
        )


class ReverseParams(Params):
    lat: float
    lon: float
    type: Optional[LocationType] = None
    lang: Optional[str] = None
    limit: Optional[int] = None
    format: Optional[Format] = None

    def to_query(self):
        return query(
            ("lat", fixed(self.lat)),
            ("lon", fixed(self.lon)),
            ("type", self.type),
            ("lang", self.lang),
            ("limit", positive(self.limit)),
            ("format", self.format),
        )


class AutocompleteParams(Params):
    text: str
    type: Optional[LocationType] = None
    lang: Optional[str] = None
    filters: List[str] = []
    biases: List[str] = []
    format: Optional[Format] = None

    def to_query(self):
        return [("text", self.text)] + query(
            ("type", self.type),
            ("lang", self.lang),
            ("filter", joined(self.filters, "|")),
            ("bias", joined(self.biases, "|")),
            ("format", self.format),
        )


class GeocodingService(Service):
    """Forward, reverse and autocomplete geocoding."""

    async def search(self, params: SearchParams) -> GeocodingResponse:
        return await self.client.execute_get(
            "/v1/geocode/search", params.to_query(), GeocodingResponse
        )

    async def reverse(self, params: ReverseParams) -> GeocodingResponse:
        return await self.client.execute_get(
            "/v1/geocode/reverse", params.to_query(), GeocodingResponse
        )

    async def autocomplete(self, params: AutocompleteParams) -> GeocodingResponse:
        return await self.client.execute_get(
            "/v1/geocode/autocomplete", params.to_query(), GeocodingResponse
        )
