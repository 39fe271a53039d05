from typing import List, Optional

from geoapify.models import FeatureCollection, Format, GeometryType

from .base import Params, Service, joined, positive, query, shortest


class PostcodeParams(Params):
    lat: float
    lon: float
    limit: Optional[int] = None
    filters: List[str] = []
    biases: List[str] = []
    lang: Optional[str] = None
    format: Optional[Format] = None
    geometry: Optional[GeometryType] = None

    def to_query(self):
        return query(
            ("lat", shortest(self.lat)),
            ("lon", shortest(self.lon)),
            ("limit", positive(self.limit)),
            ("filter", joined(self.filters, "|")),
            ("bias", joined(self.biases, "|")),
            ("lang", self.lang),
            ("format", self.format),
            ("geometry", self.geometry),
        )


class PostcodeService(Service):
    async def search(self, params: PostcodeParams) -> FeatureCollection:
        """Postcodes around a point."""
        return await self.client.execute_get(
            "/v1/geocode/postcode", params.to_query(), FeatureCollection
        )
