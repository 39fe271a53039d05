from typing import List, Optional

from geoapify.models import FeatureCollection

from .base import Params, Service, joined, positive, query


class PlacesParams(Params):
    categories: List[str]
    conditions: List[str] = []
    filters: List[str] = []
    biases: List[str] = []
    limit: Optional[int] = None
    offset: Optional[int] = None
    lang: Optional[str] = None
    name: Optional[str] = None

    def to_query(self):
        return query(
            ("categories", joined(self.categories, ",")),
            ("conditions", joined(self.conditions, ",")),
            ("filter", joined(self.filters, "|")),
            ("bias", joined(self.biases, "|")),
            ("limit", positive(self.limit)),
            ("offset", positive(self.offset)),
            ("lang", self.lang),
            ("name", self.name),
        )


class PlacesService(Service):
    async def search(self, params: PlacesParams) -> FeatureCollection:
        """Points of interest in the given categories."""
        return await self.client.execute_get(
            "/v2/places", params.to_query(), FeatureCollection
        )
