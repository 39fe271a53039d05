from typing import List, Optional

from pydantic import model_validator

from geoapify.models import FeatureCollection

from .base import Params, Service, fixed, joined, query


class PlaceDetailsParams(Params):
    """Look a place up by its place_id or by coordinates."""

    place_id: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    features: List[str] = []
    lang: Optional[str] = None

    @model_validator(mode="after")
    def _check_place(self) -> "PlaceDetailsParams":
        if not self.place_id and (self.lat is None or self.lon is None):
            raise ValueError("either place_id or both lat and lon are required")
        return self

    def to_query(self):
        has_coords = self.lat is not None and self.lon is not None
        return query(
            ("id", self.place_id),
            ("lat", fixed(self.lat) if has_coords else None),
            ("lon", fixed(self.lon) if has_coords else None),
            ("features", joined(self.features, ",")),
            ("lang", self.lang),
        )


class PlaceDetailsService(Service):
    async def details(self, params: PlaceDetailsParams) -> FeatureCollection:
        return await self.client.execute_get(
            "/v2/place-details", params.to_query(), FeatureCollection
        )
