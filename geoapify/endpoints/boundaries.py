from typing import Optional

from pydantic import model_validator

from geoapify.models import BoundaryType, FeatureCollection, GeometryType

from .base import Params, Service, positive, query, shortest


class PartOfParams(Params):
    """Boundaries containing a point (lat/lon) or a place (id)."""

    lat: Optional[float] = None
    lon: Optional[float] = None
    id: Optional[str] = None
    boundary: Optional[BoundaryType] = None
    geometry: Optional[GeometryType] = None
    lang: Optional[str] = None

    @model_validator(mode="after")
    def _check_place(self) -> "PartOfParams":
        if not self.id and (self.lat is None or self.lon is None):
            raise ValueError("either id or both lat and lon are required")
        return self

    def to_query(self):
        has_coords = self.lat is not None and self.lon is not None
        return query(
            ("lat", shortest(self.lat) if has_coords else None),
            ("lon", shortest(self.lon) if has_coords else None),
            ("id", self.id),
            ("boundary", self.boundary),
            ("geometry", self.geometry),
            ("lang", self.lang),
        )


class ConsistsOfParams(Params):
    """Sub-boundaries of the place `id`."""

    id: str
    boundary: Optional[BoundaryType] = None
    geometry: Optional[GeometryType] = None
    lang: Optional[str] = None
    sublevel: Optional[int] = None

    def to_query(self):
        return [("id", self.id)] + query(
            ("boundary", self.boundary),
            ("geometry", self.geometry),
            ("lang", self.lang),
            ("sublevel", positive(self.sublevel)),
        )


class BoundariesService(Service):
    async def part_of(self, params: PartOfParams) -> FeatureCollection:
        return await self.client.execute_get(
            "/v1/boundaries/part-of", params.to_query(), FeatureCollection
        )

    async def consists_of(self, params: ConsistsOfParams) -> FeatureCollection:
        return await self.client.execute_get(
            "/v1/boundaries/consists-of", params.to_query(), FeatureCollection
        )
