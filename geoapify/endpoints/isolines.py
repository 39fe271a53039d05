from typing import List, Optional

from pydantic import model_validator

from geoapify.models import (
    FeatureCollection,
    IsolineType,
    RouteType,
    TrafficModel,
    TravelMode,
    Units,
)

from .base import Params, Service, fixed, joined, positive, query


class IsolineParams(Params):
    """Reachability area around a point, or a previously computed isoline by id."""

    lat: Optional[float] = None
    lon: Optional[float] = None
    id: Optional[str] = None
    type: Optional[IsolineType] = None
    mode: Optional[TravelMode] = None
    ranges: List[int] = []
    avoid: List[str] = []
    traffic: Optional[TrafficModel] = None
    route_type: Optional[RouteType] = None
    max_speed: Optional[int] = None
    units: Optional[Units] = None

    @model_validator(mode="after")
    def _check_origin(self) -> "IsolineParams":
        if not self.id and (self.lat is None or self.lon is None):
            raise ValueError("either id or both lat and lon are required")
        return self

    def to_query(self):
        if self.id:
            origin = [("id", self.id)]
        else:
            origin = [("lat", fixed(self.lat)), ("lon", fixed(self.lon))]
        return origin + query(
            ("type", self.type),
            ("mode", self.mode),
            ("range", joined(self.ranges, ",")),
            ("avoid", joined(self.avoid, "|")),
            ("traffic", self.traffic),
            ("route_type", self.route_type),
            ("max_speed", positive(self.max_speed)),
            ("units", self.units),
        )


class IsolinesService(Service):
    async def isoline(self, params: IsolineParams) -> FeatureCollection:
        return await self.client.execute_get(
            "/v1/isoline", params.to_query(), FeatureCollection
        )
