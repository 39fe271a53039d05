from typing import List, Optional

from geoapify.models import (
    Location,
    RouteMatrixResponse,
    RouteType,
    TrafficModel,
    TravelMode,
    Units,
)

from .base import Params, Service, body


class Avoid(Params):
    """Something to route around, e.g. type="tolls" or type="locations"."""

    type: str
    values: List[Location] = []

    def to_json(self) -> dict:
        data = {"type": self.type}
        if self.values:
            data["values"] = [{"lat": v.lat, "lon": v.lon} for v in self.values]
        return data


class RouteMatrixParams(Params):
    sources: List[Location]
    targets: List[Location]
    mode: TravelMode = TravelMode.DRIVE
    avoid: List[Avoid] = []
    traffic: Optional[TrafficModel] = None
    type: Optional[RouteType] = None
    max_speed: Optional[int] = None
    units: Optional[Units] = None

    def to_json(self) -> dict:
        return {
            "mode": self.mode,
            "sources": [{"location": loc.lon_lat()} for loc in self.sources],
            "targets": [{"location": loc.lon_lat()} for loc in self.targets],
            **body(
                avoid=[a.to_json() for a in self.avoid],
                traffic=self.traffic,
                type=self.type,
                max_speed=self.max_speed,
                units=self.units,
            ),
        }


class RouteMatrixService(Service):
    async def calculate(self, params: RouteMatrixParams) -> RouteMatrixResponse:
        """Travel time and distance from every source to every target."""
        return await self.client.execute_post(
            "/v1/routematrix", None, params.to_json(), RouteMatrixResponse
        )
