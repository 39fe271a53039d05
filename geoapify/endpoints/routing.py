from typing import List, Optional

from geoapify.models import (
    Format,
    Location,
    RouteDetail,
    RouteType,
    RoutingResponse,
    TrafficModel,
    TravelMode,
    Units,
)

from .base import Params, Service, joined, positive, query, shortest


class RoutingParams(Params):
    waypoints: List[Location]
    mode: Optional[TravelMode] = None
    type: Optional[RouteType] = None
    units: Optional[Units] = None
    lang: Optional[str] = None
    avoid: List[str] = []
    details: List[RouteDetail] = []
    traffic: Optional[TrafficModel] = None
    max_speed: Optional[int] = None
    format: Optional[Format] = None

    def to_query(self):
        waypoints = "|".join(
            f"{shortest(wp.lat)},{shortest(wp.lon)}" for wp in self.waypoints
        )
        return [("waypoints", waypoints)] + query(
            ("mode", self.mode),
            ("type", self.type),
            ("units", self.units),
            ("lang", self.lang),
            ("avoid", joined(self.avoid, "|")),
            ("details", joined(self.details, ",")),
            ("traffic", self.traffic),
            ("max_speed", positive(self.max_speed)),
            ("format", self.format),
        )


class RoutingService(Service):
    async def route(self, params: RoutingParams) -> RoutingResponse:
        """Routes through the waypoints in order."""
        return await self.client.execute_get(
            "/v1/routing", params.to_query(), RoutingResponse
        )
