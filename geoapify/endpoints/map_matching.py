from typing import List, Optional, Tuple

from geoapify.models import FeatureCollection, TravelMode

from .base import Params, Service


class MapMatchingWaypoint(Params):
    """A GPS fix: [lon, lat], plus optional ISO timestamp and bearing."""

    location: Tuple[float, float]
    timestamp: Optional[str] = None
    bearing: Optional[float] = None

    def to_json(self) -> dict:
        data = {"location": list(self.location)}
        if self.timestamp:
            data["timestamp"] = self.timestamp
        if self.bearing is not None:
            data["bearing"] = self.bearing
        return data


class MapMatchingParams(Params):
    mode: TravelMode
    waypoints: List[MapMatchingWaypoint]

    def to_json(self) -> dict:
        return {
            "mode": self.mode,
            "waypoints": [wp.to_json() for wp in self.waypoints],
        }


class MapMatchingService(Service):
    async def match(self, params: MapMatchingParams) -> FeatureCollection:
        """Snaps a GPS track onto the road network."""
        return await self.client.execute_post(
            "/v1/mapmatching", None, params.to_json(), FeatureCollection
        )
