from typing import List, Optional, Tuple

from geoapify.models import (
    RoutePlannerResponse,
    RouteType,
    TrafficModel,
    TravelMode,
    Units,
)

from .base import Params, Service, body
from .route_matrix import Avoid

# [start, end] in seconds from the start of the plan
TimeWindow = Tuple[int, int]
# [lon, lat]
Coordinates = Tuple[float, float]


class _Payload(Params):
    """Nested body object; unset fields are left out of the JSON."""

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True, exclude_defaults=True)


class PlannerBreak(_Payload):
    duration: int
    time_windows: List[TimeWindow] = []


class PlannerAgent(_Payload):
    id: Optional[str] = None
    description: Optional[str] = None
    start_location: Optional[Coordinates] = None
    start_location_index: Optional[int] = None
    end_location: Optional[Coordinates] = None
    end_location_index: Optional[int] = None
    pickup_capacity: Optional[int] = None
    delivery_capacity: Optional[int] = None
    capabilities: List[str] = []
    time_windows: List[TimeWindow] = []
    breaks: List[PlannerBreak] = []


class PlannerJob(_Payload):
    id: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Coordinates] = None
    location_index: Optional[int] = None
    priority: Optional[int] = None
    duration: Optional[int] = None
    pickup_amount: Optional[int] = None
    delivery_amount: Optional[int] = None
    requirements: List[str] = []
    time_windows: List[TimeWindow] = []


class PlannerShipmentStop(_Payload):
    location: Optional[Coordinates] = None
    location_index: Optional[int] = None
    duration: Optional[int] = None
    time_windows: List[TimeWindow] = []


class PlannerShipment(_Payload):
    id: str
    pickup: PlannerShipmentStop
    delivery: PlannerShipmentStop
    requirements: List[str] = []
    priority: Optional[int] = None
    description: Optional[str] = None
    amount: Optional[int] = None


class PlannerLocation(_Payload):
    id: Optional[str] = None
    location: Coordinates


class RoutePlannerParams(Params):
    mode: TravelMode = TravelMode.DRIVE
    agents: List[PlannerAgent] = []
    jobs: List[PlannerJob] = []
    shipments: List[PlannerShipment] = []
    locations: List[PlannerLocation] = []
    avoid: List[Avoid] = []
    traffic: Optional[TrafficModel] = None
    type: Optional[RouteType] = None
    max_speed: Optional[int] = None
    units: Optional[Units] = None

    def to_json(self) -> dict:
        return {
            "mode": self.mode,
            **body(
                agents=[a.to_json() for a in self.agents],
                jobs=[j.to_json() for j in self.jobs],
                shipments=[s.to_json() for s in self.shipments],
                locations=[loc.to_json() for loc in self.locations],
                avoid=[a.to_json() for a in self.avoid],
                traffic=self.traffic,
                type=self.type,
                max_speed=self.max_speed,
                units=self.units,
            ),
        }


class RoutePlannerService(Service):
    async def plan(self, params: RoutePlannerParams) -> RoutePlannerResponse:
        """Assigns jobs and shipments to agents and orders their stops."""
        return await self.client.execute_post(
            "/v1/routeplanner", None, params.to_json(), RoutePlannerResponse
        )
