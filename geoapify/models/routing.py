from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class StepInstruction(BaseModel):
    text: Optional[str] = None
    type: Optional[str] = None


class LegStep(BaseModel):
    distance: float = 0.0
    time: float = 0.0
    from_index: int = 0
    to_index: int = 0
    toll: bool = False
    ferry: bool = False
    tunnel: bool = False
    bridge: bool = False
    roundabout: bool = False
    speed: Optional[float] = None
    speed_limit: Optional[float] = None
    truck_limit: Optional[float] = None
    surface: Optional[str] = None
    lane_count: Optional[int] = None
    road_class: Optional[str] = None
    name: Optional[str] = None
    instruction: Optional[StepInstruction] = None


class RouteLeg(BaseModel):
    distance: float = 0.0
    time: float = 0.0
    steps: List[LegStep] = Field(default_factory=list)
    elevation: Optional[List[float]] = None
    elevation_range: Optional[List[List[float]]] = None
    country_code: Optional[List[str]] = None


class Route(BaseModel):
    distance: float = 0.0
    distance_units: Optional[str] = None
    time: float = Field(0.0, description="Travel time in seconds.")
    toll: bool = False
    ferry: bool = False
    legs: List[RouteLeg] = Field(default_factory=list)


class RoutingResponse(BaseModel):
    results: List[Route] = Field(default_factory=list)
    properties: Optional[Dict[str, Any]] = None


class RouteMatrixWaypoint(BaseModel):
    original_location: List[float] = Field(default_factory=list)
    location: List[float] = Field(default_factory=list)


class RouteMatrixEntry(BaseModel):
    distance: float = 0.0
    time: float = 0.0
    source_index: int = 0
    target_index: int = 0


class RouteMatrixResponse(BaseModel):
    sources: List[RouteMatrixWaypoint] = Field(default_factory=list)
    targets: List[RouteMatrixWaypoint] = Field(default_factory=list)
    sources_to_targets: List[List[RouteMatrixEntry]] = Field(
        default_factory=list,
        description="One row per source, one entry per target.",
    )
